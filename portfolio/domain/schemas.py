"""
Pydantic schemas for every content entity.

Each entity has three shapes:

* ``<Entity>In``: the create body, with the required fields enforced.
* ``<Entity>Patch``: the update body, every field optional.
* ``<Entity>``: the stored record (create fields plus ``id`` and ``createdAt``).

Field names are snake_case in Python and camelCase on the wire and on disk.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, create_model, model_validator
from pydantic.alias_generators import to_camel

EducationStatus = Literal["completed", "in progress", "to begin", "dropped off"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class StoredRecord(CamelModel):
    id: int
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data):
        """Older data files store null for flags and counters; read those as the field default."""
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, info in cls.model_fields.items():
            if info.is_required() or info.default is None:
                continue
            defaulted.update({name, info.alias or name})
        return {key: value for key, value in data.items() if value is not None or key not in defaulted}


def partial_model(model: type[BaseModel], name: str) -> type[BaseModel]:
    """Build an update schema where every field of ``model`` is optional."""
    fields = {
        field_name: (Optional[info.annotation], None)
        for field_name, info in model.model_fields.items()
    }
    return create_model(name, __base__=CamelModel, **fields)


# -------------------------- blogs --------------------------
class BlogIn(CamelModel):
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    published_at: datetime
    featured: bool = False


class Blog(StoredRecord, BlogIn):
    sort_order: Optional[int] = None


# -------------------------- linkedin posts --------------------------
class LinkedinPostIn(CamelModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    post_url: str = Field(min_length=1)
    image_url: Optional[str] = None
    likes: int = 0
    comments: int = 0
    featured: bool = False
    published_at: datetime


class LinkedinPost(StoredRecord, LinkedinPostIn):
    sort_order: Optional[int] = None


# -------------------------- skills --------------------------
class SkillIn(CamelModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    logo_url: Optional[str] = None
    featured: bool = False


class Skill(StoredRecord, SkillIn):
    sort_order: Optional[int] = None


# -------------------------- certifications --------------------------
class CertificationIn(CamelModel):
    title: str = Field(min_length=1)
    issuer: str = Field(min_length=1)
    year: str = Field(min_length=1)
    image_url: Optional[str] = None
    description: Optional[str] = None
    featured: bool = False


class Certification(StoredRecord, CertificationIn):
    sort_order: Optional[int] = None


# -------------------------- education --------------------------
class EducationIn(CamelModel):
    course_name: str = Field(min_length=1)
    college_name: str = Field(min_length=1)
    start_month: str = Field(min_length=1)
    start_year: int
    end_month: str = Field(min_length=1)
    end_year: int
    status: EducationStatus


class Education(StoredRecord, EducationIn):
    sort_order: Optional[int] = None


# -------------------------- selected projects --------------------------
class SelectedProjectIn(CamelModel):
    github_repo_id: int
    name: str = Field(min_length=1)
    description: Optional[str] = None
    html_url: str = Field(min_length=1)
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    is_selected: bool = True
    custom_description: Optional[str] = None
    image_url: Optional[str] = None
    featured: bool = False
    display_order: Optional[int] = None


class SelectedProject(StoredRecord, SelectedProjectIn):
    display_order: int = 0


# -------------------------- projects (GitHub overrides) --------------------------
class ProjectIn(CamelModel):
    github_id: int
    name: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    category: Optional[str] = None
    custom_description: Optional[str] = None
    featured: bool = False


class Project(StoredRecord, ProjectIn):
    pass


# -------------------------- contact --------------------------
class ContactMessageIn(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactMessage(StoredRecord, ContactMessageIn):
    pass


class ContactInfoIn(CamelModel):
    email: str = Field(min_length=1)
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    phone_number: Optional[str] = None
    location: Optional[str] = None


class ContactInfo(StoredRecord, ContactInfoIn):
    pass


BlogPatch = partial_model(BlogIn, "BlogPatch")
LinkedinPostPatch = partial_model(LinkedinPostIn, "LinkedinPostPatch")
SkillPatch = partial_model(SkillIn, "SkillPatch")
CertificationPatch = partial_model(CertificationIn, "CertificationPatch")
EducationPatch = partial_model(EducationIn, "EducationPatch")
SelectedProjectPatch = partial_model(SelectedProjectIn, "SelectedProjectPatch")
ProjectPatch = partial_model(ProjectIn, "ProjectPatch")
ContactMessagePatch = partial_model(ContactMessageIn, "ContactMessagePatch")
ContactInfoPatch = partial_model(ContactInfoIn, "ContactInfoPatch")


# -------------------------- requests --------------------------
class AdminLogin(CamelModel):
    password: str = ""


class ReorderRequest(CamelModel):
    """Either the full id list in the new order, or a single drag move."""

    reordered_ids: Optional[list[int]] = None
    source_index: Optional[int] = None
    destination_index: Optional[int] = None
