"""Registry describing every content collection the store knows about."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from pydantic import BaseModel

from . import schemas


def _newest_first(records: Sequence) -> list:
    return sorted(records, key=lambda r: r.published_at.timestamp(), reverse=True)


@dataclass(frozen=True)
class Collection:
    """How one entity type is named, validated, stored and ordered."""

    name: str
    label: str
    filename: str
    record: type[BaseModel]
    create: type[BaseModel]
    patch: type[BaseModel]
    has_featured: bool = True
    order_field: str = "sort_order"
    default_sort: Optional[Callable[[Sequence], list]] = None
    public_crud: bool = True


COLLECTIONS: dict[str, Collection] = {
    c.name: c
    for c in (
        Collection(
            name="blogs",
            label="Blog",
            filename="blogs.json",
            record=schemas.Blog,
            create=schemas.BlogIn,
            patch=schemas.BlogPatch,
            default_sort=_newest_first,
        ),
        Collection(
            name="linkedin-posts",
            label="LinkedIn post",
            filename="linkedinPosts.json",
            record=schemas.LinkedinPost,
            create=schemas.LinkedinPostIn,
            patch=schemas.LinkedinPostPatch,
            default_sort=_newest_first,
        ),
        Collection(
            name="skills",
            label="Skill",
            filename="skills.json",
            record=schemas.Skill,
            create=schemas.SkillIn,
            patch=schemas.SkillPatch,
        ),
        Collection(
            name="certifications",
            label="Certification",
            filename="certifications.json",
            record=schemas.Certification,
            create=schemas.CertificationIn,
            patch=schemas.CertificationPatch,
        ),
        Collection(
            name="education",
            label="Education",
            filename="education.json",
            record=schemas.Education,
            create=schemas.EducationIn,
            patch=schemas.EducationPatch,
            has_featured=False,
        ),
        Collection(
            name="selected-projects",
            label="Selected project",
            filename="selectedProjects.json",
            record=schemas.SelectedProject,
            create=schemas.SelectedProjectIn,
            patch=schemas.SelectedProjectPatch,
            order_field="display_order",
        ),
        Collection(
            name="projects",
            label="Project",
            filename="projects.json",
            record=schemas.Project,
            create=schemas.ProjectIn,
            patch=schemas.ProjectPatch,
            order_field="",
            public_crud=False,
        ),
        Collection(
            name="contact-messages",
            label="Contact message",
            filename="contactMessages.json",
            record=schemas.ContactMessage,
            create=schemas.ContactMessageIn,
            patch=schemas.ContactMessagePatch,
            has_featured=False,
            order_field="",
            public_crud=False,
        ),
    )
}

CONTACT_INFO_FILE = "contactInfo.json"
CONTACT_INFO_ID = 1


def get_collection(name: str) -> Collection:
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise KeyError(f"Unknown collection: {name}") from None


def public_collections() -> list[Collection]:
    return [c for c in COLLECTIONS.values() if c.public_crud]
