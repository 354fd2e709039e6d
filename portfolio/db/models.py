"""SQLAlchemy models mirroring the JSON collections."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    String,
    Text,
    func,
)

from .session import Base, get_engine


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    url = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    sort_order = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class LinkedinPost(Base):
    __tablename__ = "linkedin_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    post_url = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)
    likes = Column(Integer, default=0, nullable=False)
    comments = Column(Integer, default=0, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    published_at = Column(DateTime(timezone=True), nullable=False)
    sort_order = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False)
    logo_url = Column(Text, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    sort_order = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Certification(Base):
    __tablename__ = "certifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    issuer = Column(String(255), nullable=False)
    year = Column(String(16), nullable=False)
    image_url = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    sort_order = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Education(Base):
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, autoincrement=True)
    course_name = Column(Text, nullable=False)
    college_name = Column(Text, nullable=False)
    start_month = Column(String(32), nullable=False)
    start_year = Column(Integer, nullable=False)
    end_month = Column(String(32), nullable=False)
    end_year = Column(Integer, nullable=False)
    status = Column(String(32), nullable=False)
    sort_order = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class SelectedProject(Base):
    __tablename__ = "selected_projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    github_repo_id = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    html_url = Column(Text, nullable=False)
    language = Column(String(64), nullable=True)
    stargazers_count = Column(Integer, default=0, nullable=False)
    forks_count = Column(Integer, default=0, nullable=False)
    is_selected = Column(Boolean, default=True, nullable=False)
    custom_description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    github_id = Column(Integer, unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    video_url = Column(Text, nullable=True)
    category = Column(String(64), nullable=True)
    custom_description = Column(Text, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False)
    linkedin_url = Column(Text, nullable=True)
    github_url = Column(Text, nullable=True)
    phone_number = Column(String(64), nullable=True)
    location = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


MODELS = {
    "blogs": Blog,
    "linkedin-posts": LinkedinPost,
    "skills": Skill,
    "certifications": Certification,
    "education": Education,
    "selected-projects": SelectedProject,
    "projects": Project,
    "contact-messages": ContactMessage,
}


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())
