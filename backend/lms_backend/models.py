from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from sqlalchemy import JSON
from sqlmodel import Column, Field, Relationship, SQLModel


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


DEFAULT_CATEGORY_ICON = "Layout"
DEFAULT_CATEGORY_COLOR = "#000000"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    external_id: str = Field(index=True, unique=True)
    email: str = Field(default="")
    role: UserRole = Field(default=UserRole.USER, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    enrollments: List["Enrollment"] = Relationship(back_populates="user")


class Category(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    icon: str = Field(default=DEFAULT_CATEGORY_ICON)
    color: str = Field(default=DEFAULT_CATEGORY_COLOR)

    courses: List["Course"] = Relationship(back_populates="category")


class Course(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    slug: Optional[str] = Field(default=None, index=True)
    description: Optional[str] = None
    short_description: Optional[str] = None
    full_description: Optional[str] = None
    price: float = Field(default=0.0)
    level: Optional[str] = None
    language: Optional[str] = None
    image_url: Optional[str] = None
    published: bool = Field(default=False)
    visibility: str = Field(default="private")
    enrollment_type: str = Field(default="open")
    certificate_enabled: bool = Field(default=False)
    completion_rule: Optional[str] = None
    what_you_learn: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False, default=[])
    )
    category_id: Optional[int] = Field(default=None, foreign_key="category.id", index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    category: Optional[Category] = Relationship(back_populates="courses")
    modules: List["Module"] = Relationship(back_populates="course")
    enrollments: List["Enrollment"] = Relationship(back_populates="course")


class Module(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    course_id: int = Field(foreign_key="course.id", index=True)
    title: str
    order: int = Field(default=1)

    course: Optional[Course] = Relationship(back_populates="modules")
    lessons: List["Lesson"] = Relationship(back_populates="module")


class Lesson(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    module_id: int = Field(foreign_key="module.id", index=True)
    title: str
    content_type: str = Field(default="text")
    content: str = Field(default="")
    duration: Optional[int] = None
    order: int = Field(default=1)

    module: Optional[Module] = Relationship(back_populates="lessons")


class Enrollment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    course_id: int = Field(foreign_key="course.id", index=True)
    progress: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)

    user: Optional[User] = Relationship(back_populates="enrollments")
    course: Optional[Course] = Relationship(back_populates="enrollments")
