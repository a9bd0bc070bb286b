from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import UserRole


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)


class UserRead(ORMModel):
    id: int
    external_id: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


class UserEmailRead(ORMModel):
    id: int
    email: str


class UserRoleUpdate(BaseModel):
    role: Optional[str] = None


class CourseTitleRead(ORMModel):
    title: str


class UserEnrollmentRead(ORMModel):
    id: int
    course_id: int
    progress: int
    created_at: datetime
    course: CourseTitleRead


class UserCounts(BaseModel):
    enrollments: int


class UserDetailRead(UserRead):
    enrollments: List[UserEnrollmentRead]
    counts: UserCounts = Field(alias="_count")


class CategoryCreate(BaseModel):
    name: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None


class CategoryRead(ORMModel):
    id: int
    name: str
    icon: str
    color: str


class StatsRead(ORMModel):
    courses_count: int
    students_count: int
    enrollments_count: int


class MyStatsRead(ORMModel):
    total_enrollments: int
    courses_in_progress: int
    certificates_earned: int
    hours_spent: int
    xp_points: int


class LessonRead(ORMModel):
    id: int
    title: str
    content_type: str
    content: str
    duration: Optional[int]
    order: int


class ModuleRead(ORMModel):
    id: int
    title: str
    order: int
    lessons: List[LessonRead]


class CourseCounts(BaseModel):
    enrollments: int


class CourseRead(ORMModel):
    id: int
    title: str
    slug: Optional[str]
    description: Optional[str]
    short_description: Optional[str]
    full_description: Optional[str]
    price: float
    level: Optional[str]
    language: Optional[str]
    image_url: Optional[str]
    published: bool
    visibility: str
    enrollment_type: str
    certificate_enabled: bool
    completion_rule: Optional[str]
    what_you_learn: List[str]
    category_id: Optional[int]
    created_at: datetime
    updated_at: datetime


class CourseDetailRead(CourseRead):
    category: Optional[CategoryRead]
    modules: List[ModuleRead]
    counts: CourseCounts = Field(alias="_count")


class DocumentText(BaseModel):
    text: str
