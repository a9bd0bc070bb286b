from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from sqlalchemy import func
from sqlmodel import Session, select

from .. import schemas
from ..errors import NotFound
from ..logging_utils import OperationBoundary
from ..models import Category, Course, Enrollment, Lesson, Module


def get_course_by_id(session: Session, course_id: int) -> schemas.CourseDetailRead:
    """Return the full editable representation of a course."""
    with OperationBoundary("COURSE_GET"):
        course = session.get(Course, course_id)
        if not course:
            raise NotFound("Course not found")

        modules = session.exec(
            select(Module).where(Module.course_id == course_id).order_by(Module.order, Module.id)
        ).all()
        lessons_by_module: Dict[int, List[Lesson]] = defaultdict(list)
        if modules:
            lessons = session.exec(
                select(Lesson)
                .where(Lesson.module_id.in_([module.id for module in modules]))
                .order_by(Lesson.order, Lesson.id)
            ).all()
            for lesson in lessons:
                lessons_by_module[lesson.module_id].append(lesson)

        category = session.get(Category, course.category_id) if course.category_id else None
        enrollment_count = session.exec(
            select(func.count(Enrollment.id)).where(Enrollment.course_id == course_id)
        ).one()

        return schemas.CourseDetailRead(
            **schemas.CourseRead.model_validate(course).model_dump(),
            category=schemas.CategoryRead.model_validate(category) if category else None,
            modules=[
                schemas.ModuleRead(
                    id=module.id,
                    title=module.title,
                    order=module.order,
                    lessons=[schemas.LessonRead.model_validate(lesson) for lesson in lessons_by_module[module.id]],
                )
                for module in modules
            ],
            counts=schemas.CourseCounts(enrollments=enrollment_count),
        )
