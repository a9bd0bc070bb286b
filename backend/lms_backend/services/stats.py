from sqlalchemy import func
from sqlmodel import Session, select

from .. import schemas
from ..logging_utils import OperationBoundary
from ..models import Course, Enrollment, UserRole
from .users import count_users_with_role


def get_stats(session: Session) -> schemas.StatsRead:
    """Plain row counts only; revenue aggregation is not computed here."""
    with OperationBoundary("STATS_GET"):
        courses_count = session.exec(select(func.count(Course.id))).one()
        students_count = count_users_with_role(session, UserRole.USER)
        enrollments_count = session.exec(select(func.count(Enrollment.id))).one()
        return schemas.StatsRead(
            courses_count=courses_count,
            students_count=students_count,
            enrollments_count=enrollments_count,
        )
