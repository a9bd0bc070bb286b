from __future__ import annotations

from typing import List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .. import schemas
from ..errors import BadRequest, NotFound
from ..identity import Identity
from ..logging_utils import OperationBoundary
from ..models import Course, Enrollment, User, UserRole, utc_now

ADMIN_LISTING_LIMIT = 5


def _newest_first(statement):
    return statement.order_by(User.created_at.desc(), User.id.desc())


def find_user_by_external_id(session: Session, external_id: str) -> User | None:
    return session.exec(select(User).where(User.external_id == external_id)).first()


def list_users(session: Session) -> List[User]:
    with OperationBoundary("USERS_GET"):
        return list(session.exec(_newest_first(select(User))).all())


def list_user_emails(session: Session) -> List[schemas.UserEmailRead]:
    with OperationBoundary("USER_EMAILS_GET"):
        rows = session.exec(_newest_first(select(User.id, User.email))).all()
        return [schemas.UserEmailRead(id=row[0], email=row[1]) for row in rows]


def list_admins(session: Session, limit: int = ADMIN_LISTING_LIMIT) -> List[User]:
    limit = max(1, min(ADMIN_LISTING_LIMIT, int(limit)))
    with OperationBoundary("ADMINS_GET"):
        statement = _newest_first(select(User).where(User.role == UserRole.ADMIN)).limit(limit)
        return list(session.exec(statement).all())


def parse_role(value: object) -> UserRole:
    """Map a raw role value onto the closed role set."""
    try:
        return UserRole(value)
    except (TypeError, ValueError):
        raise BadRequest(f"Role must be one of: {', '.join(r.value for r in UserRole)}") from None


def update_user_role(session: Session, user_id: int, role: object) -> User:
    new_role = parse_role(role)
    with OperationBoundary("USER_PATCH"):
        user = session.get(User, user_id)
        if not user:
            raise NotFound("User not found")
        user.role = new_role
        user.updated_at = utc_now()
        session.add(user)
        session.commit()
        session.refresh(user)
        return user


def get_user_detail(session: Session, user_id: int) -> schemas.UserDetailRead:
    with OperationBoundary("USER_GET"):
        user = session.get(User, user_id)
        if not user:
            raise NotFound("User not found")
        rows = session.exec(
            select(Enrollment, Course.title)
            .join(Course, Course.id == Enrollment.course_id)
            .where(Enrollment.user_id == user_id)
            .order_by(Enrollment.created_at.desc(), Enrollment.id.desc())
        ).all()
        enrollments = [
            schemas.UserEnrollmentRead(
                id=enrollment.id,
                course_id=enrollment.course_id,
                progress=enrollment.progress,
                created_at=enrollment.created_at,
                course=schemas.CourseTitleRead(title=title),
            )
            for enrollment, title in rows
        ]
        return schemas.UserDetailRead(
            **schemas.UserRead.model_validate(user).model_dump(),
            enrollments=enrollments,
            counts=schemas.UserCounts(enrollments=len(enrollments)),
        )


def sync_user(session: Session, identity: Identity) -> User:
    """Create or refresh the directory record for the calling identity."""
    with OperationBoundary("USER_SYNC"):
        user = find_user_by_external_id(session, identity.subject)
        if user is None:
            user = User(external_id=identity.subject, email=identity.email)
            session.add(user)
            try:
                session.commit()
            except IntegrityError:
                # Another request inserted the same identity first.
                session.rollback()
                user = find_user_by_external_id(session, identity.subject)
                if user is None:
                    raise
            session.refresh(user)
            return user
        if identity.email and user.email != identity.email:
            user.email = identity.email
            user.updated_at = utc_now()
            session.add(user)
            session.commit()
            session.refresh(user)
        return user


def get_my_stats(session: Session, identity: Identity) -> schemas.MyStatsRead:
    with OperationBoundary("MY_STATS_GET"):
        user = find_user_by_external_id(session, identity.subject)
        if not user:
            raise NotFound("User not found in database")
        progress = session.exec(select(Enrollment.progress).where(Enrollment.user_id == user.id)).all()
        return schemas.MyStatsRead(
            total_enrollments=len(progress),
            courses_in_progress=sum(1 for value in progress if value < 100),
            certificates_earned=sum(1 for value in progress if value == 100),
            hours_spent=sum(value * 2 // 10 for value in progress),
            xp_points=sum(value * 100 for value in progress),
        )


def count_users_with_role(session: Session, role: UserRole) -> int:
    return session.exec(select(func.count(User.id)).where(User.role == role)).one()
