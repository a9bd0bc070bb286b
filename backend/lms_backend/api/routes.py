import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from .. import schemas
from ..database import get_session
from ..errors import BadRequest
from ..identity import Identity
from ..models import User
from ..services import (
    create_category,
    extract_text,
    get_course_by_id,
    get_my_stats,
    get_stats,
    get_user_detail,
    list_admins,
    list_categories,
    list_user_emails,
    list_users,
    sync_user,
    update_user_role,
)
from .deps import get_identity, require_admin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/admin/admins", response_model=List[schemas.UserRead])
def list_admins_route(_: Identity = Depends(get_identity), session=Depends(get_session)):
    return list_admins(session)


# Open to any authenticated caller; role changes below are the admin-only path.
@router.get("/admin/users", response_model=List[schemas.UserRead])
def list_users_route(_: Identity = Depends(get_identity), session=Depends(get_session)):
    return list_users(session)


@router.get("/admin/users/{user_id}", response_model=schemas.UserDetailRead)
def read_user_route(user_id: int, _: User = Depends(require_admin), session=Depends(get_session)):
    return get_user_detail(session, user_id)


@router.patch("/admin/users/{user_id}", response_model=schemas.UserRead)
def update_user_role_route(
    user_id: int,
    payload: schemas.UserRoleUpdate,
    admin: User = Depends(require_admin),
    session=Depends(get_session),
):
    user = update_user_role(session, user_id, payload.role)
    logger.info("User %s role set to %s by %s", user.id, user.role.value, admin.id)
    return user


@router.get("/users", response_model=List[schemas.UserEmailRead])
def list_user_emails_route(_: Identity = Depends(get_identity), session=Depends(get_session)):
    return list_user_emails(session)


@router.post("/user/sync", response_model=schemas.UserRead)
def sync_user_route(identity: Identity = Depends(get_identity), session=Depends(get_session)):
    return sync_user(session, identity)


@router.get("/my-stats", response_model=schemas.MyStatsRead)
def my_stats_route(identity: Identity = Depends(get_identity), session=Depends(get_session)):
    return get_my_stats(session, identity)


@router.get("/categories", response_model=List[schemas.CategoryRead])
def list_categories_route(session=Depends(get_session)):
    return list_categories(session)


@router.post("/categories", response_model=schemas.CategoryRead)
def create_category_route(payload: schemas.CategoryCreate, session=Depends(get_session)):
    return create_category(session, payload.name, icon=payload.icon, color=payload.color)


@router.get("/stats", response_model=schemas.StatsRead)
def stats_route(session=Depends(get_session)):
    return get_stats(session)


@router.get("/courses/{course_id}", response_model=schemas.CourseDetailRead)
def read_course_route(course_id: int, session=Depends(get_session)):
    return get_course_by_id(session, course_id)


@router.post("/utils/parse-document", response_model=schemas.DocumentText)
def parse_document_route(request: Request, file: Optional[UploadFile] = File(default=None)):
    if file is None:
        raise BadRequest("No file provided")
    limit = request.app.state.settings.max_upload_bytes
    data = file.file.read(limit + 1)
    if not data:
        raise BadRequest("No file provided")
    if len(data) > limit:
        raise BadRequest("File too large")
    return schemas.DocumentText(text=extract_text(data))
