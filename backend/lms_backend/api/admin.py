from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.templating import Jinja2Templates

from ..database import get_session
from ..errors import NotFound
from ..models import User
from ..services import get_course_by_id, list_categories
from .deps import require_admin

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/courses/{course_id}/edit")
def edit_course_page(
    course_id: int,
    request: Request,
    admin: User = Depends(require_admin),
    session=Depends(get_session),
):
    try:
        course = get_course_by_id(session, course_id)
    except NotFound:
        return templates.TemplateResponse(
            request,
            "admin/course_not_found.html",
            {"course_id": course_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return templates.TemplateResponse(
        request,
        "admin/course_edit.html",
        {
            "course": course,
            "categories": list_categories(session),
            "admin": admin,
        },
    )
