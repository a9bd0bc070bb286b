from __future__ import annotations

from typing import List, Optional

from sqlmodel import Session, select

from ..errors import BadRequest
from ..logging_utils import OperationBoundary
from ..models import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON, Category


def list_categories(session: Session) -> List[Category]:
    with OperationBoundary("CATEGORIES_GET"):
        statement = select(Category).order_by(Category.name, Category.id)
        return list(session.exec(statement).all())


def create_category(
    session: Session,
    name: Optional[str],
    icon: Optional[str] = None,
    color: Optional[str] = None,
) -> Category:
    if not name or not name.strip():
        raise BadRequest("Name is required")

    with OperationBoundary("CATEGORIES_POST"):
        category = Category(
            name=name.strip(),
            icon=icon or DEFAULT_CATEGORY_ICON,
            color=color or DEFAULT_CATEGORY_COLOR,
        )
        session.add(category)
        session.commit()
        session.refresh(category)
        return category
