from typing import Optional

from fastapi import Cookie, Depends, Header, Request
from sqlmodel import Session

from ..database import get_session
from ..errors import Forbidden, Unauthorized
from ..identity import Identity, resolve_identity
from ..logging_utils import OperationBoundary
from ..models import User, UserRole
from ..services import find_user_by_external_id

SESSION_COOKIE = "__session"


def get_session_token(
    authorization: Optional[str] = Header(default=None),
    session_cookie: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
) -> Optional[str]:
    """Bearer header wins; browser pages fall back to the session cookie."""
    if authorization:
        scheme, _, value = authorization.partition(" ")
        if scheme.lower() == "bearer" and value.strip():
            return value.strip()
        return None
    return session_cookie or None


def get_identity(request: Request, token: Optional[str] = Depends(get_session_token)) -> Identity:
    """Guard for authenticated-only operations: any resolvable identity passes."""
    identity = resolve_identity(token, request.app.state.settings)
    if identity is None:
        raise Unauthorized()
    return identity


def require_admin(
    identity: Identity = Depends(get_identity),
    session: Session = Depends(get_session),
) -> User:
    """Guard for admin-only operations; runs before the handler touches any target data."""
    with OperationBoundary("AUTH_GUARD"):
        user = find_user_by_external_id(session, identity.subject)
    if user is None or user.role != UserRole.ADMIN:
        raise Forbidden()
    return user
