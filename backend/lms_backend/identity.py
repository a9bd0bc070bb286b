"""Identity collaborator: resolve an opaque session token to an external identity.

The identity provider issues signed JWTs whose ``sub`` claim is the stable
external user id and which must carry an ``exp`` claim. Anything that fails verification resolves to ``None``; the
guards in ``api.deps`` turn that into ``Unauthorized``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from jose import jwt
from jose.exceptions import JOSEError

from .config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    subject: str
    email: str = ""


def resolve_identity(token: Optional[str], settings: Settings) -> Optional[Identity]:
    if not token:
        return None
    options = {
        "verify_aud": False,
        "verify_iss": settings.auth_jwt_issuer is not None,
        "verify_exp": True,
        "require_exp": True,
    }
    try:
        claims = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=settings.auth_jwt_algorithms,
            issuer=settings.auth_jwt_issuer,
            options=options,
        )
    except JOSEError as exc:
        logger.info("Rejected session token: %s", exc.__class__.__name__)
        return None
    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    email = claims.get("email")
    return Identity(subject=subject, email=email if isinstance(email, str) else "")
