"""Typed service errors.

Every error carries a stable ``code``, a caller-safe ``message`` and the HTTP
status it maps to. Handlers in ``api.error_handlers`` render them as
``{"error": {"code": ..., "message": ...}}``.
"""

from __future__ import annotations

from typing import Any, Dict


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    code = "INTERNAL_ERROR"
    http_status = 500
    default_message = "Internal Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> Dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class Unauthorized(ServiceError):
    code = "UNAUTHORIZED"
    http_status = 401
    default_message = "Unauthorized"


class Forbidden(ServiceError):
    code = "FORBIDDEN"
    http_status = 403
    default_message = "Forbidden"


class BadRequest(ServiceError):
    code = "BAD_REQUEST"
    http_status = 400
    default_message = "Bad Request"


class NotFound(ServiceError):
    code = "NOT_FOUND"
    http_status = 404
    default_message = "Not Found"


class InternalError(ServiceError):
    pass


class DocumentParseError(InternalError):
    code = "DOCUMENT_PARSE_FAILED"
    default_message = "Failed to parse document"
