import logging
from time import perf_counter
from typing import Any, Dict, Optional

from .errors import InternalError, ServiceError

logger = logging.getLogger("lms_backend")


def log_event(operation: str, message: str, **extra: Any) -> None:
    payload: Dict[str, Any] = {"operation": operation, "message": message}
    payload.update(extra)
    logger.info(payload)


class OperationBoundary:
    """Context manager wrapping one store operation.

    Service errors pass through untouched. Anything else is logged under the
    operation tag and re-raised as a generic ``InternalError``.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        self._start: Optional[float] = None

    def __enter__(self) -> "OperationBoundary":
        self._start = perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        elapsed = None
        if self._start is not None:
            elapsed = round((perf_counter() - self._start) * 1000, 2)
        if exc is None:
            log_event(self.operation, "done", elapsed_ms=elapsed)
            return False
        if isinstance(exc, ServiceError):
            log_event(self.operation, "rejected", elapsed_ms=elapsed, code=exc.code)
            return False
        logger.error("[%s] %s", self.operation, exc, exc_info=(exc_type, exc, tb))
        raise InternalError() from exc
