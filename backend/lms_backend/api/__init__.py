from .admin import router as admin_router
from .error_handlers import register_error_handlers
from .routes import router as api_router

__all__ = ["admin_router", "api_router", "register_error_handlers"]
