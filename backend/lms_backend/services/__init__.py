"""Service layer helpers for the admin API."""

from .categories import create_category, list_categories
from .courses import get_course_by_id
from .documents import extract_text
from .stats import get_stats
from .users import (
    find_user_by_external_id,
    get_my_stats,
    get_user_detail,
    list_admins,
    list_user_emails,
    list_users,
    sync_user,
    update_user_role,
)

__all__ = [
    "create_category",
    "extract_text",
    "find_user_by_external_id",
    "get_course_by_id",
    "get_my_stats",
    "get_stats",
    "get_user_detail",
    "list_admins",
    "list_categories",
    "list_user_emails",
    "list_users",
    "sync_user",
    "update_user_role",
]
