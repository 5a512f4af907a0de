"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.session import (
    CurrentUser,
    clear_session_cookie,
    get_auth_service,
    get_current_user,
    get_session_id,
    get_session_store,
    set_session_cookie,
)

__all__ = [
    "CurrentUser",
    "clear_session_cookie",
    "get_auth_service",
    "get_current_user",
    "get_session_id",
    "get_session_store",
    "set_session_cookie",
]
