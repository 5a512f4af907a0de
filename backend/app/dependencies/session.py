"""
Session dependencies: store wiring, cookie handling and the current user.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Request, Response
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import get_settings
from app.core.exceptions import PersistenceError
from app.core.security import create_session_token, read_session_token
from app.database.connections import get_archive_db, get_redis_client
from app.schemas.auth import SessionUser
from app.services.auth_service import AuthService
from app.services.session_store import RedisSessionStore, SessionStore

logger = logging.getLogger(__name__)


async def get_session_store() -> SessionStore:
    """Dependency to get the Redis-backed session store."""
    redis = await get_redis_client()
    return RedisSessionStore(redis, get_settings().session_ttl_seconds)


async def get_auth_service(
    db: AsyncIOMotorDatabase = Depends(get_archive_db),
    sessions: SessionStore = Depends(get_session_store),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db, sessions)


def get_session_id(request: Request) -> Optional[str]:
    """Session id from the signed session cookie, if any."""
    token = request.cookies.get(get_settings().session_cookie_name)
    return read_session_token(token)


async def get_current_user(
    session_id: Annotated[Optional[str], Depends(get_session_id)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> Optional[SessionUser]:
    """
    The signed-in user, or None.
    
    An unreachable session store renders pages as signed out rather
    than failing them.
    """
    try:
        return await auth_service.get_session_user(session_id)
    except PersistenceError:
        logger.exception("Session lookup failed")
        return None


def set_session_cookie(response: Response, session_id: str) -> None:
    """Attach the signed session cookie to a response."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(session_id),
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session cookie from the client."""
    response.delete_cookie(key=get_settings().session_cookie_name)


# Type alias for cleaner route signatures
CurrentUser = Annotated[Optional[SessionUser], Depends(get_current_user)]
