"""
Server-side session storage.

Sessions are opaque ids mapped to the signed-in user's minimal identity.
Route handlers receive a SessionStore through dependency injection; the
Redis implementation is the one wired in production.
"""
import json
import logging
import secrets
from abc import ABC, abstractmethod
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    """Generate an unguessable session id."""
    return secrets.token_urlsafe(32)


class SessionStore(ABC):
    """Get/set/destroy session data by session id."""

    @abstractmethod
    async def get(self, session_id: str) -> Optional[dict]:
        """Return session data, or None if unknown or expired."""

    @abstractmethod
    async def set(self, session_id: str, data: dict) -> None:
        """Create or replace session data."""

    @abstractmethod
    async def destroy(self, session_id: str) -> None:
        """Remove a session. Unknown ids are ignored."""


class RedisSessionStore(SessionStore):
    """
    Session store backed by Redis.
    
    Each session is one JSON string under `session:{id}` expiring after
    `ttl_seconds`.
    """

    KEY_PREFIX = "session:"

    def __init__(self, redis: Redis, ttl_seconds: int):
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    def _key(self, session_id: str) -> str:
        return f"{self.KEY_PREFIX}{session_id}"

    async def get(self, session_id: str) -> Optional[dict]:
        try:
            raw = await self.redis.get(self._key(session_id))
        except RedisError as e:
            raise PersistenceError("Session store unavailable") from e
        
        if raw is None:
            return None
        
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable session %s", session_id[:8])
            return None

    async def set(self, session_id: str, data: dict) -> None:
        try:
            await self.redis.setex(self._key(session_id), self.ttl_seconds, json.dumps(data))
        except RedisError as e:
            raise PersistenceError("Session store unavailable") from e

    async def destroy(self, session_id: str) -> None:
        try:
            await self.redis.delete(self._key(session_id))
        except RedisError as e:
            raise PersistenceError("Session store unavailable") from e
