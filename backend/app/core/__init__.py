"""
Core module - Security helpers and domain errors.
"""
from app.core.exceptions import (
    ArchiveError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from app.core.security import (
    hash_password,
    verify_password,
    create_session_token,
    read_session_token,
)

__all__ = [
    "ArchiveError",
    "AuthenticationError",
    "ConflictError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
    "hash_password",
    "verify_password",
    "create_session_token",
    "read_session_token",
]
