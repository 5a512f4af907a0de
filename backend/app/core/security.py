"""
Security utilities for password hashing and session cookie signing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings

# Password hashing context using bcrypt (cost factor from settings)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using a salted bcrypt hash.
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.
    
    Malformed hashes count as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def create_session_token(
    session_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Sign a session id into the value stored in the session cookie.
    
    The token carries no user data: only the opaque session id (`sid`)
    used as the session store key.
    
    Args:
        session_id: Session store key
        expires_delta: Optional custom lifetime (defaults to session TTL)
        
    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.session_ttl_seconds)
    
    now = datetime.now(timezone.utc)
    payload = {
        "sid": session_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    
    return jwt.encode(
        payload,
        settings.session_secret_key,
        algorithm=settings.session_algorithm,
    )


def read_session_token(token: Optional[str]) -> Optional[str]:
    """
    Return the session id inside a signed cookie value.
    
    Returns None for a missing, tampered or expired token.
    """
    if not token:
        return None
    
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.session_secret_key,
            algorithms=[settings.session_algorithm],
        )
    except JWTError:
        return None
    
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None
