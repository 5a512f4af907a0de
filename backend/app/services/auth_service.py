"""
Authentication service for sign up, sign in and sign out.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.exceptions import (
    AuthenticationError,
    ConflictError,
    PersistenceError,
    ValidationError,
)
from app.core.security import hash_password, verify_password
from app.database.databases import archive_db
from app.models.user import User
from app.schemas.auth import SessionUser, SignInForm, SignUpForm
from app.services.session_store import SessionStore, new_session_id

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase, sessions: SessionStore):
        """Initialize with the archive database and a session store."""
        self.db = db
        self.users_collection = db[archive_db.Collections.USERS]
        self.sessions = sessions

    async def sign_up(self, form: SignUpForm) -> str:
        """
        Register a new user and sign them in.

        The email check is a read before the insert, so two concurrent
        sign ups with the same email can both succeed.

        Args:
            form: Sign up form with optional name, email and password

        Returns:
            Id of the newly established session

        Raises:
            ValidationError: If email or password is missing
            ConflictError: If the email is already registered
            PersistenceError: If the database cannot be reached
        """
        email = (form.email or "").strip()
        if not email or not form.password:
            raise ValidationError("Email and password are required")

        try:
            existing = await self.users_collection.find_one({"email": email})
            if existing:
                raise ConflictError("Email already registered")

            user = User(
                name=(form.name or "").strip() or None,
                email=email,
                password_hash=hash_password(form.password),
            )
            user_doc = user.model_dump(exclude={"id"})
            result = await self.users_collection.insert_one(user_doc)
        except PyMongoError as e:
            raise PersistenceError("Could not create account") from e

        user_doc["_id"] = result.inserted_id
        logger.info("Created account %s", result.inserted_id)
        return await self._establish_session(user_doc)

    async def sign_in(self, form: SignInForm) -> str:
        """
        Authenticate a user and start a session.

        Returns:
            Id of the newly established session

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
            PersistenceError: If the database cannot be reached
        """
        email = (form.email or "").strip()
        if not email or not form.password:
            raise AuthenticationError("Invalid email or password")

        try:
            user_doc = await self.users_collection.find_one({"email": email})
        except PyMongoError as e:
            raise PersistenceError("Could not look up account") from e

        if not user_doc:
            raise AuthenticationError("No account found with that email")

        if not verify_password(form.password, user_doc.get("password_hash", "")):
            raise AuthenticationError("Incorrect password")

        return await self._establish_session(user_doc)

    async def sign_out(self, session_id: Optional[str]) -> None:
        """Destroy the session, whether or not it exists."""
        if session_id:
            await self.sessions.destroy(session_id)

    async def get_session_user(self, session_id: Optional[str]) -> Optional[SessionUser]:
        """Return the user stored in a session, or None when signed out."""
        if not session_id:
            return None

        data = await self.sessions.get(session_id)
        if not data:
            return None

        return SessionUser(**data)

    async def _establish_session(self, user_doc: dict) -> str:
        """Store {id, email, name} under a fresh session id."""
        session_user = SessionUser(
            id=str(user_doc["_id"]),
            email=user_doc["email"],
            name=user_doc.get("name"),
        )
        session_id = new_session_id()
        await self.sessions.set(session_id, session_user.model_dump())
        return session_id
