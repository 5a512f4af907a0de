"""
User model for the archive database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User document model for the users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="Email address (unique by prior read on signup)")
    password_hash: str = Field(..., description="Bcrypt hashed password")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp"
    )

    class Config:
        populate_by_name = True
