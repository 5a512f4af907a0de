"""
Authentication form and session schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class SignUpForm(BaseModel):
    """Sign up form body (urlencoded)."""
    name: Optional[str] = Field(None, description="Optional display name")
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


class SignInForm(BaseModel):
    """Sign in form body (urlencoded)."""
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


class SessionUser(BaseModel):
    """Minimal identity kept in the server-side session."""
    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    name: Optional[str] = Field(None, description="Display name")
