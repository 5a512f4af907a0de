"""
Book review and suggestion schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    """Review form body."""
    text: Optional[str] = Field(None, description="Short review")


class SuggestionCreate(BaseModel):
    """Suggestion form body."""
    text: Optional[str] = Field(None, description="Suggested book title")


class ReviewResponse(BaseModel):
    """Review as rendered under a book."""
    id: str = Field(..., description="Review ID")
    book_id: str
    text: str
    author: str
    created_at: datetime


class SuggestionResponse(BaseModel):
    """Suggestion as rendered in the suggestions box."""
    id: str = Field(..., description="Suggestion ID")
    text: str
    author: str
    created_at: datetime
