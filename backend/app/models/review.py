"""
Reader feedback on the catalog: per-book reviews and book suggestions.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class Review(BaseModel):
    """
    Review document model for the reviews collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    book_id: str = Field(..., description="Reviewed book's ObjectId as string")
    text: str = Field(..., description="Review text")
    author: str = Field(..., description="Reviewer display name or email")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Posting timestamp"
    )

    class Config:
        populate_by_name = True


class Suggestion(BaseModel):
    """
    Suggestion document model for the suggestions collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    text: str = Field(..., description="Suggested book title")
    author: str = Field(..., description="Suggester display name or email")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Posting timestamp"
    )

    class Config:
        populate_by_name = True
