"""
Book model for the catalog.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    """
    Book document model for the books collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    title: str = Field(..., description="Book title")
    description: str = Field(..., description="Short description")
    image: Optional[str] = Field(None, description="Cover image URL or relative path")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp"
    )

    class Config:
        populate_by_name = True
