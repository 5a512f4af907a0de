"""
Community article model.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_TAG = "Article"
DEFAULT_AUTHOR = "Anonymous"
DEFAULT_READ_TIME = "3 min read"


class Article(BaseModel):
    """
    Article document model for the articles collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    title: str = Field(..., description="Article title")
    tag: str = Field(default=DEFAULT_TAG, description="Category, e.g. Poem, Story, Essay")
    author: str = Field(default=DEFAULT_AUTHOR, description="Author display name")
    read_time: str = Field(default=DEFAULT_READ_TIME, description="Human readable read time")
    excerpt: str = Field(default="", description="Short preview of the content")
    content: str = Field(..., description="Full text")
    cover_image: str = Field(default="", description="Cover image URL")
    is_community: bool = Field(default=True, description="Written by a site user")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Publication timestamp"
    )

    class Config:
        populate_by_name = True
