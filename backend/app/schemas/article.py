"""
Article submission and feed schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Write form body. Blank optional fields fall back to defaults."""
    title: Optional[str] = Field(None, description="Article title")
    content: Optional[str] = Field(None, description="Full text")
    tag: Optional[str] = Field(None, description="Category")
    author: Optional[str] = Field(None, description="Author display name")
    read_time: Optional[str] = Field(None, description="Read time, e.g. '5 min read'")
    excerpt: Optional[str] = Field(None, description="Preview text")
    cover_image: Optional[str] = Field(None, description="Cover image URL")


class ArticleResponse(BaseModel):
    """Article as rendered and served by the feed."""
    id: str = Field(..., description="Article ID")
    title: str
    tag: str
    author: str
    read_time: str
    excerpt: str
    content: str
    cover_image: str
    is_community: bool
    created_at: datetime
