"""
Book catalog request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BookCreate(BaseModel):
    """Create book form body."""
    title: Optional[str] = Field(None, description="Book title")
    description: Optional[str] = Field(None, description="Short description")
    image: Optional[str] = Field(None, description="Cover image URL")


class BookUpdate(BaseModel):
    """Update book form body. Omitted fields are left unchanged."""
    title: Optional[str] = Field(None, description="Book title")
    description: Optional[str] = Field(None, description="Short description")
    image: Optional[str] = Field(None, description="Cover image URL")


class BookResponse(BaseModel):
    """Book response."""
    id: str = Field(..., description="Book ID")
    title: str = Field(..., description="Book title")
    description: str = Field(..., description="Short description")
    image: Optional[str] = Field(None, description="Cover image URL")
    created_at: datetime = Field(..., description="Creation timestamp")
