"""Post schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


ContentFormat = Literal["html", "markdown"]


class PostCreate(BaseModel):
    """Post creation schema.

    `content_format="markdown"` marks content pasted as Markdown; it is
    converted to HTML before it is stored. `date` defaults to today.
    """
    title: str = Field(..., min_length=1, max_length=255)
    excerpt: str = ""
    content: str = ""
    date: Optional[str] = Field(None, min_length=1, max_length=64)
    category: str = Field(..., min_length=1, max_length=64)
    content_format: ContentFormat = "html"


class PostUpdate(BaseModel):
    """Post update schema. Only supplied fields change."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    date: Optional[str] = Field(None, min_length=1, max_length=64)
    category: Optional[str] = Field(None, min_length=1, max_length=64)
    content_format: ContentFormat = "html"


class PostResponse(BaseModel):
    """Post response schema."""
    id: int
    title: str
    excerpt: str
    content: str
    date: str
    category: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
