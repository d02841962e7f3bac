"""Project schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def split_tags(value) -> List[str]:
    """Accept a list or a comma-separated string of tags."""
    if value is None:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    return value


class ProjectCreate(BaseModel):
    """Schema for creating a project."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    tags: List[str] = []
    github: Optional[str] = Field(None, max_length=500)
    link: Optional[str] = Field(None, max_length=500)
    color: Optional[str] = Field(None, max_length=64)

    @field_validator('tags', mode='before')
    @classmethod
    def validate_tags(cls, v):
        return split_tags(v)


class ProjectResponse(BaseModel):
    """Schema for project response; stored comma-joined tags come back as a list."""
    id: int
    title: str
    description: str
    tags: List[str] = []
    github: Optional[str]
    link: Optional[str]
    color: Optional[str]
    created_at: datetime

    @field_validator('tags', mode='before')
    @classmethod
    def validate_tags(cls, v):
        return split_tags(v)

    class Config:
        from_attributes = True
