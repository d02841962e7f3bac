"""Friend link schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FriendBase(BaseModel):
    """Fields shared by applications and admin-created links.

    No `approved` field here; the service sets the approval state.
    """
    name: str = Field(..., min_length=1, max_length=100)
    url: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = Field(None, max_length=500)
    avatar: Optional[str] = Field(None, max_length=500)


class FriendApply(FriendBase):
    """Public application for a friend link."""


class FriendCreate(FriendBase):
    """Admin-created friend link."""


class FriendResponse(FriendBase):
    """Friend link response schema."""
    id: int
    approved: bool
    created_at: datetime

    class Config:
        from_attributes = True
