"""Message board schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    """Schema for posting a message."""
    name: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1, max_length=2000)


class MessageResponse(BaseModel):
    """Schema for message response."""
    id: int
    name: str
    content: str
    date: str
    created_at: datetime

    class Config:
        from_attributes = True
