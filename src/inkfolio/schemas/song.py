"""Song schemas."""

import json
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator


class LyricLine(BaseModel):
    """One timed lyric line; `time` is seconds from the start of the track."""
    time: float = Field(..., ge=0)
    text: str


def parse_lyrics(value):
    """Accept a list of lines or the JSON text they are stored as."""
    if value is None or value == "":
        return []
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"lyrics is not valid JSON: {e.msg}") from e
    return value


class SongCreate(BaseModel):
    """Schema for adding a song."""
    title: str = Field(..., min_length=1, max_length=255)
    artist: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=500)
    lyrics: List[LyricLine] = []

    @field_validator('lyrics', mode='before')
    @classmethod
    def validate_lyrics(cls, v):
        return parse_lyrics(v)


class SongResponse(BaseModel):
    """Schema for song response."""
    id: int
    title: str
    artist: str
    url: str
    lyrics: List[LyricLine] = []
    created_at: datetime

    @field_validator('lyrics', mode='before')
    @classmethod
    def validate_lyrics(cls, v):
        return parse_lyrics(v)

    class Config:
        from_attributes = True
