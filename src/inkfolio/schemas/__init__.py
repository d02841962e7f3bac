"""Pydantic schemas for API request/response models."""

from .auth import AdminSession, TokenResponse, VerifyRequest
from .common import ErrorResponse, HealthResponse, SuccessResponse
from .friend import FriendApply, FriendCreate, FriendResponse
from .message import MessageCreate, MessageResponse
from .post import PostCreate, PostResponse, PostUpdate
from .project import ProjectCreate, ProjectResponse
from .song import LyricLine, SongCreate, SongResponse

__all__ = [
    "AdminSession",
    "TokenResponse",
    "VerifyRequest",
    "ErrorResponse",
    "HealthResponse",
    "SuccessResponse",
    "FriendApply",
    "FriendCreate",
    "FriendResponse",
    "MessageCreate",
    "MessageResponse",
    "PostCreate",
    "PostResponse",
    "PostUpdate",
    "ProjectCreate",
    "ProjectResponse",
    "LyricLine",
    "SongCreate",
    "SongResponse",
]
