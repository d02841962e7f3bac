"""Repository layer for data access."""

from .base import BaseRepository
from .post_repository import PostRepository
from .friend_repository import FriendRepository
from .message_repository import MessageRepository
from .project_repository import ProjectRepository
from .song_repository import SongRepository

__all__ = [
    "BaseRepository",
    "PostRepository",
    "FriendRepository",
    "MessageRepository",
    "ProjectRepository",
    "SongRepository",
]
