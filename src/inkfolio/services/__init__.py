"""Service layer for business logic."""

from .auth_service import AuthService
from .catalog_service import ProjectService, SongService
from .friend_service import FriendService
from .message_service import MessageService
from .post_service import PostService

__all__ = [
    "AuthService",
    "FriendService",
    "MessageService",
    "PostService",
    "ProjectService",
    "SongService",
]
