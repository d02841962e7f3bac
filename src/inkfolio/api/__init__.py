"""HTTP API routers, mounted under /api."""

from .auth import router as auth_router
from .catalog import projects_router, songs_router
from .friends import router as friends_router
from .messages import router as messages_router
from .posts import router as posts_router

__all__ = [
    "auth_router",
    "friends_router",
    "messages_router",
    "posts_router",
    "projects_router",
    "songs_router",
]
