"""Dependency injection for FastAPI endpoints.

The engine, session factory and auth service live on `app.state`, set up by
`create_app`; nothing here reaches for a module-level store handle.
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from .core.exceptions import MissingTokenError
from .database import Friend, Message, Post, Project, Song
from .repositories import (
    FriendRepository,
    MessageRepository,
    PostRepository,
    ProjectRepository,
    SongRepository,
)
from .schemas.auth import AdminSession
from .services import (
    AuthService,
    FriendService,
    MessageService,
    PostService,
    ProjectService,
    SongService,
)


# Security scheme; missing headers are reported by require_admin, not FastAPI
security = HTTPBearer(auto_error=False)


# Database session dependency
async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with request.app.state.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# Authentication dependencies
def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> AdminSession:
    """
    Authorize the caller as admin from `Authorization: Bearer <token>`.

    Raises:
        MissingTokenError: No bearer token on the request
        InvalidOrExpiredTokenError: Token failed verification
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return auth_service.authorize(credentials.credentials)


# Service dependencies
async def get_post_service(
    session: AsyncSession = Depends(get_session)
) -> PostService:
    return PostService(PostRepository(Post, session))


async def get_friend_service(
    session: AsyncSession = Depends(get_session)
) -> FriendService:
    return FriendService(FriendRepository(Friend, session))


async def get_message_service(
    session: AsyncSession = Depends(get_session)
) -> MessageService:
    return MessageService(MessageRepository(Message, session))


async def get_project_service(
    session: AsyncSession = Depends(get_session)
) -> ProjectService:
    return ProjectService(ProjectRepository(Project, session))


async def get_song_service(
    session: AsyncSession = Depends(get_session)
) -> SongService:
    return SongService(SongRepository(Song, session))
