"""Post repository."""

from typing import List

from .base import BaseRepository
from ..database import Post


class PostRepository(BaseRepository[Post]):
    """Repository for Post operations."""

    async def list_recent(self) -> List[Post]:
        """All posts, newest first."""
        return await self.get_multi(newest_first=True)
