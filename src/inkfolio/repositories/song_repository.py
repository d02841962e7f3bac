"""Song repository."""

from typing import List

from .base import BaseRepository
from ..database import Song


class SongRepository(BaseRepository[Song]):
    """Repository for Song operations."""

    async def list_playlist(self) -> List[Song]:
        """Songs in insertion order, which is playlist order."""
        return await self.get_multi()
