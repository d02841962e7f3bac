"""Message repository for the message board."""

from typing import List

from .base import BaseRepository
from ..database import Message


class MessageRepository(BaseRepository[Message]):
    """Repository for Message operations."""

    async def list_recent(self) -> List[Message]:
        """Every message, newest first."""
        return await self.get_multi(newest_first=True)
