"""Project repository."""

from typing import List

from .base import BaseRepository
from ..database import Project


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project operations."""

    async def list_recent(self) -> List[Project]:
        return await self.get_multi(newest_first=True)
