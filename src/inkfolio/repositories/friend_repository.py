"""Friend link repository with approval-state queries."""

from typing import List

from sqlalchemy import select

from .base import BaseRepository
from ..database import Friend


class FriendRepository(BaseRepository[Friend]):
    """Repository for Friend operations."""

    async def get_by_approval(self, approved: bool) -> List[Friend]:
        """Links in one approval state, oldest first."""
        query = (
            select(Friend)
            .where(Friend.approved == approved)
            .order_by(Friend.created_at, Friend.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_approved(self) -> List[Friend]:
        return await self.get_by_approval(True)

    async def get_pending(self) -> List[Friend]:
        return await self.get_by_approval(False)
