"""Friend link moderation.

States: nonexistent -> pending (public apply) -> approved (admin approve).
Admins may also create links directly in the approved state, and delete a
link in either state. Rejecting an application is deleting it.
"""

from typing import List, Optional

from loguru import logger

from ..core.exceptions import ResourceNotFoundError
from ..database import Friend
from ..repositories.friend_repository import FriendRepository


class FriendService:
    """Business logic for Friend link operations."""

    def __init__(self, friend_repo: FriendRepository):
        self.friend_repo = friend_repo

    async def apply(
        self,
        name: str,
        url: str,
        description: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> Friend:
        """Submit a link for review. Always lands pending."""
        friend = await self.friend_repo.create(
            name=name,
            url=url,
            description=description,
            avatar=avatar,
            approved=False,
        )
        logger.info(f"Friend link {friend.id} applied ({url})")
        return friend

    async def admin_create(
        self,
        name: str,
        url: str,
        description: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> Friend:
        """Add a link that is visible immediately."""
        friend = await self.friend_repo.create(
            name=name,
            url=url,
            description=description,
            avatar=avatar,
            approved=True,
        )
        logger.info(f"Friend link {friend.id} created by admin")
        return friend

    async def approve(self, friend_id: int) -> Friend:
        """Move a pending link to approved. Already approved is a no-op."""
        friend = await self.friend_repo.get(friend_id)
        if not friend:
            raise ResourceNotFoundError("Friend", friend_id)

        if friend.approved:
            return friend

        friend = await self.friend_repo.update(friend_id, approved=True)
        logger.info(f"Friend link {friend_id} approved")
        return friend

    async def delete(self, friend_id: int) -> None:
        if not await self.friend_repo.delete(friend_id):
            raise ResourceNotFoundError("Friend", friend_id)
        logger.info(f"Friend link {friend_id} deleted")

    async def list_public(self) -> List[Friend]:
        return await self.friend_repo.get_approved()

    async def list_pending(self) -> List[Friend]:
        return await self.friend_repo.get_pending()
