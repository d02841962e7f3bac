"""Message board service. Append-only for visitors, delete for the admin."""

from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from ..content import format_message_time
from ..core.exceptions import ResourceNotFoundError
from ..database import Message
from ..repositories.message_repository import MessageRepository


class MessageService:

    def __init__(self, message_repo: MessageRepository):
        self.message_repo = message_repo

    async def post_message(self, name: str, content: str, now: Optional[datetime] = None) -> Message:
        when = now or datetime.now(timezone.utc)
        return await self.message_repo.create(
            name=name,
            content=content,
            date=format_message_time(when),
        )

    async def list_messages(self) -> List[Message]:
        return await self.message_repo.list_recent()

    async def delete_message(self, message_id: int) -> None:
        if not await self.message_repo.delete(message_id):
            raise ResourceNotFoundError("Message", message_id)
        logger.info(f"Message {message_id} deleted")
