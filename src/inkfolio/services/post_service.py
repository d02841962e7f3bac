"""Post lifecycle: absent -> published -> (edited) -> absent."""

from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from ..content import format_post_date, to_html
from ..core.exceptions import ResourceNotFoundError
from ..database import Post
from ..repositories.post_repository import PostRepository


class PostService:
    """Business logic for Post operations.

    Authorization happens before these methods are reached; the service
    only enforces existence.
    """

    def __init__(self, post_repo: PostRepository):
        self.post_repo = post_repo

    async def create_post(
        self,
        title: str,
        category: str,
        excerpt: str = "",
        content: str = "",
        date: Optional[str] = None,
        content_format: str = "html",
    ) -> Post:
        """Publish a new post. Every call creates a new id."""
        post = await self.post_repo.create(
            title=title,
            excerpt=excerpt,
            content=to_html(content, content_format),
            date=date or format_post_date(datetime.now(timezone.utc)),
            category=category,
        )
        logger.info(f"Post {post.id} created")
        return post

    async def get_post(self, post_id: int) -> Post:
        post = await self.post_repo.get(post_id)
        if not post:
            raise ResourceNotFoundError("Post", post_id)
        return post

    async def list_posts(self) -> List[Post]:
        return await self.post_repo.list_recent()

    async def update_post(
        self,
        post_id: int,
        content_format: str = "html",
        **updates
    ) -> Post:
        """Overwrite the supplied fields in place."""
        if "content" in updates:
            updates["content"] = to_html(updates["content"], content_format)

        post = await self.post_repo.update(post_id, **updates)
        if not post:
            raise ResourceNotFoundError("Post", post_id)

        logger.info(f"Post {post_id} updated: {', '.join(sorted(updates)) or 'no fields'}")
        return post

    async def delete_post(self, post_id: int) -> None:
        if not await self.post_repo.delete(post_id):
            raise ResourceNotFoundError("Post", post_id)
        logger.info(f"Post {post_id} deleted")
