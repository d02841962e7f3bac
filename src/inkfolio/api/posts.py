"""Post API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path

from ..database import MAX_ENTITY_ID
from ..dependencies import get_post_service, require_admin
from ..schemas.auth import AdminSession
from ..schemas.common import SuccessResponse
from ..schemas.post import PostCreate, PostResponse, PostUpdate
from ..services import PostService


router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get("", response_model=List[PostResponse])
async def list_posts(
    post_service: PostService = Depends(get_post_service),
):
    """List all posts, newest first. No authentication required."""
    posts = await post_service.list_posts()
    return [PostResponse.model_validate(p) for p in posts]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    post_service: PostService = Depends(get_post_service),
):
    """Get post by ID. No authentication required."""
    post = await post_service.get_post(post_id)
    return PostResponse.model_validate(post)


@router.post("", response_model=PostResponse)
async def create_post(
    data: PostCreate,
    admin: AdminSession = Depends(require_admin),
    post_service: PostService = Depends(get_post_service),
):
    """
    Publish a new post.

    Markdown content (`content_format="markdown"`) is converted to HTML.
    """
    post = await post_service.create_post(**data.model_dump())
    return PostResponse.model_validate(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    data: PostUpdate,
    post_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    admin: AdminSession = Depends(require_admin),
    post_service: PostService = Depends(get_post_service),
):
    """Update a post. Omitted fields keep their current value."""
    updates = data.model_dump(exclude_unset=True, exclude_none=True)
    content_format = updates.pop("content_format", "html")

    post = await post_service.update_post(post_id, content_format=content_format, **updates)
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=SuccessResponse)
async def delete_post(
    post_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    admin: AdminSession = Depends(require_admin),
    post_service: PostService = Depends(get_post_service),
):
    """Delete a post permanently."""
    await post_service.delete_post(post_id)
    return SuccessResponse()
