"""Friend link API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path

from ..database import MAX_ENTITY_ID
from ..dependencies import get_friend_service, require_admin
from ..schemas.auth import AdminSession
from ..schemas.common import SuccessResponse
from ..schemas.friend import FriendApply, FriendCreate, FriendResponse
from ..services import FriendService


router = APIRouter(prefix="/friends", tags=["Friends"])


@router.get("", response_model=List[FriendResponse])
async def list_friends(
    friend_service: FriendService = Depends(get_friend_service),
):
    """List approved friend links. No authentication required."""
    friends = await friend_service.list_public()
    return [FriendResponse.model_validate(f) for f in friends]


@router.get("/pending", response_model=List[FriendResponse])
async def list_pending_friends(
    admin: AdminSession = Depends(require_admin),
    friend_service: FriendService = Depends(get_friend_service),
):
    """List applications awaiting review."""
    friends = await friend_service.list_pending()
    return [FriendResponse.model_validate(f) for f in friends]


@router.post("/apply", response_model=FriendResponse)
async def apply_friend(
    data: FriendApply,
    friend_service: FriendService = Depends(get_friend_service),
):
    """
    Apply for a friend link.

    The link stays hidden from the public listing until an admin approves it.
    """
    friend = await friend_service.apply(**data.model_dump())
    return FriendResponse.model_validate(friend)


@router.post("", response_model=FriendResponse)
async def create_friend(
    data: FriendCreate,
    admin: AdminSession = Depends(require_admin),
    friend_service: FriendService = Depends(get_friend_service),
):
    """Add an approved friend link directly."""
    friend = await friend_service.admin_create(**data.model_dump())
    return FriendResponse.model_validate(friend)


@router.put("/{friend_id}/approve", response_model=FriendResponse)
async def approve_friend(
    friend_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    admin: AdminSession = Depends(require_admin),
    friend_service: FriendService = Depends(get_friend_service),
):
    """Approve a pending friend link."""
    friend = await friend_service.approve(friend_id)
    return FriendResponse.model_validate(friend)


@router.delete("/{friend_id}", response_model=SuccessResponse)
async def delete_friend(
    friend_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    admin: AdminSession = Depends(require_admin),
    friend_service: FriendService = Depends(get_friend_service),
):
    """Reject a pending application or remove an approved link."""
    await friend_service.delete(friend_id)
    return SuccessResponse()
