"""Message board API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path

from ..database import MAX_ENTITY_ID
from ..dependencies import get_message_service, require_admin
from ..schemas.auth import AdminSession
from ..schemas.common import SuccessResponse
from ..schemas.message import MessageCreate, MessageResponse
from ..services import MessageService


router = APIRouter(prefix="/messages", tags=["Messages"])


@router.get("", response_model=List[MessageResponse])
async def list_messages(
    message_service: MessageService = Depends(get_message_service),
):
    messages = await message_service.list_messages()
    return [MessageResponse.model_validate(m) for m in messages]


@router.post("", response_model=MessageResponse)
async def post_message(
    data: MessageCreate,
    message_service: MessageService = Depends(get_message_service),
):
    """Leave a message. Anyone may post; the server stamps the time."""
    message = await message_service.post_message(data.name, data.content)
    return MessageResponse.model_validate(message)


@router.delete("/{message_id}", response_model=SuccessResponse)
async def delete_message(
    message_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    admin: AdminSession = Depends(require_admin),
    message_service: MessageService = Depends(get_message_service),
):
    await message_service.delete_message(message_id)
    return SuccessResponse()
