"""
Messaging API routes
"""
from fastapi import APIRouter, Depends
from typing import List

from api.dependencies import get_current_user, get_services
from data.models import User
from models.request import SendMessageRequest
from models.response import (
    ConversationSummaryResponse,
    MarkReadResponse,
    MessageResponse,
    UnreadCountResponse,
)
from services import Services
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

@router.post("/messages", response_model=MessageResponse, status_code=201)
async def send_message(
    request: SendMessageRequest,
    user: User = Depends(get_current_user),
    services: Services = Depends(get_services)
) -> MessageResponse:
    """Send a direct message"""
    message = services.messaging.send_message(user.id, request.recipient_id, request.content)
    return MessageResponse.from_message(message)

@router.get("/messages/unread/count", response_model=UnreadCountResponse)
async def get_unread_count(
    user: User = Depends(get_current_user),
    services: Services = Depends(get_services)
) -> UnreadCountResponse:
    """Unread messages across all conversations"""
    return UnreadCountResponse(unread_count=services.messaging.unread_count(user.id))

@router.get("/messages/{other_id}", response_model=List[MessageResponse])
async def get_messages(
    other_id: int,
    user: User = Depends(get_current_user),
    services: Services = Depends(get_services)
) -> List[MessageResponse]:
    """History with another user; messages they sent are marked as read"""
    logger.info("Getting message history", user_id=user.id, other_id=other_id)
    history = services.messaging.open_thread(user.id, other_id)
    return [MessageResponse.from_message(message) for message in history]

@router.post("/messages/{other_id}/read", response_model=MarkReadResponse)
async def mark_messages_read(
    other_id: int,
    user: User = Depends(get_current_user),
    services: Services = Depends(get_services)
) -> MarkReadResponse:
    """Mark everything the other user sent to the caller as read"""
    return MarkReadResponse(changed=services.messaging.mark_read(other_id, user.id))

@router.get("/conversations", response_model=List[ConversationSummaryResponse])
async def list_conversations(
    user: User = Depends(get_current_user),
    services: Services = Depends(get_services)
) -> List[ConversationSummaryResponse]:
    """Caller's conversations, most recently active first"""
    summaries = services.messaging.list_conversations(user.id)
    return [ConversationSummaryResponse.from_summary(summary) for summary in summaries]
