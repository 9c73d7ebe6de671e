"""
Messaging Service
"""
from typing import List

from configs.settings import Settings, settings as default_settings
from data.models import Message, ConversationSummary, ConversationStats
from data.repositories.message_repository import MessageRepository
from data.store import EntityStore
from utils.logger import get_logger

logger = get_logger(__name__)

class MessagingService:
    """Direct messaging between marketplace users"""
    
    def __init__(self, store: EntityStore, settings: Settings = default_settings):
        self.messages = MessageRepository(
            store,
            max_length=settings.message_max_length,
            validate_participants=settings.messaging_validate_participants,
            allow_self_messages=settings.allow_self_messages
        )
    
    def send_message(self, sender_id: int, recipient_id: int, content: str) -> Message:
        """Send a message"""
        message = self.messages.send(sender_id, recipient_id, content)
        logger.info(
            "Message sent",
            message_id=message.id,
            sender_id=sender_id,
            recipient_id=recipient_id
        )
        return message
    
    def get_history(self, user_id: int, other_id: int) -> List[Message]:
        return self.messages.history(user_id, other_id)
    
    def open_thread(self, viewer_id: int, other_id: int) -> List[Message]:
        """History between viewer and other, marking what viewer received as read.

        The returned messages reflect the state before marking.
        """
        history = self.messages.history(viewer_id, other_id)
        if self.messages.mark_read(other_id, viewer_id):
            logger.debug("Messages marked as read", sender_id=other_id, recipient_id=viewer_id)
        return history
    
    def mark_read(self, sender_id: int, recipient_id: int) -> bool:
        return self.messages.mark_read(sender_id, recipient_id)
    
    def list_conversations(self, user_id: int) -> List[ConversationSummary]:
        return self.messages.conversations(user_id)
    
    def unread_count(self, user_id: int) -> int:
        return self.messages.unread_count(user_id)
    
    def get_statistics(self) -> ConversationStats:
        return self.messages.stats()
