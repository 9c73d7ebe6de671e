"""
Derived conversation views (never stored)
"""
from typing import Dict, Any, Optional
from dataclasses import dataclass

from .message import Message
from .user import User

@dataclass
class ConversationSummary:
    """Latest message and unread count between a viewer and one counterpart"""
    
    counterpart_id: int
    last_message: Message
    unread_count: int = 0
    counterpart: Optional[User] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "counterpart_id": self.counterpart_id,
            "last_message": self.last_message.to_dict(),
            "unread_count": self.unread_count,
            "counterpart": self.counterpart.to_dict() if self.counterpart else None
        }

@dataclass
class ConversationStats:
    """Platform-wide messaging aggregate"""
    
    total_messages: int = 0
    unread_messages: int = 0
    conversation_count: int = 0
    active_users: int = 0
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_messages": self.total_messages,
            "unread_messages": self.unread_messages,
            "conversation_count": self.conversation_count,
            "active_users": self.active_users
        }
