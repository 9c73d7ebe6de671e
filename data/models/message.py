"""
Message data model
"""
from datetime import datetime
from typing import Dict, Any, Optional, Tuple
from dataclasses import dataclass, field

from utils.time_utils import now

@dataclass
class Message:
    """Direct message between two users. Only `read` ever changes."""
    
    id: Optional[int] = None
    sender_id: int = 0
    recipient_id: int = 0
    content: str = ""
    read: bool = False
    created_at: datetime = field(default_factory=now)
    
    @property
    def sort_key(self) -> Tuple[datetime, int]:
        """Creation time, ties broken by the monotonic id"""
        return (self.created_at, self.id or 0)
    
    def involves(self, user_id: int) -> bool:
        return self.sender_id == user_id or self.recipient_id == user_id
    
    def counterpart_of(self, user_id: int) -> int:
        """The other participant, relative to `user_id`"""
        return self.recipient_id if self.sender_id == user_id else self.sender_id
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "sender_id": self.sender_id,
            "recipient_id": self.recipient_id,
            "content": self.content,
            "read": self.read,
            "created_at": self.created_at.isoformat()
        }
