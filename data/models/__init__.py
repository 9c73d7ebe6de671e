"""
Data Model Package - Data Access Layer Models
"""
from .user import User, UserRole
from .profile import InfluencerProfile, BrandProfile
from .message import Message
from .conversation import ConversationSummary, ConversationStats

__all__ = [
    "User",
    "UserRole",
    "InfluencerProfile",
    "BrandProfile",
    "Message",
    "ConversationSummary",
    "ConversationStats"
]
