"""
Data access layer - entity store, models and repositories
"""
from .store import EntityStore, Collection
from .models import (
    User,
    UserRole,
    InfluencerProfile,
    BrandProfile,
    Message,
    ConversationSummary,
    ConversationStats,
)
from .repositories import (
    UserRepository,
    MessageRepository,
    ProfileDirectory,
    kind_for_role,
)

__all__ = [
    "EntityStore",
    "Collection",

    "User",
    "UserRole",
    "InfluencerProfile",
    "BrandProfile",
    "Message",
    "ConversationSummary",
    "ConversationStats",

    "UserRepository",
    "MessageRepository",
    "ProfileDirectory",
    "kind_for_role",
]
