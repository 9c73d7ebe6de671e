"""
Data Repository Layer - Unified Export
"""

from .user_repository import UserRepository
from .message_repository import MessageRepository
from .profile_repository import (
    ProfileDirectory,
    ProfileKind,
    InfluencerKind,
    BrandKind,
    PROFILE_KINDS,
    kind_for_role,
)


__all__ = [
    "UserRepository",
    "MessageRepository",
    "ProfileDirectory",
    "ProfileKind",
    "InfluencerKind",
    "BrandKind",
    "PROFILE_KINDS",
    "kind_for_role",
]
