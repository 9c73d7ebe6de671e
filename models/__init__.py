"""
API model package
"""
from .request import (
    RegisterRequest,
    SendMessageRequest,
    InfluencerProfileRequest,
    InfluencerProfileUpdate,
    BrandProfileRequest,
    BrandProfileUpdate,
    AdminUserUpdate,
)

from .response import (
    UserResponse,
    MessageResponse,
    ConversationSummaryResponse,
    InfluencerProfileResponse,
    BrandProfileResponse,
    InfluencerListing,
    BrandListing,
    UserWithProfileResponse,
    UnreadCountResponse,
    MarkReadResponse,
    AdminStatisticsResponse,
    profile_response,
)

__all__ = [
    # Requests
    "RegisterRequest",
    "SendMessageRequest",
    "InfluencerProfileRequest",
    "InfluencerProfileUpdate",
    "BrandProfileRequest",
    "BrandProfileUpdate",
    "AdminUserUpdate",
    
    # Responses
    "UserResponse",
    "MessageResponse",
    "ConversationSummaryResponse",
    "InfluencerProfileResponse",
    "BrandProfileResponse",
    "InfluencerListing",
    "BrandListing",
    "UserWithProfileResponse",
    "UnreadCountResponse",
    "MarkReadResponse",
    "AdminStatisticsResponse",
    "profile_response",
]
