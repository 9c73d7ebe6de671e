"""
API Response Models
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from data.models import (
    BrandProfile,
    ConversationSummary,
    InfluencerProfile,
    Message,
    User,
)

class UserResponse(BaseModel):
    """Public user view, never carries the password hash"""
    id: int
    username: str
    email: str
    role: str
    name: str
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    cover_image: Optional[str] = None
    created_at: datetime
    
    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(**user.to_dict())

class MessageResponse(BaseModel):
    """Message Response Model"""
    id: int = Field(..., description="Message ID")
    sender_id: int = Field(..., description="Sender user ID")
    recipient_id: int = Field(..., description="Recipient user ID")
    content: str = Field(..., description="Message content")
    read: bool = Field(..., description="Whether the recipient has read it")
    created_at: datetime = Field(..., description="Creation time")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "sender_id": 1,
                "recipient_id": 2,
                "content": "hello",
                "read": False,
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    }
    
    @classmethod
    def from_message(cls, message: Message) -> "MessageResponse":
        return cls(**message.to_dict())

class ConversationSummaryResponse(BaseModel):
    """Conversation Summary Response Model"""
    counterpart_id: int = Field(..., description="The other participant")
    last_message: MessageResponse = Field(..., description="Most recent message")
    unread_count: int = Field(..., description="Unread messages from the counterpart")
    user: Optional[UserResponse] = Field(None, description="Counterpart user")
    
    @classmethod
    def from_summary(cls, summary: ConversationSummary) -> "ConversationSummaryResponse":
        return cls(
            counterpart_id=summary.counterpart_id,
            last_message=MessageResponse.from_message(summary.last_message),
            unread_count=summary.unread_count,
            user=UserResponse.from_user(summary.counterpart) if summary.counterpart else None
        )

class InfluencerProfileResponse(BaseModel):
    """Influencer Profile Response Model"""
    id: int
    user_id: int
    category: str
    platforms: List[str]
    follower_count: Optional[int] = None
    engagement_rate: Optional[str] = None
    content_samples: List[str] = Field(default_factory=list)
    pricing: Optional[str] = None
    location: Optional[str] = None
    verified: bool = False

class BrandProfileResponse(BaseModel):
    """Brand Profile Response Model"""
    id: int
    user_id: int
    company_type: str
    industry: str
    marketing_goals: Optional[str] = None
    budget: Optional[str] = None
    past_campaigns: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    verified: bool = False

def profile_response(profile) -> Optional[BaseModel]:
    """Response model matching the profile's kind"""
    if profile is None:
        return None
    if isinstance(profile, InfluencerProfile):
        return InfluencerProfileResponse(**profile.to_dict())
    if isinstance(profile, BrandProfile):
        return BrandProfileResponse(**profile.to_dict())
    raise TypeError(f"Unknown profile type: {type(profile).__name__}")

class InfluencerListing(BaseModel):
    """Discovery result for one influencer"""
    profile: InfluencerProfileResponse
    user: Optional[UserResponse] = None

class BrandListing(BaseModel):
    """Discovery result for one brand"""
    profile: BrandProfileResponse
    user: Optional[UserResponse] = None

class UserWithProfileResponse(BaseModel):
    """User together with their role profile"""
    user: UserResponse
    influencer_profile: Optional[InfluencerProfileResponse] = None
    brand_profile: Optional[BrandProfileResponse] = None

class UnreadCountResponse(BaseModel):
    unread_count: int

class MarkReadResponse(BaseModel):
    changed: bool

class AdminStatisticsResponse(BaseModel):
    """Admin Dashboard Statistics"""
    users: Dict[str, Any]
    profiles: Dict[str, Dict[str, int]]
    messaging: Dict[str, int]
