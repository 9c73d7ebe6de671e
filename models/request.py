"""
API Request Models
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
import re

from data.models import UserRole

def check_username(v):
    if not re.match(r'^[a-zA-Z0-9_.-]+$', v):
        raise ValueError('Username can only contain letters, numbers, dots, underscores and hyphens')
    return v

def check_email(v):
    if not re.match(r'^[^@\s]+@[^@\s]+\.[^@\s]+$', v):
        raise ValueError('Email format is incorrect')
    return v.strip()

def reject_null(v):
    """Explicit null on a field that must keep a value"""
    if v is None:
        raise ValueError('Field cannot be null')
    return v

class RegisterRequest(BaseModel):
    """User Registration Request"""
    username: str = Field(..., description="Unique username", min_length=3, max_length=50)
    password: str = Field(..., description="Plain text password", min_length=6, max_length=72)
    email: str = Field(..., description="Unique email address", max_length=254)
    role: UserRole = Field(..., description="influencer, brand or admin")
    name: str = Field(..., description="Display name", min_length=1, max_length=100)
    bio: Optional[str] = Field(None, description="Short bio", max_length=2000)
    
    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        return check_username(v)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return check_email(v)
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "username": "gamer_jane",
                "password": "s3cret-pass",
                "email": "jane@example.com",
                "role": "influencer",
                "name": "Jane Doe",
                "bio": "Streaming indie games every weekend"
            }
        }
    }

class SendMessageRequest(BaseModel):
    """Send Message Request"""
    recipient_id: int = Field(..., description="Recipient user ID")
    content: str = Field(..., description="Message content")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "recipient_id": 2,
                "content": "Hi! Would you be interested in a sponsored review?"
            }
        }
    }

class InfluencerProfileRequest(BaseModel):
    """Influencer Profile Create Request"""
    category: str = Field(..., description="Content category", min_length=1)
    platforms: List[str] = Field(..., description="Platforms the influencer publishes on", min_length=1)
    follower_count: Optional[int] = Field(None, description="Total follower count", ge=0)
    engagement_rate: Optional[str] = Field(None, description="Engagement rate")
    content_samples: List[str] = Field(default_factory=list, description="Content sample URLs")
    pricing: Optional[str] = Field(None, description="Pricing information")
    location: Optional[str] = Field(None, description="Location")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "category": "Gaming",
                "platforms": ["YouTube", "Twitch"],
                "follower_count": 120000,
                "engagement_rate": "4.2%",
                "content_samples": [],
                "pricing": "$500 per video",
                "location": "Europe"
            }
        }
    }

class InfluencerProfileUpdate(BaseModel):
    """Influencer Profile Update Request - only supplied fields change"""
    category: Optional[str] = Field(None, min_length=1)
    platforms: Optional[List[str]] = Field(None, min_length=1)
    follower_count: Optional[int] = Field(None, ge=0)
    engagement_rate: Optional[str] = None
    content_samples: Optional[List[str]] = None
    pricing: Optional[str] = None
    location: Optional[str] = None

    @field_validator('category', 'platforms', 'content_samples')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

class BrandProfileRequest(BaseModel):
    """Brand Profile Create Request"""
    company_type: str = Field(..., description="Company type", min_length=1)
    industry: str = Field(..., description="Industry", min_length=1)
    marketing_goals: Optional[str] = Field(None, description="Marketing goals")
    budget: Optional[str] = Field(None, description="Budget range")
    past_campaigns: List[str] = Field(default_factory=list, description="Past campaign descriptions")
    location: Optional[str] = Field(None, description="Location")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "company_type": "Startup",
                "industry": "Technology",
                "marketing_goals": "Brand awareness among gamers",
                "budget": "1k_5k",
                "past_campaigns": [],
                "location": "North America"
            }
        }
    }

class BrandProfileUpdate(BaseModel):
    """Brand Profile Update Request - only supplied fields change"""
    company_type: Optional[str] = Field(None, min_length=1)
    industry: Optional[str] = Field(None, min_length=1)
    marketing_goals: Optional[str] = None
    budget: Optional[str] = None
    past_campaigns: Optional[List[str]] = None
    location: Optional[str] = None

    @field_validator('company_type', 'industry', 'past_campaigns')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

class AdminUserUpdate(BaseModel):
    """Admin User Update Request - only supplied fields change"""
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    password: Optional[str] = Field(None, description="New plain text password", min_length=6, max_length=72)
    email: Optional[str] = Field(None, max_length=254)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=2000)
    profile_image: Optional[str] = None
    cover_image: Optional[str] = None
    verified: Optional[bool] = Field(None, description="Profile verification flag")

    @field_validator('username', 'password', 'email', 'name', 'verified')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        return check_username(v)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return check_email(v)
