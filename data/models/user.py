"""
User data model
"""
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from utils.time_utils import now

class UserRole(str, Enum):
    """User role, fixed at registration"""
    INFLUENCER = "influencer"
    BRAND = "brand"
    ADMIN = "admin"

@dataclass
class User:
    """User Model"""
    
    id: Optional[int] = None
    username: str = ""
    password: str = ""  # bcrypt hash, never the plain text
    email: str = ""
    role: UserRole = UserRole.INFLUENCER
    name: str = ""
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    cover_image: Optional[str] = None
    created_at: datetime = field(default_factory=now)
    
    def to_dict(self, include_password: bool = False) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "name": self.name,
            "bio": self.bio,
            "profile_image": self.profile_image,
            "cover_image": self.cover_image,
            "created_at": self.created_at.isoformat()
        }
        if include_password:
            data["password"] = self.password
        return data
