"""
Role-specific profile data models
"""
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field, asdict

@dataclass
class InfluencerProfile:
    """Influencer Profile Model"""
    
    id: Optional[int] = None
    user_id: int = 0
    category: str = ""
    platforms: List[str] = field(default_factory=list)
    follower_count: Optional[int] = None
    engagement_rate: Optional[str] = None
    content_samples: List[str] = field(default_factory=list)
    pricing: Optional[str] = None
    location: Optional[str] = None
    verified: bool = False
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

@dataclass
class BrandProfile:
    """Brand Profile Model"""
    
    id: Optional[int] = None
    user_id: int = 0
    company_type: str = ""
    industry: str = ""
    marketing_goals: Optional[str] = None
    budget: Optional[str] = None
    past_campaigns: List[str] = field(default_factory=list)
    location: Optional[str] = None
    verified: bool = False
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)
