"""
Discovery API routes
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from api.dependencies import get_services
from data.models import UserRole
from models.response import (
    BrandListing,
    InfluencerListing,
    UserResponse,
    profile_response,
)
from services import Services
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

def _listing(profile, owner):
    return {
        "profile": profile_response(profile),
        "user": UserResponse.from_user(owner) if owner else None
    }

@router.get("/discover/influencers", response_model=List[InfluencerListing])
async def discover_influencers(
    category: Optional[str] = Query(None, description="Content category"),
    platform: Optional[List[str]] = Query(None, description="Any of these platforms"),
    location: Optional[str] = Query(None, description="Location"),
    audience_size: Optional[str] = Query(None, alias="audienceSize", description="nano, micro, macro or mega"),
    q: Optional[str] = Query(None, description="Free text search"),
    services: Services = Depends(get_services)
):
    """Find influencers"""
    filters = {
        "category": category,
        "platform": platform,
        "location": location,
        "audience_size": audience_size
    }
    logger.info("Discovering influencers", filters={k: v for k, v in filters.items() if v}, query=q)
    results = services.profiles.discover(UserRole.INFLUENCER, filters, q)
    return [_listing(profile, owner) for profile, owner in results]

@router.get("/discover/brands", response_model=List[BrandListing])
async def discover_brands(
    industry: Optional[str] = Query(None, description="Industry"),
    company_type: Optional[str] = Query(None, alias="companyType", description="Company type"),
    location: Optional[str] = Query(None, description="Location"),
    budget: Optional[str] = Query(None, description="Budget range"),
    q: Optional[str] = Query(None, description="Free text search"),
    services: Services = Depends(get_services)
):
    """Find brands"""
    filters = {
        "industry": industry,
        "company_type": company_type,
        "location": location,
        "budget": budget
    }
    logger.info("Discovering brands", filters={k: v for k, v in filters.items() if v}, query=q)
    results = services.profiles.discover(UserRole.BRAND, filters, q)
    return [_listing(profile, owner) for profile, owner in results]
