"""
Profile API routes
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_services, require_role
from data.models import User, UserRole
from models.request import (
    BrandProfileRequest,
    BrandProfileUpdate,
    InfluencerProfileRequest,
    InfluencerProfileUpdate,
)
from models.response import (
    BrandProfileResponse,
    InfluencerProfileResponse,
    profile_response,
)
from services import Services

router = APIRouter()

require_influencer = require_role(UserRole.INFLUENCER)
require_brand = require_role(UserRole.BRAND)

@router.post("/profile/influencer", response_model=InfluencerProfileResponse, status_code=201)
async def create_influencer_profile(
    request: InfluencerProfileRequest,
    user: User = Depends(require_influencer),
    services: Services = Depends(get_services)
):
    """Create the caller's influencer profile"""
    profile = services.profiles.create_profile(user.id, user.role, request.model_dump())
    return profile_response(profile)

@router.put("/profile/influencer", response_model=InfluencerProfileResponse)
async def update_influencer_profile(
    request: InfluencerProfileUpdate,
    user: User = Depends(require_influencer),
    services: Services = Depends(get_services)
):
    """Update the caller's influencer profile"""
    profile = services.profiles.update_profile(user.id, user.role, request.model_dump(exclude_unset=True))
    return profile_response(profile)

@router.get("/profile/influencer", response_model=InfluencerProfileResponse)
async def get_influencer_profile(
    user: User = Depends(require_influencer),
    services: Services = Depends(get_services)
):
    return profile_response(services.profiles.get_profile(user.id, user.role))

@router.post("/profile/brand", response_model=BrandProfileResponse, status_code=201)
async def create_brand_profile(
    request: BrandProfileRequest,
    user: User = Depends(require_brand),
    services: Services = Depends(get_services)
):
    """Create the caller's brand profile"""
    profile = services.profiles.create_profile(user.id, user.role, request.model_dump())
    return profile_response(profile)

@router.put("/profile/brand", response_model=BrandProfileResponse)
async def update_brand_profile(
    request: BrandProfileUpdate,
    user: User = Depends(require_brand),
    services: Services = Depends(get_services)
):
    """Update the caller's brand profile"""
    profile = services.profiles.update_profile(user.id, user.role, request.model_dump(exclude_unset=True))
    return profile_response(profile)

@router.get("/profile/brand", response_model=BrandProfileResponse)
async def get_brand_profile(
    user: User = Depends(require_brand),
    services: Services = Depends(get_services)
):
    return profile_response(services.profiles.get_profile(user.id, user.role))
