"""
User API routes
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_current_user, get_services
from data.models import User
from models.request import RegisterRequest
from models.response import UserResponse, UserWithProfileResponse, profile_response
from services import Services

router = APIRouter()

@router.post("/users", response_model=UserResponse, status_code=201)
async def register(
    request: RegisterRequest,
    services: Services = Depends(get_services)
) -> UserResponse:
    """Register a new user"""
    user = services.users.register(
        username=request.username,
        password=request.password,
        email=request.email,
        role=request.role,
        name=request.name,
        bio=request.bio
    )
    return UserResponse.from_user(user)

@router.get("/users/me", response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.from_user(user)

@router.get("/users/{user_id}", response_model=UserWithProfileResponse)
async def get_user(
    user_id: int,
    services: Services = Depends(get_services)
) -> UserWithProfileResponse:
    """Public view of a user with their profile"""
    result = services.users.get_user_with_profile(user_id)
    return UserWithProfileResponse(
        user=UserResponse.from_user(result["user"]),
        influencer_profile=profile_response(result["influencer_profile"]),
        brand_profile=profile_response(result["brand_profile"])
    )
