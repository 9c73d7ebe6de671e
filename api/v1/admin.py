"""
Admin API routes
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from api.dependencies import get_services, require_admin
from data.models import User, UserRole
from models.request import AdminUserUpdate
from models.response import AdminStatisticsResponse, UserResponse
from services import Services
from utils.logger import get_logger
from utils.response_utils import success_response

logger = get_logger(__name__)
router = APIRouter(prefix="/admin")

@router.get("/users", response_model=List[UserResponse])
async def list_users(
    role: Optional[UserRole] = Query(None, description="Only users with this role"),
    admin: User = Depends(require_admin),
    services: Services = Depends(get_services)
) -> List[UserResponse]:
    return [UserResponse.from_user(user) for user in services.users.list_users(role)]

@router.put("/users/{user_id}")
async def update_user(
    user_id: int,
    request: AdminUserUpdate,
    admin: User = Depends(require_admin),
    services: Services = Depends(get_services)
):
    """Update user fields and profile verification"""
    fields = request.model_dump(exclude_unset=True)
    verified = fields.pop("verified", None)
    logger.info("Admin updating user", admin_id=admin.id, user_id=user_id)
    user = services.users.update_user(user_id, fields, verified=verified)
    return success_response(UserResponse.from_user(user).model_dump(mode="json"), "User updated successfully")

@router.delete("/users/{user_id}")
async def delete_user(
    user_id: int,
    admin: User = Depends(require_admin),
    services: Services = Depends(get_services)
):
    logger.info("Admin deleting user", admin_id=admin.id, user_id=user_id)
    services.users.delete_user(user_id)
    return success_response(message="User deleted successfully")

@router.get("/stats", response_model=AdminStatisticsResponse)
async def get_statistics(
    admin: User = Depends(require_admin),
    services: Services = Depends(get_services)
) -> AdminStatisticsResponse:
    """Dashboard aggregates"""
    return AdminStatisticsResponse(**services.admin.get_statistics())
