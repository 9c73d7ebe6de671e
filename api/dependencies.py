"""
Request dependencies - service access and caller identity
"""
from typing import Callable, Optional

from fastapi import Depends, Header, Request

from data.models import User, UserRole
from services import Services
from utils.exceptions import ForbiddenError, UnauthorizedError

def get_services(request: Request) -> Services:
    """Services bound to the application's entity store"""
    return request.app.state.services

async def get_current_user(
    x_user_id: Optional[int] = Header(None, alias="X-User-Id"),
    services: Services = Depends(get_services)
) -> User:
    """Resolve the authenticated caller from the X-User-Id header"""
    if x_user_id is None:
        raise UnauthorizedError("Missing X-User-Id header")
    user = services.users.users.get(x_user_id)
    if user is None:
        raise UnauthorizedError("Unknown user")
    return user

def require_role(*roles: UserRole) -> Callable:
    """Dependency rejecting callers whose role is not listed"""
    async def dependency(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise ForbiddenError(
                f"Only {' or '.join(role.value for role in roles)} users can do this"
            )
        return user
    return dependency

require_admin = require_role(UserRole.ADMIN)
