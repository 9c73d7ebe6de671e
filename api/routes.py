"""
API route registration
"""
from fastapi import APIRouter

from .v1 import users, messages, profiles, discover, admin
from .health import router as health_router

api_v1_router = APIRouter()

api_v1_router.include_router(
    health_router,
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "Success"},
        503: {"description": "Service Unavailable"}
    }
)

api_v1_router.include_router(
    users.router,
    tags=["users"],
    responses={
        401: {"description": "Unauthorized"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"}
    }
)

api_v1_router.include_router(
    messages.router,
    tags=["messages"],
    responses={
        401: {"description": "Unauthorized"},
        404: {"description": "Not Found"},
        422: {"description": "Validation Error"}
    }
)

api_v1_router.include_router(
    profiles.router,
    tags=["profiles"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"}
    }
)

api_v1_router.include_router(
    discover.router,
    tags=["discover"],
    responses={
        200: {"description": "Success"}
    }
)

api_v1_router.include_router(
    admin.router,
    tags=["admin"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"}
    }
)

__all__ = ["api_v1_router"]
