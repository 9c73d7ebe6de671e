"""
API package - routes and middleware
"""
from .routes import api_v1_router

__all__ = [
    "api_v1_router",
]
