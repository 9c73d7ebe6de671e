"""
API v1 routers
"""
from . import users, messages, profiles, discover, admin

__all__ = [
    "users",
    "messages",
    "profiles",
    "discover",
    "admin",
]
