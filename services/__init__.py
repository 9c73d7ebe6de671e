"""
Service Layer Package
"""
from dataclasses import dataclass

from configs.settings import Settings, settings as default_settings
from data.store import EntityStore

from .messaging_service import MessagingService
from .profile_service import ProfileService
from .user_service import UserService
from .admin_service import AdminService

@dataclass
class Services:
    """Every service, sharing one entity store"""
    store: EntityStore
    users: UserService
    profiles: ProfileService
    messaging: MessagingService
    admin: AdminService

def build_services(store: EntityStore, settings: Settings = default_settings) -> Services:
    profiles = ProfileService(store)
    users = UserService(store, profiles)
    messaging = MessagingService(store, settings)
    return Services(
        store=store,
        users=users,
        profiles=profiles,
        messaging=messaging,
        admin=AdminService(users, profiles, messaging)
    )

__all__ = [
    "Services",
    "build_services",
    "MessagingService",
    "ProfileService",
    "UserService",
    "AdminService"
]
