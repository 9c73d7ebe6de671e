"""
Admin dashboard statistics
"""
from typing import Any, Dict

from services.messaging_service import MessagingService
from services.profile_service import ProfileService
from services.user_service import UserService

class AdminService:
    """Platform-wide aggregates for the admin dashboard"""
    
    def __init__(self, users: UserService, profiles: ProfileService, messaging: MessagingService):
        self._users = users
        self._profiles = profiles
        self._messaging = messaging
    
    def get_statistics(self) -> Dict[str, Any]:
        users_by_role = self._users.users.count_by_role()
        return {
            "users": {
                "total": sum(users_by_role.values()),
                "by_role": users_by_role
            },
            "profiles": self._profiles.profile_counts(),
            "messaging": self._messaging.get_statistics().to_dict()
        }
