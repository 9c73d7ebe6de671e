"""
Profile Service
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from data.models import User, UserRole
from data.repositories.profile_repository import PROFILE_KINDS, ProfileDirectory, kind_for_role
from data.store import EntityStore
from utils.logger import get_logger

logger = get_logger(__name__)

class ProfileService:
    """Role-aware access to influencer and brand profiles"""
    
    def __init__(self, store: EntityStore):
        self._store = store
        self.directories: Dict[UserRole, ProfileDirectory] = {
            role: ProfileDirectory(store, kind) for role, kind in PROFILE_KINDS.items()
        }
    
    def directory_for(self, role: Any) -> ProfileDirectory:
        return self.directories[kind_for_role(role).role]
    
    def get_profile(self, user_id: int, role: Any):
        return self.directory_for(role).get_by_owner(user_id)
    
    def find_profile(self, user_id: int, role: Any):
        """Profile for the user, or None when the role has no profile yet"""
        directory = self.directories.get(UserRole(role))
        return directory.find_by_owner(user_id) if directory else None
    
    def create_profile(self, user_id: int, role: Any, fields: Mapping[str, Any]):
        profile = self.directory_for(role).create(user_id, fields)
        logger.info("Profile created", profile_id=profile.id, user_id=user_id, role=UserRole(role).value)
        return profile
    
    def update_profile(self, user_id: int, role: Any, fields: Mapping[str, Any]):
        profile = self.directory_for(role).update(user_id, fields)
        logger.info("Profile updated", profile_id=profile.id, user_id=user_id, fields=sorted(fields))
        return profile
    
    def set_verified(self, user_id: int, role: Any, verified: bool):
        profile = self.directory_for(role).set_verified(user_id, verified)
        logger.info("Profile verification changed", user_id=user_id, verified=verified)
        return profile
    
    def discover(self, role: Any, filters: Optional[Mapping[str, Any]] = None,
                 query: Optional[str] = None) -> List[Tuple[Any, Optional[User]]]:
        """Filtered (and optionally searched) profiles paired with their owners"""
        directory = self.directory_for(role)
        profiles = directory.list(filters)
        if query:
            matched = {profile.id for profile in directory.search(query)}
            profiles = [profile for profile in profiles if profile.id in matched]
        return [(profile, self._store.users.get(profile.user_id)) for profile in profiles]
    
    def profile_counts(self) -> Dict[str, Dict[str, int]]:
        return {
            role.value: {
                "total": directory.count(),
                "verified": directory.count(verified=True)
            }
            for role, directory in self.directories.items()
        }
