"""
User Service
"""
from typing import Any, Dict, List, Mapping, Optional

from configs.settings import Settings
from data.models import User, UserRole
from data.repositories.user_repository import UserRepository
from data.store import EntityStore
from services.profile_service import ProfileService
from utils.exceptions import NotFoundError, ValidationError
from utils.logger import get_logger
from utils.security import hash_password

logger = get_logger(__name__)

class UserService:
    """Registration, lookup and admin management of users"""
    
    def __init__(self, store: EntityStore, profiles: ProfileService):
        self.users = UserRepository(store)
        self._profiles = profiles
    
    def register(self, username: str, password: str, email: str, role: Any,
                 name: str, bio: Optional[str] = None) -> User:
        """Register a new user with a hashed password"""
        if not password:
            raise ValidationError("Password cannot be empty")
        user = self.users.create(
            username=username,
            password=hash_password(password),
            email=email,
            role=role,
            name=name,
            bio=bio
        )
        logger.info("User registered", user_id=user.id, username=user.username, role=user.role.value)
        return user
    
    def get_user(self, user_id: int) -> User:
        return self.users.get_or_raise(user_id)
    
    def get_user_with_profile(self, user_id: int) -> Dict[str, Any]:
        """User plus whichever role profile exists"""
        user = self.users.get_or_raise(user_id)
        influencer_profile = self._profiles.find_profile(user_id, UserRole.INFLUENCER)
        brand_profile = self._profiles.find_profile(user_id, UserRole.BRAND)
        return {
            "user": user,
            "influencer_profile": influencer_profile,
            "brand_profile": brand_profile
        }
    
    def list_users(self, role: Optional[Any] = None) -> List[User]:
        return self.users.list(role)
    
    def update_user(self, user_id: int, fields: Mapping[str, Any],
                    verified: Optional[bool] = None) -> User:
        """Admin update of user fields and, optionally, profile verification"""
        fields = dict(fields)
        if fields.get("password"):
            fields["password"] = hash_password(fields["password"])
        user = self.users.update(user_id, fields)
        
        if verified is not None and self._profiles.find_profile(user_id, user.role) is not None:
            self._profiles.set_verified(user_id, user.role, verified)
        
        logger.info("User updated", user_id=user_id, fields=sorted(fields), verified=verified)
        return user
    
    def delete_user(self, user_id: int):
        if not self.users.delete(user_id):
            raise NotFoundError("User not found")
        logger.info("User deleted", user_id=user_id)
    
    def seed_admin(self, settings: Settings) -> Optional[User]:
        """Create the configured admin account if it does not exist yet"""
        if not (settings.seed_admin_username and settings.seed_admin_password and settings.seed_admin_email):
            return None
        existing = self.users.get_by_username(settings.seed_admin_username)
        if existing:
            return existing
        return self.register(
            username=settings.seed_admin_username,
            password=settings.seed_admin_password,
            email=settings.seed_admin_email,
            role=UserRole.ADMIN,
            name="Administrator"
        )
