"""
User Data Access Layer
"""
from typing import Any, Dict, List, Mapping, Optional

from data.models import User, UserRole
from data.store import EntityStore
from utils.exceptions import NotFoundError, ValidationError
from utils.time_utils import now
from utils.validators import validate_required_fields

REQUIRED_FIELDS = ("username", "password", "email", "name")


def _same_text(a: Optional[str], b: Optional[str]) -> bool:
    return (a or "").lower() == (b or "").lower()


class UserRepository:
    """User Data Access Class"""

    def __init__(self, store: EntityStore):
        self._store = store

    def _uniqueness(self, username: Optional[str], email: Optional[str]) -> Dict[str, Any]:
        conflicts = {}
        if username is not None:
            conflicts["Username"] = lambda user: _same_text(user.username, username)
        if email is not None:
            conflicts["Email"] = lambda user: _same_text(user.email, email)
        return conflicts

    def create(self, username: str, password: str, email: str, role: Any, name: str,
               bio: Optional[str] = None, profile_image: Optional[str] = None,
               cover_image: Optional[str] = None) -> User:
        """Create a user; username and email are unique ignoring case"""
        validate_required_fields(
            {"username": username, "password": password, "email": email, "name": name},
            REQUIRED_FIELDS
        )
        try:
            role = UserRole(role)
        except ValueError:
            raise ValidationError(f"Invalid role: {role}") from None

        user = User(
            username=username.strip(),
            password=password,
            email=email.strip(),
            role=role,
            name=name,
            bio=bio,
            profile_image=profile_image,
            cover_image=cover_image,
            created_at=now()
        )
        return self._store.users.create_unique(user, self._uniqueness(user.username, user.email))

    def get(self, user_id: int) -> Optional[User]:
        return self._store.users.get(user_id)

    def get_or_raise(self, user_id: int) -> User:
        user = self.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_by_username(self, username: str) -> Optional[User]:
        return self._store.users.find(lambda user: _same_text(user.username, username))

    def get_by_email(self, email: str) -> Optional[User]:
        return self._store.users.find(lambda user: _same_text(user.email, email))

    def update(self, user_id: int, fields: Mapping[str, Any]) -> User:
        """Partial update; id, role and created_at are kept"""
        fields = dict(fields)
        validate_required_fields(fields, [name for name in REQUIRED_FIELDS if name in fields])
        for key in ("username", "email"):
            if isinstance(fields.get(key), str):
                fields[key] = fields[key].strip()

        conflicts = self._uniqueness(fields.get("username"), fields.get("email"))
        try:
            return self._store.users.update(user_id, fields, conflicts=conflicts)
        except NotFoundError:
            raise NotFoundError("User not found") from None

    def list(self, role: Optional[Any] = None) -> List[User]:
        if role is None:
            return self._store.users.list()
        role = UserRole(role)
        return self._store.users.list(lambda user: user.role == role)

    def count_by_role(self) -> Dict[str, int]:
        counts = {role.value: 0 for role in UserRole}
        for user in self._store.users.list():
            counts[user.role.value] += 1
        return counts

    def delete(self, user_id: int) -> bool:
        return self._store.users.delete(user_id)
