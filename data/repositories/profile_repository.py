"""
Profile Data Access Layer
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple, Type

from data.models import BrandProfile, InfluencerProfile, User, UserRole
from data.store import Collection, EntityStore
from utils.exceptions import NotFoundError, ValidationError
from utils.validators import validate_required_fields

# Filter values meaning "do not filter on this field"
MATCH_ALL = frozenset({
    "", "any", "all", "worldwide",
    "all_categories", "all_platforms", "all_industries",
    "any_size", "any_budget",
})

# Audience size buckets by follower count, upper bound exclusive
AUDIENCE_SIZES: Dict[str, Tuple[int, Optional[int]]] = {
    "nano": (0, 10_000),
    "micro": (10_000, 100_000),
    "macro": (100_000, 1_000_000),
    "mega": (1_000_000, None),
}


def _normalize(value: Any) -> str:
    return str(value).strip().lower()


def _is_match_all(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, set, frozenset)):
        return all(_is_match_all(v) for v in value)
    return _normalize(value) in MATCH_ALL


def _as_set(value: Any) -> Set[str]:
    if isinstance(value, str):
        value = value.split(",")
    return {_normalize(v) for v in value if not _is_match_all(v)}


def audience_size_of(follower_count: Optional[int]) -> Optional[str]:
    if follower_count is None:
        return None
    for name, (low, high) in AUDIENCE_SIZES.items():
        if follower_count >= low and (high is None or follower_count < high):
            return name
    return None


class ProfileKind:
    """Role-specific profile variant.

    Subclasses name their collection, required fields, the fields filtered
    by case-insensitive equality, and the descriptive field used by search.
    """

    role: UserRole
    label: str
    model: Type
    collection_name: str
    required_fields: Tuple[str, ...] = ()
    exact_filters: Tuple[str, ...] = ("location",)
    search_field: str

    def collection(self, store: EntityStore) -> Collection:
        return store.collection(self.collection_name)

    def prepare(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Normalize incoming fields before they are stored"""
        return dict(fields)

    def _special_filter(self, profile: Any, key: str, value: Any) -> Optional[bool]:
        """Filters that are not plain equality; None if `key` is not one"""
        return None

    def matches(self, profile: Any, filters: Optional[Mapping[str, Any]]) -> bool:
        if not filters:
            return True
        for key, value in filters.items():
            if _is_match_all(value):
                continue
            special = self._special_filter(profile, key, value)
            if special is not None:
                if not special:
                    return False
                continue
            if key in self.exact_filters:
                actual = getattr(profile, key)
                if actual is None or _normalize(actual) != _normalize(value):
                    return False
        return True


class InfluencerKind(ProfileKind):
    role = UserRole.INFLUENCER
    label = "Influencer"
    model = InfluencerProfile
    collection_name = "influencer_profiles"
    required_fields = ("category", "platforms")
    exact_filters = ("category", "location")
    search_field = "category"

    def prepare(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields = dict(fields)
        for key in ("platforms", "content_samples"):
            if isinstance(fields.get(key), str):
                fields[key] = [fields[key]]
        if "content_samples" in fields and fields["content_samples"] is None:
            fields["content_samples"] = []
        return fields

    def _special_filter(self, profile: InfluencerProfile, key: str, value: Any) -> Optional[bool]:
        if key in ("platform", "platforms"):
            requested = _as_set(value)
            return not requested or bool(requested & {_normalize(p) for p in profile.platforms})
        if key == "audience_size":
            return audience_size_of(profile.follower_count) == _normalize(value)
        return None


class BrandKind(ProfileKind):
    role = UserRole.BRAND
    label = "Brand"
    model = BrandProfile
    collection_name = "brand_profiles"
    required_fields = ("company_type", "industry")
    exact_filters = ("industry", "company_type", "location", "budget")
    search_field = "industry"

    def prepare(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields = dict(fields)
        if isinstance(fields.get("past_campaigns"), str):
            fields["past_campaigns"] = [fields["past_campaigns"]]
        if "past_campaigns" in fields and fields["past_campaigns"] is None:
            fields["past_campaigns"] = []
        return fields


PROFILE_KINDS: Dict[UserRole, ProfileKind] = {
    UserRole.INFLUENCER: InfluencerKind(),
    UserRole.BRAND: BrandKind(),
}


def kind_for_role(role: Any) -> ProfileKind:
    """Profile kind for a role; admins have none"""
    try:
        return PROFILE_KINDS[UserRole(role)]
    except (KeyError, ValueError):
        raise ValidationError(f"Role '{getattr(role, 'value', role)}' has no profile kind") from None


class ProfileDirectory:
    """Profile CRUD-by-owner and discovery for one profile kind"""

    def __init__(self, store: EntityStore, kind: ProfileKind):
        self._store = store
        self.kind = kind

    @property
    def _profiles(self) -> Collection:
        return self.kind.collection(self._store)

    def _owned_by(self, user_id: int) -> Callable[[Any], bool]:
        return lambda profile: profile.user_id == user_id

    def find_by_owner(self, user_id: int):
        return self._profiles.find(self._owned_by(user_id))

    def get_by_owner(self, user_id: int):
        profile = self.find_by_owner(user_id)
        if profile is None:
            raise NotFoundError(f"{self.kind.label} profile not found")
        return profile

    def create(self, user_id: int, fields: Mapping[str, Any]):
        """Store a new unverified profile; one per owner"""
        fields = self.kind.prepare(fields)
        validate_required_fields(fields, self.kind.required_fields)
        for key in ("id", "user_id", "verified"):
            fields.pop(key, None)
        try:
            record = self.kind.model(user_id=user_id, verified=False, **fields)
        except TypeError as e:
            raise ValidationError(f"Invalid {self.kind.label.lower()} profile fields: {e}") from None

        return self._profiles.create_unique(
            record, {f"{self.kind.label} profile": self._owned_by(user_id)}
        )

    def update(self, user_id: int, fields: Mapping[str, Any]):
        """Merge fields into the owner's profile; required fields stay non-empty"""
        fields = self.kind.prepare(fields)
        validate_required_fields(fields, [name for name in self.kind.required_fields if name in fields])
        with self._profiles.lock:
            profile = self.get_by_owner(user_id)
            return self._profiles.update(profile.id, fields)

    def set_verified(self, user_id: int, verified: bool):
        return self.update(user_id, {"verified": bool(verified)})

    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List:
        """Profiles matching every supplied filter"""
        return self._profiles.list(lambda profile: self.kind.matches(profile, filters))

    def search(self, query: Optional[str]) -> List:
        """Case-insensitive substring match on owner name, category/industry and owner bio"""
        needle = _normalize(query or "")
        if not needle:
            return self.list()

        owners: Dict[int, User] = {user.id: user for user in self._store.users.list()}

        def haystack(profile) -> Iterable[str]:
            yield getattr(profile, self.kind.search_field) or ""
            owner = owners.get(profile.user_id)
            if owner is not None:
                yield owner.name or ""
                yield owner.bio or ""

        return self._profiles.list(
            lambda profile: any(needle in text.lower() for text in haystack(profile))
        )

    def count(self, verified: Optional[bool] = None) -> int:
        if verified is None:
            return self._profiles.count()
        return self._profiles.count(lambda profile: profile.verified == verified)
