"""
In-memory entity store
"""
import copy
import threading
from dataclasses import fields, replace
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from data.models import User, InfluencerProfile, BrandProfile, Message
from utils.exceptions import ConflictError, NotFoundError, ValidationError

T = TypeVar("T")
Predicate = Callable[[Any], bool]


class Collection(Generic[T]):
    """Keyed records with monotonic id allocation.

    Records are dataclasses. Callers always receive copies, so the only way
    to change stored state is through this class. `protected_fields` are
    silently preserved by `update`.
    """

    def __init__(self, name: str, model: Type[T], protected_fields: Iterable[str] = ()):
        self.name = name
        self.model = model
        self._records: Dict[int, T] = {}
        self._next_id = 1
        self._field_names = frozenset(f.name for f in fields(model))
        self._protected = frozenset(protected_fields) | {"id"}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def _allocate_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def _check_conflicts(self, conflicts: Mapping[str, Predicate], exclude_id: Optional[int] = None):
        for label, predicate in conflicts.items():
            for record_id, record in self._records.items():
                if record_id != exclude_id and predicate(record):
                    raise ConflictError(f"{label} already exists")

    def _merge(self, record: T, changes: Mapping[str, Any]) -> T:
        unknown = set(changes) - self._field_names
        if unknown:
            raise ValidationError(f"Unknown {self.name} fields: {', '.join(sorted(unknown))}")
        allowed = {k: v for k, v in changes.items() if k not in self._protected}
        return replace(record, **copy.deepcopy(allowed))

    def create(self, record: T) -> T:
        """Assign the next id, store, and return the stored record"""
        with self.lock:
            stored = replace(copy.deepcopy(record), id=self._allocate_id())
            self._records[stored.id] = stored
            return copy.deepcopy(stored)

    def create_unique(self, record: T, conflicts: Mapping[str, Predicate]) -> T:
        """Check-and-insert as one step; raises ConflictError on a match"""
        with self.lock:
            self._check_conflicts(conflicts)
            return self.create(record)

    def get(self, record_id: int) -> Optional[T]:
        record = self._records.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def find(self, predicate: Predicate) -> Optional[T]:
        """First record, in insertion order, matching the predicate"""
        with self.lock:
            for record in self._records.values():
                if predicate(record):
                    return copy.deepcopy(record)
        return None

    def list(self, predicate: Optional[Predicate] = None) -> List[T]:
        with self.lock:
            return [
                copy.deepcopy(record)
                for record in self._records.values()
                if predicate is None or predicate(record)
            ]

    def count(self, predicate: Optional[Predicate] = None) -> int:
        with self.lock:
            if predicate is None:
                return len(self._records)
            return sum(1 for record in self._records.values() if predicate(record))

    def update(self, record_id: int, changes: Mapping[str, Any],
               conflicts: Optional[Mapping[str, Predicate]] = None) -> T:
        """Merge `changes` into the stored record"""
        with self.lock:
            current = self._records.get(record_id)
            if current is None:
                raise NotFoundError(f"{self.name} record {record_id} not found")
            if conflicts:
                self._check_conflicts(conflicts, exclude_id=record_id)
            updated = self._merge(current, changes)
            self._records[record_id] = updated
            return copy.deepcopy(updated)

    def update_where(self, predicate: Predicate, changes: Mapping[str, Any]) -> int:
        """Apply `changes` to every matching record, returning how many matched"""
        with self.lock:
            matched = [record_id for record_id, record in self._records.items() if predicate(record)]
            for record_id in matched:
                self._records[record_id] = self._merge(self._records[record_id], changes)
            return len(matched)

    def delete(self, record_id: int) -> bool:
        with self.lock:
            return self._records.pop(record_id, None) is not None

    def clear(self):
        """Drop all records and restart id allocation"""
        with self.lock:
            self._records.clear()
            self._next_id = 1


class EntityStore:
    """Owner of every record in the process"""

    def __init__(self):
        self.users: Collection[User] = Collection(
            "users", User, protected_fields=("role", "created_at")
        )
        self.influencer_profiles: Collection[InfluencerProfile] = Collection(
            "influencer_profiles", InfluencerProfile, protected_fields=("user_id",)
        )
        self.brand_profiles: Collection[BrandProfile] = Collection(
            "brand_profiles", BrandProfile, protected_fields=("user_id",)
        )
        self.messages: Collection[Message] = Collection(
            "messages", Message,
            protected_fields=("sender_id", "recipient_id", "content", "created_at")
        )

    def collections(self) -> Dict[str, Collection]:
        return {
            "users": self.users,
            "influencer_profiles": self.influencer_profiles,
            "brand_profiles": self.brand_profiles,
            "messages": self.messages,
        }

    def collection(self, name: str) -> Collection:
        try:
            return self.collections()[name]
        except KeyError:
            raise ValueError(f"Unknown collection: {name}") from None

    def sizes(self) -> Dict[str, int]:
        """Record count per collection"""
        return {name: len(collection) for name, collection in self.collections().items()}

    def reset(self):
        for collection in self.collections().values():
            collection.clear()
