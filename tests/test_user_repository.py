"""
User repository tests
"""
import threading

import pytest

from data.models import UserRole
from utils.exceptions import ConflictError, NotFoundError, ValidationError


def _create(users, username="jane", email="jane@example.com", role="influencer", **kwargs):
    return users.create(
        username=username,
        password="hash",
        email=email,
        role=role,
        name=kwargs.pop("name", "Jane"),
        **kwargs
    )


def test_create_and_lookup(users):
    user = _create(users, bio="Travel")

    assert user.id == 1
    assert user.role == UserRole.INFLUENCER
    assert users.get(user.id).bio == "Travel"
    assert users.get_by_username("JANE").id == user.id
    assert users.get_by_email("Jane@Example.com").id == user.id


def test_username_and_email_unique_ignoring_case(users):
    _create(users)

    with pytest.raises(ConflictError, match="Username"):
        _create(users, username="Jane", email="other@example.com")
    with pytest.raises(ConflictError, match="Email"):
        _create(users, username="other", email="JANE@example.com")


def test_missing_required_field(users):
    with pytest.raises(ValidationError):
        _create(users, username="   ")


def test_invalid_role(users):
    with pytest.raises(ValidationError, match="Invalid role"):
        _create(users, role="moderator")


def test_update_keeps_role(users):
    user = _create(users)

    updated = users.update(user.id, {"name": "Janet", "role": UserRole.ADMIN})
    assert updated.name == "Janet"
    assert updated.role == UserRole.INFLUENCER


def test_update_rejects_taken_username(users):
    _create(users)
    other = _create(users, username="bob", email="bob@example.com")

    with pytest.raises(ConflictError):
        users.update(other.id, {"username": "JANE"})
    assert users.update(other.id, {"username": "Bob"}).username == "Bob"


def test_update_missing_user(users):
    with pytest.raises(NotFoundError, match="User not found"):
        users.update(42, {"name": "x"})
    with pytest.raises(NotFoundError):
        users.get_or_raise(42)


def test_list_and_count_by_role(users):
    _create(users)
    _create(users, username="acme", email="acme@example.com", role=UserRole.BRAND)
    _create(users, username="root", email="root@example.com", role=UserRole.ADMIN)

    assert [u.username for u in users.list(UserRole.BRAND)] == ["acme"]
    assert len(users.list()) == 3
    assert users.count_by_role() == {"influencer": 1, "brand": 1, "admin": 1}


def test_delete(users):
    user = _create(users)
    assert users.delete(user.id) is True
    assert users.get(user.id) is None


@pytest.mark.parametrize("field", ["username", "email", "name", "password"])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_update_rejects_empty_required_field(users, field, value):
    user = _create(users)

    with pytest.raises(ValidationError, match=field):
        users.update(user.id, {field: value})
    assert getattr(users.get(user.id), field) == getattr(user, field)


def test_concurrent_registration_admits_one(users):
    workers = 8
    barrier = threading.Barrier(workers)
    created, conflicts = [], []

    def register(n):
        barrier.wait()
        try:
            created.append(_create(users, username="Jane", email=f"jane{n}@example.com"))
        except ConflictError as e:
            conflicts.append(e)

    threads = [threading.Thread(target=register, args=(n,)) for n in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(created) == 1
    assert len(conflicts) == workers - 1
    assert len(users.list()) == 1


def test_concurrent_renames_admit_one(users):
    workers = 8
    targets = [_create(users, username=f"user{n}", email=f"user{n}@example.com") for n in range(workers)]
    barrier = threading.Barrier(workers)
    renamed, conflicts = [], []

    def rename(user):
        barrier.wait()
        try:
            renamed.append(users.update(user.id, {"username": "popular"}))
        except ConflictError as e:
            conflicts.append(e)

    threads = [threading.Thread(target=rename, args=(user,)) for user in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(renamed) == 1
    assert len(conflicts) == workers - 1
    assert [u.id for u in users.list() if u.username == "popular"] == [renamed[0].id]
