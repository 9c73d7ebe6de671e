"""
Shared fixtures - every test gets its own entity store
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from configs.settings import Settings
from data.models import UserRole
from data.repositories import MessageRepository, UserRepository
from data.store import EntityStore
from main import create_app
from services import build_services


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, LOG_LEVEL="WARNING")


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def users(store):
    return UserRepository(store)


@pytest.fixture
def messages(store):
    return MessageRepository(store)


@pytest.fixture
def make_user(users):
    """Create a user without going through password hashing"""
    counter = {"n": 0}

    def factory(role=UserRole.INFLUENCER, name=None, bio=None, username=None):
        counter["n"] += 1
        n = counter["n"]
        return users.create(
            username=username or f"user{n}",
            password="not-a-real-hash",
            email=f"{username or f'user{n}'}@example.com",
            role=role,
            name=name or f"User {n}",
            bio=bio
        )

    return factory


@pytest.fixture
def services(store, test_settings):
    return build_services(store, test_settings)


@pytest.fixture
def client(store, test_settings):
    app = create_app(store=store, app_settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client


def auth(user):
    """Request headers identifying `user`"""
    return {"X-User-Id": str(user.id)}
