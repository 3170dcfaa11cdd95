"""
Shared pytest configuration.

Points the application at a throw-away SQLite database and disables
rate limiting before ``restful_users`` is imported anywhere.
"""

import os
import tempfile
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="restful-users-tests-"))

os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB_DIR / 'users.db'}"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["MIN_USER_AGE"] = "18"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402

from restful_users.domain.users.entities import User  # noqa: E402
from restful_users.domain.users.ports import UserRepository  # noqa: E402
from restful_users.infrastructure.database import (  # noqa: E402
    build_engine,
    create_schema,
    get_engine,
)
from restful_users.infrastructure.users.tables import users_table  # noqa: E402
from restful_users.main import app  # noqa: E402

MIN_AGE = 18


def make_user(name: str, birth_date: date = date(1990, 5, 15), **overrides) -> User:
    """Build a User with predictable defaults derived from ``name``."""
    values = {
        "email": f"{name.lower()}@gmail.com",
        "first_name": name,
        "last_name": "Lastname",
        "birth_date": birth_date,
    }
    values.update(overrides)
    return User(**values)


@pytest.fixture
def user_repo() -> MagicMock:
    """A UserRepository double; ``save`` echoes the user back with an id."""
    repo = MagicMock(spec=UserRepository)

    def _save(user: User) -> User:
        if user.id is None:
            user.id = 1
        return user

    repo.save.side_effect = _save
    return repo


@pytest.fixture
def memory_engine():
    """An in-memory SQLite engine with the schema created."""
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client():
    """A TestClient running the app lifespan, with overrides cleared afterwards."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def clean_db(client):
    """Empty the users table of the application database before a test."""
    with get_engine().begin() as conn:
        conn.execute(delete(users_table))
    return client


@pytest.fixture
def user_factory():
    """Return the ``make_user`` builder."""
    return make_user
