"""
Tests for the SQL user repository adapter.

Runs against an in-memory SQLite database.
"""

from datetime import date

import pytest

from restful_users.domain.users.errors import ConstraintViolationError
from restful_users.infrastructure.users.user_repository import (
    SqlUserRepositoryAdapter,
)


@pytest.fixture
def repo(memory_engine) -> SqlUserRepositoryAdapter:
    return SqlUserRepositoryAdapter(engine=memory_engine)


class TestSave:
    """Tests for inserts and updates."""

    def test_insert_assigns_id(self, repo, user_factory) -> None:
        stored = repo.save(user_factory("John"))

        assert stored.id is not None
        assert repo.find_by_id(stored.id) == stored

    def test_ids_are_unique(self, repo, user_factory) -> None:
        first = repo.save(user_factory("John"))
        second = repo.save(user_factory("Jane"))

        assert first.id != second.id

    def test_update_keeps_id(self, repo, user_factory) -> None:
        stored = repo.save(user_factory("John"))
        stored.address = "NewAddr"

        updated = repo.save(stored)

        assert updated.id == stored.id
        assert repo.find_by_id(stored.id).address == "NewAddr"
        assert len(repo.find_all()) == 1

    def test_save_with_unknown_id_inserts(self, repo, user_factory) -> None:
        stored = repo.save(user_factory("John", id=50))

        assert stored.id == 50
        assert repo.exists_by_id(50)

    def test_duplicate_email_raises_constraint_violation(self, repo, user_factory) -> None:
        repo.save(user_factory("John"))

        with pytest.raises(ConstraintViolationError) as exc_info:
            repo.save(user_factory("John", first_name="Other"))

        assert "UNIQUE" in exc_info.value.detail
        assert len(repo.find_all()) == 1


class TestQueries:
    """Tests for reads."""

    def test_find_all_empty(self, repo) -> None:
        assert repo.find_all() == []

    def test_find_by_id_missing(self, repo) -> None:
        assert repo.find_by_id(123) is None

    def test_birth_date_round_trips_as_date(self, repo, user_factory) -> None:
        stored = repo.save(user_factory("John", birth_date=date(1990, 5, 15)))

        assert repo.find_by_id(stored.id).birth_date == date(1990, 5, 15)

    def test_find_by_birth_date_between(self, repo, user_factory) -> None:
        john = repo.save(user_factory("John", birth_date=date(1990, 5, 15)))
        jane = repo.save(user_factory("Jane", birth_date=date(1995, 8, 25)))
        repo.save(user_factory("Old", birth_date=date(1960, 1, 1)))

        users = repo.find_by_birth_date_between(date(1990, 1, 1), date(1995, 12, 31))

        assert users == [john, jane]

    def test_range_bounds_are_inclusive(self, repo, user_factory) -> None:
        first = repo.save(user_factory("First", birth_date=date(2000, 1, 1)))
        last = repo.save(user_factory("Last", birth_date=date(2022, 12, 31)))
        repo.save(user_factory("After", birth_date=date(2023, 1, 1)))
        repo.save(user_factory("Before", birth_date=date(1999, 12, 31)))

        users = repo.find_by_birth_date_between(date(2000, 1, 1), date(2022, 12, 31))

        assert users == [first, last]


class TestDelete:
    """Tests for delete and existence checks."""

    def test_delete_removes_user(self, repo, user_factory) -> None:
        stored = repo.save(user_factory("John"))

        repo.delete_by_id(stored.id)

        assert not repo.exists_by_id(stored.id)
        assert repo.find_all() == []

    def test_exists_by_id(self, repo, user_factory) -> None:
        stored = repo.save(user_factory("John"))

        assert repo.exists_by_id(stored.id)
        assert not repo.exists_by_id(stored.id + 1)
