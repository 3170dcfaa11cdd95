"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from restful_users.domain.users.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving user records."""

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored user."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with the given id, or None."""
        raise NotImplementedError

    @abstractmethod
    def find_by_birth_date_between(self, start: date, end: date) -> list[User]:
        """Return users born within the date range.

        Args:
            start: First birth date of the range (inclusive).
            end: Last birth date of the range (inclusive).

        Returns:
            List of users ordered by birth date, then id.
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, user: User) -> User:
        """Insert a new user (id is None) or update an existing one.

        Returns:
            The stored user, with its id assigned.

        Raises:
            ConstraintViolationError: If storage rejects the write.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        """Remove the user with the given id."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        """Return True if a user with the given id is stored."""
        raise NotImplementedError
