"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a new user.

    Attributes:
        email: Contact e-mail, unique across users.
        first_name: Given name.
        last_name: Family name.
        birth_date: Date of birth; checked against the minimum age.
        address: Optional postal address.
        phone_number: Optional phone number.
    """

    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: Optional[str] = None
    phone_number: Optional[str] = None


@dataclass(frozen=True)
class PatchUserCommand:
    """Input DTO for a partial update.

    Attributes:
        user_id: Id of the user to update.
        updates: Public field name -> new value. Only listed fields change.
    """

    user_id: int
    updates: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ReplaceUserCommand:
    """Input DTO for overwriting every mutable field of a user."""

    user_id: int
    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: Optional[str] = None
    phone_number: Optional[str] = None


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for removing a user."""

    user_id: int


@dataclass(frozen=True)
class SearchUsersQuery:
    """Input DTO for a birth date range search.

    Attributes:
        date_from: First birth date of the range (inclusive).
        date_to: Last birth date of the range (inclusive).
    """

    date_from: date
    date_to: date


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a stored user."""

    id: int
    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: Optional[str]
    phone_number: Optional[str]
