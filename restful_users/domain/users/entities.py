"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class UserField(Enum):
    """Mutable user fields, keyed by their public (camelCase) name.

    The value of each member is the public name; ``attribute`` is the
    matching attribute on the ``User`` entity.
    """

    EMAIL = "email"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    BIRTH_DATE = "birthDate"
    ADDRESS = "address"
    PHONE_NUMBER = "phoneNumber"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self]

    @property
    def required(self) -> bool:
        return self not in (UserField.ADDRESS, UserField.PHONE_NUMBER)

    @property
    def max_length(self) -> Optional[int]:
        """Longest accepted string value; None for non-string fields."""
        return _MAX_LENGTHS.get(self)


NAME_MAX_LEN = 255
ADDRESS_MAX_LEN = 512
PHONE_MAX_LEN = 64

_ATTRIBUTES = {
    UserField.EMAIL: "email",
    UserField.FIRST_NAME: "first_name",
    UserField.LAST_NAME: "last_name",
    UserField.BIRTH_DATE: "birth_date",
    UserField.ADDRESS: "address",
    UserField.PHONE_NUMBER: "phone_number",
}

_MAX_LENGTHS = {
    UserField.EMAIL: NAME_MAX_LEN,
    UserField.FIRST_NAME: NAME_MAX_LEN,
    UserField.LAST_NAME: NAME_MAX_LEN,
    UserField.ADDRESS: ADDRESS_MAX_LEN,
    UserField.PHONE_NUMBER: PHONE_MAX_LEN,
}


@dataclass
class User:
    """A person's profile record.

    ``id`` is None until the record has been persisted; storage assigns it
    and it never changes afterwards.
    """

    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: Optional[str] = None
    phone_number: Optional[str] = None
    id: Optional[int] = None

    def assign(self, field: UserField, value: object) -> None:
        """Set a single mutable field."""
        setattr(self, field.attribute, value)

    def replace_fields(self, other: "User") -> None:
        """Overwrite every mutable field from ``other``, keeping this id."""
        for field in UserField:
            self.assign(field, getattr(other, field.attribute))
