"""
Domain rules for user records.

Pure functions: age eligibility and partial-update coercion.
No framework imports. No IO. No side effects.
"""

from datetime import date
from typing import Any, Mapping

from restful_users.domain.users.entities import UserField
from restful_users.domain.users.errors import (
    InvalidFieldError,
    InvalidFieldValueError,
)


def latest_eligible_birth_date(today: date, min_age: int) -> date:
    """Return the latest birth date that is at least ``min_age`` years before ``today``.

    A 29 February ``today`` maps to 28 February in non-leap target years.
    """
    year = today.year - min_age
    try:
        return today.replace(year=year)
    except ValueError:
        return today.replace(year=year, day=28)


def is_old_enough(birth_date: date, today: date, min_age: int) -> bool:
    """Return True when ``birth_date`` denotes an age of at least ``min_age``."""
    return birth_date <= latest_eligible_birth_date(today, min_age)


def _coerce_date(field: UserField, value: Any) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise InvalidFieldValueError(field.value) from None
    raise InvalidFieldValueError(field.value)


def coerce_value(field: UserField, value: Any) -> Any:
    """Convert a raw update value into the type stored on the entity.

    Raises:
        InvalidFieldValueError: If the value has the wrong type, is too
            long, or is null or empty for a required field.
    """
    if value is None:
        if field.required:
            raise InvalidFieldValueError(field.value)
        return None
    if field is UserField.BIRTH_DATE:
        return _coerce_date(field, value)
    if not isinstance(value, str):
        raise InvalidFieldValueError(field.value)
    if field.required and not value:
        raise InvalidFieldValueError(field.value)
    if len(value) > field.max_length:
        raise InvalidFieldValueError(field.value)
    return value


def parse_updates(updates: Mapping[str, Any]) -> dict[UserField, Any]:
    """Validate a raw field-name -> value mapping for a partial update.

    Every key and value is checked before anything is returned, so callers
    never apply half of an invalid update.

    Raises:
        InvalidFieldError: On a key outside the patchable field set.
        InvalidFieldValueError: On a value that cannot be coerced.
    """
    parsed: dict[UserField, Any] = {}
    for key, value in updates.items():
        try:
            field = UserField(key)
        except ValueError:
            raise InvalidFieldError(key) from None
        parsed[field] = coerce_value(field, value)
    return parsed
