"""
Adapter: User repository.

Implements UserRepository port.
Reads/writes the users table through SQLAlchemy Core.
"""

import logging
from datetime import date
from typing import Any, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from restful_users.domain.users.entities import User
from restful_users.domain.users.errors import ConstraintViolationError
from restful_users.domain.users.ports import UserRepository
from restful_users.infrastructure.users.tables import users_table

logger = logging.getLogger(__name__)


def _row_to_user(row: Row) -> User:
    """Map a users row to the User entity."""
    return User(
        id=row.id,
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        birth_date=row.birth_date,
        address=row.address,
        phone_number=row.phone_number,
    )


def _user_values(user: User) -> dict[str, Any]:
    return {
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "birth_date": user.birth_date,
        "address": user.address,
        "phone_number": user.phone_number,
    }


class SqlUserRepositoryAdapter(UserRepository):
    """SQL adapter for the users table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all(self) -> list[User]:
        """Return every user ordered by id."""
        query = select(users_table).order_by(users_table.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_user(r) for r in rows]

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with the given id, or None."""
        query = select(users_table).where(users_table.c.id == user_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).fetchone()

        if not row:
            return None

        return _row_to_user(row)

    def find_by_birth_date_between(self, start: date, end: date) -> list[User]:
        """Return users with ``start <= birth_date <= end``."""
        query = (
            select(users_table)
            .where(users_table.c.birth_date >= start)
            .where(users_table.c.birth_date <= end)
            .order_by(users_table.c.birth_date, users_table.c.id)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_user(r) for r in rows]

    def save(self, user: User) -> User:
        """Insert or update a user and return the stored record.

        Raises:
            ConstraintViolationError: On a uniqueness or integrity failure.
        """
        values = _user_values(user)
        try:
            with self._engine.begin() as conn:
                if user.id is None:
                    result = conn.execute(insert(users_table).values(**values))
                    user_id = result.inserted_primary_key[0]
                else:
                    user_id = user.id
                    result = conn.execute(
                        update(users_table)
                        .where(users_table.c.id == user_id)
                        .values(**values)
                    )
                    if result.rowcount == 0:
                        conn.execute(
                            insert(users_table).values(id=user_id, **values)
                        )
        except IntegrityError as exc:
            logger.warning("Integrity violation saving user: %s", exc.orig)
            raise ConstraintViolationError(str(exc.orig)) from exc

        logger.debug("Saved user: id=%s email=%s", user_id, user.email)
        return User(id=user_id, **values)

    def delete_by_id(self, user_id: int) -> None:
        """Delete the user with the given id, if present."""
        with self._engine.begin() as conn:
            conn.execute(delete(users_table).where(users_table.c.id == user_id))
        logger.debug("Deleted user: id=%s", user_id)

    def exists_by_id(self, user_id: int) -> bool:
        """Return True if a user with the given id is stored."""
        query = select(users_table.c.id).where(users_table.c.id == user_id)
        with self._engine.connect() as conn:
            return conn.execute(query).first() is not None
