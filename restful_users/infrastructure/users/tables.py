"""SQLAlchemy table definitions for the users bounded context."""

from sqlalchemy import Column, Date, Index, Integer, String, Table

from restful_users.domain.users.entities import (
    ADDRESS_MAX_LEN,
    NAME_MAX_LEN,
    PHONE_MAX_LEN,
)
from restful_users.infrastructure.database import metadata

users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(NAME_MAX_LEN), nullable=False, unique=True),
    Column("first_name", String(NAME_MAX_LEN), nullable=False),
    Column("last_name", String(NAME_MAX_LEN), nullable=False),
    Column("birth_date", Date, nullable=False),
    Column("address", String(ADDRESS_MAX_LEN), nullable=True),
    Column("phone_number", String(PHONE_MAX_LEN), nullable=True),
)

Index("ix_users_birth_date", users_table.c.birth_date)
