"""
Database engine and schema management.

Builds the SQLAlchemy engine from application settings and
creates the tables on startup. PostgreSQL (psycopg2) in
production; SQLite URLs are accepted for local runs and tests.
"""

import logging
from functools import lru_cache

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from restful_users.core.config import settings

logger = logging.getLogger(__name__)

metadata = MetaData()


def build_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across threads; an in-memory
    SQLite database is pinned to a single connection so that every
    checkout sees the same data.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the process-wide engine built from settings."""
    return build_engine(settings.get_database_url())


def create_schema(engine: Engine) -> None:
    """Create all registered tables that do not exist yet."""
    # Table definitions register themselves on ``metadata`` at import.
    from restful_users.infrastructure.users import tables  # noqa: F401

    metadata.create_all(engine)
    logger.info("Database schema ready: %s", ", ".join(sorted(metadata.tables)))
