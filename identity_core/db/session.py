"""
Database session management.

Provides SQLModel engine and session creation.
"""

import sqlite3
from typing import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from identity_core.core.config import settings


def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    """
    Make SQLite enforce foreign keys on every connection of ``engine``.

    SQLite ignores REFERENCES clauses unless the pragma is set per
    connection; other backends are left alone. Must be called before the
    engine opens its first connection.

    Returns:
        The same engine
    """
    event.listen(engine, "connect", _set_sqlite_pragma)
    return engine


_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = enable_sqlite_foreign_keys(create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    pool_pre_ping=True,   # Verify connections before using
    connect_args=_connect_args,
))


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session for one unit of work.

    Each caller (request, thread) gets its own session; components never
    share one across threads.

    Yields:
        SQLModel Session instance

    Example:
        for session in get_db():
            users = UserRepository(session).list_active()
    """
    with Session(engine) as session:
        yield session
