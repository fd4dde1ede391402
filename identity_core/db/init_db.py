"""
Database initialization.

Creates the users and credential tables.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger("identity_core.db")


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Args:
        engine: Engine to create tables on, defaults to the configured one
    """
    # Import all models so SQLModel.metadata has them
    import identity_core.db.base  # noqa: F401

    if engine is None:
        from identity_core.db.session import engine

    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")
