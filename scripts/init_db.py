"""
Database initialization script.

Creates the users and credential tables on the configured DATABASE_URL.
Prefer `alembic upgrade head` for databases that must be migrated later.

Usage:
    python scripts/init_db.py
"""

import sys

from identity_core.core.logger import setup_logging
from identity_core.db.init_db import init_db

if __name__ == "__main__":
    logger = setup_logging()

    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)

    logger.info("Database initialized")
    sys.exit(0)
