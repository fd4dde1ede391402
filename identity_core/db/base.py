"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from identity_core.models.user import UserRecord  # noqa: F401
from identity_core.models.credentials import UserPasswordRecord, UserTotpRecord  # noqa: F401
