"""
User database model.

Defines the users table holding identity records.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, func
from sqlmodel import Field, SQLModel


class UserStatus(str, enum.Enum):
    """Soft-deletion state of a user row."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class UserRecord(SQLModel, table=True):
    """
    Stored user identity.

    Rows are never deleted; deactivation flips ``status`` and the row, along
    with its credentials, stays in place.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Not unique: an inactive row keeps its identity
    identity: str = Field(index=True, max_length=255, nullable=False)
    nickname: str = Field(max_length=255, nullable=False)
    # Timezone-aware where the backend has a timestamptz type; SQLite keeps naive UTC
    created: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )
    type: int = Field(default=1, nullable=False)
    status: UserStatus = Field(default=UserStatus.ACTIVE, nullable=False, index=True)
