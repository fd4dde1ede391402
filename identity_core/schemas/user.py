"""
User value records.

``NewUser`` and ``User`` are distinct shapes: one has never been stored, the
other carries the store-assigned ``id`` and ``created``. Neither exposes the
soft-deletion status.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NewUser(BaseModel):
    """A user that has not been persisted yet."""
    model_config = ConfigDict(frozen=True)

    identity: str = Field(..., min_length=1, max_length=255, description="Email address or handle")
    nickname: str = Field(..., max_length=255, description="Display name")
    type: int = Field(default=1, description="Role tag, opaque to this package")


class User(BaseModel):
    """A persisted, active user."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    identity: str = Field(..., min_length=1, max_length=255)
    nickname: str = Field(..., max_length=255)
    created: datetime
    type: int
