"""Pydantic value records returned to callers."""

from identity_core.schemas.user import NewUser, User

__all__ = [
    "NewUser",
    "User",
]
