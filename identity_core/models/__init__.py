"""SQLModel database models."""

from identity_core.models.user import UserRecord, UserStatus
from identity_core.models.credentials import UserPasswordRecord, UserTotpRecord

__all__ = [
    "UserRecord",
    "UserStatus",
    "UserPasswordRecord",
    "UserTotpRecord",
]
