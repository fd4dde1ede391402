"""Database repositories."""

from identity_core.db.repositories.user import UserRepository
from identity_core.db.repositories.password import PasswordCredentialStore
from identity_core.db.repositories.totp import TotpVerifier

__all__ = [
    "UserRepository",
    "PasswordCredentialStore",
    "TotpVerifier",
]
