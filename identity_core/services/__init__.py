"""Business logic services."""

from identity_core.services.credential_service import AttemptGuard, CredentialService, Factor

__all__ = [
    "AttemptGuard",
    "CredentialService",
    "Factor",
]
