"""
Credential service.

Resolves an identity to a user, then checks one proof factor for it.
"""

import enum
import logging
from typing import Optional, Protocol

from sqlmodel import Session

from identity_core.core.deadline import Deadline
from identity_core.core.exceptions import NotFound
from identity_core.db.repositories.password import PasswordCredentialStore
from identity_core.db.repositories.totp import TotpVerifier
from identity_core.db.repositories.user import UserRepository
from identity_core.schemas.user import User

logger = logging.getLogger("identity_core.credentials.service")


class Factor(str, enum.Enum):
    """Proof-of-identity factors this service can check."""
    PASSWORD = "password"
    TOTP = "totp"


class AttemptGuard(Protocol):
    """
    Hook for rate limiting and lockout, implemented outside this package.

    ``before_attempt`` may raise to refuse an attempt; the exception reaches
    the caller of :meth:`CredentialService.verify` unchanged. ``after_attempt``
    also runs with ``succeeded=False`` when the identity does not resolve, so
    guesses against unknown accounts can be counted.
    """

    def before_attempt(self, identity: str, factor: Factor) -> None:
        ...

    def after_attempt(self, identity: str, factor: Factor, succeeded: bool) -> None:
        ...


class CredentialService:
    """Answers "is this user, with this secret" for each factor."""

    def __init__(
        self,
        session: Session,
        users: Optional[UserRepository] = None,
        passwords: Optional[PasswordCredentialStore] = None,
        totp: Optional[TotpVerifier] = None,
        guard: Optional[AttemptGuard] = None,
    ):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session shared by the default components
            users: User repository, built from ``session`` if omitted
            passwords: Password store, built from ``session`` if omitted
            totp: One-time code verifier, built from ``session`` if omitted
            guard: Optional attempt guard wrapped around every verification
        """
        self.users = users or UserRepository(session)
        self.passwords = passwords or PasswordCredentialStore(session)
        self.totp = totp or TotpVerifier(session)
        self.guard = guard

    def resolve(self, identity: str, deadline: Optional[Deadline] = None) -> User:
        """
        Get the active user for ``identity``.

        Raises:
            NotFound: If no single active user has that identity
        """
        return self.users.get_by_identity(identity, deadline=deadline)

    def verify(self, identity: str, factor: Factor, value: str, deadline: Optional[Deadline] = None) -> bool:
        """
        Check ``value`` as the given factor for the user behind ``identity``.

        An unknown identity raises ``NotFound``; it is never reported as a
        failed verification.

        Args:
            identity: Email address or handle
            factor: Which proof is being submitted
            value: Password or one-time code

        Returns:
            True if the factor is valid for the user

        Raises:
            NotFound: If the identity does not resolve
            DeadlineExceeded: If ``deadline`` passes mid-way
        """
        factor = Factor(factor)
        if self.guard is not None:
            self.guard.before_attempt(identity, factor)

        try:
            user = self.resolve(identity, deadline=deadline)
        except NotFound:
            if self.guard is not None:
                self.guard.after_attempt(identity, factor, False)
            raise

        if factor is Factor.PASSWORD:
            succeeded = self.passwords.verify(user, value, deadline=deadline)
        else:
            succeeded = self.totp.verify(user, value, deadline=deadline)

        if not succeeded:
            logger.info("Failed %s verification for user %s", factor.value, user.id)
        if self.guard is not None:
            self.guard.after_attempt(identity, factor, succeeded)
        return succeeded

    def verify_password(self, identity: str, password: str, deadline: Optional[Deadline] = None) -> bool:
        """Shorthand for ``verify(identity, Factor.PASSWORD, password)``."""
        return self.verify(identity, Factor.PASSWORD, password, deadline=deadline)

    def verify_totp(self, identity: str, token: str, deadline: Optional[Deadline] = None) -> bool:
        """Shorthand for ``verify(identity, Factor.TOTP, token)``."""
        return self.verify(identity, Factor.TOTP, token, deadline=deadline)
