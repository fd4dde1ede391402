"""
One-time code verifier.

Reads the per-user TOTP secret; provisioning secrets is not handled here.
"""

import logging
import time
from typing import Callable, Optional

from sqlmodel import Session, select

from identity_core.core.config import settings
from identity_core.core.deadline import Deadline, check_deadline
from identity_core.core.security import verify_totp
from identity_core.models.credentials import UserTotpRecord
from identity_core.schemas.user import User

logger = logging.getLogger("identity_core.credentials.totp")


class TotpVerifier:
    """Verifies time-based one-time codes against a user's stored secret."""

    def __init__(
        self,
        session: Session,
        valid_window: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.session = session
        self.valid_window = valid_window if valid_window is not None else settings.TOTP_VALID_WINDOW
        self.clock = clock

    def verify(self, user: User, token: str, deadline: Optional[Deadline] = None) -> bool:
        """
        Returns True if ``token`` is a valid code for ``user`` right now.

        A user without a stored secret has the second factor disabled and
        always gets False. Malformed tokens are a plain mismatch.

        Every call costs a store round trip; repeated attempts should be
        limited by the caller.
        """
        check_deadline(deadline, "totp secret lookup")
        statement = select(UserTotpRecord.secret).where(UserTotpRecord.user_id == user.id)
        secret = self.session.exec(statement).first()

        if secret is None:
            logger.debug("No totp secret for user %s", user.id)
            return False

        valid = verify_totp(secret, token, for_time=self.clock(), valid_window=self.valid_window)
        logger.debug("Totp verification for user %s: %s", user.id, "match" if valid else "no match")
        return valid
