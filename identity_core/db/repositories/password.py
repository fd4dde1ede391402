"""
Password credential store.

Keeps any number of bcrypt hashes per user. Every stored hash is a valid
password for its owner; adding one never invalidates another, and nothing in
this module removes them.
"""

import logging
from typing import Literal, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from identity_core.core.config import settings
from identity_core.core.deadline import Deadline, check_deadline
from identity_core.core.security import hash_password, verify_password
from identity_core.models.credentials import UserPasswordRecord
from identity_core.schemas.user import User

logger = logging.getLogger("identity_core.credentials.password")

ComparePolicy = Literal["first_match", "all_slots"]


class PasswordCredentialStore:
    """Stores and verifies password credentials keyed by user."""

    def __init__(
        self,
        session: Session,
        rounds: Optional[int] = None,
        compare_policy: Optional[ComparePolicy] = None,
    ):
        """
        Args:
            session: SQLModel database session
            rounds: bcrypt cost factor, defaults to ``settings.BCRYPT_ROUNDS``
            compare_policy: ``first_match`` stops at the first matching slot;
                ``all_slots`` compares every slot whatever the outcome.
                Defaults to ``settings.PASSWORD_COMPARE_POLICY``.
        """
        self.session = session
        self.rounds = rounds if rounds is not None else settings.BCRYPT_ROUNDS
        self.compare_policy = compare_policy or settings.PASSWORD_COMPARE_POLICY
        if self.compare_policy not in ("first_match", "all_slots"):
            raise ValueError(f"Unknown password compare policy: {self.compare_policy!r}")

    def add_credential(self, user: User, plaintext: str, deadline: Optional[Deadline] = None) -> None:
        """
        Hash ``plaintext`` and store it as a new credential slot for ``user``.

        Existing slots are left untouched, so repeated calls accumulate
        passwords that are all accepted. Only the first 72 UTF-8 bytes of
        ``plaintext`` are significant.
        """
        check_deadline(deadline, "password hashing")
        hashed = hash_password(plaintext, rounds=self.rounds)

        check_deadline(deadline, "credential insert")
        self.session.add(UserPasswordRecord(user_id=user.id, password=hashed))
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        logger.info("Added password credential for user %s", user.id)

    def verify(self, user: User, candidate: str, deadline: Optional[Deadline] = None) -> bool:
        """
        Check ``candidate`` against every password slot of ``user``.

        Slots are compared in store order. Under ``first_match`` the loop ends
        at the first hit, so the time taken reveals which slot matched; use
        ``all_slots`` where that matters.

        Every call pays for a full bcrypt comparison per slot compared. There
        is no throttling here; repeated failures should be limited by the
        caller.

        Returns:
            True if any slot matches, False otherwise (including no slots)
        """
        check_deadline(deadline, "credential lookup")
        statement = (
            select(UserPasswordRecord.password)
            .where(UserPasswordRecord.user_id == user.id)
            .order_by(UserPasswordRecord.id)
        )
        hashes = self.session.exec(statement).all()

        matched = False
        for stored_hash in hashes:
            check_deadline(deadline, "password comparison")
            if verify_password(candidate, stored_hash):
                matched = True
                if self.compare_policy == "first_match":
                    break

        logger.debug(
            "Password verification for user %s against %d slots: %s",
            user.id, len(hashes), "match" if matched else "no match",
        )
        return matched
