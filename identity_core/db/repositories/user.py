"""
User repository.

Handles database operations for user identity records. Every read filters on
``UserStatus.ACTIVE``; inactive rows are invisible here.
"""

import logging
from functools import singledispatchmethod
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from identity_core.core.deadline import Deadline, check_deadline
from identity_core.core.exceptions import NotFound
from identity_core.models.user import UserRecord, UserStatus
from identity_core.schemas.user import NewUser, User

logger = logging.getLogger("identity_core.users.repository")


def record_to_model(record: UserRecord) -> User:
    """Map a stored row to the public ``User`` shape."""
    return User.model_validate(record)


class UserRepository:
    """Repository for user identity records."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def _active(self):
        return select(UserRecord).where(UserRecord.status == UserStatus.ACTIVE)

    def _get_one(self, statement, description: str) -> User:
        # More than one match means corrupt data and is reported like no match
        records = self.session.exec(statement).all()
        if len(records) != 1:
            logger.debug("%s matched %d active rows", description, len(records))
            raise NotFound(f"{description} not found")
        return record_to_model(records[0])

    def _commit(self, statement=None) -> None:
        # Failed writes leave the session usable for the next call
        try:
            if statement is not None:
                self.session.exec(statement)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def list_active(self, deadline: Optional[Deadline] = None) -> list[User]:
        """
        Get all active users in store order.

        Returns:
            List of users
        """
        check_deadline(deadline, "listing users")
        return [record_to_model(record) for record in self.session.exec(self._active()).all()]

    def get_by_id(self, user_id: int, deadline: Optional[Deadline] = None) -> User:
        """
        Get the active user with the given id.

        Args:
            user_id: User ID

        Returns:
            User instance

        Raises:
            NotFound: If zero or several active rows match
        """
        check_deadline(deadline, "user lookup")
        statement = self._active().where(UserRecord.id == user_id)
        return self._get_one(statement, f"User with id: {user_id}")

    def get_by_identity(self, identity: str, deadline: Optional[Deadline] = None) -> User:
        """
        Get the active user with the given identity.

        Args:
            identity: Email address or handle

        Returns:
            User instance

        Raises:
            NotFound: If zero or several active rows match
        """
        check_deadline(deadline, "user lookup")
        statement = self._active().where(UserRecord.identity == identity)
        return self._get_one(statement, f"User with identity: {identity}")

    @singledispatchmethod
    def save(self, user, deadline: Optional[Deadline] = None) -> User:
        """
        Persist a ``NewUser`` (insert) or a ``User`` (update).

        Returns:
            The stored user
        """
        raise TypeError(f"Cannot save object of type {type(user).__name__}")

    @save.register
    def _(self, user: NewUser, deadline: Optional[Deadline] = None) -> User:
        check_deadline(deadline, "user insert")
        record = UserRecord(
            identity=user.identity,
            nickname=user.nickname,
            type=user.type,
            status=UserStatus.ACTIVE,
        )
        self.session.add(record)
        self._commit()
        # Loads the store-assigned id and created timestamp
        self.session.refresh(record)
        logger.info("Created user %s", record.id)
        return record_to_model(record)

    @save.register
    def _(self, user: User, deadline: Optional[Deadline] = None) -> User:
        # type and created are immutable through this path
        check_deadline(deadline, "user update")
        statement = (
            update(UserRecord)
            .where(UserRecord.id == user.id)
            .values(identity=user.identity, nickname=user.nickname)
        )
        self._commit(statement)
        logger.info("Updated user %s", user.id)
        return user

    def deactivate(self, user: User, deadline: Optional[Deadline] = None) -> None:
        """
        Soft-delete a user.

        The row and its credentials stay in the store; the user disappears
        from every read of this repository.

        Args:
            user: User to deactivate
        """
        check_deadline(deadline, "user deactivation")
        statement = (
            update(UserRecord)
            .where(UserRecord.id == user.id)
            .values(status=UserStatus.INACTIVE)
        )
        self._commit(statement)
        logger.info("Deactivated user %s", user.id)
