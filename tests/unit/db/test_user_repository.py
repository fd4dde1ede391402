"""
Tests for the user repository: active-only reads, NotFound on zero or
duplicate matches, and the insert/update split of ``save``.
"""

from datetime import datetime, timezone

import pytest

from identity_core.core.deadline import Deadline
from identity_core.core.exceptions import DeadlineExceeded, NotFound
from identity_core.models.user import UserRecord, UserStatus
from identity_core.schemas.user import NewUser, User


def _utc_now_seconds() -> datetime:
    # SQLite's CURRENT_TIMESTAMP is naive UTC with whole seconds
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


# ======================================================================
# save(NewUser)
# ======================================================================


class TestInsert:
    """Saving a NewUser inserts a row."""

    def test_first_user_gets_id_one(self, users):
        user = users.save(NewUser(identity="alice@example.com", nickname="Alice", type=1))

        assert isinstance(user, User)
        assert user.id == 1
        assert user.identity == "alice@example.com"
        assert user.nickname == "Alice"
        assert user.type == 1

    def test_created_is_set_by_store(self, users):
        before = _utc_now_seconds()
        user = users.save(NewUser(identity="bob@example.com", nickname="Bob", type=2))
        after = datetime.now(timezone.utc).replace(tzinfo=None)

        assert before <= user.created <= after

    def test_ids_are_fresh(self, users):
        first = users.save(NewUser(identity="a@example.com", nickname="A"))
        second = users.save(NewUser(identity="b@example.com", nickname="B"))

        assert first.id != second.id

    def test_created_column_is_timezone_aware(self):
        assert UserRecord.__table__.c.created.type.timezone is True

    def test_new_rows_are_active(self, users, session):
        user = users.save(NewUser(identity="a@example.com", nickname="A"))

        assert session.get(UserRecord, user.id).status == UserStatus.ACTIVE

    def test_unsupported_type_rejected(self, users):
        with pytest.raises(TypeError):
            users.save({"identity": "a@example.com", "nickname": "A", "type": 1})


# ======================================================================
# save(User)
# ======================================================================


class TestUpdate:
    """Saving a User updates identity and nickname only."""

    def test_returns_input_unchanged(self, users, alice):
        changed = alice.model_copy(update={"identity": "alice@new.com", "nickname": "Alicia"})

        assert users.save(changed) is changed

    def test_update_keeps_id_created_and_type(self, users, alice):
        changed = alice.model_copy(update={"identity": "alice@new.com", "nickname": "Alicia"})
        users.save(changed)

        stored = users.get_by_id(alice.id)
        assert stored.identity == "alice@new.com"
        assert stored.nickname == "Alicia"
        assert stored.id == alice.id
        assert stored.created == alice.created
        assert stored.type == alice.type

    def test_type_is_not_written(self, users, alice):
        users.save(alice.model_copy(update={"type": 9, "nickname": "Al"}))

        stored = users.get_by_id(alice.id)
        assert stored.type == 1
        assert stored.nickname == "Al"

    def test_created_is_not_written(self, users, alice):
        users.save(alice.model_copy(update={"created": datetime(2000, 1, 1)}))

        assert users.get_by_id(alice.id).created == alice.created


# ======================================================================
# Reads
# ======================================================================


class TestGetById:

    def test_found(self, users, alice):
        assert users.get_by_id(alice.id) == alice

    def test_missing_raises_not_found(self, users, alice):
        with pytest.raises(NotFound, match="9999"):
            users.get_by_id(9999)

    def test_inactive_raises_not_found(self, users, alice):
        users.deactivate(alice)

        with pytest.raises(NotFound):
            users.get_by_id(alice.id)


class TestGetByIdentity:

    def test_found(self, users, alice):
        user = users.get_by_identity("alice@example.com")

        assert user.identity == "alice@example.com"
        assert user.id == alice.id

    def test_missing_raises_not_found(self, users):
        with pytest.raises(NotFound, match="nobody@example.com"):
            users.get_by_identity("nobody@example.com")

    def test_duplicates_raise_not_found(self, users):
        users.save(NewUser(identity="twin@example.com", nickname="One"))
        users.save(NewUser(identity="twin@example.com", nickname="Two"))

        with pytest.raises(NotFound):
            users.get_by_identity("twin@example.com")

    def test_inactive_duplicate_is_ignored(self, users):
        old = users.save(NewUser(identity="twin@example.com", nickname="Old"))
        new = users.save(NewUser(identity="twin@example.com", nickname="New"))
        users.deactivate(old)

        assert users.get_by_identity("twin@example.com") == new


class TestListActive:

    def test_empty_store(self, users):
        assert users.list_active() == []

    def test_lists_only_active(self, users, alice):
        bob = users.save(NewUser(identity="bob@example.com", nickname="Bob"))
        users.deactivate(alice)

        assert users.list_active() == [bob]

    def test_no_status_in_output(self, users, alice):
        (user,) = users.list_active()

        assert set(user.model_dump()) == {"id", "identity", "nickname", "created", "type"}


# ======================================================================
# Deactivation
# ======================================================================


class TestDeactivate:

    def test_row_persists(self, users, alice, session):
        users.deactivate(alice)

        record = session.get(UserRecord, alice.id)
        assert record is not None
        assert record.status == UserStatus.INACTIVE
        assert record.identity == "alice@example.com"


# ======================================================================
# Deadlines
# ======================================================================


class TestDeadline:

    def test_expired_deadline_blocks_lookup(self, users, alice):
        expired = Deadline(expires_at=0.0, clock=lambda: 1.0)

        with pytest.raises(DeadlineExceeded):
            users.get_by_id(alice.id, deadline=expired)

    def test_expired_deadline_blocks_insert(self, users):
        expired = Deadline(expires_at=0.0, clock=lambda: 1.0)

        with pytest.raises(DeadlineExceeded):
            users.save(NewUser(identity="late@example.com", nickname="Late"), deadline=expired)
        assert users.list_active() == []

    def test_open_deadline_allows_lookup(self, users, alice):
        assert users.get_by_id(alice.id, deadline=Deadline.after(60)) == alice
