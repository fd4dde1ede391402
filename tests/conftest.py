"""
Shared fixtures: an in-memory SQLite store with the full schema, and the
credential components wired to it with a cheap bcrypt cost.
"""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import identity_core.db.base  # noqa: F401
from identity_core.db.repositories import PasswordCredentialStore, TotpVerifier, UserRepository
from identity_core.db.session import enable_sqlite_foreign_keys
from identity_core.schemas.user import NewUser
from identity_core.services.credential_service import CredentialService

# Lowest cost bcrypt accepts; keeps the suite fast
TEST_BCRYPT_ROUNDS = 4

# Fixed instant for one-time code tests (2023-11-14 22:13:20 UTC)
FIXED_NOW = 1_700_000_000

TOTP_SECRET = "JBSWY3DPEHPK3PXP"


@pytest.fixture
def engine():
    engine = enable_sqlite_foreign_keys(create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    ))
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def users(session):
    return UserRepository(session)


@pytest.fixture
def passwords(session):
    return PasswordCredentialStore(session, rounds=TEST_BCRYPT_ROUNDS, compare_policy="first_match")


@pytest.fixture
def totp(session):
    return TotpVerifier(session, valid_window=1, clock=lambda: FIXED_NOW)


@pytest.fixture
def service(session, users, passwords, totp):
    return CredentialService(session, users=users, passwords=passwords, totp=totp)


@pytest.fixture
def alice(users):
    return users.save(NewUser(identity="alice@example.com", nickname="Alice", type=1))


@pytest.fixture
def password_store(session):
    """Build a password store with a given comparison policy."""
    def factory(compare_policy="first_match"):
        return PasswordCredentialStore(session, rounds=TEST_BCRYPT_ROUNDS, compare_policy=compare_policy)
    return factory


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def totp_secret():
    return TOTP_SECRET
