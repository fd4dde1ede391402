"""
Credential database models.

Password hashes and one-time-code secrets, each owned by one user.
"""

from typing import Optional

from sqlalchemy import Column, LargeBinary
from sqlmodel import Field, SQLModel


class UserPasswordRecord(SQLModel, table=True):
    """
    One password credential slot.

    A user may hold any number of rows, all valid at once. ``id`` only fixes
    the order in which slots are compared.
    """
    __tablename__ = "user_passwords"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    password: bytes = Field(sa_column=Column(LargeBinary, nullable=False))


class UserTotpRecord(SQLModel, table=True):
    """Base32 one-time-code secret; at most one per user."""
    __tablename__ = "user_totp"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    secret: str = Field(max_length=255, nullable=False)
