"""
Exceptions raised by the identity core.

Store and crypto library errors are not wrapped; they reach the caller as
raised by SQLAlchemy, bcrypt or pyotp.
"""


class IdentityCoreError(Exception):
    """Base class for errors raised by this package."""


class NotFound(IdentityCoreError):
    """No single active user matched the lookup key."""


class DeadlineExceeded(IdentityCoreError):
    """The caller-supplied deadline elapsed before the operation finished."""
