"""
Central security module. All cryptographic primitives live here; no other
module touches bcrypt or pyotp directly.

Responsibilities
----------------
1. Password hashing / verification          (bcrypt)
2. Time-based one-time code checks          (pyotp, RFC 6238)
"""

from typing import Optional

import bcrypt
import pyotp

# bcrypt only reads the first 72 bytes of its input; longer passwords are
# truncated before hashing and before comparison
BCRYPT_MAX_PASSWORD_BYTES = 72


# ---------------------------------------------------------------------------
# 1.  bcrypt - password hashing
# ---------------------------------------------------------------------------


def _encode_password(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain: str, rounds: int = 12) -> bytes:
    """
    Hash a plaintext password with bcrypt.

    The salt is embedded in the returned hash (``$2b$<cost>$...``). Only the
    first 72 UTF-8 bytes of ``plain`` take part.

    Args:
        plain: Plaintext password
        rounds: bcrypt cost factor (log2 of the iteration count)

    Returns:
        The full bcrypt hash as bytes
    """
    return bcrypt.hashpw(_encode_password(plain), bcrypt.gensalt(rounds=rounds))


def verify_password(plain: str, stored_hash: bytes) -> bool:
    """
    Check a plaintext password against one hash produced by :func:`hash_password`.

    Truncated the same way as :func:`hash_password`, so hashes made by other
    bcrypt implementations of long passwords still match. A malformed
    ``stored_hash`` raises ``ValueError`` from bcrypt.
    """
    return bcrypt.checkpw(_encode_password(plain), bytes(stored_hash))


# ---------------------------------------------------------------------------
# 2.  TOTP - one-time codes
# ---------------------------------------------------------------------------


def verify_totp(secret: str, token: str, for_time: Optional[float] = None, valid_window: int = 1) -> bool:
    """
    Validate a one-time code against a base32 secret.

    Accepts the code of the current time step and of ``valid_window`` steps on
    either side. Anything that is not a string of ASCII digits of the right
    length is a mismatch. An invalid base32 secret raises ``binascii.Error`` from pyotp.
    """
    totp = pyotp.TOTP(secret)
    # Decode up front so a corrupt secret fails whatever the token
    totp.byte_secret()
    if not isinstance(token, str) or not (token.isascii() and token.isdigit()) or len(token) != totp.digits:
        return False
    if for_time is None:
        return totp.verify(token, valid_window=valid_window)
    return totp.verify(token, for_time=int(for_time), valid_window=valid_window)
