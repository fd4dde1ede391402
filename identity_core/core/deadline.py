"""
Caller-supplied deadlines.

A :class:`Deadline` is checked before every store round trip and every hash
computation. It cannot interrupt a statement or a bcrypt round already in
progress; the next checkpoint raises :class:`DeadlineExceeded` instead.
"""

import time
from typing import Callable, Optional

from identity_core.core.exceptions import DeadlineExceeded


class Deadline:
    """A point in monotonic time after which work must stop."""

    def __init__(self, expires_at: float, clock: Callable[[], float] = time.monotonic):
        self.expires_at = expires_at
        self._clock = clock

    @classmethod
    def after(cls, seconds: float, clock: Callable[[], float] = time.monotonic) -> "Deadline":
        """Build a deadline ``seconds`` from now."""
        return cls(clock() + seconds, clock=clock)

    def remaining(self) -> float:
        return max(0.0, self.expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self._clock() >= self.expires_at

    def check(self, operation: str) -> None:
        """
        Raise if the deadline has passed.

        Args:
            operation: Short name of the step about to run, used in the message

        Raises:
            DeadlineExceeded: If no time remains
        """
        if self.expired:
            raise DeadlineExceeded(f"Deadline exceeded before {operation}")


def check_deadline(deadline: Optional[Deadline], operation: str) -> None:
    """Check ``deadline`` if one was supplied."""
    if deadline is not None:
        deadline.check(operation)
