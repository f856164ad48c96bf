"""Explicit cancellation tokens for blocking client operations."""

from __future__ import annotations

import threading
import time
from typing import Optional

from .errors import CancelledError


class CancelToken:
    """A cancel signal with an optional deadline.

    Pass one token to a call to bound it: the client checks it before every
    send, turns the remaining time into the request timeout and wakes up from
    retry sleeps as soon as the token is cancelled.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self._event = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._event.set()

    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, or ``None`` when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_cancelled(self) -> None:
        if self.cancelled():
            raise CancelledError("spotify: operation cancelled")

    def sleep(self, delay: float) -> None:
        """Sleep for ``delay`` seconds unless the token fires first."""
        self.raise_if_cancelled()
        remaining = self.remaining()
        if remaining is not None and remaining < delay:
            self._event.wait(remaining)
            raise CancelledError("spotify: deadline exceeded while waiting to retry")
        if self._event.wait(delay):
            raise CancelledError("spotify: operation cancelled while waiting to retry")


def sleep(delay: float, token: CancelToken) -> None:
    token.sleep(delay)


__all__ = ["CancelToken", "sleep"]
