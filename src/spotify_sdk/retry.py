"""Retry classification and Retry-After parsing for rate-limited responses."""

from __future__ import annotations

from typing import Mapping

import httpx

# Used when the server asks us to back off without saying for how long.
DEFAULT_RETRY_AFTER = 5.0

_MAX_RETRY_AFTER = 2**31 - 1

_RETRY_STATUSES = frozenset({httpx.codes.ACCEPTED, httpx.codes.TOO_MANY_REQUESTS})
_GET_RETRY_STATUSES = frozenset({httpx.codes.TOO_MANY_REQUESTS})


def should_retry(status: int) -> bool:
    """Statuses that the general executor treats as "try again later"."""
    return status in _RETRY_STATUSES


def should_retry_get(status: int) -> bool:
    """Statuses that the GET-only path treats as "try again later"."""
    return status in _GET_RETRY_STATUSES


def retry_after(headers: Mapping[str, str]) -> float:
    """Return the delay in seconds suggested by a ``Retry-After`` header.

    Missing, non-integer, non-positive or out-of-range values fall back to
    :data:`DEFAULT_RETRY_AFTER`, so the result is always positive.
    """
    raw = headers.get("Retry-After")
    if raw is None:
        return DEFAULT_RETRY_AFTER
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return DEFAULT_RETRY_AFTER
    seconds = int(raw)
    # Zero would mean an immediate retry; the delay must stay positive.
    if seconds <= 0 or seconds > _MAX_RETRY_AFTER:
        return DEFAULT_RETRY_AFTER
    return float(seconds)


__all__ = [
    "DEFAULT_RETRY_AFTER",
    "retry_after",
    "should_retry",
    "should_retry_get",
]
