"""Exception types raised by the Spotify SDK."""

from __future__ import annotations


class SpotifyError(Exception):
    """Base exception for all client errors."""


class TransportError(SpotifyError):
    """Raised when a request could not be sent or its body could not be read."""


class CancelledError(SpotifyError):
    """Raised when a cancel token fires during a send or a retry sleep."""


class DecodeError(SpotifyError):
    """Raised when a success payload is not valid JSON for the requested type."""


class ApiError(SpotifyError):
    """An error reported by the Web API in its error envelope."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message, status)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, status={self.status})"


class RateLimitError(SpotifyError):
    """Raised for 429 responses when automatic retry is disabled."""

    def __init__(self, retry_after: float) -> None:
        super().__init__(retry_after)
        self.retry_after = retry_after

    def __str__(self) -> str:
        return f"spotify: too many requests: retry after {self.retry_after:g}s"


__all__ = [
    "ApiError",
    "CancelledError",
    "DecodeError",
    "RateLimitError",
    "SpotifyError",
    "TransportError",
]
