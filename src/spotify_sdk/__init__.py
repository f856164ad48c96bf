"""Spotify Web API Python SDK."""

from .auth import BearerAuth, StaticTokenSource, Token, TokenSource, authenticated_client
from .cancellation import CancelToken
from .client import SpotifyClient
from .config import ClientConfig, with_accept_language, with_base_url, with_retry
from .errors import ApiError, CancelledError, DecodeError, RateLimitError, SpotifyError, TransportError
from .metrics import ExecutionEvent, LoggingSink, NullSink, ObservabilitySink, PrometheusSink

__version__ = "1.0.0"

__all__ = [
    "ApiError",
    "BearerAuth",
    "CancelToken",
    "CancelledError",
    "ClientConfig",
    "DecodeError",
    "ExecutionEvent",
    "LoggingSink",
    "NullSink",
    "ObservabilitySink",
    "PrometheusSink",
    "RateLimitError",
    "SpotifyClient",
    "SpotifyError",
    "StaticTokenSource",
    "Token",
    "TokenSource",
    "TransportError",
    "authenticated_client",
    "with_accept_language",
    "with_base_url",
    "with_retry",
]
