"""Turns failed Web API responses into structured errors."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from .errors import ApiError, SpotifyError, TransportError
from .models import ErrorEnvelope

# Upper bound on how much of an undecodable body is echoed into an error message.
MAX_ERROR_BODY = 512


def decode_error(response: httpx.Response) -> SpotifyError:
    """Build the error describing a non-success response.

    The returned exception is meant to be raised by the caller. Bodies that are
    empty, not a valid error envelope, or an envelope without a message get a
    synthesized message built from the status code and its reason phrase.
    """
    status = response.status_code
    try:
        body = response.read()
    except httpx.HTTPError as exc:
        return TransportError(f"spotify: couldn't read error body: {exc}")

    reason = httpx.codes.get_reason_phrase(status)
    if not body:
        return ApiError(f"spotify: HTTP {status}: {reason} (body empty)", status)

    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError:
        shown = body[:MAX_ERROR_BODY].decode("utf-8", errors="replace")
        if len(body) > MAX_ERROR_BODY:
            shown += "..."
        return ApiError(f"spotify: couldn't decode error: ({len(body)}) [{shown}]", status)

    # Some failures, e.g. a URL that got too long from query arguments, come back
    # with a well-formed envelope but no message.
    if not envelope.error.message:
        return ApiError(f"spotify: unexpected HTTP {status}: {reason} (empty error)", status)

    return ApiError(envelope.error.message, envelope.error.status or status)


__all__ = ["MAX_ERROR_BODY", "decode_error"]
