from __future__ import annotations

import httpx

from spotify_sdk.decoding import MAX_ERROR_BODY, decode_error
from spotify_sdk.errors import ApiError


def test_envelope_message_and_status() -> None:
    response = httpx.Response(401, json={"error": {"message": "The access token expired", "status": 401}})

    error = decode_error(response)

    assert isinstance(error, ApiError)
    assert error.message == "The access token expired"
    assert error.status == 401
    assert str(error) == "The access token expired"


def test_empty_body() -> None:
    error = decode_error(httpx.Response(503))

    assert isinstance(error, ApiError)
    assert error.message == "spotify: HTTP 503: Service Unavailable (body empty)"
    assert error.status == 503


def test_envelope_without_message() -> None:
    error = decode_error(httpx.Response(414, json={"error": {"status": 414}}))

    assert isinstance(error, ApiError)
    assert error.message.startswith("spotify: unexpected HTTP 414: ")
    assert error.message.endswith("(empty error)")
    assert error.status == 414


def test_undecodable_body() -> None:
    error = decode_error(httpx.Response(502, content=b"<html>bad gateway</html>"))

    assert isinstance(error, ApiError)
    assert error.message == "spotify: couldn't decode error: (24) [<html>bad gateway</html>]"
    assert error.status == 502


def test_undecodable_body_is_bounded() -> None:
    body = b"x" * (MAX_ERROR_BODY * 4)

    error = decode_error(httpx.Response(500, content=body))

    assert isinstance(error, ApiError)
    assert f"({len(body)})" in error.message
    assert len(error.message) < MAX_ERROR_BODY + 100
