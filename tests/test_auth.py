from __future__ import annotations

from datetime import datetime, timedelta, timezone

from spotify_sdk.auth import Token
from spotify_sdk.cancellation import CancelToken
from spotify_sdk.models import parse_date, parse_timestamp


def test_token_validity() -> None:
    assert Token(access_token="abc").valid()
    assert not Token(access_token="").valid()
    assert not Token(access_token="abc", expiry=datetime.now(timezone.utc) - timedelta(minutes=1)).valid()
    assert Token(access_token="abc", expiry=datetime.now(timezone.utc) + timedelta(hours=1)).valid()


def test_cancel_token_remaining() -> None:
    assert CancelToken().remaining() is None
    token = CancelToken(timeout=60)
    assert 0 < token.remaining() <= 60
    assert not token.cancelled()
    token.cancel()
    assert token.cancelled()


def test_date_formats() -> None:
    assert parse_date("2017-11-17").isoformat() == "2017-11-17"
    assert parse_timestamp("2016-10-24T15:03:07Z") == datetime(2016, 10, 24, 15, 3, 7, tzinfo=timezone.utc)
