from __future__ import annotations

import pickle

from spotify_sdk.errors import ApiError, RateLimitError


def test_api_error_survives_pickling() -> None:
    error = pickle.loads(pickle.dumps(ApiError("not found", 404)))

    assert isinstance(error, ApiError)
    assert error.message == "not found"
    assert error.status == 404
    assert str(error) == "not found"


def test_rate_limit_error_survives_pickling() -> None:
    error = pickle.loads(pickle.dumps(RateLimitError(7.0)))

    assert isinstance(error, RateLimitError)
    assert error.retry_after == 7.0
    assert str(error) == "spotify: too many requests: retry after 7s"
