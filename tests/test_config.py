from __future__ import annotations

import dataclasses

import pytest

from spotify_sdk.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    apply_options,
    with_accept_language,
    with_base_url,
    with_retry,
)
from spotify_sdk.options import country, encode_options, limit, market, offset, process_options


def test_defaults() -> None:
    cfg = ClientConfig()
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.auto_retry is False
    assert cfg.accept_language is None


def test_options_applied_in_order() -> None:
    cfg = apply_options(
        ClientConfig(),
        with_base_url("https://staging.example.com/v1/"),
        with_retry(True),
        with_accept_language("de"),
        with_retry(False),
    )
    assert cfg == ClientConfig(base_url="https://staging.example.com/v1/", auto_retry=False, accept_language="de")


def test_config_is_immutable() -> None:
    cfg = ClientConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.auto_retry = True  # type: ignore[misc]


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SPOTIFY_BASE_URL", "https://mock.example.com/")
    monkeypatch.setenv("SPOTIFY_AUTO_RETRY", "true")
    monkeypatch.setenv("SPOTIFY_ACCEPT_LANGUAGE", "fr-FR")

    cfg = ClientConfig.from_env()

    assert cfg == ClientConfig(base_url="https://mock.example.com/", auto_retry=True, accept_language="fr-FR")


def test_from_env_defaults(monkeypatch) -> None:
    for name in ("SPOTIFY_BASE_URL", "SPOTIFY_AUTO_RETRY", "SPOTIFY_ACCEPT_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)
    assert ClientConfig.from_env() == ClientConfig()


def test_request_options() -> None:
    assert process_options(country("SE"), limit(5), offset(10), market("US")) == {
        "country": "SE",
        "limit": "5",
        "offset": "10",
        "market": "US",
    }
    assert encode_options(offset(10), limit(5)) == "limit=5&offset=10"
    assert encode_options() == ""
