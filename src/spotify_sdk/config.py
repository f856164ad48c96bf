"""Configuration objects for the Spotify Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Callable, Optional

DEFAULT_BASE_URL = "https://api.spotify.com/v1/"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    auto_retry: bool = False
    accept_language: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        base_url = os.environ.get("SPOTIFY_BASE_URL") or DEFAULT_BASE_URL
        auto_retry = os.environ.get("SPOTIFY_AUTO_RETRY", "").strip().lower() in _TRUTHY
        accept_language = os.environ.get("SPOTIFY_ACCEPT_LANGUAGE") or None
        return cls(base_url=base_url, auto_retry=auto_retry, accept_language=accept_language)


ClientOption = Callable[[ClientConfig], ClientConfig]


def with_retry(should_retry: bool) -> ClientOption:
    """Retry requests that were rejected for rate limiting instead of raising."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, auto_retry=should_retry)

    return apply


def with_base_url(url: str) -> ClientOption:
    """Point the client at a staging or other alternative environment."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, base_url=url)

    return apply


def with_accept_language(lang: str) -> ClientOption:
    """Send ``Accept-Language: lang`` on every request."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, accept_language=lang or None)

    return apply


def apply_options(config: ClientConfig, *options: ClientOption) -> ClientConfig:
    for option in options:
        config = option(config)
    return config


__all__ = [
    "ClientConfig",
    "ClientOption",
    "DEFAULT_BASE_URL",
    "apply_options",
    "with_accept_language",
    "with_base_url",
    "with_retry",
]
