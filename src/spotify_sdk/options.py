"""Query-parameter builders accepted by the convenience methods."""

from __future__ import annotations

from typing import Callable, Dict
from urllib.parse import urlencode

RequestOption = Callable[[Dict[str, str]], None]


def country(code: str) -> RequestOption:
    """ISO 3166-1 alpha-2 country code, e.g. ``"SE"``."""

    def apply(params: Dict[str, str]) -> None:
        params["country"] = code

    return apply


def market(code: str) -> RequestOption:
    def apply(params: Dict[str, str]) -> None:
        params["market"] = code

    return apply


def limit(amount: int) -> RequestOption:
    """Maximum number of items to return."""

    def apply(params: Dict[str, str]) -> None:
        params["limit"] = str(amount)

    return apply


def offset(amount: int) -> RequestOption:
    """Index of the first item to return."""

    def apply(params: Dict[str, str]) -> None:
        params["offset"] = str(amount)

    return apply


def process_options(*options: RequestOption) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for option in options:
        option(params)
    return params


def encode_options(*options: RequestOption) -> str:
    """Encoded query string with keys sorted, empty when no option is set."""
    params = process_options(*options)
    return urlencode(sorted(params.items()))


__all__ = ["RequestOption", "country", "encode_options", "limit", "market", "offset", "process_options"]
