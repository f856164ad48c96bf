"""Python client for the Spotify Web API."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Dict, Iterable, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from . import retry
from .auth import BearerAuth, Token
from .cancellation import CancelToken
from .cancellation import sleep as cancellable_sleep
from .config import ClientConfig, ClientOption, apply_options
from .decoding import decode_error
from .errors import CancelledError, DecodeError, RateLimitError, SpotifyError, TransportError
from .metrics import ExecutionEvent, NullSink, ObservabilitySink
from .models import SimpleAlbumPage
from .options import RequestOption, encode_options

logger = logging.getLogger("spotify_sdk.client")

Sleeper = Callable[[float, CancelToken], None]


class SpotifyClient:
    """Client for the Spotify Web API.

    ``http`` must already authenticate its requests, for instance one built by
    :func:`spotify_sdk.auth.authenticated_client`. Every call goes through
    :meth:`execute`, which handles rate limiting, error decoding and latency
    reporting.

    Example:
        >>> http = authenticated_client(StaticTokenSource(Token(access_token="...")))
        >>> with SpotifyClient(http, with_retry(True)) as client:
        ...     page = client.new_releases(country("SE"), limit(10))
    """

    def __init__(
        self,
        http: httpx.Client,
        *options: ClientOption,
        config: Optional[ClientConfig] = None,
        sink: Optional[ObservabilitySink] = None,
        sleep: Sleeper = cancellable_sleep,
    ) -> None:
        self._http = http
        self._config = apply_options(config or ClientConfig(), *options)
        self._sink: ObservabilitySink = sink if sink is not None else NullSink()
        self._sleep = sleep

    def __enter__(self) -> "SpotifyClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http(self) -> httpx.Client:
        return self._http

    def new_request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, str]] = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the configured base URL."""
        return self._http.build_request(method, self._config.base_url + path, json=json, params=params)

    def execute(
        self,
        request: httpx.Request,
        result: Any = None,
        *,
        extra_statuses: Iterable[int] = (),
        cancel: Optional[CancelToken] = None,
    ) -> Any:
        """Run one logical call and decode its JSON body into ``result``.

        Any 2xx status, plus those in ``extra_statuses``, counts as success.
        202 and 429 are retried while automatic retry is enabled. A 204 answer,
        or a success without a ``result`` type, returns ``None``.
        """
        accepted = frozenset(extra_statuses)

        def is_success(status: int) -> bool:
            return 200 <= status < 300 or status in accepted

        return self._execute(request, result, is_success, retry.should_retry, cancel)

    def get(self, url: str, result: Any = None, *, cancel: Optional[CancelToken] = None) -> Any:
        """GET ``url``; only 200 decodes, and only 429 is retried."""
        request = self._http.build_request("GET", url)
        return self._execute(request, result, _is_ok, retry.should_retry_get, cancel)

    def get_path(self, path: str, result: Any = None, *, cancel: Optional[CancelToken] = None) -> Any:
        return self.get(self._config.base_url + path, result, cancel=cancel)

    def new_releases(self, *options: RequestOption, cancel: Optional[CancelToken] = None) -> SimpleAlbumPage:
        """New album releases featured in Spotify.

        Supported options: country, limit, offset.
        """
        url = self._config.base_url + "browse/new-releases"
        query = encode_options(*options)
        if query:
            url += "?" + query

        wrapped = self.get(url, Dict[str, Any], cancel=cancel)
        if not isinstance(wrapped, dict) or "albums" not in wrapped:
            raise DecodeError("spotify: new releases response has no 'albums' field")
        try:
            return SimpleAlbumPage.model_validate(wrapped["albums"])
        except ValidationError as exc:
            raise DecodeError(f"spotify: couldn't decode new releases: {exc}") from exc

    def token(self) -> Token:
        """The token currently used by the transport."""
        auth = self._http.auth
        if not isinstance(auth, BearerAuth):
            raise SpotifyError("spotify: client not backed by a token source")
        return auth.source.token()

    def close(self) -> None:
        self._http.close()

    def _execute(
        self,
        request: httpx.Request,
        result: Any,
        is_success: Callable[[int], bool],
        should_retry: Callable[[int], bool],
        cancel: Optional[CancelToken],
    ) -> Any:
        cancel_token = cancel if cancel is not None else CancelToken()
        if self._config.accept_language:
            request.headers["Accept-Language"] = self._config.accept_language
        route = request.url.path

        while True:
            cancel_token.raise_if_cancelled()
            remaining = cancel_token.remaining()
            if remaining is not None:
                request.extensions["timeout"] = _clamp_timeout(request.extensions.get("timeout"), remaining)

            logger.debug("request spotify method=%s url=%s", request.method, request.url)
            started = time.perf_counter()
            try:
                response = self._http.send(request)
            except httpx.RequestError as exc:
                self._report(ExecutionEvent(time.perf_counter() - started, 0, route, request.method))
                if cancel_token.cancelled():
                    raise CancelledError(f"spotify: {request.method} {route} cancelled") from exc
                logger.debug("spotify request failed method=%s url=%s err=%s", request.method, request.url, exc)
                raise TransportError(f"spotify: {request.method} {request.url} failed: {exc}") from exc

            elapsed = time.perf_counter() - started
            status = response.status_code
            self._report(ExecutionEvent(elapsed, status, route, request.method))
            if cancel_token.cancelled():
                response.close()
                raise CancelledError(f"spotify: {request.method} {route} cancelled")
            logger.debug("spotify response status=%s elapsed_ms=%.1f route=%s", status, elapsed * 1000, route)

            if should_retry(status):
                delay = retry.retry_after(response.headers)
                response.close()
                if not self._config.auto_retry:
                    raise RateLimitError(delay)
                logger.warning("rate limit exceeded status=%s route=%s retry_after=%s", status, route, delay)
                self._sleep(delay, cancel_token)
                continue

            try:
                if status == httpx.codes.NO_CONTENT:
                    return None
                if not is_success(status):
                    raise decode_error(response)
                if result is None:
                    return None
                return _decode(response, result)
            finally:
                response.close()

    def _report(self, event: ExecutionEvent) -> None:
        try:
            self._sink.record(event)
        except Exception:
            logger.exception("observability sink failed route=%s status=%s", event.route, event.status_code)


def _is_ok(status: int) -> bool:
    return status == httpx.codes.OK


@functools.lru_cache(maxsize=256)
def _adapter(result: Any) -> TypeAdapter:
    return TypeAdapter(result)


def _clamp_timeout(current: Optional[Dict[str, Optional[float]]], remaining: float) -> Dict[str, Optional[float]]:
    """Tighten each timeout field to the time left before the deadline."""
    clamped = dict(current or httpx.Timeout(None).as_dict())
    for key, value in clamped.items():
        clamped[key] = remaining if value is None else min(value, remaining)
    return clamped


def _decode(response: httpx.Response, result: Any) -> Any:
    try:
        return _adapter(result).validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(f"spotify: couldn't decode response ({len(response.content)} bytes): {exc}") from exc


__all__ = ["Sleeper", "SpotifyClient"]
