"""Bearer-token authentication for the transport handed to the client."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generator, Optional, Protocol

import httpx
from pydantic import BaseModel


class Token(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    refresh_token: Optional[str] = None
    expiry: Optional[datetime] = None

    def valid(self) -> bool:
        if not self.access_token:
            return False
        if self.expiry is None:
            return True
        expiry = self.expiry if self.expiry.tzinfo else self.expiry.replace(tzinfo=timezone.utc)
        return expiry > datetime.now(timezone.utc)


class TokenSource(Protocol):
    def token(self) -> Token:  # pragma: no cover - interface
        ...


class StaticTokenSource:
    """Always hands out the same token; refreshing is left to other sources."""

    def __init__(self, token: Token) -> None:
        self._token = token

    def token(self) -> Token:
        return self._token


class BearerAuth(httpx.Auth):
    """Adds ``Authorization: Bearer <token>`` taken from a token source."""

    def __init__(self, source: TokenSource) -> None:
        self.source = source

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.source.token()
        request.headers["Authorization"] = f"{token.token_type or 'Bearer'} {token.access_token}"
        yield request


def authenticated_client(source: TokenSource, *, timeout: float = 30.0, **kwargs) -> httpx.Client:
    """Build an ``httpx.Client`` whose requests carry the source's token."""
    return httpx.Client(auth=BearerAuth(source), timeout=timeout, **kwargs)


__all__ = ["BearerAuth", "StaticTokenSource", "Token", "TokenSource", "authenticated_client"]
