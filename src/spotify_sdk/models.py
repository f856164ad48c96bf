"""Pydantic models mirroring the Web API payload shapes used by the SDK."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Dict, List, NewType, Optional

from pydantic import BaseModel, ConfigDict, Field

# Calendar dates such as PrivateUser.birthdate.
DATE_FORMAT = "%Y-%m-%d"
# ISO 8601 UTC timestamps with a zero offset, such as PlaylistTrack.added_at.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# spotify:track:6rqhFgbbKwnb9MLmUQDhG6
URI = NewType("URI", str)
# Base-62 identifier found at the end of a URI.
ID = NewType("ID", str)


def parse_date(value: str) -> date:
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_timestamp(value: str) -> datetime:
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ErrorDetail(_Payload):
    message: str = ""
    status: int = 0


class ErrorEnvelope(_Payload):
    error: ErrorDetail = Field(default_factory=ErrorDetail)


class Followers(_Payload):
    count: float = Field(0, alias="total")
    endpoint: Optional[str] = Field(None, alias="href")


class Image(_Payload):
    height: Optional[float] = None
    width: Optional[float] = None
    url: str


class SimpleArtist(_Payload):
    name: str
    id: ID
    uri: URI
    endpoint: Optional[str] = Field(None, alias="href")
    external_urls: Dict[str, str] = Field(default_factory=dict)


class SimpleAlbum(_Payload):
    name: str
    id: ID
    uri: URI
    album_type: Optional[str] = None
    album_group: Optional[str] = None
    artists: List[SimpleArtist] = Field(default_factory=list)
    available_markets: List[str] = Field(default_factory=list)
    endpoint: Optional[str] = Field(None, alias="href")
    images: List[Image] = Field(default_factory=list)
    external_urls: Dict[str, str] = Field(default_factory=dict)
    release_date: Optional[str] = None
    release_date_precision: Optional[str] = None
    total_tracks: Optional[int] = None

    def release_date_time(self) -> Optional[date]:
        """Release date as a date, or ``None`` when only a year or month is known."""
        if self.release_date and self.release_date_precision in (None, "day"):
            return parse_date(self.release_date)
        return None


class SimpleAlbumPage(_Payload):
    endpoint: Optional[str] = Field(None, alias="href")
    limit: int = 0
    offset: int = 0
    total: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    albums: List[SimpleAlbum] = Field(default_factory=list, alias="items")


__all__ = [
    "DATE_FORMAT",
    "ErrorDetail",
    "ErrorEnvelope",
    "Followers",
    "ID",
    "Image",
    "SimpleAlbum",
    "SimpleAlbumPage",
    "SimpleArtist",
    "TIMESTAMP_FORMAT",
    "URI",
    "parse_date",
    "parse_timestamp",
]
