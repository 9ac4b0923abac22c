"""Application entry points taking credentials per call."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict, Unpack

from malojapy.adapters.maloja import MalojaClient
from malojapy.config import get_maloja_credentials

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from malojapy.adapters.maloja import ScrobbleResponse
    from malojapy.config import MalojaCredentials
    from malojapy.domain import Range, Scrobble


class ScrobbleOptions(TypedDict, total=False):
    artists: Sequence[str] | None
    album: str | None
    album_artists: Sequence[str] | None
    duration: int | None
    length: int | None
    time: int | datetime | None


def _client(credentials: MalojaCredentials | None) -> MalojaClient:
    return MalojaClient(credentials or get_maloja_credentials())


def scrobble(
    title: str,
    artist: str,
    credentials: MalojaCredentials | None = None,
    **options: Unpack[ScrobbleOptions],
) -> ScrobbleResponse:
    """Submit one scrobble, blocking until the server answers.

    Without ``credentials`` the connection is read from ``MALOJA_*`` environment
    variables. Must not be called from inside a running event loop.
    """

    return _client(credentials).submit(title, artist, **options)


async def scrobble_async(
    title: str,
    artist: str,
    credentials: MalojaCredentials | None = None,
    **options: Unpack[ScrobbleOptions],
) -> ScrobbleResponse:
    return await _client(credentials).submit_async(title, artist, **options)


def scrobbles(
    artist: str | None = None,
    time_range: Range | None = None,
    page: int | None = None,
    per_page: int | None = None,
    credentials: MalojaCredentials | None = None,
) -> list[Scrobble]:
    return _client(credentials).list_scrobbles(
        artist=artist, time_range=time_range, page=page, per_page=per_page
    )


async def scrobbles_async(
    artist: str | None = None,
    time_range: Range | None = None,
    page: int | None = None,
    per_page: int | None = None,
    credentials: MalojaCredentials | None = None,
) -> list[Scrobble]:
    return await _client(credentials).list_scrobbles_async(
        artist=artist, time_range=time_range, page=page, per_page=per_page
    )


def numscrobbles(
    artist: str | None = None,
    time_range: Range | None = None,
    credentials: MalojaCredentials | None = None,
) -> int:
    return _client(credentials).count_scrobbles(artist=artist, time_range=time_range)


async def numscrobbles_async(
    artist: str | None = None,
    time_range: Range | None = None,
    credentials: MalojaCredentials | None = None,
) -> int:
    return await _client(credentials).count_scrobbles_async(artist=artist, time_range=time_range)
