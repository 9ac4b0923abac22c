"""Translate Maloja payloads into domain objects."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from malojapy.domain.model import Scrobble, Track

from .errors import MalojaDecodeError, MalojaServerError

if TYPE_CHECKING:
    from .schema import NumscrobblesResponse, ScrobbleEntry, ScrobblesResponse, TrackPayload

log = getLogger(__name__)


def track_from_payload(payload: TrackPayload, artist: str | None = None) -> Track:
    """Build a ``Track``; an explicit ``artist`` replaces the payload's artists."""

    artists = (artist,) if artist is not None else tuple(payload.artists)
    album = payload.album
    album_artists = tuple(album.artists) if album is not None and album.artists else None
    return Track(
        artists=artists,
        title=payload.title,
        album=album.albumtitle if album is not None else None,
        album_artists=album_artists,
        length=payload.length,
    )


def _played_at(timestamp: int) -> datetime:
    try:
        return datetime.fromtimestamp(timestamp, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise MalojaDecodeError(f"Scrobble timestamp out of range: {timestamp}") from exc


def scrobble_from_entry(entry: ScrobbleEntry) -> Scrobble:
    return Scrobble(time=_played_at(entry.time), track=track_from_payload(entry.track))


def scrobbles_from_response(response: ScrobblesResponse) -> list[Scrobble]:
    # One undecodable entry fails the whole listing.
    if response.list_ is None:
        raise MalojaServerError(response.status)
    return [scrobble_from_entry(entry) for entry in response.list_]


def count_from_response(response: NumscrobblesResponse) -> int:
    if response.amount is None:
        log.warning("Maloja count response without amount (status %r)", response.status)
        raise MalojaServerError(response.status)
    return response.amount
