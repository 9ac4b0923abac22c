"""Domain objects handed back to callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class Track:
    artists: tuple[str, ...]
    title: str
    album: str | None = None
    album_artists: tuple[str, ...] | None = None
    length: int | None = None

    @property
    def artist(self) -> str:
        """Artist credit as a single display string."""

        return ", ".join(self.artists)


@dataclass(frozen=True, slots=True)
class Scrobble:
    """A single recorded play: when it happened and what was played."""

    time: datetime
    track: Track


__all__ = ["Scrobble", "Track"]
