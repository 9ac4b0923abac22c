"""Domain objects and range expressions."""

from __future__ import annotations

from .model import Scrobble, Track
from .ranges import AllTime, Interval, Range, Relative, TimeBucket, resolve_range

__all__ = [
    "AllTime",
    "Interval",
    "Range",
    "Relative",
    "Scrobble",
    "TimeBucket",
    "Track",
    "resolve_range",
]
