"""Time range expressions and their translation into Maloja filter parameters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import TypeAlias

WireRange: TypeAlias = tuple[int | None, int | None, str | None]


class TimeBucket(StrEnum):
    """Relative ranges understood by the server's ``in`` parameter."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def require_aware(value: datetime, label: str) -> datetime:
    if value.tzinfo is None:
        raise ValueError(f"{label} must include timezone information")
    return value


def _to_epoch_seconds(value: int | datetime) -> int:
    if isinstance(value, datetime):
        return int(value.astimezone(UTC).timestamp())
    return value


@dataclass(frozen=True, slots=True)
class Interval:
    """Absolute bounds ``[start, until)``, as epoch seconds or aware datetimes."""

    start: int | datetime
    until: int | datetime

    def __post_init__(self) -> None:
        for bound in (self.start, self.until):
            if isinstance(bound, datetime):
                require_aware(bound, "Range bounds")


@dataclass(frozen=True, slots=True)
class Relative:
    token: str


@dataclass(frozen=True, slots=True)
class AllTime:
    pass


Range: TypeAlias = Interval | Relative | AllTime


def resolve_range(value: Range) -> WireRange:
    """Return the ``(from, until, in)`` triple for ``value``.

    At most one of the absolute pair and the relative token is populated.
    """

    match value:
        case Interval(start=start, until=until):
            return _to_epoch_seconds(start), _to_epoch_seconds(until), None
        case Relative(token=token):
            return None, None, str(token)
        case AllTime():
            return None, None, None


__all__ = [
    "AllTime",
    "Interval",
    "Range",
    "Relative",
    "TimeBucket",
    "WireRange",
    "resolve_range",
]
