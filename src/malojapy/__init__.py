from __future__ import annotations

from importlib import metadata

from malojapy.adapters.maloja import (
    MalojaClient,
    MalojaDecodeError,
    MalojaError,
    MalojaServerError,
    MalojaTransportError,
)
from malojapy.config import ConfigurationError, MalojaCredentials, MissingConfigurationError
from malojapy.domain import AllTime, Interval, Relative, Scrobble, TimeBucket, Track

try:
    __version__ = metadata.version("malojapy")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "AllTime",
    "ConfigurationError",
    "Interval",
    "MalojaClient",
    "MalojaCredentials",
    "MalojaDecodeError",
    "MalojaError",
    "MalojaServerError",
    "MalojaTransportError",
    "MissingConfigurationError",
    "Relative",
    "Scrobble",
    "TimeBucket",
    "Track",
    "__version__",
]
