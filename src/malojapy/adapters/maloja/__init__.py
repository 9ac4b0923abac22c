"""Public interface for the Maloja adapter."""

from __future__ import annotations

from .client import MalojaClient
from .codec import handle_response, parse_response
from .errors import MalojaDecodeError, MalojaError, MalojaServerError, MalojaTransportError
from .query import full_query_path, to_query_string
from .schema import (
    MalojaResponse,
    NumscrobblesResponse,
    ScrobbleRequest,
    ScrobbleResponse,
    ScrobblesQuery,
    ScrobblesResponse,
)
from .translator import count_from_response, scrobbles_from_response, track_from_payload

__all__ = [
    "MalojaClient",
    "MalojaDecodeError",
    "MalojaError",
    "MalojaResponse",
    "MalojaServerError",
    "MalojaTransportError",
    "NumscrobblesResponse",
    "ScrobbleRequest",
    "ScrobbleResponse",
    "ScrobblesQuery",
    "ScrobblesResponse",
    "count_from_response",
    "full_query_path",
    "handle_response",
    "parse_response",
    "scrobbles_from_response",
    "to_query_string",
    "track_from_payload",
]
