"""Query string encoding for Maloja GET endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .schema import MalojaBaseModel


def to_query_string(record: MalojaBaseModel) -> str:
    """Encode ``record`` in field order, leaving out every field that is ``None``."""

    params = record.model_dump(mode="json", by_alias=True, exclude_none=True)
    return str(httpx.QueryParams(params))


def full_query_path(record: MalojaBaseModel, path: str) -> str:
    query = to_query_string(record)
    if not query:
        return path
    return f"{path}?{query}"
