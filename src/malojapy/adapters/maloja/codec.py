"""Turn raw Maloja responses into typed records or classified errors."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import ValidationError

from .errors import MalojaServerError, MalojaTransportError
from .schema import MalojaResponse

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

log = getLogger(__name__)

T = TypeVar("T", bound=MalojaResponse)


def parse_response(content: bytes | str, model: type[T]) -> T:
    """Validate a response body and raise if the server flagged an error in it.

    Maloja reports some failures as well-formed JSON with an ``error`` object,
    sometimes with a 200 status, so the error check runs on every parsed body.
    """

    try:
        parsed = model.model_validate_json(content)
    except ValidationError as exc:
        msg = f"Unexpected Maloja response payload for {model.__name__}"
        raise MalojaTransportError(msg) from exc

    error = parsed.get_error()
    if error is not None:
        log.warning("Maloja API error (%s): %s", error.type or parsed.status, error.desc)
        raise MalojaServerError(error.desc, error_type=error.type)
    return parsed


async def handle_response(
    send: Callable[[], Awaitable[httpx.Response]],
    model: type[T],
) -> T:
    try:
        response = await send()
        content = await response.aread()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise MalojaTransportError(f"Request to Maloja failed: {exc}") from exc
    return parse_response(content, model)
