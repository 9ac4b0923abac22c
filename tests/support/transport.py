"""Helpers for serving canned Maloja responses through httpx."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from malojapy.adapters.http_client import MalojaHttpClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from malojapy.config import HttpClientConfig


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[HttpClientConfig], MalojaHttpClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(config: HttpClientConfig) -> MalojaHttpClient:
        return MalojaHttpClient(config, transport=httpx.MockTransport(async_handler))

    return factory


def json_handler(
    payload: object,
    *,
    status_code: int = 200,
    seen: list[httpx.Request] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code=status_code, json=payload)

    return handler
