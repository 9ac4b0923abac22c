"""Thin async HTTP transport used by the Maloja client."""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from httpx._client import UseClientDefault
    from httpx._types import (
        HeaderTypes,
        QueryParamTypes,
        RequestContent,
        TimeoutTypes,
        URLTypes,
    )

    from malojapy.config.http_client import HttpClientConfig

log = getLogger(__name__)

# RFC 9110 field-name token characters.
_HEADER_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# Visible ASCII plus space and horizontal tab.
_HEADER_VALUE = re.compile(r"[\t\x20-\x7e]*")


def filter_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Return the valid header pairs of ``headers``, dropping the rest one by one."""

    valid: dict[str, str] = {}
    if not headers:
        return valid
    for name, value in headers.items():
        if not _HEADER_NAME.fullmatch(name) or not _HEADER_VALUE.fullmatch(value):
            log.debug("Dropping invalid header %r", name)
            continue
        valid[name] = value
    return valid


class RequestOptions(TypedDict, total=False):
    content: RequestContent | None
    json: object
    params: QueryParamTypes | None
    headers: HeaderTypes | None
    timeout: TimeoutTypes | UseClientDefault


class AsyncClientOptions(TypedDict, total=False):
    timeout: TimeoutTypes
    headers: HeaderTypes
    verify: bool
    transport: httpx.AsyncBaseTransport


class MalojaHttpClient:
    """One-shot wrapper around ``httpx.AsyncClient``.

    Certificate verification is fixed when the client is built; per-request
    options cannot change it.
    """

    def __init__(
        self,
        config: HttpClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config

        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "verify": config.verify,
        }
        headers = filter_headers(config.default_headers)
        if headers:
            client_kwargs["headers"] = headers
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> MalojaHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        log.debug("%s %s %s", self.config.name, method, url)
        return await self._client.request(method, url, **kwargs)

    async def get(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("POST", url, **kwargs)
