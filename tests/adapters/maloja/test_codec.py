from __future__ import annotations

import asyncio
import json

import httpx
import pytest
from pydantic import ValidationError

from malojapy.adapters.maloja import (
    MalojaServerError,
    MalojaTransportError,
    NumscrobblesResponse,
    ScrobbleResponse,
    ScrobblesResponse,
    handle_response,
    parse_response,
)


def test_parse_response_returns_typed_record() -> None:
    parsed = parse_response(b'{"status": "ok", "amount": 42}', NumscrobblesResponse)

    assert parsed.amount == 42


def test_error_descriptor_wins_over_successful_looking_payload() -> None:
    body = json.dumps(
        {
            "status": "ok",
            "amount": 42,
            "error": {"type": "invalid_range", "desc": "Range could not be parsed"},
        }
    )

    with pytest.raises(MalojaServerError) as excinfo:
        parse_response(body, NumscrobblesResponse)

    assert excinfo.value.description == "Range could not be parsed"
    assert str(excinfo.value) == "Range could not be parsed"
    assert excinfo.value.error_type == "invalid_range"


@pytest.mark.parametrize(
    "body",
    [b"", b"<html>Bad Gateway</html>", b'{"status": 5}', b'{"list": []}'],
)
def test_undecodable_body_is_a_transport_error(body: bytes) -> None:
    with pytest.raises(MalojaTransportError) as excinfo:
        parse_response(body, ScrobblesResponse)

    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_handle_response_wraps_network_failures() -> None:
    async def send() -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    with pytest.raises(MalojaTransportError) as excinfo:
        asyncio.run(handle_response(send, ScrobbleResponse))

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
    assert not isinstance(excinfo.value, MalojaServerError)


def test_handle_response_wraps_timeouts() -> None:
    async def send() -> httpx.Response:
        raise httpx.ReadTimeout("timed out")

    with pytest.raises(MalojaTransportError):
        asyncio.run(handle_response(send, ScrobbleResponse))


def test_handle_response_ignores_http_status_and_reads_error_body() -> None:
    async def send() -> httpx.Response:
        return httpx.Response(
            status_code=403,
            json={
                "status": "failure",
                "error": {"type": "authentication_fail", "desc": "Bad key"},
            },
        )

    with pytest.raises(MalojaServerError, match="Bad key"):
        asyncio.run(handle_response(send, ScrobbleResponse))


def test_handle_response_returns_record_on_success() -> None:
    async def send() -> httpx.Response:
        return httpx.Response(status_code=200, json={"status": "success"})

    parsed = asyncio.run(handle_response(send, ScrobbleResponse))

    assert parsed.status == "success"
    assert parsed.get_error() is None
