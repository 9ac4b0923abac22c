from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import httpx
import pytest

from malojapy import app
from malojapy.adapters.maloja import client as client_module
from malojapy.config import MalojaCredentials
from malojapy.domain import AllTime
from tests.support.transport import make_client_factory

if TYPE_CHECKING:
    from collections.abc import Callable


def _install_handler(
    monkeypatch: pytest.MonkeyPatch,
    handler: Callable[[httpx.Request], httpx.Response],
) -> None:
    monkeypatch.setattr(client_module, "_default_client_factory", make_client_factory(handler))


def test_scrobble_round_trip(
    monkeypatch: pytest.MonkeyPatch, credentials: MalojaCredentials
) -> None:
    _install_handler(monkeypatch, lambda _request: httpx.Response(200, json={"status": "success"}))

    response = app.scrobble("Song A", "Artist B", credentials)

    assert response.status == "success"
    assert response.get_error() is None


def test_scrobbles_end_to_end(
    monkeypatch: pytest.MonkeyPatch,
    credentials: MalojaCredentials,
    scrobble_entries: list[dict[str, object]],
) -> None:
    _install_handler(
        monkeypatch,
        lambda _request: httpx.Response(200, json={"status": "ok", "list": scrobble_entries}),
    )

    result = app.scrobbles(
        artist=None, time_range=AllTime(), page=None, per_page=None, credentials=credentials
    )

    assert [item.time.isoformat().replace("+00:00", "Z") for item in result] == [
        "1970-01-01T00:16:40Z",
        "1970-01-01T00:33:20Z",
    ]


def test_numscrobbles_async(
    monkeypatch: pytest.MonkeyPatch, credentials: MalojaCredentials
) -> None:
    _install_handler(
        monkeypatch, lambda _request: httpx.Response(200, json={"status": "ok", "amount": 42})
    )

    assert asyncio.run(app.numscrobbles_async(credentials=credentials)) == 42


def test_credentials_fall_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "ok", "amount": 3})

    _install_handler(monkeypatch, handler)
    monkeypatch.setenv("MALOJA_HOST", "env.example.org")
    monkeypatch.setenv("MALOJA_PORT", "8080")
    monkeypatch.delenv("MALOJA_PATH", raising=False)
    monkeypatch.delenv("MALOJA_HTTPS", raising=False)

    assert app.numscrobbles() == 3
    assert str(seen[0].url) == "http://env.example.org:8080/apis/mlj_1/numscrobbles"


def test_scrobble_async_passes_options(
    monkeypatch: pytest.MonkeyPatch, credentials: MalojaCredentials
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "success"})

    _install_handler(monkeypatch, handler)

    asyncio.run(app.scrobble_async("Song A", "Artist B", credentials, album="Album C"))

    assert json.loads(seen[0].content)["album"] == "Album C"
