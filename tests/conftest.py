from __future__ import annotations

import pytest

from malojapy.config import MalojaCredentials


@pytest.fixture
def credentials() -> MalojaCredentials:
    return MalojaCredentials(
        host="maloja.local",
        port=42010,
        path="/music/",
        headers={"X-Proxy-Token": "secret"},
        api_key="demo-key",
    )


@pytest.fixture
def scrobble_entries() -> list[dict[str, object]]:
    return [
        {
            "time": 1000,
            "track": {
                "artists": ["Artist B"],
                "title": "Song A",
                "album": {"albumtitle": "Album C", "artists": ["Artist B"]},
                "length": 215,
            },
            "duration": 200,
            "origin": "client:test",
        },
        {
            "time": 2000,
            "track": {"artists": ["Artist D", "Artist E"], "title": "Song F", "album": None},
        },
    ]
