"""HTTP client for the Maloja ``mlj_1`` API."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Final

from malojapy.adapters.http_client import MalojaHttpClient
from malojapy.config.http_client import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig
from malojapy.domain.ranges import AllTime, Range, require_aware, resolve_range

from .codec import handle_response
from .query import full_query_path
from .schema import (
    NumscrobblesResponse,
    ScrobbleRequest,
    ScrobbleResponse,
    ScrobblesQuery,
    ScrobblesResponse,
)
from .translator import count_from_response, scrobbles_from_response

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from malojapy.config.credentials import MalojaCredentials
    from malojapy.domain.model import Scrobble

log = getLogger(__name__)

API_PREFIX: Final[str] = "/apis/mlj_1"
SCROBBLES_PATH: Final[str] = f"{API_PREFIX}/scrobbles"
NUMSCROBBLES_PATH: Final[str] = f"{API_PREFIX}/numscrobbles"
NEWSCROBBLE_PATH: Final[str] = f"{API_PREFIX}/newscrobble"


def _default_client_factory(config: HttpClientConfig) -> MalojaHttpClient:
    return MalojaHttpClient(config)


def _epoch_seconds(value: int | datetime | None) -> int | None:
    if value is None or isinstance(value, int):
        return value
    return int(require_aware(value, "Scrobble time").astimezone(UTC).timestamp())


class MalojaClient:
    """Submit, list and count scrobbles on one Maloja server.

    Every ``*_async`` method opens its own HTTP client and closes it before
    returning, so calls share no state. The blocking methods drive the async
    ones with ``asyncio.run`` and therefore must not be called from code that
    is already running inside an event loop; asyncio raises ``RuntimeError``
    in that case.

    Submissions are not idempotent. If ``submit_async`` is cancelled after the
    request went out, the scrobble may or may not have been registered.
    """

    def __init__(
        self,
        credentials: MalojaCredentials,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client_factory: Callable[[HttpClientConfig], MalojaHttpClient] | None = None,
    ) -> None:
        self._credentials = credentials
        self._http_config = HttpClientConfig.from_credentials(
            credentials, timeout_seconds=timeout_seconds
        )
        self._client_factory = client_factory or _default_client_factory

    @property
    def credentials(self) -> MalojaCredentials:
        return self._credentials

    def _url(self, path: str) -> str:
        return self._credentials.base_url + path

    # Blocking entry points

    def submit(
        self,
        title: str,
        artist: str,
        *,
        artists: Sequence[str] | None = None,
        album: str | None = None,
        album_artists: Sequence[str] | None = None,
        duration: int | None = None,
        length: int | None = None,
        time: int | datetime | None = None,
    ) -> ScrobbleResponse:
        return asyncio.run(
            self.submit_async(
                title,
                artist,
                artists=artists,
                album=album,
                album_artists=album_artists,
                duration=duration,
                length=length,
                time=time,
            )
        )

    def list_scrobbles(
        self,
        *,
        artist: str | None = None,
        time_range: Range | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Scrobble]:
        return asyncio.run(
            self.list_scrobbles_async(
                artist=artist, time_range=time_range, page=page, per_page=per_page
            )
        )

    def count_scrobbles(
        self,
        *,
        artist: str | None = None,
        time_range: Range | None = None,
    ) -> int:
        return asyncio.run(self.count_scrobbles_async(artist=artist, time_range=time_range))

    # Async entry points

    async def submit_async(
        self,
        title: str,
        artist: str,
        *,
        artists: Sequence[str] | None = None,
        album: str | None = None,
        album_artists: Sequence[str] | None = None,
        duration: int | None = None,
        length: int | None = None,
        time: int | datetime | None = None,
    ) -> ScrobbleResponse:
        """Register a single scrobble. Requires ``credentials.api_key``.

        When ``artists`` is given it is sent instead of the single ``artist``.
        """

        body = ScrobbleRequest(
            artist=None if artists else artist,
            artists=list(artists) if artists else None,
            title=title,
            album=album,
            albumartists=list(album_artists) if album_artists else None,
            duration=duration,
            length=length,
            time=_epoch_seconds(time),
            key=self._credentials.require_api_key(),
        )
        payload = body.model_dump(mode="json", exclude_none=True)

        async with self._client_factory(self._http_config) as client:
            response = await handle_response(
                lambda: client.post(self._url(NEWSCROBBLE_PATH), json=payload),
                ScrobbleResponse,
            )
        log.info("Scrobbled %s - %s (status %s)", artist, title, response.status)
        return response

    async def list_scrobbles_async(
        self,
        *,
        artist: str | None = None,
        time_range: Range | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Scrobble]:
        """Return scrobbles in the order the server lists them."""

        query = self._build_query(
            artist=artist, time_range=time_range, page=page, per_page=per_page
        )
        url = full_query_path(query, self._url(SCROBBLES_PATH))

        async with self._client_factory(self._http_config) as client:
            response = await handle_response(
                lambda: client.get(url),
                ScrobblesResponse,
            )
        scrobbles = scrobbles_from_response(response)
        log.debug("Fetched %d scrobbles from %s", len(scrobbles), self._credentials.base_url)
        return scrobbles

    async def count_scrobbles_async(
        self,
        *,
        artist: str | None = None,
        time_range: Range | None = None,
    ) -> int:
        # The count endpoint takes the listing filter without paging.
        query = self._build_query(artist=artist, time_range=time_range)
        url = full_query_path(query, self._url(NUMSCROBBLES_PATH))

        async with self._client_factory(self._http_config) as client:
            response = await handle_response(
                lambda: client.get(url),
                NumscrobblesResponse,
            )
        return count_from_response(response)

    @staticmethod
    def _build_query(
        *,
        artist: str | None,
        time_range: Range | None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ScrobblesQuery:
        start, until, bucket = resolve_range(time_range or AllTime())
        return ScrobblesQuery(
            from_=start, until=until, in_=bucket, artist=artist, page=page, perpage=per_page
        )
