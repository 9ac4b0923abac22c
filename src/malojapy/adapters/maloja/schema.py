"""Pydantic models describing the Maloja ``mlj_1`` API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _single_to_list(value: object) -> object:
    if isinstance(value, str):
        return [value]
    return value


class MalojaBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# Outgoing records


class ScrobbleRequest(MalojaBaseModel):
    artist: str | None = None
    artists: list[str] | None = None
    title: str
    album: str | None = None
    albumartists: list[str] | None = None
    duration: int | None = None
    length: int | None = None
    time: int | None = None
    key: str


class ScrobblesQuery(MalojaBaseModel):
    """Filter shared by the listing and count endpoints."""

    from_: int | None = Field(default=None, alias="from")
    until: int | None = None
    in_: str | None = Field(default=None, alias="in")
    artist: str | None = None
    page: int | None = None
    perpage: int | None = None


# Incoming records


class ErrorPayload(MalojaBaseModel):
    type: str | None = None
    desc: str

    @model_validator(mode="before")
    @classmethod
    def _normalize_error_shape(cls, value: object) -> object:
        if isinstance(value, str):
            return {"desc": value}
        if isinstance(value, Mapping):
            data = dict(cast(Mapping[str, object], value))
            if not data.get("desc"):
                data["desc"] = str(data.get("type") or "unknown error")
            return data
        return value


class AlbumPayload(MalojaBaseModel):
    albumtitle: str
    artists: list[str] | None = None

    _collapse_artists = field_validator("artists", mode="before")(_single_to_list)


class TrackPayload(MalojaBaseModel):
    artists: list[str] = Field(default_factory=list)
    title: str
    album: AlbumPayload | None = None
    length: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_single_artist(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            if "artists" not in mapping_value and "artist" in mapping_value:
                data: dict[str, object] = dict(mapping_value)
                data["artists"] = data.pop("artist")
                return data
        return value

    _collapse_artists = field_validator("artists", mode="before")(_single_to_list)

    @field_validator("album", mode="before")
    @classmethod
    def _album_from_title(cls, value: object) -> object:
        if isinstance(value, str):
            return {"albumtitle": value} if value.strip() else None
        return value


class ScrobbleEntry(MalojaBaseModel):
    time: int
    track: TrackPayload
    duration: int | None = None
    origin: str | None = None


class MalojaResponse(MalojaBaseModel):
    """Envelope shared by every Maloja response."""

    status: str
    error: ErrorPayload | None = None

    def get_error(self) -> ErrorPayload | None:
        return self.error


class ScrobbleResponse(MalojaResponse):
    track: TrackPayload | None = None
    desc: str | None = None


class ScrobblesResponse(MalojaResponse):
    list_: list[ScrobbleEntry] | None = Field(default=None, alias="list")


class NumscrobblesResponse(MalojaResponse):
    amount: int | None = None
