"""Configuration types for the HTTP transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .credentials import MalojaCredentials

DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0


@dataclass(slots=True, frozen=True)
class HttpClientConfig:
    name: str = "maloja"
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    verify: bool = True
    default_headers: Mapping[str, str] | None = None

    @classmethod
    def from_credentials(
        cls,
        credentials: MalojaCredentials,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> HttpClientConfig:
        return cls(
            timeout_seconds=timeout_seconds,
            verify=not credentials.skip_cert_verification,
            default_headers=credentials.headers,
        )
