"""Connection settings for a Maloja server."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .env import env_flag, env_int, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_MALOJA_PORT: Final[int] = 42010


@dataclass(frozen=True, slots=True)
class MalojaCredentials:
    """Everything needed to reach one Maloja instance.

    ``headers`` is copied into a read-only mapping on construction.
    """

    host: str
    port: int = DEFAULT_MALOJA_PORT
    https: bool = False
    skip_cert_verification: bool = False
    path: str | None = None
    headers: Mapping[str, str] | None = None
    api_key: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.headers is not None:
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def base_url(self) -> str:
        scheme = "https" if self.https else "http"
        sub_path = (self.path or "").strip("/")
        if sub_path:
            sub_path = "/" + sub_path
        return f"{scheme}://{self.host}:{self.port}{sub_path}"

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingConfigurationError("A Maloja API key is required for this operation")
        return self.api_key


def get_maloja_credentials() -> MalojaCredentials:
    values = require_env_vars(("MALOJA_HOST",))
    port = env_int("MALOJA_PORT", default=DEFAULT_MALOJA_PORT)
    if not 0 < port < 65536:
        raise ConfigurationError(f"MALOJA_PORT out of range: {port}")
    return MalojaCredentials(
        host=values["MALOJA_HOST"],
        port=port,
        https=env_flag("MALOJA_HTTPS"),
        skip_cert_verification=env_flag("MALOJA_SKIP_CERT_VERIFICATION"),
        path=optional_env_var("MALOJA_PATH"),
        api_key=optional_env_var("MALOJA_API_KEY"),
    )
