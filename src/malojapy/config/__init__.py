"""Application configuration helpers."""

from __future__ import annotations

from .credentials import DEFAULT_MALOJA_PORT, MalojaCredentials, get_maloja_credentials
from .env import env_flag, env_int, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_client import HttpClientConfig
from .logging import configure_logging

__all__ = [
    "DEFAULT_MALOJA_PORT",
    "ConfigurationError",
    "HttpClientConfig",
    "MalojaCredentials",
    "MissingConfigurationError",
    "configure_logging",
    "env_flag",
    "env_int",
    "get_maloja_credentials",
    "optional_env_var",
    "require_env_vars",
]
