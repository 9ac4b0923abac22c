"""Errors raised while reading Maloja connection settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when Maloja connection settings are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a required setting (environment variable or credential field) is absent."""
