"""Errors raised by the Maloja client."""

from __future__ import annotations


class MalojaError(RuntimeError):
    """Base class for failed Maloja requests."""


class MalojaTransportError(MalojaError):
    """Raised when a request could not be completed or its response cannot be trusted.

    The underlying ``httpx`` or ``pydantic`` exception is chained as ``__cause__``.
    """


class MalojaServerError(MalojaError):
    """Raised when the server answered but flagged a logical failure."""

    def __init__(self, description: str, *, error_type: str | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.error_type = error_type


class MalojaDecodeError(MalojaError):
    """Raised when a value in a successful payload cannot become a domain value."""
