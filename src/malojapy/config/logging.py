"""Root logger setup for the malojapy command line."""

from __future__ import annotations

import logging

# httpx and httpcore announce every request at INFO and DEBUG.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Route malojapy log records to stderr at ``level``.

    Transport libraries are held at WARNING unless ``level`` is DEBUG, so
    ``--verbose`` is the only way to see raw request traffic.
    """

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=force,
    )
    transport_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
