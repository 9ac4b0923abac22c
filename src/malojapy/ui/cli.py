# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from datetime import UTC, datetime
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from malojapy.adapters.maloja import MalojaError
from malojapy.app import numscrobbles, scrobble, scrobbles
from malojapy.config import ConfigurationError, configure_logging, get_maloja_credentials
from malojapy.domain import AllTime, Interval, Relative

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from malojapy.domain import Range

log = logging.getLogger(__name__)


def _add_range_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--artist", type=str, help="Only include scrobbles by this artist")
    parser.add_argument(
        "--from",
        dest="start",
        type=str,
        help="Inclusive start, as ISO-8601 timestamp (UTC if naive) or epoch seconds",
    )
    parser.add_argument(
        "--until",
        type=str,
        help="Exclusive end, as ISO-8601 timestamp (UTC if naive) or epoch seconds",
    )
    parser.add_argument(
        "--in",
        dest="bucket",
        type=str,
        help="Relative range understood by the server, e.g. today, week, month, year",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Talk to a Maloja scrobble server")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    submit = subparsers.add_parser("scrobble", help="Submit a single scrobble")
    submit.add_argument("--title", type=str, required=True, help="Track title")
    submit.add_argument("--artist", type=str, required=True, help="Track artist")
    submit.add_argument("--album", type=str, help="Album title")
    submit.add_argument("--duration", type=int, help="Seconds of the track that were played")
    submit.add_argument("--length", type=int, help="Full length of the track in seconds")
    submit.add_argument(
        "--time",
        type=str,
        help="When the track was played, as ISO-8601 timestamp or epoch seconds",
    )

    listing = subparsers.add_parser("scrobbles", help="List scrobbles")
    _add_range_arguments(listing)
    listing.add_argument("--page", type=int, help="Page number, starting at 0")
    listing.add_argument("--per-page", type=int, help="Number of scrobbles per page")

    count = subparsers.add_parser("count", help="Count scrobbles")
    _add_range_arguments(count)

    return parser.parse_args(list(argv))


def _parse_timestamp(value: str) -> int:
    normalized = value.strip()
    if normalized.lstrip("-").isdigit():
        return int(normalized)
    try:
        if normalized.endswith("Z"):
            normalized = normalized[:-1] + "+00:00"
        dt = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid timestamp: {value}") from exc
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.astimezone(UTC).timestamp())


def _build_range(args: argparse.Namespace) -> Range:
    has_bounds = args.start is not None or args.until is not None
    if has_bounds and args.bucket is not None:
        raise ValueError("Use either --from/--until or --in, not both")
    if has_bounds:
        if args.start is None or args.until is None:
            raise ValueError("--from and --until must be given together")
        start = _parse_timestamp(args.start)
        until = _parse_timestamp(args.until)
        if start > until:
            raise ValueError("Range start must be before end")
        return Interval(start=start, until=until)
    if args.bucket is not None:
        return Relative(token=args.bucket)
    return AllTime()


def _run(args: argparse.Namespace) -> None:
    credentials = get_maloja_credentials()
    if args.command == "scrobble":
        response = scrobble(
            args.title,
            args.artist,
            credentials,
            album=args.album,
            duration=args.duration,
            length=args.length,
            time=_parse_timestamp(args.time) if args.time else None,
        )
        print(response.desc or response.status)
    elif args.command == "scrobbles":
        for item in scrobbles(
            artist=args.artist,
            time_range=_build_range(args),
            page=args.page,
            per_page=args.per_page,
            credentials=credentials,
        ):
            print(f"{item.time.isoformat()}  {item.track.artist} - {item.track.title}")
    elif args.command == "count":
        amount = numscrobbles(
            artist=args.artist, time_range=_build_range(args), credentials=credentials
        )
        print(amount)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.WARNING)

    try:
        _run(parsed_args)
    except (ValueError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except MalojaError as exc:
        log.debug("Maloja request failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
