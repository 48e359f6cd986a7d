"""Command-line entry point for building a programme feed."""
from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence

from . import build_feed as build_feed_module
from .feed.config import DEFAULT_BRAND, build_settings


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radiorus-feed",
        description="Build an RSS feed from a radiorus.ru or smotrim.ru programme page.",
    )
    parser.add_argument(
        "--brand",
        default=DEFAULT_BRAND,
        help="brand number (defaults to Aerostat, %(default)s)",
    )
    parser.add_argument(
        "--path",
        default="./",
        help="directory to put the resulting RSS file in (default: %(default)s)",
    )
    parser.add_argument(
        "--smotrim",
        action="store_true",
        help="use smotrim.ru directly",
    )
    parser.add_argument(
        "--retries",
        type=_non_negative_int,
        default=None,
        help="retries when the page is caught mid-update (overrides BAD_EPISODE_RETRIES)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = build_settings()
    if args.retries is not None:
        settings = dataclasses.replace(settings, bad_episode_retries=args.retries)

    return build_feed_module.main(
        args.brand,
        args.path,
        smotrim=args.smotrim,
        settings=settings,
    )


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
