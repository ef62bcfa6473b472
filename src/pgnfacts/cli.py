"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pgnfacts.config import BACKENDS, RATING_MODES, get_settings
from pgnfacts.EncodingLayout import BYTE_ORDERS
from pgnfacts.errors import ConfigError, StoreError
from pgnfacts.import_games__pipeline import import_games
from pgnfacts.utils.logger import get_logger, set_level

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_STORE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnfacts",
        description="Import a PGN archive into game summary and position fact tables.",
    )
    parser.add_argument("--input", dest="input_path", help="PGN file (.pgn, .gz, .bz2, .zst)")
    parser.add_argument("--output", dest="output_path", help="Store file to create or resume")
    parser.add_argument("--encoding-width", type=int, help="Encoded position width in bits (>= 773)")
    parser.add_argument("--byte-order", choices=BYTE_ORDERS)
    parser.add_argument(
        "--castling-padding",
        type=int,
        help="Zero bits between piece placement and castling flags (default: byte boundary)",
    )
    parser.add_argument("--backend", choices=BACKENDS)
    parser.add_argument(
        "--exclude-header",
        dest="excluded_headers",
        action="append",
        help="Header to drop; repeat for several (default: WhiteTitle, BlackTitle)",
    )
    parser.add_argument("--rating-mode", choices=RATING_MODES)
    parser.add_argument("--progress-interval", type=int)
    parser.add_argument("--max-games", type=int, help="Stop after this many games")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = vars(build_parser().parse_args(argv))
    set_level(getattr(logging, args.pop("log_level")))
    try:
        settings = get_settings(**args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_CONFIG_ERROR
    try:
        report = import_games(settings)
    except StoreError as exc:
        logger.error("Fatal store error: %s", exc)
        return EXIT_STORE_ERROR
    print(report.summary())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
