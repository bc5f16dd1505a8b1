"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from greekchess.ui.settings import BOARD_THEME_NAMES, AppSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="greekchess", description="Chess with the gods of Olympus."
    )
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    parser.add_argument(
        "--board-theme", choices=BOARD_THEME_NAMES, default="Marble"
    )
    parser.add_argument(
        "--no-god-names",
        action="store_true",
        help="show bare piece symbols without the gods' names",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Launch the Greek Gods Chess application."""
    from greekchess.ui.bootstrap import run_application

    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = AppSettings(
        board_theme=args.board_theme, show_god_names=not args.no_god_names
    )
    sys.exit(run_application([sys.argv[0]], settings))


if __name__ == "__main__":
    main()
