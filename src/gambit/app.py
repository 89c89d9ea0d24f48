"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from gambit.core.enums import Color
from gambit.core.notation import board_from_fen
from gambit.ui.styles.theme import THEMES

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gambit",
        description="Two-player chess board with turn-based move checking.",
    )
    parser.add_argument(
        "--fen",
        metavar="PLACEMENT",
        help="start from a FEN piece placement instead of the standard setup",
    )
    parser.add_argument(
        "--black-first",
        action="store_true",
        help="give Black the first move (useful with --fen)",
    )
    parser.add_argument("--theme", choices=sorted(THEMES), default="Classic")
    parser.add_argument("--language", default="English")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the Gambit application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=_LOG_FORMAT)

    if args.fen is not None:
        try:
            board_from_fen(args.fen)
        except ValueError as exc:
            parser.error(str(exc))

    from gambit.ui.bootstrap import run_application
    from gambit.ui.settings import AppSettings

    settings = AppSettings(language=args.language, board_theme=args.theme)
    side = Color.BLACK if args.black_first else Color.WHITE
    sys.exit(
        run_application(
            sys.argv[:1],
            settings=settings,
            placement=args.fen,
            side_to_move=side,
        )
    )


if __name__ == "__main__":
    main()
