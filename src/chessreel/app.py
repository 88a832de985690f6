"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chessreel import __version__
from chessreel.settings import BOARD_THEMES, ViewerSettings

_LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _seconds_to_ms(value: str) -> int:
    try:
        seconds = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc
    if seconds < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return round(seconds * 1000)


def build_parser() -> argparse.ArgumentParser:
    defaults = ViewerSettings()
    parser = argparse.ArgumentParser(
        prog="chessreel",
        description="Replay random games from a directory of PGN files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--games-dir",
        type=Path,
        default=defaults.games_dir,
        help="directory containing *.pgn files (default: %(default)s)",
    )
    parser.add_argument(
        "--delay",
        type=_seconds_to_ms,
        default=defaults.move_delay_ms,
        metavar="SECONDS",
        help="delay between moves",
    )
    parser.add_argument(
        "--animation",
        type=_seconds_to_ms,
        default=defaults.animation_ms,
        metavar="SECONDS",
        help="piece slide duration, 0 to disable",
    )
    parser.add_argument(
        "--pause",
        type=_seconds_to_ms,
        default=defaults.game_over_pause_ms,
        metavar="SECONDS",
        help="time the final position stays on screen",
    )
    parser.add_argument("--theme", choices=BOARD_THEMES, default=defaults.board_theme)
    parser.add_argument(
        "--no-coordinates",
        dest="show_coordinates",
        action="store_false",
        help="hide rank and file labels",
    )
    parser.add_argument("--fullscreen", action="store_true")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    return parser


def settings_from_args(args: argparse.Namespace) -> ViewerSettings:
    return ViewerSettings(
        games_dir=args.games_dir,
        seed=args.seed,
        move_delay_ms=args.delay,
        animation_ms=args.animation,
        game_over_pause_ms=args.pause,
        board_theme=args.theme,
        show_coordinates=args.show_coordinates,
        fullscreen=args.fullscreen,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the chessreel viewer."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = settings_from_args(args)
    if not settings.games_dir.is_dir():
        _LOGGER.error("PGN directory not found: %s", settings.games_dir)
        sys.exit(1)

    from chessreel.ui.bootstrap import run_application

    sys.exit(run_application(settings))


if __name__ == "__main__":
    main()
