"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence

from seabattle.game.app.commands import ALPHABETS
from seabattle.game.app.console import ANSI_CLEAR, Console
from seabattle.game.app.loop import GameLoop
from seabattle.game.infra.app_data import ensure_app_data_dirs
from seabattle.game.infra.config import ConfigError, load_default_env_files, load_game_config
from seabattle.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seabattle", description="Two-player terminal sea battle.")
    parser.add_argument(
        "--dev",
        action="store_true",
        default=None,
        help="Dev mode: random ship placement, boards always visible, turn never passes.",
    )
    parser.add_argument(
        "--alphabet",
        choices=sorted(ALPHABETS),
        default=None,
        help="Column letters and direction symbols for commands.",
    )
    parser.add_argument("--width", type=int, default=None, help="Board width in columns.")
    parser.add_argument("--height", type=int, default=None, help="Board height in rows.")
    parser.add_argument(
        "--players",
        nargs=2,
        metavar=("FIRST", "SECOND"),
        default=None,
        help="Player names in turn order.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for dev-mode random placement.")
    parser.add_argument(
        "--no-clear",
        dest="clear_screen",
        action="store_false",
        default=None,
        help="Do not clear the terminal between frames.",
    )
    parser.add_argument(
        "--message-delay",
        type=float,
        default=None,
        help="Seconds to pause after BAD INPUT / CONFLICT messages.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one game in the terminal and return a process exit code."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    ensure_app_data_dirs()
    setup_logging()
    try:
        config = load_game_config(
            width=args.width,
            height=args.height,
            alphabet_name=args.alphabet,
            dev_mode=args.dev,
            players=args.players,
            seed=args.seed,
            clear_screen=args.clear_screen,
            message_delay=args.message_delay,
        )
    except ConfigError as exc:
        logger.error("config_error %s", exc)
        print(f"seabattle: {exc}")
        shutdown_logging()
        return 2

    console = Console(clear_sequence=ANSI_CLEAR if config.clear_screen else "\n")
    try:
        session = GameLoop(config, console, random.Random(config.seed)).run()
        logger.info("game_finished winner=%s", session.winner.name if session.winner is not None else None)
    except KeyboardInterrupt:
        logger.info("game_interrupted")
        return 130
    except Exception:
        logger.exception("game_failed")
        return 1
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
