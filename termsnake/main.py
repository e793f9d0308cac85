#!/usr/bin/env python3
"""
Play Snake in the terminal.

Usage:
    termsnake
    python -m termsnake --rows 20 --cols 60

Examples:
    # Reproducible food placement
    termsnake --seed 42

    # Let the autopilot play (arrow keys still steer, F2 quits)
    termsnake --demo

    # Debug log to a file (the terminal belongs to the game)
    termsnake --log-file snake.log --log-level DEBUG
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import Settings, load_settings
from .domain.constants import LOST
from .errors import ConfigError, DisplayTooSmallError, SegmentOverlapError
from .game import SnakeGame, run_game
from .players import KeyboardPlayer, RandomPlayer
from .services import CursesRenderer, terminal_screen

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DISPLAY_TOO_SMALL = 1
EXIT_BAD_CONFIG = 2

GOODBYE = "Leaving...bye! See you later :)"


def farewell_message(game: SnakeGame) -> str:
    if game.status == LOST:
        return f"You scored {game.score} points!"
    return GOODBYE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Snake on a wrap-around board, in your terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--rows", type=int, help="Field height in cells (default: SNAKE_ROWS or 30)")
    parser.add_argument("--cols", type=int, help="Field width in cells (default: SNAKE_COLS or 120)")
    parser.add_argument("--length", dest="starting_length", type=int,
                        help="Starting snake length (default: SNAKE_STARTING_LENGTH or 3)")
    parser.add_argument("--tick-ms", dest="tick_ms", type=int,
                        help="Milliseconds to wait for a key each tick (default: SNAKE_TICK_MS or 30)")
    parser.add_argument("--seed", type=int, help="Seed for food placement (default: SNAKE_SEED or random)")
    parser.add_argument("--demo", action="store_true", help="Let a random autopilot steer")
    parser.add_argument("--log-file", dest="log_file", type=str, help="Write logs to this file")
    parser.add_argument("--log-level", dest="log_level", type=str.upper,
                        help="DEBUG, INFO, WARNING, ERROR (default: SNAKE_LOG_LEVEL or WARNING)")
    return parser


def configure_logging(settings: Settings) -> None:
    if settings.log_file:
        logging.basicConfig(
            level=settings.numeric_log_level,
            filename=settings.log_file,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        # stderr would draw over the curses screen
        logging.basicConfig(level=settings.numeric_log_level, handlers=[logging.NullHandler()])


def play(settings: Settings, demo: bool = False) -> SnakeGame:
    """Run one interactive session and return the finished game."""
    seed = settings.seed if settings.seed is not None else random.randrange(2 ** 32)
    rng = random.Random(seed)
    game = SnakeGame(
        rows=settings.rows,
        cols=settings.cols,
        starting_length=settings.starting_length,
        food_reward=settings.food_reward,
        rng=rng
    )
    logger.info(f"Session {game.session_id} using seed {seed}")

    with terminal_screen(settings.rows, settings.cols, settings.tick_ms) as screen:
        renderer = CursesRenderer(screen.field, screen.score, use_color=screen.use_color)
        autopilot = RandomPlayer(random.Random(seed + 1)) if demo else None
        player = KeyboardPlayer(screen.field, autopilot=autopilot)
        run_game(game, player, renderer)
        screen.farewell(farewell_message(game))

    return game


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings().with_overrides(
            rows=args.rows,
            cols=args.cols,
            starting_length=args.starting_length,
            tick_ms=args.tick_ms,
            seed=args.seed,
            log_file=args.log_file,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    configure_logging(settings)

    try:
        game = play(settings, demo=args.demo)
    except DisplayTooSmallError as e:
        logger.error(f"Display too small: {e.actual_rows}x{e.actual_cols}")
        print(e)
        return EXIT_DISPLAY_TOO_SMALL
    except SegmentOverlapError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    print(f"Final score: {game.score}")
    return EXIT_OK


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
