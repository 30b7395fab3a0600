"""
Entry point: set up logging, take over the terminal and play.

Usage:
    terminal-snake
    python -m terminal_snake.main

Arrow keys steer, Enter pauses/resumes (or restarts after a game over),
Escape quits.
"""

import curses
import locale
import logging
import random

from terminal_snake import config
from terminal_snake.game import SnakeGame
from terminal_snake.services.terminal import CursesTerminal

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        filename=config.LOG_FILE,
    )


def play(window) -> None:
    """Run one session on a curses window; returns only via SystemExit."""
    terminal = CursesTerminal(window)
    game = SnakeGame(
        terminal,
        growth_speed=config.CHANCE_TO_DROP,
        rng=random.Random(config.RANDOM_SEED),
    )
    game.run()


def main() -> None:
    configure_logging()
    # Needed for curses to draw the non-ASCII head and apple glyphs
    locale.setlocale(locale.LC_ALL, "")
    logger.info(
        "Starting terminal snake (chance_to_drop=%s, seed=%s)",
        config.CHANCE_TO_DROP,
        config.RANDOM_SEED,
    )
    try:
        curses.wrapper(play)
    except SystemExit:
        logger.info("Terminal restored, bye")
        raise
    except Exception:
        logger.exception("Snake game crashed")
        raise


if __name__ == "__main__":
    main()
