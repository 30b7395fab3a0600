"""
Game loop and state machine for terminal Snake.

SnakeGame owns the snake, the apples, the current GameState and the ticker
that drives it. Each tick polls one key, handles Enter/Escape, and, while the
game is in progress, advances the snake and redraws the board.
"""

import logging
import random
import sys
from typing import Dict, List, Optional, Tuple

from terminal_snake.domain.apples import Apples
from terminal_snake.domain.constants import (
    APPLE_CHAR,
    CHANCE_TO_DROP,
    GAME_OVER_MSG,
    HORIZONTAL_WALL_CHAR,
    INITIAL_CELLS,
    MAX_COLUMNS,
    MAX_ROWS,
    PAUSE_MSG,
    RESTART_MSG,
    SCORE_MSG,
    TAIL_CHAR,
    VERTICAL_WALL_CHAR,
    WINDOW_WIDTH,
)
from terminal_snake.domain.game_state import GameState
from terminal_snake.domain.geometry import Cell, Direction
from terminal_snake.domain.snake import Snake
from terminal_snake.services.terminal import KeyEvent, KeyType, Terminal
from terminal_snake.services.ticker import Ticker

logger = logging.getLogger(__name__)

HEAD_CHARS: Dict[Direction, str] = {
    Direction.UP: "∆",
    Direction.DOWN: "¥",
    Direction.LEFT: "≤",
    Direction.RIGHT: "≥",
}

KEY_DIRECTIONS: Dict[KeyType, Direction] = {
    KeyType.ARROW_UP: Direction.UP,
    KeyType.ARROW_DOWN: Direction.DOWN,
    KeyType.ARROW_LEFT: Direction.LEFT,
    KeyType.ARROW_RIGHT: Direction.RIGHT,
}

# (highest score, tick period in ms); anything above the last step uses FASTEST_TICK_MS
SPEED_STEPS: List[Tuple[int, int]] = [
    (5, 200),
    (10, 180),
    (15, 160),
    (20, 140),
]
FASTEST_TICK_MS = 120


def tick_period_ms(score: int) -> int:
    """Milliseconds between ticks for a given score; longer snakes move faster."""
    for max_score, period in SPEED_STEPS:
        if score <= max_score:
            return period
    return FASTEST_TICK_MS


def direction_for_key(key_event: Optional[KeyEvent]) -> Optional[Direction]:
    if key_event is None:
        return None
    return KEY_DIRECTIONS.get(key_event.key_type)


def initial_snake() -> Snake:
    return Snake([Cell(x, y) for x, y in INITIAL_CELLS])


def is_game_over(snake: Snake) -> bool:
    """The snake has bitten itself or left the playable interior."""
    return snake.hits_itself() or not snake.is_within(MAX_COLUMNS, MAX_ROWS)


class SnakeGame:
    """
    Manages:
      - Snake and apples
      - Game state transitions (pause, game over, restart)
      - Tick period (speeds up as the snake grows)
      - Rendering through the terminal
    """

    def __init__(
        self,
        terminal: Terminal,
        growth_speed: int = CHANCE_TO_DROP,
        rng: Optional[random.Random] = None,
        ticker: Optional[Ticker] = None,
    ):
        self.terminal = terminal
        self.rng = rng or random.Random()
        self.ticker = ticker or Ticker(self.game_cycle)
        self.state = GameState.INITIALIZATION
        self.snake = initial_snake()
        self.apples = Apples(growth_speed=growth_speed, rng=self.rng)
        self.score = self.snake.score
        self.tick_count = 0

    def start(self) -> None:
        """Build a fresh board, draw it and (re)start ticking."""
        self.ticker.cancel()
        self.state = GameState.INITIALIZATION
        self.snake = initial_snake()
        self.apples.clear()
        self.score = self.snake.score
        self.tick_count = 0
        self.draw_game()
        self.ticker.start(tick_period_ms(self.score))
        self.state = GameState.IN_PROGRESS
        logger.info("Game started (score %s, tick %s ms)", self.score, self.ticker.period_ms)

    def run(self) -> None:
        """Start the game and block in the tick loop until the process exits."""
        self.start()
        self.ticker.run_forever()

    def game_cycle(self) -> None:
        """One tick: handle system keys, then advance if the game is running."""
        key_event = self.terminal.poll_input()
        restarted = self.system_process(key_event)
        if restarted or self.state != GameState.IN_PROGRESS:
            return

        self.update(key_event)

    def system_process(self, key_event: Optional[KeyEvent]) -> bool:
        """
        Handle Enter and Escape in any state.

        Returns:
            True if a new game was started; its first tick is already scheduled
        """
        if key_event is None:
            return False

        if key_event.key_type == KeyType.ENTER:
            if self.state == GameState.GAME_OVER:
                logger.info("Restarting after game over")
                self.start()
                return True
            elif self.state == GameState.IN_PROGRESS:
                self.pause()
            elif self.state == GameState.PAUSE:
                self.resume()
        elif key_event.key_type == KeyType.ESCAPE:
            self.exit()
        return False

    def pause(self) -> None:
        self.state = GameState.PAUSE
        self.print_centered(PAUSE_MSG, MAX_ROWS + 2)
        self.terminal.flush()
        logger.info("Game paused at score %s", self.score)

    def resume(self) -> None:
        self.state = GameState.IN_PROGRESS
        logger.info("Game resumed")

    def exit(self) -> None:
        logger.info("Escape pressed, exiting (score %s)", self.score)
        self.ticker.stop()
        sys.exit(0)

    def update(self, key_event: Optional[KeyEvent]) -> None:
        """
        Advance the game by one step.

        Order matters: turn, move, eat, drop apples, then judge the new
        position. The board is drawn before the game-over overlay so the
        overlay stays on screen.
        """
        self.tick_count += 1
        self.snake.turn(direction_for_key(key_event))
        self.snake.move()
        increased = self.snake.eat(self.apples)
        self.apples.grow()

        self.score = self.snake.score
        is_over = is_game_over(self.snake)
        logger.debug(
            "Tick %s: head=%s direction=%s score=%s apples=%s",
            self.tick_count,
            self.snake.head,
            self.snake.direction.name,
            self.score,
            len(self.apples),
        )

        self.draw_game()

        if increased:
            period = tick_period_ms(self.score)
            if period != self.ticker.period_ms:
                logger.debug("Speeding up to %s ms per tick (score %s)", period, self.score)
            self.ticker.start(period)

        if is_over:
            self.game_over()

    def game_over(self) -> None:
        self.state = GameState.GAME_OVER
        self.print_centered(GAME_OVER_MSG, MAX_ROWS + 1)
        self.print_centered(SCORE_MSG.format(score=self.score), MAX_ROWS + 2)
        self.print_centered(RESTART_MSG, MAX_ROWS + 3)
        self.terminal.flush()
        logger.info("Game over after %s ticks with score %s", self.tick_count, self.score)

    # -------------------------------
    # Rendering
    # -------------------------------

    def draw_game(self) -> None:
        self.terminal.clear_screen()
        for apple in self.apples.cells:
            self.print_in_position(APPLE_CHAR, apple)
        for segment in self.snake.tail:
            self.print_in_position(TAIL_CHAR, segment)
        self.print_in_position(HEAD_CHARS[self.snake.direction], self.snake.head)
        self.draw_box()
        self.terminal.flush()

    def draw_box(self) -> None:
        for i in range(MAX_COLUMNS):
            self.print_in_position(HORIZONTAL_WALL_CHAR, Cell(i, 0))
            self.print_in_position(HORIZONTAL_WALL_CHAR, Cell(i, MAX_ROWS - 1))
        for i in range(MAX_ROWS):
            self.print_in_position(VERTICAL_WALL_CHAR, Cell(0, i))
            self.print_in_position(VERTICAL_WALL_CHAR, Cell(MAX_COLUMNS - 1, i))

    def print_in_position(self, char: str, cell: Cell) -> None:
        self.terminal.draw_char(cell.x, cell.y, char)
        self.terminal.park_cursor()

    def print_centered(self, text: str, row: int) -> None:
        self.terminal.draw_string((WINDOW_WIDTH - len(text)) // 2, row, text)
        self.terminal.park_cursor()

    def __repr__(self):
        return (
            f"<SnakeGame state={self.state.name}, score={self.score}, "
            f"apples={len(self.apples)}, tick_ms={self.ticker.period_ms}>"
        )
