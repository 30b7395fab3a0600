"""
Runtime settings, read from the environment (and a .env file if present).
"""

import os
from typing import Optional

from dotenv import load_dotenv

from terminal_snake.domain.constants import CHANCE_TO_DROP as DEFAULT_CHANCE_TO_DROP

load_dotenv()

LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()
# curses owns the screen, so logs go to a file
LOG_FILE = os.getenv("SNAKE_LOG_FILE", "snake.log")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


CHANCE_TO_DROP = _int_from_env("SNAKE_CHANCE_TO_DROP", DEFAULT_CHANCE_TO_DROP)
RANDOM_SEED = _int_from_env("SNAKE_RANDOM_SEED", None)
