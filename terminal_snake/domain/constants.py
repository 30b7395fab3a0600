"""
Game constants for the terminal Snake game.
"""

# Terminal window
WINDOW_WIDTH = 30
WINDOW_HEIGHT = 20
WINDOW_TITLE = "Snake Game :D"

# Board settings
MAX_COLUMNS = 15
MAX_ROWS = 15
CHANCE_TO_DROP = 2
APPLE_DRAW_MAX = 10  # apples.grow() draws from 0..APPLE_DRAW_MAX inclusive

# Initial snake layout, head first
INITIAL_CELLS = [(6, 5), (5, 5), (4, 5), (4, 4)]

# Glyphs
APPLE_CHAR = "•"
TAIL_CHAR = "o"
HORIZONTAL_WALL_CHAR = "-"
VERTICAL_WALL_CHAR = "|"

# Overlay messages
PAUSE_MSG = "Press enter to resume"
GAME_OVER_MSG = "Game Over!"
SCORE_MSG = "Score: {score}"
RESTART_MSG = "Press enter to start"
