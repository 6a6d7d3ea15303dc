"""
Game configuration
"""

from utils.constants import DIFFICULTY_NORMAL

GAME_TITLE = "Maze Trail"
GAME_VERSION = "1.0.0"

# Difficulty used when none is given on the command line
DEFAULT_DIFFICULTY = DIFFICULTY_NORMAL

# Menu window size, and the largest board area a maze may take
WINDOW_W = 640
WINDOW_H = 520
MAX_BOARD_W = 960
MAX_BOARD_H = 720

# Animated generation speed (carving steps per second)
GEN_SPEED = 400

# Held arrow keys repeat after this delay, then at this interval (ms)
KEY_REPEAT_DELAY = 250
KEY_REPEAT_INTERVAL = 90
