"""
Global constants for Maze Trail
"""

from collections import namedtuple

# Screen settings
CELL_SIZE = 32
MIN_CELL_SIZE = 8
FPS = 60
WALL_THICK = 3

# HUD panel height (timer, moves, arrow buttons)
PANEL_H = 110

# Wall bit flags (for maze generation)
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8

ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# Wall flag name -> bit
WALL_BITS = {
    'top': TOP,
    'right': RIGHT,
    'bottom': BOTTOM,
    'left': LEFT,
}

# A direction: delta, wall cleared on the cell left, wall cleared on the
# cell entered, and the input tokens that trigger it
Move = namedtuple('Move', ['name', 'dx', 'dy', 'wall', 'opposite', 'keys'])

MOVE_UP = Move('up', 0, -1, 'top', 'bottom', ('up', 'w'))
MOVE_RIGHT = Move('right', 1, 0, 'right', 'left', ('right', 'd'))
MOVE_DOWN = Move('down', 0, 1, 'bottom', 'top', ('down', 's'))
MOVE_LEFT = Move('left', -1, 0, 'left', 'right', ('left', 'a'))

MOVES = (MOVE_UP, MOVE_RIGHT, MOVE_DOWN, MOVE_LEFT)

MOVES_BY_NAME = {move.name: move for move in MOVES}

# Delta -> move
DELTA_TO_MOVE = {(move.dx, move.dy): move for move in MOVES}

# Keys that start a game or ask to restart one
CONTROL_KEYS = ('return', 'space', 'r')

# Player entry cell, the goal is always the opposite corner
START_POS = (0, 0)

# Difficulty levels (sizes live in maze/difficulty.py)
DIFFICULTY_EASY = 0
DIFFICULTY_NORMAL = 1
DIFFICULTY_HARD = 2
DIFFICULTY_EXPERT = 3
DIFFICULTY_NIGHTMARE = 4

DIFFICULTY_NAMES = [
    "EASY",
    "NORMAL",
    "HARD",
    "EXPERT",
    "NIGHTMARE"
]
