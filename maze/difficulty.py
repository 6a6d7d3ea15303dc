"""
Difficulty level configurations for Maze Trail
Every level is a square grid, harder levels are just bigger
"""

from utils.constants import (
    DIFFICULTY_EASY, DIFFICULTY_NORMAL, DIFFICULTY_HARD,
    DIFFICULTY_EXPERT, DIFFICULTY_NIGHTMARE, DIFFICULTY_NAMES
)
from utils.helpers import clamp


class DifficultyConfig:
    """Configuration for a single difficulty level"""
    def __init__(self, level, size):
        self.level = level
        self.name = DIFFICULTY_NAMES[level]
        self.cols = size
        self.rows = size

    @property
    def size(self):
        return self.cols

    def __repr__(self):
        return f"DifficultyConfig({self.name}, {self.cols}x{self.rows})"


# ========== DIFFICULTY LEVEL DEFINITIONS ==========

LEVEL_EASY = DifficultyConfig(DIFFICULTY_EASY, 10)
LEVEL_NORMAL = DifficultyConfig(DIFFICULTY_NORMAL, 15)
LEVEL_HARD = DifficultyConfig(DIFFICULTY_HARD, 20)
LEVEL_EXPERT = DifficultyConfig(DIFFICULTY_EXPERT, 30)
LEVEL_NIGHTMARE = DifficultyConfig(DIFFICULTY_NIGHTMARE, 40)

DIFFICULTY_CONFIGS = [
    LEVEL_EASY,
    LEVEL_NORMAL,
    LEVEL_HARD,
    LEVEL_EXPERT,
    LEVEL_NIGHTMARE,
]


def get_difficulty_config(difficulty_level):
    """
    Get configuration for a difficulty level

    Args:
        difficulty_level: 0-4, out of range values are clamped

    Returns:
        DifficultyConfig
    """
    difficulty_level = clamp(difficulty_level, 0, len(DIFFICULTY_CONFIGS) - 1)
    return DIFFICULTY_CONFIGS[difficulty_level]


def get_difficulty_by_name(name):
    """Look up a level by its name, case insensitive"""
    name = name.upper()
    for config in DIFFICULTY_CONFIGS:
        if config.name == name:
            return config
    raise KeyError(f"unknown difficulty {name!r}")
