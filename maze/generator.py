"""
Maze generation - randomized depth-first backtracker
"""

import random
from utils.constants import ALL_WALLS, MOVES
from maze.errors import InvalidDimension
from maze.maze_core import Maze, carve_passage


def idx(cols, x, y):
    """Helper to get 1D index"""
    return y * cols + x


def in_bounds(cols, rows, x, y):
    """Check if coordinates are in bounds"""
    return 0 <= x < cols and 0 <= y < rows


def check_dimensions(cols, rows):
    """Raise InvalidDimension unless both sizes are positive integers"""
    for name, value in (("width", cols), ("height", rows)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimension(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimension(f"{name} must be positive, got {value}")


def _make_rng(rng, seed):
    if rng is not None:
        return rng
    if seed is not None:
        return random.Random(seed)
    return random


# ========== GENERATOR: DFS BACKTRACKER ==========

def gen_dfs_backtracker(cols, rows, rng=None, seed=None):
    """
    Depth-First Search with backtracking - animated generator

    Dimensions are checked right away; carving happens as the returned
    generator is consumed. Each step yields a dict with the wall bitmasks,
    visited flags, current cell, the carved edge (or None) and a done flag.

    Args:
        cols: Maze width
        rows: Maze height
        rng: Random source with randrange() and choice()
        seed: Seed for a private random.Random when rng is not given
    """
    check_dimensions(cols, rows)
    return _dfs_steps(cols, rows, _make_rng(rng, seed))


def _dfs_steps(cols, rows, rng):
    walls = [ALL_WALLS for _ in range(cols * rows)]
    visited = [False] * (cols * rows)

    cx, cy = rng.randrange(cols), rng.randrange(rows)
    visited[idx(cols, cx, cy)] = True
    visited_count = 1
    total = cols * rows

    stack = [(cx, cy)]

    yield {"walls": walls, "visited": visited, "current": (cx, cy), "carved": None, "done": False}

    while visited_count < total:
        cx, cy = stack[-1]
        neighbors = []

        for move in MOVES:
            nx, ny = cx + move.dx, cy + move.dy
            if in_bounds(cols, rows, nx, ny) and not visited[idx(cols, nx, ny)]:
                neighbors.append((nx, ny, move))

        if not neighbors:
            stack.pop()
            yield {"walls": walls, "visited": visited, "current": stack[-1], "carved": None, "done": False}
            continue

        nx, ny, move = rng.choice(neighbors)
        carve_passage(walls, cols, cx, cy, nx, ny)
        visited[idx(cols, nx, ny)] = True
        visited_count += 1
        stack.append((nx, ny))

        yield {"walls": walls, "visited": visited, "current": (nx, ny), "carved": ((cx, cy), (nx, ny)), "done": False}

    yield {"walls": walls, "visited": visited, "current": stack[-1], "carved": None, "done": True}


def maze_from_state(cols, rows, state):
    """Freeze the walls of a finished generator state into a Maze"""
    return Maze(cols, rows, state["walls"])


def generate_maze(width, height, rng=None, seed=None):
    """
    Generate a perfect maze instantly

    Returns:
        Maze with only wall state, visited bookkeeping dropped
    """
    last_state = None
    for state in gen_dfs_backtracker(width, height, rng=rng, seed=seed):
        last_state = state
    return maze_from_state(width, height, last_state)
