"""
Board renderer - draws walls, trail, player and goal
"""

import pygame
from utils.constants import CELL_SIZE, MIN_CELL_SIZE, WALL_THICK, TOP, RIGHT, BOTTOM, LEFT
from utils.colors import (
    COLOR_MAZE_BG, COLOR_WALL, COLOR_PLAYER, COLOR_PLAYER_TRAIL, COLOR_GOAL,
    COLOR_CARVING, COLOR_VISITED_CELL
)
from utils.helpers import clamp


def compute_cell_size(cols, rows, avail_w, avail_h):
    """Largest cell size that fits the board area, within limits"""
    fit = min(avail_w // cols, avail_h // rows)
    return clamp(fit, MIN_CELL_SIZE, CELL_SIZE)


class BoardLayout:
    """
    Pixel geometry of the board
    """
    def __init__(self, cols, rows, cell_size, origin=(0, 0)):
        self.cols = cols
        self.rows = rows
        self.cell_size = cell_size
        self.origin = origin

    @property
    def width(self):
        return self.cols * self.cell_size

    @property
    def height(self):
        return self.rows * self.cell_size

    def cell_rect(self, x, y, pad=0):
        """Rect of cell (x, y), shrunk by pad on each side"""
        ox, oy = self.origin
        size = self.cell_size
        return pygame.Rect(ox + x * size + pad, oy + y * size + pad, size - pad * 2, size - pad * 2)

    def cell_center(self, x, y):
        ox, oy = self.origin
        half = self.cell_size // 2
        return (ox + x * self.cell_size + half, oy + y * self.cell_size + half)

    def __repr__(self):
        return f"BoardLayout({self.cols}x{self.rows}, cell={self.cell_size})"


def draw_walls(screen, layout, walls):
    """Draw maze walls from a flat bitmask list"""
    thick = WALL_THICK if layout.cell_size >= 16 else 1
    ox, oy = layout.origin
    size = layout.cell_size

    for y in range(layout.rows):
        for x in range(layout.cols):
            w = walls[y * layout.cols + x]
            x0 = ox + x * size
            y0 = oy + y * size
            x1 = x0 + size
            y1 = y0 + size

            if w & TOP:
                pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x1, y0), thick)
            if w & RIGHT:
                pygame.draw.line(screen, COLOR_WALL, (x1, y0), (x1, y1), thick)
            if w & BOTTOM:
                pygame.draw.line(screen, COLOR_WALL, (x0, y1), (x1, y1), thick)
            if w & LEFT:
                pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x0, y1), thick)


def draw_cell(screen, layout, x, y, color, pad=None):
    """Draw filled cell"""
    if pad is None:
        pad = max(1, layout.cell_size // 6)
    radius = max(1, layout.cell_size // 6)
    pygame.draw.rect(screen, color, layout.cell_rect(x, y, pad), border_radius=radius)


def draw_trail(screen, layout, trail):
    """Draw the player's trail as segments between cell centers"""
    if len(trail) < 2:
        return
    width = max(2, layout.cell_size // 4)
    points = [layout.cell_center(x, y) for x, y in trail]
    for a, b in zip(points, points[1:]):
        pygame.draw.line(screen, COLOR_PLAYER_TRAIL, a, b, width)


def draw_session(screen, layout, session):
    """Draw a game in progress: background, trail, goal, player, walls"""
    pygame.draw.rect(screen, COLOR_MAZE_BG, (layout.origin[0], layout.origin[1], layout.width, layout.height))
    draw_trail(screen, layout, session.trail)
    draw_cell(screen, layout, session.goal[0], session.goal[1], COLOR_GOAL)
    px, py = session.position
    draw_cell(screen, layout, px, py, COLOR_PLAYER)
    draw_walls(screen, layout, session.maze.walls)


def draw_generation(screen, layout, state):
    """Draw one step of animated generation"""
    pygame.draw.rect(screen, COLOR_MAZE_BG, (layout.origin[0], layout.origin[1], layout.width, layout.height))
    visited = state["visited"]
    for y in range(layout.rows):
        for x in range(layout.cols):
            if visited[y * layout.cols + x]:
                pygame.draw.rect(screen, COLOR_VISITED_CELL, layout.cell_rect(x, y))
    cx, cy = state["current"]
    draw_cell(screen, layout, cx, cy, COLOR_CARVING)
    draw_walls(screen, layout, state["walls"])
