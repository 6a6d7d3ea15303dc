"""
Core maze structures - cells, the immutable maze grid, and graph checks
"""

from collections import deque, namedtuple
from utils.constants import ALL_WALLS, WALL_BITS, MOVES, DELTA_TO_MOVE


# Wall state of one cell, True means the wall is present
Cell = namedtuple('Cell', ['top', 'right', 'bottom', 'left'])


def cell_from_bits(w):
    """Build a Cell from a wall bitmask"""
    return Cell(
        top=bool(w & WALL_BITS['top']),
        right=bool(w & WALL_BITS['right']),
        bottom=bool(w & WALL_BITS['bottom']),
        left=bool(w & WALL_BITS['left']),
    )


class Maze:
    """
    Immutable maze grid
    cols x rows cells, indexed by (x, y) with (0, 0) at the top left
    """
    def __init__(self, cols, rows, walls):
        """
        Args:
            cols: Width in cells
            rows: Height in cells
            walls: Flat list of wall bitmasks, row by row
        """
        if len(walls) != cols * rows:
            raise ValueError(f"expected {cols * rows} cells, got {len(walls)}")
        self.cols = cols
        self.rows = rows
        self._walls = tuple(w & ALL_WALLS for w in walls)
        self._cells = tuple(
            tuple(cell_from_bits(self._walls[y * cols + x]) for x in range(cols))
            for y in range(rows)
        )

    @property
    def width(self):
        return self.cols

    @property
    def height(self):
        return self.rows

    @property
    def walls(self):
        """Flat tuple of wall bitmasks (for drawing)"""
        return self._walls

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x, y):
        """Wall state of the cell at (x, y)"""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.cols}x{self.rows} maze")
        return self._cells[y][x]

    def __getitem__(self, pos):
        x, y = pos
        return self.cell(x, y)

    def __iter__(self):
        """Iterate over ((x, y), cell) pairs"""
        for y, line in enumerate(self._cells):
            for x, cell in enumerate(line):
                yield (x, y), cell

    def __eq__(self, other):
        if not isinstance(other, Maze):
            return NotImplemented
        return (self.cols, self.rows, self._walls) == (other.cols, other.rows, other._walls)

    def __hash__(self):
        return hash((self.cols, self.rows, self._walls))

    def can_move(self, x, y, move):
        """Check if the wall on (x, y) in the move's direction is open"""
        nx, ny = x + move.dx, y + move.dy
        if not self.in_bounds(nx, ny):
            return False
        return not getattr(self._cells[y][x], move.wall)

    def neighbors_open(self, x, y):
        """Get list of open neighbor cells"""
        return [(x + m.dx, y + m.dy) for m in MOVES if self.can_move(x, y, m)]

    def is_open_between(self, a, b):
        """Check if passage is open between two adjacent cells"""
        move = DELTA_TO_MOVE.get((b[0] - a[0], b[1] - a[1]))
        if move is None:
            return False
        return self.can_move(a[0], a[1], move)

    def passages(self):
        """All open edges, each listed once as (cell, right/down neighbor)"""
        edges = []
        for y in range(self.rows):
            for x in range(self.cols):
                if x + 1 < self.cols and not self._cells[y][x].right:
                    edges.append(((x, y), (x + 1, y)))
                if y + 1 < self.rows and not self._cells[y][x].bottom:
                    edges.append(((x, y), (x, y + 1)))
        return edges

    def __repr__(self):
        return f"Maze({self.cols}x{self.rows})"


# ========== WALL CARVING ==========

def carve_passage(walls, cols, ax, ay, bx, by):
    """Carve a passage between two adjacent cells of a bitmask list"""
    move = DELTA_TO_MOVE.get((bx - ax, by - ay))
    if move is None:
        return
    walls[ay * cols + ax] &= ~WALL_BITS[move.wall]
    walls[by * cols + bx] &= ~WALL_BITS[move.opposite]


# ========== GRAPH CHECKS ==========

def reachable_cells(maze, start):
    """Set of cells reachable from start through open walls (BFS)"""
    q = deque([start])
    seen = {start}

    while q:
        x, y = q.popleft()
        for n in maze.neighbors_open(x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def walls_symmetric(maze):
    """Every shared wall is present on both sides or on neither"""
    for (x, y), cell in maze:
        for move in MOVES:
            nx, ny = x + move.dx, y + move.dy
            if not maze.in_bounds(nx, ny):
                continue
            if getattr(cell, move.wall) != getattr(maze.cell(nx, ny), move.opposite):
                return False
    return True


def borders_closed(maze):
    """No cell has an open wall pointing outside the grid"""
    for (x, y), cell in maze:
        for move in MOVES:
            if not maze.in_bounds(x + move.dx, y + move.dy) and not getattr(cell, move.wall):
                return False
    return True


def is_perfect(maze):
    """
    Opening graph is a spanning tree: connected, cols*rows - 1 edges,
    walls symmetric and borders closed
    """
    total = maze.cols * maze.rows
    if not walls_symmetric(maze) or not borders_closed(maze):
        return False
    if len(maze.passages()) != total - 1:
        return False
    return len(reachable_cells(maze, (0, 0))) == total
