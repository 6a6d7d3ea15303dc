"""
Path tracking - validates player moves against the maze and keeps the trail
"""

from enum import Enum, auto
from utils.constants import MOVES, MOVES_BY_NAME
from maze.errors import EmptyTrail, UnknownDirection


class MoveResult(Enum):
    """What a move attempt did to the trail"""
    BLOCKED = auto()
    ADVANCED = auto()
    RETRACED = auto()


class MoveOutcome:
    """
    Result of one move attempt

    For ADVANCED, from_cell is the cell left and to_cell the cell appended.
    For RETRACED, from_cell is the cell popped off the trail and to_cell the
    cell the player is back on. BLOCKED carries the current cell in both.
    """
    def __init__(self, result, move, from_cell, to_cell, goal_reached=False):
        self.result = result
        self.move = move
        self.from_cell = from_cell
        self.to_cell = to_cell
        self.goal_reached = goal_reached

    @property
    def blocked(self):
        return self.result is MoveResult.BLOCKED

    @property
    def advanced(self):
        return self.result is MoveResult.ADVANCED

    @property
    def retraced(self):
        return self.result is MoveResult.RETRACED

    def __repr__(self):
        goal = ", goal" if self.goal_reached else ""
        return f"MoveOutcome({self.result.name}, {self.move.name}, {self.from_cell}->{self.to_cell}{goal})"


def resolve_move(direction):
    """Map a Move or move name onto the static move table"""
    if isinstance(direction, str):
        move = MOVES_BY_NAME.get(direction)
        if move is None:
            raise UnknownDirection(f"unknown direction {direction!r}")
        return move
    if direction not in MOVES:
        raise UnknownDirection(f"unknown direction {direction!r}")
    return direction


def attempt_move(maze, trail, direction, goal, controls=None):
    """
    Try to move the player one cell

    Args:
        maze: Maze being played
        trail: List of (x, y) cells, last one is the player; updated in place
        direction: Move from MOVES or its name
        goal: (x, y) goal cell
        controls: SessionControls whose move counter is bumped on any
            accepted step, retraces included

    Returns:
        MoveOutcome
    """
    if not trail:
        raise EmptyTrail("cannot move without a current cell")
    move = resolve_move(direction)

    current = trail[-1]
    cx, cy = current

    if not maze.can_move(cx, cy, move):
        return MoveOutcome(MoveResult.BLOCKED, move, current, current)

    target = (cx + move.dx, cy + move.dy)
    previous = trail[-2] if len(trail) > 1 else None

    if target == previous:
        trail.pop()
        outcome = MoveOutcome(MoveResult.RETRACED, move, current, target)
    else:
        trail.append(target)
        outcome = MoveOutcome(MoveResult.ADVANCED, move, current, target,
                              goal_reached=target == tuple(goal))

    if controls is not None:
        controls.record_move()

    return outcome
