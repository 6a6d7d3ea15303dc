"""
Game session - one maze, one trail, one clock

A session is created at game start and thrown away on restart; nothing
about the current game lives at module level.
"""

import time
from enum import Enum, auto
from utils.constants import START_POS
from utils.helpers import format_time
from maze.generator import generate_maze
from maze.path_tracker import attempt_move


class SessionState(Enum):
    """Session states"""
    IN_PROGRESS = auto()
    WON = auto()


class SessionControls:
    """
    Move counter and timer for one session
    """
    def __init__(self, clock=time.monotonic):
        """
        Args:
            clock: Callable returning seconds, injectable for tests
        """
        self.clock = clock
        self.moves = 0
        self.start_time = clock()
        self.end_time = None

    def record_move(self):
        """Count one accepted step"""
        self.moves += 1

    def stop(self):
        """Freeze the timer (goal reached or session discarded)"""
        if self.end_time is None:
            self.end_time = self.clock()

    @property
    def running(self):
        return self.end_time is None

    def elapsed(self):
        """Seconds since the session started, frozen once stopped"""
        end = self.end_time if self.end_time is not None else self.clock()
        return max(0.0, end - self.start_time)

    def elapsed_text(self):
        """Elapsed time as MM:SS"""
        return format_time(self.elapsed())

    def __repr__(self):
        return f"SessionControls(moves={self.moves}, elapsed={self.elapsed_text()})"


class GameSession:
    """
    One game: maze, trail, goal and controls
    """
    def __init__(self, maze, start=START_POS, goal=None, clock=time.monotonic):
        """
        Args:
            maze: Generated Maze
            start: Entry cell
            goal: Goal cell, defaults to the bottom right corner
            clock: Clock for SessionControls
        """
        self.maze = maze
        self.start = tuple(start)
        self.goal = tuple(goal) if goal is not None else (maze.cols - 1, maze.rows - 1)
        self.trail = [self.start]
        self.controls = SessionControls(clock)
        self.state = SessionState.IN_PROGRESS
        # A single-cell maze starts on its goal
        if self.start == self.goal:
            self.state = SessionState.WON
            self.controls.stop()

    @classmethod
    def new(cls, width, height, rng=None, seed=None, clock=time.monotonic):
        """Generate a fresh maze and start a session on it"""
        maze = generate_maze(width, height, rng=rng, seed=seed)
        return cls(maze, clock=clock)

    @property
    def position(self):
        """Player's current cell"""
        return self.trail[-1]

    @property
    def moves(self):
        return self.controls.moves

    @property
    def won(self):
        return self.state is SessionState.WON

    def move(self, direction):
        """
        Attempt a move

        Returns:
            MoveOutcome, or None when the session is already won
        """
        if self.won:
            return None

        outcome = attempt_move(self.maze, self.trail, direction, self.goal, self.controls)

        if outcome.goal_reached:
            self.state = SessionState.WON
            self.controls.stop()

        return outcome

    def __repr__(self):
        return (f"GameSession({self.maze.cols}x{self.maze.rows}, pos={self.position}, "
                f"moves={self.moves}, state={self.state.name})")
