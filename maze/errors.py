"""
Errors raised by the maze core

All of them are precondition violations: a correct caller never sees one.
"""


class MazeError(ValueError):
    """Base class for maze core errors"""


class InvalidDimension(MazeError):
    """Width or height is not a positive integer"""


class EmptyTrail(MazeError):
    """A move was attempted with no current cell on the trail"""


class UnknownDirection(MazeError):
    """Direction is not one of the four static moves"""
