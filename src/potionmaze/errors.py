# src/potionmaze/errors.py
# Exception taxonomy for generation and play.

class MazeError(Exception):
    """Base class for every error raised by potionmaze."""

class InvalidConfigurationError(MazeError, ValueError):
    """Dimensions, cell size or item count outside their valid range."""

class GeometryError(MazeError, ValueError):
    """Coordinates that do not describe two adjacent cells."""

class StackOverflowError(MazeError, RuntimeError):
    """Push beyond the width*height capacity of the carve stack."""

class InsufficientSpaceError(MazeError, RuntimeError):
    """Not enough free passage cells to place the requested items."""

    def __init__(self, needed: int, available: int):
        super().__init__(
            f"insufficient space: {needed} items requested, {available} free passage cells"
        )
        self.needed = needed
        self.available = available
