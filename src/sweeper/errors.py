"""
Exception types for the Minesweeper engine.
"""


class SweeperError(Exception):
    """Base class for all engine errors."""


class InvalidDimension(SweeperError, ValueError):
    """Raised when a board is created with a non-positive width or height."""


class OutOfBounds(SweeperError, IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y
