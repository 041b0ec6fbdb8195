"""
Grid module for Minesweeper game.

Fixed-size, row-major container of cells with bounds checking,
neighbor lookup and the mapping between board rows and the rows of
matrices exchanged with callers.
"""
import numbers
from enum import Enum
from typing import Iterator, List, Tuple

from .cell import Cell
from .errors import InvalidDimension, OutOfBounds


# ============================================================================
# Constants
# ============================================================================

class Origin(Enum):
    """Where row y = 0 sits in layout and snapshot matrices."""

    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"


NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular board of cells addressed by (x, y).

    x is the column (0 <= x < width) and y the row (0 <= y < height).
    Dimensions are fixed at construction.
    """

    def __init__(
        self, width: int, height: int, origin: Origin = Origin.TOP_LEFT
    ) -> None:
        validate_dimensions(width, height)
        self._width = width
        self._height = height
        self._origin = origin
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), the shape of matrices exchanged with callers."""
        return self._height, self._width

    # ========================================================================
    # Addressing
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self._width and 0 <= y < self._height

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            OutOfBounds: If the position is outside the board.
        """
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self._width, self._height)
        return self._cells[y][x]

    def row_index(self, y: int) -> int:
        """
        Map a board row to its matrix row (and back, the mapping is
        its own inverse).
        """
        if self._origin is Origin.BOTTOM_LEFT:
            return self._height - 1 - y
        return y

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds positions at Chebyshev distance 1.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples, at most 8, with no wrap-around.
        """
        neighbors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    # ========================================================================
    # Iteration
    # ========================================================================

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Iterate every (x, y) on the board, row by row."""
        for y in range(self._height):
            for x in range(self._width):
                yield x, y

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def matrix_rows(self) -> Iterator[List[Cell]]:
        """Iterate rows of cells in matrix order (respecting origin)."""
        for r in range(self._height):
            yield self._cells[self.row_index(r)]

    def __repr__(self) -> str:
        return (
            f"Grid(width={self._width}, height={self._height}, "
            f"origin={self._origin.value})"
        )


def validate_dimensions(width: int, height: int) -> None:
    """
    Ensure board dimensions are usable.

    Raises:
        InvalidDimension: If either dimension is not a positive integer.
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidDimension(f"Board {name} must be an integer")
    if width < 1 or height < 1:
        raise InvalidDimension("Board dimensions must be positive")
