"""
Mine layer for Minesweeper game.

Holds the caller-supplied boolean mine matrix and writes it onto the
grid. Layouts whose shape does not match the grid are rejected without
touching the previously accepted one.
"""
import logging
from typing import List, Optional, Sequence

import numpy as np

from .grid import Grid


logger = logging.getLogger(__name__)

MINE_CHARS = frozenset("*xX1")
FREE_CHARS = frozenset(".0-_")


# ============================================================================
# Mine Layer
# ============================================================================

class MineLayer:
    """
    Boolean mine matrix bound to a grid.

    The matrix is stored in the orientation it was supplied in; the
    grid's origin decides which board row each matrix row lands on.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._layout: Optional[np.ndarray] = None

    @property
    def is_set(self) -> bool:
        return self._layout is not None

    @property
    def mine_count(self) -> int:
        """Number of mines in the accepted layout (0 when unset)."""
        if self._layout is None:
            return 0
        return int(self._layout.sum())

    def set_layout(self, matrix: Sequence[Sequence[object]]) -> bool:
        """
        Accept a mine layout if its shape matches the grid.

        Args:
            matrix: Nested rows (or 2D array) of truthy/falsy values,
                height rows of width entries each.

        Returns:
            True if the layout was stored and applied, False otherwise.
        """
        layout = self._as_bool_matrix(matrix)
        if layout is None or layout.shape != self._grid.shape:
            logger.info(
                "Rejected mine layout: expected shape %s, got %s",
                self._grid.shape,
                None if layout is None else layout.shape,
            )
            return False

        self._layout = layout
        self._apply()
        logger.debug("Accepted mine layout with %d mines", self.mine_count)
        return True

    def get_layout(self) -> Optional[List[List[bool]]]:
        """Get a copy of the accepted layout, or None if never set."""
        if self._layout is None:
            return None
        return self._layout.tolist()

    def _apply(self) -> None:
        """Write mine flags onto matching grid cells."""
        for x, y in self._grid.positions():
            row = self._grid.row_index(y)
            self._grid.cell_at(x, y).has_mine = bool(self._layout[row, x])

    @staticmethod
    def _as_bool_matrix(matrix: Sequence[Sequence[object]]) -> Optional[np.ndarray]:
        """Convert input to a 2D bool array, or None if it is not 2D."""
        try:
            layout = np.array(matrix, dtype=bool)
        except (TypeError, ValueError):
            # Ragged rows cannot form a matrix
            return None
        if layout.ndim != 2:
            return None
        return layout


# ============================================================================
# Text Layouts
# ============================================================================

def parse_layout(text: str) -> List[List[bool]]:
    """
    Parse a text mine layout.

    Each non-blank line is one row. '*', 'x', 'X' and '1' mark mines;
    '.', '0', '-' and '_' mark free cells. Whitespace within a line is
    ignored, so "1 0 1" and "*.*" are the same row.

    Args:
        text: Layout text, first line is the first matrix row.

    Returns:
        Rows of booleans. Rows are not checked for equal length.

    Raises:
        ValueError: If a line contains any other character.
    """
    rows = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        symbols = "".join(line.split())
        if not symbols:
            continue
        row = []
        for symbol in symbols:
            if symbol in MINE_CHARS:
                row.append(True)
            elif symbol in FREE_CHARS:
                row.append(False)
            else:
                raise ValueError(
                    f"Unexpected character {symbol!r} on line {line_no}"
                )
        rows.append(row)
    return rows
