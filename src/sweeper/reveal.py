"""
Reveal engine for Minesweeper game.

Implements the single-cell reveal, on-demand neighbor mine counting
and the cascading reveal of connected mine-free regions.
"""
import logging
from typing import List, Tuple

from .cell import Cell
from .grid import Grid


logger = logging.getLogger(__name__)


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """
    Applies reveal rules to a grid.

    The engine holds no state of its own beyond the grid; whether a
    reveal is allowed at all is decided by the caller.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    def count_neighbor_mines(self, x: int, y: int) -> int:
        """
        Count mines adjacent to a position.

        Raises:
            OutOfBounds: If the position is outside the board.
        """
        self._grid.cell_at(x, y)
        count = 0
        for nx, ny in self._grid.neighbors(x, y):
            if self._grid.cell_at(nx, ny).has_mine:
                count += 1
        return count

    def reveal(self, x: int, y: int) -> int:
        """
        Reveal a cell and cascade through zero-count regions.

        A flagged target loses its flag. Hitting a mine stops right
        there.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Number of cells revealed, 0 if the cell already was.
        """
        cell = self._grid.cell_at(x, y)
        if not self._reveal_single(cell, x, y):
            return 0
        if cell.has_mine or cell.neighbor_mine_count:
            return 1
        return 1 + self._flood(x, y)

    def _reveal_single(self, cell: Cell, x: int, y: int) -> bool:
        """Reveal one cell and compute its count if it is safe."""
        if not cell.reveal():
            return False
        if not cell.has_mine:
            cell.neighbor_mine_count = self.count_neighbor_mines(x, y)
        return True

    def _flood(self, x: int, y: int) -> int:
        """
        Reveal everything reachable from a zero-count cell.

        Iterative depth-first walk; the revealed state doubles as the
        visited set so each cell is revealed at most once.
        """
        revealed = 0
        stack = self._expandable_neighbors(x, y)
        while stack:
            nx, ny = stack.pop()
            neighbor = self._grid.cell_at(nx, ny)
            # May have been revealed after being pushed
            if not neighbor.is_hidden or neighbor.has_mine:
                continue
            self._reveal_single(neighbor, nx, ny)
            revealed += 1
            if neighbor.neighbor_mine_count == 0:
                stack.extend(self._expandable_neighbors(nx, ny))

        logger.debug("Cascade from (%d, %d) revealed %d cells", x, y, revealed)
        return revealed

    def _expandable_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Neighbors that are hidden, unflagged and mine-free."""
        expandable = []
        for nx, ny in self._grid.neighbors(x, y):
            neighbor = self._grid.cell_at(nx, ny)
            if neighbor.is_hidden and not neighbor.has_mine:
                expandable.append((nx, ny))
        return expandable
