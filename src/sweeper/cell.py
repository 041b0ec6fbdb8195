"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


# ============================================================================
# Constants
# ============================================================================

BLANK = " "
MARK = "*"
MINE_HIT = "X"

DisplayValue = Union[str, int]


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        has_mine: Whether this cell contains a mine.
        state: Current visual state (hidden, revealed, or flagged).
        neighbor_mine_count: Count of mines in neighboring cells (0-8),
            None until the cell has been revealed.
    """

    has_mine: bool = False
    state: CellState = CellState.HIDDEN
    neighbor_mine_count: Optional[int] = None

    def reveal(self) -> bool:
        """
        Reveal this cell, clearing any flag on it.

        Returns:
            True if cell was revealed, False if it already was.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def set_flag(self, flagged: bool) -> bool:
        """
        Place or clear the flag on this cell.

        Returns:
            True if the state changed, False if cell is revealed or
            already in the requested state.
        """
        if self.state == CellState.REVEALED:
            return False
        target = CellState.FLAGGED if flagged else CellState.HIDDEN
        if self.state == target:
            return False
        self.state = target
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def display_value(self) -> DisplayValue:
        """
        Value a renderer shows for this cell.

        Returns:
            BLANK: Hidden cell, or revealed cell with no adjacent mines
            MARK: Flagged cell
            MINE_HIT: Revealed mine (game over state)
            1-8: Revealed cell with adjacent mine count
        """
        if self.state == CellState.FLAGGED:
            return MARK
        if self.state == CellState.HIDDEN:
            return BLANK
        if self.has_mine:
            return MINE_HIT
        if not self.neighbor_mine_count:
            return BLANK
        return self.neighbor_mine_count

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.has_mine:
            return 9
        return self.neighbor_mine_count or 0
