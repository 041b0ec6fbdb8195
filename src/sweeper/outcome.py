"""
Outcome evaluation for Minesweeper game.
"""
from enum import Enum, auto

from .grid import Grid


class GameStatus(Enum):
    """Possible states of the game."""

    RUNNING = auto()
    LOST = auto()
    WON = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.RUNNING


def evaluate_outcome(grid: Grid) -> GameStatus:
    """
    Derive the game status from cell state alone.

    A revealed mine means LOST, which wins over everything else. All
    safe cells revealed means WON; flags play no part.
    """
    all_safe_revealed = True
    for cell in grid.cells():
        if cell.has_mine:
            if cell.is_revealed:
                return GameStatus.LOST
        elif not cell.is_revealed:
            all_safe_revealed = False

    if all_safe_revealed:
        return GameStatus.WON
    return GameStatus.RUNNING
