"""
Game module for Minesweeper.

Ties the grid, mine layer, reveal engine and outcome evaluation
together behind the public game API.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import DisplayValue
from .grid import Grid, Origin, validate_dimensions
from .mines import MineLayer
from .outcome import GameStatus, evaluate_outcome
from .reveal import RevealEngine


logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class GameConfig:
    """
    Configuration for a Minesweeper game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        origin: Which matrix row is y = 0 in layouts and snapshots.
    """

    width: int = 9
    height: int = 9
    origin: Origin = Origin.TOP_LEFT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        validate_dimensions(self.width, self.height)
        self.origin = Origin(self.origin)


# ============================================================================
# Game Class
# ============================================================================

@dataclass
class Game:
    """
    A single Minesweeper game.

    Every player action is checked for eligibility first and silently
    ignored when not allowed, so speculative or repeated input never
    raises. Only direct cell queries with bad coordinates do.
    """

    config: GameConfig = field(default_factory=lambda: GameConfig())
    _grid: Grid = field(init=False, repr=False)
    _mines: MineLayer = field(init=False, repr=False)
    _engine: RevealEngine = field(init=False, repr=False)
    _status: GameStatus = field(init=False, default=GameStatus.RUNNING)
    _cells_revealed: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Build the board after dataclass creation."""
        self._grid = Grid(self.config.width, self.config.height, self.config.origin)
        self._mines = MineLayer(self._grid)
        self._engine = RevealEngine(self._grid)

    # ========================================================================
    # Mine Layout
    # ========================================================================

    def set_mines(self, layout: Sequence[Sequence[object]]) -> bool:
        """
        Supply the hidden mine layout.

        Args:
            layout: height rows of width truthy/falsy values.

        Returns:
            True if accepted. False on a shape mismatch or once any
            cell has been revealed; the previous layout is kept.
        """
        if self._cells_revealed:
            logger.info("Rejected mine layout: play has already started")
            return False
        return self._mines.set_layout(layout)

    def get_mines(self) -> Optional[List[List[bool]]]:
        """Get the accepted mine layout, or None if none was accepted."""
        return self._mines.get_layout()

    @property
    def mine_count(self) -> int:
        return self._mines.mine_count

    # ========================================================================
    # Game Actions
    # ========================================================================

    def can_reveal(self, x: int, y: int) -> bool:
        """
        Check whether a reveal at this position would do anything.

        True when the game is running, the position is on the board
        and the cell is not yet revealed. Flagged cells qualify.
        """
        if self._status.is_terminal:
            return False
        if not self._grid.in_bounds(x, y):
            return False
        return not self._grid.cell_at(x, y).is_revealed

    def reveal(self, x: int, y: int) -> None:
        """
        Reveal a cell at the given position.

        If the cell has no adjacent mines, connected safe cells are
        revealed too. If the cell is a mine, the game is lost.

        Args:
            x: Column to reveal.
            y: Row to reveal.
        """
        if not self.can_reveal(x, y):
            logger.debug("Ignored reveal at (%d, %d)", x, y)
            return

        self._cells_revealed += self._engine.reveal(x, y)
        self._update_status()

    def flag(self, x: int, y: int) -> None:
        """Mark a hidden cell as a suspected mine."""
        self._set_flag(x, y, True)

    def unflag(self, x: int, y: int) -> None:
        """Remove the mark from a flagged cell."""
        self._set_flag(x, y, False)

    def toggle_flag(self, x: int, y: int) -> None:
        """Flag a hidden cell, or unflag a flagged one."""
        if not self._grid.in_bounds(x, y):
            return
        self._set_flag(x, y, not self._grid.cell_at(x, y).is_flagged)

    def _set_flag(self, x: int, y: int, flagged: bool) -> None:
        if self._status.is_terminal or not self._grid.in_bounds(x, y):
            logger.debug("Ignored flag change at (%d, %d)", x, y)
            return
        self._grid.cell_at(x, y).set_flag(flagged)

    def _update_status(self) -> None:
        """Re-derive status after a reveal."""
        status = evaluate_outcome(self._grid)
        if status is not self._status:
            logger.info("Game %s after %d cells revealed",
                        status.name, self._cells_revealed)
        self._status = status

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status == GameStatus.RUNNING

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def cells_revealed(self) -> int:
        return self._cells_revealed

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self._grid.cells() if cell.is_flagged)

    @property
    def grid(self) -> Grid:
        return self._grid

    def count_neighbor_mines(self, x: int, y: int) -> int:
        """Count mines around a position, revealed or not."""
        return self._engine.count_neighbor_mines(x, y)

    def display_value(self, x: int, y: int) -> DisplayValue:
        """
        Get what a renderer should show at a position.

        Raises:
            OutOfBounds: If the position is outside the board.
        """
        return self._grid.cell_at(x, y).display_value()

    def snapshot(self) -> List[List[DisplayValue]]:
        """Display values for every cell, rows in layout order."""
        return [
            [cell.display_value() for cell in row]
            for row in self._grid.matrix_rows()
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array, rows in layout order, where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros(self._grid.shape, dtype=np.int8)
        for r, row in enumerate(self._grid.matrix_rows()):
            for x, cell in enumerate(row):
                obs[r, x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of positions that can be revealed.

        Returns:
            (x, y) positions, empty once the game is over.
        """
        return [
            (x, y) for x, y in self._grid.positions() if self.can_reveal(x, y)
        ]


def new_game(
    width: int, height: int, origin: Origin = Origin.TOP_LEFT
) -> Game:
    """
    Create a game with no mines set.

    Raises:
        InvalidDimension: If width or height is less than 1.
    """
    return Game(GameConfig(width, height, origin))
