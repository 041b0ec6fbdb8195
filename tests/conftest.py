"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the project root (for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from sweeper import Cell, Game, GameConfig, Grid, Origin, new_game


# ============================================================================
# Layouts
# ============================================================================

# Layouts exchanged with the engine are [height][width] matrices.
THREE_BY_THREE = [
    [0, 0, 0],
    [1, 1, 0],
    [0, 1, 0],
]

FOUR_BY_FOUR = [
    [0, 0, 0, 0],
    [1, 1, 0, 0],
    [1, 1, 0, 0],
    [0, 1, 0, 1],
]

CORNER_MINE = [
    [0, 0, 1],
    [0, 0, 0],
    [0, 0, 0],
]


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def empty_game() -> Game:
    """Create a 5x5 game with no mines for cascade testing."""
    return new_game(5, 5)


@pytest.fixture
def small_game() -> Game:
    """Create a 3x3 game with three mines."""
    game = new_game(3, 3)
    game.set_mines(THREE_BY_THREE)
    return game


@pytest.fixture
def corner_game() -> Game:
    """Create a 3x3 game with a single mine in the top right corner."""
    game = new_game(3, 3)
    game.set_mines(CORNER_MINE)
    return game


@pytest.fixture
def bottom_left_game() -> Game:
    """4x4 game where y counts up from the last layout row."""
    game = Game(GameConfig(4, 4, Origin.BOTTOM_LEFT))
    game.set_mines(FOUR_BY_FOUR)
    return game


# ============================================================================
# Grid and Cell Fixtures
# ============================================================================

@pytest.fixture
def grid() -> Grid:
    """Create a 4x3 grid (4 columns, 3 rows)."""
    return Grid(4, 3)


@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)
