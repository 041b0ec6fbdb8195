"""
Minesweeper engine.

Provides the game model (grid, mine layout, reveal rules and outcome)
along with a text renderer and a gymnasium environment.
"""
from .cell import Cell, CellState, BLANK, MARK, MINE_HIT
from .errors import SweeperError, InvalidDimension, OutOfBounds
from .grid import Grid, Origin
from .mines import MineLayer, parse_layout
from .outcome import GameStatus, evaluate_outcome
from .reveal import RevealEngine
from .game import Game, GameConfig, new_game
from .board_view import draw_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "BLANK",
    "MARK",
    "MINE_HIT",
    "SweeperError",
    "InvalidDimension",
    "OutOfBounds",
    "Grid",
    "Origin",
    "MineLayer",
    "parse_layout",
    "GameStatus",
    "evaluate_outcome",
    "RevealEngine",
    "Game",
    "GameConfig",
    "new_game",
    "draw_board",
    "MinesweeperEnv",
]
