"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface for driving games whose mine layouts
are supplied by the caller.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board_view import draw_board
from .game import Game, GameConfig


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array, rows in layout order, where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell in matrix row i // width, column
        i % width.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed or game over)

    Every reset needs a layout: reset(options={"layout": matrix}).
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 9x9).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on the given layout.

        Args:
            seed: Random seed (passed to gymnasium, layouts are fixed).
            options: Must contain "layout", a height x width matrix.

        Returns:
            Tuple of (observation, info dict).

        Raises:
            ValueError: If no layout is given or its shape is wrong.
        """
        super().reset(seed=seed)
        layout = (options or {}).get("layout")
        if layout is None:
            raise ValueError("reset() needs options={'layout': matrix}")

        self.game = Game(self.config)
        if not self.game.set_mines(layout):
            raise ValueError(
                f"Layout does not match a {self.config.width}x"
                f"{self.config.height} board"
            )
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.game.get_observation()
        terminated = not self.game.is_running

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to board (x, y)."""
        row = int(action) // self.config.width
        col = int(action) % self.config.width
        return col, self.game.grid.row_index(row)

    def _calculate_reward(self, x: int, y: int) -> float:
        """Reveal a cell and score the result."""
        if not self.game.can_reveal(x, y):
            return -0.1

        self.game.reveal(x, y)

        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.cells_revealed,
            "total_safe": self.config.width * self.config.height
            - self.game.mine_count,
            "game_state": self.game.status.name,
            "valid_actions": len(self.game.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return draw_board(self.game.snapshot())
        if self.render_mode == "human":
            print(draw_board(self.game.snapshot()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.game.get_valid_actions():
            action = self.game.grid.row_index(y) * self.config.width + x
            mask[action] = True
        return mask
