"""
Gymnasium environment wrapper for Minesweeper.

Drives the board engine through the same two operations a player has:
reveal a cell or toggle a flag on it.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, Difficulty, EASY, new_board
from .cell import OBS_FLAGGED, OBS_MINE
from .display import render_text

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_NOOP = -0.1
REWARD_FLAG = 0.0


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete space of size 2 * rows * cols. Action i < rows * cols
        reveals cell (i // cols, i % cols); the upper half toggles a
        flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Optional[Difficulty] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Board difficulty (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.difficulty = difficulty or EASY
        self.render_mode = render_mode
        self._cells = self.difficulty.cell_count
        self.board: Board = new_board(self.difficulty, random.Random())

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.difficulty.rows, self.difficulty.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a fresh board.

        Args:
            seed: Random seed for a reproducible mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        layout_seed = int(self.np_random.integers(0, 2**32))
        self.board = new_board(self.difficulty, random.Random(layout_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, row, col = self.decode_action(action)
        self._steps += 1

        if flag:
            reward = self._toggle_flag(row, col)
        else:
            reward = self._reveal(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split a flat action into (is_flag, row, col)."""
        action = int(action)
        flag = action >= self._cells
        index = action - self._cells if flag else action
        return flag, index // self.difficulty.cols, index % self.difficulty.cols

    def _reveal(self, row: int, col: int) -> float:
        cell = self.board.get_cell(row, col)
        if cell is None or not cell.is_hidden:
            return REWARD_NOOP

        self.board.reveal(row, col)

        if self.board.is_won:
            return REWARD_WIN
        if self.board.is_lost:
            return REWARD_MINE
        return REWARD_SAFE

    def _toggle_flag(self, row: int, col: int) -> float:
        cell = self.board.get_cell(row, col)
        if cell is None or cell.is_revealed:
            return REWARD_NOOP
        self.board.toggle_flag(row, col)
        return REWARD_FLAG

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "hidden_safe": self.board.hidden_safe_count(),
            "remaining_mines": self.board.remaining_mine_count,
            "game_state": self.board.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.board)
        if self.render_mode == "human":
            print(render_text(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.board.is_playing:
            return mask
        cols = self.difficulty.cols
        for row in range(self.difficulty.rows):
            for col in range(cols):
                cell = self.board.get_cell(row, col)
                index = row * cols + col
                mask[index] = cell.is_hidden
                mask[self._cells + index] = not cell.is_revealed
        return mask
