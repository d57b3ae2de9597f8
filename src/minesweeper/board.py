"""
Board module for Minesweeper game.

Implements the board engine: mine placement, adjacency counts,
flood-fill reveal, flag bookkeeping and win/loss determination.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


@dataclass(frozen=True)
class Difficulty:
    """
    Board dimensions and mine count.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place. At least one cell must stay safe.
    """

    rows: int = 9
    cols: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Reject difficulties that cannot produce a playable board."""
        for name in ("rows", "cols", "mine_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Difficulty {name} must be an integer, got {value!r}"
                )
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.cell_count - 1
        if self.mine_count > max_mines:
            raise ValueError(
                f"Too many mines for a {self.rows}x{self.cols} board "
                f"(max {max_mines}, got {self.mine_count})"
            )

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.cols


# Preset difficulty levels
EASY = Difficulty(9, 9, 10)
MEDIUM = Difficulty(16, 16, 40)
HARD = Difficulty(16, 30, 99)

DIFFICULTIES: Dict[str, Difficulty] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def get_difficulty(name: str) -> Difficulty:
    """
    Look up a preset difficulty by name.

    Raises:
        KeyError: If the name is not in the catalog.
    """
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(DIFFICULTIES))
        raise KeyError(f"Unknown difficulty {name!r} (expected one of: {known})") from None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Built whole from a Difficulty, then mutated in place by reveal()
    and toggle_flag() until the game is won or lost. Both operations
    return the board itself so callers can treat them as state
    transitions. A board is not safe for concurrent mutation.
    """

    difficulty: Difficulty = field(default_factory=Difficulty)
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)
    mines: Optional[Iterable[Position]] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _status: GameState = GameState.PLAYING
    _flagged_count: int = 0

    def __post_init__(self) -> None:
        """Allocate the grid, lay mines and compute adjacency counts."""
        self._init_grid()
        if self.mines is None:
            self._place_mines()
        else:
            self._set_mines(self.mines)
        self.mines = None
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(
        cls, difficulty: Difficulty, positions: Iterable[Position]
    ) -> "Board":
        """
        Build a board with mines at fixed positions.

        Args:
            difficulty: Board dimensions; mine_count must match positions.
            positions: (row, col) of every mine.

        Raises:
            ValueError: On duplicates, out-of-bounds positions or a
                count that disagrees with the difficulty.
        """
        return cls(difficulty, mines=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    def _set_mines(self, positions: Iterable[Position]) -> None:
        """Lay mines at caller-chosen positions."""
        mines = list(positions)
        unique = set(mines)
        if len(unique) != len(mines):
            raise ValueError("Duplicate mine positions")
        if len(unique) != self.mine_count:
            raise ValueError(
                f"Expected {self.mine_count} mines, got {len(unique)}"
            )
        for row, col in mines:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is out of bounds")
            self._grid[row][col].is_mine = True

    def _place_mines(self) -> None:
        """
        Place mines by rejection sampling.

        Draws uniform (row, col) pairs and redraws any pair that already
        holds a mine. Terminates because at least one cell stays safe.
        """
        rng = self.rng or random
        placed = 0
        while placed < self.mine_count:
            row = rng.randrange(self.rows)
            col = rng.randrange(self.cols)
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1
        logger.debug(
            "Placed %d mines on %dx%d board", placed, self.rows, self.cols
        )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row, col, cell in self._iter_cells():
            if not cell.is_mine:
                cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for r, c in self._get_neighbors(row, col)
            if self._grid[r][c].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds Moore neighbors.
        """
        return [
            (row + delta_row, col + delta_col)
            for delta_row, delta_col in NEIGHBOR_OFFSETS
            if self._is_valid_position(row + delta_row, col + delta_col)
        ]

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                yield row, col, cell

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> "Board":
        """
        Reveal a cell at the given position.

        Zero-count cells flood outward to their neighbors; a mine ends
        the game and discloses every mine on the board. Revealing after
        the game is over, off the board, or on a cell that is not hidden
        does nothing.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            This board.
        """
        if not self._can_reveal(row, col):
            return self

        self._flood_reveal(row, col)

        if self._status == GameState.PLAYING:
            self._check_win_condition()
        return self

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._status != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].is_hidden

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal from (row, col) using an explicit stack."""
        stack: List[Position] = [(row, col)]
        while stack:
            r, c = stack.pop()
            if not self._is_valid_position(r, c):
                continue
            cell = self._grid[r][c]
            if not cell.reveal():
                continue

            if cell.is_mine:
                self._lose(r, c)
                return

            if cell.adjacent_mines == 0:
                stack.extend(
                    (r + delta_row, c + delta_col)
                    for delta_row, delta_col in NEIGHBOR_OFFSETS
                )

    def _lose(self, row: int, col: int) -> None:
        """Mark the game lost and disclose all mines."""
        self._status = GameState.LOST
        for _, _, cell in self._iter_cells():
            if cell.is_mine:
                cell.expose()
        logger.debug("Mine hit at (%d, %d)", row, col)

    def _check_win_condition(self) -> None:
        """Win once no hidden safe cell remains."""
        if self.hidden_safe_count() == 0:
            self._status = GameState.WON
            logger.debug("All safe cells revealed")

    def toggle_flag(self, row: int, col: int) -> "Board":
        """
        Toggle flag on a cell.

        Flags are player annotations only and are never checked against
        the mine layout.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            This board.
        """
        if self._status != GameState.PLAYING:
            return self
        if not self._is_valid_position(row, col):
            return self

        cell = self._grid[row][col]
        if cell.toggle_flag():
            self._flagged_count += 1 if cell.is_flagged else -1
        return self

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.difficulty.rows

    @property
    def cols(self) -> int:
        return self.difficulty.cols

    @property
    def mine_count(self) -> int:
        return self.difficulty.mine_count

    @property
    def status(self) -> GameState:
        """Get current game state."""
        return self._status

    @property
    def flagged_count(self) -> int:
        """Number of cells currently flagged."""
        return self._flagged_count

    @property
    def remaining_mine_count(self) -> int:
        """Mines minus flags. Goes negative when the player over-flags."""
        return self.mine_count - self._flagged_count

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameState.LOST

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_positions(self) -> List[Position]:
        """Positions of every mine, in row-major order."""
        return [(row, col) for row, col, cell in self._iter_cells() if cell.is_mine]

    def hidden_safe_count(self) -> int:
        """Number of non-mine cells still hidden."""
        return sum(
            1 for _, _, cell in self._iter_cells()
            if not cell.is_mine and cell.state == CellState.HIDDEN
        )

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of valid cells to reveal.

        Returns:
            List of (row, col) positions that are still hidden.
        """
        return [(row, col) for row, col, cell in self._iter_cells() if cell.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col, cell in self._iter_cells():
            obs[row, col] = cell.to_observation()
        return obs


def new_board(
    difficulty: Difficulty, rng: Optional[random.Random] = None
) -> Board:
    """
    Create a fresh board for the given difficulty.

    Args:
        difficulty: Validated board dimensions and mine count.
        rng: Optional random source for reproducible layouts.

    Returns:
        A board in the PLAYING state with no flags.
    """
    return Board(difficulty, rng)
