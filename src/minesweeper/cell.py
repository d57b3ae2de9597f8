"""
Cell module for Minesweeper game.

A cell carries its fixed content (mine or adjacent count) and its
visibility. Visibility only moves hidden -> revealed or hidden <-> flagged;
revealed is final.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """What the player currently sees on a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Numeric codes used by Board.get_observation()
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One grid position.

    Attributes:
        is_mine: Set while the board is generated, then never changed.
        adjacent_mines: Mines among the up-to-8 neighbors. Ignored for
            mine cells.
        state: Hidden, revealed or flagged.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """Open a hidden cell. Returns False and changes nothing otherwise."""
        if self.is_hidden:
            self.state = CellState.REVEALED
            return True
        return False

    def expose(self) -> None:
        """Open the cell whatever its state, used to show mines on a loss."""
        self.state = CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Flag a hidden cell or clear the flag on a flagged one.

        Returns:
            False for a revealed cell, which keeps its state.
        """
        if self.is_revealed:
            return False
        self.state = CellState.HIDDEN if self.is_flagged else CellState.FLAGGED
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state is CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state is CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Numeric code for this cell.

        Returns:
            OBS_HIDDEN (-1) or OBS_FLAGGED (-2) while unopened, OBS_MINE (9)
            for an opened mine, otherwise the adjacent mine count.
        """
        if self.is_hidden:
            return OBS_HIDDEN
        if self.is_flagged:
            return OBS_FLAGGED
        return OBS_MINE if self.is_mine else self.adjacent_mines
