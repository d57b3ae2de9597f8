"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src (package) and the repo root (main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from minesweeper import Board, Cell, Difficulty, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def easy_board() -> Board:
    """Create a random 9x9 board with 10 mines."""
    return Board(Difficulty(9, 9, 10), random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board(Difficulty(5, 5, 0))


@pytest.fixture
def corner_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

        . . . . .
        . . . . .
        . . . . .
        . . . 1 1
        . . . 1 *
    """
    return Board.from_mines(Difficulty(5, 5, 1), [(4, 4)])


@pytest.fixture
def split_board() -> Board:
    """
    5x5 board whose middle column is all mines.

        1 2 * 2 1   (and so on down every row)

    Revealing one side can never reach the other.
    """
    mines = [(row, 2) for row in range(5)]
    return Board.from_mines(Difficulty(5, 5, 5), mines)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session() -> GameSession:
    """Easy session with a seeded layout."""
    return GameSession("easy", random.Random(42))


@pytest.fixture
def single_cell_session() -> GameSession:
    """1x1 board with no mines: any reveal wins."""
    return GameSession(Difficulty(1, 1, 0))
