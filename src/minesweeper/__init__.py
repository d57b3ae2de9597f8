"""
Minesweeper game engine.

Provides board generation, flood-fill reveal, flag bookkeeping and
win/loss rules, plus a game session, display helpers and a Gymnasium
environment built on top of them.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    Difficulty,
    GameState,
    EASY,
    MEDIUM,
    HARD,
    DIFFICULTIES,
    get_difficulty,
    new_board,
)
from .clock import GameClock
from .session import GameSession
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "Difficulty",
    "GameState",
    "EASY",
    "MEDIUM",
    "HARD",
    "DIFFICULTIES",
    "get_difficulty",
    "new_board",
    "GameClock",
    "GameSession",
    "MinesweeperEnv",
]
