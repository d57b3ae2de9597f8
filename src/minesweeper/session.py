"""
Game session for Minesweeper.

Ties a board to the difficulty it was built from and to the game clock,
the way a front end drives a single game window: pick a difficulty,
click cells, restart.
"""
import logging
import random
from typing import Optional, Union

from .board import Board, Difficulty, GameState, EASY, get_difficulty, new_board
from .clock import GameClock

logger = logging.getLogger(__name__)


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One player's game window.

    Both gestures (reveal and flag) start the clock while the game is in
    progress, even if the gesture leaves the board unchanged. The clock
    stops as soon as the board is won or lost.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = EASY,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a session with a fresh board.

        Args:
            difficulty: Difficulty or catalog name ("easy", "medium", "hard").
            rng: Optional random source used for every board of the session.
        """
        self._rng = rng
        self._difficulty = _resolve(difficulty)
        self._clock = GameClock()
        self._board = self._build_board()

    def _build_board(self) -> Board:
        board = new_board(self._difficulty, self._rng)
        logger.debug(
            "New game: %dx%d with %d mines",
            self._difficulty.rows,
            self._difficulty.cols,
            self._difficulty.mine_count,
        )
        return board

    # ========================================================================
    # Game Control
    # ========================================================================

    def new_game(self) -> Board:
        """Replace the board with a fresh one and reset the clock."""
        self._board = self._build_board()
        self._clock.reset()
        return self._board

    def set_difficulty(self, difficulty: Union[Difficulty, str]) -> Board:
        """
        Switch difficulty and start a new game.

        Raises:
            KeyError: If a name is given that is not in the catalog.
        """
        self._difficulty = _resolve(difficulty)
        return self.new_game()

    # ========================================================================
    # Player Gestures
    # ========================================================================

    def reveal(self, row: int, col: int) -> Board:
        """Primary gesture: reveal the cell at (row, col)."""
        if not self._board.is_playing:
            return self._board
        self._clock.start()
        self._board.reveal(row, col)
        self._after_move()
        return self._board

    def toggle_flag(self, row: int, col: int) -> Board:
        """Secondary gesture: flag or unflag the cell at (row, col)."""
        if not self._board.is_playing:
            return self._board
        self._clock.start()
        self._board.toggle_flag(row, col)
        return self._board

    def _after_move(self) -> None:
        if self._board.is_playing:
            return
        self._clock.stop()
        logger.debug(
            "Game %s after %d seconds",
            self._board.status.name.lower(),
            self._clock.elapsed,
        )

    def tick(self, seconds: int = 1) -> int:
        """Advance the clock while the game is in progress."""
        if not self._board.is_playing:
            self._clock.stop()
        return self._clock.tick(seconds)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def clock(self) -> GameClock:
        return self._clock

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def status(self) -> GameState:
        return self._board.status

    @property
    def remaining_mine_count(self) -> int:
        return self._board.remaining_mine_count

    @property
    def elapsed(self) -> int:
        """Seconds on the clock, never above the display limit."""
        return self._clock.elapsed


def _resolve(difficulty: Union[Difficulty, str]) -> Difficulty:
    if isinstance(difficulty, str):
        return get_difficulty(difficulty)
    return difficulty
