"""
Unit tests for GameClock and GameSession.

Tests the elapsed-time rules and how gestures drive the board and clock.
"""
import logging

import pytest

from minesweeper import Difficulty, GameClock, GameSession, GameState, HARD, MEDIUM


def first_safe(session: GameSession):
    mines = set(session.board.mine_positions())
    board = session.board
    return next(
        (r, c) for r in range(board.rows) for c in range(board.cols)
        if (r, c) not in mines
    )


# ============================================================================
# Clock Tests
# ============================================================================

class TestGameClock:
    """Test the capped elapsed-time counter."""

    def test_stopped_clock_does_not_advance(self) -> None:
        clock = GameClock()
        assert clock.tick() == 0

    def test_running_clock_advances(self) -> None:
        clock = GameClock()
        clock.start()
        clock.tick()
        assert clock.tick(2) == 3

    def test_clock_caps_at_999(self) -> None:
        clock = GameClock(elapsed=998, running=True)
        clock.tick()
        clock.tick()
        assert clock.elapsed == 999
        assert clock.tick(50) == 999

    def test_stop_and_reset(self) -> None:
        clock = GameClock()
        clock.start()
        clock.tick(5)
        clock.stop()
        assert clock.tick() == 5
        clock.reset()
        assert clock.elapsed == 0
        assert clock.running is False


# ============================================================================
# Session Tests
# ============================================================================

class TestGameSession:
    """Test session control and the clock lifecycle."""

    def test_new_session(self, session: GameSession) -> None:
        assert session.status == GameState.PLAYING
        assert session.remaining_mine_count == 10
        assert session.elapsed == 0
        assert session.clock.running is False

    def test_clock_waits_for_first_gesture(self, session: GameSession) -> None:
        session.tick()
        assert session.elapsed == 0

    def test_reveal_starts_clock(self, session: GameSession) -> None:
        """A numbered cell opens alone, so the game keeps going."""
        board = session.board
        numbered = next(
            (r, c) for r in range(board.rows) for c in range(board.cols)
            if not board.get_cell(r, c).is_mine
            and board.get_cell(r, c).adjacent_mines > 0
        )
        session.reveal(*numbered)

        assert session.status == GameState.PLAYING
        assert session.clock.running is True
        assert session.tick() == 1

    def test_flag_starts_clock(self, session: GameSession) -> None:
        session.toggle_flag(0, 0)
        assert session.clock.running is True
        assert session.remaining_mine_count == 9

    def test_loss_stops_clock(self, session: GameSession) -> None:
        session.toggle_flag(*first_safe(session))
        session.tick(3)
        session.reveal(*session.board.mine_positions()[0])

        assert session.status == GameState.LOST
        assert session.clock.running is False
        assert session.tick() == 3

    def test_single_cell_win_stops_clock(
        self, single_cell_session: GameSession
    ) -> None:
        board = single_cell_session.reveal(0, 0)
        assert board.is_won is True
        assert single_cell_session.clock.running is False
        assert single_cell_session.tick() == 0

    def test_gestures_after_game_end_are_ignored(
        self, single_cell_session: GameSession
    ) -> None:
        single_cell_session.reveal(0, 0)
        single_cell_session.toggle_flag(0, 0)
        assert single_cell_session.clock.running is False
        assert single_cell_session.board.flagged_count == 0

    def test_new_game_resets_everything(self, session: GameSession) -> None:
        old_board = session.board
        session.toggle_flag(1, 1)
        session.tick(4)

        board = session.new_game()

        assert board is not old_board
        assert board is session.board
        assert session.elapsed == 0
        assert session.remaining_mine_count == 10
        assert session.status == GameState.PLAYING

    def test_set_difficulty_by_name(self, session: GameSession) -> None:
        board = session.set_difficulty("medium")
        assert session.difficulty == MEDIUM
        assert (board.rows, board.cols, board.mine_count) == (16, 16, 40)

    def test_set_difficulty_custom(self, session: GameSession) -> None:
        session.set_difficulty(Difficulty(4, 6, 3))
        assert len(session.board.mine_positions()) == 3

    def test_unknown_difficulty_keeps_game(self, session: GameSession) -> None:
        board = session.board
        with pytest.raises(KeyError):
            session.set_difficulty("nightmare")
        assert session.board is board

    def test_session_accepts_difficulty_object(self) -> None:
        assert GameSession(HARD).board.cols == 30

    def test_session_logs_at_debug_only(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="minesweeper")
        session = GameSession(Difficulty(1, 1, 0))
        session.reveal(0, 0)

        messages = [record.getMessage() for record in caplog.records]
        assert "New game: 1x1 with 0 mines" in messages
        assert any(message.startswith("Game won") for message in messages)
        assert all(record.levelno == logging.DEBUG for record in caplog.records)
