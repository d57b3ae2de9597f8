"""
Display rules for Minesweeper front ends.

Pure functions mapping engine state to what a player sees: cell glyphs,
digit colors, the three-digit counters and the status face. Also renders
a board as plain text for terminals.
"""
from typing import List, Optional

from .board import Board, GameState
from .cell import Cell, CellState, OBS_FLAGGED, OBS_HIDDEN, OBS_MINE


# ============================================================================
# Constants
# ============================================================================

FLAG_GLYPH = "🚩"
MINE_GLYPH = "💣"

# Indexed by adjacent mine count; entry 0 is never shown
DIGIT_COLORS = (
    "",
    "#0000FF",
    "#008000",
    "#FF0000",
    "#000080",
    "#800000",
    "#008080",
    "#000000",
    "#808080",
)
DEFAULT_COLOR = "#000000"

FACES = {
    GameState.PLAYING: "🙂",
    GameState.WON: "😎",
    GameState.LOST: "😵",
}

MESSAGES = {
    GameState.WON: "🎉 You win!",
    GameState.LOST: "💥 Game over!",
}

TEXT_SYMBOLS = {
    OBS_HIDDEN: ".",
    OBS_FLAGGED: "F",
    OBS_MINE: "*",
    0: " ",
}


# ============================================================================
# Cell Display
# ============================================================================

def cell_content(cell: Cell) -> str:
    """
    Glyph shown for a cell.

    Flagged cells show a flag, hidden cells and revealed zeros are blank,
    revealed mines show a mine and anything else shows its digit.
    """
    if cell.state == CellState.FLAGGED:
        return FLAG_GLYPH
    if cell.state == CellState.HIDDEN:
        return ""
    if cell.is_mine:
        return MINE_GLYPH
    if cell.adjacent_mines == 0:
        return ""
    return str(cell.adjacent_mines)


def cell_color(count: int) -> str:
    """Color for a digit 1-8; black for anything else."""
    if 1 <= count < len(DIGIT_COLORS):
        return DIGIT_COLORS[count]
    return DEFAULT_COLOR


# ============================================================================
# Status Display
# ============================================================================

def format_counter(value: int) -> str:
    """
    Zero-pad a counter to three digits.

    Negative values keep a leading sign, so -3 shows as "-03" rather
    than a padded "0-3".
    """
    return f"{value:03d}"


def status_face(status: GameState) -> str:
    return FACES[status]


def status_message(status: GameState) -> Optional[str]:
    """End-of-game banner, or None while the game is in progress."""
    return MESSAGES.get(status)


def render_header(remaining: int, elapsed: int, status: GameState) -> str:
    """Counter line: mines left, face, seconds elapsed."""
    return f"[{format_counter(remaining)}]  {status_face(status)}  [{format_counter(elapsed)}]"


# ============================================================================
# Text Rendering
# ============================================================================

def render_text(board: Board) -> str:
    """
    Render board as ASCII text with row and column indices.

    Uses '.' for hidden, 'F' for flagged, '*' for mines and a blank
    for revealed zeros.
    """
    obs = board.get_observation()
    width = len(str(max(board.rows, board.cols) - 1))

    header = " " * (width + 1) + " ".join(
        str(col).rjust(width) for col in range(board.cols)
    )
    lines: List[str] = [header]
    for row in range(board.rows):
        symbols = [
            TEXT_SYMBOLS.get(int(value), str(value)).rjust(width)
            for value in obs[row]
        ]
        lines.append(str(row).rjust(width) + " " + " ".join(symbols))
    return "\n".join(lines)
