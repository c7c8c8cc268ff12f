"""Board model: cells, moves and 8x8 grids of cells."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BOARD_SIZE = 8
FILES = "abcdefgh"


class Cell(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2


# A player is one of the two non-empty cell values.
Player = Cell
Board = list[list[Cell]]

_CELL_CHARS = {
    ".": Cell.EMPTY, "-": Cell.EMPTY, "0": Cell.EMPTY,
    "B": Cell.BLACK, "X": Cell.BLACK,
    "W": Cell.WHITE, "O": Cell.WHITE,
}
_CELL_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}


# ---------------------------------------------------------------------------
# Moves
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Move:
    row: int
    col: int

    def __str__(self) -> str:
        return f"{FILES[self.col]}{self.row + 1}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse a move in ``d3`` notation (file letter, then row number)."""
        text = text.strip().lower()
        if len(text) != 2 or text[0] not in FILES or not text[1].isdigit():
            raise ValueError(f"invalid move notation: {text!r}")
        row = int(text[1]) - 1
        if not 0 <= row < BOARD_SIZE:
            raise ValueError(f"invalid move notation: {text!r}")
        return cls(row, FILES.index(text[0]))


# ---------------------------------------------------------------------------
# Board construction
# ---------------------------------------------------------------------------

def empty_board() -> Board:
    return [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def initial_board() -> Board:
    """Canonical start: Black on d5/e4, White on d4/e5."""
    board = empty_board()
    board[3][3] = Cell.WHITE
    board[4][4] = Cell.WHITE
    board[3][4] = Cell.BLACK
    board[4][3] = Cell.BLACK
    return board


def copy_board(board: Board) -> Board:
    return [row[:] for row in board]


def count_discs(board: Board, cell: Cell | None = None) -> int:
    """Count non-empty cells, or cells equal to *cell* when given."""
    if cell is None:
        return sum(1 for row in board for c in row if c != Cell.EMPTY)
    return sum(1 for row in board for c in row if c == cell)


# ---------------------------------------------------------------------------
# Text formats
# ---------------------------------------------------------------------------

def parse_board(text: str) -> Board:
    """Build a board from 64 row-major cell characters.

    Whitespace is ignored so both the compact one-line form and an 8-line
    grid are accepted.  Empty cells may be written ``.``, ``-`` or ``0``;
    black discs ``B`` or ``X``; white discs ``W`` or ``O``.
    """
    chars = [ch for ch in text.upper() if not ch.isspace()]
    if len(chars) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(
            f"expected {BOARD_SIZE * BOARD_SIZE} cells, got {len(chars)}"
        )
    board = empty_board()
    for i, ch in enumerate(chars):
        try:
            board[i // BOARD_SIZE][i % BOARD_SIZE] = _CELL_CHARS[ch]
        except KeyError:
            raise ValueError(f"unknown cell character {ch!r}") from None
    return board


def board_to_string(board: Board) -> str:
    return "".join(_CELL_SYMBOLS[c] for row in board for c in row)


def render_board(board: Board) -> str:
    lines = ["  " + " ".join(FILES)]
    for r, row in enumerate(board):
        lines.append(f"{r + 1} " + " ".join(_CELL_SYMBOLS[c] for c in row))
    lines.append(
        f"Black: {count_discs(board, Cell.BLACK)}  "
        f"White: {count_discs(board, Cell.WHITE)}"
    )
    return "\n".join(lines)
