import pytest

from othello.board import (
    Cell, Move, board_to_string, copy_board, count_discs, initial_board,
    parse_board, render_board,
)


def test_initial_board_layout():
    board = initial_board()
    assert board[3][4] == Cell.BLACK and board[4][3] == Cell.BLACK
    assert board[3][3] == Cell.WHITE and board[4][4] == Cell.WHITE
    assert count_discs(board) == 4
    assert count_discs(board, Cell.BLACK) == 2
    assert count_discs(board, Cell.EMPTY) == 60


def test_copy_board_is_independent():
    board = initial_board()
    clone = copy_board(board)
    clone[0][0] = Cell.BLACK
    assert board[0][0] == Cell.EMPTY


@pytest.mark.parametrize("move,text", [
    (Move(0, 0), "a1"),
    (Move(2, 3), "d3"),
    (Move(7, 7), "h8"),
    (Move(4, 5), "f5"),
])
def test_move_notation(move, text):
    assert str(move) == text
    assert Move.parse(text) == move
    assert Move.parse(text.upper()) == move


@pytest.mark.parametrize("text", ["", "d", "i1", "a0", "a9", "dd", "d33"])
def test_move_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        Move.parse(text)


def test_parse_board_accepts_grid_and_aliases():
    grid = "\n".join([
        "X.......",
        "........",
        "........",
        "...WB...",
        "...BO...",
        "........",
        "........",
        ".......-",
    ])
    board = parse_board(grid)
    assert board[0][0] == Cell.BLACK
    assert board[3][3] == Cell.WHITE
    assert board[4][4] == Cell.WHITE
    assert board[7][7] == Cell.EMPTY
    assert board_to_string(parse_board(board_to_string(board))) == board_to_string(board)


def test_parse_board_errors():
    with pytest.raises(ValueError, match="expected 64 cells"):
        parse_board("." * 63)
    with pytest.raises(ValueError, match="unknown cell"):
        parse_board("." * 63 + "Z")


def test_render_board_has_labels_and_counts():
    text = render_board(initial_board())
    lines = text.splitlines()
    assert lines[0] == "  a b c d e f g h"
    assert lines[4] == "4 . . . W B . . ."
    assert lines[-1] == "Black: 2  White: 2"
