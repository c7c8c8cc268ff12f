"""Othello rules: legality, move generation and disc flipping."""
from __future__ import annotations

from othello.board import BOARD_SIZE, Board, Cell, Move, Player, copy_board

DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def opponent(player: Player) -> Player:
    return Cell.WHITE if player == Cell.BLACK else Cell.BLACK


def _on_board(r: int, c: int) -> bool:
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def _ray(board: Board, row: int, col: int, dr: int, dc: int,
         player: Player) -> list[tuple[int, int]]:
    """Opponent discs captured along one direction from (row, col).

    Empty unless the run of opponent discs is non-empty and closed by one
    of *player*'s discs before the edge or an empty cell.
    """
    enemy = opponent(player)
    run = []
    r, c = row + dr, col + dc
    while _on_board(r, c) and board[r][c] == enemy:
        run.append((r, c))
        r += dr
        c += dc
    if run and _on_board(r, c) and board[r][c] == player:
        return run
    return []


def is_legal_move(board: Board, row: int, col: int, player: Player) -> bool:
    if board[row][col] != Cell.EMPTY:
        return False
    return any(_ray(board, row, col, dr, dc, player) for dr, dc in DIRECTIONS)


def legal_moves(board: Board, player: Player) -> list[Move]:
    """All legal moves for *player* in row-major order (empty = no move)."""
    return [
        Move(r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if is_legal_move(board, r, c, player)
    ]


def mobility(board: Board, player: Player) -> int:
    return len(legal_moves(board, player))


def apply_move(board: Board, move: Move, player: Player) -> None:
    """Place *player*'s disc at *move* and flip captured runs, in place.

    Legality is not re-checked: callers only pass moves taken from
    :func:`legal_moves`.
    """
    board[move.row][move.col] = player
    for dr, dc in DIRECTIONS:
        for r, c in _ray(board, move.row, move.col, dr, dc, player):
            board[r][c] = player


def play(board: Board, move: Move, player: Player) -> Board:
    """Return a copy of *board* with *move* applied; *board* is untouched."""
    child = copy_board(board)
    apply_move(child, move, player)
    return child
