"""Shared pytest fixtures and position generators for engine tests."""
from __future__ import annotations

import random

import pytest

from othello.board import Board, Cell, empty_board, initial_board
from othello.evaluate import INF, evaluate
from othello.rules import apply_move, legal_moves, opponent, play


def playout(seed: int, plies: int) -> tuple[Board, Cell]:
    """Play *plies* random legal moves from the start; passes when stuck."""
    rng = random.Random(seed)
    board = initial_board()
    side = Cell.BLACK
    for _ in range(plies):
        moves = legal_moves(board, side)
        if not moves:
            side = opponent(side)
            if not legal_moves(board, side):
                break
            continue
        apply_move(board, rng.choice(moves), side)
        side = opponent(side)
    return board, side


def full_minimax(board: Board, depth: int, side: Cell, maximizing: bool,
                 perspective: Cell) -> int:
    """Unpruned reference minimax with the same terminal rules as the engine."""
    moves = legal_moves(board, side)
    if depth == 0 or not moves:
        return evaluate(board, perspective)
    values = [
        full_minimax(play(board, m, side), depth - 1, opponent(side),
                     not maximizing, perspective)
        for m in moves
    ]
    return max(values) if maximizing else min(values)


def reference_best_move(board: Board, player: Cell, depth: int):
    best, best_score = None, -INF
    for move in legal_moves(board, player):
        score = full_minimax(play(board, move, player), depth - 1,
                             opponent(player), False, player)
        if score > best_score:
            best, best_score = move, score
    return best


def board_with_discs(total: int) -> Board:
    """Start position padded to *total* discs away from Black's d3 reply."""
    board = initial_board()
    filler = [(r, c) for r in (0, 1, 7, 6, 5) for c in range(8)]
    colour = Cell.BLACK
    for r, c in filler[: total - 4]:
        board[r][c] = colour
        colour = opponent(colour)
    return board


@pytest.fixture
def start():
    return initial_board()


@pytest.fixture
def black_stuck():
    """Black has no legal move; White can capture along the top edge."""
    board = empty_board()
    board[0][0] = Cell.WHITE
    board[0][1] = Cell.BLACK
    return board


@pytest.fixture(params=[(seed, plies) for seed in range(6) for plies in (8, 24, 44)])
def midgame_positions(request):
    seed, plies = request.param
    return playout(seed, plies)
