"""Static position evaluation from a fixed positional-weight table."""
from __future__ import annotations

from othello.board import Board, Player
from othello.rules import opponent

# Corners are worth the most; the cells next to them hand corners to the
# opponent and are penalised.  Symmetric under all four board reflections.
POSITION_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (100, -20,  10,   5,   5,  10, -20, 100),
    (-20, -50,  -2,  -2,  -2,  -2, -50, -20),
    ( 10,  -2,   5,   1,   1,   5,  -2,  10),
    (  5,  -2,   1,   0,   0,   1,  -2,   5),
    (  5,  -2,   1,   0,   0,   1,  -2,   5),
    ( 10,  -2,   5,   1,   1,   5,  -2,  10),
    (-20, -50,  -2,  -2,  -2,  -2, -50, -20),
    (100, -20,  10,   5,   5,  10, -20, 100),
)

# Strictly greater than the magnitude of any evaluation.
INF = sum(abs(w) for row in POSITION_WEIGHTS for w in row) + 1


def evaluate(board: Board, player: Player) -> int:
    """Positional score of *board* from *player*'s point of view."""
    enemy = opponent(player)
    score = 0
    for weights, row in zip(POSITION_WEIGHTS, board):
        for w, cell in zip(weights, row):
            if cell == player:
                score += w
            elif cell == enemy:
                score -= w
    return score
