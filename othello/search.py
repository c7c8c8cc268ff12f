"""Depth-limited minimax search with alpha-beta pruning."""
from __future__ import annotations

import time
from typing import Callable

from othello.board import Board, Move, Player
from othello.evaluate import INF, evaluate
from othello.rules import legal_moves, opponent, play


class Searcher:
    """Alpha-beta searcher over the positional evaluation.

    Move ordering is plain row-major enumeration order and there is no
    transposition table, so a search is a pure function of its arguments.
    ``nodes`` counts visited positions for the last call.
    """

    def __init__(self, info_handler: Callable[[str], None] | None = None):
        self.nodes = 0
        # Optional callback for search info lines (protocol output, logging).
        self._info_handler = info_handler or (lambda msg: None)

    def alpha_beta(self, board: Board, depth: int, alpha: int, beta: int,
                   side: Player, maximizing: bool, perspective: Player) -> int:
        """Return the minimax value of *board* for *perspective*.

        A side with no legal moves ends the line and the position is
        scored as it stands; the turn is not passed to the other side.
        """
        self.nodes += 1
        if depth == 0:
            return evaluate(board, perspective)
        moves = legal_moves(board, side)
        if not moves:
            return evaluate(board, perspective)

        nxt = opponent(side)
        if maximizing:
            best = -INF
            for move in moves:
                value = self.alpha_beta(play(board, move, side), depth - 1,
                                        alpha, beta, nxt, False, perspective)
                best = max(best, value)
                alpha = max(alpha, best)
                if beta <= alpha:
                    break
            return best

        best = INF
        for move in moves:
            value = self.alpha_beta(play(board, move, side), depth - 1,
                                    alpha, beta, nxt, True, perspective)
            best = min(best, value)
            beta = min(beta, best)
            if beta <= alpha:
                break
        return best

    def root_value(self, board: Board, move: Move, player: Player,
                   depth: int) -> int:
        """Value of playing *move* at the root with *depth* plies in total."""
        child = play(board, move, player)
        return self.alpha_beta(child, depth - 1, -INF, INF,
                               opponent(player), False, player)

    def best_move(self, board: Board, player: Player,
                  depth: int) -> Move | None:
        """Search every root move *depth* plies deep and pick the best.

        Each root move gets a full window; ties keep the earliest move in
        enumeration order.  Returns ``None`` when *player* cannot move.
        """
        self.nodes = 0
        start = time.time()
        best_move = None
        best_score = -INF
        for move in legal_moves(board, player):
            score = self.root_value(board, move, player, depth)
            self._info_handler(
                f"info depth {depth} currmove {move} score {score} "
                f"nodes {self.nodes}"
            )
            if score > best_score:
                best_score = score
                best_move = move
        if best_move is not None:
            elapsed = time.time() - start
            self._info_handler(
                f"info depth {depth} score {best_score} nodes {self.nodes} "
                f"time {int(elapsed * 1000)} pv {best_move}"
            )
        return best_move


def search(board: Board, depth: int, alpha: int, beta: int, side: Player,
           maximizing: bool, perspective: Player) -> int:
    """Functional form of :meth:`Searcher.alpha_beta`."""
    return Searcher().alpha_beta(board, depth, alpha, beta, side,
                                 maximizing, perspective)
