"""Move-selection policies.

``hybrid`` switches heuristic by game phase, judged by the number of discs
on the board:

* opening  - deny the opponent mobility,
* midgame  - maximise the positional score one ply ahead,
* endgame  - alpha-beta search.

``minimax`` runs the alpha-beta search from the root on every move.
Both return ``None`` when the player has no legal move.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from othello.board import Board, Move, Player, count_discs
from othello.config import DEFAULT_CONFIG, EngineConfig
from othello.evaluate import INF, evaluate
from othello.rules import legal_moves, mobility, opponent, play
from othello.search import Searcher

log = logging.getLogger("othello")

InfoHandler = Callable[[str], None]
Strategy = Callable[..., Move | None]


class Phase(Enum):
    OPENING = "opening"
    MIDGAME = "midgame"
    ENDGAME = "endgame"


class UnknownStrategyError(KeyError):
    def __str__(self) -> str:
        return f"unknown strategy: {self.args[0]!r}"


def classify_phase(total_discs: int,
                   config: EngineConfig = DEFAULT_CONFIG) -> Phase:
    if total_discs <= config.opening_max_discs:
        return Phase.OPENING
    if total_discs <= config.midgame_max_discs:
        return Phase.MIDGAME
    return Phase.ENDGAME


# ---------------------------------------------------------------------------
# Phase heuristics
# ---------------------------------------------------------------------------

def _fewest_replies(board: Board, player: Player, moves: list[Move]) -> Move:
    enemy = opponent(player)
    best_move = moves[0]
    fewest = INF
    for move in moves:
        replies = mobility(play(board, move, player), enemy)
        if replies < fewest:
            fewest = replies
            best_move = move
    return best_move


def _best_position(board: Board, player: Player, moves: list[Move]) -> Move:
    best_move = moves[0]
    best_score = -INF
    for move in moves:
        score = evaluate(play(board, move, player), player)
        if score > best_score:
            best_score = score
            best_move = move
    return best_move


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------

def select_move(board: Board, player: Player,
                config: EngineConfig | None = None,
                info_handler: InfoHandler | None = None) -> Move | None:
    """Pick a move for *player* with the phase-adaptive heuristic."""
    config = config or DEFAULT_CONFIG
    total = count_discs(board)
    moves = legal_moves(board, player)
    if not moves:
        log.debug("%s has no legal move", player.name)
        return None

    phase = classify_phase(total, config)
    if phase is Phase.OPENING:
        move = _fewest_replies(board, player, moves)
    elif phase is Phase.MIDGAME:
        move = _best_position(board, player, moves)
    else:
        move = Searcher(info_handler).best_move(board, player,
                                                config.search_depth)
    log.debug("%s: %d discs, %s phase, %d candidates -> %s",
              player.name, total, phase.value, len(moves), move)
    return move


def minimax_move(board: Board, player: Player,
                 config: EngineConfig | None = None,
                 info_handler: InfoHandler | None = None) -> Move | None:
    """Pick a move for *player* by full-depth alpha-beta search."""
    config = config or DEFAULT_CONFIG
    searcher = Searcher(info_handler)
    move = searcher.best_move(board, player, config.search_depth)
    log.debug("%s: minimax depth %d, %d nodes -> %s",
              player.name, config.search_depth, searcher.nodes, move)
    return move


STRATEGIES: dict[str, Strategy] = {
    "hybrid": select_move,
    "minimax": minimax_move,
}


def get_strategy(name: str) -> Strategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name) from None


def choose_move(board: Board, player: Player,
                config: EngineConfig | None = None,
                info_handler: InfoHandler | None = None) -> Move | None:
    """Run the policy named by ``config.strategy``."""
    config = config or DEFAULT_CONFIG
    return get_strategy(config.strategy)(board, player, config, info_handler)
