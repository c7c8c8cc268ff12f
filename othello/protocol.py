"""Line-based text protocol for driving the engine over stdin/stdout.

The caller owns the game: it replays the moves played so far with
``position`` and asks for a move for the side to move with ``go``.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable

from othello.board import (
    Board, Cell, Move, Player, copy_board, initial_board, parse_board,
    render_board,
)
from othello.config import EngineConfig
from othello.rules import apply_move, is_legal_move, opponent
from othello.strategies import UnknownStrategyError, get_strategy

log = logging.getLogger("othello")

_SIDES = {"b": Cell.BLACK, "black": Cell.BLACK, "w": Cell.WHITE, "white": Cell.WHITE}


class Protocol:
    def __init__(self, config: EngineConfig | None = None,
                 output: Callable[[str], None] | None = None):
        self.config = config or EngineConfig()
        self.board: Board = initial_board()
        self.side: Player = Cell.BLACK
        self.search_thread: threading.Thread | None = None
        self._output = output or (lambda msg: print(msg, flush=True))

    def _send(self, msg: str):
        self._output(msg)

    def _handle_position(self, tokens: list[str]):
        idx = 0
        if tokens[idx] == "startpos":
            board, side = initial_board(), Cell.BLACK
            idx += 1
        elif tokens[idx] == "board":
            if len(tokens) < 3:
                raise ValueError("usage: position board <64 cells> <b|w>")
            board = parse_board(tokens[1])
            side = _SIDES.get(tokens[2].lower())
            if side is None:
                raise ValueError(f"unknown side: {tokens[2]!r}")
            idx = 3
        else:
            raise ValueError(f"unknown position type: {tokens[idx]!r}")

        if idx < len(tokens) and tokens[idx] == "moves":
            idx += 1
            while idx < len(tokens):
                token = tokens[idx]
                if token != "pass":
                    move = Move.parse(token)
                    if not is_legal_move(board, move.row, move.col, side):
                        raise ValueError(f"illegal move for {side.name}: {token}")
                    apply_move(board, move, side)
                side = opponent(side)
                idx += 1

        # Only commit once the whole move list has replayed cleanly.
        self.board, self.side = board, side

    def _handle_setoption(self, tokens: list[str]):
        if len(tokens) < 4 or tokens[0] != "name" or tokens[2] != "value":
            raise ValueError("usage: setoption name <option> value <value>")
        config = self.config.with_option(tokens[1], tokens[3])
        get_strategy(config.strategy)
        self.config = config

    def _handle_go(self, tokens: list[str]):
        config = self.config
        i = 0
        while i < len(tokens):
            tok = tokens[i]
            if tok == "depth" and i + 1 < len(tokens):
                config = config.with_option("search_depth", tokens[i + 1]); i += 2
            elif tok == "strategy" and i + 1 < len(tokens):
                config = config.with_option("strategy", tokens[i + 1]); i += 2
            else:
                i += 1
        strategy = get_strategy(config.strategy)
        board, side = copy_board(self.board), self.side

        def search_and_report():
            move = strategy(board, side, config, self._send)
            self._send(f"bestmove {move if move is not None else 'pass'}")

        self.search_thread = threading.Thread(target=search_and_report, daemon=True)
        self.search_thread.start()

    def wait(self):
        if self.search_thread:
            self.search_thread.join()

    def handle(self, line: str) -> bool:
        """Process one command line; returns False once ``quit`` is seen."""
        tokens = line.strip().split()
        if not tokens:
            return True
        cmd = tokens[0]

        try:
            if cmd == "othello":
                self._send("id name Othello Engine 1.0")
                self._send("id author othello-engine developers")
                self._send("othellook")

            elif cmd == "isready":
                self.wait()
                self._send("readyok")

            elif cmd == "newgame":
                self.wait()
                self.board, self.side = initial_board(), Cell.BLACK

            elif cmd == "position":
                self.wait()
                self._handle_position(tokens[1:] or ["startpos"])

            elif cmd == "setoption":
                self._handle_setoption(tokens[1:])

            elif cmd == "go":
                self.wait()
                self._handle_go(tokens[1:])

            elif cmd == "d":
                self.wait()
                self._send(render_board(self.board))
                self._send(f"side {self.side.name.lower()}")

            elif cmd == "quit":
                self.wait()
                return False

            else:
                self._send(f"info string unknown command {cmd}")

        except (ValueError, UnknownStrategyError) as exc:
            log.warning("rejected %r: %s", line.strip(), exc)
            self._send(f"info string error {exc}")

        return True

    def run(self):
        while True:
            try:
                line = input()
            except EOFError:
                break
            if not self.handle(line):
                break
        self.wait()
