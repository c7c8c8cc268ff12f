#!/usr/bin/env python3
"""Othello move-selection engine.

Usage:
    python main.py protocol    Start the text protocol on stdin/stdout (default)

Environment:
    OTHELLO_LOG_LEVEL          Logging level (default INFO)
    OTHELLO_LOG_FILE           Also write the log to this file
    OTHELLO_SEARCH_DEPTH, OTHELLO_OPENING_MAX_DISCS,
    OTHELLO_MIDGAME_MAX_DISCS, OTHELLO_STRATEGY
                               Engine configuration overrides
"""
from __future__ import annotations

import logging
import os
import sys


def _setup_logging():
    # stdout carries the protocol, so log records go to stderr.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = os.environ.get("OTHELLO_LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=os.environ.get("OTHELLO_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def main():
    mode = sys.argv[1] if len(sys.argv) > 1 else "protocol"

    if mode == "protocol":
        _setup_logging()
        from othello.config import EngineConfig
        from othello.protocol import Protocol
        from othello.strategies import UnknownStrategyError, get_strategy
        try:
            config = EngineConfig.from_env()
            get_strategy(config.strategy)
        except (ValueError, UnknownStrategyError) as exc:
            print(f"Invalid configuration: {exc}", file=sys.stderr)
            sys.exit(1)
        Protocol(config).run()

    else:
        print(f"Unknown mode: {mode!r}")
        print("Usage: python main.py [protocol]")
        sys.exit(1)


if __name__ == "__main__":
    main()
