#!/usr/bin/env python3
"""Check a Tens board laid out on the command line.

Each positional argument is a card label (``Ah``, ``Tc``, ``10d``, ``Qs``) or
``-`` for an empty slot. The script reports whether another play exists and
names one legal group.

Example:
    python scripts/board_check.py 4h 6s Jd Qc Kc - 9h --select 0 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from tens.board import TensBoard
from tens.models import BoardConfig
from tens.rules import another_play_is_possible, find_legal_group, group_kind

LOGGER = logging.getLogger("board_check")

EXIT_PLAYABLE = 0
EXIT_STUCK = 1
EXIT_BAD_INPUT = 2


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Tens board checker")
    parser.add_argument("cards", nargs="+", help="Card labels in slot order, '-' for an empty slot")
    parser.add_argument("--size", type=int, default=None, help="Board size (defaults to 13 or the card count)")
    parser.add_argument("--select", type=int, nargs="+", default=None, help="Slot indexes to test as a group")
    args = parser.parse_args(argv)

    size = args.size if args.size is not None else max(BoardConfig().size, len(args.cards))
    try:
        board = TensBoard.from_labels(args.cards, config=BoardConfig(size=size))
    except ValueError as exc:
        LOGGER.error("Bad board: %s", exc)
        return EXIT_BAD_INPUT

    for idx, label in enumerate(board.labels()):
        LOGGER.info("  [%2d] %s", idx, label or "-")

    if args.select is not None:
        try:
            kind = group_kind(board, args.select)
        except ValueError as exc:
            LOGGER.error("Bad selection: %s", exc)
            return EXIT_BAD_INPUT
        if kind is None:
            LOGGER.info("Selection %s is not legal", args.select)
        else:
            LOGGER.info("Selection %s is legal (%s)", args.select, kind.value)

    if not another_play_is_possible(board):
        LOGGER.info("No legal plays remain")
        return EXIT_STUCK

    group = find_legal_group(board)
    LOGGER.info("Play available: %s", group)
    return EXIT_PLAYABLE


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    sys.exit(main())
