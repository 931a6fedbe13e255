from __future__ import annotations

from typing import Optional, Sequence

from tens.board import TensBoard
from tens.cards import Card, build_deck
from tens.deck import Deck
from tens.models import BoardConfig


def create_board(labels: Sequence[Optional[str]], *, size: int = 13, deck: Optional[Deck] = None) -> TensBoard:
    """Lay out a board slot by slot; ``None`` or ``"-"`` leaves a slot empty."""
    return TensBoard.from_labels(labels, deck=deck, config=BoardConfig(size=size))


def ordered_deck(first: Sequence[Card] = ()) -> Deck:
    """A standard deck with ``first`` moved to the top, in that order."""
    rest = [card for card in build_deck() if card not in first]
    return Deck(list(first) + rest)


def index_of(board: TensBoard, label: str) -> int:
    return board.labels().index(label)
