"""Tens rule engine and the board it plays on."""

from .board import TensBoard
from .cards import FACE_RANKS, POINT_VALUES, RANKS, SPECIAL_RANKS, SUITS, Card, build_deck, parse_cards
from .deck import Deck
from .models import BoardConfig, BoardView, GroupKind
from .rules import another_play_is_possible, find_legal_group, group_kind, is_legal

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "POINT_VALUES",
    "FACE_RANKS",
    "SPECIAL_RANKS",
    "build_deck",
    "parse_cards",
    "Deck",
    "TensBoard",
    "BoardConfig",
    "BoardView",
    "GroupKind",
    "is_legal",
    "group_kind",
    "another_play_is_possible",
    "find_legal_group",
]
