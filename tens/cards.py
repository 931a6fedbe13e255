from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence

RANKS = ("ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "jack", "queen", "king")
SUITS = ("spades", "hearts", "diamonds", "clubs")

POINT_VALUES: Mapping[str, int] = MappingProxyType(
    dict(zip(RANKS, (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 0, 0, 0)))
)

FACE_RANKS = ("jack", "queen", "king")
# Ranks that form a four-of-a-kind group, in dispatch order.
SPECIAL_RANKS = ("jack", "queen", "king", "10")

_RANK_LETTERS = dict(zip(RANKS, "A23456789TJQK"))
_SUIT_LETTERS = {suit: suit[0] for suit in SUITS}
_LETTER_RANKS = {letter: rank for rank, letter in _RANK_LETTERS.items()}
_LETTER_SUITS = {letter: suit for suit, letter in _SUIT_LETTERS.items()}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in POINT_VALUES:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in _SUIT_LETTERS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def point_value(self) -> int:
        return POINT_VALUES[self.rank]

    @property
    def label(self) -> str:
        return f"{_RANK_LETTERS[self.rank]}{_SUIT_LETTERS[self.suit]}"

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit} (point value = {self.point_value})"


def build_deck() -> List[Card]:
    """Return all 52 cards, rank-major. Ordering is left to the caller."""
    return [Card(rank, suit) for rank in RANKS for suit in SUITS]


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    text = label.strip()
    if text[:2] == "10":
        text = "T" + text[2:]
    if len(text) != 2:
        raise ValueError(f"Invalid card label: {label}")
    rank = _LETTER_RANKS.get(text[0].upper())
    suit = _LETTER_SUITS.get(text[1].lower())
    if rank is None or suit is None:
        raise ValueError(f"Invalid card label: {label}")
    return Card(rank, suit)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
