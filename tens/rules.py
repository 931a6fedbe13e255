from __future__ import annotations

import itertools
from typing import List, Optional, Sequence

from .cards import SPECIAL_RANKS, Card
from .models import BoardView, GroupKind

# Pure predicates over a BoardView. Nothing here mutates the board or keeps
# state between calls; the board decides what to do with the verdict.

PAIR_TOTAL = 10
GROUP_OF_A_KIND = 4


def is_legal(board: BoardView, selection: Sequence[int]) -> bool:
    """Return True when the selected slots form a group that may be removed."""
    return group_kind(board, selection) is not None


def group_kind(board: BoardView, selection: Sequence[int]) -> Optional[GroupKind]:
    cards = _selected_cards(board, selection)
    if len(cards) == 2:
        if _pair_sums_to_ten(cards[0], cards[1]):
            return GroupKind.PAIR_SUM_10
        return None
    if len(cards) == GROUP_OF_A_KIND:
        for rank in SPECIAL_RANKS:
            if _count(cards, rank) == GROUP_OF_A_KIND:
                return GroupKind.FOUR_OF_A_KIND
        return None
    return None


def another_play_is_possible(board: BoardView) -> bool:
    """Return True if any legal group exists among the occupied slots."""
    indexes = board.occupied_indexes()
    if contains_pair_sum_10(board, indexes):
        return True
    return any(contains_four_of_rank(board, indexes, rank) for rank in SPECIAL_RANKS)


def find_legal_group(board: BoardView) -> Optional[List[int]]:
    """Return one legal group on the board, preferring pairs, or None if stuck."""
    indexes = board.occupied_indexes()
    for first, second in itertools.combinations(indexes, 2):
        if _pair_sums_to_ten(board.card_at(first), board.card_at(second)):
            return [first, second]
    for rank in SPECIAL_RANKS:
        matching = [idx for idx in indexes if board.card_at(idx).rank == rank]
        if len(matching) >= GROUP_OF_A_KIND:
            return matching[:GROUP_OF_A_KIND]
    return None


def contains_pair_sum_10(board: BoardView, indexes: Sequence[int]) -> bool:
    cards = _selected_cards(board, indexes)
    for first, second in itertools.combinations(cards, 2):
        if _pair_sums_to_ten(first, second):
            return True
    return False


def count_rank(board: BoardView, indexes: Sequence[int], rank: str) -> int:
    return _count(_selected_cards(board, indexes), rank)


def contains_four_of_rank(board: BoardView, indexes: Sequence[int], rank: str) -> bool:
    """True when at least four of the referenced cards carry ``rank``."""
    return count_rank(board, indexes, rank) >= GROUP_OF_A_KIND


def contains_four_jacks(board: BoardView, indexes: Sequence[int]) -> bool:
    return contains_four_of_rank(board, indexes, "jack")


def contains_four_queens(board: BoardView, indexes: Sequence[int]) -> bool:
    return contains_four_of_rank(board, indexes, "queen")


def contains_four_kings(board: BoardView, indexes: Sequence[int]) -> bool:
    return contains_four_of_rank(board, indexes, "king")


def contains_four_tens(board: BoardView, indexes: Sequence[int]) -> bool:
    return contains_four_of_rank(board, indexes, "10")


def _pair_sums_to_ten(first: Card, second: Card) -> bool:
    return first.point_value + second.point_value == PAIR_TOTAL


def _count(cards: Sequence[Card], rank: str) -> int:
    return sum(1 for card in cards if card.rank == rank)


def _selected_cards(board: BoardView, indexes: Sequence[int]) -> List[Card]:
    # Malformed selections are caller bugs, so they raise instead of reading as illegal.
    size = board.size()
    seen = set()
    cards: List[Card] = []
    for idx in indexes:
        if idx < 0 or idx >= size:
            raise ValueError(f"Slot index out of range: {idx}")
        if idx in seen:
            raise ValueError(f"Duplicate slot index: {idx}")
        seen.add(idx)
        card = board.card_at(idx)
        if card is None:
            raise ValueError(f"Slot is empty: {idx}")
        cards.append(card)
    return cards
