from __future__ import annotations

from typing import Iterable, List, Optional

from .cards import Card, build_deck


class Deck:
    """Cards dealt from the top in the order given. Never reshuffles."""

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards: List[Card] = list(cards)

    @classmethod
    def standard(cls) -> "Deck":
        return cls(build_deck())

    def size(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def deal(self) -> Optional[Card]:
        if not self._cards:
            return None
        return self._cards.pop(0)

    def deal_many(self, count: int) -> List[Card]:
        if len(self._cards) < count:
            raise ValueError("Not enough cards left in deck")
        cards = self._cards[:count]
        del self._cards[:count]
        return cards

    def __len__(self) -> int:
        return len(self._cards)
