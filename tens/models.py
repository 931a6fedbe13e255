from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from .cards import Card


class GroupKind(str, Enum):
    PAIR_SUM_10 = "PAIR_SUM_10"
    FOUR_OF_A_KIND = "FOUR_OF_A_KIND"


@dataclass
class BoardConfig:
    size: int = 13


class BoardView(Protocol):
    """Read-only slice of a board that the rule engine needs."""

    def size(self) -> int:
        """Number of slots, occupied or not."""

    def occupied_indexes(self) -> List[int]:
        """Indexes of the slots currently holding a card, ascending."""

    def card_at(self, index: int) -> Optional[Card]:
        """Card in the slot, or None when the slot is empty."""
