from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from . import rules
from .cards import Card, parse_label
from .deck import Deck
from .models import BoardConfig

LOGGER = logging.getLogger("tens.board")

# TensBoard owns slot storage and replenishment. Legality questions are
# forwarded to tens.rules, which only reads through the BoardView methods.


class TensBoard:
    """A row of face-up slots refilled from a deck as groups are removed."""

    def __init__(
        self,
        deck: Deck,
        config: Optional[BoardConfig] = None,
        slots: Optional[Sequence[Optional[Card]]] = None,
    ) -> None:
        self.config = config or BoardConfig()
        if self.config.size <= 0:
            raise ValueError("Board size must be positive")
        self.deck = deck
        self.slots: List[Optional[Card]] = [None] * self.config.size
        if slots is None:
            self.new_game()
        else:
            if len(slots) > self.config.size:
                raise ValueError("Too many cards for board size")
            self.slots[: len(slots)] = list(slots)

    @classmethod
    def from_labels(
        cls,
        labels: Sequence[Optional[str]],
        deck: Optional[Deck] = None,
        config: Optional[BoardConfig] = None,
    ) -> "TensBoard":
        """Lay out specific cards; ``None`` (or ``"-"``) leaves a slot empty."""
        slots = [None if label in (None, "-") else parse_label(label) for label in labels]
        return cls(deck or Deck([]), config=config, slots=slots)

    # Board view ------------------------------------------------------

    def size(self) -> int:
        return len(self.slots)

    def occupied_indexes(self) -> List[int]:
        return [idx for idx, card in enumerate(self.slots) if card is not None]

    def card_at(self, index: int) -> Optional[Card]:
        return self.slots[index]

    def is_empty(self) -> bool:
        return all(card is None for card in self.slots)

    def deck_size(self) -> int:
        return self.deck.size()

    def labels(self) -> List[Optional[str]]:
        return [card.label if card else None for card in self.slots]

    # Rules -----------------------------------------------------------

    def is_legal(self, selection: Sequence[int]) -> bool:
        return rules.is_legal(self, selection)

    def another_play_is_possible(self) -> bool:
        return rules.another_play_is_possible(self)

    def game_is_won(self) -> bool:
        return self.deck.is_empty() and self.is_empty()

    # Game flow -------------------------------------------------------

    def new_game(self) -> None:
        if self.deck.size() < self.size():
            raise RuntimeError("Not enough cards to deal a new board")
        self.slots = list(self.deck.deal_many(self.size()))
        LOGGER.debug("Dealt new board: %s", self.labels())

    def replace_selected_cards(self, selection: Sequence[int]) -> None:
        if not self.is_legal(selection):
            raise ValueError("Selection is not a legal group")
        for idx in selection:
            removed = self.slots[idx]
            self.slots[idx] = self.deck.deal()
            LOGGER.debug("Slot %s: %s -> %s", idx, removed.label, self.slots[idx].label if self.slots[idx] else "-")

        if self.game_is_won():
            LOGGER.info("Board cleared; game won")
        elif not self.another_play_is_possible():
            LOGGER.info("No legal plays remain; %s cards left in deck", self.deck.size())
