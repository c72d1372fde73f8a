from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from .card import Card, Suit, RANKS


@dataclass(slots=True)
class Deck:
    cards: List[Card] = field(default_factory=list)

    @classmethod
    def new_full(cls) -> Deck:
        """All 52 cards, suits outer and ranks inner, in canonical order."""
        return cls(cards=[Card(suit=s, rank=r) for s in Suit for r in RANKS])

    def shuffle(self, rng: random.Random) -> None:
        # Fisher-Yates, driven by the injected generator
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Optional[Card]:
        """Remove and return the front card, or None once the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop(0)

    def append(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def size(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards) or "(empty)"
