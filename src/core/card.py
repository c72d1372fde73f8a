from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Suit(Enum):
    SPADES   = "♠"
    HEARTS   = "♥"
    DIAMONDS = "♦"
    CLUBS    = "♣"

    def __str__(self) -> str:
        return self.value


# Full 52-card deck: 2 through Ace, Ace high
RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
_RANK_VALUE = {r: i for i, r in enumerate(RANKS, start=2)}


@dataclass(frozen=True, slots=True)
class Card:
    suit: Suit
    rank: str  # one of RANKS
    numeric_rank: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.rank not in _RANK_VALUE:
            raise ValueError(f"Unknown rank {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Unknown suit {self.suit!r}")
        object.__setattr__(self, "numeric_rank", _RANK_VALUE[self.rank])

    def beats(self, other: Card) -> bool:
        return self.numeric_rank > other.numeric_rank

    def is_red(self) -> bool:
        return self.suit in (Suit.HEARTS, Suit.DIAMONDS)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return self.__str__()


def compare_cards(a: Card, b: Card) -> int:
    """
    1 if a outranks b, -1 if b outranks a, 0 on a tie (war).
    Suits never break ties.
    """
    if a.numeric_rank > b.numeric_rank:
        return 1
    if b.numeric_rank > a.numeric_rank:
        return -1
    return 0
