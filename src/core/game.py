from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .deck import Deck
from .logging_utils import get_logger

log = get_logger(__name__)

FULL_DECK_SIZE = 52
HALF_DECK      = FULL_DECK_SIZE // 2


class Side(Enum):
    PLAYER   = "player"
    COMPUTER = "computer"

    @property
    def opponent(self) -> Side:
        return Side.COMPUTER if self is Side.PLAYER else Side.PLAYER

    def __str__(self) -> str:
        return self.value


class GameStateError(ValueError):
    """A GameState broke one of its invariants. Always a logic bug."""


# ── GameState ────────────────────────────────────────────────────────────────

@dataclass
class GameState:
    player_deck: Deck = field(default_factory=Deck)
    computer_deck: Deck = field(default_factory=Deck)
    round: int = 0
    terminal: bool = False
    winner: Optional[Side] = None
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def new(cls, seed: Optional[int] = None, *,
            rng: Optional[random.Random] = None,
            shuffle: bool = True) -> GameState:
        """
        Deal a fresh game. Pass either a seed or a ready generator;
        shuffle=False deals the canonical order untouched.
        """
        state = cls(rng=rng if rng is not None else random.Random(seed))
        state.reset(shuffle=shuffle)
        return state

    def reset(self, *, shuffle: bool = True) -> None:
        """Re-deal in place: one full deck, shuffled once, split in half."""
        full = Deck.new_full()
        if shuffle:
            full.shuffle(self.rng)

        self.player_deck   = Deck(cards=full.cards[:HALF_DECK])
        self.computer_deck = Deck(cards=full.cards[HALF_DECK:])
        self.round    = 0
        self.terminal = False
        self.winner   = None
        log.debug("dealt %d/%d (shuffled=%s)",
                  self.player_deck.size(), self.computer_deck.size(), shuffle)

    # ── queries ──────────────────────────────────────────────────────────────

    def deck_for(self, side: Side) -> Deck:
        return self.player_deck if side is Side.PLAYER else self.computer_deck

    def cards_remaining(self, side: Side) -> int:
        return self.deck_for(side).size()

    def total_cards(self) -> int:
        return self.player_deck.size() + self.computer_deck.size()

    def is_terminal(self) -> bool:
        return self.terminal

    def validate(self) -> None:
        """Raise GameStateError if the state could not come from a real game."""
        if not isinstance(self.player_deck, Deck) or not isinstance(self.computer_deck, Deck):
            raise GameStateError("both decks must be Deck instances")
        if self.round < 0:
            raise GameStateError(f"negative round counter: {self.round}")
        if self.winner is not None and not self.terminal:
            raise GameStateError(f"winner {self.winner} set on a running game")

        seen = set()
        for card in (*self.player_deck, *self.computer_deck):
            if card in seen:
                raise GameStateError(f"card {card} dealt twice")
            seen.add(card)

    def __str__(self) -> str:
        return (f"Round {self.round} | You: {self.player_deck.size()}"
                f" | Computer: {self.computer_deck.size()}")


def new_game(seed: Optional[int] = None, *,
             rng: Optional[random.Random] = None,
             shuffle: bool = True) -> GameState:
    return GameState.new(seed, rng=rng, shuffle=shuffle)
