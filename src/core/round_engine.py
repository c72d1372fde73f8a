from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .card import Card, compare_cards
from .deck import Deck
from .game import FULL_DECK_SIZE, GameState, GameStateError, Side
from .logging_utils import get_logger

log = get_logger(__name__)

WAR_FACE_DOWN = 3
WAR_STAKE     = WAR_FACE_DOWN + 1   # face-down cards plus the face-up tiebreaker


class RoundStatus(Enum):
    CONTINUE  = "continue"
    GAME_OVER = "gameOver"

    def __str__(self) -> str:
        return self.value


class GameOverReason(Enum):
    EMPTY_DECK   = "empty_deck"     # a side had nothing left to draw
    WAR_STARVED  = "war_starved"    # a side could not fund a war
    ALL_CARDS    = "all_cards"      # one side took every card
    ALREADY_OVER = "already_over"   # no-op call on a finished game


@dataclass(frozen=True)
class RoundOutcome:
    status: RoundStatus
    player_cards_remaining: int
    computer_cards_remaining: int
    round: int
    winner: Optional[Side] = None
    reason: Optional[GameOverReason] = None
    initial_player_card: Optional[Card] = None
    initial_computer_card: Optional[Card] = None
    round_winner: Optional[Side] = None
    wars: int = 0
    cards_won: int = 0

    @property
    def is_game_over(self) -> bool:
        return self.status is RoundStatus.GAME_OVER

    @property
    def is_draw(self) -> bool:
        return self.is_game_over and self.winner is None


# ── win rules ────────────────────────────────────────────────────────────────

def check_win_condition(state: GameState) -> Optional[Side]:
    """
    PLAYER if the player holds every card or the computer holds none,
    COMPUTER for the mirror case, None while both sides still hold cards.
    """
    for side in Side:
        if state.cards_remaining(side) == FULL_DECK_SIZE:
            return side
    for side in Side:
        if state.cards_remaining(side) == 0:
            return side.opponent
    return None


def starved_winner(state: GameState) -> Optional[Side]:
    """
    Winner when a war cannot be funded: the usual rule first, otherwise
    the shorter deck loses. Equal decks are a draw (None).
    """
    winner = check_win_condition(state)
    if winner is not None:
        return winner

    player   = state.cards_remaining(Side.PLAYER)
    computer = state.cards_remaining(Side.COMPUTER)
    if player < computer:
        return Side.COMPUTER
    if computer < player:
        return Side.PLAYER
    return None


# ── helpers ──────────────────────────────────────────────────────────────────

def _outcome(state: GameState, status: RoundStatus, **fields) -> RoundOutcome:
    return RoundOutcome(
        status=status,
        player_cards_remaining=state.cards_remaining(Side.PLAYER),
        computer_cards_remaining=state.cards_remaining(Side.COMPUTER),
        round=state.round,
        **fields,
    )


def _end_game(state: GameState, winner: Optional[Side],
              reason: GameOverReason, **fields) -> RoundOutcome:
    state.terminal = True
    state.winner   = winner
    log.info("game over after %d rounds: %s (%s)",
             state.round, winner or "draw", reason.value)
    return _outcome(state, RoundStatus.GAME_OVER,
                    winner=winner, reason=reason, **fields)


def _can_fund_war(state: GameState) -> bool:
    return (state.player_deck.size() >= WAR_STAKE
            and state.computer_deck.size() >= WAR_STAKE)


def _draw_war_cards(deck: Deck, pile: List[Card]) -> Card:
    """Move the face-down cards and the face-up card onto pile; return the face-up one."""
    card = None
    for _ in range(WAR_STAKE):
        card = deck.draw()
        if card is None:
            raise GameStateError("deck ran dry during a funded war")
        pile.append(card)
    return card


# ── round ────────────────────────────────────────────────────────────────────

def play_round(state: GameState) -> RoundOutcome:
    """
    Play one full round, wars included, and move the pot to its winner.

    Running out of cards is an outcome, never an exception: an empty draw
    or an unfundable war ends the game with the reason recorded on the
    returned RoundOutcome. Calling this on a finished game changes nothing.
    """
    state.validate()

    if state.terminal:
        return _outcome(state, RoundStatus.GAME_OVER,
                        winner=state.winner, reason=GameOverReason.ALREADY_OVER)

    player_card   = state.player_deck.draw()
    computer_card = state.computer_deck.draw()

    if player_card is None or computer_card is None:
        # put back whichever card did come out so nothing goes missing
        if player_card is not None:
            state.player_deck.append([player_card])
        if computer_card is not None:
            state.computer_deck.append([computer_card])
        return _end_game(state, check_win_condition(state), GameOverReason.EMPTY_DECK)

    player_pile   = [player_card]
    computer_pile = [computer_card]
    result = compare_cards(player_card, computer_card)
    wars   = 0

    # ── war: re-checked before every escalation ──────────────────────────────
    while result == 0:
        if not _can_fund_war(state):
            state.player_deck.append(player_pile)
            state.computer_deck.append(computer_pile)
            log.debug("war %d starved: %d vs %d cards", wars + 1,
                      state.player_deck.size(), state.computer_deck.size())
            return _end_game(
                state, starved_winner(state), GameOverReason.WAR_STARVED,
                initial_player_card=player_card,
                initial_computer_card=computer_card,
                wars=wars,
            )

        wars += 1
        player_up   = _draw_war_cards(state.player_deck, player_pile)
        computer_up = _draw_war_cards(state.computer_deck, computer_pile)
        log.debug("war %d: %s vs %s", wars, player_up, computer_up)
        result = compare_cards(player_up, computer_up)

    round_winner = Side.PLAYER if result > 0 else Side.COMPUTER
    pot = player_pile + computer_pile
    state.deck_for(round_winner).append(pot)
    state.round += 1

    log.debug("round %d: %s vs %s -> %s takes %d",
              state.round, player_card, computer_card, round_winner, len(pot))

    fields = dict(
        initial_player_card=player_card,
        initial_computer_card=computer_card,
        round_winner=round_winner,
        wars=wars,
        cards_won=len(pot),
    )

    winner = check_win_condition(state)
    if winner is not None:
        return _end_game(state, winner, GameOverReason.ALL_CARDS, **fields)
    return _outcome(state, RoundStatus.CONTINUE, **fields)
