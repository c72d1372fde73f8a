"""
presenter.py — Turns engine data into the strings the screens show.

Pure functions only, no pygame: both the window and the terminal
display go through here so they always say the same thing.
"""
from __future__ import annotations

from typing import Optional, Union

from ..core.card import Card
from ..core.game import GameState, Side
from ..core.round_engine import RoundOutcome

START_MESSAGE    = 'Click "Draw Card" to start!'
CONTINUE_MESSAGE = 'Click "Draw Card" to continue!'

_WINNER_TEXT = {
    Side.PLAYER:   "You WIN!",
    Side.COMPUTER: "Computer WINS!",
}
_DRAW_TEXT = "It's a draw!"

_ROUND_TEXT = {
    Side.PLAYER:   "You win the round!",
    Side.COMPUTER: "Computer wins the round!",
}


def card_label(card: Optional[Card]) -> str:
    return str(card) if card is not None else "--"


def status_message(outcome: RoundOutcome) -> str:
    if outcome.is_draw:
        return _DRAW_TEXT
    if outcome.is_game_over:
        return _WINNER_TEXT[outcome.winner]

    msg = _ROUND_TEXT[outcome.round_winner]
    if outcome.wars:
        msg = f"WAR! x{outcome.wars} - {msg}"
    return msg


def round_info(source: Union[RoundOutcome, GameState]) -> str:
    if isinstance(source, RoundOutcome):
        total = source.player_cards_remaining + source.computer_cards_remaining
    else:
        total = source.total_cards()
    return f"Round {source.round} | Total Cards: {total}"


def count_line(source: Union[RoundOutcome, GameState]) -> str:
    """Pile counts from either a fresh outcome or the live state."""
    if isinstance(source, RoundOutcome):
        player, computer = source.player_cards_remaining, source.computer_cards_remaining
    else:
        player   = source.cards_remaining(Side.PLAYER)
        computer = source.cards_remaining(Side.COMPUTER)
    return f"You: {player}  |  Computer: {computer}"
