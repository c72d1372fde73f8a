"""
text_display.py — Terminal front end for the engine.

Same contract as the pygame screen: hand play_round() outcomes to a
renderer, never reach into the decks. Commands in interactive mode:
Enter/d draw, n new game, r clear the table, q quit.
"""
from __future__ import annotations

from typing import Callable, List, Optional

from ..core.game import GameState
from ..core.logging_utils import get_logger
from ..core.round_engine import RoundOutcome, play_round
from .presenter import (
    CONTINUE_MESSAGE, START_MESSAGE,
    card_label, count_line, round_info, status_message,
)

log = get_logger(__name__)

_RULE = "─" * 50


class TextDisplay:
    """Renders outcomes and idle screens as plain text blocks."""

    def render_outcome(self, outcome: RoundOutcome, state: GameState) -> str:
        lines: List[str] = [_RULE]
        if outcome.initial_player_card is not None:
            lines.append(f"  You played:      {card_label(outcome.initial_player_card)}")
            lines.append(f"  Computer played: {card_label(outcome.initial_computer_card)}")
        lines.append(f"  {status_message(outcome)}")
        lines.append(f"  {count_line(outcome)}")
        lines.append(f"  {round_info(state)}")
        return "\n".join(lines)

    def render_idle(self, state: GameState, message: str = START_MESSAGE) -> str:
        return "\n".join([
            _RULE,
            f"  {message}",
            f"  {count_line(state)}",
            f"  {round_info(state)}",
        ])

    def render_unfinished(self, state: GameState, max_rounds: int) -> str:
        return "\n".join([
            _RULE,
            f"  No winner after {max_rounds} rounds.",
            f"  {count_line(state)}",
        ])


def _read_command(read: Callable[[str], str]) -> str:
    try:
        raw = read("[d]raw  [n]ew game  [r]eset  [q]uit > ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        return "q"
    return raw or "d"


def run_text_game(
    state: GameState,
    *,
    auto: bool = False,
    max_rounds: int = 10_000,
    echo: Callable[[str], None] = print,
    read: Callable[[str], str] = input,
    display: Optional[TextDisplay] = None,
) -> GameState:
    """
    Drive a game in the terminal and return the state it finished in.

    auto=True plays rounds back to back until the game ends or max_rounds
    have been played; War can cycle forever, so the cap always applies.
    """
    display = display or TextDisplay()
    played  = 0

    if auto:
        while not state.is_terminal() and played < max_rounds:
            outcome = play_round(state)
            played += 1
            echo(display.render_outcome(outcome, state))
        if not state.is_terminal():
            log.info("stopped after %d rounds without a winner", played)
            echo(display.render_unfinished(state, max_rounds))
        return state

    echo(display.render_idle(state))
    while True:
        cmd = _read_command(read)
        if cmd in ("q", "quit", "exit"):
            return state
        if cmd in ("n", "new"):
            state.reset()
            played = 0
            echo(display.render_idle(state))
        elif cmd in ("r", "reset"):
            echo(display.render_idle(state, CONTINUE_MESSAGE))
        elif cmd in ("d", "draw"):
            if state.is_terminal():
                echo("  Game over. Press n for a new game.")
                continue
            if played >= max_rounds:
                echo(display.render_unfinished(state, max_rounds))
                continue
            outcome = play_round(state)
            played += 1
            echo(display.render_outcome(outcome, state))
        else:
            echo(f"  Unknown command {cmd!r}.")
