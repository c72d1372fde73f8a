"""Command-line entry point: pick a front end and play War."""

from __future__ import annotations

from typing import Optional

import click

from src.core.game import new_game
from src.core.logging_utils import LOG_LEVEL, get_logger, setup_logging
from src.ui.text_display import run_text_game

log = get_logger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, envvar="WAR_SEED",
              help="Random seed for a reproducible deal")
@click.option("--text/--window", "text_mode", default=False,
              help="Play in the terminal instead of a pygame window")
@click.option("--auto", is_flag=True,
              help="Text mode only: play every round without waiting for input")
@click.option("--max-rounds", type=click.IntRange(min=1), default=10_000, show_default=True,
              help="Stop a game that has not ended after this many rounds")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(seed: Optional[int], text_mode: bool, auto: bool,
         max_rounds: int, verbose: bool) -> None:
    """Play the card game War against the computer."""
    setup_logging("DEBUG" if verbose else LOG_LEVEL)

    if auto and not text_mode:
        raise click.UsageError("--auto needs --text")

    state = new_game(seed)
    log.debug("new game, seed=%s", seed)

    if text_mode:
        state = run_text_game(state, auto=auto, max_rounds=max_rounds, echo=click.echo)
        if state.is_terminal():
            click.echo(f"Winner: {state.winner or 'draw'} after {state.round} rounds")
        return

    # pygame only gets imported when a window is wanted
    from src.ui.app import run
    run(state)


if __name__ == "__main__":
    main()
