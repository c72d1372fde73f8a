from __future__ import annotations

from typing import Optional

import pygame

from .constants import WIDTH, HEIGHT, FPS, TITLE, BG, TEXT_FONTS, SYMBOL_FONTS
from .game_screen import WarScreen
from ..core.game import GameState
from ..core.logging_utils import get_logger

log = get_logger(__name__)


def _match_first(names: list[str]) -> Optional[str]:
    """Path of the first installed system font in names, or None."""
    for name in names:
        path = pygame.font.match_font(name)
        if path:
            return path
    return None


def _load_fonts() -> dict:
    pygame.font.init()

    text_path = _match_first(TEXT_FONTS)
    if text_path is None:
        log.warning("no monospace system font found, using pygame default")

    # suit glyphs and the card-back emblem need a font that carries them
    symbol_path = _match_first(SYMBOL_FONTS)
    if symbol_path is None:
        log.warning("no symbol font found, suits may not render")

    def f(size: int) -> pygame.font.Font:
        return pygame.font.Font(text_path, size)

    def sym(size: int) -> pygame.font.Font:
        return pygame.font.Font(symbol_path, size)

    return {
        "btn":    f(18),
        "body":   f(22),
        "small":  f(16),
        "rank":   sym(22),
        "suit":   sym(48),
        "emblem": sym(32),
    }


def run(state: GameState) -> None:
    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    screen.fill(BG)
    pygame.display.flip()

    fonts       = _load_fonts()
    game_screen = WarScreen(screen, fonts, state)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if game_screen.handle_event(event) == "quit":
                running = False
                break

        game_screen.update()
        game_screen.draw()
        pygame.display.flip()

    pygame.quit()
