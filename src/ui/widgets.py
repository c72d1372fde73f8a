from __future__ import annotations

import pygame
from .constants import (
    ACCENT, ACCENT_DARK, ACCENT_GLOW, PANEL, PANEL_EDGE,
    TEXT_MAIN, TEXT_DIM, BTN_W, BTN_H, BTN_RADIUS,
)


class Button:
    def __init__(
        self,
        x: int, y: int,
        text: str,
        w: int = BTN_W,
        h: int = BTN_H,
        font: pygame.font.Font | None = None,
    ) -> None:
        self.rect    = pygame.Rect(0, 0, w, h)
        self.rect.centerx = x
        self.rect.y  = y
        self.text    = text
        self.font    = font
        self.hovered = False
        self.enabled = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                return True
        return False

    def update(self, mouse_pos: tuple) -> None:
        self.hovered = self.enabled and self.rect.collidepoint(mouse_pos)

    def draw(self, surface: pygame.Surface) -> None:
        r   = self.rect
        tmp = pygame.Surface((r.w, r.h), pygame.SRCALPHA)

        fill = ACCENT_DARK if self.hovered else PANEL
        pygame.draw.rect(tmp, fill, tmp.get_rect(), border_radius=BTN_RADIUS)

        if self.enabled:
            border_col = ACCENT_GLOW if self.hovered else ACCENT
        else:
            border_col = PANEL_EDGE
        pygame.draw.rect(tmp, border_col, tmp.get_rect(),
                         width=3 if self.hovered else 2, border_radius=BTN_RADIUS)

        if self.font:
            col   = TEXT_MAIN if self.enabled else TEXT_DIM
            label = self.font.render(self.text, False, col)
            lx    = tmp.get_width()  // 2 - label.get_width()  // 2
            ly    = tmp.get_height() // 2 - label.get_height() // 2
            tmp.blit(label, (lx, ly))

        # disabled buttons fade back into the table
        if not self.enabled:
            tmp.set_alpha(120)

        surface.blit(tmp, (r.x, r.y))
