from __future__ import annotations

from typing import Optional

import pygame
from ..core.card import Card
from ..core.game import GameState, Side
from ..core.round_engine import RoundOutcome, play_round
from .constants import (
    WIDTH, HEIGHT, ROUND_DELAY,
    BG, GRID, ACCENT, ACCENT_GLOW, PANEL_EDGE,
    TEXT_DIM,
    CARD_BG, CARD_BORDER, CARD_RED, CARD_BLACK,
    CARD_W, CARD_H, CARD_RADIUS, BTN_H,
)
from .presenter import (
    CONTINUE_MESSAGE, START_MESSAGE, round_info, status_message,
)
from .widgets import Button

_PILE_X      = 140
_PLAYED_X    = WIDTH // 2 - CARD_W // 2
_COMPUTER_Y  = 70
_PLAYER_Y    = HEIGHT // 2 + 40
_STATUS_Y    = HEIGHT // 2 - 40
_BUTTONS_Y   = HEIGHT - BTN_H - 24
_PILE_LAYERS = 4


class WarScreen:
    """
    Table view for one GameState.
    handle_event() returns 'quit' or None.

    Drawing plays the round at once; the visible result follows
    ROUND_DELAY frames later. The delay lives entirely in this screen.
    """

    def __init__(self, screen: pygame.Surface, fonts: dict, state: GameState) -> None:
        self.screen = screen
        self.fonts  = fonts
        self.state  = state

        cx = WIDTH // 2
        self._draw_btn  = Button(cx - 200, _BUTTONS_Y, "DRAW CARD", font=fonts["btn"])
        self._new_btn   = Button(cx,       _BUTTONS_Y, "NEW GAME",  font=fonts["btn"])
        self._reset_btn = Button(cx + 200, _BUTTONS_Y, "RESET",     font=fonts["btn"])

        self._surf_cache: dict[str, pygame.Surface] = {}

        self._pending: Optional[RoundOutcome] = None
        self._reveal_timer = 0
        self._clear_table(START_MESSAGE)

    # ── table state ──────────────────────────────────────────────────────────

    def _clear_table(self, message: str) -> None:
        self._shown_player:   Optional[Card] = None
        self._shown_computer: Optional[Card] = None
        self._status  = message
        self._counts  = (self.state.cards_remaining(Side.PLAYER),
                         self.state.cards_remaining(Side.COMPUTER))
        self._info    = round_info(self.state)
        self._pending = None
        self._reveal_timer = 0
        self._draw_btn.enabled = not self.state.is_terminal()

    def _on_draw(self) -> None:
        if self.state.is_terminal() or self._pending is not None:
            return
        self._pending      = play_round(self.state)
        self._reveal_timer = ROUND_DELAY
        self._draw_btn.enabled = False

    def _reveal(self, outcome: RoundOutcome) -> None:
        if outcome.initial_player_card is not None:
            self._shown_player = outcome.initial_player_card
        if outcome.initial_computer_card is not None:
            self._shown_computer = outcome.initial_computer_card
        self._status  = status_message(outcome)
        self._counts  = (outcome.player_cards_remaining,
                         outcome.computer_cards_remaining)
        self._info    = round_info(outcome)
        self._draw_btn.enabled = not outcome.is_game_over

    def _on_new_game(self) -> None:
        self.state.reset()
        self._clear_table(START_MESSAGE)

    def _on_reset(self) -> None:
        # clears the table only; the game itself carries on
        self._clear_table(CONTINUE_MESSAGE)
        self._draw_btn.enabled = True

    # ── loop hooks ───────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> str | None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "quit"
            if event.key in (pygame.K_SPACE, pygame.K_RETURN) and self._draw_btn.enabled:
                self._on_draw()
                return None
        if self._draw_btn.handle_event(event):
            self._on_draw()
        elif self._new_btn.handle_event(event):
            self._on_new_game()
        elif self._reset_btn.handle_event(event):
            self._on_reset()
        return None

    def update(self) -> None:
        mouse = pygame.mouse.get_pos()
        for btn in (self._draw_btn, self._new_btn, self._reset_btn):
            btn.update(mouse)

        if self._pending is not None:
            self._reveal_timer -= 1
            if self._reveal_timer <= 0:
                outcome, self._pending = self._pending, None
                self._reveal(outcome)

    def draw(self, surface: pygame.Surface | None = None) -> None:
        t    = surface or self.screen
        W, H = t.get_width(), t.get_height()

        t.fill(BG)
        self._draw_bg_grid(t, W, H)

        player_count, computer_count = self._counts
        self._draw_row(t, "COMPUTER", _COMPUTER_Y, computer_count, self._shown_computer)
        self._draw_row(t, "YOU",      _PLAYER_Y,   player_count,   self._shown_player)
        self._draw_status(t, W)

        for btn in (self._draw_btn, self._new_btn, self._reset_btn):
            btn.draw(t)

    # ── drawing helpers ──────────────────────────────────────────────────────

    def _draw_bg_grid(self, t, W, H):
        for x in range(0, W, 40):
            pygame.draw.line(t, GRID, (x, 0), (x, H))
        for y in range(0, H, 40):
            pygame.draw.line(t, GRID, (0, y), (W, y))

    def _draw_row(self, t, label, y, count, played):
        f = self.fonts["small"]

        # face-down pile, a few offset backs so it reads as a stack
        for i in range(min(_PILE_LAYERS, count)):
            t.blit(self._back_surf(), (_PILE_X + i * 2, y - i * 2))
        if count == 0:
            self._draw_empty_slot(t, _PILE_X, y)

        name = f.render(label, False, ACCENT)
        t.blit(name, (_PILE_X + CARD_W // 2 - name.get_width() // 2, y - 28))
        cnt = f.render(str(count), False, TEXT_DIM)
        t.blit(cnt, (_PILE_X + CARD_W // 2 - cnt.get_width() // 2, y + CARD_H + 8))

        if played is None:
            self._draw_empty_slot(t, _PLAYED_X, y)
        else:
            t.blit(self._face_surf(played), (_PLAYED_X, y))

    def _draw_empty_slot(self, t, x, y):
        pygame.draw.rect(t, PANEL_EDGE, (x, y, CARD_W, CARD_H),
                         width=2, border_radius=CARD_RADIUS)

    def _draw_status(self, t, W):
        status = self.fonts["body"].render(self._status, False, ACCENT_GLOW)
        t.blit(status, (W // 2 - status.get_width() // 2, _STATUS_Y))

        info = self.fonts["small"].render(self._info, False, TEXT_DIM)
        t.blit(info, (W // 2 - info.get_width() // 2, _STATUS_Y + status.get_height() + 12))

    # ── card surfaces ────────────────────────────────────────────────────────

    def _face_surf(self, card: Card) -> pygame.Surface:
        key = str(card)
        if key not in self._surf_cache:
            self._surf_cache[key] = self._make_card_face_surf(card)
        return self._surf_cache[key]

    def _back_surf(self) -> pygame.Surface:
        if "back" not in self._surf_cache:
            self._surf_cache["back"] = self._make_card_back_surf()
        return self._surf_cache["back"]

    def _make_card_face_surf(self, card: Card) -> pygame.Surface:
        surf = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
        col  = CARD_RED if card.is_red() else CARD_BLACK
        pygame.draw.rect(surf, CARD_BG,     (0, 0, CARD_W, CARD_H), border_radius=CARD_RADIUS)
        pygame.draw.rect(surf, CARD_BORDER, (0, 0, CARD_W, CARD_H), width=2,
                         border_radius=CARD_RADIUS)

        rank = self.fonts["rank"].render(card.rank, True, col)
        surf.blit(rank, (10, 8))

        suit = self.fonts["suit"].render(card.suit.value, True, col)
        surf.blit(suit, (CARD_W // 2 - suit.get_width() // 2,
                         CARD_H // 2 - suit.get_height() // 2))

        # bottom-right index is the top-left one turned upside down
        flipped = pygame.transform.rotate(rank, 180)
        surf.blit(flipped, (CARD_W - 10 - flipped.get_width(),
                            CARD_H - 8 - flipped.get_height()))
        return surf

    def _make_card_back_surf(self) -> pygame.Surface:
        surf = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
        pygame.draw.rect(surf, CARD_BG,     (0, 0, CARD_W, CARD_H), border_radius=CARD_RADIUS)
        pygame.draw.rect(surf, CARD_BORDER, (0, 0, CARD_W, CARD_H), width=2,
                         border_radius=CARD_RADIUS)

        # dashed inner frame
        inner = pygame.Rect(10, 10, CARD_W - 20, CARD_H - 20)
        dash, gap = 5, 5
        for x in range(inner.left, inner.right, dash + gap):
            x2 = min(x + dash, inner.right)
            pygame.draw.line(surf, CARD_BORDER, (x, inner.top), (x2, inner.top), 2)
            pygame.draw.line(surf, CARD_BORDER, (x, inner.bottom), (x2, inner.bottom), 2)
        for y in range(inner.top, inner.bottom, dash + gap):
            y2 = min(y + dash, inner.bottom)
            pygame.draw.line(surf, CARD_BORDER, (inner.left, y), (inner.left, y2), 2)
            pygame.draw.line(surf, CARD_BORDER, (inner.right, y), (inner.right, y2), 2)

        emblem = self.fonts["emblem"].render("⚜", True, CARD_BORDER)
        surf.blit(emblem, (CARD_W // 2 - emblem.get_width() // 2,
                           CARD_H // 2 - emblem.get_height() // 2))
        return surf
