from __future__ import annotations

import os as _os

# ── window ────────────────────────────────────────────────────────────────────
WIDTH  = 960
HEIGHT = 720
FPS    = 60
TITLE  = "War"

_os.environ.setdefault('SDL_VIDEO_WINDOW_POS', '100,100')

# ── timing ────────────────────────────────────────────────────────────────────
ROUND_DELAY = 18   # frames between a draw and showing its result (~300ms)

# ── palette ───────────────────────────────────────────────────────────────────
BLACK      = (0,   0,   0)
WHITE      = (255, 255, 255)
BG         = (12,  60,  32)    # felt green
GRID       = (18,  72,  40)

ACCENT      = (255, 200, 80)   # gold — buttons, highlights
ACCENT_DARK = (150, 110, 30)
ACCENT_GLOW = (255, 225, 140)
PANEL       = (8,   40,  20)
PANEL_EDGE  = (40,  110, 64)

TEXT_MAIN  = (240, 240, 230)
TEXT_DIM   = (150, 185, 160)

# ── card colours ─────────────────────────────────────────────────────────────
CARD_BG     = WHITE
CARD_BORDER = BLACK
CARD_RED    = (227, 30,  36)   # hearts / diamonds
CARD_BLACK  = BLACK            # spades / clubs

# ── layout ────────────────────────────────────────────────────────────────────
BTN_W      = 180
BTN_H      = 48
BTN_GAP    = 16
BTN_RADIUS = 4

CARD_W      = 120
CARD_H      = 170
CARD_RADIUS = 10

# looked up with pygame.font.match_font, first hit wins
TEXT_FONTS   = ["dejavusansmono", "liberationmono", "couriernew", "consolas", "monospace"]
SYMBOL_FONTS = ["dejavusans", "freesans", "segoeuisymbol", "arialunicodems", "arial"]
