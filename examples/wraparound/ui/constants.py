"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
CANVAS_W = 400
CANVAS_H = 400
STATUS_H = 48

SCREEN_W = CANVAS_W
SCREEN_H = CANVAS_H + STATUS_H

# Colors
BG_COLOR = (12, 10, 20)
STATUS_BG = (30, 30, 40)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
PLAYING_COLOR = (60, 220, 80)
PAUSED_COLOR = (255, 160, 40)
