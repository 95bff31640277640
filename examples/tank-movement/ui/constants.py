"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 960
SCREEN_H = 640
STATUS_H = 28

# Colors
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
PAUSED_COLOR = (255, 160, 40)
