"""Layout constants and color definitions."""

# Timing
FPS = 60
FINISH_HOLD_MS = 1200

# Layout dimensions
SCREEN_W = 360
SCREEN_H = 640
PAD = 16

CARD_W = SCREEN_W - 2 * PAD
CARD_RADIUS = 12

DIAL_PAD = 16
DIAL_STROKE = 20

FIELD_W = 240
FIELD_H = 56
FIELD_TOP = 24

BUTTON_SIZE = 50
BUTTON_MARGIN_Y = 10

# Colors
OCEAN = (20, 78, 122)
LAVENDER = (150, 123, 220)
CARD_BG = (250, 250, 252)
CARD_SHADOW = (0, 0, 0, 60)
TRACK_COLOR = (225, 220, 240)
TEXT_COLOR = (64, 64, 64)
TEXT_DIM = (140, 140, 150)
FIELD_BORDER = (120, 120, 130)
FIELD_BORDER_FOCUS = LAVENDER
ICON_COLOR = (255, 255, 255)
