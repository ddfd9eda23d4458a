"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 720
SCREEN_H = 480
STAGE_H = 300
HUD_H = 144
STATUS_H = SCREEN_H - STAGE_H - HUD_H

STEP_SIZE = 56
STEP_GAP = 12

# Colors
BG_COLOR = (18, 16, 28)
STAGE_BG = (30, 26, 48)
FLOOR_COLOR = (48, 40, 72)
HUD_BG = (24, 22, 36)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (210, 210, 220)
TEXT_DIM = (120, 120, 140)
WARNING_COLOR = (255, 80, 80)
BONUS_COLOR = (120, 255, 140)
DANCER_COLOR = (240, 200, 90)

# Step status -> color
STEP_COLORS: dict[str, tuple[int, int, int]] = {
    "pending": (70, 70, 95),
    "correct": (60, 200, 90),
    "wrong": (220, 60, 60),
}
CURRENT_BORDER = (255, 255, 255)

# Direction -> glyph drawn on the step tile
ARROWS: dict[str, str] = {
    "ArrowLeft": "<",
    "ArrowUp": "^",
    "ArrowRight": ">",
    "ArrowDown": "v",
}
