"""Layout constants and color definitions."""

from tick_microtween import PRESETS

# Timing
FPS = 60

# Layout dimensions
EASING_NAMES = list(PRESETS)
LANE_COUNT = len(EASING_NAMES)
LANE_H = 84
LABEL_W = 120
CURVE_W = 120
TRACK_W = 440
SIDEBAR_W = 150
STATUS_H = 36

SCREEN_W = LABEL_W + CURVE_W + TRACK_W + SIDEBAR_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H

# Curve plots show some room for overshoot.
PLOT_Y_MIN = -0.3
PLOT_Y_MAX = 1.3

# Orb
ORB_RADIUS = 9
TRACK_PAD = 20  # padding inside the track

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_BG = (25, 25, 40)
TRACK_RAIL = (60, 60, 80)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
CONTROL_COLOR = (90, 90, 120)

# Easing name → color
EASING_COLORS: dict[str, tuple[int, int, int]] = {
    "default": (240, 240, 120),
    "linear": (0, 220, 220),
    "easeOut": (60, 220, 80),
    "circular": (255, 160, 40),
    "elastic": (220, 80, 220),
    "elasticStrong": (255, 90, 90),
    "expo": (110, 140, 255),
}
