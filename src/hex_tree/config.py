"""Shared constants for hex tree growth and the preview window."""

from typing import Final

# Growth
MIN_FORBID_PROB: Final[float] = 0.0
MAX_FORBID_PROB: Final[float] = 0.9  # exclusive
DEFAULT_FORBID_PROB: Final[float] = 0.5

# Geometry
DEFAULT_HEX_WIDTH: Final[float] = 19.0
DEFAULT_HEX_HEIGHT: Final[float] = 17.0

# Preview window
SCREEN_WIDTH: Final[int] = 900
SCREEN_HEIGHT: Final[int] = 800
BB_HEIGHT: Final[int] = 36
VIEW_MARGIN_PX: Final[int] = 16
FPS: Final[int] = 60
HEXES_PER_FRAME: Final[int] = 4
WINDOW_TITLE: Final[str] = "Hex Tree"
FONT_SIZE_STATUS: Final[int] = 14

# Colors
COLOR_CHARCOAL: Final[tuple[int, int, int]] = (45, 45, 45)
COLOR_NEAR_BLACK: Final[tuple[int, int, int]] = (20, 20, 20)
COLOR_SLATE_GRAY: Final[tuple[int, int, int]] = (112, 128, 144)
COLOR_DEEP_TEAL: Final[tuple[int, int, int]] = (30, 100, 100)
COLOR_AQUA: Final[tuple[int, int, int]] = (50, 215, 200)
COLOR_CORAL: Final[tuple[int, int, int]] = (240, 95, 95)
COLOR_AMBER: Final[tuple[int, int, int]] = (255, 191, 0)
COLOR_SOFT_WHITE: Final[tuple[int, int, int]] = (235, 235, 235)

# Logging
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
