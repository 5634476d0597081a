"""Game-wide tuning values, timings and colours."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def with_alpha(self, alpha: float) -> Color:
        """Return the same colour with its alpha truncated and clamped to 0..255."""
        return replace(self, a=max(0, min(255, int(alpha))))


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)

# Window settings
WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
FRAMERATE_LIMIT = 60

# Player settings
PLAYER_BASE_SPEED = 400.0
PLAYER_ACCELERATION = 10.0
PLAYER_DECELERATION = 8.0
PLAYER_MAX_SPEED = 600.0
PLAYER_BASE_RADIUS = 20.0
PLAYER_GROWTH_FACTOR = 1.5

# Points
SMALL_FISH_POINTS = 2
MEDIUM_FISH_POINTS = 5
LARGE_FISH_POINTS = 10
WHITE_OYSTER_POINTS = 7
BLACK_OYSTER_POINTS = 15
BARRACUDA_POINTS = 13
ANGELFISH_POINTS = 100
PUFFERFISH_POINTS = 7

# Rules and thresholds
INITIAL_LIVES = 3
POINTS_FOR_STAGE_2 = 100
POINTS_FOR_STAGE_3 = 200
POINTS_TO_WIN = 400
MAX_STAGES = 3

# Fish settings
SMALL_FISH_RADIUS = 15.0
MEDIUM_FISH_RADIUS = 25.0
LARGE_FISH_RADIUS = 35.0

SMALL_FISH_SPEED = 150.0
MEDIUM_FISH_SPEED = 120.0
LARGE_FISH_SPEED = 90.0

# AI settings
AI_DETECTION_RANGE = 80.0
AI_FLEE_RANGE = 65.0
SPAWN_MARGIN = 50.0

# Visual settings
HUD_MARGIN = 20.0
HUD_FONT_SIZE = 24
MESSAGE_FONT_SIZE = 48

# Progress bar
PROGRESS_BAR_WIDTH = 200.0
PROGRESS_BAR_HEIGHT = 20.0
PROGRESS_BAR_OUTLINE = 2.0

# Timing, in seconds
INVULNERABILITY_DURATION = 2.0
LEVEL_TRANSITION_DURATION = 3.0
RESPAWN_MESSAGE_DURATION = 2.0
SCORE_FLASH_DURATION = 0.5

# Colours
OCEAN_BLUE = Color(0, 100, 150)
PLAYER_COLOR = YELLOW
PLAYER_OUTLINE = Color(255, 200, 0)
SMALL_FISH_COLOR = GREEN
SMALL_FISH_OUTLINE = Color(0, 100, 0)
MEDIUM_FISH_COLOR = BLUE
MEDIUM_FISH_OUTLINE = Color(0, 0, 100)
LARGE_FISH_COLOR = RED
LARGE_FISH_OUTLINE = Color(100, 0, 0)
PROGRESS_BAR_FILL = Color(0, 255, 0)
PROGRESS_BAR_BACKGROUND = Color(50, 50, 50)
PROGRESS_BAR_OUTLINE_COLOR = Color(255, 255, 255)