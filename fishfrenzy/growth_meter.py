"""Meter showing the player's points progress towards the next stage."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any, Optional

from .constants import (
    MAX_STAGES,
    POINTS_FOR_STAGE_2,
    POINTS_FOR_STAGE_3,
    POINTS_TO_WIN,
    TRANSPARENT,
    WHITE,
    Color,
)
from .entity import Vec2

WIDTH = 300.0
HEIGHT = 30.0
BORDER_THICKNESS = 2.0
FILL_SPEED = 200.0

INNER_WIDTH = WIDTH - BORDER_THICKNESS * 2
INNER_HEIGHT = HEIGHT - BORDER_THICKNESS * 2

BACKGROUND_COLOR = Color(30, 30, 30, 200)
BORDER_FILL_COLOR = TRANSPARENT
BORDER_OUTLINE_COLOR = WHITE
STAGE_COLORS = (Color(0, 255, 100), Color(0, 150, 255), Color(255, 100, 0))

# Points at which each stage begins and the target shown for it.
_STAGE_RANGES = {
    1: (0, POINTS_FOR_STAGE_2),
    2: (POINTS_FOR_STAGE_2, POINTS_FOR_STAGE_3),
    3: (POINTS_FOR_STAGE_3, POINTS_TO_WIN),
}


class GrowthMeter:
    """Tracks points within the current stage and the bar that shows them."""

    def __init__(self, font: Any = None) -> None:
        self.font = font
        self.current_progress = 0.0
        self.target_progress = 0.0
        self.max_progress = float(POINTS_FOR_STAGE_2)
        self.current_stage = 1
        self.points = 0
        self.glow_intensity = 0.0
        self.position = Vec2()

        self.fill_color = STAGE_COLORS[0]
        self.fill_width = 0.0
        self.fill_height = INNER_HEIGHT
        self.fill_position = Vec2(BORDER_THICKNESS, BORDER_THICKNESS)

        self.stage_text = "Stage 1"
        self.stage_text_size = 20
        self.progress_text = ""
        self.progress_text_size = 16
        self.stage_text_position = Vec2()
        # The progress text is right-aligned against this point.
        self.progress_text_anchor = Vec2()

        self.on_stage_complete: Optional[Callable[[], None]] = None
        self._update_visuals()

    @property
    def is_stage_complete(self) -> bool:
        return self.current_progress >= self.max_progress

    def set_points(self, points: int) -> None:
        """Set the player's total points and recompute progress within the stage."""
        self.points = points
        stage_range = _STAGE_RANGES.get(self.current_stage)
        if stage_range is not None:
            start, end = stage_range
            self.current_progress = float(points - start)
            self.target_progress = self.current_progress
            self.max_progress = float(end - start)
        self._update_visuals()

    def update(self, dt: float) -> None:
        """Animate the fill towards its target and glow when nearly full."""
        if self.current_progress < self.target_progress:
            increment = FILL_SPEED * dt
            self.current_progress = min(self.current_progress + increment,
                                        self.target_progress)
            self._update_visuals()

        if self.current_progress / self.max_progress > 0.8 and self.current_stage < 4:
            self.glow_intensity = abs(math.sin(dt * 3.0)) * 0.5 + 0.5
            color = self.fill_color
            boost = self.glow_intensity * 0.3
            self.fill_color = Color(
                int(color.r + (255 - color.r) * boost),
                int(color.g + (255 - color.g) * boost),
                color.b,
                color.a,
            )

    def reset(self) -> None:
        self.current_progress = 0.0
        self.target_progress = 0.0
        self.glow_intensity = 0.0
        self.points = 0
        self._update_visuals()

    def set_position(self, x: float, y: float) -> None:
        self.position = Vec2(x, y)
        self.fill_position = Vec2(x + BORDER_THICKNESS, y + BORDER_THICKNESS)
        self.stage_text_position = Vec2(x + 5.0, y - 25.0)
        self.progress_text_anchor = Vec2(x + WIDTH - 5.0, y - 25.0)

    def set_stage(self, stage: int) -> None:
        """Switch to a stage, clamped to the valid range, keeping the points."""
        self.current_stage = max(1, min(stage, MAX_STAGES))
        self.stage_text = f"Stage {self.current_stage}"
        self.fill_color = STAGE_COLORS[self.current_stage - 1]
        self.set_points(self.points)

    def draw(self, target: Any) -> None:
        target.draw(self)

    def _update_visuals(self) -> None:
        fraction = (self.current_progress / self.max_progress
                    if self.max_progress > 0 else 0.0)
        self.fill_width = INNER_WIDTH * fraction
        stage_range = _STAGE_RANGES.get(self.current_stage)
        target_points = stage_range[1] if stage_range is not None else 0
        self.progress_text = f"Points: {self.points}/{target_points}"
        self.progress_text_anchor = Vec2(self.position.x + WIDTH - 5.0,
                                         self.position.y - 25.0)