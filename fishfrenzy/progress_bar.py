"""A labelled bar showing progress through the current growth stage."""

from __future__ import annotations

from typing import Any

from .constants import (
    PROGRESS_BAR_BACKGROUND,
    PROGRESS_BAR_FILL,
    PROGRESS_BAR_HEIGHT,
    PROGRESS_BAR_OUTLINE,
    PROGRESS_BAR_OUTLINE_COLOR,
    PROGRESS_BAR_WIDTH,
    WHITE,
)
from .entity import Vec2

_STAGE_NAMES = {1: "Small Fish", 2: "Medium Fish", 3: "Large Fish"}


def _stage_span(stage: int) -> tuple[int, int]:
    if stage == 1:
        return 0, 100
    if stage == 2:
        return 100, 200
    return 200, 400


class ProgressBar:
    """Holds the bar's geometry, fill and captions."""

    def __init__(self) -> None:
        self.current_progress = 0.0
        self.max_progress = 1.0
        self.current_stage = 1
        self.position = Vec2()
        self.size = Vec2(PROGRESS_BAR_WIDTH, PROGRESS_BAR_HEIGHT)

        self.background_color = PROGRESS_BAR_BACKGROUND
        self.fill_color = PROGRESS_BAR_FILL
        self.outline_color = PROGRESS_BAR_OUTLINE_COLOR
        self.outline_thickness = PROGRESS_BAR_OUTLINE
        self.fill_width = 0.0

        self.font: Any = None
        self.stage_text = ""
        self.stage_text_size = 16
        self.stage_text_color = WHITE
        self.stage_text_position = Vec2()
        self.progress_text = ""
        self.progress_text_size = 14
        self.progress_text_color = WHITE
        # The progress text is centred horizontally on this point.
        self.progress_text_position = Vec2()

        self._update_bar()

    def set_position(self, x: float, y: float) -> None:
        self.position = Vec2(x, y + 10.0)
        self.stage_text_position = Vec2(x, y - 14.5)
        self.progress_text_position = Vec2(x + self.size.x / 2.0,
                                           y + self.size.y + 15.0)

    def set_size(self, width: float, height: float) -> None:
        self.size = Vec2(width, height)
        self._update_bar()

    def set_progress(self, current: float, maximum: float) -> None:
        self.current_progress = current
        self.max_progress = maximum
        self._update_bar()

    def set_stage_info(self, current_stage: int, current_score: int) -> None:
        """Show the stage name and the score's progress through that stage."""
        self.current_stage = current_stage
        self.stage_text = f"Stage: {_STAGE_NAMES.get(current_stage, '')}"

        start, end = _stage_span(current_stage)
        progress = float(current_score - start)
        maximum = float(end - start)
        self.set_progress(progress, maximum)
        self.progress_text = f"{progress / maximum * 100.0:.0f}%"

    def set_font(self, font: Any) -> None:
        self.font = font

    def draw(self, target: Any) -> None:
        target.draw(self)

    def _update_bar(self) -> None:
        if self.max_progress > 0:
            width = self.current_progress / self.max_progress * self.size.x
        else:
            width = 0.0
        self.fill_width = max(0.0, min(width, self.size.x))