"""Frenzy multiplier triggered by eating fish in quick succession."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .constants import MAGENTA, WHITE, YELLOW, Color
from .entity import Vec2

FRENZY_ACTIVATION_TIME = 2.0
SUPER_FRENZY_ACTIVATION_TIME = 2.5
FRENZY_MAINTAIN_TIME = 2.5
REQUIRED_FISH_COUNT = 4

TIMER_BAR_WIDTH = 200.0
TIMER_BAR_HEIGHT = 10.0


class FrenzyLevel(Enum):
    NONE = 1
    FRENZY = 2
    SUPER_FRENZY = 4


@dataclass
class _EatEvent:
    timestamp: float = 0.0


def _brighten(color: Color, amount: float) -> Color:
    def channel(value: int) -> int:
        return int(value + (255 - value) * amount) % 256

    return Color(channel(color.r), channel(color.g), channel(color.b), color.a)


class FrenzySystem:
    """Tracks recent eats and raises or drops the score multiplier."""

    def __init__(self, font: Any = None) -> None:
        self.font = font
        self._history: list[_EatEvent] = []
        self.current_level = FrenzyLevel.NONE
        self.frenzy_timer = 0.0

        self.frenzy_text = ""
        self.multiplier_text = ""
        self.timer_text = ""
        self.timer_bar_width = TIMER_BAR_WIDTH
        self.fill_color = YELLOW
        self.current_color = WHITE
        self.text_scale = 1.0
        self.text_rotation = 0.0

        self.position = Vec2()
        self.element_positions: dict[str, Vec2] = {}
        self.set_position(0.0, 0.0)

        self.on_frenzy_start: Optional[Callable[[FrenzyLevel], None]] = None
        self.on_frenzy_end: Optional[Callable[[], None]] = None

    @property
    def multiplier(self) -> int:
        return self.current_level.value

    @property
    def is_active(self) -> bool:
        return self.current_level is not FrenzyLevel.NONE

    @property
    def remaining_time(self) -> float:
        return self.frenzy_timer

    def register_fish_eaten(self) -> None:
        self._history.append(_EatEvent())
        if self.is_active:
            self.frenzy_timer = FRENZY_MAINTAIN_TIME
        self._update_frenzy_state()

    def update(self, dt: float) -> None:
        for event in self._history:
            event.timestamp += dt

        window = SUPER_FRENZY_ACTIVATION_TIME if self.is_active else FRENZY_ACTIVATION_TIME
        self._history = [e for e in self._history if e.timestamp <= window]

        if self.is_active:
            self.frenzy_timer -= dt
            if self.frenzy_timer <= 0.0:
                self._set_level(FrenzyLevel.NONE)

        self._update_visuals(dt)

    def reset(self) -> None:
        self._history.clear()
        self.frenzy_timer = 0.0
        self._set_level(FrenzyLevel.NONE)
        self.text_scale = 1.0
        self.text_rotation = 0.0

    def force_frenzy(self) -> None:
        """Start a frenzy at once and forget earlier eats."""
        self._set_level(FrenzyLevel.FRENZY)
        self.frenzy_timer = FRENZY_MAINTAIN_TIME
        self._history.clear()

    def set_position(self, x: float, y: float) -> None:
        self.position = Vec2(x, y)
        self.element_positions = {
            "frenzy_text": self.position,
            "multiplier_text": Vec2(x, y + 40.0),
            "timer_text": Vec2(x, y + 65.0),
            "timer_background": Vec2(x, y + 90.0),
            "timer_bar": Vec2(x, y + 90.0),
        }

    def _update_frenzy_state(self) -> None:
        recent = len(self._history)
        if recent < REQUIRED_FISH_COUNT:
            return
        if self.current_level is FrenzyLevel.NONE:
            if self._history[-1].timestamp <= FRENZY_ACTIVATION_TIME:
                self._set_level(FrenzyLevel.FRENZY)
                self.frenzy_timer = FRENZY_MAINTAIN_TIME
        elif self.current_level is FrenzyLevel.FRENZY:
            start = next((i for i, e in enumerate(self._history)
                          if e.timestamp <= SUPER_FRENZY_ACTIVATION_TIME), recent)
            if recent - start >= REQUIRED_FISH_COUNT:
                self._set_level(FrenzyLevel.SUPER_FRENZY)
                self.frenzy_timer = FRENZY_MAINTAIN_TIME

    def _set_level(self, level: FrenzyLevel) -> None:
        if self.current_level is level:
            return
        old_level = self.current_level
        self.current_level = level

        if level is FrenzyLevel.NONE:
            if self.on_frenzy_end is not None:
                self.on_frenzy_end()
        elif level is FrenzyLevel.FRENZY:
            self.frenzy_text = "FRENZY!"
            self.multiplier_text = "2X Score Multiplier"
            self.current_color = YELLOW
            self.text_scale = 1.5
            if self.on_frenzy_start is not None:
                self.on_frenzy_start(level)
        else:
            self.frenzy_text = "SUPER FRENZY!"
            self.multiplier_text = "4X Score Multiplier"
            self.current_color = MAGENTA
            self.text_scale = 2.0
            if old_level is not FrenzyLevel.NONE and self.on_frenzy_start is not None:
                self.on_frenzy_start(level)

    def _update_visuals(self, dt: float) -> None:
        if not self.is_active:
            return
        self.text_scale = 1.0 + 0.1 * math.sin(dt * 5.0)
        self.text_rotation = 5.0 * math.sin(dt * 3.0)

        self.timer_bar_width = TIMER_BAR_WIDTH * (self.frenzy_timer / FRENZY_MAINTAIN_TIME)
        self.timer_text = f"Time: {self.frenzy_timer:.1f}s"

        flash = abs(math.sin(dt * 10.0))
        self.fill_color = _brighten(self.current_color, flash * 0.3)