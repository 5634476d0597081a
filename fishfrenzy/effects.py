"""Timed visual effects: flashing text, score pop-ups and their manager."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Optional, TypeVar

from .constants import BLACK, SCORE_FLASH_DURATION, WHITE, YELLOW, Color
from .entity import Vec2


@dataclass
class Text:
    """A piece of styled text placed on screen."""

    string: str = ""
    character_size: int = 30
    fill_color: Color = WHITE
    outline_color: Color = BLACK
    outline_thickness: float = 0.0
    position: Vec2 = field(default_factory=Vec2)
    font: Any = None


class VisualEffect(ABC):
    """An effect that lives for a fixed duration."""

    def __init__(self, duration: float) -> None:
        self.time_remaining = duration
        self.total_duration = duration

    @property
    def is_active(self) -> bool:
        return self.time_remaining > 0.0

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the effect by dt seconds."""

    @abstractmethod
    def draw(self, target: Any) -> None:
        """Draw the effect onto target."""


class FlashingText(VisualEffect):
    """Text whose transparency pulses along a sine wave."""

    def __init__(self, text: Text, duration: float, flash_speed: float = 5.0) -> None:
        super().__init__(duration)
        self.text = replace(text)
        self.flash_speed = flash_speed
        self.current_alpha = 255.0

    def update(self, dt: float) -> None:
        self.time_remaining -= dt
        ratio = 1.0 - self.time_remaining / self.total_duration
        self.current_alpha = 128.0 + 127.0 * math.sin(
            ratio * self.flash_speed * 2.0 * 3.14159)
        self.text.fill_color = self.text.fill_color.with_alpha(self.current_alpha)
        self.text.outline_color = self.text.outline_color.with_alpha(self.current_alpha)

    def draw(self, target: Any) -> None:
        target.draw(self.text)


class ScorePopup(VisualEffect):
    """A "+N" label that rises and fades over a short time."""

    def __init__(self, position: Vec2, points: int, font: Any = None) -> None:
        super().__init__(SCORE_FLASH_DURATION)
        self.text = Text(string=f"+{points}", character_size=32, fill_color=YELLOW,
                         outline_color=BLACK, outline_thickness=2.0,
                         position=position, font=font)
        self.velocity = Vec2(0.0, -50.0)
        self.fade_speed = 2.0

    def update(self, dt: float) -> None:
        self.time_remaining -= dt
        self.text.position = self.text.position + self.velocity * dt
        alpha = 255.0 * (self.time_remaining / self.total_duration)
        self.text.fill_color = self.text.fill_color.with_alpha(alpha)
        self.text.outline_color = self.text.outline_color.with_alpha(alpha)

    def draw(self, target: Any) -> None:
        target.draw(self.text)


E = TypeVar("E", bound=VisualEffect)


class EffectManager:
    """Holds running effects and drops them once they finish."""

    def __init__(self) -> None:
        self.effects: list[VisualEffect] = []

    def create_effect(self, effect_type: type[E], *args: Any, **kwargs: Any) -> E:
        effect = effect_type(*args, **kwargs)
        self.effects.append(effect)
        return effect

    def update(self, dt: float) -> None:
        for effect in self.effects:
            effect.update(dt)
        self.effects = [e for e in self.effects if e.is_active]

    def draw(self, target: Any) -> None:
        for effect in self.effects:
            effect.draw(target)

    def clear(self) -> None:
        self.effects.clear()

    def __len__(self) -> int:
        return len(self.effects)