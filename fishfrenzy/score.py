"""Score keeping, chains, end-of-level bonuses and floating score labels."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from .constants import BLACK, MAGENTA, WHITE, YELLOW, Color
from .entity import Vec2

MAX_CHAIN = 10
MAX_RECENT_EVENTS = 50
MAX_EVENT_AGE = 30.0

TAIL_BITE_BONUS = 75
TIME_BONUS_MAX = 500
GROWTH_BONUS = 1000
UNTOUCHABLE_BONUS = 2000

FLOATING_SCORE_LIFETIME = 1.5
FLOAT_SPEED = -100.0


class ScoreEventType(Enum):
    FISH_EATEN = auto()
    BONUS_COLLECTED = auto()
    TAIL_BITE = auto()
    POWER_UP_COLLECTED = auto()
    LEVEL_COMPLETE = auto()


@dataclass(frozen=True)
class ScoreEvent:
    """A record of points awarded at some moment."""

    type: ScoreEventType
    base_points: int
    total_points: int
    position: Vec2
    timestamp: float


def calculate_total_score(base_score: int, *args: float) -> int:
    """Multiply the base score by every multiplier, truncating to an integer."""
    return int(base_score * math.prod(args))


class FloatingScore:
    """A label such as "+20 x2" that drifts upward, grows and fades out."""

    def __init__(self, font: Any, points: int, multiplier: int, position: Vec2) -> None:
        self.font = font
        self.position = position
        self.velocity = Vec2(0.0, FLOAT_SPEED)
        self.lifetime = 0.0
        self.alpha = 255.0
        self.scale = 1.0

        self.text = f"+{points}" + (f" x{multiplier}" if multiplier > 1 else "")

        if points >= 500:
            self.character_size, self.fill_color, self.outline_thickness = 32, MAGENTA, 2.0
        elif points >= 100:
            self.character_size, self.fill_color, self.outline_thickness = 28, YELLOW, 1.5
        else:
            self.character_size, self.fill_color, self.outline_thickness = 24, WHITE, 1.0
        self.outline_color: Color = BLACK

    @property
    def is_expired(self) -> bool:
        return self.lifetime >= FLOATING_SCORE_LIFETIME

    def update(self, dt: float) -> None:
        self.lifetime += dt
        self.position = self.position + self.velocity * dt

        progress = self.lifetime / FLOATING_SCORE_LIFETIME
        self.alpha = max(0.0, 255.0 * (1.0 - progress))
        self.fill_color = self.fill_color.with_alpha(self.alpha)
        self.outline_color = self.outline_color.with_alpha(self.alpha)
        self.scale = 1.0 + progress * 0.5

    def draw(self, target: Any) -> None:
        target.draw(self)


class ScoreSystem:
    """Accumulates points with frenzy, power-up and chain bonuses."""

    def __init__(self, font: Any = None) -> None:
        self.font = font
        self.current_score = 0
        self.total_score = 0
        self.current_chain = 0
        self.floating_scores: list[FloatingScore] = []
        self.recent_events: deque[ScoreEvent] = deque(maxlen=MAX_RECENT_EVENTS)
        self.time_since_start = 0.0

    @property
    def chain_bonus(self) -> int:
        return self.current_chain

    def calculate_score(self, event_type: ScoreEventType, base_points: int,
                        frenzy_multiplier: int, power_up_multiplier: float) -> int:
        total = calculate_total_score(base_points, frenzy_multiplier, power_up_multiplier)
        if event_type is ScoreEventType.FISH_EATEN and self.current_chain > 0:
            total += self.current_chain
        return total

    def add_score(self, event_type: ScoreEventType, base_points: int, position: Vec2,
                  frenzy_multiplier: int, power_up_multiplier: float) -> int:
        """Award points, show a floating label and record the event; return the points."""
        total = self.calculate_score(event_type, base_points,
                                     frenzy_multiplier, power_up_multiplier)
        self.current_score += total

        display_multiplier = int(frenzy_multiplier * power_up_multiplier)
        self.floating_scores.append(
            FloatingScore(self.font, total, display_multiplier, position))

        self.recent_events.append(
            ScoreEvent(event_type, base_points, total, position, self.time_since_start))
        return total

    def register_hit(self) -> None:
        self.current_chain = min(self.current_chain + 1, MAX_CHAIN)

    def register_miss(self) -> None:
        self.current_chain = 0

    def update_chain(self, dt: float) -> None:
        """The chain does not decay with time; only a miss breaks it."""

    def register_tail_bite(self, position: Vec2, frenzy_multiplier: int,
                           power_up_multiplier: float) -> int:
        return self.add_score(ScoreEventType.TAIL_BITE, TAIL_BITE_BONUS, position,
                              frenzy_multiplier, power_up_multiplier)

    def calculate_time_bonus(self, completion_time: float, target_time: float) -> int:
        if completion_time <= target_time:
            ratio = 1.0 - completion_time / target_time
            return int(TIME_BONUS_MAX * ratio)
        return 0

    def calculate_growth_bonus(self, reached_max_size: bool) -> int:
        return GROWTH_BONUS if reached_max_size else 0

    def calculate_untouchable_bonus(self, took_no_damage: bool) -> int:
        return UNTOUCHABLE_BONUS if took_no_damage else 0

    def update(self, dt: float) -> None:
        self.time_since_start += dt
        for score in self.floating_scores:
            score.update(dt)
        self.floating_scores = [s for s in self.floating_scores if not s.is_expired]

        kept = [e for e in self.recent_events
                if self.time_since_start - e.timestamp <= MAX_EVENT_AGE]
        self.recent_events = deque(kept, maxlen=MAX_RECENT_EVENTS)

    def draw_floating_scores(self, target: Any) -> None:
        for score in self.floating_scores:
            target.draw(score)

    def add_to_total_score(self, score: int) -> None:
        self.total_score += score

    def reset(self) -> None:
        """Clear the level's score, chain and history; the total is kept."""
        self.current_score = 0
        self.current_chain = 0
        self.floating_scores.clear()
        self.recent_events.clear()
        self.time_since_start = 0.0

    def average_score_per_second(self) -> float:
        if self.time_since_start <= 0.0:
            return 0.0
        recent_score = sum(e.total_points for e in self.recent_events)
        if self.recent_events:
            span = self.time_since_start - self.recent_events[0].timestamp
            if span > 0.0:
                return recent_score / span
        return self.current_score / self.time_since_start