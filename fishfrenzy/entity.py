"""Geometry primitives and the base class for game entities."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        return self / length if length > 0 else self


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    left: float
    top: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        left = max(min(self.left, self.left + self.width),
                   min(other.left, other.left + other.width))
        right = min(max(self.left, self.left + self.width),
                    max(other.left, other.left + other.width))
        top = max(min(self.top, self.top + self.height),
                  min(other.top, other.top + other.height))
        bottom = min(max(self.top, self.top + self.height),
                     max(other.top, other.top + other.height))
        return left < right and top < bottom


class EntityType(Enum):
    NONE = auto()
    PLAYER = auto()
    SMALL_FISH = auto()
    MEDIUM_FISH = auto()
    LARGE_FISH = auto()
    POWER_UP = auto()
    HAZARD = auto()


class FishSize(Enum):
    SMALL = auto()
    MEDIUM = auto()
    LARGE = auto()


@dataclass(eq=False)
class Entity(ABC):
    """A circular game object with a position, velocity and tags."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    radius: float = 0.0
    alive: bool = True
    tags: set[str] = field(default_factory=set)

    entity_type = EntityType.NONE

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the entity by dt seconds."""

    def update_movement(self, dt: float) -> None:
        """Move the entity along its velocity for dt seconds."""
        self.position = self.position + self.velocity * dt

    def bounds(self) -> Rect:
        """The bounding box of the entity's circle."""
        return Rect(self.position.x - self.radius, self.position.y - self.radius,
                    self.radius * 2, self.radius * 2)

    def destroy(self) -> None:
        self.alive = False

    def add_tag(self, tag: str) -> None:
        self.tags.add(tag)

    def remove_tag(self, tag: str) -> None:
        self.tags.discard(tag)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags