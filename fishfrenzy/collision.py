"""Collision tests between circular entities and rectangles."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from .entity import Entity, Rect, Vec2

Strategy = Callable[[Entity, Entity], bool]
CollisionCallback = Callable[[Entity, Entity], None]


def get_distance_squared(point1: Vec2, point2: Vec2) -> float:
    dx = point1.x - point2.x
    dy = point1.y - point2.y
    return dx * dx + dy * dy


def get_distance(point1: Vec2, point2: Vec2) -> float:
    return math.sqrt(get_distance_squared(point1, point2))


def check_circle_collision(a: Entity, b: Entity) -> bool:
    """True when the circles of two entities strictly overlap."""
    radius_sum = a.radius + b.radius
    return get_distance_squared(a.position, b.position) < radius_sum * radius_sum


def point_in_circle(point: Vec2, center: Vec2, radius: float) -> bool:
    return get_distance_squared(point, center) < radius * radius


def check_rectangle_collision(rect1: Rect, rect2: Rect) -> bool:
    return rect1.intersects(rect2)


def circle_collision(a: Entity, b: Entity) -> bool:
    """Strategy comparing entities as circles."""
    return check_circle_collision(a, b)


def rect_collision(a: Entity, b: Entity) -> bool:
    """Strategy comparing entities by their bounding boxes."""
    return a.bounds().intersects(b.bounds())


def _live(entity: Optional[Entity]) -> bool:
    return entity is not None and entity.alive


class CollisionSystem:
    """Runs a collision strategy over collections of entities."""

    def __init__(self, strategy: Strategy = circle_collision) -> None:
        self.strategy = strategy

    def check_collisions(self, entity: Entity, container: Iterable[Optional[Entity]],
                         callback: CollisionCallback) -> None:
        """Call back for every live entity in the container that touches entity."""
        for other in container:
            if _live(other) and self.strategy(entity, other):
                callback(entity, other)

    def check_all_pairs(self, container: Sequence[Optional[Entity]],
                        callback: CollisionCallback) -> None:
        """Call back for every colliding pair of live entities, each pair once."""
        items = list(container)
        for index, first in enumerate(items):
            if not _live(first):
                continue
            for second in items[index + 1:]:
                if _live(second) and self.strategy(first, second):
                    callback(first, second)