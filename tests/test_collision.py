import math

from fishfrenzy.collision import (
    CollisionSystem,
    check_circle_collision,
    check_rectangle_collision,
    circle_collision,
    get_distance,
    get_distance_squared,
    point_in_circle,
    rect_collision,
)
from fishfrenzy.entity import Entity, Rect, Vec2


class Dot(Entity):
    def update(self, dt):
        self.update_movement(dt)


def dot(x, y, r=5.0):
    return Dot(position=Vec2(x, y), radius=r)


def test_distance_pythagorean():
    assert get_distance(Vec2(0, 0), Vec2(3, 4)) == 5.0


def test_distance_squared_consistent():
    p, q = Vec2(1.5, -2.0), Vec2(-7.0, 3.25)
    assert math.isclose(get_distance(p, q) ** 2, get_distance_squared(p, q))
    assert get_distance(p, q) == get_distance(q, p)


def test_circle_overlap_and_touching():
    assert check_circle_collision(dot(0, 0), dot(9, 0))
    assert not check_circle_collision(dot(0, 0), dot(10, 0))


def test_point_in_circle_is_strict():
    assert point_in_circle(Vec2(1, 1), Vec2(0, 0), 2.0)
    assert not point_in_circle(Vec2(2, 0), Vec2(0, 0), 2.0)


def test_rectangle_collision():
    assert check_rectangle_collision(Rect(0, 0, 5, 5), Rect(4, 4, 5, 5))
    assert not check_rectangle_collision(Rect(0, 0, 5, 5), Rect(6, 6, 5, 5))


def test_rect_strategy_uses_bounds():
    a, b = dot(0, 0, 5), dot(8, 8, 5)
    assert rect_collision(a, b)
    assert not circle_collision(a, b)


def test_check_collisions_skips_dead_and_none():
    hits = []
    player = dot(0, 0)
    near, dead, far = dot(3, 0), dot(1, 1), dot(100, 100)
    dead.destroy()
    CollisionSystem().check_collisions(player, [near, None, dead, far],
                                       lambda a, b: hits.append((a, b)))
    assert hits == [(player, near)]


def test_check_all_pairs_with_rect_strategy():
    a, b = dot(0, 0, 5), dot(8, 8, 5)
    pairs = []
    CollisionSystem(rect_collision).check_all_pairs([a, b], lambda x, y: pairs.append((x, y)))
    assert pairs == [(a, b)]