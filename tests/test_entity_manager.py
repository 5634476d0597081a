from fishfrenzy.entity import Entity, Vec2
from fishfrenzy.entity_manager import EntityManager


class Mover(Entity):
    def update(self, dt):
        self.update_movement(dt)


class Mortal(Mover):
    def update(self, dt):
        super().update(dt)
        self.destroy()


class Canvas:
    def __init__(self):
        self.drawn = []

    def draw(self, item):
        self.drawn.append(item)


def test_add_ignores_none():
    manager = EntityManager()
    manager.add(None)
    manager.add(Mover())
    assert len(manager) == 1


def test_create_returns_added_entity():
    manager = EntityManager()
    mover = manager.create(Mover, radius=4.0)
    assert list(manager) == [mover]
    assert mover.radius == 4.0


def test_update_moves_and_calls_hook():
    manager = EntityManager()
    mover = manager.create(Mover, velocity=Vec2(2.0, 0.0))
    seen = []
    manager.update(0.5, lambda entity, dt: seen.append((entity, dt)))
    assert mover.position == Vec2(2.0, 0.0) * 0.5
    assert seen == [(mover, 0.5)]


def test_update_removes_dead():
    manager = EntityManager()
    keeper = manager.create(Mover)
    manager.create(Mortal)
    manager.update(0.1)
    assert list(manager) == [keeper]


def test_render_skips_dead():
    manager = EntityManager()
    alive, dead = manager.create(Mover), manager.create(Mover)
    dead.destroy()
    canvas = Canvas()
    manager.render(canvas)
    assert canvas.drawn == [alive]


def test_remove_if_predicate():
    manager = EntityManager()
    small = manager.create(Mover, radius=1.0)
    manager.create(Mover, radius=50.0)
    manager.remove_if(lambda e: e.radius > 10)
    assert list(manager) == [small]


def test_entities_of_type():
    manager = EntityManager()
    mover = manager.create(Mover)
    mortal = manager.create(Mortal)
    assert manager.entities_of_type(Mortal) == [mortal]
    assert manager.entities_of_type(Mover) == [mover, mortal]


def test_clear_empties():
    manager = EntityManager()
    manager.create(Mover)
    manager.clear()
    assert len(manager) == 0