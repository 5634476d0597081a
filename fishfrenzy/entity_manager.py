"""A container that updates, draws and prunes entities."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional, TypeVar

from .entity import Entity

T = TypeVar("T", bound=Entity)
UpdateFunc = Callable[[Entity, float], None]


class EntityManager:
    """Owns a list of entities and removes them once they die."""

    def __init__(self) -> None:
        self.entities: list[Entity] = []

    def add(self, entity: Optional[Entity]) -> None:
        if entity is not None:
            self.entities.append(entity)

    def create(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Build an entity with factory, add it and return it."""
        entity = factory(*args, **kwargs)
        self.add(entity)
        return entity

    def update(self, dt: float, update_func: Optional[UpdateFunc] = None) -> None:
        """Update every live entity, then drop the dead ones."""
        for entity in self.entities:
            if entity.alive:
                entity.update(dt)
                if update_func is not None:
                    update_func(entity, dt)
        self.remove_if(lambda entity: not entity.alive)

    def render(self, target: Any) -> None:
        """Draw every live entity with target.draw."""
        for entity in self.entities:
            if entity.alive:
                target.draw(entity)

    def remove_if(self, predicate: Callable[[Entity], bool]) -> None:
        self.entities = [e for e in self.entities if e is not None and not predicate(e)]

    def entities_of_type(self, cls: type[T]) -> list[T]:
        return [e for e in self.entities if isinstance(e, cls)]

    def clear(self) -> None:
        self.entities.clear()

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)