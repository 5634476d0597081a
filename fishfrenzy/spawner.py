"""Timed spawning of entities at random positions inside a box."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from .constants import WINDOW_HEIGHT, WINDOW_WIDTH
from .entity import Entity, Vec2

T = TypeVar("T", bound=Entity)


@dataclass
class SpawnerConfig(Generic[T]):
    """How often to spawn, where, and how to adjust each new entity."""

    spawn_rate: float = 1.0
    min_bounds: Vec2 = field(default_factory=Vec2)
    max_bounds: Vec2 = field(
        default_factory=lambda: Vec2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT)))
    customizer: Optional[Callable[[T], None]] = None


class GenericSpawner(Generic[T]):
    """Spawns entities from a factory at a fixed rate per second."""

    def __init__(self, config: Optional[SpawnerConfig[T]] = None,
                 seed: Optional[int] = None) -> None:
        self.config: SpawnerConfig[T] = config if config is not None else SpawnerConfig()
        self.enabled = True
        self._factory: Optional[Callable[[], Optional[T]]] = None
        self._timer = 0.0
        self._buffer: list[T] = []
        self._rng = random.Random(seed)

    def set_factory(self, factory: Optional[Callable[[], Optional[T]]]) -> None:
        self._factory = factory

    def set_config(self, config: SpawnerConfig[T]) -> None:
        self.config = config

    def set_spawn_rate(self, rate: float) -> None:
        self.config.spawn_rate = rate

    def update(self, dt: float) -> None:
        """Advance the timer and spawn one entity per elapsed interval."""
        if not self.enabled or self.config.spawn_rate <= 0.0:
            return
        self._timer += dt
        interval = 1.0 / self.config.spawn_rate
        while self._timer >= interval:
            self._timer -= interval
            spawned = self._spawn()
            if spawned is not None:
                self._buffer.append(spawned)

    def collect_spawned(self) -> list[T]:
        """Return everything spawned since the last call and empty the buffer."""
        result, self._buffer = self._buffer, []
        return result

    def _spawn(self) -> Optional[T]:
        if self._factory is None:
            return None
        entity = self._factory()
        if entity is not None:
            low, high = self.config.min_bounds, self.config.max_bounds
            entity.position = Vec2(self._rng.uniform(low.x, high.x),
                                   self._rng.uniform(low.y, high.y))
            if self.config.customizer is not None:
                self.config.customizer(entity)
        return entity