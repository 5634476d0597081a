"""Short-lived fading particles and a bounded container for them."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Protocol, TypeVar

from .constants import WHITE, Color
from .entity import Vec2


@dataclass
class BasicParticle:
    """A small circle that drifts along its velocity and fades out."""

    radius: float = 3.0
    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    lifetime: float = 0.0
    max_lifetime: float = 1.0
    alpha: float = 255.0
    color: Color = WHITE

    def update(self, dt: float) -> None:
        self.lifetime += dt
        self.position = self.position + self.velocity * dt
        life_ratio = self.lifetime / self.max_lifetime
        self.alpha = max(0.0, 255.0 * (1.0 - life_ratio))
        self.color = self.color.with_alpha(self.alpha)

    def is_alive(self) -> bool:
        return self.lifetime < self.max_lifetime

    def draw(self, target: Any) -> None:
        target.draw(self)


@dataclass
class ParticleGenerator:
    """Makes particles flying off in a random direction at a random speed."""

    color: Color = WHITE
    min_speed: float = 50.0
    max_speed: float = 150.0
    particle_radius: float = 3.0

    def __call__(self, position: Vec2, rng: random.Random) -> BasicParticle:
        angle = rng.uniform(0.0, 360.0) * 3.14159 / 180.0
        speed = rng.uniform(self.min_speed, self.max_speed)
        return BasicParticle(
            radius=self.particle_radius,
            position=position,
            velocity=Vec2(math.cos(angle) * speed, math.sin(angle) * speed),
            color=self.color,
        )


class _Particle(Protocol):
    def update(self, dt: float) -> None: ...

    def is_alive(self) -> bool: ...

    def draw(self, target: Any) -> None: ...


P = TypeVar("P", bound=_Particle)


class ParticleSystem(Generic[P]):
    """Holds at most max_particles particles and drops them when they die."""

    def __init__(self, max_particles: int = 1000, seed: Optional[int] = None) -> None:
        self.max_particles = max_particles
        self.particles: list[P] = []
        self._rng = random.Random(seed)

    def emit(self, count: int, position: Vec2,
             generator: Callable[[Vec2, random.Random], P]) -> None:
        """Add up to count particles made by generator, within capacity."""
        available = max(0, self.max_particles - len(self.particles))
        self.particles.extend(generator(position, self._rng)
                              for _ in range(min(count, available)))

    def update(self, dt: float) -> None:
        for particle in self.particles:
            particle.update(dt)
        self.particles = [p for p in self.particles if p.is_alive()]

    def draw(self, target: Any) -> None:
        for particle in self.particles:
            particle.draw(target)

    @property
    def active_count(self) -> int:
        return len(self.particles)

    def clear(self) -> None:
        self.particles.clear()