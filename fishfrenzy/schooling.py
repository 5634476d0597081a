"""Schools of fish that steer together by separation, alignment and cohesion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from .collision import get_distance
from .constants import (
    LARGE_FISH_RADIUS,
    LARGE_FISH_SPEED,
    MEDIUM_FISH_RADIUS,
    MEDIUM_FISH_SPEED,
    SMALL_FISH_RADIUS,
    SMALL_FISH_SPEED,
)
from .entity import Entity, EntityType, FishSize, Vec2

_SPEEDS = {
    FishSize.SMALL: SMALL_FISH_SPEED,
    FishSize.MEDIUM: MEDIUM_FISH_SPEED,
    FishSize.LARGE: LARGE_FISH_SPEED,
}
_RADII = {
    FishSize.SMALL: SMALL_FISH_RADIUS,
    FishSize.MEDIUM: MEDIUM_FISH_RADIUS,
    FishSize.LARGE: LARGE_FISH_RADIUS,
}
_ENTITY_TYPES = {
    FishSize.SMALL: EntityType.SMALL_FISH,
    FishSize.MEDIUM: EntityType.MEDIUM_FISH,
    FishSize.LARGE: EntityType.LARGE_FISH,
}

SEPARATION_WEIGHT = 1.5
ALIGNMENT_WEIGHT = 0.5
COHESION_WEIGHT = 0.3


@dataclass
class SchoolConfig:
    """Limits and weights of one school."""

    min_members: int = 3
    max_members: int = 8
    formation_radius: float = 150.0
    separation_weight: float = 1.5
    alignment_weight: float = 1.0
    cohesion_weight: float = 0.8
    fish_size: FishSize = FishSize.SMALL


@dataclass(eq=False)
class SchoolMember(Entity):
    """A fish that steers itself relative to its schoolmates."""

    size: FishSize = FishSize.SMALL
    speed: Optional[float] = None
    current_level: int = 1
    school_id: int = -1
    neighbor_distance: float = 80.0
    separation_distance: float = 30.0
    window_bounds: Optional[tuple[int, int]] = None

    def __post_init__(self) -> None:
        if self.speed is None:
            self.speed = _SPEEDS[self.size]
        if self.radius == 0.0:
            self.radius = _RADII[self.size]

    @property
    def entity_type(self) -> EntityType:  # type: ignore[override]
        return _ENTITY_TYPES[self.size]

    def update(self, dt: float) -> None:
        self.update_movement(dt)

    def update_schooling(self, schoolmates: Sequence[SchoolMember], dt: float) -> None:
        """Adjust velocity from the live schoolmates, capped at the fish's speed."""
        if not schoolmates:
            return

        separation = Vec2()
        alignment = Vec2()
        cohesion = Vec2()
        separation_count = 0
        neighbor_count = 0

        for mate in schoolmates:
            if mate is self or not mate.alive:
                continue
            distance = get_distance(self.position, mate.position)
            if 0 < distance < self.separation_distance:
                separation = separation + (self.position - mate.position) / distance
                separation_count += 1
            if distance < self.neighbor_distance:
                alignment = alignment + mate.velocity
                cohesion = cohesion + mate.position
                neighbor_count += 1

        speed = float(self.speed)
        steer = Vec2()
        if separation_count:
            steer = steer + (separation / separation_count) * SEPARATION_WEIGHT
        if neighbor_count:
            desired = (alignment / neighbor_count).normalized() * speed
            steer = steer + (desired - self.velocity) * ALIGNMENT_WEIGHT
            seek = ((cohesion / neighbor_count) - self.position).normalized() * speed
            steer = steer + (seek - self.velocity) * COHESION_WEIGHT

        self.velocity = self.velocity + steer * dt
        current = self.velocity.length()
        if current > speed:
            self.velocity = (self.velocity / current) * speed


def _member_from(kind: FishSize, source: Entity) -> SchoolMember:
    return SchoolMember(
        size=kind,
        current_level=getattr(source, "current_level", 1),
        position=source.position,
        velocity=source.velocity,
        window_bounds=getattr(source, "window_bounds", None),
    )


class School:
    """A bounded group of members of one kind of fish."""

    def __init__(self, school_id: int, config: Optional[SchoolConfig] = None,
                 kind: Optional[FishSize] = None) -> None:
        self.school_id = school_id
        self.config = config if config is not None else SchoolConfig()
        self.kind = kind if kind is not None else self.config.fish_size
        self.members: list[SchoolMember] = []
        self._leader_index = 0

    def add_member(self, member: SchoolMember) -> bool:
        """Join member to the school unless it is full."""
        if len(self.members) >= self.config.max_members:
            return False
        member.school_id = self.school_id
        self.members.append(member)
        return True

    def update(self, dt: float) -> None:
        """Drop dead members and steer the rest, once the school is big enough."""
        if len(self.members) < self.config.min_members:
            return
        self.members = [m for m in self.members if m.alive]
        if self._leader_index >= len(self.members):
            self._leader_index = 0
        mates = list(self.members)
        for member in self.members:
            member.update_schooling(mates, dt)

    def extract_members(self) -> list[SchoolMember]:
        """Hand over every member and leave the school empty."""
        extracted, self.members = self.members, []
        return extracted

    def is_full(self) -> bool:
        return len(self.members) >= self.config.max_members

    def can_disband(self) -> bool:
        return len(self.members) < self.config.min_members

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)


class SchoolingSystem:
    """Keeps schools of several kinds of fish and updates them together."""

    def __init__(self) -> None:
        self.schools: dict[int, School] = {}
        self._next_school_id = 1
        self.create_school(FishSize.SMALL,
                           SchoolConfig(fish_size=FishSize.SMALL, max_members=8))
        self.create_school(FishSize.MEDIUM,
                           SchoolConfig(fish_size=FishSize.MEDIUM, max_members=5))

    @property
    def school_count(self) -> int:
        return len(self.schools)

    def create_school(self, kind: FishSize, config: Optional[SchoolConfig] = None) -> int:
        """Start an empty school for kind and return its id."""
        school_id = self._next_school_id
        self._next_school_id += 1
        self.schools[school_id] = School(school_id, config, kind=kind)
        return school_id

    def try_add_to_school(self, kind: FishSize, member: Entity) -> bool:
        """Put a fish into the first school of its kind that has room."""
        for school in self.schools.values():
            if school.kind is kind and not school.is_full():
                if not isinstance(member, SchoolMember):
                    member = _member_from(kind, member)
                school.add_member(member)
                return True
        return False

    def update(self, dt: float) -> None:
        """Update every school, then remove those too small to stay together."""
        for school in self.schools.values():
            school.update(dt)
        self.schools = {sid: s for sid, s in self.schools.items() if not s.can_disband()}

    def extract_all_fish(self) -> list[SchoolMember]:
        """Take every fish out of every school and drop all schools."""
        fish: list[SchoolMember] = []
        for school in self.schools.values():
            fish.extend(school.extract_members())
        self.schools.clear()
        return fish

    def total_fish_count(self) -> int:
        return sum(len(school) for school in self.schools.values())

    def schools_of_kind(self, kind: FishSize) -> Iterable[School]:
        return [s for s in self.schools.values() if s.kind is kind]