"""Keyed storage for loaded game resources."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from enum import Enum, auto
from pathlib import Path
from typing import Any, Generic, Optional, TypeVar


class Textures(Enum):
    PLAYER = auto()
    SMALL_FISH = auto()
    MEDIUM_FISH = auto()
    LARGE_FISH = auto()
    BACKGROUND = auto()


class Fonts(Enum):
    MAIN = auto()
    SCORE = auto()


class ResourceError(RuntimeError):
    """A resource could not be loaded, stored or found."""


R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def _read_bytes(filename: str) -> bytes:
    return Path(filename).read_bytes()


class ResourceHolder(Generic[K, R]):
    """Loads resources through a loader function and holds them by identifier."""

    def __init__(self, loader: Optional[Callable[..., R]] = None) -> None:
        self._loader = loader or _read_bytes
        self._resources: dict[K, R] = {}

    def load(self, identifier: K, filename: str, *args: Any) -> R:
        """Load a resource from filename and store it under identifier."""
        try:
            resource = self._loader(filename, *args)
        except OSError as exc:
            raise ResourceError(f"failed to load {filename!r}: {exc}") from exc
        if resource is None:
            raise ResourceError(f"failed to load {filename!r}")
        if identifier in self._resources:
            raise ResourceError(f"resource {identifier!r} is already loaded")
        self._resources[identifier] = resource
        return resource

    def get(self, identifier: K) -> R:
        try:
            return self._resources[identifier]
        except KeyError:
            raise ResourceError(f"resource {identifier!r} not found") from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._resources

    def __len__(self) -> int:
        return len(self._resources)