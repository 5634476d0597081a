"""Game logic for an arcade fish-eating game: entities, collisions, spawning, frenzy, scoring and schooling."""

__version__ = "0.1.0"