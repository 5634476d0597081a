# fishfrenzy

The game logic of an arcade "eat or be eaten" fish game, with no rendering.
Every part is a plain Python object that you advance by calling `update(dt)`
with a time step in seconds. The package needs nothing outside the standard
library.

## Modules

- `fishfrenzy.constants`: window size, player tuning, point values, stage
  thresholds (`POINTS_FOR_STAGE_2`, `POINTS_FOR_STAGE_3`, `POINTS_TO_WIN`),
  timings and the `Color` palette. `Color.with_alpha` returns a copy with a
  new alpha clamped to 0..255.
- `fishfrenzy.entity`: `Vec2`, `Rect` (with `intersects`), `EntityType`,
  `FishSize` and the abstract `Entity` base class, which has a position,
  velocity, radius, an `alive` flag and a set of tags.
- `fishfrenzy.collision`: `check_circle_collision`, `point_in_circle`,
  `check_rectangle_collision`, `get_distance`, `get_distance_squared`, the
  strategies `circle_collision` and `rect_collision`, and `CollisionSystem`
  with `check_collisions` (one entity against many) and `check_all_pairs`.
- `fishfrenzy.resources`: `ResourceHolder`, a keyed store filled through a
  loader function (by default it reads the file's bytes). Loading the same
  identifier twice, a failed load, or a missing identifier raises
  `ResourceError`. `Textures` and `Fonts` are ready-made identifier enums.
- `fishfrenzy.random_generator`: `RandomGenerator`, which draws uniform
  integers when both bounds are integers and floats otherwise.
- `fishfrenzy.entity_manager`: `EntityManager`, which updates live entities,
  drops dead ones, and filters them with `entities_of_type`.
- `fishfrenzy.spawner`: `SpawnerConfig` and `GenericSpawner`, which call a
  factory at a fixed rate per second and place each result at a random point
  inside the configured box.
- `fishfrenzy.particles`: `BasicParticle`, `ParticleGenerator` and a
  capacity-bounded `ParticleSystem`.
- `fishfrenzy.frenzy`: `FrenzySystem` and `FrenzyLevel`. Four fish eaten
  within two seconds start a frenzy (x2), and four more within 2.5 seconds
  raise it to a super frenzy (x4). The frenzy ends 2.5 seconds after the last
  eat. `force_frenzy` starts one at once.
- `fishfrenzy.score`: `ScoreSystem`, `FloatingScore`, `ScoreEvent`,
  `ScoreEventType` and `calculate_total_score`. It covers multipliers, a chain
  bonus capped at 10, tail bites and the time, growth and untouchable
  end-of-level bonuses.
- `fishfrenzy.effects`: `FlashingText`, `ScorePopup` and `EffectManager`.
- `fishfrenzy.growth_meter`: `GrowthMeter`, which tracks progress within the
  current stage.
- `fishfrenzy.progress_bar`: `ProgressBar`, which holds the stage caption, the
  percentage text and the fill width.
- `fishfrenzy.schooling`: `SchoolConfig`, `SchoolMember` (separation,
  alignment and cohesion steering), `School` and `SchoolingSystem`.

## Example

```python
from fishfrenzy.entity import Vec2
from fishfrenzy.frenzy import FrenzyLevel, FrenzySystem
from fishfrenzy.score import ScoreEventType, ScoreSystem

frenzy = FrenzySystem()
score = ScoreSystem()

for _ in range(4):
    frenzy.register_fish_eaten()
    score.register_hit()
    score.add_score(ScoreEventType.FISH_EATEN, 2, Vec2(100, 100),
                    frenzy.multiplier, 1.0)
    frenzy.update(0.1)

assert frenzy.current_level is FrenzyLevel.FRENZY
print(score.current_score)
```

## What it does not do

This package is the game's logic only. It opens no window, draws nothing on
its own, reads no keyboard or mouse input, and has no game loop, menus, player
character or command to start a game. The `draw` and `render` methods only
hand objects to a `target.draw(...)` that you supply, and fonts are stored
without being used.

## Running the tests

```
pip install -e ".[test]"
pytest
```