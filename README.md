# ghostchase

Game-AI building blocks for a ghost-chase game played on a tiled grid: a
player body moved by keys, and ghosts that follow paths, chase the player,
flee when hurt and get stuck in jail tiles. Everything is plain Python with
no dependencies.

## Modules

- `ghostchase.vector`: mutable `Vec3` and `Vec4` dataclasses with arithmetic
  operators, and the functions `dot`, `cross`, `mag`, `normalize`, `reflect`,
  `distance`, `lerp` and `rotate`. Dividing by, or normalizing, something of
  magnitude below `VERY_SMALL` raises `ZeroDivisionError`.
- `ghostchase.matrix`: column-major `Matrix4` and `Matrix3` (multiplication,
  indexing, `identity`, `filled`, `column`, `row`, `Matrix3.from_matrix4`) and
  the transforms `translate`, `scale`, `rotate`, `perspective`,
  `orthographic`, `viewport_ndc`, `un_ortho`, `look_at`, `transpose` and
  `inverse` (which raises `ZeroDivisionError` for a singular matrix).
  Multiplying a `Matrix4` by a `Vec3` treats it as a point (w = 1).
- `ghostchase.body`: `Body` with its equations of motion (`update`,
  `apply_force`) and speed/rotation clipping; `KinematicBody`, steered by a
  `SteeringOutput` (linear and angular acceleration); `StaticBody`, steered by
  a `KinematicSteeringOutput` (velocity and rotation).
- `ghostchase.steering`: dynamic `Seek`, `Flee`, `Arrive` and `FollowAPath`,
  and kinematic `KinematicSeek`, `KinematicArrive` and `KinematicWander`
  (which takes an optional `random.Random` for repeatable runs). `Arrive`,
  `FollowAPath` and `KinematicArrive` return `None` once the target is reached.
- `ghostchase.path`: `Node` (a label and position) and `Path`, a list of nodes
  with a cursor that stops on the last node.
- `ghostchase.graph`: `Graph` over nodes labelled `0..n-1` with weighted
  connections, `neighbours` and `dijkstra`. `dijkstra` returns an empty list
  when the goal was not reached, and also when the goal's predecessor is
  node 0.
- `ghostchase.collider`: `Plane` (`from_normal`, `from_points`, `distance`)
  and sphere/sphere and sphere/plane collision detection and response.
- `ghostchase.particles`: `Particle` and a fixed-size `Pool` (five particles
  by default) that reuses expired particles.
- `ghostchase.timer`: a frame `Timer` in whole milliseconds, with an
  injectable clock.
- `ghostchase.decisions`: decision trees of `Decision` branches and `Action`
  leaves, with `InJailDecision`, `PlayerInRangeDecision` and `in_jail`.
- `ghostchase.state_machine`: `StateMachine`, `State`, `Transition`, the
  `StateName` enum and the conditions `ConditionInRange`,
  `ConditionOutOfRange`, `ConditionInJail`, `ConditionLowHealth` and
  `ConditionHealthy`.
- `ghostchase.character`: the ghost `Character`. `build_state_machine` sets up
  follow-path → arrive-at-player (player within 3.0), arrive → follow-path
  (player beyond 3.5), arrive → do-nothing (in jail), arrive → flee (health at
  most 1) and flee → follow-path (health back to 3). `update` steps the state
  machine and moves the body; `take_damage` and `heal` change its health.
- `ghostchase.player`: `PlayerBody`, driven by `key_down` and `key_up` with
  the `Key` enum (W/A/S/D set velocity, arrow keys set acceleration, SPACE
  fires a particle toward a given mouse position), kept inside the scene by
  `update`; `screen_to_world` converts pixel coordinates with a projection.
- `ghostchase.level`: `Level`, a 25 × 15 world of 2.1 × 1.9 tiles
  (12 columns × 8 rows) with blocked and jail tiles, its `graph`, a `tower`
  body, `tile_at`, `find_path`, `projection_matrix` and `spawn_characters`.
  Each `Tile` gives its `screen_rect` under a projection and its
  `fill_colour`.

## Examples

Steering a ghost toward a target:

```python
from ghostchase.body import KinematicBody
from ghostchase.steering import Seek
from ghostchase.vector import Vec3

ghost = KinematicBody(pos=Vec3(10.0, 5.0, 0.0), max_acceleration=10.0)
target = KinematicBody(pos=Vec3(2.0, 5.0, 0.0))

steering = Seek(ghost, target).get_steering()
ghost.update(1 / 60, steering)
```

Finding a path across the level and running the ghosts:

```python
from ghostchase.level import Level
from ghostchase.player import Key, PlayerBody
from ghostchase.vector import Vec3

level = Level()
print([node.label for node in level.find_path(85, 42)])

player = PlayerBody(pos=Vec3(5.5, 7.5, 0.0))
ghosts = level.spawn_characters(player)

player.key_down(Key.D)
for _ in range(60):
    for ghost in ghosts:
        ghost.update(1 / 60)
    player.update(1 / 60)
```

## What it does not do

The package has no window, no drawing, no image loading and no event loop,
and it installs no command. It computes positions, paths, colours and screen
rectangles; putting them on a screen and feeding it keyboard and mouse
input is left to the program that uses it.

## Tests

```
pip install -e .[test]
pytest
```