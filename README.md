# quadkit

A small Python toolkit that needs nothing beyond the standard library. It
simulates 2D game worlds without drawing them. Each model holds only state
and rules. The caller supplies time steps and control inputs and reads back
positions, scores and flags. You can use it from any frontend, or from
tests alone.

## Modules

### `quadkit.geometry`

- `Vec2(x, y)` is a frozen dataclass. It supports `+`, `-`, unary `-`,
  multiplication and division by a scalar, and unpacking (`x, y = v`).
  `length()` returns the Euclidean length. `normalize()` returns a unit
  vector and raises `ValueError` for a zero vector.
- `Rect(x, y, w, h)` has the properties `left`, `right`, `top` and
  `bottom`. `overlaps(other)` counts touching edges as overlap.
  `contains(point)` includes the left and top edges and excludes the right
  and bottom edges.

### `quadkit.physics`

This is pixel-precise platformer collision.

- `Tile` has the members `EMPTY`, `SOLID`, `JUMP_THROUGH` and `COLLIDER`.
  `Tile.combine(other)` merges two query results.
- `World` holds static tile layers, actors and moving solids:
  - `add_static_tiled_layer(static_colliders, tile_width, tile_height, width, tag)`
    adds a layer. Collision queries use the layers with tag `1`.
  - `add_actor(pos, width, height)` returns an `Actor` handle.
    `add_solid(pos, width, height)` returns a `Solid` handle.
  - `move_h(actor, dx)` and `move_v(actor, dy)` move the actor one pixel at
    a time and keep fractional remainders between calls. Each returns
    `False` when the actor is blocked. An actor can move sideways through
    jump-through tiles and can jump up through them. It falls through them
    only after `descent(actor)` is called.
  - `solid_move(solid, dx, dy)` moves a solid. Actors riding on top move
    along with it horizontally. Actors in its way are pushed, and
    `squished(actor)` reports `True` when a push is blocked.
  - The queries are `collide_solids`, `collide_tag`, `collide_check`,
    `solid_at`, `tag_at`, `actor_pos`, `solid_pos` and
    `set_actor_position`.

### `quadkit.curve`

- `Curve(points, interpolation, resolution=20)` holds key points `(x, y)`.
  `batch()` samples the curve into a `BatchedCurve`. It raises `ValueError`
  for `Interpolation.BEZIER` or for a resolution that is not positive.
- `BatchedCurve.get(t)` interpolates between samples. It raises
  `ValueError` when the curve has no samples.
- `Color(r, g, b, a=1.0)` has `to_vec()`, which returns an `(r, g, b, a)`
  tuple.
- `ColorCurve(start, mid, end)` is a three-stop gradient. `at(t)` returns
  the colour as a tuple.

### `quadkit.emitter_config`

- `EmitterConfig` is a dataclass with every emitter parameter: lifetime,
  amount, explosiveness, direction, spread, velocity, rotation,
  acceleration, damping, size, randomness ratios, `size_curve`,
  `colors_curve`, `gravity`, `one_shot`, `local_coords` and more.
- `EmissionShape(kind=...)` takes `"point"`, `"rect"` (with `width` and
  `height`) or `"sphere"` (with `radius`). `random_point(rng)` returns a
  random offset inside the shape.
- `ParticleShape(kind=...)` takes `"rectangle"`, `"circle"` or
  `"custom_mesh"`. `geometry()` returns the vertex list (position, uv and
  colour per vertex) and the triangle indices.
- `AtlasConfig(n, m, start_index, end_index)` describes a sprite sheet.
  `AtlasConfig.from_range(n, m, start, stop, inclusive)` builds one from a
  frame range. `frame_uv(frame)` returns `(u, v, width, height)`.
- `BlendMode`, `ParticleMaterial` and `PostProcessing` are kept in the
  configuration as plain data.

### `quadkit.emitter`

- `Emitter(config, rng)` simulates particles. `update(pos, dt)` does the
  following, in order:
  - places the emitter at `pos`;
  - spawns particles according to `amount`, `lifetime` and
    `explosiveness`;
  - integrates velocity, rotation, gravity, colour, the size curve and the
    atlas frame;
  - removes expired particles.

  Live particles are in `emitter.particles`, as `Particle` objects.
  `emit(pos, n)` emits `n` particles at once. `reset()` clears the emitter.
  `rebuild_size_curve()` applies changes made to `config.size_curve`.
- `EmittersCache(config, rng)` keeps a pool of emitters that share one
  configuration. `spawn(pos)` starts an emitter, reusing a cached one when
  one is available. `update(dt)` advances the running emitters and returns
  those that stop emitting to the pool. `active`, `active_count` and
  `cached_count` report the pool's state.

### Game models

- `quadkit.life`:
  - `CellState` lists the cell states.
  - `next_state(cell, neighbors)` applies the rules to one cell.
  - `LifeBoard(width, height, cells=None)` is a board whose edges do not
    wrap. It supports indexing as `board[x, y]`, plus `randomize(rng)`,
    `neighbors(x, y)` and `step()`.
- `quadkit.snake`:
  - `SnakeGame(rng, squares=16)` has `turn(direction)`, which takes `UP`,
    `DOWN`, `LEFT` or `RIGHT`, and `step()` and `reset()`.
  - Its state is in `head`, `body`, `fruit`, `score`, `speed` and
    `game_over`.
  - `speed` is the number of seconds between steps that the caller should
    wait. It drops each time a fruit is eaten.
- `quadkit.arkanoid`:
  - `Arkanoid()` is a brick-breaker in a 20 x 20 world.
  - `update(dt, left, right, launch)` advances it and
    `remaining_blocks()` counts the blocks left.
  - Its state is in `blocks`, `ball_x`, `ball_y`, `platform_x` and
    `stick`.
- `quadkit.asteroids`:
  - `AsteroidsGame(width, height, rng, now)` has
    `update(now, thrust, left, right, fire)` and `reset()`.
  - `gameover` and `won` report the outcome.
  - `wrap_around(pos, width, height)` wraps a point around the playfield
    edges.
- `quadkit.angles`: `short_angle_dist(a0, a1)`, `angle_lerp(a0, a1, t)` and
  `wrap_rotation(rotation)` work on angles in degrees, for smooth camera
  rotation.

Every function that takes an `rng` also works without one, using Python's
`random`. Pass a `random.Random(seed)` when you need results you can
repeat.

## What it does not do

The package has no graphics, window, audio, input handling or command-line
program:

- Nothing is drawn.
- `BlendMode`, `ParticleMaterial`, `PostProcessing` and particle geometry
  are stored only as data for a renderer that you provide.
- Games read no keyboard: you pass control flags to their `update` or
  `turn` methods.
- Games keep no clock: you pass time steps (`dt`) or timestamps (`now`).

## Installation

```
pip install .
```

## Example: platformer physics

```python
from quadkit.geometry import Vec2
from quadkit.physics import Tile, World

world = World()
# A 4 x 2 layer of 8 x 8 tiles with solid ground on the bottom row.
tiles = [Tile.EMPTY] * 4 + [Tile.SOLID] * 4
world.add_static_tiled_layer(tiles, 8.0, 8.0, 4, 1)

player = world.add_actor(Vec2(0.0, 0.0), 8, 8)
moved = world.move_v(player, 5.0)   # False: the ground is directly below
on_ground = world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0))
```

## Example: particles

```python
from quadkit.emitter import Emitter
from quadkit.emitter_config import EmitterConfig
from quadkit.geometry import Vec2

emitter = Emitter(EmitterConfig(amount=10, lifetime=0.5))
for _ in range(60):
    emitter.update(Vec2(100.0, 100.0), 1 / 60)
print(len(emitter.particles))
```

## Example: Game of Life

```python
import random

from quadkit.life import CellState, LifeBoard

board = LifeBoard(32, 32)
board.randomize(random.Random(1))
board.step()
alive = board.cells.count(CellState.ALIVE)
```

## Running the tests

```
pip install .[test]
pytest
```