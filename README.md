# stagecraft

A small 2D game engine core with no dependencies. It gives you the parts of a
game loop that run without a window: vector math, collision tests, an
actor/level object model, animation frame timing and keyboard state tracking.
Your code calls one frame at a time.

## Modules

- `stagecraft.vectors`: `Float4`, a vector with 2D helpers (`rotation_z_to_deg`,
  `lerp`, `lerp_clamp`, `normalize_2d`, `size_2d`, and rounding to ints
  half away from zero with `ix`, `iy`, `ihx`, `ihy`). It supports `+`, `-`,
  `*` and unary `-`. Also `Color8Bit`, an immutable RGBA colour whose `color`
  property packs the channels into one 32-bit value with red in the low byte.
  `Color8Bit.from_color` unpacks such a value.
- `stagecraft.transform`: `Transform` (a centre `position` and a full-size
  `scale`) with edge and corner helpers, and the free functions
  `circle_to_circle`, `circle_to_rect`, `rect_to_rect`, `rect_to_point` and
  others. `Transform.collision(this_type, other_type, other)` dispatches on
  `CollisionType`. Only circle/circle, rect/rect, circle/rect and rect/circle
  pairs are registered there. Any pair with `POINT` raises `EngineError`.
- `stagecraft.serializer`: `Serializer`, a growable byte buffer with
  `write_int`, `write_bool`, `write_string` (length-prefixed UTF-8),
  `read_int`, `read_string` and raw `write`/`read`.
- `stagecraft.strings`: `to_upper` (ASCII letters only) and
  `ansi_to_unicode`. Names of levels, images and animations are matched case
  insensitively through `to_upper`.
- `stagecraft.filesystem`: `EnginePath`, `EngineDirectory` and `EngineFile`.
  - `EngineDirectory.move_to_search_child(name)` walks up the tree until it
    finds a child folder with that name.
  - `all_file` lists files and can filter by extension, ignoring case.
  - `all_directory` lists folders.
  - `EngineFile` has `open`, `save` and `load`, which write or read a whole
    `Serializer`. It can be used as a context manager.
- `stagecraft.rng`: `EngineRandom`, seeded from the clock unless you give a
  seed. It has `random_int` (inclusive) and `random_float`. A shared instance
  is `main_random`.
- `stagecraft.timer`: `EngineTime`, which measures the delta between
  `time_check` calls. You can inject the clock.
- `stagecraft.keyinput`: `KeyState` and `EngineInput`. `EngineInput` polls a
  callable `poll(key_code) -> bool` that you supply once per
  `key_check_tick`. From that it tracks down/press/up/free, press time and
  double clicks for each key. It also tracks "any key" state. Key codes follow
  `VirtualKey`, plus `A`–`Z`, `0`–`9`, `-` and `+` by their character codes.
- `stagecraft.tick`: `TickObject`, the base object with delayed activation
  (`set_active`) and delayed destruction (`destroy`).
- `stagecraft.components`: `ActorComponent`, `SceneComponent` and
  `Collision`. `Collision.collision_check(order, next_pos)` returns the active
  collisions in that order group that this shape touches.
- `stagecraft.renderer`: `ImageRenderer` and `AnimationInfo`, with animation
  creation and switching, alpha, camera offset (`render_transform`) and
  per-frame updates in `tick`. Images are looked up by uppercase name in the
  `stagecraft.renderer.IMAGES` dictionary, which you fill yourself.
- `stagecraft.actor`: `Actor`, which owns renderers and collisions.
- `stagecraft.level`: `Level`, which holds actors grouped by order and has a
  camera and a time scale for each order. It provides `level_tick`,
  `level_release` and `visible_renderers`.
- `stagecraft.core`: `EngineCore`, which keeps named levels.
  - `change_level` and `destroy_level` take effect on the next frame.
  - `set_frame` limits the frame rate.
  - `core_tick(delta_time)` runs one frame. It returns `False` when the frame
    limiter skipped the frame.
- `stagecraft.errors`: `EngineError`, which is raised for conditions the
  engine cannot continue from. Examples are an unknown or duplicate level,
  image or animation, a key that is not tracked, and a read past the end of a
  buffer. Also `output_debug_text`, which writes a line to standard error.

## Install

```
pip install .
```

## Example

```python
from stagecraft.core import EngineCore
from stagecraft.level import Level
from stagecraft.actor import Actor
from stagecraft.vectors import Float4
from stagecraft.transform import CollisionType


class PlayLevel(Level):
    def begin_play(self):
        super().begin_play()
        self.player = self.spawn_actor(Actor, 0)
        self.player.set_actor_location(Float4(100, 100))
        body = self.player.create_collision(1)
        body.set_scale(Float4(32, 32))
        body.col_type = CollisionType.RECT


core = EngineCore()
core.create_level(PlayLevel, "Play")
core.change_level("Play")
core.core_tick(1 / 60)
```

## What it does not do

The package opens no window and draws nothing. It plays no sound and loads no
image files. It reads no keyboard by itself: you pass the pressed state to
`EngineInput` through its `poll` callable.

`ImageRenderer` only works out which image, frame index and transform it would
show. `Level.visible_renderers()` gives you the active ones in drawing order,
and drawing them is up to you. There is no built-in main loop: call
`EngineCore.core_tick` from your own loop.

## Tests

```
pip install .[test]
pytest
```