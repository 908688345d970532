# quadgame

Small, engine-independent building blocks for writing games in Python.
Nothing here opens a window or talks to a GPU. The pieces hold game state
and do the arithmetic. You connect them to whatever renderer and event loop
you use.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `quadgame.color`: `Color`, an immutable RGBA value with float components
  in 0..1. It provides `Color.from_rgba`, `Color.from_bytes`, `Color.to_bytes`
  and `Color.to_tuple`. The module also has `color_u8`, `hsl_to_rgb`,
  `rgb_to_hsl` and constants for common colors such as `RED`, `WHITE` and
  `BLANK`.
- `quadgame.geometry`: `Vec2`, an immutable 2D vector with arithmetic,
  `length` and `distance`. Also `polar_to_cartesian`, `cartesian_to_polar`
  and `clamp`.
- `quadgame.rect`: `Rect` supports `contains`, `overlaps`, `intersect`,
  `combine_with`, `offset`, `move_to` and `scale`. `RectOffset` holds edge
  distances.
- `quadgame.circle`: `Circle` supports `contains`, `overlaps`,
  `overlaps_rect`, `offset`, `move_to` and `scale`.
- `quadgame.generational`: `GenerationalStorage` stores values in reusable
  slots addressed by `GenerationalId`. An id goes stale once its slot is
  freed and reused.
- `quadgame.storage`: a global store that holds one value per type, with
  `store`, `get` (raises `KeyError` if missing), `try_get` and `clear`.
- `quadgame.shaders`: `preprocess_shader` expands `#include "name"`
  directives from a `PreprocessorConfig`. It raises `ShaderPreprocessError`
  for malformed or unknown includes.
- `quadgame.animation`: `AnimatedSprite` steps through sprite-sheet
  `Animation` rows and gives the current `AnimationFrame`.
- `quadgame.mouse_camera`: `Camera` is a pan-and-zoom camera. You drive it
  with mouse positions and wheel values.
- `quadgame.telemetry`: `Profiler` records nested timing `Zone`s per
  `Frame` and logs strings. `zone` and `log_time` are context managers.
  Calls to `enable` and `disable` take effect at the next `reset`.
- `quadgame.events`: defines `TouchPhase`, `MouseButton`, `KeyMods` and
  `InputEvent`. `InputEvent.replay` delivers an event to a handler's
  `*_event` methods.
- `quadgame.input`: `InputState` is fed through its `on_*` methods. It
  answers per-frame queries such as `is_key_pressed`, `is_mouse_button_down`,
  `mouse_position_local` and `touches`. It also records events for
  subscribers, which you read back with `register_input_subscriber` and
  `drain_events`.
- `quadgame.files`: `load_file` and `load_string` read files, inside the
  folder set by `set_pc_assets_folder` if one is set. Failures raise
  `FileError`.

## Example

```python
from quadgame.color import Color, rgb_to_hsl
from quadgame.events import KeyMods
from quadgame.geometry import Vec2
from quadgame.input import InputState
from quadgame.rect import Rect

red = Color.from_rgba(255, 0, 0, 255)
print(rgb_to_hsl(red))                  # (0.0, 1.0, 0.5)

box = Rect(0.0, 0.0, 10.0, 10.0)
print(box.contains(Vec2(5.0, 5.0)))     # True

state = InputState(800, 600)
state.on_key_down("space", KeyMods(), False)
print(state.is_key_pressed("space"))    # True
state.end_frame()
print(state.is_key_pressed("space"))    # False
print(state.is_key_down("space"))       # True
```

## What it does not do

- There is no window, renderer or main loop. You must feed input events,
  frame times and screen sizes in yourself.
- There is no coroutine scheduler, state machine or scene graph.
  `AnimatedSprite.update` and `Profiler.reset` take the frame time from
  your own loop.