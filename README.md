# tlib

Small, self-contained building blocks for games and media tools.

## Modules

- `tlib.mathutil` – `rad2deg`, `deg2rad`, `clamp`, `stepify`,
  `stepify_round`, `normalize`, `sign`, `lerp_rot_degrees`, `lerp_rot_rads`,
  `deg_diff` and `rad_diff`.
- `tlib.ranges` – `span`, `Range`, `StepRange`, `InfiniteRange`,
  `InfiniteStepRange` and `indices` for numeric iteration with steps.
- `tlib.containers` – `LimitedStack` (a stack capped at a maximum size),
  `Bitset`, `PointerVector` (an owning list that refuses to be copied),
  `Ref` (identity-comparing reference) and `valid_index`.
- `tlib.gridmap` – `GridMap2D`, a resizable 2D grid addressed by `(x, y)`
  with bounds-checked `at`/`set` and a `circle` query.
- `tlib.timestep` – `FixedTimestep`, which turns variable frame deltas into
  calls of a callback at a fixed step.
- `tlib.rectpack` – `RectPackerOnline` and `PackNode`, an online binary-tree
  rectangle packer with `insert`, `occupancy` and `nodes`.
- `tlib.resources` – `ResourceCache`, which loads each resource once through
  a loader function, keyed by the normalized path.
- `tlib.fpslimit` – `FPSLimit`, a frame-rate limiter whose `wait` sleeps
  until the next frame is due (clock and sleep functions can be injected).
- `tlib.input` – `InputState`, `Action`, `ActionControl`, `ActionType`,
  `Keymod` and `MouseButton` for tracking keyboard and mouse state between
  frames, plus `mod_to_string`, `control_to_string` and
  `control_to_string_short`.
- `tlib.sysquery` – `global_mem_info`, `process_mem_usage`,
  `CpuUsageMonitor`, `process_cpu_usage`, `bytes_to_mb` and `kb_to_mb`,
  backed by psutil.
- `tlib.textlog` – `TextLog`, a text buffer that keeps line offsets, and
  `debug_camera`, which computes pan and zoom from mouse input.
- `tlib.embedder` – the `tlib-embed` command described below, and the
  functions it is built from (`normalize_embed_path`, `format_byte_list`,
  `render_embed_source`, `files_are_dirty`).

## Installation

```
pip install .
```

## Examples

```python
from tlib.containers import LimitedStack
from tlib.rectpack import RectPackerOnline
from tlib.ranges import span

stack = LimitedStack(3)
for value in range(5):
    stack.push(value)
print(list(stack))            # [0, 1, 2]: pushes onto a full stack are dropped

packer = RectPackerOnline(256, 256)
node = packer.insert(64, 32)
print(node.x, node.y, packer.occupancy())

print(list(span(0, 10).step(3)))   # [0, 3, 6, 9]
```

Input state is fed by the application once per frame:

```python
from tlib.input import Action, ActionControl, ActionType, InputState, MouseButton

state = InputState(window_height=600)
shoot = Action("Shoot", ActionControl(ActionType.MOUSE, MouseButton.LEFT))

state.update_mouse(0b1, x=10, y=20)   # left button held
print(state.is_action_just_pressed(shoot))
```

## Embedding files

The `tlib-embed` command turns files into a generated header holding a map
from each file's path to its bytes. It only regenerates the output when one
of the input files is newer than the timestamp file, which it touches on
every run.

```
tlib-embed -f shaders/a.vert -f shaders/a.frag -o generated/embeds.hpp --ow
```

Options:

- `-f/--file` – files to embed (repeat the option or list several).
- `-o/--out` – the output path, including the file name.
- `-n/--mapName` – name of the generated map variable (default `myEmbeds`).
- `-t/--timeStamp` – timestamp path; `{outPath}` and `{outPathDir}` are
  filled in (default `{outPathDir}/time.stamp`).
- `--ow` – overwrite an existing output file.

The command exits with status 1 when an input file is empty or unreadable,
or when the output exists and `--ow` was not given.

## What this package does not do

tlib has no window, renderer, audio or scripting engine. `InputState` does
not read devices itself: the application passes in key snapshots, mouse
button masks and wheel events. `FPSLimit` only sleeps; it does not drive a
game loop, and `debug_camera` only returns new values for the caller to use.

## Running the tests

```
pip install .[test]
pytest
```