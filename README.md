# csclip

Cohen-Sutherland line clipping against an axis-aligned rectangle, with an
animated, step-by-step Tk view of how the algorithm moves each endpoint.

## Installation

```
pip install .
```

The package has no third-party dependencies. The visualiser needs Tkinter,
which ships with most Python builds; some Linux distributions package it
separately (for example as `python3-tk`).

## Interactive visualiser

```
csclip [--width PIXELS] [--height PIXELS]
```

The window is 1000x800 pixels unless `--width` and `--height` say otherwise;
both must be positive. It shows a dashed blue clipping rectangle and a line
between two endpoints. Each endpoint carries a label, P1 or P2, and its
four-digit region code in TBRL order (top, bottom, right, left).

- Left click sets P1, right click sets P2. Dragging with either button moves
  whichever endpoint is nearer to the pointer.
- SPACE starts the animation. Press it again to reset to the editable line.
- ESC closes the window.

While an animation is running the endpoints cannot be moved. Once it has
finished, a click returns to the editable line.

Every two seconds the animation takes one step. A step either tests the line
for trivial accept or reject, swaps the endpoints so that P1 lies outside, or
clips P1 against one window edge. The segment cut off by a clip is drawn for a
moment in the colour of that edge:

- LEFT is red.
- RIGHT is green.
- BOTTOM is blue.
- TOP is orange.

When the line is accepted, its pixels, computed with Bresenham's algorithm, are
drawn as small black dots. The status line at the bottom shows the current
stage and what the last step did.

## Library use

```python
from csclip.clipping import Point, clip_line, encode

win_min, win_max = Point(50, 50), Point(150, 150)
code = encode(Point(20, 120), win_min, win_max)   # RegionCode.LEFT
segment = clip_line(Point(20, 120), Point(180, 30), win_min, win_max)
# (Point(x=50, y=103.125), Point(x=144.44..., y=50))
```

`csclip.clipping` provides:

- `Point`, a frozen dataclass with `x` and `y`.
- `RegionCode`, an `IntFlag` with `INSIDE`, `LEFT`, `RIGHT`, `BOTTOM` and
  `TOP`.
- `encode(pt, win_min, win_max)`, which gives the region code of a point.
- `inside(code)`, `accept(code1, code2)` and `reject(code1, code2)`, the
  trivial tests of the algorithm.
- `round_half_up(value)`, which adds one half and truncates toward zero.
- `clip_line(p1, p2, win_min, win_max)`, which returns the visible part of the
  segment in its original orientation, or `None` when the segment is rejected.

`csclip.animation` provides the stepwise form of the algorithm:

- `ClipAnimator(p1, p2, win_min, win_max)`. Each call to `step()` performs one
  step and returns the status message. `run()` yields the messages until the
  algorithm finishes. `final_pixels()` gives the Bresenham pixels of an
  accepted line, or an empty list. Its attributes `p1`, `p2`, `code1`,
  `code2`, `stage`, `done`, `accepted`, `swapped` and `current_edge` describe
  the current state.
- `ClipEdge`, the edge a clipping step cut against, and `edge_name(edge)`.
- `region_code_label(code)`, which gives the four-digit TBRL label.
- `bresenham(x0, y0, x1, y1)`, which gives the pixels of a line, both ends
  included.
- `Session(p1, p2, win_min, win_max)`, the state of the interactive editor
  without any drawing. It has `toggle()`, `click(button, point)` with button
  `"left"` or `"right"`, `drag(point)` and `advance()`, which runs one timer
  tick.

`csclip.app` holds the Tk front end: `ClipperApp(root, width, height)`,
`screen_to_world(x, y, width, height)`, `world_to_screen(point, width,
height)` and `main(argv=None)`, which the `csclip` command runs.

## Limits

The clipping window is fixed at (50, 50)–(150, 150) in a 225x225 world in the
visualiser; only the endpoints can be edited there. Only straight line
segments and rectangular windows are handled. There is no polygon clipping,
no saving or loading of scenes, and no non-interactive command-line output.