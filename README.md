# wirefdf

A wireframe viewer for height maps. A map file is a grid of integers, one
row per line, each value giving the altitude of a point. A value may carry a
colour, written as `value,0xRRGGBB`:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

Every row should hold as many points as the first. The grid ends before the
first row whose point count differs. Points at altitude zero are drawn white,
points at any other altitude green, unless a colour is given. Anything other
than numbers, spaces and colour suffixes raises `MapFormatError`.

## Installing

```
pip install .
```

## Running

```
wirefdf path/to/map.fdf
```

A window opens showing the map as a grid of connected lines. With a wrong
number of arguments, a file that cannot be opened or a malformed map, a
message is printed to standard error and the command exits with status 1.

### Keys

| Key            | Action                  |
|----------------|-------------------------|
| Arrow keys     | Move the view           |
| Keypad 8 / 2   | Rotate about the X axis |
| Keypad 4 / 6   | Rotate about the Y axis |
| `.` / `,`      | Raise / lower altitude  |
| `z` / `x`      | Zoom in / out           |
| Escape         | Quit                    |

Keys act on every frame for as long as they are held down. Closing the
window also quits.

## Using it as a library

```python
from wirefdf.parsing import read_map
from wirefdf.model import Camera
from wirefdf.render import draw_lines

points = read_map("map.fdf")
camera = Camera()
pixels = {}
draw_lines(points, camera, lambda x, y, color: pixels.__setitem__((x, y), color))
```

- `wirefdf.parsing`: `read_map(path)` and `parse_map(lines)` build the grid
  of `Point` objects; both raise `MapFormatError` for malformed input.
- `wirefdf.model`: `Point`, `Camera` (with `reset()`), `KeyFlag`, `AnsiColor`.
- `wirefdf.transform`: `scale_point`, `rotate_point`, `translate_point` and
  `transform_points` project points to screen positions.
- `wirefdf.render`: `draw_line` and `draw_lines` call a
  `put_pixel(x, y, color)` callback for every pixel.
- `wirefdf.controls`: `KeyState` (`press`, `release`), `default_key_table()`
  and `apply_keys(flags, camera)`.
- `wirefdf.app`: `Viewer(points, camera)` with `frame(put_pixel)` and
  `run()`, and `main(argv)` behind the `wirefdf` command.
- `wirefdf.xpm`: `xpm_file_to_image(path)` and `xpm_to_image(lines)` decode
  XPM images into `XpmImage` objects, raising `XpmError` on bad data.
- `wirefdf.colornames`: `lookup_color(name)` resolves X11 colour names.
- `wirefdf.textutil`: small string helpers.

## What it does not do

The viewer only draws to a window; it does not save images. The XPM reader
is a separate library feature and is not used by the viewer.

## Tests

```
pip install .[test]
pytest
```