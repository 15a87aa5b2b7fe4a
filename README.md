# fractview

A small interactive viewer for the Mandelbrot set and Julia sets. It uses
Pillow to draw the image and the standard library's `tkinter` to show it, so
Python must be built with Tk support for the window to open.

## Installation

```
pip install .
```

## Usage

Show the Mandelbrot set:

```
fractview mandel
```

Show a Julia set for the constant `c = re + im·i`:

```
fractview julia 0.285 0.01
```

The first argument is matched by its leading letters: anything that starts
with `mandel` counts as `mandel`, and anything that starts with `julia` counts
as `julia`. The first argument also becomes the window title.

Both parts of the Julia constant must be plain decimal numbers: an optional
leading `+` or `-`, digits, and at most one decimal point. Their range is not
checked. Any other argument list prints a short help text and exits with
status 0.

## Controls

| Input              | Effect                                              |
|--------------------|-----------------------------------------------------|
| Arrow keys         | Pan the view by half the current zoom factor        |
| Keypad `+` / `-`   | Raise / lower the iteration limit by 10             |
| Mouse wheel up     | Multiply the zoom factor by 1.05 (wider view)       |
| Mouse wheel down   | Multiply the zoom factor by 0.95 (closer view)      |
| `Esc` or `q`       | Close the viewer                                    |

The view starts with 42 iterations, an escape value of 4 for `|z|²`, no pan
and a zoom factor of 1, covering -2 to 2 on both axes in an 800×800 window.
Points that never escape are drawn in turquoise; escaping points are shaded
from black to white by how quickly they leave.

Every change redraws all 640,000 pixels in plain Python, so each redraw can
take a few seconds.

## Library use

The rendering core works without a window:

```python
from fractview.render import FractalKind, FractalState, pixel_color, render

state = FractalState(kind=FractalKind.JULIA, julia_x=0.285, julia_y=0.01)
print(hex(pixel_color(state, 400, 400)))
image = render(state)          # a Pillow RGB image
image.save("julia.png")
state.reset()                  # back to the default view
```

Other modules:

- `fractview.params`: `check_param` validates a command-line number,
  `parse_decimal` reads it, `help_text` returns the usage message and
  `UsageError` is raised for unusable arguments.
- `fractview.events`: `handle_key` and `handle_mouse` update a `FractalState`
  the same way the viewer does; `handle_key` returns `True` for a close key.
  `Key` and `Button` list the key and button codes.
- `fractview.app`: `parse_args` turns an argument list into a `FractalState`,
  `Viewer` shows it in a window, and `main` is the `fractview` command.
- `fractview.palette`: `Color`, the named colours, with `Color.rgb()`.
- `fractview.scaling`: `scale`, a linear range mapping.
- `fractview.textutil`: small string helpers (`atoi`, `itoa`, `split_words`,
  `trim`, `substring`, `find_within`, `compare`).

## What it does not do

The `fractview` command only shows the fractal on screen. It cannot save an
image, set the window size, the iteration limit or the colours from the
command line, and the mouse wheel does not zoom towards the pointer. Saving an
image is possible from Python through `render`, as shown above.