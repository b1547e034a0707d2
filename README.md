# fractscope

An interactive viewer for the Mandelbrot set and Julia sets. It opens a
1080×720 window with pygame, colours each pixel by how many iterations it
takes to escape, and lets you zoom with the mouse wheel and pan with the
arrow keys.

## Installation

```
pip install .
```

## Usage

Show the Mandelbrot set:

```
fractscope mandelbrot
```

Show a Julia set for the constant `c = real + imaginary·i`:

```
fractscope julia -0.8 0.156
```

Both numbers must be plain decimals: an optional sign, digits and at most one
decimal point, with at least one digit. With a missing or unknown fractal
name, the wrong number of arguments or a malformed number, the program prints
an error line and a usage summary to standard output and exits with a
non-zero status (the value of the matching `fractscope.errors.ErrorCode`).

## Controls

| Input                 | Action                                   |
|-----------------------|------------------------------------------|
| Mouse wheel up        | Zoom in, centred on the pointer          |
| Mouse wheel down      | Zoom out, centred on the pointer         |
| Arrow keys            | Pan the view                             |
| Escape / close window | Quit                                     |

Each zoom step changes the scale by a factor of 1.1, recentres the view on
the point under the pointer and resets any panning. A scroll is ignored while
a redraw is still pending. Rendering uses up to 100 iterations per pixel;
points that never escape are drawn in a dark blue.

## Using it as a library

The pieces behind the viewer can be used without opening a window:

```python
from fractscope.model import parse_arguments
from fractscope.geometry import Viewport
from fractscope.render import Image, render_fractal

fractal = parse_arguments(["julia", "-0.8", "0.156"])
image = Image(1080, 720)
render_fractal(fractal, Viewport(), image)
rgb = image.to_rgb_bytes()
```

- `fractscope.model` – `Fractal`, `FractalType` and `parse_arguments`, which
  takes the arguments after the program name and raises
  `fractscope.errors.FractolError` when they are wrong.
- `fractscope.geometry` – `Viewport` and `pixel_to_complex`.
- `fractscope.iterations` – `mandelbrot_iterations` and `julia_iterations`.
- `fractscope.color` – `iteration_to_color` turns an iteration count into a
  packed `0xTTRRGGBB` value; `create_trgb` packs the channels.
- `fractscope.render` – `Image` (`put_pixel`, `get_pixel`, `to_rgb_bytes`),
  `iterations_for` and `render_fractal`.
- `fractscope.app` – `Viewer`, which holds a session's state and reacts to
  `Key` and `MouseButton` codes through `handle_key`, `handle_mouse` and
  `update`; `main` is the command's entry point.
- `fractscope.errors` – `ErrorCode`, `FractolError`, `error_message` and
  `show_error`.
- `fractscope.parsing` – `atof`, `strcmp` and `is_valid_number`, used on the
  command-line arguments.

The package also carries small helper modules for C-style text and buffer
handling: `chars` (ASCII classification and case mapping), `strings`
(NUL-terminated string searches and bounded copies), `numconv` (`atoi`,
`itoa` on 32-bit integers), `transform` (`substr`, `strjoin`, `strtrim`,
`split`, `strmapi`, `striteri`), `memory` (byte-buffer `memset`, `memcpy`,
`memmove`, `memchr`, `memcmp`, `calloc` and friends), `output` (writing
characters, strings and numbers to a stream), `linkedlist` (`Node`,
`LinkedList`, `delete_one`) and `printf` (`sprintf` and `printf` with the
conversions `c s p d i u x X %`).

## What it does not do

The viewer only displays. It does not save images to files, does not offer
other fractal families, and has no keys for changing the iteration limit or
the colour scheme.

## Running the tests

```
pip install ".[test]"
pytest
```