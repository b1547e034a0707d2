"""Drawing a fractal into an in-memory image of packed colours."""

from __future__ import annotations

from typing import List

from fractscope.color import iteration_to_color
from fractscope.errors import ErrorCode, FractolError
from fractscope.geometry import Viewport, pixel_to_complex
from fractscope.iterations import julia_iterations, mandelbrot_iterations
from fractscope.model import Fractal, FractalType


class Image:
    """A grid of packed ``0xTTRRGGBB`` colours, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels: List[int] = [0] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The packed colour at ``(x, y)``."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def to_rgb_bytes(self) -> bytes:
        """Red, green and blue bytes for every pixel, row by row."""
        return bytes(
            channel
            for color in self.pixels
            for channel in ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        )


def iterations_for(fractal: Fractal, point: complex) -> int:
    """The escape-time count of ``point`` for the fractal's family."""
    if fractal.kind is FractalType.MANDELBROT:
        return mandelbrot_iterations(point, fractal.max_iterations)
    if fractal.kind is FractalType.JULIA:
        return julia_iterations(point, fractal.julia, fractal.max_iterations)
    raise FractolError(ErrorCode.UNKNOWN)


def render_fractal(fractal: Fractal, viewport: Viewport, image: Image) -> Image:
    """Colour every pixel of the viewport into ``image`` and return it."""
    palette = [
        iteration_to_color(count, fractal.max_iterations)
        for count in range(fractal.max_iterations + 1)
    ]
    for y in range(viewport.height):
        for x in range(viewport.width):
            count = iterations_for(fractal, pixel_to_complex(x, y, fractal, viewport))
            image.put_pixel(x, y, palette[count])
    return image