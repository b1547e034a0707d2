"""Mapping window pixels to points of the complex plane."""

from __future__ import annotations

from dataclasses import dataclass

from fractscope.model import BASE_VIEW_FACTOR, COORDINATE_CENTER_OFFSET, HEIGHT, WIDTH, Fractal


@dataclass
class Viewport:
    """The pixel size of the view and the pan applied with the arrow keys."""

    width: int = WIDTH
    height: int = HEIGHT
    shift_x: float = 0.0
    shift_y: float = 0.0

    def reset_shift(self) -> None:
        """Drop any pan so the view is centred on the fractal's centre again."""
        self.shift_x = 0.0
        self.shift_y = 0.0


def _normalize(coordinate: float, dimension: float) -> float:
    return coordinate / dimension - COORDINATE_CENTER_OFFSET


def pixel_to_complex(x: int, y: int, fractal: Fractal, viewport: Viewport) -> complex:
    """The point of the complex plane shown at pixel ``(x, y)``.

    The view spans ``4 / zoom_level`` units across each axis, centred on
    ``fractal.center`` and moved by the viewport's pan.
    """
    zoom_factor = BASE_VIEW_FACTOR / fractal.zoom_level
    shift_x = viewport.shift_x * zoom_factor / BASE_VIEW_FACTOR
    shift_y = viewport.shift_y * zoom_factor / BASE_VIEW_FACTOR
    real = fractal.center.real + (_normalize(float(x), viewport.width) * zoom_factor + shift_x)
    imaginary = fractal.center.imag + (
        _normalize(float(y), viewport.height) * zoom_factor + shift_y
    )
    return complex(real, imaginary)