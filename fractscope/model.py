"""The fractal being shown, its defaults, and how the command line selects it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from fractscope.errors import ErrorCode, FractolError
from fractscope.parsing import atof, is_valid_number

WIDTH = 1080
HEIGHT = 720

ZOOM_FACTOR = 1.1
COORDINATE_CENTER_OFFSET = 0.5
BASE_VIEW_FACTOR = 4.0
BASE_MOVEMENT_STEP = 0.1
BASE_ZOOM_LEVEL = 1.0
BASE_MAX_ITERATIONS = 100
DIVERGENCE_THRESHOLD = 4


class FractalType(Enum):
    """The families of fractal the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass
class Fractal:
    """Which fractal to draw, where the view is centred and how far it is zoomed."""

    kind: FractalType = FractalType.MANDELBROT
    center: complex = 0j
    julia: complex = 0j
    zoom_level: float = BASE_ZOOM_LEVEL
    max_iterations: int = BASE_MAX_ITERATIONS


def parse_arguments(argv: Sequence[str]) -> Fractal:
    """Build the fractal named by the command-line arguments.

    ``argv`` holds the arguments after the program name: either
    ``mandelbrot`` or ``julia <real> <imaginary>``. Raises
    :class:`FractolError` with the matching code when they are wrong.
    """
    if len(argv) < 1:
        raise FractolError(ErrorCode.INVALID_AMOUNT)
    name = argv[0]
    if name == FractalType.MANDELBROT.value:
        return Fractal(kind=FractalType.MANDELBROT)
    if name == FractalType.JULIA.value:
        if len(argv) != 3:
            raise FractolError(ErrorCode.INVALID_AMOUNT)
        real, imaginary = argv[1], argv[2]
        if not is_valid_number(real) or not is_valid_number(imaginary):
            raise FractolError(ErrorCode.INVALID_NUMBER)
        return Fractal(kind=FractalType.JULIA, julia=complex(atof(real), atof(imaginary)))
    raise FractolError(ErrorCode.INVALID_FRACTAL)