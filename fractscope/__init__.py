"""Interactive Mandelbrot and Julia set viewer, with its rendering and helper modules."""

__version__ = "0.1.0"