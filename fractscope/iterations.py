"""Escape-time iteration counts for the Mandelbrot and Julia sets."""

from __future__ import annotations

from fractscope.model import DIVERGENCE_THRESHOLD


def _escape_count(z: complex, c: complex, iteration_max: int) -> int:
    """Iterate ``z -> z*z + c`` until ``|z|^2`` exceeds the threshold or the limit is hit."""
    count = 0
    while count < iteration_max and z.real * z.real + z.imag * z.imag <= DIVERGENCE_THRESHOLD:
        z = complex(z.real * z.real - z.imag * z.imag + c.real, 2 * z.real * z.imag + c.imag)
        count += 1
    return count


def mandelbrot_iterations(c: complex, iteration_max: int) -> int:
    """Iterations before the orbit of 0 under ``z*z + c`` escapes, capped at ``iteration_max``."""
    return _escape_count(0j, complex(c), iteration_max)


def julia_iterations(z: complex, constant: complex, iteration_max: int) -> int:
    """Iterations before the orbit of ``z`` under ``z*z + constant`` escapes, capped."""
    return _escape_count(complex(z), complex(constant), iteration_max)