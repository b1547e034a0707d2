"""Mapping escape-time counts to packed pixel colours."""

from __future__ import annotations

RGB_MAX_VALUE = 255
GAMMA_RED = 0.4
GAMMA_GREEN = 0.6
SMOOTHING_COEFF_A = 3.0
SMOOTHING_COEFF_B = 2.0
ALPHA_TRANSPARENT = 0

INSIDE_RED = 10
INSIDE_GREEN = 5
INSIDE_BLUE = 25

SHIFT_ALPHA = 24
SHIFT_RED = 16
SHIFT_GREEN = 8


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack alpha, red, green and blue bytes into one integer."""
    return t << SHIFT_ALPHA | r << SHIFT_RED | g << SHIFT_GREEN | b


def iteration_to_color(iteration: int, iteration_max: int) -> int:
    """The colour of a pixel whose orbit escaped after ``iteration`` steps.

    Points that never escaped get a fixed dark colour; the rest are shaded
    along a smoothstep curve with a different gamma per channel.
    """
    if iteration < iteration_max:
        t = iteration / iteration_max
        t = t * t * (SMOOTHING_COEFF_A - SMOOTHING_COEFF_B * t)
        red = int(RGB_MAX_VALUE * t**GAMMA_RED)
        green = int(RGB_MAX_VALUE * t**GAMMA_GREEN)
        blue = int(RGB_MAX_VALUE * t)
        return create_trgb(ALPHA_TRANSPARENT, red, green, blue)
    return create_trgb(ALPHA_TRANSPARENT, INSIDE_RED, INSIDE_GREEN, INSIDE_BLUE)