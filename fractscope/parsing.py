"""Parsing of the numeric and textual command-line arguments."""

from __future__ import annotations

from fractscope.chars import isdigit
from fractscope.numconv import atoi
from fractscope.strings import strlen, strncmp

_DECIMAL_BASE = 10


def atof(text: str) -> float:
    """Convert decimal text such as ``-0.75`` to a float.

    The integer and fractional parts are read separately as integers; the
    fraction is scaled down by one decimal place per remaining character.
    """
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    integer_part = float(atoi(text))
    _, _, fraction = text.partition(".")
    decimal_part = abs(float(atoi(fraction)))
    for _ in range(strlen(fraction)):
        decimal_part /= _DECIMAL_BASE
    return sign * (integer_part + decimal_part)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the sign of the result tells their order."""
    return strncmp(s1, s2, max(strlen(s1), strlen(s2)) + 1)


def is_valid_number(text: str) -> bool:
    """True for an optional sign, then digits with at most one decimal point.

    At least one digit is required.
    """
    body = text[1:] if text[:1] in ("-", "+") else text
    if body.count(".") > 1:
        return False
    digits = body.replace(".", "", 1)
    return bool(digits) and all(isdigit(ch) for ch in digits)