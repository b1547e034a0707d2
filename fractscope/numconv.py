"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

from itertools import takewhile
from typing import Optional

from fractscope.chars import isdigit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN_DIGITS = "2147483648"


def _wrap(value: int) -> int:
    """Reduce an integer to the 32-bit signed range, wrapping around."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer, wrapping on 32-bit overflow.

    Leading whitespace is skipped and one sign is accepted. Parsing stops at
    the first character that is not an ASCII digit; no digits gives 0, as
    does ``None``.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    if sign == -1 and rest.startswith(_INT_MIN_DIGITS):
        return INT_MIN
    result = 0
    for ch in takewhile(isdigit, rest):
        result = _wrap(result * 10 + ord(ch) - ord("0"))
    return _wrap(result * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)