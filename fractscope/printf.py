"""A small formatted-output facility with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from fractscope.numconv import itoa

_UINT_MASK = 2**32 - 1
_PTR_MASK = 2**64 - 1


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def format_str(value: Optional[str]) -> str:
    """The string itself, or ``(null)`` for ``None``."""
    return "(null)" if value is None else value


def format_ptr(value: Optional[int]) -> str:
    """An address in lower-case hex with a ``0x`` prefix; zero is ``(nil)``."""
    address = (value or 0) & _PTR_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def format_int(value: int, plus: bool = False) -> str:
    """A signed 32-bit decimal; ``plus`` marks non-zero positive values with ``+``."""
    number = _to_int32(value)
    if number == 0:
        return "0"
    text = itoa(number)
    return f"+{text}" if plus and number >= 0 else text


def format_uint(value: int) -> str:
    """An unsigned 32-bit decimal."""
    return str(value & _UINT_MASK)


def format_hex(value: int, uppercase: bool = False) -> str:
    """An unsigned 32-bit hexadecimal, without prefix."""
    number = value & _UINT_MASK
    return f"{number:X}" if uppercase else f"{number:x}"


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


_CONVERSIONS = {
    "c": _format_char,
    "s": format_str,
    "p": format_ptr,
    "d": format_int,
    "i": format_int,
    "u": format_uint,
    "x": format_hex,
    "X": lambda value: format_hex(value, uppercase=True),
}


def sprintf(fmt: Optional[str], *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    An unknown conversion and a trailing ``%`` produce nothing.
    """
    if fmt is None:
        raise ValueError("format string is missing")
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec) if spec is not None else None
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)