"""ASCII character classification and case mapping.

Every function accepts either a one-character string or an integer code.
The case mappings give back the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as a string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        code += _CASE_OFFSET
    return _same_kind(c, code)