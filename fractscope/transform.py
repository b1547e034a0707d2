"""Building new strings from existing ones: slicing, joining, trimming, splitting, mapping.

Text may be a ``str`` or a bytes-like object. A NUL character ends the
string, as it would in a C buffer.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from fractscope.strings import strlen

Text = Union[str, bytes, bytearray]


def _body(s: Text) -> Text:
    """The string up to its terminator."""
    return s[: strlen(s)]


def _as_sep(s: Text, sep) -> Text:
    """Convert a separator to the element kind of ``s``."""
    if isinstance(s, str):
        if isinstance(sep, int):
            return chr(sep & 0xFF)
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"expected a single character separator, got {sep!r}")
        return sep
    if isinstance(sep, int):
        return bytes([sep & 0xFF])
    if isinstance(sep, str):
        sep = sep.encode("latin-1")
    if len(sep) != 1:
        raise ValueError(f"expected a single byte separator, got {sep!r}")
    return bytes(sep)


def substr(s: Optional[Text], start: int, length: int) -> Optional[Text]:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string; ``None`` gives ``None``.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _body(s)
    if start >= len(body):
        return body[:0]
    return body[start : start + length]


def strjoin(s1: Text, s2: Text) -> Text:
    """The concatenation of two strings."""
    return _body(s1) + _body(s2)


def strtrim(s: Text, charset: Text) -> Text:
    """``s`` with every character of ``charset`` removed from both ends."""
    return _body(s).strip(_body(charset))


def split(s: Text, sep) -> List[Text]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    body = _body(s)
    separator = _as_sep(body, sep)
    if separator in ("\0", b"\0"):
        return [body] if body else []
    return [word for word in body.split(separator) if word]


def strmapi(s: Text, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, character)`` for each character."""
    body = _body(s)
    chars = body if isinstance(body, str) else body.decode("latin-1")
    return "".join(func(index, ch) for index, ch in enumerate(chars))


def striteri(buffer: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, item)`` on each item up to the terminator.

    A value returned by ``func`` replaces the item in place; ``None`` leaves it.
    """
    end = strlen(buffer) if isinstance(buffer, (bytearray, bytes, str)) else len(buffer)
    for index in range(end):
        result = func(index, buffer[index])
        if result is not None:
            buffer[index] = result