"""NUL-terminated string helpers.

Text may be a ``str`` or a bytes-like object. A NUL character ends the
string, as it would in a C buffer; without one the whole object counts.
Searches return an index, or ``None`` when nothing is found. The copying
helpers write into a ``bytearray`` buffer.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterator, Optional, Union

Text = Union[str, bytes, bytearray]

# A NUL as it appears in either kind of text: a one-character str or a byte value.
_NULS = ("\0", 0)


def _end(s: Text) -> int:
    """Index of the terminating NUL, or the length when there is none."""
    index = s.find("\0" if isinstance(s, str) else 0)
    return len(s) if index < 0 else index


def _as_char(s: Text, c):
    """Convert a search character to the element kind of ``s``, truncated to a byte."""
    if isinstance(s, str):
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError(f"expected a single character, got {c!r}")
            return c
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    return c & 0xFF


def _codes(s: Text) -> Iterator[int]:
    """Character codes up to the terminator, then zeros forever."""
    body = s[: _end(s)]
    codes = (ord(ch) for ch in body) if isinstance(body, str) else iter(body)
    return chain(codes, repeat(0))


def _ensure_room(dest: bytearray, needed: int) -> None:
    if len(dest) < needed:
        raise ValueError(
            f"destination buffer of {len(dest)} bytes cannot hold {needed} bytes"
        )


def strlen(s: Text) -> int:
    """Length of the string up to its terminator."""
    return _end(s)


def strchr(s: Text, c) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL gives the length."""
    target = _as_char(s, c)
    end = _end(s)
    if target in _NULS:
        return end
    index = s.find(target, 0, end)
    return None if index < 0 else index


def strrchr(s: Text, c) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL gives the length."""
    target = _as_char(s, c)
    end = _end(s)
    if target in _NULS:
        return end
    index = s.rfind(target, 0, end)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the order."""
    for a, b in islice(zip(_codes(s1), _codes(s2)), n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: Text, little: Optional[Text], length: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``."""
    if little is None or _end(little) == 0:
        return 0
    needle = little[: _end(little)]
    limit = min(length, _end(big))
    index = big.find(needle, 0, limit)
    return None if index < 0 else index


def strdup(s: Text) -> Text:
    """A fresh copy of the string up to its terminator."""
    return s[: _end(s)]


def strlcpy(dest: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Copy ``src`` into ``dest`` within ``size`` bytes; return the length of ``src``."""
    src_len = _end(src)
    if size == 0:
        return src_len
    count = min(size - 1, src_len)
    _ensure_room(dest, count + 1)
    dest[:count] = src[:count]
    dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Append ``src`` to the string in ``dest`` within ``size`` bytes.

    Returns the length the full concatenation would have, or ``size`` plus
    the length of ``src`` when ``size`` is smaller than the current string.
    """
    dst_len = _end(dest)
    src_len = _end(src)
    if size < dst_len:
        return size + src_len
    count = max(0, min(src_len, size - dst_len - 1))
    _ensure_room(dest, dst_len + count + 1)
    dest[dst_len : dst_len + count] = src[:count]
    dest[dst_len + count] = 0
    return dst_len + src_len