"""Byte-buffer filling, copying, searching and comparison.

Buffers are ``bytearray`` objects or writable ``memoryview`` slices of them.
Operations that would run past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check(buffer: Readable, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buffer):
        raise ValueError(f"{what} of {len(buffer)} bytes is shorter than {n}")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes with ``value`` truncated to a byte."""
    _check(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes."""
    memset(buffer, 0, n)


def memcpy(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check(dest, n, "destination")
    _check(src, n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check(dest, n, "destination")
    _check(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buffer: Optional[Readable], value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or ``None``."""
    if buffer is None:
        return None
    _check(buffer, n)
    index = bytes(buffer[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare ``n`` bytes as unsigned values; the sign tells the order."""
    _check(a, n)
    _check(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes.

    Raises ``MemoryError`` when the product overflows the platform size type.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError(f"{count} * {size} bytes overflows the size type")
    return bytearray(total)