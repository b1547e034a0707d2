"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import TextIO

from fractscope.numconv import itoa


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write one character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write a string."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write a string followed by a newline."""
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    stream.write(itoa(n))