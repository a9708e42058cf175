"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO

from solong.chars import itoa


def putchar_fd(c: str, stream: TextIO | None) -> None:
    """Write one character; nothing happens without a stream."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    if stream is not None:
        stream.write(c)


def putstr_fd(s: str, stream: TextIO | None) -> None:
    """Write a string; nothing happens without a stream."""
    if stream is not None:
        stream.write(s)


def putendl_fd(s: str, stream: TextIO | None) -> None:
    """Write a string followed by a newline; nothing happens without a stream."""
    if stream is not None:
        stream.write(s)
        stream.write("\n")


def putnbr_fd(n: int, stream: TextIO | None) -> None:
    """Write a 32-bit integer in decimal; nothing happens without a stream."""
    if stream is not None:
        stream.write(itoa(n))