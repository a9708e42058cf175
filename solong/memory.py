"""Byte-buffer helpers working on ``bytearray`` and other mutable buffers."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _byte(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c) & 0xFF
    return c & 0xFF


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")


def _strlen(buf: Buffer) -> int:
    """Length up to the first NUL byte, or the whole buffer if there is none."""
    index = bytes(buf).find(b"\0")
    return len(buf) if index < 0 else index


def memchr(data: Buffer, c: int | str, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes."""
    _check_count(n)
    if n > len(data):
        raise IndexError("count exceeds buffer length")
    index = bytes(data[:n]).find(bytes([_byte(c)]))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first unequal bytes within ``n``; 0 if all match."""
    _check_count(n)
    if n > len(a) or n > len(b):
        raise IndexError("count exceeds buffer length")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray | None, src: Buffer | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes of ``src`` to the start of ``dst`` and return ``dst``."""
    _check_count(n)
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both buffers are required")
    if n > len(dst) or n > len(src):
        raise IndexError("count exceeds buffer length")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: bytearray | None, src: Buffer | None, n: int) -> bytearray | None:
    """Like :func:`memcpy`, and safe when the regions overlap."""
    # Taking a snapshot of the source makes any overlap harmless.
    return memcpy(dst, src, n)


def memset(buf: bytearray, c: int | str, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_count(n)
    if n > len(buf):
        raise IndexError("count exceeds buffer length")
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy the NUL-terminated ``src`` into ``dst`` of capacity ``size``.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated.
    Returns the length of ``src``.
    """
    _check_count(size)
    src_len = _strlen(src)
    if size == 0:
        return src_len
    if size > len(dst):
        raise IndexError("size exceeds destination buffer")
    copied = min(src_len, size - 1)
    dst[:copied] = bytes(src[:copied])
    dst[copied] = 0
    return src_len


def strlcat(dst: bytearray, src: Buffer, size: int) -> int:
    """Append the NUL-terminated ``src`` to the string held in ``dst``.

    The result never occupies more than ``size`` bytes including the NUL.
    Returns the length the full concatenation would have had, counting
    ``size`` in place of the destination length when ``size`` is smaller.
    """
    _check_count(size)
    dst_len = _strlen(dst)
    src_len = _strlen(src)
    if size == 0:
        return src_len
    if dst_len >= len(dst):
        raise ValueError("destination is not NUL-terminated")
    total = src_len + size if size <= dst_len else dst_len + src_len
    if dst_len < size - 1:
        if size > len(dst):
            raise IndexError("size exceeds destination buffer")
        copied = min(src_len, size - 1 - dst_len)
        end = dst_len + copied
        dst[dst_len:end] = bytes(src[:copied])
        dst[end] = 0
    return total