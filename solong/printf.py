"""A small formatter supporting the ``c s p x X d i u %`` conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_MISSING = object()


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + format(int(value) & _UINT64, "x")


def _hex_lower(value: Any) -> str:
    return format(int(value) & _UINT32, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) & _UINT32, "X")


def _signed(value: Any) -> str:
    return str(_to_int32(int(value)))


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT32)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "x": _hex_lower,
    "X": _hex_upper,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        # Unknown conversions produce nothing and consume no argument.
        return ""
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return handler(value)


def sprintf(content: str, *args: Any) -> str:
    """Format ``content`` with ``args`` and return the resulting text."""
    values = iter(args)
    chars = iter(content)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(content: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(content, *args)
    sys.stdout.write(text)
    return len(text)