"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_INT_MIN = -2147483648
_INT_MAX = 2147483647


def _code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else c


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII capital; other values come back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII small letter; other values come back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer; 0 if it falls outside 32 bits."""
    rest = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not is_digit(ch):
            break
        digits.append(ch)
    result = sign * int("".join(digits)) if digits else 0
    return result if _INT_MIN <= result <= _INT_MAX else 0


def itoa(n: int) -> str:
    """Render a 32-bit integer in decimal."""
    return str(_to_int32(n))