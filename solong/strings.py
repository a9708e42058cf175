"""String helpers: searching, splitting, slicing, trimming and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _as_char(c: int | str) -> str:
    """Turn an int or a one-character string into a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c & 0xFF)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces.

    A NUL separator never matches, so a non-empty string comes back whole.
    """
    char = _as_char(sep)
    if not s:
        return []
    if char == _NUL:
        return [s]
    return [word for word in s.split(char) if word]


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``; NUL finds the end of the string."""
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; NUL finds the end of the string."""
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], str | None]
) -> None:
    """Call ``f(index, char)`` on each item of ``s`` in place.

    A non-None result replaces the character at that index.
    """
    for index, char in enumerate(s):
        replacement = f(index, char)
        if replacement is not None:
            s[index] = replacement


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign gives the ordering."""
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` chars."""
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s) or length == 0:
        return ""
    return s[start:start + length]


def strtrim(s: str | None, charset: str) -> str | None:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    start = 0
    while start < len(s) and s[start] in charset:
        start += 1
    end = len(s) - start
    while end and s[start + end - 1] in charset:
        end -= 1
    return substr(s, start, end)