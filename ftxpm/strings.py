"""String helpers: parsing, splitting, trimming, searching and mapping."""

from __future__ import annotations

import re
from collections.abc import Callable, MutableSequence, Sequence
from typing import Optional

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "strchr",
    "strrchr",
    "strmapi",
    "striteri",
]

_INTEGER_PREFIX = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; a string without digits gives 0.
    """
    match = _INTEGER_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character found in ``chars``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, or None. An empty needle
    matches at index 0.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def _codes(text: str | bytes) -> list[int]:
    if isinstance(text, (bytes, bytearray)):
        return list(text)
    return [ord(c) for c in text]


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters, stopping after the end of ``s1``.

    Returns the difference of the first differing character codes, the
    end of a string counting as code 0, or 0 when no difference is found.
    """
    a, b = _codes(s1), _codes(s2)
    for position in range(min(n, len(a) + 1)):
        c1 = a[position] if position < len(a) else 0
        c2 = b[position] if position < len(b) else 0
        if c1 != c2:
            return c1 - c2
    return 0


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for ``"\\0"`` gives the length of the text.
    """
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for ``"\\0"`` gives the length of the text.
    """
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> None:
    """Replace every element of ``chars`` in place with ``func(index, char)``."""
    snapshot: Sequence[str] = list(chars)
    for index, char in enumerate(snapshot):
        chars[index] = func(index, char)