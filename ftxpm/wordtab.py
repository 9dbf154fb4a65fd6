"""Substring search and word splitting for XPM line parsing.

Texts are treated as NUL-terminated: anything after the first ``"\\0"``
is ignored.
"""

from __future__ import annotations

import re
from typing import Optional

__all__ = ["find", "find_unquoted", "split_words"]

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` in ``text``, or None.

    ``length`` is only checked against the needle: a needle longer than
    ``length`` is never found. The search itself runs to the end of the
    text.
    """
    _check_needle(needle)
    if len(needle) > length:
        return None
    index = _terminated(text).find(needle)
    return None if index < 0 else index


def find_unquoted(text: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`find`, but skip matches that start inside double quotes.

    Every ``"`` toggles the quoted state before the match at its own
    position is tried.
    """
    _check_needle(needle)
    if len(needle) > length:
        return None
    text = _terminated(text)
    last = len(text) - len(needle)
    quoted = False
    pos = 0
    while pos <= last:
        quote = text.find('"', pos, last + 1)
        stop = last + 1 if quote < 0 else quote
        if not quoted:
            hit = text.find(needle, pos, stop + len(needle) - 1)
            if hit >= 0:
                return hit
        if quote < 0:
            break
        quoted = not quoted
        if not quoted and text.startswith(needle, quote):
            return quote
        pos = quote + 1
    return None


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(_terminated(text)) if word]