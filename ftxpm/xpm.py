"""Reading XPM images into rows of 32-bit pixel values."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union

from .colors import NONE_COLOR, color_by_name
from .strings import atoi
from .wordtab import find, find_unquoted, split_words

__all__ = [
    "TRANSPARENT",
    "XpmError",
    "XpmImage",
    "text_to_rgb",
    "strip_comments",
    "parse_xpm_lines",
    "parse_xpm_text",
    "load_xpm",
]

TRANSPARENT = 0xFF000000
"""Pixel value written for the ``None`` colour: the alpha byte marks transparency."""

_NAME_LIMIT = 63
_DIRECT_MAX_CPP = 2
_HEX_PREFIX = re.compile(
    r"[\t\n\v\f\r ]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)
_QUOTED = re.compile(r'"([^"]*)"')
_LONG_MIN, _LONG_MAX = -(2 ** 63), 2 ** 63 - 1


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` is an unsigned 32-bit ``0xAARRGGBB``."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def _to_int32(value: int) -> int:
    return (value + 2 ** 31) % 2 ** 32 - 2 ** 31


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    if sign == "-":
        value = -value
    return _to_int32(min(max(value, _LONG_MIN), _LONG_MAX))


def text_to_rgb(name: str, end: Optional[str] = None) -> int:
    """Colour value of an XPM colour specification.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up in the colour table,
    ignoring case; unknown names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    value = color_by_name(name)
    return 0 if value is None else value


def _blank(text: str, opener: str, closer: str, extra: int) -> str:
    while True:
        begin = find_unquoted(text, opener, len(text))
        if begin is None:
            return text
        after = begin + len(opener)
        end = find(text[after:], closer, len(text) - after)
        span = min((-1 if end is None else end) + extra, len(text) - begin)
        text = text[:begin] + " " * span + text[begin + span:]


def strip_comments(text: str) -> str:
    """Replace C and C++ comments outside quoted strings with spaces.

    The length of the text is kept. A ``//`` comment is blanked through
    its newline.
    """
    text = _blank(text, "/*", "*/", 4)
    return _blank(text, "//", "\n", 3)


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"malformed header: {line!r}")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line shorter than its key: {line!r}")
    words = split_words(line[cpp:])
    try:
        at = words.index("c")
    except ValueError:
        raise XpmError(f"no colour visual in line: {line!r}") from None
    if at + 1 >= len(words):
        raise XpmError(f"no colour after 'c' in line: {line!r}")
    end = words[at + 2] if at + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[at + 1], end)


def _parse(lines: Iterator[str]) -> XpmImage:
    width, height, ncolors, cpp = _parse_header(_next_line(lines, "header"))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(lines, "colour definition"), cpp)
        if cpp <= _DIRECT_MAX_CPP:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    row_span = width * cpp
    rows = []
    for _ in range(height):
        line = _next_line(lines, "pixel row")
        if len(line) < row_span:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, row_span, cpp):
            colour = palette.get(line[start:start + cpp], 0)
            if colour == NONE_COLOR:
                colour = TRANSPARENT
            row.append(colour & 0xFFFFFFFF)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    return _parse(iter(lines))


def _quoted_strings(text: str) -> Iterator[str]:
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the contents of an XPM file."""
    return _parse(_quoted_strings(strip_comments(text)))


def load_xpm(path: Union[str, os.PathLike]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    with open(path, encoding="latin-1", newline="") as handle:
        return parse_xpm_text(handle.read())