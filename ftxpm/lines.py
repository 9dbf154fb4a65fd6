"""Reading a stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

__all__ = ["get_next_line", "iter_lines"]


def get_next_line(stream: IO[AnyStr]) -> AnyStr:
    """Read the next line from ``stream``, newline included.

    The last line is returned without a newline if the stream ends
    before one; an empty result means the stream is exhausted.
    Read errors propagate as the stream raises them.
    """
    return stream.readline()


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` until it is exhausted."""
    while True:
        line = get_next_line(stream)
        if not line:
            return
        yield line