"""A singly linked sequence of arbitrary contents."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

__all__ = ["LinkedList"]

Deleter = Optional[Callable[[Any], Any]]


class LinkedList:
    """An ordered collection that grows at either end.

    Contents are kept in insertion order; ``clear`` and ``map`` accept an
    optional ``delete`` callback that releases contents being discarded.
    """

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(contents)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        self._items.appendleft(content)

    def push_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        self._items.append(content)

    def last(self) -> Any:
        """The content of the last element, or None when the list is empty."""
        return self._items[-1] if self._items else None

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element, front to back, passing each content to ``delete``."""
        while self._items:
            content = self._items.popleft()
            if delete is not None:
                delete(content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self._items:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Deleter = None
    ) -> "LinkedList":
        """A new list holding ``func(content)`` for every content.

        If ``func`` raises part way, the contents already produced are
        passed to ``delete`` before the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self._items:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"