"""A singly linked sequence of arbitrary contents."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["LinkedList"]

Deleter = Optional[Callable[[Any], None]]


class LinkedList:
    """An ordered collection supporting insertion at either end.

    ``delete`` callbacks given to :meth:`clear` and :meth:`map` are called
    once for each content being discarded, so that contents holding
    resources can release them.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the start of the list."""
        self._items.appendleft(content)

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the end of the list."""
        self._items.append(content)

    def last(self) -> Any:
        """Return the last content; raise IndexError when the list is empty."""
        if not self._items:
            raise IndexError("last() of an empty list")
        return self._items[-1]

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element, passing each content to ``delete`` if given."""
        if delete is not None:
            for content in self._items:
                delete(content)
        self._items.clear()

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order, skipping None contents."""
        for content in self._items:
            if content is not None:
                func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` (when given) and the exception propagates.
        """
        mapped = LinkedList()
        try:
            for content in self._items:
                mapped.push_back(func(content))
        except BaseException:
            mapped.clear(delete)
            raise
        return mapped

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"