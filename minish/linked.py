"""A singly linked sequence with front/back insertion, iteration and mapping."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class LinkedList(Generic[T]):
    """An ordered collection of items that grows at either end."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: deque[T] = deque(items or ())

    def push_front(self, item: T) -> None:
        """Insert item before the first element."""
        self._items.appendleft(item)

    def push_back(self, item: T) -> None:
        """Append item after the last element."""
        self._items.append(item)

    def last(self) -> T:
        """Return the last item; raise IndexError when the list is empty."""
        if not self._items:
            raise IndexError("last() of an empty list")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every item, front to back, passing each to delete if given."""
        while self._items:
            item = self._items.popleft()
            if delete is not None:
                delete(item)

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call f on every item in order."""
        for item in self._items:
            f(item)

    def map(
        self,
        f: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> LinkedList[U]:
        """Return a new list of f(item) for every item.

        If f raises part way through, the items already produced are passed
        to delete before the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for item in self._items:
                result.push_back(f(item))
        except Exception:
            result.clear(delete)
            raise
        return result