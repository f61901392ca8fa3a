"""A first-in, first-out queue with an optional per-item release hook."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """Items pushed at the rear and popped from the front.

    ``clear_item`` is called on every item still queued when :meth:`clear`
    empties the queue. Items handed out by :meth:`pop` belong to the caller.
    """

    def __init__(self, clear_item: Optional[Callable[[T], object]] = None) -> None:
        self.clear_item = clear_item
        self._items: Deque[T] = deque()

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front to the rear."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def push(self, item: T) -> None:
        """Add ``item`` at the rear."""
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the front item, or None when empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def front(self) -> Optional[T]:
        """Return the front item without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def rear(self) -> Optional[T]:
        """Return the rear item without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        """Release every item, front first, and empty the queue."""
        items, self._items = self._items, deque()
        if self.clear_item is not None:
            for item in items:
                self.clear_item(item)