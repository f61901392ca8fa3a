"""A last-in, first-out stack with an optional per-item release hook."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Items pushed and popped at one end.

    ``clear_item`` is called on every item still on the stack when
    :meth:`clear` empties it. Items handed out by :meth:`pop` belong to the
    caller.
    """

    def __init__(self, clear_item: Optional[Callable[[T], object]] = None) -> None:
        self.clear_item = clear_item
        self._items: List[T] = []

    @property
    def top_index(self) -> int:
        """Index of the top item, or -1 when the stack is empty."""
        return len(self._items) - 1

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(list(self._items))

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the top item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def top(self) -> Optional[T]:
        """Return the top item without removing it, or None when empty."""
        if not self._items:
            return None
        return self._items[-1]

    def clear(self) -> None:
        """Release every item, bottom first, and empty the stack."""
        items, self._items = self._items, []
        if self.clear_item is not None:
            for item in items:
                self.clear_item(item)