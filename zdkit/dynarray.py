"""A growable array with an optional per-item release hook and a cursor."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """An ordered sequence of items.

    ``clear_item`` is called on every item that leaves the array: when it is
    removed, overwritten by :meth:`set`, or dropped by :meth:`clear`.
    Out-of-range positions are ignored by the mutating methods, and
    :meth:`get` returns None for them.
    """

    def __init__(self, clear_item: Optional[Callable[[T], object]] = None) -> None:
        self.clear_item = clear_item
        self._items: List[T] = []
        self._pos = 0

    @property
    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def _release(self, item: T) -> None:
        if self.clear_item is not None:
            self.clear_item(item)

    def append(self, item: T) -> None:
        """Add ``item`` at the end."""
        self._items.append(item)

    def insert(self, index: int, item: T) -> bool:
        """Insert ``item`` before ``index``; ``index`` may equal the count.

        Returns False, changing nothing, when ``index`` is out of range.
        """
        if index < 0 or index > len(self._items):
            return False
        self._items.insert(index, item)
        return True

    def remove(self, index: int) -> bool:
        """Release and drop the item at ``index``; False if out of range."""
        if not self._valid(index):
            return False
        item = self._items.pop(index)
        self._release(item)
        return True

    def set(self, index: int, item: T) -> bool:
        """Release the item at ``index`` and put ``item`` in its place."""
        if not self._valid(index):
            return False
        self._release(self._items[index])
        self._items[index] = item
        return True

    def get(self, index: int) -> Optional[T]:
        """Return the item at ``index``, or None when out of range."""
        if not self._valid(index):
            return None
        return self._items[index]

    def next(self) -> Optional[T]:
        """Advance the built-in cursor.

        Yields each item in turn, then None once; the following call starts
        again from the first item.
        """
        if self._pos > len(self._items):
            self._pos = 0
        item = self.get(self._pos)
        self._pos += 1
        return item

    def clear(self) -> None:
        """Release every item and empty the array."""
        items, self._items = self._items, []
        for item in items:
            self._release(item)
        self._pos = 0