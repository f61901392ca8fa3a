"""A singly linked list with index-based access and in-place reversal."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T, next_node: Optional["_Node[T]"] = None) -> None:
        self.data = data
        self.next = next_node


class LinkedList(Generic[T]):
    """A chain of items reached by walking from the head.

    ``clear_item`` is called on every item that leaves the list: when it is
    removed, replaced by :meth:`set`, or dropped by :meth:`clear`.
    """

    def __init__(self, clear_item: Optional[Callable[[T], object]] = None) -> None:
        self.clear_item = clear_item
        self._head: Optional[_Node[T]] = None
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return iter([node.data for node in self._nodes()])

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _release(self, item: T) -> None:
        if self.clear_item is not None:
            self.clear_item(item)

    def _node_before(self, index: int) -> Optional[_Node[T]]:
        """Return the node preceding position ``index`` (None for the head)."""
        prev = None
        for position, node in enumerate(self._nodes()):
            if position == index:
                break
            prev = node
        return prev

    def _link_at(self, index: int, item: T) -> None:
        prev = self._node_before(index)
        if prev is None:
            self._head = _Node(item, self._head)
        else:
            prev.next = _Node(item, prev.next)
        self._count += 1

    def append(self, item: T) -> None:
        """Add ``item`` at the end."""
        self._link_at(self._count, item)

    def insert(self, index: int, item: T) -> None:
        """Insert ``item`` before ``index``; past the end means append."""
        self._link_at(max(0, min(index, self._count)), item)

    def remove(self, index: int) -> bool:
        """Release and unlink the item at ``index``; False if out of range."""
        if not 0 <= index < self._count:
            return False
        prev = self._node_before(index)
        if prev is None:
            node = self._head
            self._head = node.next
        else:
            node = prev.next
            prev.next = node.next
        self._count -= 1
        self._release(node.data)
        return True

    def get(self, index: int) -> Optional[T]:
        """Return the item at ``index``, or None when out of range."""
        if not 0 <= index < self._count:
            return None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node.data
        return None

    def set(self, index: int, item: T) -> bool:
        """Release the item at ``index`` and put ``item`` in its place."""
        if not 0 <= index < self._count:
            return False
        for position, node in enumerate(self._nodes()):
            if position == index:
                old, node.data = node.data, item
                self._release(old)
                return True
        return False

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        prev = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev, node = node, following
        self._head = prev

    def clear(self) -> None:
        """Release every item, head first, and empty the list."""
        items: List[T] = [node.data for node in self._nodes()]
        self._head = None
        self._count = 0
        for item in items:
            self._release(item)