"""A raw byte buffer whose capacity is grown and shrunk explicitly."""

from __future__ import annotations


class DynamicBuffer:
    """A fixed-size block of bytes held in :attr:`data`.

    The size changes only through :meth:`resize`; the existing content is
    kept, new space is zero-filled, and shrinking cuts from the end.
    """

    def __init__(self) -> None:
        self.data = bytearray()

    @property
    def capacity(self) -> int:
        return len(self.data)

    def resize(self, size: int) -> int:
        """Grow by ``size`` bytes, or shrink by ``-size`` (never below zero).

        Returns the new capacity.
        """
        if size > 0:
            self.data.extend(bytes(size))
        else:
            new_capacity = max(len(self.data) + size, 0)
            del self.data[new_capacity:]
        return len(self.data)

    def clear(self) -> None:
        """Release the whole buffer."""
        self.data = bytearray()