"""A growable string that tracks its length and a doubling capacity."""

from __future__ import annotations

_INITIAL_CAPACITY = 128


class ZString:
    """Text built up by appending formatted pieces.

    The capacity starts at 128 once anything is appended and doubles while
    it is not larger than the length plus one.
    """

    def __init__(self, text: str = "") -> None:
        self.text = ""
        self.capacity = 0
        if text:
            self.append(text)

    @property
    def length(self) -> int:
        return len(self.text)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"ZString({self.text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ZString):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def append(self, fmt: str | None, *args: object) -> "ZString":
        """Append ``fmt`` formatted with ``%`` by ``args``; return self.

        A missing format or an empty result leaves the string unchanged.
        """
        if fmt is None:
            return self
        piece = fmt % args if args else fmt
        if not piece:
            return self
        needed = len(self.text) + len(piece) + 1
        while self.capacity <= needed:
            self.capacity = _INITIAL_CAPACITY if self.capacity == 0 else 2 * self.capacity
        self.text += piece
        return self

    def clear(self) -> None:
        """Empty the string and release its capacity."""
        self.text = ""
        self.capacity = 0


def substring(text: str, start: int, end: int) -> ZString:
    """Return ``text[start:end]`` as a ZString.

    An empty ZString comes back when ``start`` is not inside the text,
    ``end`` is past its end, or the range is empty.
    """
    if start < 0 or start >= len(text) or end > len(text) or start >= end:
        return ZString()
    return ZString(text[start:end])


def repeat(text: str, times: int) -> ZString:
    """Return ``text`` repeated ``times`` times as a ZString."""
    result = ZString()
    for _ in range(times):
        result.append(text)
    return result