"""A chained hash table that grows and shrinks with its load factor."""

from __future__ import annotations

import enum
import operator
import struct
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

LOAD_TH_UPPER = 0.75
LOAD_TH_LOWER = 0.25

_MASK = (1 << 64) - 1


class ResizeMode(enum.IntEnum):
    """Direction of a table resize."""

    SHRINK = 0
    EXPAND = 1


def _signed_bytes(key: str | bytes) -> Iterator[int]:
    data = key.encode("utf-8", "surrogateescape") if isinstance(key, str) else bytes(key)
    for byte in data:
        yield byte - 256 if byte >= 128 else byte


def djb_hash(key: str | bytes) -> int:
    """DJB hash of the bytes of ``key`` as a 64-bit unsigned value."""
    value = 5381
    for byte in _signed_bytes(key):
        value = ((value << 5) + value + byte) & _MASK
    return value


def sdbm_hash(key: str | bytes) -> int:
    """SDBM hash of the bytes of ``key`` as a 64-bit unsigned value."""
    value = 0
    for byte in _signed_bytes(key):
        value = (byte + (value << 6) + (value << 16) - value) & _MASK
    return value


def _mix(value: int) -> int:
    value = (value + 0x7ED55D16 + (value << 12)) & _MASK
    value = (value ^ 0xC761C23C ^ (value >> 19)) & _MASK
    value = (value + 0x165667B1 + (value << 5)) & _MASK
    value = ((value + 0xD3A2646C) ^ (value << 9)) & _MASK
    value = (value + 0xFD7046C5 + (value << 3)) & _MASK
    value = (value ^ 0xB55A4F09 ^ (value >> 16)) & _MASK
    return value


def int_hash(key: int) -> int:
    """Integer mixing hash of ``key`` taken as a 32-bit signed integer."""
    signed = ((key + (1 << 31)) % (1 << 32)) - (1 << 31)
    return _mix(signed & _MASK)


def float_hash(key: float) -> int:
    """Integer mixing hash of the single-precision bit pattern of ``key``."""
    (bits,) = struct.unpack("<I", struct.pack("<f", key))
    return _mix(bits)


def string_hash(key: str | bytes) -> int:
    """DJB hash of ``key`` up to its first NUL character."""
    terminator = "\0" if isinstance(key, str) else b"\0"
    return djb_hash(key.split(terminator, 1)[0])


def _default_hash(key: Any) -> int:
    if isinstance(key, (str, bytes)):
        return string_hash(key)
    if isinstance(key, int):
        return int_hash(key)
    if isinstance(key, float):
        return float_hash(key)
    return hash(key) & _MASK


@dataclass
class _Entry(Generic[K, V]):
    key: K
    value: V


class HashTable(Generic[K, V]):
    """Keys mapped to values in chained buckets.

    The table starts with four buckets, doubles when the load factor goes
    above 0.75 after an insertion and halves when it drops below 0.25 after
    a removal. :meth:`insert` does not look for an existing key.
    ``key_free`` and ``val_free`` are called on keys and values that leave
    the table; ``val_free`` also on a value replaced by :meth:`set`.
    """

    def __init__(
        self,
        hash_func: Optional[Callable[[K], int]] = None,
        key_cmp: Optional[Callable[[K, K], bool]] = None,
        key_free: Optional[Callable[[K], object]] = None,
        val_free: Optional[Callable[[V], object]] = None,
    ) -> None:
        self.hash_func = hash_func or _default_hash
        self.key_cmp = key_cmp or operator.eq
        self.key_free = key_free
        self.val_free = val_free
        self._reset()

    def _reset(self) -> None:
        self.capacity = int(1 / LOAD_TH_LOWER)
        self._buckets: List[List[_Entry[K, V]]] = [[] for _ in range(self.capacity)]
        self.count = 0
        self.load = 0.0

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"HashTable({dict(self.items())!r})"

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield every (key, value) pair, bucket by bucket."""
        for bucket in self._buckets:
            for entry in list(bucket):
                yield entry.key, entry.value

    def _bucket(self, key: K) -> List[_Entry[K, V]]:
        return self._buckets[self.hash_func(key) % self.capacity]

    def _find(self, key: K) -> Optional[_Entry[K, V]]:
        for entry in self._bucket(key):
            if self.key_cmp(entry.key, key):
                return entry
        return None

    def _update_load(self) -> None:
        self.load = self.count / self.capacity

    def _release(self, entry: _Entry[K, V]) -> None:
        if self.key_free is not None:
            self.key_free(entry.key)
        if self.val_free is not None:
            self.val_free(entry.value)

    def insert(self, key: K, value: V) -> None:
        """Add a new entry, growing the table when it gets too full."""
        self._bucket(key).append(_Entry(key, value))
        self.count += 1
        self._update_load()
        if self.load > LOAD_TH_UPPER:
            self.resize(ResizeMode.EXPAND)

    def remove(self, key: K) -> bool:
        """Drop the first entry matching ``key``; False when there is none."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if self.key_cmp(entry.key, key):
                del bucket[position]
                self._release(entry)
                self.count -= 1
                break
        else:
            return False
        self._update_load()
        if self.load < LOAD_TH_LOWER:
            self.resize(ResizeMode.SHRINK)
        return True

    def search(self, key: K) -> bool:
        """Whether an entry matching ``key`` exists."""
        return self._find(key) is not None

    def get(self, key: K) -> Optional[V]:
        """Return the value stored under ``key``, or None."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def set(self, key: K, value: V) -> bool:
        """Replace the value under an existing ``key``; False if absent."""
        entry = self._find(key)
        if entry is None:
            return False
        if self.val_free is not None:
            self.val_free(entry.value)
        entry.value = value
        return True

    def resize(self, mode: ResizeMode | int) -> None:
        """Double or halve the bucket count and redistribute the entries."""
        if ResizeMode(mode) is ResizeMode.EXPAND:
            capacity = self.capacity * 2
        else:
            capacity = max(self.capacity // 2, 1)
        entries = [entry for bucket in self._buckets for entry in bucket]
        self.capacity = capacity
        self._buckets = [[] for _ in range(capacity)]
        for entry in entries:
            self._bucket(entry.key).append(entry)
        self._update_load()

    def clear(self) -> None:
        """Release every entry and return to an empty four-bucket table."""
        entries = [entry for bucket in self._buckets for entry in bucket]
        self._reset()
        for entry in entries:
            self._release(entry)