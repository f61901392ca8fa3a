from dataclasses import dataclass, field

import pytest

from zdkit.dynarray import DynamicArray


@dataclass
class Thing:
    a: int
    mem: object = field(default_factory=object)


@pytest.fixture
def ints():
    da = DynamicArray()
    for value in (5, 1, 2, 4, 3):
        da.append(value)
    return da


def test_append_and_get(ints):
    assert ints.count == 5
    assert ints.get(0) == 5
    assert ints.get(1) == 1
    assert ints.get(3) == 4
    assert ints.get(4) == 3
    assert ints.get(5) is None


def test_set(ints):
    ints.set(3, 1)
    assert ints.get(3) == 1
    ints.set(0, 100)
    assert ints.get(0) == 100
    assert ints.set(10, -100) is False
    assert ints.get(10) is None
    assert list(ints) == [100, 1, 2, 1, 3]


def test_int_sequence_matches_source():
    da = DynamicArray()
    for value in (5, 1, 2, 4, 3):
        da.append(value)
    da.set(3, 1)
    da.set(0, 100)
    da.set(10, -100)

    da.remove(0)
    assert da.count == 4
    da.remove(3)
    assert da.count == 3
    da.remove(3)
    assert da.count == 3

    da.insert(4, 100)
    assert da.count == 3
    da.insert(3, 101)
    assert da.count == 4
    da.insert(0, 102)
    assert da.count == 5

    for _ in range(2):
        assert [da.next() for _ in range(5)] == [102, 1, 2, 1, 101]
        assert da.next() is None


def test_struct_sequence_releases_items():
    cleared = []
    da = DynamicArray(clear_item=lambda item: cleared.append(item.a))
    for value in (5, 1, 2, 4, 3):
        da.append(Thing(value))
    assert da.count == 5
    assert [da.get(i).a for i in (0, 1, 3, 4)] == [5, 1, 4, 3]
    assert da.get(5) is None

    da.set(3, Thing(1, None))
    assert da.get(3).a == 1
    da.set(0, Thing(100, None))
    assert da.get(0).a == 100
    da.set(10, Thing(-100, None))
    assert da.get(10) is None
    assert cleared == [4, 5]

    da.remove(0)
    assert da.count == 4
    da.remove(3)
    assert da.count == 3
    da.remove(3)
    assert da.count == 3
    assert cleared == [4, 5, 100, 3]

    for _ in range(2):
        assert [da.next().a for _ in range(3)] == [1, 2, 1]
        assert da.next() is None

    da.clear()
    assert da.count == 0
    assert cleared == [4, 5, 100, 3, 1, 2, 1]


def test_out_of_range_insert_and_remove_return_false(ints):
    assert ints.insert(6, 9) is False
    assert ints.insert(-1, 9) is False
    assert ints.remove(5) is False
    assert ints.remove(-1) is False
    assert list(ints) == [5, 1, 2, 4, 3]


def test_insert_at_end_appends(ints):
    assert ints.insert(5, 42) is True
    assert ints.get(5) == 42


def test_clear_resets_cursor(ints):
    ints.next()
    ints.next()
    ints.clear()
    ints.append(9)
    assert ints.next() == 9
    assert len(ints) == 1