import io

import pytest

from burbir.intlist import IntList


def make(values, capacity=10):
    return IntList(capacity, values)


def test_str_format_from_documentation():
    assert str(make([1, 20, 30])) == "[1,20,30]"
    assert str(make([])) == "[]"


def test_length_iteration_and_indexing():
    values = [5, 3, 8]
    lst = make(values)
    assert len(lst) == len(values)
    assert list(lst) == values
    assert lst[0] == 5
    assert lst[2] == 8


def test_too_many_values_rejected():
    with pytest.raises(ValueError):
        IntList(2, [1, 2, 3])


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        IntList(-1)


def test_empty_and_full():
    lst = IntList(2)
    assert lst.is_empty()
    assert not lst.is_full()
    lst.append(1)
    lst.append(2)
    assert lst.is_full()
    assert not lst.is_empty()


def test_index_valid_uses_capacity():
    lst = IntList(3, [1])
    assert lst.is_index_valid(0)
    assert lst.is_index_valid(2)
    assert not lst.is_index_valid(3)
    assert not lst.is_index_valid(-1)


def test_equality_ignores_capacity():
    assert IntList(3, [1, 2]) == IntList(9, [1, 2])
    assert not (IntList(3, [1, 2]) == IntList(3, [2, 1]))
    assert not (IntList(3, [1, 2]) == IntList(3, [1, 2, 3]))


def test_read_skips_invalid_counts():
    lst = IntList(3)
    lst.read(io.StringIO("5\n-1\n2\n7\n9\n"))
    assert list(lst) == [7, 9]


def test_read_zero_gives_empty():
    lst = IntList(3, [4])
    lst.read(io.StringIO("0\n"))
    assert lst.is_empty()


def test_read_incomplete_input():
    lst = IntList(3)
    with pytest.raises(EOFError):
        lst.read(io.StringIO("2\n1\n"))


def test_plus_minus_round_trip():
    a = make([1, 2, 3])
    b = make([10, 20, 30])
    summed = a.plus_minus(b, True)
    assert summed.plus_minus(b, False) == a
    assert summed.capacity == len(a)


def test_plus_minus_length_mismatch():
    with pytest.raises(ValueError):
        make([1]).plus_minus(make([1, 2]), True)


def test_index_of():
    lst = make([4, 7, 4])
    assert lst.index_of(4) == 0
    assert lst.index_of(7) == 1
    assert lst.index_of(99) == -1
    assert IntList(3).index_of(1) == -1


def test_extremes():
    values = [3, -2, 9, 0]
    assert make(values).extremes() == (max(values), min(values))
    with pytest.raises(ValueError):
        IntList(2).extremes()


def test_copy_is_independent():
    original = IntList(5, [1, 2])
    duplicate = original.copy()
    assert duplicate == original
    assert duplicate.capacity == original.capacity
    duplicate.append(3)
    assert len(original) == 2


def test_total_and_count():
    values = [2, 5, 2, 2]
    lst = make(values)
    assert lst.total() == sum(values)
    assert IntList(1).total() == 0
    assert lst.count(2) == values.count(2)
    assert lst.count(7) == 0


def test_sort_both_directions():
    values = [5, 1, 4, 1, 3]
    lst = make(values)
    lst.sort(True)
    assert list(lst) == sorted(values)
    lst.sort(False)
    assert list(lst) == sorted(values, reverse=True)


def test_append_full_raises():
    lst = IntList(1, [1])
    with pytest.raises(IndexError):
        lst.append(2)


def test_append_pop_round_trip():
    lst = make([1, 2])
    lst.append(42)
    assert lst.pop() == 42
    assert list(lst) == [1, 2]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        IntList(2).pop()


def test_remove_value():
    lst = make([1, 2, 3, 2])
    lst.remove_value(2)
    assert list(lst) == [1, 3, 2]
    with pytest.raises(ValueError):
        lst.remove_value(99)


def test_expand_shrink_compress():
    lst = IntList(4, [1, 2])
    lst.expand(3)
    assert lst.capacity == 7
    lst.shrink(3)
    assert lst.capacity == 4
    lst.compress()
    assert lst.capacity == len(lst)
    assert lst.is_full()
    assert list(lst) == [1, 2]


def test_shrink_below_length_raises():
    lst = IntList(4, [1, 2, 3])
    with pytest.raises(ValueError):
        lst.shrink(2)