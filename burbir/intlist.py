"""A bounded list of integers with an explicit, adjustable capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

UNDEFINED_INDEX = -1


def _integers(stream: TextIO) -> Iterator[int]:
    """Yield whitespace-separated integers from a text stream."""
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"not an integer: {token!r}") from None


class IntList:
    """Integers packed to the left of a container of fixed capacity."""

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise ValueError("more values than the capacity allows")
        self._capacity = capacity
        self._items = items

    @property
    def capacity(self) -> int:
        """How many elements the list can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"IntList(capacity={self._capacity}, values={self._items!r})"

    def __str__(self) -> str:
        return "[" + ",".join(str(value) for value in self._items) + "]"

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the list holds as many elements as its capacity."""
        return len(self._items) == self._capacity

    def is_index_valid(self, index: int) -> bool:
        """Return True if the index lies within the capacity."""
        return 0 <= index < self._capacity

    def read(self, stream: TextIO) -> None:
        """Fill the list from a stream: a count, then that many integers.

        Counts outside 0..capacity are skipped until a valid one is read.
        """
        numbers = _integers(stream)
        try:
            count = next(numbers)
            while count < 0 or count > self._capacity:
                count = next(numbers)
            items = [next(numbers) for _ in range(count)]
        except StopIteration:
            raise EOFError("input ended before the list was complete") from None
        self._items = items

    def plus_minus(self, other: IntList, plus: bool) -> IntList:
        """Return the element-wise sum (or difference) of two equal-length lists."""
        if len(self) != len(other):
            raise ValueError("lists must have the same length")
        if plus:
            values = [a + b for a, b in zip(self._items, other._items)]
        else:
            values = [a - b for a, b in zip(self._items, other._items)]
        return IntList(len(values), values)

    def index_of(self, value: int) -> int:
        """Return the smallest index holding the value, or -1 if absent."""
        try:
            return self._items.index(value)
        except ValueError:
            return UNDEFINED_INDEX

    def extremes(self) -> tuple[int, int]:
        """Return (maximum, minimum) of a non-empty list."""
        if not self._items:
            raise ValueError("extremes of an empty list")
        return max(self._items), min(self._items)

    def copy(self) -> IntList:
        """Return an independent list with the same capacity and elements."""
        return IntList(self._capacity, self._items)

    def total(self) -> int:
        """Return the sum of the elements, 0 when empty."""
        return sum(self._items)

    def count(self, value: int) -> int:
        """Return how many times the value occurs."""
        return self._items.count(value)

    def sort(self, ascending: bool = True) -> None:
        """Sort the elements in place."""
        self._items.sort(reverse=not ascending)

    def append(self, value: int) -> None:
        """Add a value at the end of a list that is not full."""
        if self.is_full():
            raise IndexError("list is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty list")
        return self._items.pop()

    def remove_value(self, value: int) -> None:
        """Remove the first occurrence of the value."""
        try:
            self._items.remove(value)
        except ValueError:
            raise ValueError(f"{value} is not in the list") from None

    def expand(self, amount: int) -> None:
        """Grow the capacity by the given amount."""
        if self._capacity + amount < len(self._items):
            raise ValueError("capacity would fall below the number of elements")
        self._capacity += amount

    def shrink(self, amount: int) -> None:
        """Reduce the capacity by the given amount, keeping every element."""
        if self._capacity - amount < len(self._items):
            raise ValueError("capacity would fall below the number of elements")
        self._capacity -= amount

    def compress(self) -> None:
        """Make the capacity equal to the number of elements."""
        self._capacity = len(self._items)