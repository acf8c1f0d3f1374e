"""A sequence with a fixed upper bound on how many elements it holds."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import Generic, TypeVar

__all__ = ["ArrayMap", "DEFAULT_CAPACITY", "MAX_CAPACITY"]

T = TypeVar("T")

MAX_CAPACITY = 255
DEFAULT_CAPACITY = 16


class ArrayMap(Sequence, Generic[T]):
    """An ordered, bounded sequence used as one chunk of a rope."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, values: Iterable[T] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if not 0 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be between 0 and {MAX_CAPACITY}, got {capacity}")
        items = list(values)
        if len(items) > capacity:
            raise ValueError(f"{len(items)} values do not fit in capacity {capacity}")
        self._items: list[T] = items
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(f"no element found at index {index}")
        return index

    def __getitem__(self, index: int) -> T:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._position(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayMap({self._items!r}, capacity={self._capacity})"

    def insert(self, position: int, value: T) -> None:
        """Insert ``value`` before ``position``, shifting later elements up."""
        if position >= self._capacity:
            raise IndexError(
                f"position {position} is greater than max position of {self._capacity - 1}"
            )
        if self.is_full:
            raise ValueError(f"no space to insert in ArrayMap with len = {len(self)}")
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} is past the end of {len(self)} elements")
        self._items.insert(position, value)

    def remove(self, position: int) -> T:
        """Remove and return the element at ``position``."""
        return self._items.pop(self._position(position))

    def swap(self, a: int, b: int) -> None:
        """Exchange the elements at ``a`` and ``b``."""
        if a == b:
            return
        a, b = self._position(a), self._position(b)
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def drain(self, start: int | None = None, stop: int | None = None) -> Iterator[T]:
        """Remove the elements in ``[start, stop)`` and return them in order."""
        start = 0 if start is None else start
        stop = len(self._items) if stop is None else stop
        if start < 0 or stop < 0:
            raise IndexError("drain bounds must not be negative")
        removed = self._items[start:stop]
        del self._items[start:stop]
        return iter(removed)

    def extend(self, values: Iterable[T]) -> None:
        """Append values until the map is full; any further values are ignored."""
        self._items.extend(islice(values, self._capacity - len(self._items)))