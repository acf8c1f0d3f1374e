"""A sequence stored as a list of small chunks, cheap to edit in the middle."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, islice
from typing import Generic, TypeVar

from structdiff.slots import ArrayMap

__all__ = ["Rope", "MAX_SLOT_SIZE", "BASE_SLOT_SIZE", "UNDERSIZED_SLOT"]

T = TypeVar("T")

MAX_SLOT_SIZE = 16
BASE_SLOT_SIZE = 8
UNDERSIZED_SLOT = 1

_LOW = BASE_SLOT_SIZE - BASE_SLOT_SIZE // 2
_HIGH = BASE_SLOT_SIZE + BASE_SLOT_SIZE // 2


def _chunk(values: Iterable[T]) -> ArrayMap[T]:
    return ArrayMap(values, MAX_SLOT_SIZE)


class Rope(Sequence, Generic[T]):
    """An ordered sequence split into bounded chunks.

    Insertions and removals only touch one chunk, which is split or merged
    with its neighbours when it grows too large or too small.
    """

    __slots__ = ("_chunks",)

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._chunks: list[ArrayMap[T]] = []
        iterator = iter(values)
        while chunk := _chunk(islice(iterator, BASE_SLOT_SIZE)):
            self._chunks.append(chunk)
            if len(chunk) < BASE_SLOT_SIZE:
                break

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def __iter__(self) -> Iterator[T]:
        return chain.from_iterable(self._chunks)

    def __repr__(self) -> str:
        return f"Rope({list(self)!r})"

    def _checked(self, index: int) -> int:
        index = operator.index(index)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"index is {index} but len is {size}")
        return index

    def _locate(self, index: int, start_key: int = 0, seen: int = 0) -> tuple[int, int]:
        """Return the chunk holding ``index`` and the number of elements before it."""
        key = start_key
        for key, chunk in enumerate(islice(self._chunks, start_key, None), start_key):
            if seen + len(chunk) > index:
                return key, seen
            seen += len(chunk)
        return len(self._chunks), seen

    def __getitem__(self, index: int) -> T:
        index = self._checked(index)
        key, seen = self._locate(index)
        return self._chunks[key][index - seen]

    def __setitem__(self, index: int, value: T) -> None:
        index = self._checked(index)
        key, seen = self._locate(index)
        self._chunks[key][index - seen] = value

    def _rebalance(self, start_key: int) -> None:
        """Resize chunks from ``start_key`` on until one is already a good size."""
        pending: deque[T] = deque()
        rebuilt: list[ArrayMap[T]] = []
        end = start_key
        for chunk in islice(self._chunks, start_key, None):
            if chunk and not pending and _LOW <= len(chunk) <= _HIGH:
                break
            pending.extend(chunk)
            end += 1
            while len(pending) >= BASE_SLOT_SIZE:
                rebuilt.append(_chunk(pending.popleft() for _ in range(BASE_SLOT_SIZE)))
        if pending:
            rebuilt.append(_chunk(pending))
        self._chunks[start_key:end] = rebuilt
        self._chunks = [chunk for chunk in self._chunks if chunk]

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` before ``index``; ``index`` may equal the length."""
        size = len(self)
        if not 0 <= index <= size:
            raise IndexError(f"insertion index is {index} but len is {size}")
        key, seen = self._locate(index)
        if key == len(self._chunks):
            if self._chunks and len(self._chunks[-1]) < MAX_SLOT_SIZE - 1:
                key -= 1
                seen -= len(self._chunks[key])
            else:
                self._chunks.append(_chunk(()))
        chunk = self._chunks[key]
        chunk.insert(index - seen, element)
        if len(chunk) >= MAX_SLOT_SIZE:
            self._rebalance(key)

    def remove(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        size = len(self)
        if not 0 <= index < size:
            raise IndexError(
                f"failed to remove item with index {index} from rope with {size} elements"
            )
        key, seen = self._locate(index)
        chunk = self._chunks[key]
        removed = chunk.remove(index - seen)
        if len(chunk) <= UNDERSIZED_SLOT:
            self._rebalance(max(key - 1, 0))
        return removed

    def drain(self, start: int | None = None, stop: int | None = None) -> list[T]:
        """Remove the elements in ``[start, stop)`` and return them in order."""
        size = len(self)
        start = 0 if start is None else start
        stop = size if stop is None else stop
        if not 0 <= start <= stop <= size:
            raise IndexError(f"cannot drain [{start}, {stop}) from rope with {size} elements")
        if start == stop:
            return []

        last = stop - 1
        l_key, l_seen = self._locate(start)
        r_key, r_seen = self._locate(last, l_key, l_seen)

        if l_key == r_key:
            chunk = self._chunks[l_key]
            removed = list(chunk.drain(start - l_seen, stop - l_seen))
            if len(chunk) <= UNDERSIZED_SLOT:
                self._rebalance(max(l_key - 1, 0))
            return removed

        left, right = self._chunks[l_key], self._chunks[r_key]
        removed = list(left.drain(start - l_seen))
        removed.extend(chain.from_iterable(self._chunks[l_key + 1 : r_key]))
        removed.extend(right.drain(0, last - r_seen + 1))
        del self._chunks[l_key + 1 : r_key]
        if len(left) <= UNDERSIZED_SLOT or len(right) <= UNDERSIZED_SLOT:
            self._rebalance(l_key)
        return removed

    def swap(self, a: int, b: int) -> None:
        """Exchange the elements at ``a`` and ``b``."""
        a, b = sorted((self._checked(a), self._checked(b)))
        l_key, l_seen = self._locate(a)
        r_key, r_seen = self._locate(b, l_key, l_seen)
        left, right = self._chunks[l_key], self._chunks[r_key]
        left[a - l_seen], right[b - r_seen] = right[b - r_seen], left[a - l_seen]