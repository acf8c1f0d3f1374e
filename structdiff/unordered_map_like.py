"""Diffs between map-like collections compared as multisets of key/value pairs."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from itertools import chain, repeat
from typing import Any

from structdiff.counting import Operation

__all__ = [
    "UnorderedMapLikeChange",
    "UnorderedMapLikeDiff",
    "unordered_hashcmp",
    "apply_unordered_hashdiffs",
]

_MISSING = object()


@dataclass(frozen=True)
class UnorderedMapLikeChange:
    """Insertion or removal of ``count`` entries under ``key``.

    Removals are made by key alone, so their ``value`` is always ``None``.
    """

    key: Any
    value: Any
    count: int
    operation: Operation

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"a change must carry a positive count, got {self.count}")
        if self.operation is Operation.REMOVE and self.value is not None:
            raise ValueError("a removal is made by key alone and carries no value")

    @classmethod
    def create(
        cls, key: Any, value: Any, count: int, operation: Operation
    ) -> UnorderedMapLikeChange:
        """Build the change that adds or takes away ``count`` entries of ``key``."""
        if operation is Operation.REMOVE:
            value = None
        return cls(key, value, count, operation)

    @property
    def is_insert(self) -> bool:
        return self.operation is Operation.INSERT

    @property
    def is_single(self) -> bool:
        return self.count == 1


@dataclass(frozen=True)
class UnorderedMapLikeDiff:
    """Either a full replacement of the entries or a list of changes to them."""

    replacement: tuple[tuple[Any, Any], ...] | None = None
    changes: tuple[UnorderedMapLikeChange, ...] = ()

    def __post_init__(self) -> None:
        if self.replacement is not None:
            if self.changes:
                raise ValueError("a diff is either a replacement or a list of changes")
            object.__setattr__(
                self, "replacement", tuple((k, v) for k, v in self.replacement)
            )
        object.__setattr__(self, "changes", tuple(self.changes))

    @classmethod
    def replace(cls, entries: Iterable[tuple[Any, Any]]) -> UnorderedMapLikeDiff:
        """A diff that swaps all entries for ``entries``."""
        return cls(replacement=tuple(entries))

    @classmethod
    def modify(cls, changes: Iterable[UnorderedMapLikeChange]) -> UnorderedMapLikeDiff:
        """A diff made of individual insertions and removals."""
        return cls(changes=tuple(changes))

    @property
    def is_replace(self) -> bool:
        return self.replacement is not None


def _collect(
    entries: Iterable[tuple[Hashable, Any]], key_only: bool
) -> dict[Hashable, tuple[Any, int]]:
    """Map each key to a value and the number of times it occurs.

    With ``key_only`` the first value seen for a key is kept and every
    later entry counts towards it. Otherwise an entry with a different
    value replaces the one held and restarts the count.
    """
    collected: dict[Hashable, tuple[Any, int]] = {}
    for key, value in entries:
        held = collected.get(key, _MISSING)
        if held is _MISSING:
            collected[key] = (value, 1)
        elif key_only or held[0] == value:
            collected[key] = (held[0], held[1] + 1)
        else:
            collected[key] = (value, 1)
    return collected


def _expand(collected: dict[Hashable, tuple[Any, int]]) -> Iterator[tuple[Any, Any]]:
    return chain.from_iterable(
        repeat((key, value), count) for key, (value, count) in collected.items()
    )


def unordered_hashcmp(
    previous: Iterable[tuple[Hashable, Any]],
    current: Iterable[tuple[Hashable, Any]],
    key_only: bool,
) -> UnorderedMapLikeDiff | None:
    """Compare two collections of ``(key, value)`` pairs, ignoring order.

    Returns ``None`` when nothing changed. When the current collection has
    far fewer distinct keys than the previous one, the diff replaces it
    outright. A key whose value changed is removed and inserted again.
    """
    before = _collect(previous, key_only)
    after = _collect(current, key_only)

    if len(after) < len(before) - len(after):
        return UnorderedMapLikeDiff.replace(_expand(after))

    changes: list[UnorderedMapLikeChange] = []
    for key, (value, now) in after.items():
        prior = before.pop(key, _MISSING)
        if prior is _MISSING:
            changes.append(UnorderedMapLikeChange.create(key, value, now, Operation.INSERT))
            continue
        was_value, was = prior
        if was_value == value:
            if now > was:
                changes.append(
                    UnorderedMapLikeChange.create(key, value, now - was, Operation.INSERT)
                )
            elif now < was:
                changes.append(
                    UnorderedMapLikeChange.create(key, value, was - now, Operation.REMOVE)
                )
        else:
            changes.append(UnorderedMapLikeChange.create(key, was_value, was, Operation.REMOVE))
            changes.append(UnorderedMapLikeChange.create(key, value, now, Operation.INSERT))

    changes.extend(
        UnorderedMapLikeChange.create(key, value, was, Operation.REMOVE)
        for key, (value, was) in before.items()
    )

    return UnorderedMapLikeDiff.modify(changes) if changes else None


def apply_unordered_hashdiffs(
    items: Iterable[tuple[Hashable, Any]], diff: UnorderedMapLikeDiff
) -> Iterator[tuple[Any, Any]]:
    """Apply ``diff`` to ``(key, value)`` pairs and yield the resulting pairs.

    Removals are applied before insertions. Removing an absent key is
    ignored; removing at least as many entries as held drops the key.
    Inserting under a key that is still held adds to its count and keeps
    the value already held.
    """
    if diff.replacement is not None:
        return iter(diff.replacement)

    collected = _collect(items, key_only=True)

    for change in diff.changes:
        if change.is_insert:
            continue
        held = collected.get(change.key, _MISSING)
        if held is _MISSING:
            continue
        value, count = held
        if count > change.count:
            collected[change.key] = (value, count - change.count)
        else:
            del collected[change.key]

    for change in diff.changes:
        if not change.is_insert:
            continue
        held = collected.get(change.key, _MISSING)
        if held is _MISSING:
            collected[change.key] = (change.value, change.count)
        else:
            collected[change.key] = (held[0], held[1] + change.count)

    return iter(list(_expand(collected)))