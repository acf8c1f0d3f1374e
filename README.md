# structdiff

Compute a compact diff between two collections of key/value pairs and apply
it later to rebuild the newer collection from the older one. The package
also has two sequence containers: a bounded chunk and a chunked rope built
from those chunks.

The package has no runtime dependencies.

## Installation

```
pip install structdiff
```

## Diffing map-like collections

`structdiff.unordered_map_like` compares two iterables of `(key, value)`
pairs and ignores their order. Each key is counted as many times as it
occurs.

```python
from structdiff.unordered_map_like import apply_unordered_hashdiffs, unordered_hashcmp

old = [(10, 0), (15, 2)]
new = [(10, 0), (15, 2), (20, 0)]

diff = unordered_hashcmp(old, new, key_only=True)
if diff is not None:
    assert dict(apply_unordered_hashdiffs(old, diff)) == dict(new)
```

- `unordered_hashcmp(previous, current, key_only)` returns an
  `UnorderedMapLikeDiff`, or `None` when nothing changed.
  - With `key_only=True`, only keys are compared. The first value seen for a
    key is kept.
  - With `key_only=False`, values are compared as well. A key whose value
    changed is sent as a removal followed by an insertion of the new value.
  - When the current collection has fewer distinct keys than half the
    previous one, the diff holds a full replacement (`diff.is_replace`,
    `diff.replacement`) and no list of changes.
- `apply_unordered_hashdiffs(items, diff)` returns an iterator over the
  resulting pairs. It applies all removals first and then all insertions.
  - A removal of a key that is absent is ignored.
  - A removal of at least as many entries as are held drops the key.
  - An insertion under a key that is still held adds to its count and keeps
    the value already held.

An `UnorderedMapLikeDiff` is built with `UnorderedMapLikeDiff.replace(entries)`
or `UnorderedMapLikeDiff.modify(changes)`. Each change is an
`UnorderedMapLikeChange` with the fields `key`, `value`, `count` and
`operation`, and can be built with
`UnorderedMapLikeChange.create(key, value, count, operation)`. Its count must
be positive. A removal carries no value, so its `value` is `None`.

`structdiff.counting` provides the `Operation` enum (`INSERT`, `REMOVE`) and
`count_items(items)`, which returns a `collections.Counter` of the items.

## Sequence containers

`structdiff.rope.Rope` is an ordered sequence stored as a list of small
chunks. It supports `len()`, iteration, and indexing for reading and writing,
including negative indices. It also has these methods:

- `insert(index, element)`: `index` may be equal to the length.
- `remove(index)`: removes the element and returns it.
- `drain(start, stop)`: removes `[start, stop)` and returns the removed
  elements as a list.
- `swap(a, b)`: exchanges two elements.

When a chunk grows to `MAX_SLOT_SIZE` (16) elements, or shrinks to
`UNDERSIZED_SLOT` (1) or fewer, the rope redistributes elements among
neighbouring chunks towards `BASE_SLOT_SIZE` (8). An index out of range
raises `IndexError`.

```python
from structdiff.rope import Rope

rope = Rope(range(20))
rope.insert(5, "x")
rope.swap(0, 19)
removed = rope.drain(2, 6)
```

`structdiff.slots.ArrayMap(values, capacity)` is the bounded chunk the rope is
made of. The default capacity is 16 and the largest allowed is 255. It
supports indexing, iteration, `insert`, `remove`, `swap` and `drain`, which
returns an iterator over the removed elements. `insert` raises `ValueError`
when the map is full. `extend` adds values only until the map is full and
ignores the rest.

## What the package does not do

- It has no base class for diffing whole objects field by field.
- It has no diff strategy for plain lists or sets treated as multisets.
- It has no strategy that sends a changed map value as a nested diff.
- Diffs are plain frozen dataclasses. The package does not serialize them to
  any wire format.

## Running the tests

```
pip install -e ".[test]"
pytest
```