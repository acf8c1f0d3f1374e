"""Helpers for counting items in multisets."""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Hashable, Iterable

__all__ = ["Operation", "count_items"]


class Operation(enum.Enum):
    """Whether a change adds items to a collection or takes them away."""

    INSERT = "insert"
    REMOVE = "remove"


def count_items(items: Iterable[Hashable]) -> Counter:
    """Count how many times each item occurs, keyed in order of first appearance."""
    return Counter(items)