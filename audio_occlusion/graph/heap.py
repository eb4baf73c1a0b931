"""Priority queue with decrease-key for shortest-path searches."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

V = TypeVar("V")


@dataclass(order=True)
class _Entry:
    """A slot in the underlying heap list."""

    key: float
    seq: int
    node: Any = field(compare=False)
    stale: bool = field(default=False, compare=False)


@dataclass
class HeapNode(Generic[V]):
    """Handle for a queued value, returned by insert for later decrease_key."""

    key: float
    value: V
    extracted: bool = False
    _entry: _Entry | None = field(default=None, repr=False, compare=False)


class PriorityQueue(Generic[V]):
    """Min-priority queue on top of heapq.

    decrease_key pushes a fresh heap entry and marks the old one stale;
    stale entries are skipped on extraction.
    """

    def __init__(self) -> None:
        self._heap: list[_Entry] = []
        self._counter = itertools.count()
        self._size = 0

    def size(self) -> int:
        """Number of queued (not yet extracted) values."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def _push(self, node: HeapNode[V]) -> None:
        entry = _Entry(node.key, next(self._counter), node)
        node._entry = entry
        heapq.heappush(self._heap, entry)

    def insert(self, key: float, value: V) -> HeapNode[V]:
        node = HeapNode(key, value)
        self._push(node)
        self._size += 1
        return node

    def extract_minimum(self) -> HeapNode[V] | None:
        """Pop the value with the smallest key, or None if nothing is left."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry.stale:
                continue
            node: HeapNode[V] = entry.node
            node.extracted = True
            node._entry = None
            self._size -= 1
            return node
        return None

    def decrease_key(self, node: HeapNode[V], key: float) -> None:
        if node.extracted:
            raise ValueError("Cannot decrease the key of an extracted node")
        if key > node.key:
            raise ValueError(f"New key {key} is greater than current key {node.key}")
        if node._entry is not None:
            node._entry.stale = True
        node.key = key
        self._push(node)
