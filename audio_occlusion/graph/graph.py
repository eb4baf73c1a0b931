"""Weighted graph with a Dijkstra shortest-path-tree computation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from ..errors import InvalidNodeError, QueueInvariantError
from .heap import HeapNode, PriorityQueue
from .path_tree import PathTree

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A graph node. id is its index in the owning graph."""

    id: int
    value: T
    # neighbor id -> edge weight
    edges: dict[int, float] = field(default_factory=dict)


class Graph(Generic[T]):
    """Nodes stored by id, with edges keyed by sibling ids."""

    def __init__(self) -> None:
        self._nodes: list[Node[T]] = []

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> Sequence[Node[T]]:
        return tuple(self._nodes)

    def node(self, node_id: int) -> Node[T]:
        """Get a node by id."""
        if not 0 <= node_id < len(self._nodes):
            raise InvalidNodeError(f"No node with id {node_id} in graph")
        return self._nodes[node_id]

    def _check_owned(self, node: Node[T]) -> None:
        if not (0 <= node.id < len(self._nodes) and self._nodes[node.id] is node):
            raise InvalidNodeError(f"Node {node.id} does not belong to this graph")

    def add_node(self, value: T) -> Node[T]:
        node = Node(len(self._nodes), value)
        self._nodes.append(node)
        return node

    def add_edge(self, a: Node[T], b: Node[T], weight: float) -> None:
        """Add an undirected edge (both directions, same weight)."""
        self.add_directed_edge(a, b, weight)
        self.add_directed_edge(b, a, weight)

    def add_directed_edge(self, a: Node[T], b: Node[T], weight: float) -> None:
        """Add an edge from a to b only."""
        self._check_owned(a)
        self._check_owned(b)
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")
        a.edges[b.id] = weight

    def clone(self) -> Graph[T]:
        """Copy the graph, keeping ids and edge directions."""
        out: Graph[T] = Graph()
        for node in self._nodes:
            out.add_node(node.value)
        for node in self._nodes:
            for neighbor_id, weight in node.edges.items():
                out.add_directed_edge(
                    out._nodes[node.id], out._nodes[neighbor_id], weight
                )
        return out

    def compute_spt(self, source: Node[T]) -> PathTree[T]:
        """Compute the shortest-path tree rooted at source (Dijkstra).

        Args:
            source: Root node; must belong to this graph.

        Returns:
            PathTree snapshot. Unreachable nodes keep an infinite distance
            and no predecessor.
        """
        self._check_owned(source)

        count = len(self._nodes)
        distances = [math.inf] * count
        previous: list[Node[T] | None] = [None] * count
        distances[source.id] = 0.0

        queue: PriorityQueue[Node[T]] = PriorityQueue()
        handles: list[HeapNode[Node[T]]] = [
            queue.insert(distances[n.id], n) for n in self._nodes
        ]

        while queue.size() > 0:
            entry = queue.extract_minimum()
            if entry is None:
                raise QueueInvariantError(
                    f"Priority queue reported {queue.size()} entries but yielded none"
                )
            node = entry.value
            for neighbor_id, weight in node.edges.items():
                alt = distances[node.id] + weight
                if alt < distances[neighbor_id]:
                    distances[neighbor_id] = alt
                    previous[neighbor_id] = node
                    queue.decrease_key(handles[neighbor_id], alt)

        return PathTree(source, previous, distances)
