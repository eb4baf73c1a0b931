"""Shortest-path tree produced by Graph.compute_spt."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Generic, Sequence, TypeVar

from ..errors import InvalidNodeError

if TYPE_CHECKING:
    from .graph import Node

T = TypeVar("T")


class PathTree(Generic[T]):
    """Predecessor and distance tables for one source node.

    A snapshot: later changes to the graph are not reflected here.
    """

    def __init__(
        self,
        source: Node[T],
        previous_nodes: Sequence[Node[T] | None],
        distances: Sequence[float],
    ) -> None:
        self._source = source
        self._previous_nodes = tuple(previous_nodes)
        self._distances = tuple(distances)

    @property
    def source(self) -> Node[T]:
        return self._source

    def _check_index(self, node: Node[T]) -> None:
        if not 0 <= node.id < len(self._distances):
            raise InvalidNodeError(f"Node {node.id} is not part of this path tree")

    def distance_to(self, destination: Node[T]) -> float:
        """Shortest distance from the source, or inf if unreachable."""
        self._check_index(destination)
        return self._distances[destination.id]

    def is_reachable(self, destination: Node[T]) -> bool:
        return not math.isinf(self.distance_to(destination))

    def get_path_to(self, destination: Node[T]) -> list[Node[T]] | None:
        """Walk the predecessor chain from destination back to the source.

        Returns:
            Nodes from destination toward the source (source excluded), or
            None if destination is unreachable or is the source itself.
        """
        self._check_index(destination)
        path: list[Node[T]] = []
        node = destination
        while self._previous_nodes[node.id] is not None:
            path.append(node)
            node = self._previous_nodes[node.id]  # type: ignore[assignment]
            if node is self._source:
                return path
        return None
