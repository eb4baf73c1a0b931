"""Zoned visibility graphs over a map.

The map is cut into a grid of zones spaced half a speaking radius apart.
Each zone covers 1.5 speaking radii around its center, so neighbouring
zones overlap, and owns a line-of-sight graph over the points of interest
it covers. Edges exist only where no nearby wall crosses the sight line.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from ..common.geometry import (
    Point,
    Segment,
    distance,
    segment_blocked,
    segment_near_circle,
    walls_to_array,
)
from ..graph import Graph, Node
from .source_map import SourceMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapZone:
    """Walls and visibility graph local to one grid cell."""

    walls: tuple[Segment, ...]
    graph: Graph[Point]

    def find_node(self, point: Point) -> Node[Point] | None:
        """Get the graph node placed at point, if any."""
        for node in self.graph.nodes:
            if node.value == point:
                return node
        return None


def build_zone(
    center: Point,
    coverage: float,
    source_map: SourceMap,
    clamp_wall_test: bool = False,
) -> MapZone:
    """Build the visibility graph for a zone centered at center."""
    walls = tuple(
        wall
        for wall in source_map.walls
        if segment_near_circle(center, coverage, wall, clamp=clamp_wall_test)
    )
    wall_array = walls_to_array(walls)

    graph: Graph[Point] = Graph()
    nodes = [
        graph.add_node(point)
        for point in source_map.nodes
        if distance(point, center) <= coverage
    ]

    for node in nodes:
        for other in nodes:
            if other is node:
                continue
            if segment_blocked((node.value, other.value), wall_array):
                continue
            graph.add_directed_edge(node, other, distance(node.value, other.value))

    return MapZone(walls=walls, graph=graph)


class ZonedMap:
    """Grid of overlapping zones, built once and read-only afterwards."""

    def __init__(
        self,
        speaking_radius: float,
        source_map: SourceMap,
        clamp_wall_test: bool = False,
    ) -> None:
        if speaking_radius <= 0:
            raise ValueError(f"Speaking radius must be positive, got {speaking_radius}")

        self._speaking_radius = speaking_radius
        self._zone_interval = speaking_radius / 2
        self._coverage = speaking_radius + self._zone_interval
        self._base = source_map.base
        width, height = source_map.size
        self._zone_counts = (
            math.floor(width / self._zone_interval),
            math.floor(height / self._zone_interval),
        )

        logger.debug(
            f"Building {self._zone_counts[0]}x{self._zone_counts[1]} zones "
            f"(interval {self._zone_interval}, coverage {self._coverage})"
        )
        zones: list[tuple[MapZone, ...]] = []
        for i in range(self._zone_counts[0]):
            column: list[MapZone] = []
            for j in range(self._zone_counts[1]):
                column.append(
                    build_zone(
                        self.zone_center(i, j),
                        self._coverage,
                        source_map,
                        clamp_wall_test,
                    )
                )
            zones.append(tuple(column))
        self._zones = tuple(zones)

        edge_count = sum(
            len(node.edges)
            for _, zone in self.iter_zones()
            for node in zone.graph.nodes
        )
        logger.info(
            f"Zoned map ready: {len(source_map.walls)} walls, "
            f"{len(source_map.nodes)} points, {edge_count} visibility edges"
        )

    @property
    def base(self) -> Point:
        return self._base

    @property
    def speaking_radius(self) -> float:
        return self._speaking_radius

    @property
    def zone_interval(self) -> float:
        return self._zone_interval

    @property
    def coverage(self) -> float:
        return self._coverage

    @property
    def zone_counts(self) -> tuple[int, int]:
        return self._zone_counts

    @property
    def zones(self) -> tuple[tuple[MapZone, ...], ...]:
        """Zones indexed as zones[x_index][y_index]."""
        return self._zones

    def iter_zones(self) -> Iterator[tuple[tuple[int, int], MapZone]]:
        for i, column in enumerate(self._zones):
            for j, zone in enumerate(column):
                yield (i, j), zone

    def zone_center(self, i: int, j: int) -> Point:
        return (
            self._base[0] + i * self._zone_interval,
            self._base[1] + j * self._zone_interval,
        )

    def get_zone_for_point(self, point: Point) -> MapZone | None:
        """Get the single zone owning point, or None outside the grid.

        Zones overlap, so other zones may also contain point as a node.
        """
        if not (math.isfinite(point[0]) and math.isfinite(point[1])):
            return None
        i = math.floor((point[0] - self._base[0]) / self._zone_interval)
        j = math.floor((point[1] - self._base[1]) / self._zone_interval)
        if not (0 <= i < self._zone_counts[0] and 0 <= j < self._zone_counts[1]):
            return None
        return self._zones[i][j]
