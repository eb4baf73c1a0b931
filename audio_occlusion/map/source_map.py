"""Raw map data: walls, points of interest and the viewport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..common.geometry import Point, Segment


@dataclass(frozen=True)
class SourceMap:
    """Ingested map geometry consumed by ZonedMap."""

    walls: tuple[Segment, ...]
    nodes: tuple[Point, ...]
    # Two opposite corners of the map bounds
    viewport: tuple[Point, Point]

    @property
    def base(self) -> Point:
        return self.viewport[0]

    @property
    def size(self) -> tuple[float, float]:
        """Width and height of the viewport."""
        (x0, y0), (x1, y1) = self.viewport
        return abs(x1 - x0), abs(y1 - y0)

    @classmethod
    def from_polygons(
        cls,
        polygons: Iterable[Sequence[Point]],
        points: Iterable[Point],
        viewport: tuple[Point, Point],
    ) -> SourceMap:
        """Build a map from closed polygons; each edge becomes a wall."""
        walls: list[Segment] = []
        for polygon in polygons:
            vertices = [(float(x), float(y)) for x, y in polygon]
            for i, vertex in enumerate(vertices):
                walls.append((vertex, vertices[(i + 1) % len(vertices)]))
        (x0, y0), (x1, y1) = viewport
        return cls(
            walls=tuple(walls),
            nodes=tuple((float(x), float(y)) for x, y in points),
            viewport=((float(x0), float(y0)), (float(x1), float(y1))),
        )
