"""Occlusion-aware audio routing over a zoned map."""

from __future__ import annotations

import logging
import math
from typing import Iterable

from ..common.audio import get_volume
from ..common.geometry import Point
from ..config import MapConfig
from ..graph import Node, PathTree
from ..map.zoned_map import MapZone, ZonedMap

logger = logging.getLogger(__name__)


class OcclusionRouter:
    """Answer distance and volume queries between points of interest.

    Sources are resolved to their owning zone and a shortest-path tree is
    computed there. Trees are cached per source point that is a graph node;
    the zoned map is immutable so entries stay valid until clear_cache is
    called. Unknown sources are not cached.
    """

    def __init__(self, zoned_map: ZonedMap, config: MapConfig | None = None) -> None:
        self.zoned_map = zoned_map
        if config is None:
            config = MapConfig(speaking_radius=zoned_map.speaking_radius)
        elif config.speaking_radius != zoned_map.speaking_radius:
            raise ValueError(
                f"Config speaking_radius {config.speaking_radius} does not match "
                f"the zoned map's {zoned_map.speaking_radius}"
            )
        self.config = config
        # source point -> (zone, tree); only sources that are graph nodes
        self._tree_cache: dict[Point, tuple[MapZone, PathTree[Point]]] = {}

    def _tree_for(self, source: Point) -> tuple[MapZone, PathTree[Point]] | None:
        if source in self._tree_cache:
            return self._tree_cache[source]

        zone = self.zoned_map.get_zone_for_point(source)
        if zone is None:
            logger.debug(f"No zone for source {source}")
            return None
        node = zone.find_node(source)
        if node is None:
            logger.debug(f"Source {source} is not a point of interest in its zone")
            return None

        result = (zone, zone.graph.compute_spt(node))
        self._tree_cache[source] = result
        return result

    def _resolve(
        self, source: Point, destination: Point
    ) -> tuple[PathTree[Point], Node[Point]] | None:
        found = self._tree_for(source)
        if found is None:
            return None
        zone, tree = found
        node = zone.find_node(destination)
        if node is None:
            return None
        return tree, node

    def path_between(self, source: Point, destination: Point) -> list[Point] | None:
        """Route from destination back toward source (source excluded)."""
        resolved = self._resolve(source, destination)
        if resolved is None:
            return None
        tree, node = resolved
        path = tree.get_path_to(node)
        if path is None:
            return None
        return [n.value for n in path]

    def distance_between(self, source: Point, destination: Point) -> float:
        """Occluded travel distance, or inf when no route is known."""
        resolved = self._resolve(source, destination)
        if resolved is None:
            return math.inf
        tree, node = resolved
        return tree.distance_to(node)

    def get_audio_recipients(
        self, source: Point, listeners: Iterable[Point]
    ) -> list[tuple[Point, float]]:
        """
        Get list of (listener, volume) tuples for listeners that should hear
        source. Volume falls off with the distance around walls.
        """
        recipients = []
        for listener in listeners:
            if listener == source:
                continue
            volume = get_volume(
                self.distance_between(source, listener),
                self.config.speaking_radius,
                self.config.full_volume,
            )
            if volume > 0.0:
                recipients.append((listener, volume))
        return recipients

    def clear_cache(self, source: Point | None = None) -> None:
        """Clear cached trees for a source, or all if source is None."""
        if source is None:
            self._tree_cache.clear()
        else:
            self._tree_cache.pop(source, None)
