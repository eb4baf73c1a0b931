"""Occlusion-aware audio distances on 2D maps.

Example usage:

    from audio_occlusion import OcclusionRouter, SourceMap, ZonedMap

    source_map = SourceMap.from_polygons(
        polygons=[[(40, 10), (45, 10), (45, 30), (40, 30)]],
        points=[(20, 20), (70, 20), (42, 50)],
        viewport=((0, 0), (100, 100)),
    )
    zoned_map = ZonedMap(speaking_radius=100, source_map=source_map)
    router = OcclusionRouter(zoned_map)

    router.distance_between((20, 20), (70, 20))  # around the wall
    router.get_audio_recipients((20, 20), source_map.nodes)
"""

from .audio import OcclusionRouter
from .config import MapConfig
from .errors import (
    AudioGraphError,
    InvalidNodeError,
    MapFormatError,
    QueueInvariantError,
)
from .graph import Graph, Node, PathTree
from .map import MapZone, SourceMap, ZonedMap, load_svg_file, load_svg_map

__all__ = [
    "Graph",
    "Node",
    "PathTree",
    "SourceMap",
    "MapZone",
    "ZonedMap",
    "MapConfig",
    "OcclusionRouter",
    "load_svg_map",
    "load_svg_file",
    "AudioGraphError",
    "InvalidNodeError",
    "QueueInvariantError",
    "MapFormatError",
]
