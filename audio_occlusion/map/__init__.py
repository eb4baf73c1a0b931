"""Map ingestion and zoned visibility graphs."""

from .source_map import SourceMap
from .svg_loader import load_svg_file, load_svg_map
from .zoned_map import MapZone, ZonedMap, build_zone

__all__ = [
    "SourceMap",
    "MapZone",
    "ZonedMap",
    "build_zone",
    "load_svg_map",
    "load_svg_file",
]
