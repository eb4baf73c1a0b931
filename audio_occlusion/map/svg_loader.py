"""Load a SourceMap from an SVG map document.

Expected layout: the root <svg> carries a viewBox and contains <g> layers
identified by id. The wall layer holds <polygon> elements, each a closed
loop of walls. The node layer holds <circle> elements whose centers are
the points of interest.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from ..common.constants import NODE_LAYER_ID, WALL_LAYER_ID
from ..common.geometry import Point
from ..errors import MapFormatError
from .source_map import SourceMap

logger = logging.getLogger(__name__)


def _local(tag: str) -> str:
    """Strip an XML namespace from a tag name."""
    return tag.rsplit("}", 1)[-1]


def _children(layer: ET.Element, name: str) -> list[ET.Element]:
    """All descendants of layer with the given tag, with or without namespace."""
    return [el for el in layer.iter() if el is not layer and _local(el.tag) == name]


def _parse_numbers(text: str) -> list[float]:
    try:
        return [float(v) for v in re.split(r"[\s,]+", text.strip()) if v]
    except ValueError as e:
        raise MapFormatError(f"Invalid number list: {text!r}") from e


def _parse_points(text: str) -> list[Point]:
    """Parse a polygon points attribute like '0,0 10,0 10,10'."""
    values = _parse_numbers(text)
    if len(values) % 2:
        raise MapFormatError(f"Odd number of coordinates in points: {text!r}")
    return [(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def load_svg_map(svg: str) -> SourceMap:
    """Parse SVG text into walls, points of interest and viewport."""
    try:
        root = ET.fromstring(svg)
    except ET.ParseError as e:
        raise MapFormatError(f"Invalid SVG document: {e}") from e

    if _local(root.tag) != "svg":
        raise MapFormatError(f"Root element is <{_local(root.tag)}>, expected <svg>")

    view_box = root.get("viewBox")
    if view_box is None:
        raise MapFormatError("SVG root has no viewBox")
    dims = _parse_numbers(view_box)
    if len(dims) != 4:
        raise MapFormatError(f"viewBox needs 4 values, got {view_box!r}")
    min_x, min_y, width, height = dims

    layers = {
        g.get("id"): g for g in root.iter() if _local(g.tag) == "g" and g.get("id")
    }
    for layer_id in (WALL_LAYER_ID, NODE_LAYER_ID):
        if layer_id not in layers:
            raise MapFormatError(f"SVG has no <g id={layer_id!r}> layer")

    polygons: list[list[Point]] = []
    for polygon in _children(layers[WALL_LAYER_ID], "polygon"):
        points_attr = polygon.get("points")
        if points_attr is None:
            raise MapFormatError("Polygon in wall layer has no points attribute")
        polygons.append(_parse_points(points_attr))

    points: list[Point] = []
    for circle in _children(layers[NODE_LAYER_ID], "circle"):
        cx, cy = circle.get("cx"), circle.get("cy")
        if cx is None or cy is None:
            raise MapFormatError("Circle in node layer is missing cx/cy")
        center = _parse_numbers(f"{cx} {cy}")
        if len(center) != 2:
            raise MapFormatError(f"Invalid circle center: cx={cx!r} cy={cy!r}")
        points.append((center[0], center[1]))

    logger.debug(f"Loaded SVG map: {len(polygons)} polygons, {len(points)} nodes")
    return SourceMap.from_polygons(
        polygons,
        points,
        ((min_x, min_y), (min_x + width, min_y + height)),
    )


def load_svg_file(path: Path | str) -> SourceMap:
    """Read and parse an SVG map file."""
    return load_svg_map(Path(path).read_text(encoding="utf-8"))
