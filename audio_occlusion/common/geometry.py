"""2D geometry primitives for line-of-sight tests."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import numpy.typing as npt

Point = tuple[float, float]
Segment = tuple[Point, Point]


def distance(p0: Point, p1: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p0[0] - p1[0], p0[1] - p1[1])


def segments_intersect(s0: Segment, s1: Segment) -> bool:
    """Check whether two segments cross each other.

    Parallel and collinear segments never count as intersecting, and
    neither does touching at an endpoint: both intersection parameters must
    lie strictly inside (0, 1). This lets sight lines graze wall corners.
    """
    (ax, ay), (bx, by) = s0
    (cx, cy), (dx, dy) = s1
    delta = (bx - ax) * (dy - cy) - (dx - cx) * (by - ay)
    if delta == 0:
        return False
    lam = ((dy - cy) * (dx - ax) + (cx - dx) * (dy - ay)) / delta
    gamma = ((ay - by) * (dx - ax) + (bx - ax) * (dy - ay)) / delta
    return 0 < lam < 1 and 0 < gamma < 1


def segment_near_circle(
    center: Point, radius: float, segment: Segment, clamp: bool = False
) -> bool:
    """Check whether a segment comes within radius of center.

    An endpoint within the radius always counts. Otherwise the distance from
    center to the infinite line through the segment is compared, which also
    accepts segments whose extension passes nearby. With clamp=True the
    closest point is restricted to the segment itself.
    """
    p0, p1 = segment
    if distance(center, p0) <= radius or distance(center, p1) <= radius:
        return True

    vx, vy = p1[0] - p0[0], p1[1] - p0[1]
    length = math.hypot(vx, vy)
    if length == 0:
        return False
    wx, wy = center[0] - p0[0], center[1] - p0[1]

    if clamp:
        t = max(0.0, min(1.0, (vx * wx + vy * wy) / (length * length)))
        closest = (p0[0] + t * vx, p0[1] + t * vy)
        return distance(center, closest) < radius

    # Cross product with the unit direction is the perpendicular distance
    return abs((vx * wy - vy * wx) / length) < radius


def walls_to_array(walls: Sequence[Segment]) -> npt.NDArray[np.float64]:
    """Pack wall segments into an (n, 2, 2) float array."""
    if not walls:
        return np.empty((0, 2, 2), dtype=np.float64)
    return np.asarray(walls, dtype=np.float64).reshape(-1, 2, 2)


def segment_blocked(segment: Segment, walls: npt.NDArray[np.float64]) -> bool:
    """Check a segment against many walls at once.

    Same semantics as segments_intersect, evaluated for every row of an
    (n, 2, 2) wall array. Returns True if any wall crosses the segment.
    """
    if len(walls) == 0:
        return False
    (ax, ay), (bx, by) = segment
    cx, cy = walls[:, 0, 0], walls[:, 0, 1]
    dx, dy = walls[:, 1, 0], walls[:, 1, 1]

    delta = (bx - ax) * (dy - cy) - (dx - cx) * (by - ay)
    nonparallel = delta != 0
    if not nonparallel.any():
        return False

    with np.errstate(divide="ignore", invalid="ignore"):
        lam = ((dy - cy) * (dx - ax) + (cx - dx) * (dy - ay)) / delta
        gamma = ((ay - by) * (dx - ax) + (bx - ax) * (dy - ay)) / delta

    hits = nonparallel & (0 < lam) & (lam < 1) & (0 < gamma) & (gamma < 1)
    return bool(hits.any())
