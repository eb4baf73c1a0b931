"""Tests for zoned visibility graph construction and zone lookup."""

from __future__ import annotations

import math

import pytest

from audio_occlusion.map import MapZone, SourceMap, ZonedMap, build_zone


def _map(
    nodes: list[tuple[float, float]],
    walls: list[tuple[tuple[float, float], tuple[float, float]]] | None = None,
    viewport: tuple[tuple[float, float], tuple[float, float]] = ((0, 0), (20, 20)),
) -> SourceMap:
    return SourceMap(walls=tuple(walls or ()), nodes=tuple(nodes), viewport=viewport)


class TestSourceMap:
    """Tests for SourceMap helpers."""

    def test_from_polygons_closes_loops(self) -> None:
        source = SourceMap.from_polygons(
            [[(0, 0), (4, 0), (4, 3)]], [(1, 1)], ((0, 0), (10, 10))
        )
        assert source.walls == (
            ((0.0, 0.0), (4.0, 0.0)),
            ((4.0, 0.0), (4.0, 3.0)),
            ((4.0, 3.0), (0.0, 0.0)),
        )
        assert source.nodes == ((1.0, 1.0),)

    def test_size_and_base(self) -> None:
        source = _map([], viewport=((5, 10), (25, 40)))
        assert source.base == (5, 10)
        assert source.size == (20, 30)


class TestZonedMapConstruction:
    """Tests for ZonedMap grid layout and per-zone graphs."""

    def test_interval_and_coverage(self) -> None:
        zoned = ZonedMap(10, _map([]))
        assert zoned.zone_interval == 5
        assert zoned.coverage == 15
        assert zoned.speaking_radius == 10

    def test_zone_counts(self) -> None:
        zoned = ZonedMap(10, _map([], viewport=((0, 0), (22, 13))))
        assert zoned.zone_counts == (4, 2)
        assert len(zoned.zones) == 4
        assert all(len(column) == 2 for column in zoned.zones)

    def test_non_positive_radius_rejected(self) -> None:
        with pytest.raises(ValueError):
            ZonedMap(0, _map([]))

    def test_point_at_center_is_node(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5)]))
        assert zoned.zone_center(1, 1) == (5, 5)
        zone = zoned.zones[1][1]
        assert [n.value for n in zone.graph.nodes] == [(5, 5)]

    def test_coverage_boundary_inclusive(self) -> None:
        zoned = ZonedMap(10, _map([(15, 0), (15.5, 0)]))
        values = [n.value for n in zoned.zones[0][0].graph.nodes]
        assert values == [(15, 0)]

    def test_zones_overlap(self) -> None:
        zoned = ZonedMap(10, _map([(7, 7)]))
        holders = [
            index
            for index, zone in zoned.iter_zones()
            if zone.find_node((7, 7)) is not None
        ]
        assert (1, 1) in holders
        assert len(holders) > 1

    def test_visible_pair_has_edges_both_ways(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5), (15, 5)]))
        zone = zoned.zones[1][1]
        a, b = zone.find_node((5, 5)), zone.find_node((15, 5))
        assert a is not None and b is not None
        assert a.edges == {b.id: 10.0}
        assert b.edges == {a.id: 10.0}

    def test_wall_blocks_edge(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5), (15, 5)], [((10, 0), (10, 10))]))
        zone = zoned.zones[1][1]
        assert ((10, 0), (10, 10)) in zone.walls
        assert all(node.edges == {} for node in zone.graph.nodes)

    def test_wall_corner_does_not_block(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5), (15, 5)], [((10, 5), (10, 15))]))
        zone = zoned.zones[1][1]
        a = zone.find_node((5, 5))
        assert a is not None and len(a.edges) == 1

    def test_far_wall_ignored(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5)], [((100, 100), (100, 120))]))
        assert zoned.zones[1][1].walls == ()

    def test_line_approximation_vs_exact(self) -> None:
        # Wall lies on the line through the center but far along it
        wall = ((100.0, 5.0), (110.0, 5.0))
        approx = build_zone((5, 5), 15, _map([], [wall]))
        exact = build_zone((5, 5), 15, _map([], [wall]), clamp_wall_test=True)
        assert approx.walls == (wall,)
        assert exact.walls == ()

    def test_zone_is_frozen(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5)]))
        with pytest.raises(AttributeError):
            zoned.zones[0][0].walls = ()  # type: ignore[misc]
        assert isinstance(zoned.zones, tuple)


class TestZoneLookup:
    """Tests for ZonedMap.get_zone_for_point."""

    def test_inside(self) -> None:
        zoned = ZonedMap(10, _map([]))
        assert zoned.get_zone_for_point((5, 5)) is zoned.zones[1][1]
        assert zoned.get_zone_for_point((0, 0)) is zoned.zones[0][0]
        assert zoned.get_zone_for_point((19.9, 19.9)) is zoned.zones[3][3]
        assert zoned.get_zone_for_point((7.5, 12)) is zoned.zones[1][2]

    @pytest.mark.parametrize(
        "point",
        [(-0.1, 5), (5, -0.1), (20, 5), (5, 20), (25, 25), (-5, -5)],
    )
    def test_outside(self, point: tuple[float, float]) -> None:
        zoned = ZonedMap(10, _map([]))
        assert zoned.get_zone_for_point(point) is None

    def test_offset_base(self) -> None:
        zoned = ZonedMap(10, _map([], viewport=((10, 10), (30, 30))))
        assert zoned.base == (10, 10)
        assert zoned.get_zone_for_point((10, 10)) is zoned.zones[0][0]
        assert zoned.get_zone_for_point((9.9, 10)) is None

    @pytest.mark.parametrize(
        "point",
        [(math.inf, 5.0), (5.0, -math.inf), (math.nan, 5.0), (5.0, math.nan)],
    )
    def test_non_finite(self, point: tuple[float, float]) -> None:
        zoned = ZonedMap(10, _map([]))
        assert zoned.get_zone_for_point(point) is None

    def test_empty_grid(self) -> None:
        zoned = ZonedMap(10, _map([], viewport=((0, 0), (4, 4))))
        assert zoned.zone_counts == (0, 0)
        assert zoned.get_zone_for_point((1, 1)) is None


class TestScenario:
    """Two points of interest, with and without a wall between them."""

    def test_open_line_of_sight(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5), (15, 5)]))
        zone = zoned.get_zone_for_point((5, 5))
        assert isinstance(zone, MapZone)
        source, dest = zone.find_node((5, 5)), zone.find_node((15, 5))
        assert source is not None and dest is not None
        tree = zone.graph.compute_spt(source)
        assert tree.distance_to(dest) == 10
        assert tree.get_path_to(dest) == [dest]

    def test_wall_without_detour(self) -> None:
        zoned = ZonedMap(10, _map([(5, 5), (15, 5)], [((10, 0), (10, 10))]))
        zone = zoned.get_zone_for_point((5, 5))
        assert zone is not None
        source, dest = zone.find_node((5, 5)), zone.find_node((15, 5))
        assert source is not None and dest is not None
        tree = zone.graph.compute_spt(source)
        assert tree.get_path_to(dest) is None
        assert math.isinf(tree.distance_to(dest))

    def test_wall_with_detour(self) -> None:
        zoned = ZonedMap(
            10, _map([(5, 5), (15, 5), (10, 15)], [((10, 0), (10, 10))])
        )
        zone = zoned.get_zone_for_point((5, 5))
        assert zone is not None
        source, dest = zone.find_node((5, 5)), zone.find_node((15, 5))
        corner = zone.find_node((10, 15))
        assert source is not None and dest is not None and corner is not None
        tree = zone.graph.compute_spt(source)
        assert tree.get_path_to(dest) == [dest, corner]
        assert math.isclose(tree.distance_to(dest), 2 * math.sqrt(125))
