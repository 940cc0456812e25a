"""Tests for koch_ascii.geometry.shapes and .path — base shapes and assembly."""

from __future__ import annotations

import math

import pytest

from koch_ascii.config import RenderConfig, SurfaceGeometry
from koch_ascii.geometry.path import assemble, generate_points
from koch_ascii.geometry.shapes import base_shape, baseline, hexagon_vertices
from koch_ascii.types import Point

GEOMETRY = SurfaceGeometry.for_size(200, 160)


class TestBaseShape:
    def test_hexagon_starts_at_top(self):
        v = hexagon_vertices(100.0, 80.0, 50.0)
        assert len(v) == 6
        assert v[0].x == pytest.approx(100.0)
        assert v[0].y == pytest.approx(30.0)

    def test_hexagon_vertices_on_circle_and_evenly_spaced(self):
        v = hexagon_vertices(0.0, 0.0, 10.0)
        for p in v:
            assert math.hypot(p.x, p.y) == pytest.approx(10.0)
        for i in range(6):
            a, b = v[i], v[(i + 1) % 6]
            assert math.dist((a.x, a.y), (b.x, b.y)) == pytest.approx(10.0)

    def test_hexagon_edges_wrap_to_first_vertex(self):
        segs = base_shape(RenderConfig(depth=0), GEOMETRY)
        assert len(segs) == 6
        for (_, end), (start, _) in zip(segs, segs[1:]):
            assert end is start
        assert segs[-1][1] is segs[0][0]

    def test_single_edge_baseline(self):
        segs = base_shape(RenderConfig(depth=0, single_edge=True), GEOMETRY)
        assert segs == [(Point(10.0, 80.0), Point(190.0, 80.0))]
        assert segs == [baseline(GEOMETRY)]


class TestAssemble:
    @pytest.mark.parametrize("depth", range(6))
    @pytest.mark.parametrize("outward", [False, True])
    def test_hexagon_is_closed_loop(self, depth, outward):
        pts = generate_points(RenderConfig(depth=depth, outward=outward), GEOMETRY)
        assert pts[0] == pts[-1]
        assert len(pts) == 6 * 4**depth + 1

    @pytest.mark.parametrize("depth", range(6))
    def test_single_edge_endpoints(self, depth):
        pts = generate_points(RenderConfig(depth=depth, single_edge=True), GEOMETRY)
        assert pts[0] == Point(0.05 * 200, 80.0)
        assert pts[-1] == Point(0.95 * 200, 80.0)
        assert len(pts) == 4**depth + 1

    def test_depth_zero_single_edge_is_exactly_the_baseline(self):
        pts = generate_points(RenderConfig(depth=0, single_edge=True), GEOMETRY)
        assert pts == [Point(10.0, 80.0), Point(190.0, 80.0)]

    def test_depth_one_hexagon(self):
        pts = generate_points(RenderConfig(depth=1), GEOMETRY)
        assert len(pts) == 25
        assert len(set(pts[:-1])) == 24
        assert pts[0] == pts[-1]

    def test_joints_appear_once(self):
        pts = generate_points(RenderConfig(depth=3), GEOMETRY)
        assert all(a != b for a, b in zip(pts, pts[1:]))
        vertices = hexagon_vertices(GEOMETRY.center_x, GEOMETRY.center_y, GEOMETRY.base_radius)
        for i, v in enumerate(vertices):
            assert pts[i * 4**3] == v

    def test_open_path_of_two_segments(self):
        a, b, c = Point(0.0, 0.0), Point(9.0, 0.0), Point(9.0, 9.0)
        pts = assemble([(a, b), (b, c)], 1)
        assert len(pts) == 9
        assert pts[0] == a and pts[4] == b and pts[-1] == c

    def test_empty_segments(self):
        assert assemble([], 2) == []
