import math

import numpy as np
import pytest

from phyllotaxis.errors import InvalidParameter
from phyllotaxis.model.curves import (
    ArcCurve,
    BezierCurve,
    CompositeCurve,
    LineCurve,
    PolylineCurve,
    ProfileCurve,
)
from phyllotaxis.model.geometry_primitives import Point


class TestLineCurve:
    def test_length_and_midpoint(self, cylinder_profile):
        assert cylinder_profile.length() == pytest.approx(20.0)
        assert cylinder_profile.point_at_arc_length(5.0) == Point(10.0, 0.0, 5.0)

    def test_queries_are_clamped(self, cylinder_profile):
        assert cylinder_profile.point_at_arc_length(-1.0) == Point(10.0, 0.0, 0.0)
        assert cylinder_profile.point_at_arc_length(25.0) == Point(10.0, 0.0, 20.0)

    def test_zero_length(self):
        line = LineCurve(Point(1.0, 0.0, 0.0), Point(1.0, 0.0, 0.0))
        assert line.length() == 0.0
        assert line.point_at_arc_length(0.0) == Point(1.0, 0.0, 0.0)


class TestArcCurve:
    def test_half_circle(self, sphere_profile):
        assert sphere_profile.length() == pytest.approx(10.0 * math.pi)
        south = sphere_profile.point_at_arc_length(0.0)
        equator = sphere_profile.point_at_arc_length(5.0 * math.pi)
        north = sphere_profile.point_at_arc_length(10.0 * math.pi)
        np.testing.assert_allclose(south.to_array(), [0.0, 0.0, -10.0], atol=1e-12)
        np.testing.assert_allclose(equator.to_array(), [10.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(north.to_array(), [0.0, 0.0, 10.0], atol=1e-12)

    def test_clockwise_arc(self):
        arc = ArcCurve(center=Point(0.0, 0.0, 0.0), radius=2.0, start_angle=math.pi / 2, end_angle=0.0)
        assert arc.length() == pytest.approx(math.pi)
        np.testing.assert_allclose(arc.point_at_arc_length(math.pi).to_array(), [2.0, 0.0, 0.0], atol=1e-12)

    def test_rejects_non_positive_radius(self):
        with pytest.raises(InvalidParameter):
            ArcCurve(center=Point(0.0, 0.0, 0.0), radius=0.0, start_angle=0.0, end_angle=1.0)


class TestBezierCurve:
    def test_collinear_control_points_give_a_segment(self):
        curve = BezierCurve(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 1.0), Point(0.0, 0.0, 2.0), Point(0.0, 0.0, 3.0))
        assert curve.length() == pytest.approx(3.0)
        np.testing.assert_allclose(curve.point_at_arc_length(1.5).to_array(), [0.0, 0.0, 1.5], atol=1e-9)

    def test_length_matches_dense_polyline(self, vase_profile):
        body = vase_profile.curves[0]
        dense = body.evaluate(np.linspace(0.0, 1.0, 20001))
        polyline_length = np.linalg.norm(np.diff(dense, axis=0), axis=1).sum()
        assert body.length() == pytest.approx(polyline_length, rel=1e-6)

    def test_arc_length_lookup_is_roughly_uniform(self, vase_profile):
        body = vase_profile.curves[0]
        pts = body.sample(101)
        spacing = np.linalg.norm(np.diff(pts, axis=0), axis=1)
        assert spacing == pytest.approx(np.full(100, body.length() / 100), rel=1e-2)

    def test_end_points(self, vase_profile):
        body = vase_profile.curves[0]
        assert body.point_at_arc_length(0.0) == Point(0.0, 0.0, 0.0)
        np.testing.assert_allclose(body.point_at_arc_length(body.length()).to_array(), [5.0, 0.0, 18.0], atol=1e-9)

    def test_rejects_tiny_lookup_table(self):
        with pytest.raises(InvalidParameter):
            BezierCurve(Point(0, 0, 0), Point(1, 0, 0), Point(2, 0, 0), Point(3, 0, 0), samples=1)


class TestPolylineCurve:
    def test_length_and_lookup(self):
        curve = PolylineCurve([(0.0, 0.0, 0.0), (3.0, 0.0, 0.0), (3.0, 0.0, 4.0)])
        assert curve.length() == pytest.approx(7.0)
        assert curve.point_at_arc_length(5.0) == Point(3.0, 0.0, 2.0)
        assert curve.point_at_arc_length(7.0) == Point(3.0, 0.0, 4.0)

    def test_repeated_vertices(self):
        curve = PolylineCurve([Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 2.0)])
        assert curve.length() == pytest.approx(2.0)
        assert curve.point_at_arc_length(1.0) == Point(0.0, 0.0, 1.0)

    def test_needs_two_points(self):
        with pytest.raises(InvalidParameter):
            PolylineCurve([Point(0.0, 0.0, 0.0)])


class TestCompositeCurve:
    def test_length_is_sum_of_members(self, vase_profile):
        body, neck = vase_profile.curves
        assert vase_profile.length() == pytest.approx(body.length() + neck.length())

    def test_dispatches_to_member(self, vase_profile):
        body, neck = vase_profile.curves
        p = vase_profile.point_at_arc_length(body.length() + neck.length() / 2)
        np.testing.assert_allclose(p.to_array(), [5.5, 0.0, 21.0], atol=1e-9)

    def test_rejects_non_curves(self):
        with pytest.raises(InvalidParameter):
            CompositeCurve([object()])
        with pytest.raises(InvalidParameter):
            CompositeCurve([])


def test_sample_includes_both_ends(cylinder_profile):
    pts = cylinder_profile.sample(5)
    assert pts.shape == (5, 3)
    np.testing.assert_allclose(pts[:, 2], [0.0, 5.0, 10.0, 15.0, 20.0])
    with pytest.raises(InvalidParameter):
        cylinder_profile.sample(1)


def test_profile_curve_is_structural(cylinder_profile):
    class External:
        def length(self):
            return 1.0

        def point_at_arc_length(self, s):
            return (1.0, 0.0, s)

    assert isinstance(cylinder_profile, ProfileCurve)
    assert isinstance(External(), ProfileCurve)
    assert not isinstance(object(), ProfileCurve)
