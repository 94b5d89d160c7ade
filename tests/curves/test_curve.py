import math

import pytest

from geomkernel.curves.arc import Arc2d, Arc3d
from geomkernel.curves.curve import Curve2d, Curve3d, num_segments
from geomkernel.curves.elliptical_arc import EllipticalArc2d
from geomkernel.curves.spline import CubicSpline2d, QuadraticSpline2d
from geomkernel.primitives.axis import Axis2d, Axis3d
from geomkernel.primitives.direction import Direction2d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.shapes.line_segment import LineSegment2d, LineSegment3d

ORIGIN = Point2d.origin()


def make_curves():
    return [
        LineSegment2d(start_point=Point2d(x=1.0, y=2.0), end_point=Point2d(x=4.0, y=-1.0)),
        Arc2d.swept_around(ORIGIN, math.pi / 2, Point2d(x=1.0, y=0.0)),
        EllipticalArc2d.with_axes(ORIGIN, Direction2d.positive_x(), 2.0, 1.0, 0.0, math.pi),
        QuadraticSpline2d.from_control_points(ORIGIN, Point2d(x=1.0, y=2.0), Point2d(x=2.0, y=0.0)),
        CubicSpline2d.from_control_points(ORIGIN, Point2d(x=1.0, y=1.0), Point2d(x=2.0, y=1.0),
                                          Point2d(x=3.0, y=0.0)),
    ]


@pytest.fixture
def quarter():
    return Curve2d.of(Arc2d.swept_around(ORIGIN, math.pi / 2, Point2d(x=1.0, y=0.0)))


class TestCurve2d:
    @pytest.mark.parametrize("primitive", make_curves(), ids=lambda c: c.kind)
    def test_serialization_round_trip(self, primitive):
        curve = Curve2d.of(primitive)
        restored = Curve2d.model_validate(curve.model_dump())
        assert restored == curve
        assert type(restored.curve) is type(primitive)

    def test_of_keeps_existing_curve(self, quarter):
        assert Curve2d.of(quarter) is quarter

    def test_kind(self, quarter):
        assert quarter.kind() == "arc"

    def test_forwards_evaluation(self, quarter):
        assert quarter.start_point() == Point2d(x=1.0, y=0.0)
        assert quarter.point_on(0.5).is_close_to(Point2d(x=math.sqrt(0.5), y=math.sqrt(0.5)), 1e-12)
        assert quarter.max_second_derivative_magnitude().value == pytest.approx((math.pi / 2) ** 2)

    def test_segments_with_no_steps_is_empty(self, quarter):
        assert quarter.segments(0).vertices == ()
        assert quarter.segments(-1).vertices == ()

    def test_approximate(self, quarter):
        count = quarter.num_approximation_segments(1e-3)
        assert len(quarter.approximate(1e-3).vertices) == count + 1

    def test_bounding_box_of_line_segment_is_exact(self):
        curve = Curve2d.of(make_curves()[0])
        assert curve.bounding_box().extrema() == (1.0, 4.0, -1.0, 2.0)

    def test_bounding_box_of_arc(self, quarter):
        box = quarter.bounding_box()
        assert box.min_x == pytest.approx(0.0, abs=1e-9)
        assert box.max_x == pytest.approx(1.0)
        assert box.min_y == pytest.approx(0.0, abs=1e-9)
        assert box.max_y == pytest.approx(1.0)

    @pytest.mark.parametrize("primitive", make_curves(), ids=lambda c: c.kind)
    def test_bounding_box_is_tight(self, primitive):
        curve = Curve2d.of(primitive).rotate_around(Point2d(x=0.5, y=-0.5), 0.3)
        box = curve.bounding_box()
        samples = [curve.point_on(i / 500) for i in range(501)]
        assert all(box.expand_by(1e-12).contains(p) for p in samples)
        assert box.max_x == pytest.approx(max(p.x for p in samples), abs=1e-4)
        assert box.min_y == pytest.approx(min(p.y for p in samples), abs=1e-4)

    def test_transformations_rewrap(self, quarter):
        mirrored = quarter.mirror_across(Axis2d.x())
        assert isinstance(mirrored, Curve2d)
        assert mirrored.kind() == "arc"
        assert mirrored.end_point().is_close_to(Point2d(x=0.0, y=-1.0), 1e-12)
        assert isinstance(quarter.reverse(), Curve2d)
        assert isinstance(quarter.rotate_around(ORIGIN, 1.0), Curve2d)

    def test_place_on(self, quarter):
        lifted = quarter.place_on(SketchPlane3d.xz())
        assert isinstance(lifted, Curve3d)
        assert lifted.end_point().is_close_to(Point3d(x=0.0, y=0.0, z=1.0), 1e-12)


class TestCurve3d:
    def test_on(self):
        curve = Curve3d.on(SketchPlane3d.xy(), Arc2d.swept_around(ORIGIN, math.pi, Point2d(x=1.0, y=0.0)))
        assert curve.kind() == "arc"
        assert curve.end_point().is_close_to(Point3d(x=-1.0, y=0.0, z=0.0), 1e-12)

    def test_serialization_round_trip(self):
        curve = Curve3d.of(Arc3d.swept_around(Axis3d.z(), 1.0, Point3d(x=1.0, y=0.0, z=2.0)))
        restored = Curve3d.model_validate(curve.model_dump())
        assert restored == curve
        assert isinstance(restored.curve, Arc3d)

    def test_project_arc_becomes_elliptical(self):
        curve = Curve3d.of(Arc3d.swept_around(Axis3d.x(), 1.0, Point3d(x=0.0, y=1.0, z=0.0)))
        projected = curve.project_into(SketchPlane3d.xy())
        assert projected.kind() == "elliptical_arc"

    def test_project_line_segment(self):
        curve = Curve3d.of(LineSegment3d(start_point=Point3d(x=1.0, y=2.0, z=3.0), end_point=Point3d.origin()))
        projected = curve.project_into(SketchPlane3d.xy())
        assert projected.kind() == "line_segment"
        assert projected.start_point() == Point2d(x=1.0, y=2.0)

    def test_bounding_box_of_line_segment_is_exact(self):
        curve = Curve3d.of(LineSegment3d(start_point=Point3d(x=1.0, y=2.0, z=3.0), end_point=Point3d.origin()))
        box = curve.bounding_box()
        assert (box.min_x, box.max_x, box.min_z, box.max_z) == (0.0, 1.0, 0.0, 3.0)


def test_num_segments_is_exported():
    assert num_segments(1.0, 32.0) == 2
