import math

import pytest

from geomkernel.curves.arc import Arc2d, Arc3d
from geomkernel.primitives.axis import Axis2d, Axis3d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.frame import Frame2d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.primitives.vector import Vector2d
from geomkernel.units.angle import Angle

PARAMETERS = (0.0, 0.2, 0.5, 0.9, 1.0)


@pytest.fixture
def quarter():
    return Arc2d.swept_around(Point2d.origin(), Angle.degrees(90), Point2d(x=1.0, y=0.0))


class TestArc2d:
    def test_swept_around(self, quarter):
        assert quarter.radius == 1.0
        assert quarter.start_point() == Point2d(x=1.0, y=0.0)
        assert quarter.end_point().is_close_to(Point2d(x=0.0, y=1.0), 1e-12)
        assert quarter.length().value == pytest.approx(math.pi / 2)
        assert quarter.start_angle().value == 0.0
        assert quarter.sweep().in_degrees() == pytest.approx(90.0)

    def test_from_endpoints_counterclockwise(self):
        arc = Arc2d.from_endpoints(Point2d(x=1.0, y=0.0), Point2d(x=0.0, y=1.0), math.pi / 2)
        assert arc.center_point.is_close_to(Point2d.origin(), 1e-12)
        assert arc.radius == pytest.approx(1.0)
        assert arc.end_point().is_close_to(Point2d(x=0.0, y=1.0), 1e-12)

    def test_from_endpoints_clockwise(self):
        arc = Arc2d.from_endpoints(Point2d(x=1.0, y=0.0), Point2d(x=0.0, y=1.0), -math.pi / 2)
        assert arc.center_point.is_close_to(Point2d(x=1.0, y=1.0), 1e-12)
        assert arc.end_point().is_close_to(Point2d(x=0.0, y=1.0), 1e-12)

    def test_from_endpoints_large_sweep(self):
        arc = Arc2d.from_endpoints(Point2d(x=1.0, y=0.0), Point2d(x=0.0, y=-1.0), Angle.degrees(270))
        assert arc.center_point.is_close_to(Point2d.origin(), 1e-12)
        assert arc.point_on(0.5).is_close_to(Point2d(x=-math.sqrt(0.5), y=math.sqrt(0.5)), 1e-12)

    def test_from_endpoints_degenerate(self):
        p = Point2d(x=1.0, y=0.0)
        assert Arc2d.from_endpoints(p, p, math.pi / 2) is None
        assert Arc2d.from_endpoints(p, Point2d(x=0.0, y=1.0), 0.0) is None
        assert Arc2d.from_endpoints(p, Point2d(x=0.0, y=1.0), Angle.turns(1)) is None

    def test_through_points_counterclockwise(self):
        arc = Arc2d.through_points(Point2d(x=1.0, y=0.0), Point2d(x=0.0, y=1.0), Point2d(x=-1.0, y=0.0))
        assert arc.swept_angle == pytest.approx(math.pi)
        assert arc.end_point().is_close_to(Point2d(x=-1.0, y=0.0), 1e-12)

    def test_through_points_clockwise(self):
        arc = Arc2d.through_points(Point2d(x=1.0, y=0.0), Point2d(x=0.0, y=-1.0), Point2d(x=-1.0, y=0.0))
        assert arc.swept_angle == pytest.approx(-math.pi)
        assert arc.point_on(0.5).is_close_to(Point2d(x=0.0, y=-1.0), 1e-12)

    def test_through_collinear_points_is_none(self):
        assert Arc2d.through_points(Point2d(x=0.0, y=0.0), Point2d(x=1.0, y=0.0), Point2d(x=2.0, y=0.0)) is None

    def test_derivatives(self, quarter):
        assert quarter.first_derivative(0.0).equal_within(1e-12, Vector2d(x=0.0, y=math.pi / 2))
        assert quarter.max_second_derivative_magnitude().value == pytest.approx((math.pi / 2) ** 2)

    def test_reverse(self, quarter):
        reversed_arc = quarter.reverse()
        assert reversed_arc.start_point().is_close_to(quarter.end_point(), 1e-12)
        assert reversed_arc.end_point().is_close_to(quarter.start_point(), 1e-12)
        assert reversed_arc.swept_angle == -quarter.swept_angle

    def test_mirror_negates_sweep(self, quarter):
        axis = Axis2d.x()
        mirrored = quarter.mirror_across(axis)
        assert mirrored.swept_angle == -quarter.swept_angle
        for t in PARAMETERS:
            assert mirrored.point_on(t).is_close_to(quarter.point_on(t).mirror_across(axis), 1e-12)

    def test_left_handed_frame_negates_sweep(self, quarter):
        frame = Frame2d.at_point(Point2d(x=2.0, y=1.0)).reverse_y()
        local = quarter.relative_to(frame)
        assert local.swept_angle == -quarter.swept_angle
        for t in PARAMETERS:
            assert local.point_on(t).is_close_to(quarter.point_on(t).relative_to(frame), 1e-12)
        assert local.place_in(frame).swept_angle == quarter.swept_angle

    def test_right_handed_frame_keeps_sweep(self, quarter):
        frame = Frame2d.with_x_direction(Direction2d.from_angle(0.4), Point2d(x=-1.0, y=3.0))
        local = quarter.relative_to(frame)
        assert local.swept_angle == quarter.swept_angle
        for t in PARAMETERS:
            assert local.point_on(t).is_close_to(quarter.point_on(t).relative_to(frame), 1e-12)

    def test_negative_scale(self, quarter):
        scaled = quarter.scale_about(Point2d(x=1.0, y=1.0), -2.0)
        assert scaled.radius == 2.0
        for t in PARAMETERS:
            assert scaled.point_on(t).is_close_to(quarter.point_on(t).scale_about(Point2d(x=1.0, y=1.0), -2.0), 1e-12)

    def test_to_elliptical_arc(self, quarter):
        elliptical = quarter.to_elliptical_arc()
        for t in PARAMETERS:
            assert elliptical.point_on(t).is_close_to(quarter.point_on(t), 1e-12)

    def test_approximate(self, quarter):
        polyline = quarter.approximate(1e-3)
        for vertex in polyline.vertices:
            assert vertex.distance_from(quarter.center_point).value == pytest.approx(1.0)


class TestArc3d:
    def test_swept_around(self):
        arc = Arc3d.swept_around(Axis3d.z(), Angle.degrees(90), Point3d(x=1.0, y=0.0, z=1.0))
        assert arc.center_point == Point3d(x=0.0, y=0.0, z=1.0)
        assert arc.end_point().is_close_to(Point3d(x=0.0, y=1.0, z=1.0), 1e-12)
        assert arc.axial_direction() == Direction3d.positive_z()

    def test_swept_around_reversed_axis(self):
        arc = Arc3d.swept_around(Axis3d.z().reverse(), Angle.degrees(90), Point3d(x=1.0, y=0.0, z=0.0))
        assert arc.end_point().is_close_to(Point3d(x=0.0, y=-1.0, z=0.0), 1e-12)

    def test_through_points(self):
        first = Point3d(x=1.0, y=0.0, z=0.0)
        second = Point3d(x=0.0, y=0.0, z=1.0)
        third = Point3d(x=-1.0, y=0.0, z=0.0)
        arc = Arc3d.through_points(first, second, third)
        assert arc.start_point().is_close_to(first, 1e-12)
        assert arc.point_on(0.5).is_close_to(second, 1e-12)
        assert arc.end_point().is_close_to(third, 1e-12)

    def test_through_collinear_points_is_none(self):
        assert Arc3d.through_points(Point3d.origin(), Point3d(x=1.0, y=1.0, z=1.0),
                                    Point3d(x=2.0, y=2.0, z=2.0)) is None

    def test_on_sketch_plane(self):
        arc = Arc2d.swept_around(Point2d.origin(), math.pi / 2, Point2d(x=1.0, y=0.0))
        lifted = arc.place_on(SketchPlane3d.yz())
        for t in PARAMETERS:
            assert lifted.point_on(t).is_close_to(arc.point_on(t).place_on(SketchPlane3d.yz()), 1e-12)

    def test_reverse(self):
        arc = Arc3d.swept_around(Axis3d.x(), 2.0, Point3d(x=0.0, y=1.0, z=0.0))
        reversed_arc = arc.reverse()
        for t in PARAMETERS:
            assert reversed_arc.point_on(t).is_close_to(arc.point_on(1.0 - t), 1e-12)

    def test_mirror(self):
        arc = Arc3d.swept_around(Axis3d.z(), 1.5, Point3d(x=2.0, y=0.0, z=1.0))
        mirrored = arc.mirror_across(Plane3d.zx())
        for t in PARAMETERS:
            assert mirrored.point_on(t).is_close_to(arc.point_on(t).mirror_across(Plane3d.zx()), 1e-12)

    def test_project_into_parallel_plane(self):
        arc = Arc3d.swept_around(Axis3d.z(), math.pi / 2, Point3d(x=2.0, y=0.0, z=3.0))
        projected = arc.project_into(SketchPlane3d.xy())
        assert projected.x_radius == pytest.approx(2.0)
        assert projected.y_radius == pytest.approx(2.0)
        for t in PARAMETERS:
            assert projected.point_on(t).is_close_to(arc.point_on(t).project_into(SketchPlane3d.xy()), 1e-9)

    def test_project_into_tilted_plane(self):
        arc = Arc3d.swept_around(Axis3d.z(), math.pi, Point3d(x=1.0, y=0.0, z=0.0))
        sketch = SketchPlane3d.xz()
        projected = arc.project_into(sketch)
        for t in PARAMETERS:
            assert projected.point_on(t).is_close_to(arc.point_on(t).project_into(sketch), 1e-9)


class TestArcBoundingBox:
    def test_arc_centred_on_x_axis_reaches_full_radius(self):
        start = Point2d(x=math.cos(math.radians(-50)), y=math.sin(math.radians(-50)))
        arc = Arc2d.swept_around(Point2d.origin(), Angle.degrees(100), start)
        box = arc.bounding_box()
        assert box.max_x == pytest.approx(1.0)
        assert box.min_x == pytest.approx(math.cos(math.radians(50)))
        assert box.min_y == pytest.approx(-math.sin(math.radians(50)))
        assert box.max_y == pytest.approx(math.sin(math.radians(50)))

    def test_clockwise_sweep(self):
        arc = Arc2d.swept_around(Point2d.origin(), -math.pi, Point2d(x=0.0, y=1.0))
        box = arc.bounding_box()
        assert box.extrema() == pytest.approx((0.0, 1.0, -1.0, 1.0), abs=1e-12)

    def test_contains_every_sample(self, quarter):
        arc = quarter.translate_by(Vector2d(x=3.0, y=-1.0)).rotate_around(Point2d.origin(), 0.4)
        box = arc.bounding_box().expand_by(1e-12)
        assert all(box.contains(arc.point_on(i / 200)) for i in range(201))

    def test_arc3d(self):
        arc = Arc3d.swept_around(Axis3d.x(), math.pi, Point3d(x=2.0, y=1.0, z=0.0))
        box = arc.bounding_box()
        assert box.extrema() == pytest.approx((2.0, 2.0, -1.0, 1.0, 0.0, 1.0), abs=1e-12)
        assert all(box.expand_by(1e-12).contains(arc.point_on(i / 100)) for i in range(101))
