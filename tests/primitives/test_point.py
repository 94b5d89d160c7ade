import math

import pytest

from geomkernel.primitives.axis import Axis2d, Axis3d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.frame import Frame2d, Frame3d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.point import Point2d, Point3d, Point4d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.primitives.vector import Vector2d, Vector3d, Vector4d
from geomkernel.units.angle import Angle
from geomkernel.units.quantity import Length


class TestPoint2d:
    def test_create_point(self):
        point = Point2d(x=1.0, y=2.0)
        assert point.x == 1.0
        assert point.y == 2.0

    def test_from_coordinates_accepts_quantities(self):
        assert Point2d.from_coordinates(Length.millimeters(500), 1) == Point2d(x=0.5, y=1.0)

    def test_distance_from(self):
        assert Point2d(x=0.0, y=0.0).distance_from(Point2d(x=3.0, y=4.0)).value == 5.0

    def test_is_close_to(self):
        p1 = Point2d(x=1.0, y=1.0)
        assert p1.is_close_to(Point2d(x=1.0 + 1e-11, y=1.0))
        assert not p1.is_close_to(Point2d(x=1.1, y=1.0))
        assert p1.is_close_to(Point2d(x=1.1, y=1.0), tolerance=0.2)

    def test_point_vector_arithmetic(self):
        p = Point2d(x=1.0, y=1.0)
        q = Point2d(x=4.0, y=5.0)
        assert q - p == Vector2d(x=3.0, y=4.0)
        assert p + Vector2d(x=3.0, y=4.0) == q
        assert q - Vector2d(x=3.0, y=4.0) == p

    def test_midpoint(self):
        assert Point2d(x=1.0, y=2.0).midpoint(Point2d(x=5.0, y=6.0)) == Point2d(x=3.0, y=4.0)

    def test_centroid(self):
        points = [Point2d(x=0.0, y=0.0), Point2d(x=3.0, y=0.0), Point2d(x=0.0, y=3.0)]
        assert Point2d.centroid(points) == Point2d(x=1.0, y=1.0)
        assert Point2d.centroid([]) is None

    def test_circumcenter(self):
        center = Point2d.circumcenter(Point2d(x=1.0, y=0.0), Point2d(x=0.0, y=1.0), Point2d(x=-1.0, y=0.0))
        assert center.is_close_to(Point2d.origin(), 1e-12)

    def test_circumcenter_of_collinear_points_is_none(self):
        assert Point2d.circumcenter(Point2d(x=0.0, y=0.0), Point2d(x=1.0, y=1.0), Point2d(x=2.0, y=2.0)) is None
        p = Point2d(x=3.0, y=3.0)
        assert Point2d.circumcenter(p, p, p) is None

    def test_interpolate_from_extrapolates(self):
        a = Point2d(x=0.0, y=0.0)
        b = Point2d(x=2.0, y=2.0)
        assert Point2d.interpolate_from(a, b, 1.5) == Point2d(x=3.0, y=3.0)

    def test_rotate_around(self):
        p = Point2d(x=2.0, y=1.0).rotate_around(Point2d(x=1.0, y=1.0), Angle.degrees(90))
        assert p.is_close_to(Point2d(x=1.0, y=2.0), 1e-12)

    def test_mirror_across(self):
        axis = Axis2d.through(Point2d(x=0.0, y=1.0), Direction2d.positive_x())
        assert Point2d(x=3.0, y=4.0).mirror_across(axis) == Point2d(x=3.0, y=-2.0)

    def test_signed_distances(self):
        axis = Axis2d.x()
        p = Point2d(x=3.0, y=-2.0)
        assert p.signed_distance_along(axis).value == 3.0
        assert p.signed_distance_from(axis).value == -2.0
        assert p.project_onto(axis) == Point2d(x=3.0, y=0.0)

    def test_scale_about(self):
        assert Point2d(x=3.0, y=3.0).scale_about(Point2d(x=1.0, y=1.0), 2.0) == Point2d(x=5.0, y=5.0)

    def test_frame_round_trip(self):
        frame = Frame2d.with_x_direction(Direction2d.from_angle(1.0), Point2d(x=-3.0, y=2.0))
        p = Point2d(x=0.7, y=8.1)
        assert p.relative_to(frame).place_in(frame).is_close_to(p, 1e-9)
        assert p.place_in(frame).relative_to(frame).is_close_to(p, 1e-9)

    def test_relative_to_translated_frame(self):
        frame = Frame2d.at_point(Point2d(x=1.0, y=1.0))
        assert Point2d(x=3.0, y=4.0).relative_to(frame) == Point2d(x=2.0, y=3.0)

    def test_place_on_sketch_plane(self):
        assert Point2d(x=1.0, y=2.0).place_on(SketchPlane3d.zx()) == Point3d(x=2.0, y=0.0, z=1.0)

    def test_string_format(self):
        assert str(Point2d(x=1.0, y=2.5)) == "(1.0, 2.5)"


class TestPoint3d:
    def test_along_axis(self):
        axis = Axis3d.through(Point3d(x=1.0, y=0.0, z=0.0), Direction3d.positive_z())
        assert Point3d.along(axis, Length.meters(2.0)) == Point3d(x=1.0, y=0.0, z=2.0)

    def test_distance_from_axis(self):
        assert Point3d(x=3.0, y=4.0, z=10.0).distance_from_axis(Axis3d.z()).value == pytest.approx(5.0)

    def test_signed_distance_from_plane(self):
        assert Point3d(x=1.0, y=1.0, z=-2.0).signed_distance_from(Plane3d.xy()).value == -2.0

    def test_projections(self):
        p = Point3d(x=1.0, y=2.0, z=3.0)
        assert p.project_onto(Plane3d.xy()) == Point3d(x=1.0, y=2.0, z=0.0)
        assert p.project_onto_axis(Axis3d.y()) == Point3d(x=0.0, y=2.0, z=0.0)
        assert p.project_into(SketchPlane3d.yz()) == Point2d(x=2.0, y=3.0)

    def test_rotate_around_axis(self):
        axis = Axis3d.through(Point3d(x=1.0, y=0.0, z=0.0), Direction3d.positive_z())
        p = Point3d(x=2.0, y=0.0, z=1.0).rotate_around(axis, Angle.degrees(180))
        assert p.is_close_to(Point3d(x=0.0, y=0.0, z=1.0), 1e-12)

    def test_mirror_across_plane(self):
        plane = Plane3d.through(Point3d(x=0.0, y=0.0, z=1.0), Direction3d.positive_z())
        assert Point3d(x=1.0, y=2.0, z=3.0).mirror_across(plane) == Point3d(x=1.0, y=2.0, z=-1.0)

    def test_circumcenter(self):
        center = Point3d.circumcenter(Point3d(x=1.0, y=0.0, z=2.0), Point3d(x=0.0, y=1.0, z=2.0),
                                      Point3d(x=-1.0, y=0.0, z=2.0))
        assert center.is_close_to(Point3d(x=0.0, y=0.0, z=2.0), 1e-12)

    def test_circumcenter_collinear_is_none(self):
        a = Point3d(x=0.0, y=0.0, z=0.0)
        assert Point3d.circumcenter(a, Point3d(x=1.0, y=1.0, z=1.0), Point3d(x=2.0, y=2.0, z=2.0)) is None

    def test_frame_round_trip(self):
        frame = Frame3d.with_z_direction(Direction3d.from_components(1.0, -1.0, 2.0), Point3d(x=1.0, y=2.0, z=3.0))
        p = Point3d(x=-4.0, y=0.5, z=9.0)
        assert p.relative_to(frame).place_in(frame).is_close_to(p, 1e-9)
        assert p.place_in(frame).relative_to(frame).is_close_to(p, 1e-9)

    def test_point_vector_arithmetic(self):
        p = Point3d(x=1.0, y=1.0, z=1.0)
        v = Vector3d(x=1.0, y=2.0, z=3.0)
        assert (p + v) - p == v
        assert (p + v) - v == p


class TestPoint4d:
    def test_homogeneous_round_trip(self):
        p = Point3d(x=1.0, y=2.0, z=3.0)
        assert Point4d.from_point3d(p, 2.0) == Point4d(x=2.0, y=4.0, z=6.0, w=2.0)
        assert Point4d.from_point3d(p, 2.0).to_point3d() == p

    def test_zero_weight_follows_ieee(self):
        p = Point4d(x=1.0, y=0.0, z=-1.0, w=0.0).to_point3d()
        assert p.x == math.inf
        assert math.isnan(p.y)
        assert p.z == -math.inf

    def test_distance_and_translation(self):
        a = Point4d.origin()
        b = a + Vector4d(x=1.0, y=1.0, z=1.0, w=1.0)
        assert b.distance_from(a).value == 2.0
        assert b - a == Vector4d(x=1.0, y=1.0, z=1.0, w=1.0)
