import math

import pytest

from geomkernel.primitives.axis import Axis2d, Axis3d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.frame import Frame2d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.primitives.vector import Vector2d, Vector3d, Vector4d
from geomkernel.units.angle import Angle
from geomkernel.units.quantity import Length


class TestVector2d:
    def test_length(self):
        assert Vector2d(x=3.0, y=4.0).length().value == 5.0
        assert Vector2d(x=3.0, y=4.0).squared_length().value == 25.0

    def test_from_components_accepts_quantities(self):
        v = Vector2d.from_components(Length.meters(1.5), 2)
        assert v == Vector2d(x=1.5, y=2.0)

    def test_from_polar(self):
        v = Vector2d.from_polar(2.0, Angle.degrees(90))
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(2.0)

    def test_dot_and_cross(self):
        a = Vector2d(x=1.0, y=2.0)
        b = Vector2d(x=3.0, y=4.0)
        assert a.dot(b) == 11.0
        assert a.cross(b) == -2.0

    def test_operators(self):
        a = Vector2d(x=1.0, y=2.0)
        b = Vector2d(x=3.0, y=4.0)
        assert a + b == Vector2d(x=4.0, y=6.0)
        assert b - a == Vector2d(x=2.0, y=2.0)
        assert -a == Vector2d(x=-1.0, y=-2.0)
        assert 2 * a == Vector2d(x=2.0, y=4.0)
        assert a / 2 == Vector2d(x=0.5, y=1.0)

    def test_direction_of_zero_vector_is_none(self):
        assert Vector2d.zero().direction() is None
        assert Vector2d.zero().normalize() == Vector2d.zero()

    def test_rotate_by(self):
        v = Vector2d(x=1.0, y=0.0).rotate_by(Angle.degrees(90))
        assert v.equal_within(1e-12, Vector2d(x=0.0, y=1.0))

    def test_perpendicular_is_counterclockwise(self):
        assert Vector2d(x=1.0, y=0.0).perpendicular() == Vector2d(x=0.0, y=1.0)
        assert Vector2d(x=1.0, y=0.0).rotate_clockwise() == Vector2d(x=0.0, y=-1.0)

    def test_translation_does_not_move_vectors(self):
        v = Vector2d(x=1.0, y=2.0)
        assert v.translate_by(Vector2d(x=5.0, y=5.0)) == v

    def test_mirror_across_axis(self):
        mirrored = Vector2d(x=1.0, y=2.0).mirror_across(Axis2d.x())
        assert mirrored == Vector2d(x=1.0, y=-2.0)

    def test_frame_round_trip(self):
        frame = Frame2d.with_x_direction(Direction2d.from_angle(Angle.degrees(30)), Point2d(x=5.0, y=-1.0))
        v = Vector2d(x=1.5, y=-2.5)
        assert v.relative_to(frame).place_in(frame).equal_within(1e-9, v)
        assert v.place_in(frame).relative_to(frame).equal_within(1e-9, v)

    def test_interpolate_and_sum(self):
        a = Vector2d(x=0.0, y=0.0)
        b = Vector2d(x=2.0, y=4.0)
        assert Vector2d.interpolate_from(a, b, 0.5) == Vector2d(x=1.0, y=2.0)
        assert Vector2d.sum([a, b, b]) == Vector2d(x=4.0, y=8.0)


class TestVector3d:
    def test_cross_product_follows_right_hand_rule(self):
        x = Vector3d(x=1.0, y=0.0, z=0.0)
        y = Vector3d(x=0.0, y=1.0, z=0.0)
        assert x.cross(y) == Vector3d(x=0.0, y=0.0, z=1.0)

    def test_perpendicular_to(self):
        v = Vector3d(x=1.0, y=2.0, z=3.0)
        p = v.perpendicular_to()
        assert v.dot(p) == pytest.approx(0.0, abs=1e-12)
        assert p.length().value == pytest.approx(v.length().value)

    def test_perpendicular_to_zero_is_zero(self):
        assert Vector3d.zero().perpendicular_to() == Vector3d.zero()

    def test_rotate_around_z(self):
        v = Vector3d(x=1.0, y=0.0, z=5.0).rotate_around(Axis3d.z(), math.pi / 2)
        assert v.equal_within(1e-12, Vector3d(x=0.0, y=1.0, z=5.0))

    def test_mirror_across_plane(self):
        v = Vector3d(x=1.0, y=2.0, z=3.0).mirror_across(Plane3d.xy())
        assert v == Vector3d(x=1.0, y=2.0, z=-3.0)

    def test_project_onto_plane(self):
        v = Vector3d(x=1.0, y=2.0, z=3.0).project_onto(Plane3d.xy())
        assert v == Vector3d(x=1.0, y=2.0, z=0.0)

    def test_on_and_project_into_sketch_plane(self):
        sketch = SketchPlane3d.yz()
        v = Vector3d.on(sketch, Vector2d(x=2.0, y=3.0))
        assert v == Vector3d(x=0.0, y=2.0, z=3.0)
        assert v.project_into(sketch) == Vector2d(x=2.0, y=3.0)

    def test_divide_by_zero(self):
        v = Vector3d(x=1.0, y=-1.0, z=0.0).divide_by(0.0)
        assert v.x == math.inf
        assert v.y == -math.inf
        assert math.isnan(v.z)


class TestVector4d:
    def test_direction(self):
        d = Vector4d(x=2.0, y=0.0, z=0.0, w=0.0).direction()
        assert d == Vector4d(x=1.0, y=0.0, z=0.0, w=0.0)
        assert Vector4d.zero().direction() is None

    def test_from_and_to_vector3d(self):
        v = Vector3d(x=1.0, y=2.0, z=3.0)
        assert Vector4d.from_vector3d(v, 7.0).to_vector3d() == v

    def test_length(self):
        assert Vector4d(x=1.0, y=1.0, z=1.0, w=1.0).length().value == 2.0
