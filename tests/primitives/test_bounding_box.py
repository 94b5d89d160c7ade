import pytest

from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.vector import Vector2d, Vector3d


class TestBoundingBox2d:
    def test_extrema_are_ordered(self):
        box = BoundingBox2d.from_extrema(5.0, 1.0, 3.0, -3.0)
        assert box.extrema() == (1.0, 5.0, -3.0, 3.0)

    def test_from_points(self):
        box = BoundingBox2d.from_points([Point2d(x=1.0, y=5.0), Point2d(x=-2.0, y=0.0), Point2d(x=3.0, y=1.0)])
        assert box.extrema() == (-2.0, 3.0, 0.0, 5.0)
        assert BoundingBox2d.from_points([]) is None

    def test_union_and_hull(self):
        a = BoundingBox2d.from_extrema(0.0, 1.0, 0.0, 1.0)
        b = BoundingBox2d.from_extrema(2.0, 3.0, -1.0, 0.5)
        assert a.union(b).extrema() == (0.0, 3.0, -1.0, 1.0)
        assert BoundingBox2d.hull([a, b]) == a.union(b)
        assert BoundingBox2d.hull([]) is None

    def test_contains_and_intersects(self):
        a = BoundingBox2d.from_extrema(0.0, 2.0, 0.0, 2.0)
        assert a.contains(Point2d(x=2.0, y=1.0))
        assert not a.contains(Point2d(x=2.1, y=1.0))
        assert a.intersects(BoundingBox2d.from_extrema(2.0, 3.0, 2.0, 3.0))
        assert not a.intersects(BoundingBox2d.from_extrema(2.5, 3.0, 0.0, 1.0))

    def test_expand_by(self):
        box = BoundingBox2d.from_extrema(0.0, 2.0, 0.0, 4.0)
        assert box.expand_by(1.0).extrema() == (-1.0, 3.0, -1.0, 5.0)
        assert box.expand_by(-5.0) == BoundingBox2d.singleton(Point2d(x=1.0, y=2.0))

    def test_negative_scale_keeps_order(self):
        box = BoundingBox2d.from_extrema(1.0, 2.0, 1.0, 3.0).scale_about(Point2d.origin(), -1.0)
        assert box.extrema() == (-2.0, -1.0, -3.0, -1.0)

    def test_translate_and_dimensions(self):
        box = BoundingBox2d.from_extrema(0.0, 2.0, 0.0, 4.0).translate_by(Vector2d(x=1.0, y=1.0))
        assert box.center_point() == Point2d(x=2.0, y=3.0)
        width, height = box.dimensions()
        assert (width.value, height.value) == (2.0, 4.0)


class TestBoundingBox3d:
    def test_from_points(self):
        box = BoundingBox3d.from_points([Point3d(x=1.0, y=2.0, z=3.0), Point3d(x=-1.0, y=5.0, z=0.0)])
        assert box.extrema() == (-1.0, 1.0, 2.0, 5.0, 0.0, 3.0)

    def test_singleton_contains_its_point(self):
        p = Point3d(x=1.0, y=2.0, z=3.0)
        assert BoundingBox3d.singleton(p).contains(p)

    def test_expand_by_negative_collapses(self):
        box = BoundingBox3d.from_extrema(0.0, 10.0, 0.0, 10.0, 0.0, 1.0)
        assert box.expand_by(-1.0) == BoundingBox3d.singleton(Point3d(x=5.0, y=5.0, z=0.5))

    def test_translate(self):
        box = BoundingBox3d.singleton(Point3d.origin()).translate_by(Vector3d(x=1.0, y=2.0, z=3.0))
        assert box.center_point() == Point3d(x=1.0, y=2.0, z=3.0)

    def test_intersects(self):
        a = BoundingBox3d.from_extrema(0.0, 1.0, 0.0, 1.0, 0.0, 1.0)
        assert a.intersects(BoundingBox3d.from_extrema(0.5, 2.0, 0.5, 2.0, 0.5, 2.0))
        assert not a.intersects(BoundingBox3d.from_extrema(0.5, 2.0, 0.5, 2.0, 1.5, 2.0))
