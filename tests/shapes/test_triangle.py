import pytest

from geomkernel.primitives.axis import Axis2d
from geomkernel.primitives.direction import Direction3d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.shapes.triangle import Triangle2d, Triangle3d


@pytest.fixture
def triangle():
    return Triangle2d.from_vertices(Point2d(x=0.0, y=0.0), Point2d(x=4.0, y=0.0), Point2d(x=0.0, y=4.0))


class TestTriangle2d:
    def test_area_and_orientation(self, triangle):
        assert triangle.signed_area().value == 8.0
        assert triangle.area().value == 8.0
        reversed_triangle = Triangle2d.from_vertices(*reversed(triangle.vertices()))
        assert reversed_triangle.signed_area().value == -8.0
        assert reversed_triangle.area().value == 8.0

    def test_centroid_is_inside(self, triangle):
        centroid = triangle.centroid()
        assert centroid.x == pytest.approx(4.0 / 3.0)
        assert triangle.contains(centroid)

    def test_contains(self, triangle):
        assert not triangle.contains(Point2d(x=10.0, y=10.0))
        assert triangle.contains(Point2d(x=2.0, y=2.0))
        assert triangle.contains(Point2d(x=0.0, y=0.0))

    def test_contains_for_clockwise_vertices(self, triangle):
        clockwise = triangle.mirror_across(Axis2d.x())
        assert clockwise.signed_area().value < 0
        assert clockwise.contains(Point2d(x=1.0, y=-1.0))

    def test_degenerate_triangle(self):
        flat = Triangle2d.from_vertices(Point2d(x=0.0, y=0.0), Point2d(x=1.0, y=1.0), Point2d(x=2.0, y=2.0))
        assert flat.area().value == 0.0
        assert flat.barycentric_coordinates(Point2d(x=1.0, y=1.0)) is None
        assert not flat.contains(Point2d(x=1.0, y=1.0))
        assert flat.circumcircle() is None

    def test_barycentric_coordinates(self, triangle):
        lam1, lam2, lam3 = triangle.barycentric_coordinates(Point2d(x=4.0, y=0.0))
        assert (lam1, lam2, lam3) == pytest.approx((0.0, 1.0, 0.0))

    def test_circumcircle(self, triangle):
        circle = triangle.circumcircle()
        assert circle.center_point.is_close_to(Point2d(x=2.0, y=2.0), 1e-12)
        assert circle.radius == pytest.approx(8.0 ** 0.5)

    def test_perimeter(self):
        triangle = Triangle2d.from_vertices(Point2d(x=0.0, y=0.0), Point2d(x=3.0, y=0.0), Point2d(x=0.0, y=4.0))
        assert triangle.perimeter().value == pytest.approx(12.0)

    def test_edges(self, triangle):
        edges = triangle.edges()
        assert len(edges) == 3
        assert edges[2].end_point == triangle.first_vertex


class TestTriangle3d:
    def test_normal_direction(self, triangle):
        lifted = triangle.place_on(SketchPlane3d.xy())
        assert lifted.normal_direction() == Direction3d.positive_z()
        assert lifted.area().value == pytest.approx(8.0)

    def test_degenerate_normal_is_none(self):
        p = Point3d(x=1.0, y=2.0, z=3.0)
        assert Triangle3d.from_vertices(p, p, p).normal_direction() is None

    def test_mirror_reverses_normal(self, triangle):
        lifted = triangle.place_on(SketchPlane3d.xy())
        mirrored = lifted.mirror_across(Plane3d.zx())
        assert mirrored.normal_direction() == Direction3d.negative_z()

    def test_project_into(self, triangle):
        lifted = triangle.place_on(SketchPlane3d.xy()).translate_by(
            Point3d(x=0.0, y=0.0, z=5.0) - Point3d.origin())
        assert lifted.project_into(SketchPlane3d.xy()) == triangle

    def test_circumcircle(self):
        triangle = Triangle3d.from_vertices(Point3d(x=1.0, y=0.0, z=0.0), Point3d(x=0.0, y=1.0, z=0.0),
                                            Point3d(x=-1.0, y=0.0, z=0.0))
        circle = triangle.circumcircle()
        assert circle.radius == pytest.approx(1.0)
        assert circle.axial_direction.equal_within(1e-12, Direction3d.positive_z())
