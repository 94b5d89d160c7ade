import pytest

from geomkernel.primitives.axis import Axis2d
from geomkernel.primitives.direction import Direction3d
from geomkernel.primitives.frame import Frame2d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.shapes.rectangle import Rectangle2d, Rectangle3d
from geomkernel.units.angle import Angle


@pytest.fixture
def rectangle():
    return Rectangle2d.centered_on(Frame2d.at_point(Point2d(x=1.0, y=1.0)), 4.0, 2.0)


class TestRectangle2d:
    def test_dimensions_are_absolute(self):
        rectangle = Rectangle2d.centered_on(Frame2d.at_origin(), -4.0, 2.0)
        width, height = rectangle.dimensions()
        assert width.value == 4.0
        assert height.value == 2.0

    def test_area(self, rectangle):
        assert rectangle.area().value == 8.0

    def test_vertices_run_counterclockwise(self, rectangle):
        assert rectangle.vertices() == [Point2d(x=-1.0, y=0.0), Point2d(x=3.0, y=0.0),
                                        Point2d(x=3.0, y=2.0), Point2d(x=-1.0, y=2.0)]

    def test_from_corners(self):
        rectangle = Rectangle2d.from_corners(Point2d(x=3.0, y=2.0), Point2d(x=-1.0, y=0.0))
        assert rectangle.center_point() == Point2d(x=1.0, y=1.0)
        assert rectangle.area().value == 8.0

    def test_interpolate(self, rectangle):
        assert rectangle.interpolate(0.0, 0.0) == Point2d(x=-1.0, y=0.0)
        assert rectangle.interpolate(0.5, 0.5) == rectangle.center_point()

    def test_contains(self, rectangle):
        assert rectangle.contains(Point2d(x=3.0, y=2.0))
        assert not rectangle.contains(Point2d(x=3.5, y=1.0))

    def test_edges(self, rectangle):
        edges = rectangle.edges()
        assert len(edges) == 4
        assert sum(edge.length().value for edge in edges) == pytest.approx(12.0)

    def test_rotated_bounding_box(self, rectangle):
        rotated = rectangle.rotate_around(rectangle.center_point(), Angle.degrees(90))
        box = rotated.bounding_box()
        assert box.extrema() == pytest.approx((0.0, 2.0, -1.0, 3.0))

    def test_mirror_gives_left_handed_axes(self, rectangle):
        mirrored = rectangle.mirror_across(Axis2d.x())
        assert not mirrored.axes.is_right_handed()
        assert mirrored.area().value == 8.0
        assert mirrored.contains(Point2d(x=1.0, y=-1.0))

    def test_negative_scale(self, rectangle):
        scaled = rectangle.scale_about(Point2d.origin(), -2.0)
        assert scaled.center_point() == Point2d(x=-2.0, y=-2.0)
        assert scaled.x_dimension == 8.0
        assert scaled.y_dimension == 4.0


class TestRectangle3d:
    def test_place_on_sketch_plane(self, rectangle):
        lifted = rectangle.place_on(SketchPlane3d.xy())
        assert lifted.normal_direction() == Direction3d.positive_z()
        assert lifted.area().value == 8.0
        assert lifted.center_point() == Point3d(x=1.0, y=1.0, z=0.0)

    def test_bounding_box(self):
        rectangle = Rectangle3d.centered_on(SketchPlane3d.yz(), 2.0, 4.0)
        assert rectangle.bounding_box().extrema() == (0.0, 0.0, -1.0, 1.0, -2.0, 2.0)

    def test_vertices(self):
        rectangle = Rectangle3d.centered_on(SketchPlane3d.xy(), 2.0, 2.0)
        assert rectangle.vertices()[2] == Point3d(x=1.0, y=1.0, z=0.0)
