import math

import pytest

from geomkernel.primitives.axis import Axis2d
from geomkernel.primitives.direction import Direction2d
from geomkernel.primitives.point import Point2d
from geomkernel.shapes.ellipse import Ellipse2d
from geomkernel.units.angle import Angle


@pytest.fixture
def ellipse():
    return Ellipse2d.with_axes(Point2d(x=1.0, y=0.0), Direction2d.positive_x(), 3.0, 1.0)


class TestEllipse2d:
    def test_area(self, ellipse):
        assert ellipse.area().value == pytest.approx(3.0 * math.pi)

    def test_contains(self, ellipse):
        assert ellipse.contains(Point2d(x=4.0, y=0.0))
        assert ellipse.contains(Point2d(x=1.0, y=1.0))
        assert not ellipse.contains(Point2d(x=1.0, y=1.1))

    def test_degenerate_ellipse_contains_nothing(self):
        flat = Ellipse2d.with_axes(Point2d.origin(), Direction2d.positive_x(), 1.0, 0.0)
        assert not flat.contains(Point2d.origin())

    def test_bounding_box(self, ellipse):
        assert ellipse.bounding_box().extrema() == pytest.approx((-2.0, 4.0, -1.0, 1.0))

    def test_rotated_bounding_box(self):
        ellipse = Ellipse2d.with_axes(Point2d.origin(), Direction2d.from_angle(Angle.degrees(90)), 3.0, 1.0)
        assert ellipse.bounding_box().extrema() == pytest.approx((-1.0, 1.0, -3.0, 3.0))

    def test_to_elliptical_arc(self, ellipse):
        arc = ellipse.to_elliptical_arc()
        assert arc.start_point() == Point2d(x=4.0, y=0.0)
        assert arc.point_on(0.25).is_close_to(Point2d(x=1.0, y=1.0), 1e-12)

    def test_from_elliptical_arc_round_trip(self, ellipse):
        assert Ellipse2d.from_elliptical_arc(ellipse.to_elliptical_arc()) == ellipse

    def test_mirror_keeps_shape(self, ellipse):
        mirrored = ellipse.mirror_across(Axis2d.y())
        assert not mirrored.axes.is_right_handed()
        assert mirrored.contains(Point2d(x=-4.0, y=0.0))
        assert mirrored.area().value == pytest.approx(ellipse.area().value)

    def test_negative_scale(self, ellipse):
        scaled = ellipse.scale_about(Point2d.origin(), -2.0)
        assert scaled.x_radius == 6.0
        assert scaled.y_radius == 2.0
        assert scaled.center_point() == Point2d(x=-2.0, y=0.0)
