# geomkernel/shapes/ellipse.py
import math
from typing import Generic

from pydantic import Field, field_validator

from geomkernel.curves.elliptical_arc import EllipticalArc2d
from geomkernel.primitives.bounding_box import BoundingBox2d
from geomkernel.primitives.direction import Direction2d
from geomkernel.primitives.frame import Frame2d
from geomkernel.primitives.point import Point2d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable


class Ellipse2d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    An ellipse given by its axes frame and two semi-axis radii.

    The axes frame is left-handed after an odd number of mirrors.
    """
    axes: Frame2d = Field(description="Center point and principal directions")
    x_radius: float = Field(description="Semi-axis length along the X direction")
    y_radius: float = Field(description="Semi-axis length along the Y direction")

    @field_validator("x_radius", "y_radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def with_axes(cls, center_point: Point2d, x_direction: Direction2d, x_radius, y_radius) -> "Ellipse2d":
        return cls(axes=Frame2d.with_x_direction(x_direction, center_point),
                   x_radius=magnitude(x_radius), y_radius=magnitude(y_radius))

    @classmethod
    def from_elliptical_arc(cls, arc: EllipticalArc2d) -> "Ellipse2d":
        """The full ellipse an elliptical arc lies on."""
        return cls(axes=Frame2d.unsafe(origin_point=arc.center_point, x_direction=arc.x_direction,
                                       y_direction=arc.y_direction),
                   x_radius=arc.x_radius, y_radius=arc.y_radius)

    def center_point(self) -> Point2d:
        return self.axes.origin_point

    def x_direction(self) -> Direction2d:
        return self.axes.x_direction

    def y_direction(self) -> Direction2d:
        return self.axes.y_direction

    def x_axis(self):
        return self.axes.x_axis()

    def y_axis(self):
        return self.axes.y_axis()

    def area(self) -> Quantity:
        return Quantity(value=math.pi * self.x_radius * self.y_radius)

    def contains(self, point: Point2d) -> bool:
        """True if the point is inside or on the ellipse."""
        local = point.relative_to(self.axes)
        if self.x_radius == 0.0 or self.y_radius == 0.0:
            return False
        return (local.x / self.x_radius) ** 2 + (local.y / self.y_radius) ** 2 <= 1.0

    def bounding_box(self) -> BoundingBox2d:
        xd = self.axes.x_direction
        yd = self.axes.y_direction
        dx = math.hypot(self.x_radius * xd.x, self.y_radius * yd.x)
        dy = math.hypot(self.x_radius * xd.y, self.y_radius * yd.y)
        c = self.center_point()
        return BoundingBox2d(min_x=c.x - dx, max_x=c.x + dx, min_y=c.y - dy, max_y=c.y + dy)

    def to_elliptical_arc(self) -> EllipticalArc2d:
        """The full ellipse as an arc starting on the positive X axis."""
        return EllipticalArc2d(center_point=self.center_point(), x_direction=self.axes.x_direction,
                               y_direction=self.axes.y_direction, x_radius=self.x_radius, y_radius=self.y_radius,
                               start_angle=0.0, swept_angle=2.0 * math.pi)

    def map_parts(self, transform) -> "Ellipse2d":
        return self.with_changes(axes=transform(self.axes))

    def scale_about(self, center: Point2d, scale: float) -> "Ellipse2d":
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(x_radius=abs(scale) * self.x_radius, y_radius=abs(scale) * self.y_radius)
