# geomkernel/shapes/ellipsoid.py
import math
from typing import Generic, Tuple

from pydantic import Field, field_validator

from geomkernel.primitives.bounding_box import BoundingBox3d
from geomkernel.primitives.frame import Frame3d
from geomkernel.primitives.point import Point3d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable


class Ellipsoid3d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    A solid ellipsoid given by its axes frame and three semi-axis radii.

    Mirroring produces left-handed axes; the solid itself is unchanged in shape.
    """
    axes: Frame3d = Field(description="Center point and principal directions")
    x_radius: float
    y_radius: float
    z_radius: float

    @field_validator("x_radius", "y_radius", "z_radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def with_axes(cls, axes: Frame3d, x_radius, y_radius, z_radius) -> "Ellipsoid3d":
        """
        Args:
            axes: Frame whose origin is the center and whose directions are the principal axes
            x_radius: Semi-axis along the frame's X direction
            y_radius: Semi-axis along the frame's Y direction
            z_radius: Semi-axis along the frame's Z direction
        """
        return cls(axes=axes, x_radius=magnitude(x_radius), y_radius=magnitude(y_radius),
                   z_radius=magnitude(z_radius))

    @classmethod
    def sphere(cls, center_point: Point3d, radius) -> "Ellipsoid3d":
        r = magnitude(radius)
        return cls(axes=Frame3d.at_point(center_point), x_radius=r, y_radius=r, z_radius=r)

    def center_point(self) -> Point3d:
        return self.axes.origin_point

    def radii(self) -> Tuple[Quantity, Quantity, Quantity]:
        return Quantity(value=self.x_radius), Quantity(value=self.y_radius), Quantity(value=self.z_radius)

    def x_axis(self):
        return self.axes.x_axis()

    def y_axis(self):
        return self.axes.y_axis()

    def z_axis(self):
        return self.axes.z_axis()

    def volume(self) -> Quantity:
        return Quantity(value=4.0 / 3.0 * math.pi * self.x_radius * self.y_radius * self.z_radius)

    def contains(self, point: Point3d) -> bool:
        """True if the point is inside or on the surface."""
        if self.x_radius == 0.0 or self.y_radius == 0.0 or self.z_radius == 0.0:
            return False
        local = point.relative_to(self.axes)
        return ((local.x / self.x_radius) ** 2 + (local.y / self.y_radius) ** 2
                + (local.z / self.z_radius) ** 2) <= 1.0

    def bounding_box(self) -> BoundingBox3d:
        xd = self.axes.x_direction
        yd = self.axes.y_direction
        zd = self.axes.z_direction
        a, b, c = self.x_radius, self.y_radius, self.z_radius

        def extent(i: str) -> float:
            return math.sqrt((a * getattr(xd, i)) ** 2 + (b * getattr(yd, i)) ** 2 + (c * getattr(zd, i)) ** 2)

        dx, dy, dz = extent("x"), extent("y"), extent("z")
        p = self.center_point()
        return BoundingBox3d(min_x=p.x - dx, max_x=p.x + dx, min_y=p.y - dy, max_y=p.y + dy,
                             min_z=p.z - dz, max_z=p.z + dz)

    def map_parts(self, transform) -> "Ellipsoid3d":
        return self.with_changes(axes=transform(self.axes))

    def scale_about(self, center: Point3d, scale: float) -> "Ellipsoid3d":
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(x_radius=abs(scale) * self.x_radius, y_radius=abs(scale) * self.y_radius,
                                   z_radius=abs(scale) * self.z_radius)
