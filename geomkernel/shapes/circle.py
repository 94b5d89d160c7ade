# geomkernel/shapes/circle.py
import logging
import math
from typing import Generic, Optional

from pydantic import Field, field_validator

from geomkernel.curves.arc import Arc2d, Arc3d
from geomkernel.curves.elliptical_arc import EllipticalArc2d
from geomkernel.primitives.axis import Axis3d
from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.shapes.ellipse import Ellipse2d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable

logger = logging.getLogger(__name__)


class Circle2d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """A circle given by its center point and radius (stored as an absolute value)."""
    center_point: Point2d
    radius: float

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def with_radius(cls, radius, center_point: Point2d) -> "Circle2d":
        return cls(center_point=center_point, radius=magnitude(radius))

    @classmethod
    def through_points(cls, first: Point2d, second: Point2d, third: Point2d) -> Optional["Circle2d"]:
        """
        Circle through three points.

        Args:
            first: A point on the circle
            second: A point on the circle
            third: A point on the circle

        Returns:
            The circumscribed circle, None if the points are collinear or coincide
        """
        center = Point2d.circumcenter(first, second, third)
        if center is None:
            return None
        return cls(center_point=center, radius=first.distance_from(center).value)

    def diameter(self) -> Quantity:
        return Quantity(value=2.0 * self.radius)

    def area(self) -> Quantity:
        return Quantity(value=math.pi * self.radius * self.radius)

    def circumference(self) -> Quantity:
        return Quantity(value=2.0 * math.pi * self.radius)

    def contains(self, point: Point2d) -> bool:
        return point.squared_distance_from(self.center_point).value <= self.radius * self.radius

    def to_arc(self) -> Arc2d:
        """Full counterclockwise arc starting on the positive X side of the circle."""
        return Arc2d(center_point=self.center_point, x_direction=Direction2d.positive_x(),
                     radius=self.radius, swept_angle=2.0 * math.pi)

    def bounding_box(self) -> BoundingBox2d:
        c = self.center_point
        r = self.radius
        return BoundingBox2d(min_x=c.x - r, max_x=c.x + r, min_y=c.y - r, max_y=c.y + r)

    def map_parts(self, transform) -> "Circle2d":
        return self.with_changes(center_point=transform(self.center_point))

    def scale_about(self, center: Point2d, scale: float) -> "Circle2d":
        return super().scale_about(center, scale).with_changes(radius=abs(scale) * self.radius)

    def place_on(self, sketch_plane) -> "Circle3d":
        return Circle3d.on(sketch_plane, self)


class Circle3d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """A circle in 3D: center point, axial (normal) direction and radius."""
    center_point: Point3d
    axial_direction: Direction3d = Field(description="Normal to the plane of the circle")
    radius: float

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def with_radius(cls, radius, axial_direction: Direction3d, center_point: Point3d) -> "Circle3d":
        return cls(center_point=center_point, axial_direction=axial_direction, radius=magnitude(radius))

    @classmethod
    def sweep_around(cls, axis, point: Point3d) -> "Circle3d":
        """Circle traced by rotating a point around an axis."""
        center = point.project_onto_axis(axis)
        return cls(center_point=center, axial_direction=axis.direction, radius=point.distance_from(center).value)

    @classmethod
    def on(cls, sketch_plane, circle: Circle2d) -> "Circle3d":
        return cls(center_point=Point3d.on(sketch_plane, circle.center_point),
                   axial_direction=sketch_plane.normal_direction(), radius=circle.radius)

    @classmethod
    def through_points(cls, first: Point3d, second: Point3d, third: Point3d) -> Optional["Circle3d"]:
        """Circle through three points, with its axis by the right-hand rule; None if collinear."""
        center = Point3d.circumcenter(first, second, third)
        normal = second.vector_from(first).cross(third.vector_from(first)).direction()
        if center is None or normal is None:
            logger.debug("No circle through collinear points")
            return None
        return cls(center_point=center, axial_direction=normal, radius=first.distance_from(center).value)

    def axis(self) -> Axis3d:
        return Axis3d(origin_point=self.center_point, direction=self.axial_direction)

    def plane(self) -> Plane3d:
        return Plane3d(origin_point=self.center_point, normal_direction=self.axial_direction)

    def diameter(self) -> Quantity:
        return Quantity(value=2.0 * self.radius)

    def area(self) -> Quantity:
        return Quantity(value=math.pi * self.radius * self.radius)

    def circumference(self) -> Quantity:
        return Quantity(value=2.0 * math.pi * self.radius)

    def to_arc(self) -> Arc3d:
        x_direction, y_direction = self.axial_direction.perpendicular_basis()
        return Arc3d(center_point=self.center_point, x_direction=x_direction, y_direction=y_direction,
                     radius=self.radius, swept_angle=2.0 * math.pi)

    def bounding_box(self) -> BoundingBox3d:
        n = self.axial_direction
        r = self.radius
        c = self.center_point
        dx = r * math.sqrt(max(0.0, 1.0 - n.x * n.x))
        dy = r * math.sqrt(max(0.0, 1.0 - n.y * n.y))
        dz = r * math.sqrt(max(0.0, 1.0 - n.z * n.z))
        return BoundingBox3d(min_x=c.x - dx, max_x=c.x + dx, min_y=c.y - dy, max_y=c.y + dy,
                             min_z=c.z - dz, max_z=c.z + dz)

    def map_parts(self, transform) -> "Circle3d":
        return self.with_changes(center_point=transform(self.center_point),
                                 axial_direction=transform(self.axial_direction))

    def scale_about(self, center: Point3d, scale: float) -> "Circle3d":
        """A negative factor reverses the axial direction, as it does for every direction."""
        return super().scale_about(center, scale).with_changes(radius=abs(scale) * self.radius)

    def project_into(self, sketch_plane) -> Ellipse2d:
        """Projection into a sketch plane: an ellipse, degenerate when viewed edge-on."""
        x_direction, y_direction = self.axial_direction.perpendicular_basis()
        u = x_direction.to_vector().scale_by(self.radius).project_into(sketch_plane)
        v = y_direction.to_vector().scale_by(self.radius).project_into(sketch_plane)
        arc = EllipticalArc2d.from_conjugate_diameters(self.center_point.project_into(sketch_plane), u, v,
                                                       0.0, 2.0 * math.pi)
        return Ellipse2d.from_elliptical_arc(arc)
