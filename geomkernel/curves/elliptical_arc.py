# geomkernel/curves/elliptical_arc.py
import logging
import math
from typing import Generic, Literal

from pydantic import Field, field_validator

from geomkernel.curves.approximation import ApproximableCurve2d, ApproximableCurve3d
from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.vector import Vector2d, Vector3d
from geomkernel.units.angle import Angle
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.numeric import sinusoid_range
from geomkernel.utils.transformable import Transformable

logger = logging.getLogger(__name__)


class EllipticalArc2d(ApproximableCurve2d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    Part of an ellipse, parameterized by angle.

    The point at parameter t is
    ``center + x_radius cos(theta) x_direction + y_radius sin(theta) y_direction``
    with ``theta = start_angle + t * swept_angle``. The two directions must be
    perpendicular but may form a left-handed pair (after a mirror), in which
    case a positive sweep runs clockwise.
    """
    kind: Literal["elliptical_arc"] = "elliptical_arc"
    center_point: Point2d
    x_direction: Direction2d
    y_direction: Direction2d
    x_radius: float
    y_radius: float
    start_angle: float = Field(description="Parametric start angle in radians")
    swept_angle: float = Field(description="Signed parametric sweep in radians")

    @field_validator("x_radius", "y_radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def with_axes(cls, center_point: Point2d, x_direction: Direction2d, x_radius, y_radius, start_angle,
                  swept_angle) -> "EllipticalArc2d":
        """Arc on an ellipse with right-handed axes and the given X direction."""
        return cls(center_point=center_point, x_direction=x_direction, y_direction=x_direction.perpendicular(),
                   x_radius=magnitude(x_radius), y_radius=magnitude(y_radius),
                   start_angle=magnitude(start_angle), swept_angle=magnitude(swept_angle))

    @classmethod
    def from_conjugate_diameters(cls, center_point: Point2d, u: Vector2d, v: Vector2d, start_angle,
                                 swept_angle) -> "EllipticalArc2d":
        """
        Arc traced by ``center + cos(theta) u + sin(theta) v``.

        u and v need not be perpendicular (e.g. a projected circle); they are
        rotated by a phase angle phi into the principal semi-axes, and the
        start angle shifted by phi to compensate.
        """
        uu = u.dot(u)
        vv = v.dot(v)
        phi = 0.5 * math.atan2(2.0 * u.dot(v), uu - vv)
        c = math.cos(phi)
        s = math.sin(phi)
        major = u.scale_by(c).plus(v.scale_by(s))
        minor = v.scale_by(c).minus(u.scale_by(s))
        x_direction = major.direction()
        if x_direction is None:
            logger.debug("Conjugate diameters collapse to a point")
            x_direction = Direction2d.positive_x()
        # major x minor has the same sign as u x v
        y_direction = x_direction.perpendicular() if u.cross(v) >= 0.0 else x_direction.rotate_clockwise()
        return cls(center_point=center_point, x_direction=x_direction, y_direction=y_direction,
                   x_radius=major.length().value, y_radius=minor.length().value,
                   start_angle=magnitude(start_angle) - phi, swept_angle=magnitude(swept_angle))

    def sweep(self) -> Angle:
        return Angle(value=self.swept_angle)

    def _theta(self, parameter: float) -> float:
        return self.start_angle + parameter * self.swept_angle

    def point_on(self, parameter: float) -> Point2d:
        theta = self._theta(parameter)
        a = self.x_radius * math.cos(theta)
        b = self.y_radius * math.sin(theta)
        return Point2d(x=self.center_point.x + a * self.x_direction.x + b * self.y_direction.x,
                       y=self.center_point.y + a * self.x_direction.y + b * self.y_direction.y)

    def start_point(self) -> Point2d:
        return self.point_on(0.0)

    def end_point(self) -> Point2d:
        return self.point_on(1.0)

    def first_derivative(self, parameter: float) -> Vector2d:
        theta = self._theta(parameter)
        a = -self.x_radius * math.sin(theta) * self.swept_angle
        b = self.y_radius * math.cos(theta) * self.swept_angle
        return Vector2d(x=a * self.x_direction.x + b * self.y_direction.x,
                        y=a * self.x_direction.y + b * self.y_direction.y)

    def max_second_derivative_magnitude(self) -> Quantity:
        return Quantity(value=max(self.x_radius, self.y_radius) * self.swept_angle * self.swept_angle)

    def bounding_box(self) -> BoundingBox2d:
        """Exact bounds, including the points where the arc turns in X or Y."""
        xd, yd = self.x_direction, self.y_direction
        a, b = self.x_radius, self.y_radius
        min_x, max_x = sinusoid_range(a * xd.x, b * yd.x, self.start_angle, self.swept_angle)
        min_y, max_y = sinusoid_range(a * xd.y, b * yd.y, self.start_angle, self.swept_angle)
        c = self.center_point
        return BoundingBox2d(min_x=c.x + min_x, max_x=c.x + max_x, min_y=c.y + min_y, max_y=c.y + max_y)

    def reverse(self) -> "EllipticalArc2d":
        return self.with_changes(start_angle=self.start_angle + self.swept_angle, swept_angle=-self.swept_angle)

    def map_parts(self, transform) -> "EllipticalArc2d":
        return self.with_changes(center_point=transform(self.center_point),
                                 x_direction=transform(self.x_direction),
                                 y_direction=transform(self.y_direction))

    def scale_about(self, center: Point2d, scale: float) -> "EllipticalArc2d":
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(x_radius=abs(scale) * self.x_radius, y_radius=abs(scale) * self.y_radius)

    def place_on(self, sketch_plane) -> "EllipticalArc3d":
        return EllipticalArc3d.on(sketch_plane, self)


class EllipticalArc3d(ApproximableCurve3d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """An elliptical arc in 3D; same parameterization as EllipticalArc2d."""
    kind: Literal["elliptical_arc"] = "elliptical_arc"
    center_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    x_radius: float
    y_radius: float
    start_angle: float
    swept_angle: float

    @field_validator("x_radius", "y_radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def on(cls, sketch_plane, arc: EllipticalArc2d) -> "EllipticalArc3d":
        return cls(center_point=Point3d.on(sketch_plane, arc.center_point),
                   x_direction=Direction3d.on(sketch_plane, arc.x_direction),
                   y_direction=Direction3d.on(sketch_plane, arc.y_direction),
                   x_radius=arc.x_radius, y_radius=arc.y_radius,
                   start_angle=arc.start_angle, swept_angle=arc.swept_angle)

    def sweep(self) -> Angle:
        return Angle(value=self.swept_angle)

    def _theta(self, parameter: float) -> float:
        return self.start_angle + parameter * self.swept_angle

    def _combine(self, a: float, b: float) -> Vector3d:
        xd = self.x_direction
        yd = self.y_direction
        return Vector3d(x=a * xd.x + b * yd.x, y=a * xd.y + b * yd.y, z=a * xd.z + b * yd.z)

    def point_on(self, parameter: float) -> Point3d:
        theta = self._theta(parameter)
        return self.center_point.translate_by(
            self._combine(self.x_radius * math.cos(theta), self.y_radius * math.sin(theta)))

    def start_point(self) -> Point3d:
        return self.point_on(0.0)

    def end_point(self) -> Point3d:
        return self.point_on(1.0)

    def first_derivative(self, parameter: float) -> Vector3d:
        theta = self._theta(parameter)
        return self._combine(-self.x_radius * math.sin(theta) * self.swept_angle,
                             self.y_radius * math.cos(theta) * self.swept_angle)

    def max_second_derivative_magnitude(self) -> Quantity:
        return Quantity(value=max(self.x_radius, self.y_radius) * self.swept_angle * self.swept_angle)

    def bounding_box(self) -> BoundingBox3d:
        xd, yd = self.x_direction, self.y_direction
        a, b = self.x_radius, self.y_radius
        c = self.center_point
        (min_x, max_x), (min_y, max_y), (min_z, max_z) = [
            sinusoid_range(a * getattr(xd, i), b * getattr(yd, i), self.start_angle, self.swept_angle)
            for i in "xyz"]
        return BoundingBox3d(min_x=c.x + min_x, max_x=c.x + max_x, min_y=c.y + min_y, max_y=c.y + max_y,
                             min_z=c.z + min_z, max_z=c.z + max_z)

    def reverse(self) -> "EllipticalArc3d":
        return self.with_changes(start_angle=self.start_angle + self.swept_angle, swept_angle=-self.swept_angle)

    def map_parts(self, transform) -> "EllipticalArc3d":
        return self.with_changes(center_point=transform(self.center_point),
                                 x_direction=transform(self.x_direction),
                                 y_direction=transform(self.y_direction))

    def scale_about(self, center: Point3d, scale: float) -> "EllipticalArc3d":
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(x_radius=abs(scale) * self.x_radius, y_radius=abs(scale) * self.y_radius)

    def project_into(self, sketch_plane) -> EllipticalArc2d:
        """Projection into a sketch plane, which is again an elliptical arc."""
        u = self.x_direction.to_vector().scale_by(self.x_radius).project_into(sketch_plane)
        v = self.y_direction.to_vector().scale_by(self.y_radius).project_into(sketch_plane)
        return EllipticalArc2d.from_conjugate_diameters(self.center_point.project_into(sketch_plane), u, v,
                                                        self.start_angle, self.swept_angle)
