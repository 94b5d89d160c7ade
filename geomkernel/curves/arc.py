# geomkernel/curves/arc.py
import logging
import math
from typing import Generic, Literal, Optional

from pydantic import Field, field_validator

from geomkernel.constants import EPSILON
from geomkernel.curves.approximation import ApproximableCurve2d, ApproximableCurve3d
from geomkernel.curves.elliptical_arc import EllipticalArc2d
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

TWO_PI = 2.0 * math.pi


def _sweep_through(start: float, middle: float, end: float) -> float:
    """
    Signed sweep from the start angle to the end angle that passes the middle angle.

    Counterclockwise if the middle angle is met before the end angle when
    going counterclockwise, clockwise otherwise.
    """
    to_end = (end - start) % TWO_PI
    to_middle = (middle - start) % TWO_PI
    if to_middle < to_end:
        return to_end
    return to_end - TWO_PI


class Arc2d(ApproximableCurve2d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    A circular arc.

    Stored as a center point, the direction from the center to the start
    point, a radius and a signed swept angle (positive = counterclockwise).
    Mirroring an arc, or moving it between frames of opposite handedness,
    negates the sweep.
    """
    kind: Literal["arc"] = "arc"
    center_point: Point2d = Field(description="Center of the circle the arc lies on")
    x_direction: Direction2d = Field(description="Direction from the center to the start point")
    radius: float
    swept_angle: float = Field(description="Signed sweep in radians")

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def swept_around(cls, center_point: Point2d, sweep, start_point: Point2d) -> "Arc2d":
        """
        Arc starting at start_point, swept around center_point by the given angle.

        Args:
            center_point: Center of the circle
            sweep: Signed angle (float radians or Angle), positive counterclockwise
            start_point: First point of the arc; its distance from the center is the radius

        Returns:
            The arc. If start_point is the center the radius is zero and the
            start direction defaults to +X.
        """
        offset = start_point.vector_from(center_point)
        x_direction = offset.direction()
        if x_direction is None:
            x_direction = Direction2d.positive_x()
        return cls(center_point=center_point, x_direction=x_direction, radius=offset.length().value,
                   swept_angle=magnitude(sweep))

    @classmethod
    def from_endpoints(cls, start_point: Point2d, end_point: Point2d, sweep) -> Optional["Arc2d"]:
        """
        Arc between two points with the given signed sweep.

        Args:
            start_point: First point of the arc
            end_point: Last point of the arc
            sweep: Signed angle; positive sweeps counterclockwise from start to end

        Returns:
            The arc, or None if the points coincide or the sweep is a whole
            number of turns (including zero), since no unique circle exists then
        """
        s = magnitude(sweep)
        chord = end_point.vector_from(start_point)
        d = chord.length().value
        half_sin = math.sin(s / 2.0)
        if d == 0.0 or abs(half_sin) <= EPSILON:
            logger.debug(f"No arc from {start_point} to {end_point} with sweep {s}")
            return None
        r = d / (2.0 * abs(half_sin))
        offset = r * math.cos(s / 2.0) * math.copysign(1.0, s)
        center = start_point.midpoint(end_point).translate_by(chord.perpendicular().scale_by(offset / d))
        return cls.swept_around(center, s, start_point).with_changes(radius=r)

    @classmethod
    def through_points(cls, first: Point2d, second: Point2d, third: Point2d) -> Optional["Arc2d"]:
        """Arc from first through second to third; None if the points are collinear."""
        center = Point2d.circumcenter(first, second, third)
        if center is None:
            return None
        angles = [p.vector_from(center).polar_angle().value for p in (first, second, third)]
        return cls.swept_around(center, _sweep_through(*angles), first)

    def sweep(self) -> Angle:
        return Angle(value=self.swept_angle)

    def start_angle(self) -> Angle:
        return self.x_direction.to_angle()

    def length(self) -> Quantity:
        """Arc length, radius times the absolute sweep."""
        return Quantity(value=self.radius * abs(self.swept_angle))

    def point_on(self, parameter: float) -> Point2d:
        """
        Args:
            parameter: 0 at the start point, 1 at the end point

        Returns:
            The point reached after sweeping parameter * swept_angle from the start
        """
        return self.center_point.translate_by(
            self.x_direction.to_vector().rotate_by(parameter * self.swept_angle).scale_by(self.radius))

    def start_point(self) -> Point2d:
        return self.point_on(0.0)

    def end_point(self) -> Point2d:
        return self.point_on(1.0)

    def first_derivative(self, parameter: float) -> Vector2d:
        radial = self.x_direction.to_vector().rotate_by(parameter * self.swept_angle)
        return radial.perpendicular().scale_by(self.radius * self.swept_angle)

    def max_second_derivative_magnitude(self) -> Quantity:
        return Quantity(value=self.radius * self.swept_angle * self.swept_angle)

    def bounding_box(self) -> BoundingBox2d:
        return self.to_elliptical_arc().bounding_box()

    def reverse(self) -> "Arc2d":
        return self.with_changes(x_direction=self.x_direction.rotate_by(self.swept_angle),
                                 swept_angle=-self.swept_angle)

    def map_parts(self, transform) -> "Arc2d":
        return self.with_changes(center_point=transform(self.center_point), x_direction=transform(self.x_direction))

    def scale_about(self, center: Point2d, scale: float) -> "Arc2d":
        return super().scale_about(center, scale).with_changes(radius=abs(scale) * self.radius)

    def mirror_across(self, axis) -> "Arc2d":
        return super().mirror_across(axis).with_changes(swept_angle=-self.swept_angle)

    def relative_to(self, frame) -> "Arc2d":
        arc = super().relative_to(frame)
        return arc if frame.is_right_handed() else arc.with_changes(swept_angle=-self.swept_angle)

    def place_in(self, frame) -> "Arc2d":
        arc = super().place_in(frame)
        return arc if frame.is_right_handed() else arc.with_changes(swept_angle=-self.swept_angle)

    def place_on(self, sketch_plane) -> "Arc3d":
        return Arc3d.on(sketch_plane, self)

    def to_elliptical_arc(self) -> EllipticalArc2d:
        return EllipticalArc2d.with_axes(self.center_point, self.x_direction, self.radius, self.radius,
                                         0.0, self.swept_angle)


class Arc3d(ApproximableCurve3d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    A circular arc in 3D.

    The point at parameter t is
    ``center + radius (cos(theta) x_direction + sin(theta) y_direction)`` with
    ``theta = t * swept_angle``, so the arc turns around the axis
    x_direction cross y_direction.
    """
    kind: Literal["arc"] = "arc"
    center_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    radius: float
    swept_angle: float

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def swept_around(cls, axis, sweep, start_point: Point3d) -> "Arc3d":
        """
        Arc starting at start_point, swept around an axis by the given angle.

        Args:
            axis: Rotation axis; the center is the projection of start_point onto it
            sweep: Signed angle, following the right-hand rule around the axis direction
            start_point: First point of the arc

        Returns:
            The arc, with y_direction = axis direction x x_direction
        """
        center = start_point.project_onto_axis(axis)
        offset = start_point.vector_from(center)
        x_direction = offset.direction()
        if x_direction is None:
            x_direction = axis.direction.perpendicular_to()
        y_direction = Direction3d.unsafe(**axis.direction.cross(x_direction).model_dump())
        return cls(center_point=center, x_direction=x_direction, y_direction=y_direction,
                   radius=offset.length().value, swept_angle=magnitude(sweep))

    @classmethod
    def on(cls, sketch_plane, arc: Arc2d) -> "Arc3d":
        return cls(center_point=Point3d.on(sketch_plane, arc.center_point),
                   x_direction=Direction3d.on(sketch_plane, arc.x_direction),
                   y_direction=Direction3d.on(sketch_plane, arc.x_direction.perpendicular()),
                   radius=arc.radius, swept_angle=arc.swept_angle)

    @classmethod
    def through_points(cls, first: Point3d, second: Point3d, third: Point3d) -> Optional["Arc3d"]:
        """Arc from first through second to third; None if the points are collinear."""
        center = Point3d.circumcenter(first, second, third)
        if center is None:
            return None
        normal = second.vector_from(first).cross(third.vector_from(first)).direction()
        x_direction = first.vector_from(center).direction()
        if normal is None or x_direction is None:
            return None
        y_direction = Direction3d.unsafe(**normal.cross(x_direction).model_dump())
        angles = []
        for p in (first, second, third):
            v = p.vector_from(center)
            angles.append(math.atan2(v.dot(y_direction), v.dot(x_direction)))
        return cls(center_point=center, x_direction=x_direction, y_direction=y_direction,
                   radius=first.distance_from(center).value, swept_angle=_sweep_through(*angles))

    def sweep(self) -> Angle:
        return Angle(value=self.swept_angle)

    def axial_direction(self) -> Direction3d:
        return Direction3d.unsafe(**self.x_direction.cross(self.y_direction).model_dump())

    def length(self) -> Quantity:
        return Quantity(value=self.radius * abs(self.swept_angle))

    def _radial(self, theta: float) -> Vector3d:
        c = math.cos(theta)
        s = math.sin(theta)
        xd = self.x_direction
        yd = self.y_direction
        return Vector3d(x=c * xd.x + s * yd.x, y=c * xd.y + s * yd.y, z=c * xd.z + s * yd.z)

    def point_on(self, parameter: float) -> Point3d:
        return self.center_point.translate_by(self._radial(parameter * self.swept_angle).scale_by(self.radius))

    def start_point(self) -> Point3d:
        return self.point_on(0.0)

    def end_point(self) -> Point3d:
        return self.point_on(1.0)

    def first_derivative(self, parameter: float) -> Vector3d:
        theta = parameter * self.swept_angle + math.pi / 2.0
        return self._radial(theta).scale_by(self.radius * self.swept_angle)

    def max_second_derivative_magnitude(self) -> Quantity:
        return Quantity(value=self.radius * self.swept_angle * self.swept_angle)

    def bounding_box(self) -> BoundingBox3d:
        """Exact bounds; interior turning points are included."""
        xd, yd, r = self.x_direction, self.y_direction, self.radius
        c = self.center_point
        (min_x, max_x), (min_y, max_y), (min_z, max_z) = [
            sinusoid_range(r * getattr(xd, i), r * getattr(yd, i), 0.0, self.swept_angle) for i in "xyz"]
        return BoundingBox3d(min_x=c.x + min_x, max_x=c.x + max_x, min_y=c.y + min_y, max_y=c.y + max_y,
                             min_z=c.z + min_z, max_z=c.z + max_z)

    def reverse(self) -> "Arc3d":
        s = self.swept_angle
        x_vector = self._radial(s)
        y_vector = self._radial(s + math.pi / 2.0)
        return self.with_changes(x_direction=Direction3d.unsafe(**x_vector.model_dump()),
                                 y_direction=Direction3d.unsafe(**y_vector.model_dump()),
                                 swept_angle=-s)

    def map_parts(self, transform) -> "Arc3d":
        return self.with_changes(center_point=transform(self.center_point),
                                 x_direction=transform(self.x_direction),
                                 y_direction=transform(self.y_direction))

    def scale_about(self, center: Point3d, scale: float) -> "Arc3d":
        return super().scale_about(center, scale).with_changes(radius=abs(scale) * self.radius)

    def project_into(self, sketch_plane) -> EllipticalArc2d:
        """Projection into a sketch plane: an elliptical arc (a circular one if the planes are parallel)."""
        u = self.x_direction.to_vector().scale_by(self.radius).project_into(sketch_plane)
        v = self.y_direction.to_vector().scale_by(self.radius).project_into(sketch_plane)
        return EllipticalArc2d.from_conjugate_diameters(self.center_point.project_into(sketch_plane), u, v,
                                                        0.0, self.swept_angle)
