# geomkernel/primitives/point.py
import logging
import math
from typing import Generic, Iterable, Optional, Tuple

from pydantic import Field

from geomkernel.constants import EPSILON
from geomkernel.primitives.vector import Vector2d, Vector3d, Vector4d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.numeric import ieee_divide, interpolate

logger = logging.getLogger(__name__)


class Point2d(ImmutableModel, Generic[Units, Coordinates]):
    """
    Represents a 2D point in Cartesian coordinates.

    Points are not closed under addition: point + vector gives a point and
    point - point gives the vector between them. Coordinates are not
    validated for finiteness; NaN and infinity propagate like any float.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @classmethod
    def origin(cls) -> "Point2d":
        return cls(x=0.0, y=0.0)

    @classmethod
    def from_coordinates(cls, x, y) -> "Point2d":
        """Create from floats or quantities."""
        return cls(x=magnitude(x), y=magnitude(y))

    @classmethod
    def from_polar(cls, radius, angle) -> "Point2d":
        r = magnitude(radius)
        theta = magnitude(angle)
        return cls(x=r * math.cos(theta), y=r * math.sin(theta))

    @classmethod
    def along(cls, axis, distance) -> "Point2d":
        """Point at the given signed distance along an axis."""
        d = magnitude(distance)
        o = axis.origin_point
        return cls(x=o.x + d * axis.direction.x, y=o.y + d * axis.direction.y)

    @staticmethod
    def centroid(points: Iterable["Point2d"]) -> Optional["Point2d"]:
        """Average of the given points, None if there are none."""
        points = list(points)
        if not points:
            return None
        n = len(points)
        return Point2d(x=math.fsum(p.x for p in points) / n, y=math.fsum(p.y for p in points) / n)

    @staticmethod
    def circumcenter(p1: "Point2d", p2: "Point2d", p3: "Point2d") -> Optional["Point2d"]:
        """
        Center of the circle through three points.

        Returns None when the points are collinear (including coincident),
        judged relative to the squared length of the longest edge.
        """
        bx, by = p2.x - p1.x, p2.y - p1.y
        cx, cy = p3.x - p1.x, p3.y - p1.y
        cross = bx * cy - by * cx
        b2 = bx * bx + by * by
        c2 = cx * cx + cy * cy
        longest = max(b2, c2, (p3.x - p2.x) ** 2 + (p3.y - p2.y) ** 2)
        if abs(cross) <= EPSILON * longest or longest == 0.0:
            logger.debug("Collinear points have no circumcenter")
            return None
        d = 2.0 * cross
        return Point2d(x=p1.x + (cy * b2 - by * c2) / d, y=p1.y + (bx * c2 - cx * b2) / d)

    @staticmethod
    def interpolate_from(start: "Point2d", end: "Point2d", parameter: float) -> "Point2d":
        """Point at the given parameter along start -> end (not clamped)."""
        return Point2d(x=interpolate(start.x, end.x, parameter), y=interpolate(start.y, end.y, parameter))

    def coordinates(self) -> Tuple[float, float]:
        return self.x, self.y

    def distance_from(self, other: "Point2d") -> Quantity:
        """Calculate the Euclidean distance to another point."""
        return Quantity(value=math.hypot(self.x - other.x, self.y - other.y))

    def squared_distance_from(self, other: "Point2d") -> Quantity:
        dx = self.x - other.x
        dy = self.y - other.y
        return Quantity(value=dx * dx + dy * dy)

    def is_close_to(self, other: "Point2d", tolerance: float = None) -> bool:
        """
        Check if this point is close to another point within the specified tolerance.

        Args:
            other: The point to compare with
            tolerance: Maximum distance between points to be considered equal.
                      If None, uses the default EPSILON value.
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_from(other).value <= magnitude(tolerance)

    def equal_within(self, tolerance, other: "Point2d") -> bool:
        return self.is_close_to(other, tolerance)

    def midpoint(self, other: "Point2d") -> "Point2d":
        """Calculate the midpoint between this point and another point."""
        return Point2d(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2)

    def vector_from(self, other: "Point2d") -> Vector2d:
        """Vector from other to this point."""
        return Vector2d(x=self.x - other.x, y=self.y - other.y)

    def vector_to(self, other: "Point2d") -> Vector2d:
        return other.vector_from(self)

    def translate_by(self, vector: Vector2d) -> "Point2d":
        return Point2d(x=self.x + vector.x, y=self.y + vector.y)

    def translate_in(self, direction, distance) -> "Point2d":
        d = magnitude(distance)
        return Point2d(x=self.x + d * direction.x, y=self.y + d * direction.y)

    def scale_about(self, center: "Point2d", scale: float) -> "Point2d":
        return Point2d(x=center.x + scale * (self.x - center.x), y=center.y + scale * (self.y - center.y))

    def rotate_around(self, center: "Point2d", angle) -> "Point2d":
        return center.translate_by(self.vector_from(center).rotate_by(angle))

    def mirror_across(self, axis) -> "Point2d":
        o = axis.origin_point
        return o.translate_by(self.vector_from(o).mirror_across(axis))

    def project_onto(self, axis) -> "Point2d":
        """Orthogonal projection onto an axis."""
        o = axis.origin_point
        return o.translate_by(self.vector_from(o).projection_in(axis.direction))

    def signed_distance_along(self, axis) -> Quantity:
        """Distance of the projection of this point along the axis from the axis origin."""
        return Quantity(value=self.vector_from(axis.origin_point).dot(axis.direction))

    def signed_distance_from(self, axis) -> Quantity:
        """Perpendicular distance from an axis, positive to the left of the axis."""
        return Quantity(value=axis.direction.to_vector().cross(self.vector_from(axis.origin_point)))

    def relative_to(self, frame) -> "Point2d":
        v = self.vector_from(frame.origin_point)
        return Point2d(x=v.dot(frame.x_direction), y=v.dot(frame.y_direction))

    def place_in(self, frame) -> "Point2d":
        o = frame.origin_point
        xd = frame.x_direction
        yd = frame.y_direction
        return Point2d(x=o.x + self.x * xd.x + self.y * yd.x,
                       y=o.y + self.x * xd.y + self.y * yd.y)

    def place_on(self, sketch_plane) -> "Point3d":
        return Point3d.on(sketch_plane, self)

    def __add__(self, vector: Vector2d) -> "Point2d":
        return self.translate_by(vector)

    def __sub__(self, other):
        """point - point gives a vector, point - vector gives a point."""
        if isinstance(other, Point2d):
            return self.vector_from(other)
        return Point2d(x=self.x - other.x, y=self.y - other.y)

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()


class Point3d(ImmutableModel, Generic[Units, Coordinates]):
    """Represents a 3D point in Cartesian coordinates."""
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")
    z: float = Field(description="Z coordinate")

    @classmethod
    def origin(cls) -> "Point3d":
        return cls(x=0.0, y=0.0, z=0.0)

    @classmethod
    def from_coordinates(cls, x, y, z) -> "Point3d":
        return cls(x=magnitude(x), y=magnitude(y), z=magnitude(z))

    @classmethod
    def along(cls, axis, distance) -> "Point3d":
        d = magnitude(distance)
        o = axis.origin_point
        return cls(x=o.x + d * axis.direction.x, y=o.y + d * axis.direction.y, z=o.z + d * axis.direction.z)

    @classmethod
    def on(cls, sketch_plane, point: Point2d) -> "Point3d":
        """3D point corresponding to a 2D point expressed in a sketch plane."""
        o = sketch_plane.origin_point
        xd = sketch_plane.x_direction
        yd = sketch_plane.y_direction
        return cls(x=o.x + point.x * xd.x + point.y * yd.x,
                   y=o.y + point.x * xd.y + point.y * yd.y,
                   z=o.z + point.x * xd.z + point.y * yd.z)

    @staticmethod
    def centroid(points: Iterable["Point3d"]) -> Optional["Point3d"]:
        points = list(points)
        if not points:
            return None
        n = len(points)
        return Point3d(x=math.fsum(p.x for p in points) / n,
                       y=math.fsum(p.y for p in points) / n,
                       z=math.fsum(p.z for p in points) / n)

    @staticmethod
    def circumcenter(p1: "Point3d", p2: "Point3d", p3: "Point3d") -> Optional["Point3d"]:
        """Center of the circle through three points, None if they are collinear."""
        u = p2.vector_from(p1)
        v = p3.vector_from(p1)
        w = u.cross(v)
        w2 = w.squared_length().value
        u2 = u.squared_length().value
        v2 = v.squared_length().value
        longest = max(u2, v2, p3.squared_distance_from(p2).value)
        if longest == 0.0 or math.sqrt(w2) <= EPSILON * longest:
            logger.debug("Collinear points have no circumcenter")
            return None
        offset = v.scale_by(u2).minus(u.scale_by(v2)).cross(w).scale_by(1.0 / (2.0 * w2))
        return p1.translate_by(offset)

    @staticmethod
    def interpolate_from(start: "Point3d", end: "Point3d", parameter: float) -> "Point3d":
        return Point3d(x=interpolate(start.x, end.x, parameter),
                       y=interpolate(start.y, end.y, parameter),
                       z=interpolate(start.z, end.z, parameter))

    def coordinates(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def distance_from(self, other: "Point3d") -> Quantity:
        return self.vector_from(other).length()

    def squared_distance_from(self, other: "Point3d") -> Quantity:
        return self.vector_from(other).squared_length()

    def is_close_to(self, other: "Point3d", tolerance: float = None) -> bool:
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_from(other).value <= magnitude(tolerance)

    def equal_within(self, tolerance, other: "Point3d") -> bool:
        return self.is_close_to(other, tolerance)

    def midpoint(self, other: "Point3d") -> "Point3d":
        return Point3d(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2, z=(self.z + other.z) / 2)

    def vector_from(self, other: "Point3d") -> Vector3d:
        """Vector from other to this point."""
        return Vector3d(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def vector_to(self, other: "Point3d") -> Vector3d:
        return other.vector_from(self)

    def translate_by(self, vector: Vector3d) -> "Point3d":
        return Point3d(x=self.x + vector.x, y=self.y + vector.y, z=self.z + vector.z)

    def translate_in(self, direction, distance) -> "Point3d":
        d = magnitude(distance)
        return Point3d(x=self.x + d * direction.x, y=self.y + d * direction.y, z=self.z + d * direction.z)

    def scale_about(self, center: "Point3d", scale: float) -> "Point3d":
        return Point3d(x=center.x + scale * (self.x - center.x),
                       y=center.y + scale * (self.y - center.y),
                       z=center.z + scale * (self.z - center.z))

    def rotate_around(self, axis, angle) -> "Point3d":
        o = axis.origin_point
        return o.translate_by(self.vector_from(o).rotate_around(axis, angle))

    def mirror_across(self, plane) -> "Point3d":
        o = plane.origin_point
        return o.translate_by(self.vector_from(o).mirror_across(plane))

    def project_onto(self, plane) -> "Point3d":
        """Orthogonal projection onto a plane."""
        o = plane.origin_point
        return o.translate_by(self.vector_from(o).project_onto(plane))

    def project_onto_axis(self, axis) -> "Point3d":
        o = axis.origin_point
        return o.translate_by(self.vector_from(o).projection_in(axis.direction))

    def project_into(self, sketch_plane) -> Point2d:
        """Project onto a sketch plane, giving 2D coordinates in that plane."""
        v = self.vector_from(sketch_plane.origin_point)
        return Point2d(x=v.dot(sketch_plane.x_direction), y=v.dot(sketch_plane.y_direction))

    def signed_distance_along(self, axis) -> Quantity:
        return Quantity(value=self.vector_from(axis.origin_point).dot(axis.direction))

    def signed_distance_from(self, plane) -> Quantity:
        """Distance from a plane, positive on the side the normal points to."""
        return Quantity(value=self.vector_from(plane.origin_point).dot(plane.normal_direction))

    def distance_from_axis(self, axis) -> Quantity:
        v = self.vector_from(axis.origin_point)
        return v.cross(axis.direction).length()

    def relative_to(self, frame) -> "Point3d":
        v = self.vector_from(frame.origin_point)
        return Point3d(x=v.dot(frame.x_direction), y=v.dot(frame.y_direction), z=v.dot(frame.z_direction))

    def place_in(self, frame) -> "Point3d":
        o = frame.origin_point
        return o.translate_by(Vector3d(x=self.x, y=self.y, z=self.z).place_in(frame))

    def __add__(self, vector: Vector3d) -> "Point3d":
        return self.translate_by(vector)

    def __sub__(self, other):
        """point - point gives a vector, point - vector gives a point."""
        if isinstance(other, Point3d):
            return self.vector_from(other)
        return Point3d(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


class Point4d(ImmutableModel, Generic[Units, Coordinates]):
    """
    A point in 4D, mostly used as homogeneous coordinates for a 3D point.

    The homogeneous point (x, y, z, w) corresponds to the 3D point
    (x/w, y/w, z/w).
    """
    x: float
    y: float
    z: float
    w: float

    @classmethod
    def origin(cls) -> "Point4d":
        return cls(x=0.0, y=0.0, z=0.0, w=0.0)

    @classmethod
    def from_point3d(cls, point: Point3d, weight: float = 1.0) -> "Point4d":
        """Homogeneous coordinates of a 3D point with the given weight."""
        return cls(x=point.x * weight, y=point.y * weight, z=point.z * weight, w=weight)

    @staticmethod
    def interpolate_from(start: "Point4d", end: "Point4d", parameter: float) -> "Point4d":
        return Point4d(x=interpolate(start.x, end.x, parameter),
                       y=interpolate(start.y, end.y, parameter),
                       z=interpolate(start.z, end.z, parameter),
                       w=interpolate(start.w, end.w, parameter))

    def to_point3d(self) -> Point3d:
        """Divide through by w; a zero weight gives infinite/NaN coordinates."""
        return Point3d(x=ieee_divide(self.x, self.w), y=ieee_divide(self.y, self.w), z=ieee_divide(self.z, self.w))

    def coordinates(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.z, self.w

    def vector_from(self, other: "Point4d") -> Vector4d:
        return Vector4d(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z, w=self.w - other.w)

    def distance_from(self, other: "Point4d") -> Quantity:
        return self.vector_from(other).length()

    def translate_by(self, vector: Vector4d) -> "Point4d":
        return Point4d(x=self.x + vector.x, y=self.y + vector.y, z=self.z + vector.z, w=self.w + vector.w)

    def equal_within(self, tolerance, other: "Point4d") -> bool:
        return self.distance_from(other).value <= magnitude(tolerance)

    def __add__(self, vector: Vector4d) -> "Point4d":
        return self.translate_by(vector)

    def __sub__(self, other):
        if isinstance(other, Point4d):
            return self.vector_from(other)
        return self.translate_by(other.reverse())
