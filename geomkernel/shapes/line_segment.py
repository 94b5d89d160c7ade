# geomkernel/shapes/line_segment.py
import math
from typing import Generic, Literal, Optional, Tuple

from pydantic import Field

from geomkernel.constants import EPSILON
from geomkernel.curves.approximation import ApproximableCurve2d, ApproximableCurve3d
from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.vector import Vector2d, Vector3d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.numeric import ieee_divide
from geomkernel.utils.transformable import Transformable


class LineSegment2d(ApproximableCurve2d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    Represents a line segment defined by two points.

    Zero-length segments are allowed; queries that need a direction return
    None for them. Parameter 0 is the start point and 1 the end point.
    """
    kind: Literal["line_segment"] = "line_segment"
    start_point: Point2d = Field(description="Starting point of the line segment")
    end_point: Point2d = Field(description="Ending point of the line segment")

    @classmethod
    def from_endpoints(cls, start_point: Point2d, end_point: Point2d) -> "LineSegment2d":
        return cls(start_point=start_point, end_point=end_point)

    @classmethod
    def along(cls, axis, start_distance, end_distance) -> "LineSegment2d":
        """Segment between two signed distances along an axis."""
        return cls(start_point=Point2d.along(axis, start_distance), end_point=Point2d.along(axis, end_distance))

    def endpoints(self) -> Tuple[Point2d, Point2d]:
        return self.start_point, self.end_point

    def midpoint(self) -> Point2d:
        """Get the midpoint of the line segment."""
        return self.start_point.midpoint(self.end_point)

    def length(self) -> Quantity:
        """Get the length of the line segment."""
        return self.end_point.distance_from(self.start_point)

    def squared_length(self) -> Quantity:
        return self.end_point.squared_distance_from(self.start_point)

    def vector(self) -> Vector2d:
        """Vector from start to end."""
        return self.end_point.vector_from(self.start_point)

    def direction(self) -> Optional[Direction2d]:
        return self.vector().direction()

    def perpendicular_direction(self) -> Optional[Direction2d]:
        """Direction 90 degrees counterclockwise from the segment direction."""
        direction = self.direction()
        return None if direction is None else direction.perpendicular()

    def point_on(self, parameter: float) -> Point2d:
        return Point2d.interpolate_from(self.start_point, self.end_point, parameter)

    def interpolate(self, parameter: float) -> Point2d:
        return self.point_on(parameter)

    def first_derivative(self, parameter: float) -> Vector2d:
        return self.vector()

    def max_second_derivative_magnitude(self) -> Quantity:
        return Quantity.zero()

    def reverse(self) -> "LineSegment2d":
        return LineSegment2d(start_point=self.end_point, end_point=self.start_point)

    def bounding_box(self) -> BoundingBox2d:
        return BoundingBox2d.from_corners(self.start_point, self.end_point)

    def map_parts(self, transform) -> "LineSegment2d":
        return LineSegment2d(start_point=transform(self.start_point), end_point=transform(self.end_point))

    def place_on(self, sketch_plane) -> "LineSegment3d":
        return LineSegment3d.on(sketch_plane, self)

    def parameter_of(self, point: Point2d) -> float:
        """
        Project a point onto the line and return the parameter t.

        t = 0 at the start point, t = 1 at the end point; values outside
        [0, 1] mean the projection falls outside the segment. A zero-length
        segment gives NaN.
        """
        return ieee_divide(point.vector_from(self.start_point).dot(self.vector()), self.squared_length().value)

    def closest_point_to(self, point: Point2d) -> Point2d:
        """Find the closest point on the line segment to a given point."""
        t = self.parameter_of(point)
        if math.isnan(t):
            return self.start_point
        return self.point_on(max(0.0, min(1.0, t)))

    def distance_from(self, point: Point2d) -> Quantity:
        """Distance from a point to the nearest point of the segment."""
        return point.distance_from(self.closest_point_to(point))

    def contains_point(self, point: Point2d, tolerance: float = None) -> bool:
        """
        Check if a point lies on the line segment.

        Args:
            point: The point to check
            tolerance: Distance tolerance for considering the point to be on the line

        Returns:
            True if the point is on the segment within the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_from(point).value <= magnitude(tolerance)

    def intersection_point(self, other: "LineSegment2d", tolerance: float = None) -> Optional[Point2d]:
        """
        Find the intersection point with another line segment.

        Returns None for parallel (including collinear) or non-touching segments.
        """
        if tolerance is None:
            tolerance = EPSILON
        d1 = self.vector()
        d2 = other.vector()
        det = d1.cross(d2)
        if abs(det) <= tolerance * max(d1.squared_length().value, d2.squared_length().value):
            return None
        offset = other.start_point.vector_from(self.start_point)
        t = offset.cross(d2) / det
        u = offset.cross(d1) / det
        if -tolerance <= t <= 1.0 + tolerance and -tolerance <= u <= 1.0 + tolerance:
            return self.point_on(t)
        return None

    def is_parallel_to(self, other: "LineSegment2d", tolerance: float = None) -> bool:
        """True if the segments are parallel or anti-parallel within an angular tolerance."""
        if tolerance is None:
            tolerance = EPSILON
        a = self.direction()
        b = other.direction()
        if a is None or b is None:
            return False
        return abs(a.to_vector().cross(b)) <= magnitude(tolerance)

    def __str__(self) -> str:
        return f"LineSegment2d({self.start_point} -> {self.end_point})"


class LineSegment3d(ApproximableCurve3d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """A line segment in 3D."""
    kind: Literal["line_segment"] = "line_segment"
    start_point: Point3d = Field(description="Starting point of the line segment")
    end_point: Point3d = Field(description="Ending point of the line segment")

    @classmethod
    def from_endpoints(cls, start_point: Point3d, end_point: Point3d) -> "LineSegment3d":
        return cls(start_point=start_point, end_point=end_point)

    @classmethod
    def along(cls, axis, start_distance, end_distance) -> "LineSegment3d":
        return cls(start_point=Point3d.along(axis, start_distance), end_point=Point3d.along(axis, end_distance))

    @classmethod
    def on(cls, sketch_plane, segment: LineSegment2d) -> "LineSegment3d":
        return cls(start_point=Point3d.on(sketch_plane, segment.start_point),
                   end_point=Point3d.on(sketch_plane, segment.end_point))

    def endpoints(self) -> Tuple[Point3d, Point3d]:
        return self.start_point, self.end_point

    def midpoint(self) -> Point3d:
        return self.start_point.midpoint(self.end_point)

    def length(self) -> Quantity:
        return self.end_point.distance_from(self.start_point)

    def vector(self) -> Vector3d:
        return self.end_point.vector_from(self.start_point)

    def direction(self) -> Optional[Direction3d]:
        return self.vector().direction()

    def point_on(self, parameter: float) -> Point3d:
        return Point3d.interpolate_from(self.start_point, self.end_point, parameter)

    def interpolate(self, parameter: float) -> Point3d:
        return self.point_on(parameter)

    def first_derivative(self, parameter: float) -> Vector3d:
        return self.vector()

    def max_second_derivative_magnitude(self) -> Quantity:
        return Quantity.zero()

    def reverse(self) -> "LineSegment3d":
        return LineSegment3d(start_point=self.end_point, end_point=self.start_point)

    def bounding_box(self) -> BoundingBox3d:
        return BoundingBox3d.from_corners(self.start_point, self.end_point)

    def map_parts(self, transform) -> "LineSegment3d":
        return LineSegment3d(start_point=transform(self.start_point), end_point=transform(self.end_point))

    def project_onto(self, plane) -> "LineSegment3d":
        return self.map_parts(lambda p: p.project_onto(plane))

    def project_into(self, sketch_plane) -> LineSegment2d:
        return LineSegment2d(start_point=self.start_point.project_into(sketch_plane),
                             end_point=self.end_point.project_into(sketch_plane))

    def __str__(self) -> str:
        return f"LineSegment3d({self.start_point} -> {self.end_point})"
