# geomkernel/shapes/polyline.py
import math
from typing import Generic, List, Optional, Tuple

from pydantic import Field

from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.units.quantity import Quantity
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable


class Polyline2d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    An ordered sequence of vertices joined by straight segments.

    A polyline may be empty or have a single vertex; such polylines have
    zero length and no segments.
    """
    vertices: Tuple[Point2d, ...] = Field(default=(), description="Vertices in order")

    @classmethod
    def from_vertices(cls, vertices) -> "Polyline2d":
        return cls(vertices=tuple(vertices))

    def segments(self) -> List:
        """Line segments between consecutive vertices."""
        from geomkernel.shapes.line_segment import LineSegment2d
        return [LineSegment2d(start_point=a, end_point=b) for a, b in zip(self.vertices, self.vertices[1:])]

    def length(self) -> Quantity:
        return Quantity(value=math.fsum(b.distance_from(a).value for a, b in zip(self.vertices, self.vertices[1:])))

    def centroid(self) -> Optional[Point2d]:
        """Length-weighted centroid of the segments, None if the polyline has zero length."""
        total = self.length().value
        if total == 0.0:
            return None
        weighted = [(a.midpoint(b), b.distance_from(a).value) for a, b in zip(self.vertices, self.vertices[1:])]
        return Point2d(x=math.fsum(m.x * w for m, w in weighted) / total,
                       y=math.fsum(m.y * w for m, w in weighted) / total)

    def bounding_box(self) -> Optional[BoundingBox2d]:
        return BoundingBox2d.from_points(self.vertices)

    def is_closed(self) -> bool:
        return len(self.vertices) > 1 and self.vertices[0] == self.vertices[-1]

    def close(self) -> "Polyline2d":
        """Append the first vertex, unless the polyline is already closed or empty."""
        if not self.vertices or self.is_closed():
            return self
        return Polyline2d(vertices=self.vertices + (self.vertices[0],))

    def reverse(self) -> "Polyline2d":
        return Polyline2d(vertices=tuple(reversed(self.vertices)))

    def map_parts(self, transform) -> "Polyline2d":
        return Polyline2d(vertices=tuple(transform(v) for v in self.vertices))

    def place_on(self, sketch_plane) -> "Polyline3d":
        return Polyline3d(vertices=tuple(Point3d.on(sketch_plane, v) for v in self.vertices))


class Polyline3d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """An ordered sequence of 3D vertices joined by straight segments."""
    vertices: Tuple[Point3d, ...] = Field(default=(), description="Vertices in order")

    @classmethod
    def from_vertices(cls, vertices) -> "Polyline3d":
        return cls(vertices=tuple(vertices))

    @classmethod
    def on(cls, sketch_plane, polyline: Polyline2d) -> "Polyline3d":
        return polyline.place_on(sketch_plane)

    def segments(self) -> List:
        from geomkernel.shapes.line_segment import LineSegment3d
        return [LineSegment3d(start_point=a, end_point=b) for a, b in zip(self.vertices, self.vertices[1:])]

    def length(self) -> Quantity:
        return Quantity(value=math.fsum(b.distance_from(a).value for a, b in zip(self.vertices, self.vertices[1:])))

    def centroid(self) -> Optional[Point3d]:
        total = self.length().value
        if total == 0.0:
            return None
        weighted = [(a.midpoint(b), b.distance_from(a).value) for a, b in zip(self.vertices, self.vertices[1:])]
        return Point3d(x=math.fsum(m.x * w for m, w in weighted) / total,
                       y=math.fsum(m.y * w for m, w in weighted) / total,
                       z=math.fsum(m.z * w for m, w in weighted) / total)

    def bounding_box(self) -> Optional[BoundingBox3d]:
        return BoundingBox3d.from_points(self.vertices)

    def is_closed(self) -> bool:
        return len(self.vertices) > 1 and self.vertices[0] == self.vertices[-1]

    def close(self) -> "Polyline3d":
        if not self.vertices or self.is_closed():
            return self
        return Polyline3d(vertices=self.vertices + (self.vertices[0],))

    def reverse(self) -> "Polyline3d":
        return Polyline3d(vertices=tuple(reversed(self.vertices)))

    def map_parts(self, transform) -> "Polyline3d":
        return Polyline3d(vertices=tuple(transform(v) for v in self.vertices))

    def project_onto(self, plane) -> "Polyline3d":
        return self.map_parts(lambda v: v.project_onto(plane))

    def project_into(self, sketch_plane) -> Polyline2d:
        return Polyline2d(vertices=tuple(v.project_into(sketch_plane) for v in self.vertices))
