# geomkernel/shapes/triangle.py
from typing import Generic, List, Optional, Tuple

from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.direction import Direction3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.shapes.circle import Circle2d, Circle3d
from geomkernel.shapes.line_segment import LineSegment2d, LineSegment3d
from geomkernel.units.quantity import Quantity
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable


class Triangle2d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    A triangle given by three vertices.

    Vertex order defines orientation: counterclockwise triangles have a
    positive signed area. Degenerate (collinear) triangles are allowed.
    """
    first_vertex: Point2d
    second_vertex: Point2d
    third_vertex: Point2d

    @classmethod
    def from_vertices(cls, first: Point2d, second: Point2d, third: Point2d) -> "Triangle2d":
        return cls(first_vertex=first, second_vertex=second, third_vertex=third)

    def vertices(self) -> Tuple[Point2d, Point2d, Point2d]:
        return self.first_vertex, self.second_vertex, self.third_vertex

    def edges(self) -> List[LineSegment2d]:
        p1, p2, p3 = self.vertices()
        return [LineSegment2d(start_point=p1, end_point=p2),
                LineSegment2d(start_point=p2, end_point=p3),
                LineSegment2d(start_point=p3, end_point=p1)]

    def centroid(self) -> Point2d:
        p1, p2, p3 = self.vertices()
        return Point2d(x=(p1.x + p2.x + p3.x) / 3.0, y=(p1.y + p2.y + p3.y) / 3.0)

    def signed_area(self) -> Quantity:
        """Positive for counterclockwise vertex order."""
        p1, p2, p3 = self.vertices()
        return Quantity(value=0.5 * p2.vector_from(p1).cross(p3.vector_from(p1)))

    def area(self) -> Quantity:
        return self.signed_area().abs()

    def perimeter(self) -> Quantity:
        return Quantity.sum(edge.length() for edge in self.edges())

    def barycentric_coordinates(self, point: Point2d) -> Optional[Tuple[float, float, float]]:
        """
        Barycentric coordinates of a point with respect to the three vertices.

        Args:
            point: Point to express; it may lie outside the triangle

        Returns:
            Weights (l1, l2, l3) summing to 1 with point = l1 p1 + l2 p2 + l3 p3,
            or None for a degenerate triangle
        """
        p1, p2, p3 = self.vertices()
        det = (p2.y - p3.y) * (p1.x - p3.x) + (p3.x - p2.x) * (p1.y - p3.y)
        if det == 0.0:
            return None
        lam1 = ((p2.y - p3.y) * (point.x - p3.x) + (p3.x - p2.x) * (point.y - p3.y)) / det
        lam2 = ((p3.y - p1.y) * (point.x - p3.x) + (p1.x - p3.x) * (point.y - p3.y)) / det
        return lam1, lam2, 1.0 - (lam1 + lam2)

    def contains(self, point: Point2d) -> bool:
        """True if the point is inside or on the boundary, whatever the vertex order."""
        coordinates = self.barycentric_coordinates(point)
        if coordinates is None:
            return False
        return all(lam >= 0.0 for lam in coordinates)

    def circumcircle(self) -> Optional[Circle2d]:
        return Circle2d.through_points(*self.vertices())

    def bounding_box(self) -> BoundingBox2d:
        return BoundingBox2d.from_points(self.vertices())

    def map_parts(self, transform) -> "Triangle2d":
        return Triangle2d(first_vertex=transform(self.first_vertex),
                          second_vertex=transform(self.second_vertex),
                          third_vertex=transform(self.third_vertex))

    def place_on(self, sketch_plane) -> "Triangle3d":
        return Triangle3d.on(sketch_plane, self)


class Triangle3d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """A triangle in 3D; its normal follows the right-hand rule over the vertex order."""
    first_vertex: Point3d
    second_vertex: Point3d
    third_vertex: Point3d

    @classmethod
    def from_vertices(cls, first: Point3d, second: Point3d, third: Point3d) -> "Triangle3d":
        return cls(first_vertex=first, second_vertex=second, third_vertex=third)

    @classmethod
    def on(cls, sketch_plane, triangle: Triangle2d) -> "Triangle3d":
        return cls.from_vertices(*(Point3d.on(sketch_plane, p) for p in triangle.vertices()))

    def vertices(self) -> Tuple[Point3d, Point3d, Point3d]:
        return self.first_vertex, self.second_vertex, self.third_vertex

    def edges(self) -> List[LineSegment3d]:
        p1, p2, p3 = self.vertices()
        return [LineSegment3d(start_point=p1, end_point=p2),
                LineSegment3d(start_point=p2, end_point=p3),
                LineSegment3d(start_point=p3, end_point=p1)]

    def centroid(self) -> Point3d:
        p1, p2, p3 = self.vertices()
        return Point3d(x=(p1.x + p2.x + p3.x) / 3.0, y=(p1.y + p2.y + p3.y) / 3.0, z=(p1.z + p2.z + p3.z) / 3.0)

    def _cross(self):
        p1, p2, p3 = self.vertices()
        return p2.vector_from(p1).cross(p3.vector_from(p1))

    def area(self) -> Quantity:
        return Quantity(value=0.5 * self._cross().length().value)

    def perimeter(self) -> Quantity:
        return Quantity.sum(edge.length() for edge in self.edges())

    def normal_direction(self) -> Optional[Direction3d]:
        """Unit normal by the right-hand rule, None for a degenerate triangle."""
        return self._cross().direction()

    def circumcircle(self) -> Optional[Circle3d]:
        return Circle3d.through_points(*self.vertices())

    def bounding_box(self) -> BoundingBox3d:
        return BoundingBox3d.from_points(self.vertices())

    def map_parts(self, transform) -> "Triangle3d":
        return Triangle3d(first_vertex=transform(self.first_vertex),
                          second_vertex=transform(self.second_vertex),
                          third_vertex=transform(self.third_vertex))

    def project_onto(self, plane) -> "Triangle3d":
        return self.map_parts(lambda p: p.project_onto(plane))

    def project_into(self, sketch_plane) -> Triangle2d:
        return Triangle2d.from_vertices(*(p.project_into(sketch_plane) for p in self.vertices()))
