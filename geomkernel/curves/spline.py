# geomkernel/curves/spline.py
"""
Quadratic and cubic Bezier splines in 2D and 3D.

Points are evaluated with de Casteljau's algorithm (repeated linear
interpolation of the control points), which is numerically stable and
reproduces the end control points exactly at t = 0 and t = 1.
"""
import math
from typing import Generic, List, Literal, Tuple

from geomkernel.curves.approximation import ApproximableCurve2d, ApproximableCurve3d
from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.vector import Vector2d, Vector3d
from geomkernel.units.quantity import Quantity
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable


def _de_casteljau(points, parameter: float, interpolate):
    while len(points) > 1:
        points = [interpolate(a, b, parameter) for a, b in zip(points, points[1:])]
    return points[0]


def _turning_parameters(coordinates) -> List[float]:
    """Parameters strictly inside (0, 1) where one Bezier coordinate has zero derivative."""
    hodograph = [b - a for a, b in zip(coordinates, coordinates[1:])]
    if len(hodograph) == 2:
        a, b = hodograph
        roots = [a / (a - b)] if a != b else []
    else:
        a, b, c = hodograph
        qa = a - 2.0 * b + c
        qb = 2.0 * (b - a)
        if qa == 0.0:
            roots = [-a / qb] if qb != 0.0 else []
        else:
            discriminant = qb * qb - 4.0 * qa * a
            if discriminant < 0.0:
                roots = []
            else:
                root = math.sqrt(discriminant)
                roots = [(-qb - root) / (2.0 * qa), (-qb + root) / (2.0 * qa)]
    return [t for t in roots if 0.0 < t < 1.0]


def _extreme_parameters(control_points, names: str) -> List[float]:
    """The end parameters plus every turning parameter of the named coordinates."""
    parameters = {0.0, 1.0}
    for name in names:
        parameters.update(_turning_parameters([getattr(p, name) for p in control_points]))
    return sorted(parameters)


class QuadraticSpline2d(ApproximableCurve2d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """A quadratic Bezier curve; it passes through the first and third control points."""
    kind: Literal["quadratic_spline"] = "quadratic_spline"
    first_control_point: Point2d
    second_control_point: Point2d
    third_control_point: Point2d

    @classmethod
    def from_control_points(cls, first: Point2d, second: Point2d, third: Point2d) -> "QuadraticSpline2d":
        """
        Build a spline from its three control points.

        Args:
            first: Start point
            second: Inner control point; the end tangents both point at it
            third: End point

        Returns:
            The spline, which lies inside the triangle of its control points
        """
        return cls(first_control_point=first, second_control_point=second, third_control_point=third)

    def control_points(self) -> Tuple[Point2d, Point2d, Point2d]:
        return self.first_control_point, self.second_control_point, self.third_control_point

    def start_point(self) -> Point2d:
        return self.first_control_point

    def end_point(self) -> Point2d:
        return self.third_control_point

    def point_on(self, parameter: float) -> Point2d:
        """
        Evaluate the spline.

        Args:
            parameter: Curve parameter; 0 gives the start point and 1 the end point

        Returns:
            The point on the curve, exact at both ends
        """
        return _de_casteljau(list(self.control_points()), parameter, Point2d.interpolate_from)

    def first_derivative(self, parameter: float) -> Vector2d:
        v1 = self.second_control_point.vector_from(self.first_control_point)
        v2 = self.third_control_point.vector_from(self.second_control_point)
        return Vector2d.interpolate_from(v1, v2, parameter).scale_by(2.0)

    def second_derivative(self) -> Vector2d:
        v1 = self.second_control_point.vector_from(self.first_control_point)
        v2 = self.third_control_point.vector_from(self.second_control_point)
        return v2.minus(v1).scale_by(2.0)

    def max_second_derivative_magnitude(self) -> Quantity:
        """The second derivative of a quadratic spline is constant."""
        return self.second_derivative().length()

    def bounding_box(self) -> BoundingBox2d:
        """Exact bounds: the end points and the points where X or Y turns around."""
        return BoundingBox2d.from_points(self.point_on(t) for t in _extreme_parameters(self.control_points(), "xy"))

    def reverse(self) -> "QuadraticSpline2d":
        return QuadraticSpline2d(first_control_point=self.third_control_point,
                                 second_control_point=self.second_control_point,
                                 third_control_point=self.first_control_point)

    def map_parts(self, transform) -> "QuadraticSpline2d":
        return QuadraticSpline2d(first_control_point=transform(self.first_control_point),
                                 second_control_point=transform(self.second_control_point),
                                 third_control_point=transform(self.third_control_point))

    def place_on(self, sketch_plane) -> "QuadraticSpline3d":
        return QuadraticSpline3d.on(sketch_plane, self)


class QuadraticSpline3d(ApproximableCurve3d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    kind: Literal["quadratic_spline"] = "quadratic_spline"
    first_control_point: Point3d
    second_control_point: Point3d
    third_control_point: Point3d

    @classmethod
    def from_control_points(cls, first: Point3d, second: Point3d, third: Point3d) -> "QuadraticSpline3d":
        return cls(first_control_point=first, second_control_point=second, third_control_point=third)

    @classmethod
    def on(cls, sketch_plane, spline: QuadraticSpline2d) -> "QuadraticSpline3d":
        return cls(first_control_point=Point3d.on(sketch_plane, spline.first_control_point),
                   second_control_point=Point3d.on(sketch_plane, spline.second_control_point),
                   third_control_point=Point3d.on(sketch_plane, spline.third_control_point))

    def control_points(self) -> Tuple[Point3d, Point3d, Point3d]:
        return self.first_control_point, self.second_control_point, self.third_control_point

    def start_point(self) -> Point3d:
        return self.first_control_point

    def end_point(self) -> Point3d:
        return self.third_control_point

    def point_on(self, parameter: float) -> Point3d:
        return _de_casteljau(list(self.control_points()), parameter, Point3d.interpolate_from)

    def first_derivative(self, parameter: float) -> Vector3d:
        v1 = self.second_control_point.vector_from(self.first_control_point)
        v2 = self.third_control_point.vector_from(self.second_control_point)
        return Vector3d.interpolate_from(v1, v2, parameter).scale_by(2.0)

    def second_derivative(self) -> Vector3d:
        v1 = self.second_control_point.vector_from(self.first_control_point)
        v2 = self.third_control_point.vector_from(self.second_control_point)
        return v2.minus(v1).scale_by(2.0)

    def max_second_derivative_magnitude(self) -> Quantity:
        return self.second_derivative().length()

    def bounding_box(self) -> BoundingBox3d:
        return BoundingBox3d.from_points(self.point_on(t) for t in _extreme_parameters(self.control_points(), "xyz"))

    def reverse(self) -> "QuadraticSpline3d":
        return QuadraticSpline3d(first_control_point=self.third_control_point,
                                 second_control_point=self.second_control_point,
                                 third_control_point=self.first_control_point)

    def map_parts(self, transform) -> "QuadraticSpline3d":
        return QuadraticSpline3d(first_control_point=transform(self.first_control_point),
                                 second_control_point=transform(self.second_control_point),
                                 third_control_point=transform(self.third_control_point))

    def project_into(self, sketch_plane) -> QuadraticSpline2d:
        return QuadraticSpline2d(first_control_point=self.first_control_point.project_into(sketch_plane),
                                 second_control_point=self.second_control_point.project_into(sketch_plane),
                                 third_control_point=self.third_control_point.project_into(sketch_plane))


class CubicSpline2d(ApproximableCurve2d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """A cubic Bezier curve through its first and fourth control points."""
    kind: Literal["cubic_spline"] = "cubic_spline"
    first_control_point: Point2d
    second_control_point: Point2d
    third_control_point: Point2d
    fourth_control_point: Point2d

    @classmethod
    def from_control_points(cls, first: Point2d, second: Point2d, third: Point2d,
                            fourth: Point2d) -> "CubicSpline2d":
        return cls(first_control_point=first, second_control_point=second, third_control_point=third,
                   fourth_control_point=fourth)

    @classmethod
    def from_endpoints(cls, start_point: Point2d, start_derivative: Vector2d, end_point: Point2d,
                       end_derivative: Vector2d) -> "CubicSpline2d":
        """
        Hermite form: the spline with the given end points and end derivatives.

        Args:
            start_point: Point at parameter 0
            start_derivative: First derivative at parameter 0
            end_point: Point at parameter 1
            end_derivative: First derivative at parameter 1

        Returns:
            The spline whose inner control points sit a third of each derivative
            away from the matching end point
        """
        return cls(first_control_point=start_point,
                   second_control_point=start_point.translate_by(start_derivative.scale_by(1.0 / 3.0)),
                   third_control_point=end_point.translate_by(end_derivative.scale_by(-1.0 / 3.0)),
                   fourth_control_point=end_point)

    def control_points(self) -> Tuple[Point2d, Point2d, Point2d, Point2d]:
        return (self.first_control_point, self.second_control_point, self.third_control_point,
                self.fourth_control_point)

    def start_point(self) -> Point2d:
        return self.first_control_point

    def end_point(self) -> Point2d:
        return self.fourth_control_point

    def point_on(self, parameter: float) -> Point2d:
        return _de_casteljau(list(self.control_points()), parameter, Point2d.interpolate_from)

    def _hull_vectors(self) -> Tuple[Vector2d, Vector2d, Vector2d]:
        p1, p2, p3, p4 = self.control_points()
        return p2.vector_from(p1), p3.vector_from(p2), p4.vector_from(p3)

    def first_derivative(self, parameter: float) -> Vector2d:
        return _de_casteljau(list(self._hull_vectors()), parameter, Vector2d.interpolate_from).scale_by(3.0)

    def start_derivative(self) -> Vector2d:
        return self.first_derivative(0.0)

    def end_derivative(self) -> Vector2d:
        return self.first_derivative(1.0)

    def max_second_derivative_magnitude(self) -> Quantity:
        """The second derivative is linear in t, so its largest magnitude is at an end."""
        v1, v2, v3 = self._hull_vectors()
        start = v2.minus(v1).scale_by(6.0).length()
        end = v3.minus(v2).scale_by(6.0).length()
        return Quantity.max(start, end)

    def bounding_box(self) -> BoundingBox2d:
        return BoundingBox2d.from_points(self.point_on(t) for t in _extreme_parameters(self.control_points(), "xy"))

    def reverse(self) -> "CubicSpline2d":
        p1, p2, p3, p4 = self.control_points()
        return CubicSpline2d.from_control_points(p4, p3, p2, p1)

    def map_parts(self, transform) -> "CubicSpline2d":
        return CubicSpline2d.from_control_points(*(transform(p) for p in self.control_points()))

    def place_on(self, sketch_plane) -> "CubicSpline3d":
        return CubicSpline3d.on(sketch_plane, self)


class CubicSpline3d(ApproximableCurve3d, Transformable, ImmutableModel, Generic[Units, Coordinates]):
    kind: Literal["cubic_spline"] = "cubic_spline"
    first_control_point: Point3d
    second_control_point: Point3d
    third_control_point: Point3d
    fourth_control_point: Point3d

    @classmethod
    def from_control_points(cls, first: Point3d, second: Point3d, third: Point3d,
                            fourth: Point3d) -> "CubicSpline3d":
        return cls(first_control_point=first, second_control_point=second, third_control_point=third,
                   fourth_control_point=fourth)

    @classmethod
    def from_endpoints(cls, start_point: Point3d, start_derivative: Vector3d, end_point: Point3d,
                       end_derivative: Vector3d) -> "CubicSpline3d":
        return cls(first_control_point=start_point,
                   second_control_point=start_point.translate_by(start_derivative.scale_by(1.0 / 3.0)),
                   third_control_point=end_point.translate_by(end_derivative.scale_by(-1.0 / 3.0)),
                   fourth_control_point=end_point)

    @classmethod
    def on(cls, sketch_plane, spline: CubicSpline2d) -> "CubicSpline3d":
        return cls.from_control_points(*(Point3d.on(sketch_plane, p) for p in spline.control_points()))

    def control_points(self) -> Tuple[Point3d, Point3d, Point3d, Point3d]:
        return (self.first_control_point, self.second_control_point, self.third_control_point,
                self.fourth_control_point)

    def start_point(self) -> Point3d:
        return self.first_control_point

    def end_point(self) -> Point3d:
        return self.fourth_control_point

    def point_on(self, parameter: float) -> Point3d:
        return _de_casteljau(list(self.control_points()), parameter, Point3d.interpolate_from)

    def _hull_vectors(self) -> Tuple[Vector3d, Vector3d, Vector3d]:
        p1, p2, p3, p4 = self.control_points()
        return p2.vector_from(p1), p3.vector_from(p2), p4.vector_from(p3)

    def first_derivative(self, parameter: float) -> Vector3d:
        return _de_casteljau(list(self._hull_vectors()), parameter, Vector3d.interpolate_from).scale_by(3.0)

    def start_derivative(self) -> Vector3d:
        return self.first_derivative(0.0)

    def end_derivative(self) -> Vector3d:
        return self.first_derivative(1.0)

    def max_second_derivative_magnitude(self) -> Quantity:
        v1, v2, v3 = self._hull_vectors()
        return Quantity.max(v2.minus(v1).scale_by(6.0).length(), v3.minus(v2).scale_by(6.0).length())

    def bounding_box(self) -> BoundingBox3d:
        return BoundingBox3d.from_points(self.point_on(t) for t in _extreme_parameters(self.control_points(), "xyz"))

    def reverse(self) -> "CubicSpline3d":
        p1, p2, p3, p4 = self.control_points()
        return CubicSpline3d.from_control_points(p4, p3, p2, p1)

    def map_parts(self, transform) -> "CubicSpline3d":
        return CubicSpline3d.from_control_points(*(transform(p) for p in self.control_points()))

    def project_into(self, sketch_plane) -> CubicSpline2d:
        return CubicSpline2d.from_control_points(*(p.project_into(sketch_plane) for p in self.control_points()))
