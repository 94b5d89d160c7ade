# geomkernel/curves/curve.py
import logging
from typing import Annotated, Generic, Union

from pydantic import Field

from geomkernel.curves.approximation import num_segments
from geomkernel.curves.arc import Arc2d, Arc3d
from geomkernel.curves.elliptical_arc import EllipticalArc2d, EllipticalArc3d
from geomkernel.curves.spline import CubicSpline2d, CubicSpline3d, QuadraticSpline2d, QuadraticSpline3d
from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.shapes.line_segment import LineSegment2d, LineSegment3d
from geomkernel.shapes.polyline import Polyline2d, Polyline3d
from geomkernel.units.quantity import Quantity
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)

__all__ = ["Curve2d", "Curve3d", "num_segments"]

AnyCurve2d = Annotated[
    Union[LineSegment2d, Arc2d, EllipticalArc2d, QuadraticSpline2d, CubicSpline2d],
    Field(discriminator="kind"),
]

AnyCurve3d = Annotated[
    Union[LineSegment3d, Arc3d, EllipticalArc3d, QuadraticSpline3d, CubicSpline3d],
    Field(discriminator="kind"),
]


class Curve2d(ImmutableModel, Generic[Units, Coordinates]):
    """
    Any one of the 2D curve primitives.

    The wrapped curve is tagged by its ``kind`` field, so a serialized curve
    (``model_dump()``) validates back into the right primitive. Every
    operation is forwarded to the wrapped curve, and transformations re-wrap
    the result.
    """
    curve: AnyCurve2d

    @classmethod
    def of(cls, curve) -> "Curve2d":
        """Wrap a primitive curve; an existing Curve2d is returned unchanged."""
        if isinstance(curve, Curve2d):
            return curve
        return cls(curve=curve)

    def kind(self) -> str:
        return self.curve.kind

    def start_point(self):
        return self.curve.point_on(0.0)

    def end_point(self):
        return self.curve.point_on(1.0)

    def point_on(self, parameter: float):
        return self.curve.point_on(parameter)

    def first_derivative(self, parameter: float):
        return self.curve.first_derivative(parameter)

    def max_second_derivative_magnitude(self) -> Quantity:
        return self.curve.max_second_derivative_magnitude()

    def num_approximation_segments(self, max_error) -> int:
        return self.curve.num_approximation_segments(max_error)

    def segments(self, count: int) -> Polyline2d:
        return self.curve.segments(count)

    def approximate(self, max_error) -> Polyline2d:
        return self.curve.approximate(max_error)

    def bounding_box(self) -> BoundingBox2d:
        """Exact bounding box of the underlying curve."""
        return self.curve.bounding_box()

    def reverse(self) -> "Curve2d":
        return Curve2d(curve=self.curve.reverse())

    def translate_by(self, vector) -> "Curve2d":
        return Curve2d(curve=self.curve.translate_by(vector))

    def translate_in(self, direction, distance) -> "Curve2d":
        return Curve2d(curve=self.curve.translate_in(direction, distance))

    def rotate_around(self, center, angle) -> "Curve2d":
        return Curve2d(curve=self.curve.rotate_around(center, angle))

    def scale_about(self, center, scale: float) -> "Curve2d":
        return Curve2d(curve=self.curve.scale_about(center, scale))

    def mirror_across(self, axis) -> "Curve2d":
        return Curve2d(curve=self.curve.mirror_across(axis))

    def relative_to(self, frame) -> "Curve2d":
        return Curve2d(curve=self.curve.relative_to(frame))

    def place_in(self, frame) -> "Curve2d":
        return Curve2d(curve=self.curve.place_in(frame))

    def place_on(self, sketch_plane) -> "Curve3d":
        return Curve3d(curve=self.curve.place_on(sketch_plane))


class Curve3d(ImmutableModel, Generic[Units, Coordinates]):
    """Any one of the 3D curve primitives; see Curve2d."""
    curve: AnyCurve3d

    @classmethod
    def of(cls, curve) -> "Curve3d":
        if isinstance(curve, Curve3d):
            return curve
        return cls(curve=curve)

    @classmethod
    def on(cls, sketch_plane, curve) -> "Curve3d":
        return Curve2d.of(curve).place_on(sketch_plane)

    def kind(self) -> str:
        return self.curve.kind

    def start_point(self):
        return self.curve.point_on(0.0)

    def end_point(self):
        return self.curve.point_on(1.0)

    def point_on(self, parameter: float):
        return self.curve.point_on(parameter)

    def first_derivative(self, parameter: float):
        return self.curve.first_derivative(parameter)

    def max_second_derivative_magnitude(self) -> Quantity:
        return self.curve.max_second_derivative_magnitude()

    def num_approximation_segments(self, max_error) -> int:
        return self.curve.num_approximation_segments(max_error)

    def segments(self, count: int) -> Polyline3d:
        return self.curve.segments(count)

    def approximate(self, max_error) -> Polyline3d:
        return self.curve.approximate(max_error)

    def bounding_box(self) -> BoundingBox3d:
        return self.curve.bounding_box()

    def reverse(self) -> "Curve3d":
        return Curve3d(curve=self.curve.reverse())

    def translate_by(self, vector) -> "Curve3d":
        return Curve3d(curve=self.curve.translate_by(vector))

    def translate_in(self, direction, distance) -> "Curve3d":
        return Curve3d(curve=self.curve.translate_in(direction, distance))

    def rotate_around(self, axis, angle) -> "Curve3d":
        return Curve3d(curve=self.curve.rotate_around(axis, angle))

    def scale_about(self, center, scale: float) -> "Curve3d":
        return Curve3d(curve=self.curve.scale_about(center, scale))

    def mirror_across(self, plane) -> "Curve3d":
        return Curve3d(curve=self.curve.mirror_across(plane))

    def relative_to(self, frame) -> "Curve3d":
        return Curve3d(curve=self.curve.relative_to(frame))

    def place_in(self, frame) -> "Curve3d":
        return Curve3d(curve=self.curve.place_in(frame))

    def project_into(self, sketch_plane) -> Curve2d:
        """Projection into a sketch plane; arcs become elliptical arcs."""
        return Curve2d(curve=self.curve.project_into(sketch_plane))
