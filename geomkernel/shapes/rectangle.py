# geomkernel/shapes/rectangle.py
from typing import Generic, List, Tuple

from pydantic import Field, field_validator

from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d
from geomkernel.primitives.direction import Direction3d
from geomkernel.primitives.frame import Frame2d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.shapes.line_segment import LineSegment2d, LineSegment3d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable

# Corners in local (u, v) coordinates, counterclockwise in the rectangle's own axes
_CORNERS = ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5))


class Rectangle2d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    A rectangle centered on the origin of its axes frame.

    Dimensions are stored as absolute values. Mirroring gives a rectangle
    with left-handed axes, so its vertices run clockwise.
    """
    axes: Frame2d = Field(description="Frame at the center with edges along its axes")
    x_dimension: float = Field(description="Width along the local X axis")
    y_dimension: float = Field(description="Height along the local Y axis")

    @field_validator("x_dimension", "y_dimension")
    @classmethod
    def validate_dimension(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def centered_on(cls, axes: Frame2d, width, height) -> "Rectangle2d":
        """
        Rectangle centered on the origin of a frame and aligned with its axes.

        Args:
            axes: Frame giving the center point and the width and height directions
            width: Full extent along the frame's X direction
            height: Full extent along the frame's Y direction
        """
        return cls(axes=axes, x_dimension=magnitude(width), y_dimension=magnitude(height))

    @classmethod
    def from_extrema(cls, min_x, max_x, min_y, max_y) -> "Rectangle2d":
        x1, x2, y1, y2 = (magnitude(v) for v in (min_x, max_x, min_y, max_y))
        center = Point2d(x=(x1 + x2) / 2, y=(y1 + y2) / 2)
        return cls(axes=Frame2d.at_point(center), x_dimension=x2 - x1, y_dimension=y2 - y1)

    @classmethod
    def from_corners(cls, first: Point2d, second: Point2d) -> "Rectangle2d":
        """Axis-aligned rectangle with the two points as opposite corners."""
        return cls.from_extrema(first.x, second.x, first.y, second.y)

    def center_point(self) -> Point2d:
        return self.axes.origin_point

    def dimensions(self) -> Tuple[Quantity, Quantity]:
        return Quantity(value=self.x_dimension), Quantity(value=self.y_dimension)

    def area(self) -> Quantity:
        return Quantity(value=self.x_dimension * self.y_dimension)

    def interpolate(self, u: float, v: float) -> Point2d:
        """Point at fractions (u, v) across the rectangle; (0, 0) and (1, 1) are opposite corners."""
        local = Point2d(x=(u - 0.5) * self.x_dimension, y=(v - 0.5) * self.y_dimension)
        return local.place_in(self.axes)

    def vertices(self) -> List[Point2d]:
        return [self.interpolate(u + 0.5, v + 0.5) for u, v in _CORNERS]

    def edges(self) -> List[LineSegment2d]:
        corners = self.vertices()
        return [LineSegment2d(start_point=a, end_point=b) for a, b in zip(corners, corners[1:] + corners[:1])]

    def contains(self, point: Point2d) -> bool:
        local = point.relative_to(self.axes)
        return abs(local.x) <= self.x_dimension / 2 and abs(local.y) <= self.y_dimension / 2

    def bounding_box(self) -> BoundingBox2d:
        return BoundingBox2d.from_points(self.vertices())

    def map_parts(self, transform) -> "Rectangle2d":
        return self.with_changes(axes=transform(self.axes))

    def scale_about(self, center: Point2d, scale: float) -> "Rectangle2d":
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(x_dimension=abs(scale) * self.x_dimension,
                                   y_dimension=abs(scale) * self.y_dimension)

    def place_on(self, sketch_plane: SketchPlane3d) -> "Rectangle3d":
        return Rectangle3d.on(sketch_plane, self)


class Rectangle3d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """A rectangle in 3D, centered on the origin of a sketch plane."""
    axes: SketchPlane3d = Field(description="Sketch plane at the center with edges along its axes")
    x_dimension: float
    y_dimension: float

    @field_validator("x_dimension", "y_dimension")
    @classmethod
    def validate_dimension(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def centered_on(cls, axes: SketchPlane3d, width, height) -> "Rectangle3d":
        return cls(axes=axes, x_dimension=magnitude(width), y_dimension=magnitude(height))

    @classmethod
    def on(cls, sketch_plane: SketchPlane3d, rectangle: Rectangle2d) -> "Rectangle3d":
        return cls(axes=rectangle.axes.place_on(sketch_plane), x_dimension=rectangle.x_dimension,
                   y_dimension=rectangle.y_dimension)

    def center_point(self) -> Point3d:
        return self.axes.origin_point

    def dimensions(self) -> Tuple[Quantity, Quantity]:
        return Quantity(value=self.x_dimension), Quantity(value=self.y_dimension)

    def area(self) -> Quantity:
        return Quantity(value=self.x_dimension * self.y_dimension)

    def normal_direction(self) -> Direction3d:
        return self.axes.normal_direction()

    def interpolate(self, u: float, v: float) -> Point3d:
        return Point3d.on(self.axes, Point2d(x=(u - 0.5) * self.x_dimension, y=(v - 0.5) * self.y_dimension))

    def vertices(self) -> List[Point3d]:
        return [self.interpolate(u + 0.5, v + 0.5) for u, v in _CORNERS]

    def edges(self) -> List[LineSegment3d]:
        corners = self.vertices()
        return [LineSegment3d(start_point=a, end_point=b) for a, b in zip(corners, corners[1:] + corners[:1])]

    def bounding_box(self) -> BoundingBox3d:
        return BoundingBox3d.from_points(self.vertices())

    def map_parts(self, transform) -> "Rectangle3d":
        return self.with_changes(axes=transform(self.axes))

    def scale_about(self, center: Point3d, scale: float) -> "Rectangle3d":
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(x_dimension=abs(scale) * self.x_dimension,
                                   y_dimension=abs(scale) * self.y_dimension)
