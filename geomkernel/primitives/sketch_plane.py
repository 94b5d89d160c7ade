# geomkernel/primitives/sketch_plane.py
import logging
from typing import Generic, Optional

from pydantic import Field, model_validator

from geomkernel.constants import UNIT_TOLERANCE
from geomkernel.primitives.axis import Axis3d
from geomkernel.primitives.direction import Direction3d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.point import Point3d
from geomkernel.units.tags import Units, Coordinates, Defines
from geomkernel.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class SketchPlane3d(ImmutableModel, Generic[Units, Coordinates, Defines]):
    """
    A 2D coordinate system embedded in 3D space.

    Used to lift 2D geometry into 3D (``Point3d.on(sketch_plane, point2d)``)
    and to project 3D geometry into 2D (``point3d.project_into(sketch_plane)``).
    The two in-plane directions must be perpendicular unit vectors; use
    SketchPlane3d.unsafe() to skip that check when it is already guaranteed.
    """
    origin_point: Point3d = Field(description="Origin of the 2D coordinate system")
    x_direction: Direction3d = Field(description="Direction of the local X axis")
    y_direction: Direction3d = Field(description="Direction of the local Y axis")

    @model_validator(mode="after")
    def validate_perpendicular(self):
        """Validate that the in-plane directions are perpendicular."""
        dot = self.x_direction.component_in(self.y_direction)
        if abs(dot) > UNIT_TOLERANCE:
            raise ValueError(f"Sketch plane directions must be perpendicular, got dot product {dot}")
        return self

    @classmethod
    def _cardinal(cls, x_direction: Direction3d, y_direction: Direction3d) -> "SketchPlane3d":
        return cls.unsafe(origin_point=Point3d.origin(), x_direction=x_direction, y_direction=y_direction)

    @classmethod
    def xy(cls) -> "SketchPlane3d":
        return cls._cardinal(Direction3d.positive_x(), Direction3d.positive_y())

    @classmethod
    def yx(cls) -> "SketchPlane3d":
        return cls._cardinal(Direction3d.positive_y(), Direction3d.positive_x())

    @classmethod
    def yz(cls) -> "SketchPlane3d":
        return cls._cardinal(Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def zy(cls) -> "SketchPlane3d":
        return cls._cardinal(Direction3d.positive_z(), Direction3d.positive_y())

    @classmethod
    def zx(cls) -> "SketchPlane3d":
        return cls._cardinal(Direction3d.positive_z(), Direction3d.positive_x())

    @classmethod
    def xz(cls) -> "SketchPlane3d":
        return cls._cardinal(Direction3d.positive_x(), Direction3d.positive_z())

    @classmethod
    def from_plane(cls, plane: Plane3d) -> "SketchPlane3d":
        """Sketch plane whose normal is the plane normal, with arbitrary in-plane axes."""
        x_direction, y_direction = plane.normal_direction.perpendicular_basis()
        return cls.unsafe(origin_point=plane.origin_point, x_direction=x_direction, y_direction=y_direction)

    @classmethod
    def through_points(cls, first: Point3d, second: Point3d, third: Point3d) -> Optional["SketchPlane3d"]:
        """
        Sketch plane with origin at first, X axis towards second and third
        on the positive Y side. None if the points are collinear.
        """
        x_direction = second.vector_from(first).direction()
        if x_direction is None:
            return None
        v = third.vector_from(first)
        y_direction = v.minus(v.projection_in(x_direction)).direction()
        if y_direction is None:
            logger.debug("No sketch plane through collinear points")
            return None
        return cls.unsafe(origin_point=first, x_direction=x_direction, y_direction=y_direction)

    def normal_direction(self) -> Direction3d:
        return Direction3d.unsafe(**self.x_direction.cross(self.y_direction).model_dump())

    def normal_axis(self) -> Axis3d:
        return Axis3d(origin_point=self.origin_point, direction=self.normal_direction())

    def x_axis(self) -> Axis3d:
        return Axis3d(origin_point=self.origin_point, direction=self.x_direction)

    def y_axis(self) -> Axis3d:
        return Axis3d(origin_point=self.origin_point, direction=self.y_direction)

    def to_plane(self) -> Plane3d:
        return Plane3d(origin_point=self.origin_point, normal_direction=self.normal_direction())

    def to_frame(self):
        """Right-handed frame with this sketch plane's axes and its normal as Z."""
        from geomkernel.primitives.frame import Frame3d
        return Frame3d.unsafe(origin_point=self.origin_point, x_direction=self.x_direction,
                              y_direction=self.y_direction, z_direction=self.normal_direction())

    def _with(self, origin_point: Point3d, x_direction: Direction3d, y_direction: Direction3d) -> "SketchPlane3d":
        return SketchPlane3d.unsafe(origin_point=origin_point, x_direction=x_direction, y_direction=y_direction)

    def reverse_x(self) -> "SketchPlane3d":
        return self._with(self.origin_point, self.x_direction.reverse(), self.y_direction)

    def reverse_y(self) -> "SketchPlane3d":
        return self._with(self.origin_point, self.x_direction, self.y_direction.reverse())

    def move_to(self, point: Point3d) -> "SketchPlane3d":
        return self._with(point, self.x_direction, self.y_direction)

    def offset_by(self, distance) -> "SketchPlane3d":
        """Shift along the sketch plane normal."""
        return self.move_to(self.origin_point.translate_in(self.normal_direction(), distance))

    def translate_by(self, vector) -> "SketchPlane3d":
        return self._with(self.origin_point.translate_by(vector), self.x_direction, self.y_direction)

    def translate_in(self, direction, distance) -> "SketchPlane3d":
        return self._with(self.origin_point.translate_in(direction, distance), self.x_direction, self.y_direction)

    def rotate_around(self, axis, angle) -> "SketchPlane3d":
        return self._with(self.origin_point.rotate_around(axis, angle),
                          self.x_direction.rotate_around(axis, angle),
                          self.y_direction.rotate_around(axis, angle))

    def scale_about(self, center: Point3d, scale: float) -> "SketchPlane3d":
        return self._with(self.origin_point.scale_about(center, scale),
                          self.x_direction.scale_about(center, scale),
                          self.y_direction.scale_about(center, scale))

    def mirror_across(self, plane) -> "SketchPlane3d":
        """Mirror across a plane; the normal (X cross Y) ends up flipped relative to the geometry."""
        return self._with(self.origin_point.mirror_across(plane),
                          self.x_direction.mirror_across(plane),
                          self.y_direction.mirror_across(plane))

    def relative_to(self, frame) -> "SketchPlane3d":
        return self._with(self.origin_point.relative_to(frame),
                          self.x_direction.relative_to(frame),
                          self.y_direction.relative_to(frame))

    def place_in(self, frame) -> "SketchPlane3d":
        return self._with(self.origin_point.place_in(frame),
                          self.x_direction.place_in(frame),
                          self.y_direction.place_in(frame))
