# geomkernel/primitives/axis.py
import logging
from typing import Generic, Optional

from pydantic import Field

from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Axis2d(ImmutableModel, Generic[Units, Coordinates]):
    """An infinite line in 2D with an origin point and a direction."""
    origin_point: Point2d = Field(description="Point the axis passes through")
    direction: Direction2d = Field(description="Direction of the axis")

    @classmethod
    def x(cls) -> "Axis2d":
        return cls(origin_point=Point2d.origin(), direction=Direction2d.positive_x())

    @classmethod
    def y(cls) -> "Axis2d":
        return cls(origin_point=Point2d.origin(), direction=Direction2d.positive_y())

    @classmethod
    def through(cls, point: Point2d, direction: Direction2d) -> "Axis2d":
        return cls(origin_point=point, direction=direction)

    @classmethod
    def through_points(cls, first: Point2d, second: Point2d) -> Optional["Axis2d"]:
        """Axis from first towards second, None if the points coincide."""
        direction = second.vector_from(first).direction()
        if direction is None:
            logger.debug(f"No axis through coincident points {first}")
            return None
        return cls(origin_point=first, direction=direction)

    def reverse(self) -> "Axis2d":
        return Axis2d(origin_point=self.origin_point, direction=self.direction.reverse())

    def move_to(self, point: Point2d) -> "Axis2d":
        return Axis2d(origin_point=point, direction=self.direction)

    def translate_by(self, vector) -> "Axis2d":
        return Axis2d(origin_point=self.origin_point.translate_by(vector), direction=self.direction)

    def translate_in(self, direction, distance) -> "Axis2d":
        return Axis2d(origin_point=self.origin_point.translate_in(direction, distance), direction=self.direction)

    def rotate_around(self, center: Point2d, angle) -> "Axis2d":
        return Axis2d(origin_point=self.origin_point.rotate_around(center, angle),
                      direction=self.direction.rotate_by(angle))

    def scale_about(self, center: Point2d, scale: float) -> "Axis2d":
        return Axis2d(origin_point=self.origin_point.scale_about(center, scale),
                      direction=self.direction.scale_about(center, scale))

    def mirror_across(self, axis: "Axis2d") -> "Axis2d":
        return Axis2d(origin_point=self.origin_point.mirror_across(axis),
                      direction=self.direction.mirror_across(axis))

    def relative_to(self, frame) -> "Axis2d":
        return Axis2d(origin_point=self.origin_point.relative_to(frame),
                      direction=self.direction.relative_to(frame))

    def place_in(self, frame) -> "Axis2d":
        return Axis2d(origin_point=self.origin_point.place_in(frame),
                      direction=self.direction.place_in(frame))

    def place_on(self, sketch_plane) -> "Axis3d":
        return Axis3d.on(sketch_plane, self)


class Axis3d(ImmutableModel, Generic[Units, Coordinates]):
    """An infinite line in 3D with an origin point and a direction."""
    origin_point: Point3d = Field(description="Point the axis passes through")
    direction: Direction3d = Field(description="Direction of the axis")

    @classmethod
    def x(cls) -> "Axis3d":
        return cls(origin_point=Point3d.origin(), direction=Direction3d.positive_x())

    @classmethod
    def y(cls) -> "Axis3d":
        return cls(origin_point=Point3d.origin(), direction=Direction3d.positive_y())

    @classmethod
    def z(cls) -> "Axis3d":
        return cls(origin_point=Point3d.origin(), direction=Direction3d.positive_z())

    @classmethod
    def through(cls, point: Point3d, direction: Direction3d) -> "Axis3d":
        return cls(origin_point=point, direction=direction)

    @classmethod
    def through_points(cls, first: Point3d, second: Point3d) -> Optional["Axis3d"]:
        """Axis from first towards second, None if the points coincide."""
        direction = second.vector_from(first).direction()
        if direction is None:
            logger.debug(f"No axis through coincident points {first}")
            return None
        return cls(origin_point=first, direction=direction)

    @classmethod
    def on(cls, sketch_plane, axis: Axis2d) -> "Axis3d":
        return cls(origin_point=Point3d.on(sketch_plane, axis.origin_point),
                   direction=Direction3d.on(sketch_plane, axis.direction))

    def reverse(self) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point, direction=self.direction.reverse())

    def move_to(self, point: Point3d) -> "Axis3d":
        return Axis3d(origin_point=point, direction=self.direction)

    def translate_by(self, vector) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point.translate_by(vector), direction=self.direction)

    def translate_in(self, direction, distance) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point.translate_in(direction, distance), direction=self.direction)

    def rotate_around(self, axis: "Axis3d", angle) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point.rotate_around(axis, angle),
                      direction=self.direction.rotate_around(axis, angle))

    def scale_about(self, center: Point3d, scale: float) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point.scale_about(center, scale),
                      direction=self.direction.scale_about(center, scale))

    def mirror_across(self, plane) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point.mirror_across(plane),
                      direction=self.direction.mirror_across(plane))

    def project_onto(self, plane) -> Optional["Axis3d"]:
        """Projection onto a plane, None if the axis is perpendicular to it."""
        direction = self.direction.project_onto(plane)
        if direction is None:
            return None
        return Axis3d(origin_point=self.origin_point.project_onto(plane), direction=direction)

    def project_into(self, sketch_plane) -> Optional[Axis2d]:
        """Projection into a sketch plane, None if the axis is perpendicular to it."""
        direction = self.direction.project_into(sketch_plane)
        if direction is None:
            return None
        return Axis2d(origin_point=self.origin_point.project_into(sketch_plane), direction=direction)

    def relative_to(self, frame) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point.relative_to(frame),
                      direction=self.direction.relative_to(frame))

    def place_in(self, frame) -> "Axis3d":
        return Axis3d(origin_point=self.origin_point.place_in(frame),
                      direction=self.direction.place_in(frame))
