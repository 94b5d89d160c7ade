# geomkernel/primitives/plane.py
import logging
from typing import Generic, Optional

from pydantic import Field

from geomkernel.primitives.axis import Axis3d
from geomkernel.primitives.direction import Direction3d
from geomkernel.primitives.point import Point3d
from geomkernel.units.quantity import magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Plane3d(ImmutableModel, Generic[Units, Coordinates]):
    """An infinite plane defined by an origin point and a unit normal direction."""
    origin_point: Point3d = Field(description="Point on the plane")
    normal_direction: Direction3d = Field(description="Unit normal of the plane")

    @classmethod
    def xy(cls) -> "Plane3d":
        return cls(origin_point=Point3d.origin(), normal_direction=Direction3d.positive_z())

    @classmethod
    def yz(cls) -> "Plane3d":
        return cls(origin_point=Point3d.origin(), normal_direction=Direction3d.positive_x())

    @classmethod
    def zx(cls) -> "Plane3d":
        return cls(origin_point=Point3d.origin(), normal_direction=Direction3d.positive_y())

    @classmethod
    def through(cls, point: Point3d, normal: Direction3d) -> "Plane3d":
        return cls(origin_point=point, normal_direction=normal)

    @classmethod
    def with_normal_direction(cls, normal: Direction3d, point: Point3d) -> "Plane3d":
        return cls(origin_point=point, normal_direction=normal)

    @classmethod
    def through_points(cls, first: Point3d, second: Point3d, third: Point3d) -> Optional["Plane3d"]:
        """
        Plane through three points, with the normal given by the right-hand rule
        first -> second -> third. None if the points are collinear.
        """
        normal = second.vector_from(first).cross(third.vector_from(first)).direction()
        if normal is None:
            logger.debug("No plane through collinear points")
            return None
        return cls(origin_point=first, normal_direction=normal)

    def normal_axis(self) -> Axis3d:
        return Axis3d(origin_point=self.origin_point, direction=self.normal_direction)

    def offset_by(self, distance) -> "Plane3d":
        """Shift the plane along its own normal."""
        return self.translate_in(self.normal_direction, magnitude(distance))

    def reverse_normal(self) -> "Plane3d":
        return Plane3d(origin_point=self.origin_point, normal_direction=self.normal_direction.reverse())

    def move_to(self, point: Point3d) -> "Plane3d":
        return Plane3d(origin_point=point, normal_direction=self.normal_direction)

    def translate_by(self, vector) -> "Plane3d":
        return Plane3d(origin_point=self.origin_point.translate_by(vector), normal_direction=self.normal_direction)

    def translate_in(self, direction, distance) -> "Plane3d":
        return Plane3d(origin_point=self.origin_point.translate_in(direction, distance),
                       normal_direction=self.normal_direction)

    def rotate_around(self, axis, angle) -> "Plane3d":
        return Plane3d(origin_point=self.origin_point.rotate_around(axis, angle),
                       normal_direction=self.normal_direction.rotate_around(axis, angle))

    def scale_about(self, center: Point3d, scale: float) -> "Plane3d":
        return Plane3d(origin_point=self.origin_point.scale_about(center, scale),
                       normal_direction=self.normal_direction.scale_about(center, scale))

    def mirror_across(self, plane: "Plane3d") -> "Plane3d":
        return Plane3d(origin_point=self.origin_point.mirror_across(plane),
                       normal_direction=self.normal_direction.mirror_across(plane))

    def relative_to(self, frame) -> "Plane3d":
        return Plane3d(origin_point=self.origin_point.relative_to(frame),
                       normal_direction=self.normal_direction.relative_to(frame))

    def place_in(self, frame) -> "Plane3d":
        return Plane3d(origin_point=self.origin_point.place_in(frame),
                       normal_direction=self.normal_direction.place_in(frame))
