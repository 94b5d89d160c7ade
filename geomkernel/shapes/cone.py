# geomkernel/shapes/cone.py
import logging
import math
from typing import Generic, Optional

from pydantic import Field, field_validator

from geomkernel.primitives.axis import Axis3d
from geomkernel.primitives.bounding_box import BoundingBox3d
from geomkernel.primitives.point import Point3d
from geomkernel.shapes.circle import Circle3d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable

logger = logging.getLogger(__name__)


class Cone3d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    """
    A solid right circular cone.

    The axis starts at the center of the base and points towards the tip;
    length is the base-to-tip distance. Radius and length are stored as
    absolute values.
    """
    axis: Axis3d = Field(description="Axis from base center towards the tip")
    radius: float = Field(description="Base radius")
    length: float = Field(description="Distance from base center to tip")

    @field_validator("radius", "length")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        return abs(v)

    @classmethod
    def along(cls, axis: Axis3d, base_distance, tip_distance, radius) -> "Cone3d":
        """
        Cone with base and tip at signed distances along an axis.

        If the tip comes before the base the cone points the other way.
        """
        base = magnitude(base_distance)
        tip = magnitude(tip_distance)
        direction = axis.direction if tip >= base else axis.direction.reverse()
        return cls(axis=Axis3d(origin_point=Point3d.along(axis, base), direction=direction),
                   radius=magnitude(radius), length=abs(tip - base))

    @classmethod
    def start_along(cls, axis: Axis3d, length, radius) -> "Cone3d":
        """Cone with its base at the axis origin, extending along the axis."""
        return cls.along(axis, 0.0, length, radius)

    @classmethod
    def from_base_tip(cls, base_point: Point3d, tip_point: Point3d, radius) -> Optional["Cone3d"]:
        """
        Cone between two points.

        Args:
            base_point: Center of the circular base
            tip_point: Apex of the cone
            radius: Base radius; its sign is dropped

        Returns:
            The cone, or None if base and tip coincide
        """
        axis = Axis3d.through_points(base_point, tip_point)
        if axis is None:
            logger.debug("No cone with coincident base and tip")
            return None
        return cls(axis=axis, radius=magnitude(radius), length=tip_point.distance_from(base_point).value)

    def base_point(self) -> Point3d:
        return self.axis.origin_point

    def tip_point(self) -> Point3d:
        return Point3d.along(self.axis, self.length)

    def axial_direction(self):
        return self.axis.direction

    def base_circle(self) -> Circle3d:
        """The circle bounding the base, with its axis pointing away from the tip."""
        return Circle3d(center_point=self.base_point(), axial_direction=self.axis.direction.reverse(),
                        radius=self.radius)

    def volume(self) -> Quantity:
        return Quantity(value=math.pi * self.radius * self.radius * self.length / 3.0)

    def base_area(self) -> Quantity:
        return Quantity(value=math.pi * self.radius * self.radius)

    def lateral_area(self) -> Quantity:
        return Quantity(value=math.pi * self.radius * math.hypot(self.radius, self.length))

    def contains(self, point: Point3d) -> bool:
        """True if the point is inside or on the surface of the cone."""
        along = point.signed_distance_along(self.axis).value
        if along < 0.0 or along > self.length:
            return False
        if self.length == 0.0:
            return point.distance_from_axis(self.axis).value <= self.radius
        allowed = self.radius * (1.0 - along / self.length)
        return point.distance_from_axis(self.axis).value <= allowed

    def bounding_box(self) -> BoundingBox3d:
        return self.base_circle().bounding_box().union(BoundingBox3d.singleton(self.tip_point()))

    def map_parts(self, transform) -> "Cone3d":
        return self.with_changes(axis=transform(self.axis))

    def scale_about(self, center: Point3d, scale: float) -> "Cone3d":
        """A negative factor reverses the axis so it still runs from base to tip."""
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(radius=abs(scale) * self.radius, length=abs(scale) * self.length)
