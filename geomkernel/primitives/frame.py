# geomkernel/primitives/frame.py
import logging
from typing import Callable, Generic

from pydantic import Field, model_validator

from geomkernel.constants import UNIT_TOLERANCE
from geomkernel.primitives.axis import Axis2d, Axis3d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.units.quantity import magnitude
from geomkernel.units.tags import Units, Coordinates, Defines
from geomkernel.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


def _check_perpendicular(first, second, names: str) -> None:
    dot = first.component_in(second)
    if abs(dot) > UNIT_TOLERANCE:
        raise ValueError(f"Frame directions {names} must be perpendicular, got dot product {dot}")


class Frame2d(ImmutableModel, Generic[Units, Coordinates, Defines]):
    """
    A local 2D coordinate system: an origin point plus two perpendicular
    unit directions.

    Frames may be left-handed (e.g. after a mirror). Converting a value with
    relative_to() expresses it in the frame's local coordinates, and
    place_in() converts it back out to the coordinates the frame lives in.
    """
    origin_point: Point2d = Field(description="Origin of the local coordinate system")
    x_direction: Direction2d = Field(description="Local X direction")
    y_direction: Direction2d = Field(description="Local Y direction")

    @model_validator(mode="after")
    def validate_orthonormal(self):
        """Validate that the frame directions are perpendicular."""
        _check_perpendicular(self.x_direction, self.y_direction, "X and Y")
        return self

    @classmethod
    def at_origin(cls) -> "Frame2d":
        return cls.unsafe(origin_point=Point2d.origin(), x_direction=Direction2d.positive_x(),
                          y_direction=Direction2d.positive_y())

    @classmethod
    def at_point(cls, point: Point2d) -> "Frame2d":
        return cls.unsafe(origin_point=point, x_direction=Direction2d.positive_x(),
                          y_direction=Direction2d.positive_y())

    @classmethod
    def with_x_direction(cls, direction: Direction2d, origin_point: Point2d = None) -> "Frame2d":
        """Right-handed frame with the given X direction."""
        if origin_point is None:
            origin_point = Point2d.origin()
        return cls.unsafe(origin_point=origin_point, x_direction=direction, y_direction=direction.perpendicular())

    @classmethod
    def with_y_direction(cls, direction: Direction2d, origin_point: Point2d = None) -> "Frame2d":
        """Right-handed frame with the given Y direction."""
        if origin_point is None:
            origin_point = Point2d.origin()
        return cls.unsafe(origin_point=origin_point, x_direction=direction.rotate_clockwise(),
                          y_direction=direction)

    @classmethod
    def from_x_axis(cls, axis: Axis2d) -> "Frame2d":
        return cls.with_x_direction(axis.direction, axis.origin_point)

    @classmethod
    def from_y_axis(cls, axis: Axis2d) -> "Frame2d":
        return cls.with_y_direction(axis.direction, axis.origin_point)

    def x_axis(self) -> Axis2d:
        return Axis2d(origin_point=self.origin_point, direction=self.x_direction)

    def y_axis(self) -> Axis2d:
        return Axis2d(origin_point=self.origin_point, direction=self.y_direction)

    def is_right_handed(self) -> bool:
        return self.x_direction.x * self.y_direction.y - self.x_direction.y * self.y_direction.x > 0.0

    def _with(self, origin_point: Point2d, x_direction: Direction2d, y_direction: Direction2d) -> "Frame2d":
        return Frame2d.unsafe(origin_point=origin_point, x_direction=x_direction, y_direction=y_direction)

    def reverse_x(self) -> "Frame2d":
        return self._with(self.origin_point, self.x_direction.reverse(), self.y_direction)

    def reverse_y(self) -> "Frame2d":
        return self._with(self.origin_point, self.x_direction, self.y_direction.reverse())

    def move_to(self, point: Point2d) -> "Frame2d":
        return self._with(point, self.x_direction, self.y_direction)

    def translate_by(self, vector) -> "Frame2d":
        return self.move_to(self.origin_point.translate_by(vector))

    def translate_in(self, direction, distance) -> "Frame2d":
        return self.move_to(self.origin_point.translate_in(direction, distance))

    def translate_along_own(self, axis: Callable[["Frame2d"], Axis2d], distance) -> "Frame2d":
        """Translate along one of this frame's own axes, e.g. ``frame.translate_along_own(Frame2d.x_axis, 2)``."""
        return self.translate_in(axis(self).direction, distance)

    def rotate_by(self, angle) -> "Frame2d":
        """Rotate the frame about its own origin point."""
        return self._with(self.origin_point, self.x_direction.rotate_by(angle), self.y_direction.rotate_by(angle))

    def rotate_around(self, center: Point2d, angle) -> "Frame2d":
        return self._with(self.origin_point.rotate_around(center, angle),
                          self.x_direction.rotate_by(angle),
                          self.y_direction.rotate_by(angle))

    def scale_about(self, center: Point2d, scale: float) -> "Frame2d":
        return self._with(self.origin_point.scale_about(center, scale),
                          self.x_direction.scale_about(center, scale),
                          self.y_direction.scale_about(center, scale))

    def mirror_across(self, axis: Axis2d) -> "Frame2d":
        """Mirror across an axis; the result has the opposite handedness."""
        return self._with(self.origin_point.mirror_across(axis),
                          self.x_direction.mirror_across(axis),
                          self.y_direction.mirror_across(axis))

    def relative_to(self, frame: "Frame2d") -> "Frame2d":
        return self._with(self.origin_point.relative_to(frame),
                          self.x_direction.relative_to(frame),
                          self.y_direction.relative_to(frame))

    def place_in(self, frame: "Frame2d") -> "Frame2d":
        return self._with(self.origin_point.place_in(frame),
                          self.x_direction.place_in(frame),
                          self.y_direction.place_in(frame))

    def place_on(self, sketch_plane: SketchPlane3d) -> SketchPlane3d:
        """Sketch plane in 3D with this frame's origin and axes."""
        return SketchPlane3d.unsafe(origin_point=Point3d.on(sketch_plane, self.origin_point),
                                    x_direction=Direction3d.on(sketch_plane, self.x_direction),
                                    y_direction=Direction3d.on(sketch_plane, self.y_direction))


class Frame3d(ImmutableModel, Generic[Units, Coordinates, Defines]):
    """
    A local 3D coordinate system: an origin point plus three mutually
    perpendicular unit directions.

    A frame is right-handed when x cross y points along z. Mirroring a frame
    makes it left-handed; shapes placed into a left-handed frame have their
    orientation-sensitive data (normals, sweep angles) flipped accordingly.
    """
    origin_point: Point3d = Field(description="Origin of the local coordinate system")
    x_direction: Direction3d = Field(description="Local X direction")
    y_direction: Direction3d = Field(description="Local Y direction")
    z_direction: Direction3d = Field(description="Local Z direction")

    @model_validator(mode="after")
    def validate_orthonormal(self):
        """Validate that the three frame directions are mutually perpendicular."""
        _check_perpendicular(self.x_direction, self.y_direction, "X and Y")
        _check_perpendicular(self.y_direction, self.z_direction, "Y and Z")
        _check_perpendicular(self.z_direction, self.x_direction, "Z and X")
        return self

    @classmethod
    def at_origin(cls) -> "Frame3d":
        return cls.at_point(Point3d.origin())

    @classmethod
    def at_point(cls, point: Point3d) -> "Frame3d":
        return cls.unsafe(origin_point=point,
                          x_direction=Direction3d.positive_x(),
                          y_direction=Direction3d.positive_y(),
                          z_direction=Direction3d.positive_z())

    @classmethod
    def with_z_direction(cls, direction: Direction3d, origin_point: Point3d = None) -> "Frame3d":
        """Right-handed frame with the given Z direction and arbitrary X and Y directions."""
        if origin_point is None:
            origin_point = Point3d.origin()
        x_direction, y_direction = direction.perpendicular_basis()
        return cls.unsafe(origin_point=origin_point, x_direction=x_direction,
                          y_direction=y_direction, z_direction=direction)

    @classmethod
    def from_z_axis(cls, axis: Axis3d) -> "Frame3d":
        return cls.with_z_direction(axis.direction, axis.origin_point)

    def x_axis(self) -> Axis3d:
        return Axis3d(origin_point=self.origin_point, direction=self.x_direction)

    def y_axis(self) -> Axis3d:
        return Axis3d(origin_point=self.origin_point, direction=self.y_direction)

    def z_axis(self) -> Axis3d:
        return Axis3d(origin_point=self.origin_point, direction=self.z_direction)

    def xy_plane(self) -> Plane3d:
        return Plane3d(origin_point=self.origin_point, normal_direction=self.z_direction)

    def yz_plane(self) -> Plane3d:
        return Plane3d(origin_point=self.origin_point, normal_direction=self.x_direction)

    def zx_plane(self) -> Plane3d:
        return Plane3d(origin_point=self.origin_point, normal_direction=self.y_direction)

    def _sketch_plane(self, x_direction: Direction3d, y_direction: Direction3d) -> SketchPlane3d:
        return SketchPlane3d.unsafe(origin_point=self.origin_point, x_direction=x_direction,
                                    y_direction=y_direction)

    def xy_sketch_plane(self) -> SketchPlane3d:
        return self._sketch_plane(self.x_direction, self.y_direction)

    def yx_sketch_plane(self) -> SketchPlane3d:
        return self._sketch_plane(self.y_direction, self.x_direction)

    def yz_sketch_plane(self) -> SketchPlane3d:
        return self._sketch_plane(self.y_direction, self.z_direction)

    def zy_sketch_plane(self) -> SketchPlane3d:
        return self._sketch_plane(self.z_direction, self.y_direction)

    def zx_sketch_plane(self) -> SketchPlane3d:
        return self._sketch_plane(self.z_direction, self.x_direction)

    def xz_sketch_plane(self) -> SketchPlane3d:
        return self._sketch_plane(self.x_direction, self.z_direction)

    def is_right_handed(self) -> bool:
        return self.x_direction.cross(self.y_direction).dot(self.z_direction) > 0.0

    def _with(self, origin_point: Point3d, x_direction: Direction3d, y_direction: Direction3d,
              z_direction: Direction3d) -> "Frame3d":
        return Frame3d.unsafe(origin_point=origin_point, x_direction=x_direction,
                              y_direction=y_direction, z_direction=z_direction)

    def _map_directions(self, origin_point: Point3d, transform) -> "Frame3d":
        return self._with(origin_point, transform(self.x_direction), transform(self.y_direction),
                          transform(self.z_direction))

    def reverse_x(self) -> "Frame3d":
        return self._with(self.origin_point, self.x_direction.reverse(), self.y_direction, self.z_direction)

    def reverse_y(self) -> "Frame3d":
        return self._with(self.origin_point, self.x_direction, self.y_direction.reverse(), self.z_direction)

    def reverse_z(self) -> "Frame3d":
        return self._with(self.origin_point, self.x_direction, self.y_direction, self.z_direction.reverse())

    def move_to(self, point: Point3d) -> "Frame3d":
        return self._with(point, self.x_direction, self.y_direction, self.z_direction)

    def translate_by(self, vector) -> "Frame3d":
        return self.move_to(self.origin_point.translate_by(vector))

    def translate_in(self, direction, distance) -> "Frame3d":
        return self.move_to(self.origin_point.translate_in(direction, distance))

    def translate_along_own(self, axis: Callable[["Frame3d"], Axis3d], distance) -> "Frame3d":
        """Translate along one of this frame's own axes, e.g. ``frame.translate_along_own(Frame3d.z_axis, 2)``."""
        return self.translate_in(axis(self).direction, magnitude(distance))

    def rotate_around(self, axis: Axis3d, angle) -> "Frame3d":
        return self._map_directions(self.origin_point.rotate_around(axis, angle),
                                    lambda d: d.rotate_around(axis, angle))

    def rotate_around_own(self, axis: Callable[["Frame3d"], Axis3d], angle) -> "Frame3d":
        return self.rotate_around(axis(self), angle)

    def scale_about(self, center: Point3d, scale: float) -> "Frame3d":
        """Scale the origin; a negative factor reverses all three directions (and so the handedness)."""
        return self._map_directions(self.origin_point.scale_about(center, scale),
                                    lambda d: d.scale_about(center, scale))

    def mirror_across(self, plane: Plane3d) -> "Frame3d":
        """Mirror across a plane; the result has the opposite handedness."""
        return self._map_directions(self.origin_point.mirror_across(plane), lambda d: d.mirror_across(plane))

    def relative_to(self, frame: "Frame3d") -> "Frame3d":
        return self._map_directions(self.origin_point.relative_to(frame), lambda d: d.relative_to(frame))

    def place_in(self, frame: "Frame3d") -> "Frame3d":
        return self._map_directions(self.origin_point.place_in(frame), lambda d: d.place_in(frame))
