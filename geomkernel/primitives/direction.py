# geomkernel/primitives/direction.py
import logging
import math
from typing import Generic, Optional, Tuple

from pydantic import model_validator

from geomkernel.constants import UNIT_TOLERANCE
from geomkernel.primitives.vector import Vector2d, Vector3d
from geomkernel.units.angle import Angle
from geomkernel.units.quantity import magnitude
from geomkernel.units.tags import Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.numeric import is_close

logger = logging.getLogger(__name__)


class Direction2d(ImmutableModel, Generic[Coordinates]):
    """
    A unit-length 2D direction.

    Safe construction validates unit length; Direction2d.unsafe() skips the
    check for values already known to be normalized. Directions have no
    position and no units, so translation and scaling (other than reversal
    for negative scale factors) leave them unchanged.
    """
    x: float
    y: float

    @model_validator(mode="after")
    def validate_unit_length(self):
        """Validate that the components form a unit vector."""
        length = math.hypot(self.x, self.y)
        if not is_close(length, 1.0, UNIT_TOLERANCE):
            raise ValueError(f"Direction must have unit length, got length {length}")
        return self

    @classmethod
    def positive_x(cls) -> "Direction2d":
        return cls.unsafe(x=1.0, y=0.0)

    @classmethod
    def negative_x(cls) -> "Direction2d":
        return cls.unsafe(x=-1.0, y=0.0)

    @classmethod
    def positive_y(cls) -> "Direction2d":
        return cls.unsafe(x=0.0, y=1.0)

    @classmethod
    def negative_y(cls) -> "Direction2d":
        return cls.unsafe(x=0.0, y=-1.0)

    @classmethod
    def from_angle(cls, angle) -> "Direction2d":
        theta = magnitude(angle)
        return cls.unsafe(x=math.cos(theta), y=math.sin(theta))

    @classmethod
    def from_vector(cls, vector) -> Optional["Direction2d"]:
        """Normalize a vector, returning None for the zero vector."""
        length = math.hypot(vector.x, vector.y)
        if length == 0.0:
            logger.debug("Zero vector has no direction")
            return None
        return cls.unsafe(x=vector.x / length, y=vector.y / length)

    @classmethod
    def from_components(cls, x: float, y: float) -> Optional["Direction2d"]:
        return cls.from_vector(Vector2d(x=x, y=y))

    def components(self) -> Tuple[float, float]:
        return self.x, self.y

    def to_vector(self) -> Vector2d:
        return Vector2d(x=self.x, y=self.y)

    def to_angle(self) -> Angle:
        return Angle.atan2(self.y, self.x)

    def reverse(self) -> "Direction2d":
        return Direction2d.unsafe(x=-self.x, y=-self.y)

    def perpendicular(self) -> "Direction2d":
        """Rotate 90 degrees counterclockwise."""
        return Direction2d.unsafe(x=-self.y, y=self.x)

    def rotate_counterclockwise(self) -> "Direction2d":
        return self.perpendicular()

    def rotate_clockwise(self) -> "Direction2d":
        return Direction2d.unsafe(x=self.y, y=-self.x)

    def rotate_by(self, angle) -> "Direction2d":
        v = self.to_vector().rotate_by(angle)
        return Direction2d.unsafe(x=v.x, y=v.y)

    def angle_from(self, other: "Direction2d") -> Angle:
        """Signed counterclockwise angle from other to this direction."""
        return Angle.atan2(other.x * self.y - other.y * self.x, other.x * self.x + other.y * self.y)

    def component_in(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def translate_by(self, vector) -> "Direction2d":
        """Directions have no position."""
        return self

    def scale_about(self, center, scale: float) -> "Direction2d":
        """Reversed by a negative scale factor, otherwise unchanged."""
        return self.reverse() if scale < 0 else self

    def rotate_around(self, center, angle) -> "Direction2d":
        return self.rotate_by(angle)

    def mirror_across(self, axis) -> "Direction2d":
        v = self.to_vector().mirror_across(axis)
        return Direction2d.unsafe(x=v.x, y=v.y)

    def relative_to(self, frame) -> "Direction2d":
        v = self.to_vector().relative_to(frame)
        return Direction2d.unsafe(x=v.x, y=v.y)

    def place_in(self, frame) -> "Direction2d":
        v = self.to_vector().place_in(frame)
        return Direction2d.unsafe(x=v.x, y=v.y)

    def equal_within(self, angle, other: "Direction2d") -> bool:
        return abs(self.angle_from(other).value) <= magnitude(angle)

    def __neg__(self) -> "Direction2d":
        return self.reverse()


class Direction3d(ImmutableModel, Generic[Coordinates]):
    """A unit-length 3D direction."""
    x: float
    y: float
    z: float

    @model_validator(mode="after")
    def validate_unit_length(self):
        """Validate that the components form a unit vector."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if not is_close(length, 1.0, UNIT_TOLERANCE):
            raise ValueError(f"Direction must have unit length, got length {length}")
        return self

    @classmethod
    def positive_x(cls) -> "Direction3d":
        return cls.unsafe(x=1.0, y=0.0, z=0.0)

    @classmethod
    def negative_x(cls) -> "Direction3d":
        return cls.unsafe(x=-1.0, y=0.0, z=0.0)

    @classmethod
    def positive_y(cls) -> "Direction3d":
        return cls.unsafe(x=0.0, y=1.0, z=0.0)

    @classmethod
    def negative_y(cls) -> "Direction3d":
        return cls.unsafe(x=0.0, y=-1.0, z=0.0)

    @classmethod
    def positive_z(cls) -> "Direction3d":
        return cls.unsafe(x=0.0, y=0.0, z=1.0)

    @classmethod
    def negative_z(cls) -> "Direction3d":
        return cls.unsafe(x=0.0, y=0.0, z=-1.0)

    @classmethod
    def from_azimuth_and_elevation(cls, azimuth, elevation) -> "Direction3d":
        """
        Direction from an azimuth measured counterclockwise from the X axis in
        the XY plane and an elevation measured up from that plane.
        """
        a = magnitude(azimuth)
        e = magnitude(elevation)
        return cls.unsafe(x=math.cos(e) * math.cos(a), y=math.cos(e) * math.sin(a), z=math.sin(e))

    @classmethod
    def from_vector(cls, vector) -> Optional["Direction3d"]:
        """Normalize a vector, returning None for the zero vector."""
        length = math.sqrt(vector.x * vector.x + vector.y * vector.y + vector.z * vector.z)
        if length == 0.0:
            logger.debug("Zero vector has no direction")
            return None
        return cls.unsafe(x=vector.x / length, y=vector.y / length, z=vector.z / length)

    @classmethod
    def from_components(cls, x: float, y: float, z: float) -> Optional["Direction3d"]:
        return cls.from_vector(Vector3d(x=x, y=y, z=z))

    @classmethod
    def on(cls, sketch_plane, direction: Direction2d) -> "Direction3d":
        v = Vector3d.on(sketch_plane, direction.to_vector())
        return cls.unsafe(x=v.x, y=v.y, z=v.z)

    @classmethod
    def orthonormalize(cls, x_vector, xy_vector,
                       xyz_vector) -> Optional[Tuple["Direction3d", "Direction3d", "Direction3d"]]:
        """
        Gram-Schmidt orthonormalization of three vectors.

        Returns None if the vectors are linearly dependent. The third direction
        keeps the sense of xyz_vector, so the result may be left-handed.
        """
        x_direction = cls.from_vector(x_vector)
        if x_direction is None:
            return None
        xy = xy_vector.minus(xy_vector.projection_in(x_direction))
        y_direction = cls.from_vector(xy)
        if y_direction is None:
            return None
        xyz = xyz_vector.minus(xyz_vector.projection_in(x_direction)).minus(
            xyz_vector.projection_in(y_direction))
        z_direction = cls.from_vector(xyz)
        if z_direction is None:
            return None
        return x_direction, y_direction, z_direction

    def components(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def to_vector(self) -> Vector3d:
        return Vector3d(x=self.x, y=self.y, z=self.z)

    def _from_unit(self, vector: Vector3d) -> "Direction3d":
        return Direction3d.unsafe(x=vector.x, y=vector.y, z=vector.z)

    def reverse(self) -> "Direction3d":
        return Direction3d.unsafe(x=-self.x, y=-self.y, z=-self.z)

    def perpendicular_to(self) -> "Direction3d":
        """Some direction perpendicular to this one."""
        return self._from_unit(self.to_vector().perpendicular_to())

    def perpendicular_basis(self) -> Tuple["Direction3d", "Direction3d"]:
        """
        Two directions X and Y such that (X, Y, self) is a right-handed
        orthonormal basis.
        """
        x_direction = self.perpendicular_to()
        y_direction = self._from_unit(self.to_vector().cross(x_direction))
        return x_direction, y_direction

    def cross(self, other) -> Vector3d:
        return self.to_vector().cross(other)

    def angle_from(self, other: "Direction3d") -> Angle:
        """Unsigned angle between the two directions, in [0, pi]."""
        cross = self.to_vector().cross(other).length().value
        return Angle.atan2(cross, self.component_in(other))

    def component_in(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def translate_by(self, vector) -> "Direction3d":
        """Directions have no position."""
        return self

    def scale_about(self, center, scale: float) -> "Direction3d":
        """Reversed by a negative scale factor, otherwise unchanged."""
        return self.reverse() if scale < 0 else self

    def rotate_around(self, axis, angle) -> "Direction3d":
        return self._from_unit(self.to_vector().rotate_around(axis, angle))

    def mirror_across(self, plane) -> "Direction3d":
        return self._from_unit(self.to_vector().mirror_across(plane))

    def project_onto(self, plane) -> Optional["Direction3d"]:
        """Projection onto a plane, None if this direction is the plane normal."""
        return Direction3d.from_vector(self.to_vector().project_onto(plane))

    def project_into(self, sketch_plane) -> Optional[Direction2d]:
        return Direction2d.from_vector(self.to_vector().project_into(sketch_plane))

    def relative_to(self, frame) -> "Direction3d":
        return self._from_unit(self.to_vector().relative_to(frame))

    def place_in(self, frame) -> "Direction3d":
        return self._from_unit(self.to_vector().place_in(frame))

    def equal_within(self, angle, other: "Direction3d") -> bool:
        return self.angle_from(other).value <= magnitude(angle)

    def __neg__(self) -> "Direction3d":
        return self.reverse()
