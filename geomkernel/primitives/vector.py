# geomkernel/primitives/vector.py
import math
from typing import Generic, Iterable, Optional, Tuple

from geomkernel.units.angle import Angle
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.numeric import ieee_divide, interpolate


class Vector2d(ImmutableModel, Generic[Units, Coordinates]):
    """
    A 2D displacement with phantom units and coordinate system.

    Vectors have no position, so they are unaffected by translation and are
    rotated/mirrored/converted between frames using only the frame's directions.
    """
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2d":
        return cls(x=0.0, y=0.0)

    @classmethod
    def from_components(cls, x, y) -> "Vector2d":
        """Create from floats or quantities."""
        return cls(x=magnitude(x), y=magnitude(y))

    @classmethod
    def from_polar(cls, radius, angle) -> "Vector2d":
        r = magnitude(radius)
        theta = magnitude(angle)
        return cls(x=r * math.cos(theta), y=r * math.sin(theta))

    @staticmethod
    def sum(vectors: Iterable["Vector2d"]) -> "Vector2d":
        vectors = list(vectors)
        return Vector2d(x=math.fsum(v.x for v in vectors), y=math.fsum(v.y for v in vectors))

    @staticmethod
    def interpolate_from(start: "Vector2d", end: "Vector2d", parameter: float) -> "Vector2d":
        return Vector2d(x=interpolate(start.x, end.x, parameter),
                        y=interpolate(start.y, end.y, parameter))

    def components(self) -> Tuple[float, float]:
        return self.x, self.y

    def length(self) -> Quantity:
        return Quantity(value=math.hypot(self.x, self.y))

    def squared_length(self) -> Quantity:
        return Quantity(value=self.x * self.x + self.y * self.y)

    def polar_angle(self) -> Angle:
        return Angle.atan2(self.y, self.x)

    def direction(self):
        """Direction of this vector, or None for the zero vector."""
        from geomkernel.primitives.direction import Direction2d
        return Direction2d.from_vector(self)

    def normalize(self) -> "Vector2d":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = math.hypot(self.x, self.y)
        if length == 0.0:
            return Vector2d.zero()
        return Vector2d(x=self.x / length, y=self.y / length)

    def plus(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(x=self.x + other.x, y=self.y + other.y)

    def minus(self, other: "Vector2d") -> "Vector2d":
        """Subtract other from this vector."""
        return Vector2d(x=self.x - other.x, y=self.y - other.y)

    def reverse(self) -> "Vector2d":
        return Vector2d(x=-self.x, y=-self.y)

    def scale_by(self, scale: float) -> "Vector2d":
        return Vector2d(x=self.x * scale, y=self.y * scale)

    def divide_by(self, divisor: float) -> "Vector2d":
        return Vector2d(x=ieee_divide(self.x, divisor), y=ieee_divide(self.y, divisor))

    def dot(self, other) -> float:
        """Dot product with a vector or direction."""
        return self.x * other.x + self.y * other.y

    def cross(self, other) -> float:
        """Scalar 2D cross product (z component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    def component_in(self, direction) -> Quantity:
        return Quantity(value=self.dot(direction))

    def projection_in(self, direction) -> "Vector2d":
        d = self.dot(direction)
        return Vector2d(x=d * direction.x, y=d * direction.y)

    def perpendicular(self) -> "Vector2d":
        """Rotate 90 degrees counterclockwise."""
        return Vector2d(x=-self.y, y=self.x)

    def rotate_by(self, angle) -> "Vector2d":
        theta = magnitude(angle)
        c = math.cos(theta)
        s = math.sin(theta)
        return Vector2d(x=c * self.x - s * self.y, y=s * self.x + c * self.y)

    def rotate_clockwise(self) -> "Vector2d":
        return Vector2d(x=self.y, y=-self.x)

    def rotate_counterclockwise(self) -> "Vector2d":
        return self.perpendicular()

    def translate_by(self, vector) -> "Vector2d":
        """Vectors have no position."""
        return self

    def scale_about(self, center, scale: float) -> "Vector2d":
        return self.scale_by(scale)

    def rotate_around(self, center, angle) -> "Vector2d":
        return self.rotate_by(angle)

    def mirror_across(self, axis) -> "Vector2d":
        """Mirror across an axis; only the axis direction matters for a vector."""
        d = axis.direction
        dot = self.dot(d)
        return Vector2d(x=2.0 * dot * d.x - self.x, y=2.0 * dot * d.y - self.y)

    def project_onto(self, axis) -> "Vector2d":
        return self.projection_in(axis.direction)

    def relative_to(self, frame) -> "Vector2d":
        return Vector2d(x=self.dot(frame.x_direction), y=self.dot(frame.y_direction))

    def place_in(self, frame) -> "Vector2d":
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2d(x=self.x * xd.x + self.y * yd.x,
                        y=self.x * xd.y + self.y * yd.y)

    def place_on(self, sketch_plane) -> "Vector3d":
        """Lift this vector into 3D using a sketch plane's in-plane axes."""
        return Vector3d.on(sketch_plane, self)

    def equal_within(self, tolerance, other: "Vector2d") -> bool:
        return math.hypot(self.x - other.x, self.y - other.y) <= magnitude(tolerance)

    def __add__(self, other: "Vector2d") -> "Vector2d":
        return self.plus(other)

    def __sub__(self, other: "Vector2d") -> "Vector2d":
        return self.minus(other)

    def __neg__(self) -> "Vector2d":
        return self.reverse()

    def __mul__(self, scale: float) -> "Vector2d":
        return self.scale_by(scale)

    def __rmul__(self, scale: float) -> "Vector2d":
        return self.scale_by(scale)

    def __truediv__(self, divisor: float) -> "Vector2d":
        return self.divide_by(divisor)


class Vector3d(ImmutableModel, Generic[Units, Coordinates]):
    """A 3D displacement with phantom units and coordinate system."""
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "Vector3d":
        return cls(x=0.0, y=0.0, z=0.0)

    @classmethod
    def from_components(cls, x, y, z) -> "Vector3d":
        return cls(x=magnitude(x), y=magnitude(y), z=magnitude(z))

    @classmethod
    def on(cls, sketch_plane, vector: Vector2d) -> "Vector3d":
        """Vector in 3D corresponding to a 2D vector expressed in a sketch plane."""
        xd = sketch_plane.x_direction
        yd = sketch_plane.y_direction
        return cls(x=vector.x * xd.x + vector.y * yd.x,
                   y=vector.x * xd.y + vector.y * yd.y,
                   z=vector.x * xd.z + vector.y * yd.z)

    @staticmethod
    def sum(vectors: Iterable["Vector3d"]) -> "Vector3d":
        vectors = list(vectors)
        return Vector3d(x=math.fsum(v.x for v in vectors),
                        y=math.fsum(v.y for v in vectors),
                        z=math.fsum(v.z for v in vectors))

    @staticmethod
    def interpolate_from(start: "Vector3d", end: "Vector3d", parameter: float) -> "Vector3d":
        return Vector3d(x=interpolate(start.x, end.x, parameter),
                        y=interpolate(start.y, end.y, parameter),
                        z=interpolate(start.z, end.z, parameter))

    def components(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def length(self) -> Quantity:
        return Quantity(value=math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z))

    def squared_length(self) -> Quantity:
        return Quantity(value=self.x * self.x + self.y * self.y + self.z * self.z)

    def direction(self):
        """Direction of this vector, or None for the zero vector."""
        from geomkernel.primitives.direction import Direction3d
        return Direction3d.from_vector(self)

    def normalize(self) -> "Vector3d":
        length = self.length().value
        if length == 0.0:
            return Vector3d.zero()
        return Vector3d(x=self.x / length, y=self.y / length, z=self.z / length)

    def plus(self, other: "Vector3d") -> "Vector3d":
        return Vector3d(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def minus(self, other: "Vector3d") -> "Vector3d":
        return Vector3d(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def reverse(self) -> "Vector3d":
        return Vector3d(x=-self.x, y=-self.y, z=-self.z)

    def scale_by(self, scale: float) -> "Vector3d":
        return Vector3d(x=self.x * scale, y=self.y * scale, z=self.z * scale)

    def divide_by(self, divisor: float) -> "Vector3d":
        return Vector3d(x=ieee_divide(self.x, divisor),
                        y=ieee_divide(self.y, divisor),
                        z=ieee_divide(self.z, divisor))

    def dot(self, other) -> float:
        """Dot product with a vector or direction."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> "Vector3d":
        return Vector3d(x=self.y * other.z - self.z * other.y,
                        y=self.z * other.x - self.x * other.z,
                        z=self.x * other.y - self.y * other.x)

    def component_in(self, direction) -> Quantity:
        return Quantity(value=self.dot(direction))

    def projection_in(self, direction) -> "Vector3d":
        d = self.dot(direction)
        return Vector3d(x=d * direction.x, y=d * direction.y, z=d * direction.z)

    def perpendicular_to(self) -> "Vector3d":
        """
        Some vector perpendicular to this one, with the same length.

        Built from the cross product with the cardinal axis least aligned
        with this vector. The zero vector gives the zero vector.
        """
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax <= ay and ax <= az:
            candidate = Vector3d(x=0.0, y=-self.z, z=self.y)
        elif ay <= az:
            candidate = Vector3d(x=self.z, y=0.0, z=-self.x)
        else:
            candidate = Vector3d(x=-self.y, y=self.x, z=0.0)
        candidate_length = candidate.length().value
        if candidate_length == 0.0:
            return Vector3d.zero()
        return candidate.scale_by(self.length().value / candidate_length)

    def translate_by(self, vector) -> "Vector3d":
        """Vectors have no position."""
        return self

    def scale_about(self, center, scale: float) -> "Vector3d":
        return self.scale_by(scale)

    def rotate_around(self, axis, angle) -> "Vector3d":
        """Rotate about an axis direction using Rodrigues' formula."""
        d = axis.direction
        theta = magnitude(angle)
        c = math.cos(theta)
        s = math.sin(theta)
        dot = self.dot(d)
        # d x v
        cx = d.y * self.z - d.z * self.y
        cy = d.z * self.x - d.x * self.z
        cz = d.x * self.y - d.y * self.x
        return Vector3d(x=self.x * c + cx * s + d.x * dot * (1.0 - c),
                        y=self.y * c + cy * s + d.y * dot * (1.0 - c),
                        z=self.z * c + cz * s + d.z * dot * (1.0 - c))

    def mirror_across(self, plane) -> "Vector3d":
        n = plane.normal_direction
        d = 2.0 * self.dot(n)
        return Vector3d(x=self.x - d * n.x, y=self.y - d * n.y, z=self.z - d * n.z)

    def project_onto(self, plane) -> "Vector3d":
        """Component of this vector lying in the given plane."""
        n = plane.normal_direction
        d = self.dot(n)
        return Vector3d(x=self.x - d * n.x, y=self.y - d * n.y, z=self.z - d * n.z)

    def project_onto_axis(self, axis) -> "Vector3d":
        return self.projection_in(axis.direction)

    def project_into(self, sketch_plane) -> Vector2d:
        return Vector2d(x=self.dot(sketch_plane.x_direction), y=self.dot(sketch_plane.y_direction))

    def relative_to(self, frame) -> "Vector3d":
        return Vector3d(x=self.dot(frame.x_direction),
                        y=self.dot(frame.y_direction),
                        z=self.dot(frame.z_direction))

    def place_in(self, frame) -> "Vector3d":
        xd = frame.x_direction
        yd = frame.y_direction
        zd = frame.z_direction
        return Vector3d(x=self.x * xd.x + self.y * yd.x + self.z * zd.x,
                        y=self.x * xd.y + self.y * yd.y + self.z * zd.y,
                        z=self.x * xd.z + self.y * yd.z + self.z * zd.z)

    def equal_within(self, tolerance, other: "Vector3d") -> bool:
        return self.minus(other).length().value <= magnitude(tolerance)

    def __add__(self, other: "Vector3d") -> "Vector3d":
        return self.plus(other)

    def __sub__(self, other: "Vector3d") -> "Vector3d":
        return self.minus(other)

    def __neg__(self) -> "Vector3d":
        return self.reverse()

    def __mul__(self, scale: float) -> "Vector3d":
        return self.scale_by(scale)

    def __rmul__(self, scale: float) -> "Vector3d":
        return self.scale_by(scale)

    def __truediv__(self, divisor: float) -> "Vector3d":
        return self.divide_by(divisor)


class Vector4d(ImmutableModel, Generic[Units, Coordinates]):
    """A 4D vector, used for homogeneous coordinates."""
    x: float
    y: float
    z: float
    w: float

    @classmethod
    def zero(cls) -> "Vector4d":
        return cls(x=0.0, y=0.0, z=0.0, w=0.0)

    @classmethod
    def from_vector3d(cls, vector: Vector3d, w: float = 0.0) -> "Vector4d":
        return cls(x=vector.x, y=vector.y, z=vector.z, w=w)

    @staticmethod
    def interpolate_from(start: "Vector4d", end: "Vector4d", parameter: float) -> "Vector4d":
        return Vector4d(x=interpolate(start.x, end.x, parameter),
                        y=interpolate(start.y, end.y, parameter),
                        z=interpolate(start.z, end.z, parameter),
                        w=interpolate(start.w, end.w, parameter))

    def to_vector3d(self) -> Vector3d:
        """Drop the w component."""
        return Vector3d(x=self.x, y=self.y, z=self.z)

    def components(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.z, self.w

    def length(self) -> Quantity:
        return Quantity(value=math.sqrt(self.dot(self)))

    def direction(self) -> Optional["Vector4d"]:
        """Unit 4-vector in the same direction, or None for the zero vector."""
        length = self.length().value
        if length == 0.0:
            return None
        return self.scale_by(1.0 / length)

    def plus(self, other: "Vector4d") -> "Vector4d":
        return Vector4d(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z, w=self.w + other.w)

    def minus(self, other: "Vector4d") -> "Vector4d":
        return Vector4d(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z, w=self.w - other.w)

    def reverse(self) -> "Vector4d":
        return Vector4d(x=-self.x, y=-self.y, z=-self.z, w=-self.w)

    def scale_by(self, scale: float) -> "Vector4d":
        return Vector4d(x=self.x * scale, y=self.y * scale, z=self.z * scale, w=self.w * scale)

    def dot(self, other: "Vector4d") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def equal_within(self, tolerance, other: "Vector4d") -> bool:
        return self.minus(other).length().value <= magnitude(tolerance)

    def __add__(self, other: "Vector4d") -> "Vector4d":
        return self.plus(other)

    def __sub__(self, other: "Vector4d") -> "Vector4d":
        return self.minus(other)

    def __neg__(self) -> "Vector4d":
        return self.reverse()

    def __mul__(self, scale: float) -> "Vector4d":
        return self.scale_by(scale)

    def __rmul__(self, scale: float) -> "Vector4d":
        return self.scale_by(scale)
