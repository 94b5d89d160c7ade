# geomkernel/shapes/surface.py
"""
Bounded surfaces in 3D.

A Surface3d wraps exactly one of a fixed set of surface kinds together with a
handedness flag. The geometry carries a raw normal (for planar kinds, the
cross product of two in-plane vectors, which flips relative to the geometry
under mirroring); the handedness flag tells whether the surface's outward
side follows that raw normal or faces the other way. Mirroring toggles the
flag, as does moving into a left-handed frame. Scaling by a negative factor
also toggles it: that point reflection reverses both in-plane vectors and so
leaves the raw normal alone while swapping the two sides. The effective
normal of a planar surface therefore always transforms like the geometry.
"""
import math
from typing import Annotated, Generic, Literal, Optional, Union

from pydantic import Field, field_validator

from geomkernel.constants import DEFAULT_MAX_ERROR
from geomkernel.curves.curve import Curve3d
from geomkernel.primitives.axis import Axis3d
from geomkernel.primitives.bounding_box import BoundingBox3d
from geomkernel.primitives.direction import Direction3d
from geomkernel.primitives.frame import Frame3d
from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.primitives.vector import Vector3d
from geomkernel.shapes.circle import Circle3d
from geomkernel.shapes.ellipse import Ellipse2d
from geomkernel.shapes.line_segment import LineSegment3d
from geomkernel.shapes.polyline import Polyline2d, Polyline3d
from geomkernel.shapes.rectangle import Rectangle3d
from geomkernel.shapes.triangle import Triangle3d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.transformable import Transformable

RIGHT_HANDED = "right"
LEFT_HANDED = "left"

Handedness = Literal["right", "left"]


def _revolved_segment_area(segment: LineSegment3d, axis: Axis3d) -> float:
    """
    Area swept by a line segment per radian of rotation around an axis.

    With P(s) = A + s D the area element is |D x (a x (P(s) - o))|, which
    does not depend on the rotation angle. The vector inside is linear in s,
    w0 + s w1, so its length is the square root of a quadratic and has a
    closed form integral over [0, 1].
    """
    a = axis.direction
    d = segment.vector()
    w0 = d.cross(a.cross(segment.start_point.vector_from(axis.origin_point)))
    w1 = d.cross(a.cross(d))
    alpha = w1.squared_length().value
    if alpha == 0.0:
        return w0.length().value
    shift = w0.dot(w1) / alpha
    k = w0.cross(w1).squared_length().value / (alpha * alpha)

    def antiderivative(u: float) -> float:
        tail = k * math.asinh(u / math.sqrt(k)) if k > 0.0 else 0.0
        return 0.5 * (u * math.sqrt(u * u + k) + tail)

    return math.sqrt(alpha) * (antiderivative(1.0 + shift) - antiderivative(shift))


class TriangularSurface(Transformable, ImmutableModel):
    kind: Literal["triangular"] = "triangular"
    triangle: Triangle3d

    def area(self, max_error=None) -> Quantity:
        return self.triangle.area()

    def raw_normal(self) -> Optional[Direction3d]:
        return self.triangle.normal_direction()

    def bounding_box(self) -> BoundingBox3d:
        return self.triangle.bounding_box()

    def map_parts(self, transform) -> "TriangularSurface":
        return self.with_changes(triangle=transform(self.triangle))


class RectangularSurface(Transformable, ImmutableModel):
    kind: Literal["rectangular"] = "rectangular"
    rectangle: Rectangle3d

    def area(self, max_error=None) -> Quantity:
        return self.rectangle.area()

    def raw_normal(self) -> Optional[Direction3d]:
        return self.rectangle.normal_direction()

    def bounding_box(self) -> BoundingBox3d:
        return self.rectangle.bounding_box()

    def map_parts(self, transform) -> "RectangularSurface":
        return self.with_changes(rectangle=transform(self.rectangle))


class CircularSurface(Transformable, ImmutableModel):
    """A disk centered on the origin of a sketch plane."""
    kind: Literal["circular"] = "circular"
    sketch_plane: SketchPlane3d
    radius: float

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return abs(v)

    def to_circle(self) -> Circle3d:
        return Circle3d(center_point=self.sketch_plane.origin_point,
                        axial_direction=self.sketch_plane.normal_direction(), radius=self.radius)

    def area(self, max_error=None) -> Quantity:
        return Quantity(value=math.pi * self.radius * self.radius)

    def raw_normal(self) -> Optional[Direction3d]:
        return self.sketch_plane.normal_direction()

    def bounding_box(self) -> BoundingBox3d:
        return self.to_circle().bounding_box()

    def map_parts(self, transform) -> "CircularSurface":
        return self.with_changes(sketch_plane=transform(self.sketch_plane))

    def scale_about(self, center: Point3d, scale: float) -> "CircularSurface":
        return super().scale_about(center, scale).with_changes(radius=abs(scale) * self.radius)


class EllipticalSurface(Transformable, ImmutableModel):
    """An elliptical region given in the local coordinates of a sketch plane."""
    kind: Literal["elliptical"] = "elliptical"
    sketch_plane: SketchPlane3d
    ellipse: Ellipse2d

    def area(self, max_error=None) -> Quantity:
        return self.ellipse.area()

    def raw_normal(self) -> Optional[Direction3d]:
        return self.sketch_plane.normal_direction()

    def bounding_box(self) -> BoundingBox3d:
        center = Point3d.on(self.sketch_plane, self.ellipse.center_point())
        x_direction = Direction3d.on(self.sketch_plane, self.ellipse.x_direction())
        y_direction = Direction3d.on(self.sketch_plane, self.ellipse.y_direction())
        a = self.ellipse.x_radius
        b = self.ellipse.y_radius
        dx = math.hypot(a * x_direction.x, b * y_direction.x)
        dy = math.hypot(a * x_direction.y, b * y_direction.y)
        dz = math.hypot(a * x_direction.z, b * y_direction.z)
        return BoundingBox3d(min_x=center.x - dx, max_x=center.x + dx, min_y=center.y - dy,
                             max_y=center.y + dy, min_z=center.z - dz, max_z=center.z + dz)

    def map_parts(self, transform) -> "EllipticalSurface":
        return self.with_changes(sketch_plane=transform(self.sketch_plane))

    def scale_about(self, center: Point3d, scale: float) -> "EllipticalSurface":
        """A negative factor reverses both sketch axes, so local coordinates only scale by |k|."""
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(ellipse=self.ellipse.scale_about(Point2d.origin(), abs(scale)))


class PlanarSurface(Transformable, ImmutableModel):
    """A flat region bounded by a closed polygon given in sketch plane coordinates."""
    kind: Literal["planar"] = "planar"
    sketch_plane: SketchPlane3d
    boundary: Polyline2d = Field(description="Boundary vertices; the closing edge is implied")

    @field_validator("boundary")
    @classmethod
    def validate_boundary(cls, v: Polyline2d) -> Polyline2d:
        if len(v.vertices) < 3:
            raise ValueError("A planar surface boundary needs at least three vertices")
        return v

    def signed_area(self) -> Quantity:
        """Shoelace area, positive when the boundary runs counterclockwise in the sketch plane."""
        vertices = self.boundary.vertices
        total = math.fsum(a.x * b.y - b.x * a.y for a, b in zip(vertices, vertices[1:] + vertices[:1]))
        return Quantity(value=0.5 * total)

    def area(self, max_error=None) -> Quantity:
        return self.signed_area().abs()

    def raw_normal(self) -> Optional[Direction3d]:
        return self.sketch_plane.normal_direction()

    def boundary_3d(self) -> Polyline3d:
        return Polyline3d.on(self.sketch_plane, self.boundary.close())

    def bounding_box(self) -> BoundingBox3d:
        return self.boundary_3d().bounding_box()

    def map_parts(self, transform) -> "PlanarSurface":
        return self.with_changes(sketch_plane=transform(self.sketch_plane))

    def scale_about(self, center: Point3d, scale: float) -> "PlanarSurface":
        scaled = super().scale_about(center, scale)
        return scaled.with_changes(boundary=self.boundary.scale_about(Point2d.origin(), abs(scale)))


class ExtrusionSurface(Transformable, ImmutableModel):
    """The surface swept by translating a profile curve along a displacement vector."""
    kind: Literal["extrusion"] = "extrusion"
    profile: Curve3d
    displacement: Vector3d

    def area(self, max_error=None) -> Quantity:
        """Sum of the parallelogram areas swept by each segment of the approximated profile."""
        polyline = self.profile.approximate(DEFAULT_MAX_ERROR if max_error is None else max_error)
        return Quantity(value=math.fsum(segment.vector().cross(self.displacement).length().value
                                        for segment in polyline.segments()))

    def raw_normal(self) -> Optional[Direction3d]:
        return None

    def bounding_box(self) -> BoundingBox3d:
        box = self.profile.bounding_box()
        return box.union(box.translate_by(self.displacement))

    def map_parts(self, transform) -> "ExtrusionSurface":
        return self.with_changes(profile=transform(self.profile), displacement=transform(self.displacement))


class RevolutionSurface(Transformable, ImmutableModel):
    """
    The surface swept by rotating a profile curve around an axis.

    The signed angle follows the right-hand rule around the axis direction;
    mirroring (or a left-handed frame change) negates it.
    """
    kind: Literal["revolution"] = "revolution"
    profile: Curve3d
    axis: Axis3d
    angle: float = Field(description="Signed sweep in radians")

    def area(self, max_error=None) -> Quantity:
        """
        Area swept by the profile.

        Each segment of the profile's polyline approximation is integrated
        exactly, so a profile made of line segments gives the exact area
        even when it does not lie in a plane through the axis.
        """
        polyline = self.profile.approximate(DEFAULT_MAX_ERROR if max_error is None else max_error)
        swept = math.fsum(_revolved_segment_area(segment, self.axis) for segment in polyline.segments())
        return Quantity(value=abs(self.angle) * swept)

    def raw_normal(self) -> Optional[Direction3d]:
        return None

    def bounding_box(self) -> BoundingBox3d:
        """
        Box containing the full revolution of the profile.

        Over the profile's bounding box the position along the axis and the
        distance from the axis both reach their extremes at corners, so the
        swept region lies between two circles of the largest corner radius
        placed at the lowest and highest corner positions.
        """
        box = self.profile.bounding_box()
        corners = [Point3d(x=x, y=y, z=z) for x in (box.min_x, box.max_x) for y in (box.min_y, box.max_y)
                   for z in (box.min_z, box.max_z)]
        heights = [corner.signed_distance_along(self.axis).value for corner in corners]
        radius = max(corner.distance_from_axis(self.axis).value for corner in corners)
        ends = [Circle3d(center_point=Point3d.along(self.axis, height), axial_direction=self.axis.direction,
                         radius=radius) for height in (min(heights), max(heights))]
        return ends[0].bounding_box().union(ends[1].bounding_box())

    def map_parts(self, transform) -> "RevolutionSurface":
        return self.with_changes(profile=transform(self.profile), axis=transform(self.axis))

    def scale_about(self, center: Point3d, scale: float) -> "RevolutionSurface":
        """Point reflection commutes with rotation, so the axis keeps its direction."""
        return self.with_changes(profile=self.profile.scale_about(center, scale),
                                 axis=self.axis.move_to(self.axis.origin_point.scale_about(center, scale)))

    def mirror_across(self, plane) -> "RevolutionSurface":
        return super().mirror_across(plane).with_changes(angle=-self.angle)

    def relative_to(self, frame) -> "RevolutionSurface":
        surface = super().relative_to(frame)
        return surface if frame.is_right_handed() else surface.with_changes(angle=-self.angle)

    def place_in(self, frame) -> "RevolutionSurface":
        surface = super().place_in(frame)
        return surface if frame.is_right_handed() else surface.with_changes(angle=-self.angle)


AnySurface = Annotated[
    Union[TriangularSurface, RectangularSurface, CircularSurface, EllipticalSurface,
          ExtrusionSurface, RevolutionSurface, PlanarSurface],
    Field(discriminator="kind"),
]


class Surface3d(ImmutableModel, Generic[Units, Coordinates]):
    """
    Any one of the supported surface kinds, with a handedness flag.

    flip() toggles the handedness without touching the geometry.
    """
    geometry: AnySurface
    handedness: Handedness = RIGHT_HANDED

    @classmethod
    def triangular(cls, triangle: Triangle3d) -> "Surface3d":
        return cls(geometry=TriangularSurface(triangle=triangle))

    @classmethod
    def rectangular(cls, rectangle: Rectangle3d) -> "Surface3d":
        return cls(geometry=RectangularSurface(rectangle=rectangle))

    @classmethod
    def circular(cls, circle: Circle3d) -> "Surface3d":
        """Disk bounded by a circle, facing along the circle's axial direction."""
        sketch_plane = Frame3d.with_z_direction(circle.axial_direction, circle.center_point).xy_sketch_plane()
        return cls(geometry=CircularSurface(sketch_plane=sketch_plane, radius=circle.radius))

    @classmethod
    def elliptical(cls, sketch_plane: SketchPlane3d, ellipse: Ellipse2d) -> "Surface3d":
        return cls(geometry=EllipticalSurface(sketch_plane=sketch_plane, ellipse=ellipse))

    @classmethod
    def planar(cls, sketch_plane: SketchPlane3d, boundary) -> "Surface3d":
        """Flat region inside a polygon; boundary is a Polyline2d or a sequence of Point2d."""
        if not isinstance(boundary, Polyline2d):
            boundary = Polyline2d.from_vertices(boundary)
        return cls(geometry=PlanarSurface(sketch_plane=sketch_plane, boundary=boundary))

    @classmethod
    def extrusion(cls, profile, displacement: Vector3d) -> "Surface3d":
        return cls(geometry=ExtrusionSurface(profile=Curve3d.of(profile), displacement=displacement))

    @classmethod
    def revolution(cls, profile, axis: Axis3d, angle) -> "Surface3d":
        return cls(geometry=RevolutionSurface(profile=Curve3d.of(profile), axis=axis, angle=magnitude(angle)))

    def kind(self) -> str:
        return self.geometry.kind

    def is_right_handed(self) -> bool:
        return self.handedness == RIGHT_HANDED

    def flip(self) -> "Surface3d":
        return self.with_changes(handedness=LEFT_HANDED if self.is_right_handed() else RIGHT_HANDED)

    def area(self, max_error=DEFAULT_MAX_ERROR) -> Quantity:
        """Surface area; curved kinds are measured on a polyline approximation within max_error."""
        return self.geometry.area(max_error)

    def normal_direction(self) -> Optional[Direction3d]:
        """Normal of a flat surface respecting its handedness, None for curved or degenerate surfaces."""
        normal = self.geometry.raw_normal()
        if normal is None:
            return None
        return normal if self.is_right_handed() else normal.reverse()

    def bounding_box(self) -> BoundingBox3d:
        return self.geometry.bounding_box()

    def _rewrap(self, geometry, flip: bool = False) -> "Surface3d":
        surface = Surface3d(geometry=geometry, handedness=self.handedness)
        return surface.flip() if flip else surface

    def translate_by(self, vector) -> "Surface3d":
        return self._rewrap(self.geometry.translate_by(vector))

    def translate_in(self, direction, distance) -> "Surface3d":
        return self._rewrap(self.geometry.translate_in(direction, distance))

    def rotate_around(self, axis: Axis3d, angle) -> "Surface3d":
        return self._rewrap(self.geometry.rotate_around(axis, angle))

    def scale_about(self, center: Point3d, scale: float) -> "Surface3d":
        return self._rewrap(self.geometry.scale_about(center, scale), flip=scale < 0)

    def mirror_across(self, plane) -> "Surface3d":
        return self._rewrap(self.geometry.mirror_across(plane), flip=True)

    def relative_to(self, frame: Frame3d) -> "Surface3d":
        return self._rewrap(self.geometry.relative_to(frame), flip=not frame.is_right_handed())

    def place_in(self, frame: Frame3d) -> "Surface3d":
        return self._rewrap(self.geometry.place_in(frame), flip=not frame.is_right_handed())

