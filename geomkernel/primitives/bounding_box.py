# geomkernel/primitives/bounding_box.py
from typing import Generic, Iterable, Optional, Tuple

from pydantic import model_validator

from geomkernel.primitives.point import Point2d, Point3d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.units.tags import Units, Coordinates
from geomkernel.utils.base_model import ImmutableModel


class BoundingBox2d(ImmutableModel, Generic[Units, Coordinates]):
    """Axis-aligned 2D box. Extrema are normalized so that min <= max."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @model_validator(mode="before")
    @classmethod
    def order_extrema(cls, data):
        """Swap extrema given in the wrong order."""
        if isinstance(data, dict):
            data = dict(data)
            for low, high in (("min_x", "max_x"), ("min_y", "max_y")):
                if low in data and high in data and magnitude(data[low]) > magnitude(data[high]):
                    data[low], data[high] = data[high], data[low]
        return data

    @classmethod
    def from_extrema(cls, min_x, max_x, min_y, max_y) -> "BoundingBox2d":
        return cls(min_x=magnitude(min_x), max_x=magnitude(max_x), min_y=magnitude(min_y), max_y=magnitude(max_y))

    @classmethod
    def singleton(cls, point: Point2d) -> "BoundingBox2d":
        return cls(min_x=point.x, max_x=point.x, min_y=point.y, max_y=point.y)

    @classmethod
    def from_corners(cls, first: Point2d, second: Point2d) -> "BoundingBox2d":
        return cls(min_x=first.x, max_x=second.x, min_y=first.y, max_y=second.y)

    @classmethod
    def from_points(cls, points: Iterable[Point2d]) -> Optional["BoundingBox2d"]:
        """Smallest box containing all points, None if there are none."""
        points = list(points)
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))

    @staticmethod
    def hull(boxes: Iterable["BoundingBox2d"]) -> Optional["BoundingBox2d"]:
        """Smallest box containing all boxes, None if there are none."""
        result = None
        for box in boxes:
            result = box if result is None else result.union(box)
        return result

    def extrema(self) -> Tuple[float, float, float, float]:
        return self.min_x, self.max_x, self.min_y, self.max_y

    def center_point(self) -> Point2d:
        return Point2d(x=(self.min_x + self.max_x) / 2, y=(self.min_y + self.max_y) / 2)

    def dimensions(self) -> Tuple[Quantity, Quantity]:
        return Quantity(value=self.max_x - self.min_x), Quantity(value=self.max_y - self.min_y)

    def union(self, other: "BoundingBox2d") -> "BoundingBox2d":
        return BoundingBox2d(min_x=min(self.min_x, other.min_x), max_x=max(self.max_x, other.max_x),
                             min_y=min(self.min_y, other.min_y), max_y=max(self.max_y, other.max_y))

    def contains(self, point: Point2d) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def intersects(self, other: "BoundingBox2d") -> bool:
        return (self.min_x <= other.max_x and other.min_x <= self.max_x
                and self.min_y <= other.max_y and other.min_y <= self.max_y)

    def expand_by(self, margin) -> "BoundingBox2d":
        """Grow on every side; a negative margin shrinks, collapsing to the center when it overshoots."""
        m = magnitude(margin)
        if m < 0 and (-2 * m > self.max_x - self.min_x or -2 * m > self.max_y - self.min_y):
            return BoundingBox2d.singleton(self.center_point())
        return BoundingBox2d(min_x=self.min_x - m, max_x=self.max_x + m, min_y=self.min_y - m, max_y=self.max_y + m)

    def translate_by(self, vector) -> "BoundingBox2d":
        return BoundingBox2d(min_x=self.min_x + vector.x, max_x=self.max_x + vector.x,
                             min_y=self.min_y + vector.y, max_y=self.max_y + vector.y)

    def scale_about(self, center: Point2d, scale: float) -> "BoundingBox2d":
        return BoundingBox2d.from_corners(Point2d(x=self.min_x, y=self.min_y).scale_about(center, scale),
                                          Point2d(x=self.max_x, y=self.max_y).scale_about(center, scale))


class BoundingBox3d(ImmutableModel, Generic[Units, Coordinates]):
    """Axis-aligned 3D box. Extrema are normalized so that min <= max."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    @model_validator(mode="before")
    @classmethod
    def order_extrema(cls, data):
        """Swap extrema given in the wrong order."""
        if isinstance(data, dict):
            data = dict(data)
            for low, high in (("min_x", "max_x"), ("min_y", "max_y"), ("min_z", "max_z")):
                if low in data and high in data and magnitude(data[low]) > magnitude(data[high]):
                    data[low], data[high] = data[high], data[low]
        return data

    @classmethod
    def from_extrema(cls, min_x, max_x, min_y, max_y, min_z, max_z) -> "BoundingBox3d":
        return cls(min_x=magnitude(min_x), max_x=magnitude(max_x), min_y=magnitude(min_y),
                   max_y=magnitude(max_y), min_z=magnitude(min_z), max_z=magnitude(max_z))

    @classmethod
    def singleton(cls, point: Point3d) -> "BoundingBox3d":
        return cls(min_x=point.x, max_x=point.x, min_y=point.y, max_y=point.y, min_z=point.z, max_z=point.z)

    @classmethod
    def from_corners(cls, first: Point3d, second: Point3d) -> "BoundingBox3d":
        return cls(min_x=first.x, max_x=second.x, min_y=first.y, max_y=second.y, min_z=first.z, max_z=second.z)

    @classmethod
    def from_points(cls, points: Iterable[Point3d]) -> Optional["BoundingBox3d"]:
        """Smallest box containing all points, None if there are none."""
        points = list(points)
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]
        return cls(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys), min_z=min(zs), max_z=max(zs))

    @staticmethod
    def hull(boxes: Iterable["BoundingBox3d"]) -> Optional["BoundingBox3d"]:
        result = None
        for box in boxes:
            result = box if result is None else result.union(box)
        return result

    def extrema(self) -> Tuple[float, float, float, float, float, float]:
        return self.min_x, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z

    def center_point(self) -> Point3d:
        return Point3d(x=(self.min_x + self.max_x) / 2, y=(self.min_y + self.max_y) / 2,
                       z=(self.min_z + self.max_z) / 2)

    def dimensions(self) -> Tuple[Quantity, Quantity, Quantity]:
        return (Quantity(value=self.max_x - self.min_x), Quantity(value=self.max_y - self.min_y),
                Quantity(value=self.max_z - self.min_z))

    def union(self, other: "BoundingBox3d") -> "BoundingBox3d":
        return BoundingBox3d(min_x=min(self.min_x, other.min_x), max_x=max(self.max_x, other.max_x),
                             min_y=min(self.min_y, other.min_y), max_y=max(self.max_y, other.max_y),
                             min_z=min(self.min_z, other.min_z), max_z=max(self.max_z, other.max_z))

    def contains(self, point: Point3d) -> bool:
        return (self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y
                and self.min_z <= point.z <= self.max_z)

    def intersects(self, other: "BoundingBox3d") -> bool:
        return (self.min_x <= other.max_x and other.min_x <= self.max_x
                and self.min_y <= other.max_y and other.min_y <= self.max_y
                and self.min_z <= other.max_z and other.min_z <= self.max_z)

    def expand_by(self, margin) -> "BoundingBox3d":
        m = magnitude(margin)
        smallest = min(self.max_x - self.min_x, self.max_y - self.min_y, self.max_z - self.min_z)
        if m < 0 and -2 * m > smallest:
            return BoundingBox3d.singleton(self.center_point())
        return BoundingBox3d(min_x=self.min_x - m, max_x=self.max_x + m, min_y=self.min_y - m,
                             max_y=self.max_y + m, min_z=self.min_z - m, max_z=self.max_z + m)

    def translate_by(self, vector) -> "BoundingBox3d":
        return BoundingBox3d(min_x=self.min_x + vector.x, max_x=self.max_x + vector.x,
                             min_y=self.min_y + vector.y, max_y=self.max_y + vector.y,
                             min_z=self.min_z + vector.z, max_z=self.max_z + vector.z)

    def scale_about(self, center: Point3d, scale: float) -> "BoundingBox3d":
        return BoundingBox3d.from_corners(Point3d(x=self.min_x, y=self.min_y, z=self.min_z).scale_about(center, scale),
                                          Point3d(x=self.max_x, y=self.max_y, z=self.max_z).scale_about(center, scale))
