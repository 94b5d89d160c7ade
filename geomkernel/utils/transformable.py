"""
# Usage in shapes:
class Triangle2d(Transformable, ImmutableModel, Generic[Units, Coordinates]):
    def map_parts(self, transform):
        return Triangle2d(first_vertex=transform(self.first_vertex), ...)
"""

# geomkernel/utils/transformable.py
from typing import Any, Callable

from geomkernel.units.quantity import magnitude


class Transformable:
    """
    Mixin for compound values that transform by transforming their parts.

    Every point, direction, axis, frame and sketch plane exposes the same
    transformation methods, so a shape only has to say how to rebuild itself
    from transformed parts. Scalar data such as radii is left alone; shapes
    that need to adjust it (absolute scale factors, sweep signs) override the
    relevant method and call super().
    """

    def map_parts(self, transform: Callable[[Any], Any]):
        """Return a copy with transform applied to every geometric part."""
        raise NotImplementedError(f"{type(self).__name__} must implement map_parts")

    def _apply(self, name: str, *args):
        return self.map_parts(lambda part: getattr(part, name)(*args))

    def translate_by(self, vector):
        return self._apply("translate_by", vector)

    def translate_in(self, direction, distance):
        return self.translate_by(direction.to_vector().scale_by(magnitude(distance)))

    def rotate_around(self, pivot, angle):
        """Rotate around a center point (2D) or an axis (3D)."""
        return self._apply("rotate_around", pivot, angle)

    def scale_about(self, center, scale: float):
        return self._apply("scale_about", center, scale)

    def mirror_across(self, mirror):
        """Mirror across an axis (2D) or a plane (3D)."""
        return self._apply("mirror_across", mirror)

    def relative_to(self, frame):
        return self._apply("relative_to", frame)

    def place_in(self, frame):
        return self._apply("place_in", frame)
