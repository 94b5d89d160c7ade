"""
Phantom type tags for units and coordinate systems.

These classes are never instantiated. They only appear as type parameters,
for example ``Point3d[Meters, WorldCoordinates]`` or ``Quantity[Radians]``,
so that a static type checker can flag mixing a length with an angle, or
a point expressed in one frame with a point expressed in another. At
runtime the parameters are erased: values carry no tag and serialize
without one.
"""
from typing import Generic, TypeVar

Units = TypeVar('Units')
Coordinates = TypeVar('Coordinates')
Defines = TypeVar('Defines')
Dependent = TypeVar('Dependent')
Independent = TypeVar('Independent')
Other = TypeVar('Other')


class Unitless:
    """Pure numbers."""


class Meters:
    """Lengths."""


class Radians:
    """Angles."""


class Squared(Generic[Units]):
    """Units multiplied by themselves (areas for lengths)."""


class Cubed(Generic[Units]):
    """Units cubed (volumes for lengths)."""


class Product(Generic[Units, Other]):
    """Product of two units."""


class RateUnits(Generic[Dependent, Independent]):
    """Dependent units per independent unit."""


class WorldCoordinates:
    """Global coordinate system."""


class LocalCoordinates:
    """Coordinate system defined by some frame."""
