import math

from geomkernel.units.quantity import Quantity
from geomkernel.units.tags import Radians


class Angle(Quantity[Radians]):
    """
    An angle, stored in radians.

    Positive angles are counterclockwise in 2D and follow the right-hand
    rule around an axis in 3D.
    """

    @classmethod
    def radians(cls, value: float) -> "Angle":
        return cls(value=value)

    @classmethod
    def degrees(cls, value: float) -> "Angle":
        return cls(value=math.radians(value))

    @classmethod
    def turns(cls, value: float) -> "Angle":
        return cls(value=value * 2.0 * math.pi)

    @classmethod
    def atan2(cls, y: float, x: float) -> "Angle":
        return cls(value=math.atan2(y, x))

    @classmethod
    def acos(cls, value: float) -> "Angle":
        """Inverse cosine, with the argument clamped to [-1, 1] to absorb round-off."""
        return cls(value=math.acos(max(-1.0, min(1.0, value))))

    @classmethod
    def asin(cls, value: float) -> "Angle":
        return cls(value=math.asin(max(-1.0, min(1.0, value))))

    def in_radians(self) -> float:
        return self.value

    def in_degrees(self) -> float:
        return math.degrees(self.value)

    def in_turns(self) -> float:
        return self.value / (2.0 * math.pi)

    def normalize(self) -> "Angle":
        """Equivalent angle in the range (-pi, pi]."""
        turns = self.value / (2.0 * math.pi)
        reduced = self.value - round(turns) * 2.0 * math.pi
        if reduced <= -math.pi:
            reduced += 2.0 * math.pi
        return Angle(value=reduced)

    def sin(self) -> float:
        return math.sin(self.value)

    def cos(self) -> float:
        return math.cos(self.value)

    def tan(self) -> float:
        return math.tan(self.value)
