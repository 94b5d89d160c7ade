from typing import Generic, Iterable, TypeVar
from pydantic import Field
import math

from geomkernel.units.tags import Units, Meters
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.numeric import ieee_divide, ieee_sqrt, interpolate, is_close

Q = TypeVar('Q', bound='Quantity')


class Quantity(ImmutableModel, Generic[Units]):
    """
    A floating point magnitude tagged with a phantom unit type.

    ``Quantity[Meters]`` and ``Quantity[Radians]`` share the same runtime
    representation; the tag exists only for static type checking. Arithmetic
    never raises: division by zero and square roots of negative values give
    IEEE-754 infinities and NaNs.
    """
    value: float = Field(description="Magnitude expressed in the tagged units")

    @classmethod
    def zero(cls: type[Q]) -> Q:
        return cls(value=0.0)

    @classmethod
    def infinity(cls: type[Q]) -> Q:
        return cls(value=math.inf)

    @classmethod
    def rate(cls, dependent: "Quantity", independent: "Quantity") -> "Quantity":
        """Construct a rate of change, e.g. meters per second or meters per inch."""
        return Quantity(value=ieee_divide(dependent.value, independent.value))

    # Arithmetic between quantities of the same units

    def plus(self: Q, other: "Quantity") -> Q:
        return type(self)(value=self.value + other.value)

    def minus(self: Q, other: "Quantity") -> Q:
        """Subtract other from this quantity."""
        return type(self)(value=self.value - other.value)

    def negate(self: Q) -> Q:
        return type(self)(value=-self.value)

    def abs(self: Q) -> Q:
        return type(self)(value=abs(self.value))

    def multiply_by(self: Q, scale: float) -> Q:
        return type(self)(value=self.value * scale)

    def divide_by(self: Q, divisor: float) -> Q:
        return type(self)(value=ieee_divide(self.value, divisor))

    def ratio(self, other: "Quantity") -> float:
        """Unitless ratio of two quantities with the same units."""
        return ieee_divide(self.value, other.value)

    def clamp(self: Q, lower: "Quantity", upper: "Quantity") -> Q:
        """
        Limit the magnitude to a closed range.

        Args:
            lower: Smallest allowed value
            upper: Largest allowed value; wins if it is below lower
        """
        return type(self)(value=min(max(self.value, lower.value), upper.value))

    # Arithmetic that changes units

    def times(self, other: "Quantity") -> "Quantity":
        """Product of two quantities; the result has product units."""
        return Quantity(value=self.value * other.value)

    def per(self, independent: "Quantity") -> "Quantity":
        return Quantity.rate(self, independent)

    def squared(self) -> "Quantity":
        return Quantity(value=self.value * self.value)

    def sqrt(self) -> "Quantity":
        """Square root; NaN for negative magnitudes."""
        return Quantity(value=ieee_sqrt(self.value))

    def at(self, rate: "Quantity") -> "Quantity":
        """
        Convert using a rate of change (destination units per source units).

        ``Length.meters(2).at(conversion_rate("m", "ft"))`` gives the length in feet.
        """
        return Quantity(value=self.value * rate.value)

    def at_(self, rate: "Quantity") -> "Quantity":
        """Inverse of at(): convert back from destination units to source units."""
        return Quantity(value=ieee_divide(self.value, rate.value))

    @staticmethod
    def interpolate_from(start: Q, end: Q, parameter: float) -> Q:
        """
        Interpolate between two quantities.

        The parameter is not clamped, so values outside [0, 1] extrapolate.
        """
        return type(start)(value=interpolate(start.value, end.value, parameter))

    @staticmethod
    def sum(quantities: Iterable[Q]) -> "Quantity":
        return Quantity(value=math.fsum(q.value for q in quantities))

    @staticmethod
    def min(first: Q, second: Q) -> Q:
        return first if first.value <= second.value else second

    @staticmethod
    def max(first: Q, second: Q) -> Q:
        return first if first.value >= second.value else second

    # Comparisons

    def less_than(self, other: "Quantity") -> bool:
        return self.value < other.value

    def greater_than(self, other: "Quantity") -> bool:
        return self.value > other.value

    def less_than_or_equal_to(self, other: "Quantity") -> bool:
        return self.value <= other.value

    def greater_than_or_equal_to(self, other: "Quantity") -> bool:
        return self.value >= other.value

    def equal_within(self, tolerance: "Quantity", other: "Quantity") -> bool:
        """
        Check that two quantities differ by no more than the given tolerance.

        Args:
            tolerance: Largest allowed absolute difference
            other: Quantity to compare against

        Returns:
            True if |self - other| <= tolerance; always False when either value is NaN
        """
        return is_close(self.value, other.value, tolerance.value)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def is_infinite(self) -> bool:
        return math.isinf(self.value)

    # Operators

    def __add__(self: Q, other: "Quantity") -> Q:
        return self.plus(other)

    def __sub__(self: Q, other: "Quantity") -> Q:
        return self.minus(other)

    def __neg__(self: Q) -> Q:
        return self.negate()

    def __abs__(self: Q) -> Q:
        return self.abs()

    def __mul__(self, other):
        """
        Multiply by another quantity or by a plain number.

        Args:
            other: A Quantity (product units, see times()) or a unitless scale factor

        Returns:
            A new quantity; the units of self are kept only for a plain number
        """
        if isinstance(other, Quantity):
            return self.times(other)
        return self.multiply_by(other)

    def __rmul__(self, other):
        return self.multiply_by(other)

    def __truediv__(self, other):
        """
        Divide by another quantity or by a plain number.

        Args:
            other: A Quantity with the same units, or a unitless divisor

        Returns:
            A plain float ratio for a Quantity, otherwise a quantity in the same units.
            Division by zero gives an infinity or NaN instead of raising.
        """
        if isinstance(other, Quantity):
            return self.ratio(other)
        return self.divide_by(other)

    def __lt__(self, other: "Quantity") -> bool:
        return self.less_than(other)

    def __le__(self, other: "Quantity") -> bool:
        return self.less_than_or_equal_to(other)

    def __gt__(self, other: "Quantity") -> bool:
        return self.greater_than(other)

    def __ge__(self, other: "Quantity") -> bool:
        return self.greater_than_or_equal_to(other)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)


class Length(Quantity[Meters]):
    """A length, stored in meters."""

    @classmethod
    def meters(cls, value: float) -> "Length":
        return cls(value=value)

    @classmethod
    def centimeters(cls, value: float) -> "Length":
        return cls(value=value / 100.0)

    @classmethod
    def millimeters(cls, value: float) -> "Length":
        return cls(value=value / 1000.0)

    def in_meters(self) -> float:
        return self.value

    def in_millimeters(self) -> float:
        return self.value * 1000.0


def magnitude(value) -> float:
    """Raw float from either a plain number or a Quantity."""
    if isinstance(value, Quantity):
        return value.value
    return float(value)
