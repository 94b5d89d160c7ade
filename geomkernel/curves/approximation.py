"""
Polyline approximation of curves.

A curve whose second derivative (with respect to a [0, 1] parameter) is
bounded by M deviates from the chord between two parameter values t0 and
t0 + h by at most M h^2 / 8. Splitting the curve into n equal parameter
steps therefore keeps the error below e when n >= sqrt(M / (8 e)).
"""
import logging
import math
from typing import List

from geomkernel.shapes.polyline import Polyline2d, Polyline3d
from geomkernel.units.quantity import Quantity, magnitude
from geomkernel.utils.numeric import parameter_values

logger = logging.getLogger(__name__)


def num_segments(max_error, max_second_derivative_magnitude) -> int:
    """
    Number of equal parameter steps needed to approximate a curve within max_error.

    Args:
        max_error: Largest allowed distance between curve and polyline
        max_second_derivative_magnitude: Bound on the curve's second derivative

    Returns:
        0 if max_error is not positive, 1 if the curve is straight,
        otherwise ceil(sqrt(M / (8 * max_error))), at least 1
    """
    e = magnitude(max_error)
    m = magnitude(max_second_derivative_magnitude)
    if e <= 0.0:
        return 0
    if m <= 0.0:
        return 1
    return max(1, math.ceil(math.sqrt(m / (8.0 * e))))


class ApproximableCurve:
    """
    Mixin for parametric curves defined over t in [0, 1].

    Subclasses implement point_on() and max_second_derivative_magnitude();
    the 2D/3D subclasses below supply the matching polyline type.
    """

    def point_on(self, parameter: float):
        raise NotImplementedError

    def max_second_derivative_magnitude(self) -> Quantity:
        raise NotImplementedError

    def _polyline(self, points):
        raise NotImplementedError

    def num_approximation_segments(self, max_error) -> int:
        return num_segments(max_error, self.max_second_derivative_magnitude())

    def sample(self, count: int) -> List:
        """Points at count + 1 evenly spaced parameter values; empty for count < 1."""
        return [self.point_on(t) for t in parameter_values(count)]

    def segments(self, count: int):
        """Polyline through count + 1 evenly spaced points; empty for count < 1."""
        return self._polyline(self.sample(count))

    def approximate(self, max_error):
        """Polyline within max_error of this curve."""
        count = self.num_approximation_segments(max_error)
        logger.debug(f"Approximating {type(self).__name__} with {count} segments")
        return self.segments(count)


class ApproximableCurve2d(ApproximableCurve):
    def _polyline(self, points) -> Polyline2d:
        return Polyline2d(vertices=tuple(points))


class ApproximableCurve3d(ApproximableCurve):
    def _polyline(self, points) -> Polyline3d:
        return Polyline3d(vertices=tuple(points))
