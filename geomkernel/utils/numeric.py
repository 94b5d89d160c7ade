"""
Floating point helpers with IEEE-754 semantics.

Python raises on division by zero and on the square root of a negative
number. Geometry code instead lets infinities and NaNs propagate, the same
way the underlying float hardware does.
"""
import math
from typing import List, Tuple

from geomkernel.constants import EPSILON


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two floats, returning +/-inf or nan instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    # Sign of a signed zero decides the sign of the infinity
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def ieee_sqrt(value: float) -> float:
    """Square root that returns nan for negative input."""
    if value < 0.0 or math.isnan(value):
        return math.nan
    return math.sqrt(value)


def interpolate(start: float, end: float, parameter: float) -> float:
    """
    Linear interpolation between two floats.

    The parameter is not clamped: values outside [0, 1] extrapolate.
    Evaluated so that parameter 0 gives exactly start and 1 gives exactly end.
    """
    if parameter <= 0.5:
        return start + parameter * (end - start)
    return end + (1.0 - parameter) * (start - end)


def is_close(a: float, b: float, tolerance: float = None) -> bool:
    """Absolute tolerance comparison."""
    if tolerance is None:
        tolerance = EPSILON
    return abs(a - b) <= tolerance


def parameter_values(steps: int) -> List[float]:
    """
    Evenly spaced parameter values covering [0, 1] with the given number of steps.

    Returns steps + 1 values, or an empty list when steps < 1.
    """
    if steps < 1:
        return []
    return [i / steps for i in range(steps + 1)]




def sinusoid_range(p: float, q: float, start_angle: float, swept_angle: float) -> Tuple[float, float]:
    """
    Smallest and largest value of ``p cos(theta) + q sin(theta)`` over an angle range.

    Args:
        p: Cosine coefficient
        q: Sine coefficient
        start_angle: First angle of the range, in radians
        swept_angle: Signed extent of the range, in radians

    Returns:
        (minimum, maximum) over theta between start_angle and start_angle + swept_angle
    """
    low, high = sorted((start_angle, start_angle + swept_angle))
    values = [p * math.cos(low) + q * math.sin(low), p * math.cos(high) + q * math.sin(high)]
    phase = math.atan2(q, p)
    amplitude = math.hypot(p, q)
    # the maximum is reached at phase and the minimum half a turn later
    for extreme, value in ((phase, amplitude), (phase + math.pi, -amplitude)):
        if low + (extreme - low) % (2.0 * math.pi) <= high:
            values.append(value)
    return min(values), max(values)
