"""
Unit conversion rates backed by pint.

A conversion rate is a Quantity holding "destination units per source
unit". Quantity.at(rate) converts a value into the destination units and
Quantity.at_(rate) converts it back.
"""
import logging
import pint

from geomkernel.units.quantity import Quantity, Length

logger = logging.getLogger(__name__)

ureg = pint.UnitRegistry()


def conversion_rate(source_unit: str, destination_unit: str) -> Quantity:
    """
    Rate converting values expressed in source_unit into destination_unit.

    Args:
        source_unit: Any unit string pint understands (e.g. 'inch', 'degree')
        destination_unit: A unit with the same dimensionality

    Returns:
        Quantity whose value is the number of destination units per source unit

    Raises:
        ValueError: If the units are unknown or have different dimensionality
    """
    try:
        factor = (1.0 * ureg(source_unit)).to(destination_unit).magnitude
    except (pint.DimensionalityError, pint.UndefinedUnitError) as e:
        raise ValueError(f"Cannot convert '{source_unit}' to '{destination_unit}': {e}") from e
    logger.debug(f"Conversion rate {source_unit} -> {destination_unit}: {factor}")
    return Quantity(value=float(factor))


def length(value: float, unit: str) -> Length:
    """Create a Length (stored in meters) from a value in any pint length unit."""
    return Length(value=value * conversion_rate(unit, "meter").value)
