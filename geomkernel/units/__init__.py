from geomkernel.units.quantity import Quantity, Length, magnitude
from geomkernel.units.angle import Angle
from geomkernel.units.conversion import conversion_rate, length

__all__ = [
    'Quantity',
    'Length',
    'Angle',
    'magnitude',
    'conversion_rate',
    'length',
]
