# Transformable depends on geomkernel.units, so it is imported from its own module
from geomkernel.utils.base_model import ImmutableModel
from geomkernel.utils.numeric import ieee_divide, ieee_sqrt, interpolate, is_close

__all__ = [
    'ImmutableModel',
    'ieee_divide',
    'ieee_sqrt',
    'interpolate',
    'is_close',
]
