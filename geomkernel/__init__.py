"""
Geometry Kernel - Package initialization

Immutable 2D/3D geometry values (points, frames, curves, surfaces, solids)
with unit-tagged measurements and polyline approximation of curves.
Logging is left unconfigured; call setup_logging() to see the kernel's output.
"""
from geomkernel.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = ['setup_logging', '__version__']
