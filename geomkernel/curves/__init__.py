"""
Curve primitives, the Curve2d/Curve3d unions and polyline approximation.

Import from the individual modules (geomkernel.curves.curve, ...).
"""
