"""
Compound shapes built from primitives.

Import from the individual modules (geomkernel.shapes.triangle, ...); the
curve package depends on line segments and polylines defined here, so this
package does not import its modules eagerly.
"""
