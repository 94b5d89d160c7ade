# geomkernel/constants.py
"""Constants for geometric calculations."""

# Default tolerance for floating-point comparisons (coincident points, zero lengths)
EPSILON = 1e-10

# Tolerance used when validating unit length and orthonormality of directions,
# frames and sketch planes passed to safe constructors
UNIT_TOLERANCE = 1e-6

# Default maximum deviation used when a curved surface area has to be
# computed from a polyline approximation of its profile
DEFAULT_MAX_ERROR = 1e-3

# Log record format shared by every handler set up by logging_config
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
