"""Error taxonomy for grid construction, mutation and rendering.

All errors are raised before any state is touched, so a failed call leaves
the grid exactly as it was.
"""


class LifeError(Exception):
    """Base class for all lifeanim errors."""


class InvalidDimensionError(LifeError, ValueError):
    """Grid width or height is not a positive integer."""


class OutOfBoundsError(LifeError, IndexError):
    """Coordinate lies outside the grid."""


class InvalidScaleError(LifeError, ValueError):
    """Render scale is not a positive integer."""


class PatternError(LifeError, ValueError):
    """Initial-state input could not be turned into a grid."""
