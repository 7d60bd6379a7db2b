"""Grid engine: bounded double-buffered grid and Conway rules."""

from .conway_rules import BIRTH_SET, SURVIVAL_SET, ConwayRuleParams, update_cell
from .errors import (InvalidDimensionError, InvalidScaleError, LifeError,
                     OutOfBoundsError, PatternError)
from .grid import Grid

__all__ = [
    'Grid',
    'ConwayRuleParams',
    'update_cell',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'LifeError',
    'InvalidDimensionError',
    'OutOfBoundsError',
    'InvalidScaleError',
    'PatternError',
]
