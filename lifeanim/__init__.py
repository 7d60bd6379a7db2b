"""
lifeanim: Conway's Game of Life animations

Bounded double-buffered grid engine plus an animation generator that
renders frames until the pattern enters a cycle.
"""

from .animation import Animation, AnimationGenerator, TerminationReason, encode_gif, write_gif
from .config import AnimationConfig
from .core import (Grid, InvalidDimensionError, InvalidScaleError, LifeError,
                   OutOfBoundsError, PatternError)

__version__ = "0.1.0"

__all__ = [
    'Grid',
    'Animation',
    'AnimationGenerator',
    'AnimationConfig',
    'TerminationReason',
    'encode_gif',
    'write_gif',
    'LifeError',
    'InvalidDimensionError',
    'OutOfBoundsError',
    'InvalidScaleError',
    'PatternError',
]
