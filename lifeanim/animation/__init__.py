"""Frame generation with cycle detection, and GIF output."""

from .generator import Animation, AnimationGenerator, TerminationReason, generate_animation
from .gif import encode_gif, write_gif

__all__ = [
    'Animation',
    'AnimationGenerator',
    'TerminationReason',
    'generate_animation',
    'encode_gif',
    'write_gif',
]
