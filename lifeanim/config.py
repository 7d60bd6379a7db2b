"""Runtime constants and animation configuration.

Values can be overridden per process through ``LIFEANIM_*`` environment
variables (see ``AnimationConfig.from_env``).
"""

import os
import logging
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

UPDATES_PER_MINUTE = 75   # terminal mode pace
MAX_ITERATIONS = 2048     # hard cap on frames per animation
DEFAULT_SCALE = 4         # pixels per cell edge
FRAME_DELAY = 1           # display ticks (1/100 s) per frame
LUMINANCE_THRESHOLD = 16  # image loader: darker pixels are alive

DEAD_COLOR: Tuple[int, int, int] = (255, 255, 255)
ALIVE_COLOR: Tuple[int, int, int] = (0, 0, 0)

ENV_PREFIX = "LIFEANIM_"


class AnimationConfig:
    """Settings for a single animation run."""

    def __init__(self,
                 scale: int = DEFAULT_SCALE,
                 max_iterations: int = MAX_ITERATIONS,
                 frame_delay: int = FRAME_DELAY):
        """Initialize animation configuration.

        Args:
            scale: Pixels per cell edge in rendered frames (1+)
            max_iterations: Maximum number of frames to produce (1+)
            frame_delay: Display ticks per frame (0+)

        Raises:
            ValueError: If any value is out of range
        """
        if scale <= 0:
            raise ValueError("scale must be positive")
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        if frame_delay < 0:
            raise ValueError("frame_delay cannot be negative")

        self.scale = scale
        self.max_iterations = max_iterations
        self.frame_delay = frame_delay

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AnimationConfig':
        """Build a configuration from ``LIFEANIM_SCALE``, ``LIFEANIM_MAX_ITERATIONS``
        and ``LIFEANIM_FRAME_DELAY``, falling back to the module defaults.

        Raises:
            ValueError: If a variable is set but is not a valid value
        """
        environ = os.environ if environ is None else environ

        def read(name: str, default: int) -> int:
            raw = environ.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX + name} must be an integer, got {raw!r}") from None

        config = cls(
            scale=read("SCALE", DEFAULT_SCALE),
            max_iterations=read("MAX_ITERATIONS", MAX_ITERATIONS),
            frame_delay=read("FRAME_DELAY", FRAME_DELAY),
        )
        logger.debug(f"Loaded {config!r} from environment")
        return config

    def copy(self) -> 'AnimationConfig':
        """Create a copy of the configuration."""
        return AnimationConfig(
            scale=self.scale,
            max_iterations=self.max_iterations,
            frame_delay=self.frame_delay
        )

    def __repr__(self) -> str:
        return (f"AnimationConfig(scale={self.scale}, max_iterations={self.max_iterations}, "
                f"frame_delay={self.frame_delay})")
