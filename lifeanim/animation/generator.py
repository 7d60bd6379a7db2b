"""Animation generation with cycle detection.

Drives a Grid through successive generations, rendering one frame per
generation, and stops as soon as a generation repeats any earlier one
(still lifes and oscillators of any period) or the iteration cap is hit.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from PIL import Image

from ..config import AnimationConfig
from ..core.grid import Grid

logger = logging.getLogger(__name__)


class TerminationReason(Enum):
    """Why a call to ``AnimationGenerator.generate`` stopped."""
    STABLE_CYCLE_DETECTED = "stable_cycle_detected"
    ITERATION_LIMIT_REACHED = "iteration_limit_reached"


@dataclass(frozen=True)
class Animation:
    """Ordered frames of one simulation run."""
    frames: List[Image.Image]
    delays: List[int]          # display ticks (1/100 s) per frame
    reason: TerminationReason
    generations: int = 0       # generations advanced while generating
    fingerprints: List[str] = field(default_factory=list)  # one per rendered frame

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def is_cyclic(self) -> bool:
        return self.reason is TerminationReason.STABLE_CYCLE_DETECTED


class AnimationGenerator:
    """Renders a grid's evolution until it cycles or hits the frame cap."""

    def __init__(self, config: Optional[AnimationConfig] = None):
        """Initialize the generator.

        Args:
            config: Default scale, iteration cap and frame delay
        """
        self.config = config or AnimationConfig()

    def generate(self, grid: Grid, scale: Optional[int] = None,
                 max_iterations: Optional[int] = None) -> Animation:
        """Run the simulation on ``grid`` and collect its frames.

        The grid is advanced in place. Every generation's fingerprint is
        remembered for the duration of this call; the first generation whose
        fingerprint was already seen ends the run without being rendered.

        Args:
            grid: Grid holding generation 0
            scale: Pixels per cell edge (config default if None)
            max_iterations: Maximum number of frames (config default if None)

        Returns:
            Animation with at least one frame

        Raises:
            InvalidScaleError: If scale is not positive (before any advance)
            ValueError: If max_iterations is not positive
        """
        scale = self.config.scale if scale is None else scale
        max_iterations = self.config.max_iterations if max_iterations is None else max_iterations
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")

        frames: List[Image.Image] = []
        delays: List[int] = []
        fingerprints: List[str] = []

        current = grid.fingerprint()
        seen: Set[str] = {current}
        generations = 0

        while True:
            frames.append(grid.render_frame(scale))
            delays.append(self.config.frame_delay)
            fingerprints.append(current)

            grid.advance()
            generations += 1
            current = grid.fingerprint()

            if current in seen:
                reason = TerminationReason.STABLE_CYCLE_DETECTED
                break
            if len(frames) >= max_iterations:
                reason = TerminationReason.ITERATION_LIMIT_REACHED
                break
            seen.add(current)

        logger.info(f"Animation finished: {reason.value} after {len(frames)} frames "
                    f"({grid.width}x{grid.height} grid, scale {scale})")

        return Animation(
            frames=frames,
            delays=delays,
            reason=reason,
            generations=generations,
            fingerprints=fingerprints
        )


def generate_animation(grid: Grid, scale: Optional[int] = None,
                       max_iterations: Optional[int] = None) -> Animation:
    """Convenience wrapper using the default configuration."""
    return default_generator.generate(grid, scale=scale, max_iterations=max_iterations)


# Default generator instance
default_generator = AnimationGenerator()
