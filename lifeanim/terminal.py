"""Terminal mode: print the grid as text, advance, pause, repeat."""

import sys
import time
import logging
from typing import Callable, Optional, TextIO

from .config import UPDATES_PER_MINUTE
from .core.grid import Grid

logger = logging.getLogger(__name__)


def run_terminal(grid: Grid,
                 updates_per_minute: int = UPDATES_PER_MINUTE,
                 generations: Optional[int] = None,
                 out: Optional[TextIO] = None,
                 sleep: Optional[Callable[[float], None]] = None) -> int:
    """Drive ``grid`` directly, printing each generation.

    Args:
        grid: Grid to run (advanced in place)
        updates_per_minute: Display pace
        generations: Stop after this many advances; run forever if None
        out: Text stream to print to (stdout by default)
        sleep: Pause function taking seconds (time.sleep by default)

    Returns:
        Number of generations advanced
    """
    if updates_per_minute <= 0:
        raise ValueError("updates_per_minute must be positive")
    if generations is not None and generations < 0:
        raise ValueError("generations cannot be negative")

    out = out or sys.stdout
    sleep = sleep or time.sleep
    interval = 60.0 / updates_per_minute
    logger.debug(f"Terminal mode: {grid!r}, {updates_per_minute} updates/min")

    advanced = 0
    while generations is None or advanced < generations:
        print(grid.text(), file=out)
        grid.advance()
        advanced += 1
        sleep(interval)

    return advanced
