"""Load an initial grid from freeform text.

Each line is a row. A character equal to the marker (each character
lowercased on its own) is alive; everything else is dead. The grid is as wide
as the longest line and shorter rows are padded dead.
"""

import logging

from ..core.errors import PatternError
from ..core.grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "o"


def load_from_text(data: str, key: str = DEFAULT_MARKER) -> Grid:
    """Build a grid from text lines.

    Args:
        data: Pattern text, rows separated by newlines
        key: Single alive-cell marker character, matched case-insensitively

    Raises:
        PatternError: If key is not a single character
        InvalidDimensionError: If the text has no columns
    """
    if len(key) != 1:
        raise PatternError(f"Marker must be a single character, got {key!r}")
    key = key.lower()

    lines = data.split("\n")
    height = len(lines)
    width = max(len(line) for line in lines)

    grid = Grid(width, height)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char.lower() == key:
                grid.set(x, y, True)

    logger.debug(f"Loaded {grid!r} from text with marker {key!r}")
    return grid
