"""Bounded, double-buffered grid for Conway's Game of Life.

The grid keeps two numpy boolean arrays of identical shape: the current
generation and a staging buffer. ``advance`` computes the next generation
into the staging buffer from the current one only, then swaps the two
references, so no cell of generation N+1 is ever computed from a partially
updated generation.

Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row; arrays
are indexed ``state[y, x]``. Anything outside ``[0, width) x [0, height)``
reads as dead.
"""

import hashlib
import logging
from typing import Optional

import numpy as np
from PIL import Image

from .conway_rules import ConwayRuleParams, count_all_neighbors, count_live_neighbors
from .errors import InvalidDimensionError, InvalidScaleError, OutOfBoundsError
from ..config import ALIVE_COLOR, DEAD_COLOR

logger = logging.getLogger(__name__)

# Byte values used when fingerprinting a generation
ALIVE_BYTE = 64
DEAD_BYTE = 0


class Grid:
    """2D boolean grid representing Conway's Game of Life state.

    Attributes:
        width: Grid width in cells (fixed)
        height: Grid height in cells (fixed)
        state: 2D numpy boolean array for the current generation (True=alive)
    """

    def __init__(self, width: int, height: int, rules: Optional[ConwayRuleParams] = None):
        """Initialize an all-dead grid with given dimensions.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            rules: Rule parameters, standard Conway rules by default

        Raises:
            InvalidDimensionError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self.rules = rules or ConwayRuleParams.standard()

        self.state = np.zeros((height, width), dtype=bool)
        self._next = np.zeros((height, width), dtype=bool)

        logger.debug(f"Created grid {width}x{height}")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set cell state in both the current and the staging buffer.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            alive: True to set alive, False to set dead

        Raises:
            OutOfBoundsError: If coordinates are out of bounds
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Coordinates ({x}, {y}) out of bounds for {self._width}x{self._height} grid")
        self.state[y, x] = alive
        self._next[y, x] = alive

    def set_cells(self, cells) -> None:
        """Bulk-set every cell from a 2D array-like of shape (height, width).

        Raises:
            ValueError: If the shape doesn't match the grid
        """
        cells = np.asarray(cells).astype(bool)
        if cells.shape != (self._height, self._width):
            raise ValueError(f"Cell array shape {cells.shape} doesn't match grid size {(self._height, self._width)}")
        self.state[:] = cells
        self._next[:] = cells

    def at(self, x: int, y: int) -> bool:
        """Get current cell state; off-grid coordinates are dead."""
        if not self.in_bounds(x, y):
            return False
        return bool(self.state[y, x])

    def neighbor_count(self, x: int, y: int) -> int:
        """Count living Moore neighbors of (x, y), off-grid cells counting as dead."""
        return count_live_neighbors(self.state, x, y)

    def neighbor_counts(self) -> np.ndarray:
        """Neighbor counts for every cell, shape (height, width)."""
        return count_all_neighbors(self.state)

    def advance(self) -> None:
        """Advance the grid one generation.

        The staging buffer is filled entirely from the current buffer and
        then becomes the current buffer.
        """
        self.rules.apply(self.state, self.neighbor_counts(), out=self._next)
        self.state, self._next = self._next, self.state

    def render_frame(self, scale: int) -> Image.Image:
        """Render the current generation as a two-color palette image.

        Each cell becomes a ``scale x scale`` block; palette index 0 is the
        dead color, index 1 the alive color.

        Args:
            scale: Pixels per cell edge

        Returns:
            New Pillow image in mode "P" of size (width*scale, height*scale)

        Raises:
            InvalidScaleError: If scale is not positive
        """
        if scale <= 0:
            raise InvalidScaleError(f"Render scale must be positive, got {scale}")

        pixels = np.repeat(np.repeat(self.state, scale, axis=0), scale, axis=1).astype(np.uint8)
        frame = Image.frombytes("P", (self._width * scale, self._height * scale), pixels.tobytes())
        frame.putpalette(list(DEAD_COLOR) + list(ALIVE_COLOR))
        return frame

    def to_bytes(self) -> bytes:
        """Row-major cell bytes, alive as ALIVE_BYTE and dead as DEAD_BYTE."""
        return np.where(self.state, ALIVE_BYTE, DEAD_BYTE).astype(np.uint8).tobytes()

    def fingerprint(self) -> str:
        """Return SHA-256 hex digest of the current generation."""
        return hashlib.sha256(self.to_bytes()).hexdigest()

    def text(self, alive_char: str = "o", dead_char: str = " ") -> str:
        """Render the grid as text, one newline-terminated line per row."""
        lines = []
        for row in self.state:
            lines.append("".join(alive_char if cell else dead_char for cell in row) + "\n")
        return "".join(lines)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.state))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        grid = Grid(self._width, self._height,
                    ConwayRuleParams(self.rules.survival_set.copy(), self.rules.birth_set.copy()))
        grid.set_cells(self.state)
        return grid

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return (self._width == other.width and
                self._height == other.height and
                np.array_equal(self.state, other.state))

    def __str__(self) -> str:
        """String representation showing grid state."""
        return self.text(alive_char='█', dead_char='░').rstrip("\n")

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Grid({self._width}x{self._height}, alive={self.count_alive()})"
