"""
Conway's Game of Life Rules

Birth/survival rule sets and neighbor counting for a bounded grid.
Cells outside the grid are always dead: there is no wraparound.
"""

from typing import Set, Optional

import numpy as np


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


def count_live_neighbors(state: np.ndarray, x: int, y: int) -> int:
    """Count live neighbors of cell at (x,y) using Moore neighborhood.

    Args:
        state: 2D boolean numpy array indexed as state[y, x]
        x: Cell x-coordinate
        y: Cell y-coordinate

    Returns:
        Number of live neighbors (0-8)
    """
    height, width = state.shape
    count = 0

    for dy in [-1, 0, 1]:
        for dx in [-1, 0, 1]:
            if dx == 0 and dy == 0:
                continue  # Skip center cell

            nx, ny = x + dx, y + dy

            # Off-grid neighbors are dead
            if 0 <= nx < width and 0 <= ny < height and state[ny, nx]:
                count += 1

    return count


def count_all_neighbors(state: np.ndarray) -> np.ndarray:
    """Count live Moore neighbors for every cell at once.

    The grid is padded with one ring of dead cells, so border cells see
    only their in-grid neighbors.

    Returns:
        Integer array with the same shape as ``state``, values 0-8
    """
    height, width = state.shape
    padded = np.pad(state.astype(np.uint8), pad_width=1, mode='constant', constant_values=0)

    counts = np.zeros((height, width), dtype=np.uint8)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]

    return counts


class ConwayRuleParams:
    """Birth and survival neighbor counts for a Life-like rule.

    Defaults to standard Conway rules (B3/S23).
    """

    def __init__(self,
                 survival_set: Optional[Set[int]] = None,
                 birth_set: Optional[Set[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})
        """
        self.survival_set: Set[int] = survival_set if survival_set is not None else SURVIVAL_SET.copy()
        self.birth_set: Set[int] = birth_set if birth_set is not None else BIRTH_SET.copy()

    @classmethod
    def standard(cls) -> 'ConwayRuleParams':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET.copy(), BIRTH_SET.copy())

    def update_cell(self, alive: bool, live_neighbors: int) -> bool:
        """Apply these rule parameters to a single cell."""
        if alive:
            return live_neighbors in self.survival_set
        else:
            return live_neighbors in self.birth_set

    def apply(self, state: np.ndarray, counts: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Apply the rule to a whole generation.

        Args:
            state: Current boolean generation
            counts: Neighbor counts for ``state``
            out: Optional boolean array to write the next generation into

        Returns:
            Boolean array holding the next generation
        """
        survive = state & np.isin(counts, list(self.survival_set))
        born = ~state & np.isin(counts, list(self.birth_set))
        return np.logical_or(survive, born, out=out)

    def __repr__(self) -> str:
        return f"ConwayRuleParams(survival={self.survival_set}, birth={self.birth_set})"
