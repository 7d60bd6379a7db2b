"""Tests for Conway's Game of Life rules.

Covers the per-cell rule, scalar and whole-grid neighbor counting with the
open boundary, and all 512 possible 3x3 neighborhood configurations.
"""

import pytest
import numpy as np
from lifeanim.core.conway_rules import (
    BIRTH_SET, SURVIVAL_SET, ConwayRuleParams,
    count_all_neighbors, count_live_neighbors, update_cell
)


def neighborhood_pattern(center_alive: bool, neighbors_mask: int) -> np.ndarray:
    """3x3 pattern with the 8 neighbors taken from the mask bits (clockwise from top-left)."""
    pattern = np.zeros((3, 3), dtype=bool)
    pattern[1, 1] = center_alive

    neighbor_positions = [
        (0, 0), (0, 1), (0, 2),
        (1, 2),
        (2, 2), (2, 1), (2, 0),
        (1, 0)
    ]
    for i, (y, x) in enumerate(neighbor_positions):
        pattern[y, x] = bool((neighbors_mask >> (7 - i)) & 1)

    return pattern


class TestUpdateCell:
    """Test the birth/survival rule for a single cell."""

    def test_standard_sets(self):
        """Standard rule is B3/S23."""
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}

    def test_live_cell_survives_with_two_or_three(self):
        """Live cell survives with exactly 2 or 3 neighbors."""
        for count in range(9):
            assert update_cell(True, count) is (count in (2, 3))

    def test_dead_cell_born_with_three(self):
        """Dead cell becomes alive with exactly 3 neighbors."""
        for count in range(9):
            assert update_cell(False, count) is (count == 3)

    def test_params_match_module_rule(self):
        """Standard params agree with the module-level rule."""
        params = ConwayRuleParams.standard()
        for alive in (False, True):
            for count in range(9):
                assert params.update_cell(alive, count) == update_cell(alive, count)

    def test_custom_params(self):
        """Custom sets are honored (HighLife B36/S23)."""
        params = ConwayRuleParams(survival_set={2, 3}, birth_set={3, 6})
        assert params.update_cell(False, 6) is True
        assert params.update_cell(True, 6) is False
        assert "birth={3, 6}" in repr(params)


class TestNeighborCounting:
    """Test Moore neighborhood counting with dead off-grid cells."""

    def test_center_not_counted(self):
        """Center cell is not counted as its own neighbor."""
        state = np.zeros((3, 3), dtype=bool)
        state[1, 1] = True
        assert count_live_neighbors(state, 1, 1) == 0

    def test_full_grid_counts(self):
        """Corners see 3, edges 5, center 8 on a full 3x3 grid."""
        state = np.ones((3, 3), dtype=bool)

        assert count_live_neighbors(state, 0, 0) == 3
        assert count_live_neighbors(state, 1, 0) == 5
        assert count_live_neighbors(state, 0, 1) == 5
        assert count_live_neighbors(state, 1, 1) == 8
        assert count_live_neighbors(state, 2, 2) == 3

    def test_no_wraparound(self):
        """Cells on opposite edges are not neighbors."""
        state = np.zeros((5, 5), dtype=bool)
        state[0, 4] = True
        state[4, 0] = True
        state[4, 4] = True

        assert count_live_neighbors(state, 0, 0) == 0

    def test_off_grid_coordinates(self):
        """Counting around a coordinate just outside the grid sees only in-grid cells."""
        state = np.ones((3, 3), dtype=bool)
        assert count_live_neighbors(state, -1, -1) == 1
        assert count_live_neighbors(state, 3, 1) == 3

    def test_vectorised_matches_scalar(self):
        """Whole-grid counts equal per-cell counts."""
        rng = np.random.default_rng(7)
        state = rng.random((9, 13)) < 0.4

        counts = count_all_neighbors(state)
        assert counts.shape == state.shape
        for y in range(state.shape[0]):
            for x in range(state.shape[1]):
                assert counts[y, x] == count_live_neighbors(state, x, y)

    def test_vectorised_single_cell_grid(self):
        """A 1x1 grid has no neighbors."""
        counts = count_all_neighbors(np.ones((1, 1), dtype=bool))
        np.testing.assert_array_equal(counts, np.zeros((1, 1)))


class TestAll512Rules:
    """Every (center_alive, 8 neighbors) combination."""

    @pytest.mark.parametrize("center_alive", [False, True])
    def test_all_neighborhood_configurations(self, center_alive):
        """Vectorised rule, scalar rule and neighbor counts agree on every neighborhood."""
        params = ConwayRuleParams.standard()

        for neighbor_mask in range(256):
            pattern = neighborhood_pattern(center_alive, neighbor_mask)
            expected_count = bin(neighbor_mask).count("1")

            assert count_live_neighbors(pattern, 1, 1) == expected_count

            counts = count_all_neighbors(pattern)
            next_state = params.apply(pattern, counts)
            assert bool(next_state[1, 1]) == update_cell(center_alive, expected_count)

    def test_apply_writes_into_out(self):
        """apply() can fill a preallocated buffer without touching the input."""
        params = ConwayRuleParams.standard()
        state = np.zeros((5, 5), dtype=bool)
        state[2, 1:4] = True
        original = state.copy()
        out = np.zeros_like(state)

        result = params.apply(state, count_all_neighbors(state), out=out)

        assert result is out
        np.testing.assert_array_equal(state, original)
        assert out[1:4, 2].all()
        assert out.sum() == 3
