"""
Unit tests for quadrant validation and target selection.
"""

import random
from collections import Counter

import pytest

from engine.rules import (
    AREA_COUNT,
    InvalidAreaError,
    pick_next_target,
    random_area,
    validate_area,
)


class TestValidateArea:
    """Tests for validate_area."""

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_valid_indices_pass_through(self, index):
        """Every quadrant on the board is accepted."""
        assert validate_area(index) == index

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_out_of_range_raises(self, index):
        """Indices off the board are rejected."""
        with pytest.raises(InvalidAreaError, match="Invalid area index"):
            validate_area(index)

    @pytest.mark.parametrize("index", ["0", 0.0, None, False])
    def test_non_integers_raise(self, index):
        """Only plain ints name a quadrant."""
        with pytest.raises(InvalidAreaError):
            validate_area(index)

    def test_error_is_value_error(self):
        """InvalidAreaError can be caught as ValueError."""
        with pytest.raises(ValueError) as exc_info:
            validate_area(7)
        assert exc_info.value.index == 7
        assert exc_info.value.area_count == AREA_COUNT

    def test_custom_area_count(self):
        """Larger boards accept larger indices."""
        assert validate_area(8, area_count=9) == 8
        with pytest.raises(InvalidAreaError):
            validate_area(9, area_count=9)


class TestTargetSelection:
    """Tests for random_area and pick_next_target."""

    def setup_method(self):
        self.rng = random.Random(2024)

    def test_random_area_in_range(self):
        """Draws always land on the board."""
        draws = {random_area(self.rng) for _ in range(500)}
        assert draws == {0, 1, 2, 3}

    @pytest.mark.parametrize("current", [0, 1, 2, 3])
    def test_next_target_differs(self, current):
        """The new target is never the one just hit."""
        for _ in range(500):
            assert pick_next_target(current, self.rng) != current

    def test_next_target_is_fair(self):
        """Each other quadrant is picked about a third of the time."""
        trials = 30_000
        counts = Counter(pick_next_target(0, self.rng) for _ in range(trials))

        assert set(counts) == {1, 2, 3}
        for area in (1, 2, 3):
            assert counts[area] / trials == pytest.approx(1 / 3, abs=0.02)

    def test_two_areas_alternate(self):
        """With two areas the target must flip every time."""
        assert pick_next_target(0, self.rng, area_count=2) == 1
        assert pick_next_target(1, self.rng, area_count=2) == 0

    def test_single_area_rejected(self):
        """A one-area board cannot move the target."""
        with pytest.raises(ValueError, match="at least two"):
            pick_next_target(0, self.rng, area_count=1)
