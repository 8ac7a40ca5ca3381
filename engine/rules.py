"""
Rules - Quadrant validation and target selection.

The board is split into AREA_COUNT quadrants indexed from 0. Exactly one
quadrant is the target at any time, and a correct hit always moves the
target somewhere else.
"""

import random


# Quadrants on the board (2x2 grid)
AREA_COUNT = 4


class InvalidAreaError(ValueError):
    """Raised when a tap names a quadrant that does not exist."""

    def __init__(self, index, area_count: int = AREA_COUNT):
        self.index = index
        self.area_count = area_count
        super().__init__(
            f"Invalid area index {index!r}: expected an integer in 0..{area_count - 1}"
        )


def validate_area(index, area_count: int = AREA_COUNT) -> int:
    """
    Check that index names a quadrant on the board.

    Args:
        index: The tapped quadrant
        area_count: Number of quadrants

    Returns:
        The index, unchanged

    Raises:
        InvalidAreaError: if index is not an int in [0, area_count)
    """
    # bool is an int subclass but never a valid quadrant
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidAreaError(index, area_count)
    if not 0 <= index < area_count:
        raise InvalidAreaError(index, area_count)
    return index


def random_area(rng: random.Random, area_count: int = AREA_COUNT) -> int:
    """Draw a quadrant uniformly at random."""
    return rng.randrange(area_count)


def pick_next_target(current: int, rng: random.Random,
                     area_count: int = AREA_COUNT) -> int:
    """
    Pick a new target quadrant different from the current one.

    Uses rejection sampling: draw uniformly and redraw while the draw
    equals the current target. Each remaining quadrant is equally likely
    and the expected number of draws is area_count / (area_count - 1).

    Args:
        current: The quadrant that was just hit
        rng: Random source
        area_count: Number of quadrants (at least 2)

    Returns:
        A quadrant index != current
    """
    if area_count < 2:
        raise ValueError("Need at least two areas to move the target")

    new_target = random_area(rng, area_count)
    while new_target == current:
        new_target = random_area(rng, area_count)
    return new_target
