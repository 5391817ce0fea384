"""
Random Solved-Grid Generator - Randomized backtracking fill of an empty grid.
"""

import logging
import random
from typing import List, Optional

from .constraints import find_empty, is_valid_placement
from .grid import EMPTY, SIZE, SolvingRows

logger = logging.getLogger(__name__)

DIGITS = tuple(range(1, SIZE + 1))


def _fill_randomly(grid: SolvingRows, rng: random.Random) -> bool:
    """
    Fill every empty cell of grid in place, trying digits in shuffled order.

    Returns:
        True once the grid is full, False if this branch is a dead end
        (the cell touched by this frame is reset to empty)
    """
    empty = find_empty(grid)
    if empty is None:
        return True

    row, col = empty
    candidates: List[int] = list(DIGITS)
    rng.shuffle(candidates)

    for digit in candidates:
        if is_valid_placement(grid, row, col, digit):
            grid[row][col] = digit
            if _fill_randomly(grid, rng):
                return True
            grid[row][col] = EMPTY

    return False


def generate_solved_grid(rng: Optional[random.Random] = None) -> SolvingRows:
    """
    Produce a fully filled, rule-valid 9x9 grid.

    Args:
        rng: Random source; pass a seeded random.Random for reproducible grids

    Returns:
        9 rows of 9 digits, no empty cells
    """
    rng = rng or random.Random()
    grid = [[EMPTY] * SIZE for _ in range(SIZE)]

    # An empty board always has a completion, so this cannot fail
    if not _fill_randomly(grid, rng):
        raise RuntimeError("Backtracking failed to fill an empty grid")

    logger.debug("Generated solved grid")
    return grid
