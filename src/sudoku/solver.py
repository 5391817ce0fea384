"""
Backtracking Solver - Deterministic depth-first search, digits in ascending order.
"""

import logging
from typing import Optional, Sequence

from .constraints import find_empty, has_conflicts, is_valid_placement
from .generator import DIGITS
from .grid import EMPTY, SolvingRows, copy_rows, validate_solving_rows

logger = logging.getLogger(__name__)


def _solve_in_place(grid: SolvingRows) -> bool:
    """
    Assign every empty cell of grid in place.

    Returns:
        True if a full assignment was found, False otherwise
        (every cell this call assigned is reset to empty)
    """
    empty = find_empty(grid)
    if empty is None:
        return True

    row, col = empty
    for digit in DIGITS:
        if is_valid_placement(grid, row, col, digit):
            grid[row][col] = digit
            if _solve_in_place(grid):
                return True
            grid[row][col] = EMPTY

    return False


def solve_grid(grid: Sequence[Sequence[int]]) -> Optional[SolvingRows]:
    """
    Find a solution for a partially filled solving grid.

    Pre-filled cells are fixed; only empty (0) cells are assigned.
    The caller's grid is never mutated.

    Args:
        grid: 9x9 grid of digits 1-9 and 0 for empty

    Returns:
        Solved grid, or None if the grid is unsolvable (including grids
        whose givens already conflict)

    Raises:
        InvalidGridError: If grid is not a well-formed solving grid
    """
    validate_solving_rows(grid)
    work = copy_rows(grid)

    if has_conflicts(work):
        logger.debug("Givens conflict, grid is unsolvable")
        return None

    if _solve_in_place(work):
        return work

    logger.debug("Search exhausted, grid is unsolvable")
    return None
