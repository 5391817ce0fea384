"""
Solution Counter - Backtracking count of completions with early exit.
"""

from typing import Sequence

from .constraints import find_empty, has_conflicts, is_valid_placement
from .generator import DIGITS
from .grid import EMPTY, SolvingRows, copy_rows, validate_solving_rows

UNIQUENESS_LIMIT = 2


def _count_in_place(grid: SolvingRows, limit: int, found: int) -> int:
    """Return found plus the completions below this node, capped at limit."""
    empty = find_empty(grid)
    if empty is None:
        return found + 1

    row, col = empty
    for digit in DIGITS:
        if is_valid_placement(grid, row, col, digit):
            grid[row][col] = digit
            found = _count_in_place(grid, limit, found)
            grid[row][col] = EMPTY
            if found >= limit:
                break

    return found


def count_solutions(grid: Sequence[Sequence[int]], limit: int = UNIQUENESS_LIMIT) -> int:
    """
    Count solutions of a solving grid, stopping once limit is reached.

    Only uniqueness matters to callers, so the default limit of 2 is
    enough to tell "none", "exactly one" and "more than one" apart.

    Args:
        grid: 9x9 grid of digits 1-9 and 0 for empty
        limit: Count at which the search stops

    Returns:
        Number of solutions in [0, limit]

    Raises:
        ValueError: If limit is below 1
        InvalidGridError: If grid is not a well-formed solving grid
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    validate_solving_rows(grid)
    work = copy_rows(grid)

    if has_conflicts(work):
        return 0

    return _count_in_place(work, limit, 0)


def has_unique_solution(grid: Sequence[Sequence[int]]) -> bool:
    """True if grid has exactly one completion."""
    return count_solutions(grid, UNIQUENESS_LIMIT) == 1
