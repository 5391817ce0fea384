"""
Constraint Checker - Row, column and box uniqueness rules.
"""

from typing import List, Optional, Sequence, Tuple

from .grid import BOX, SIZE


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left cell of the 3x3 box containing (row, col)."""
    return (row // BOX) * BOX, (col // BOX) * BOX


def is_valid_placement(grid: Sequence[Sequence[Optional[int]]], row: int, col: int,
                       digit: int) -> bool:
    """
    Check whether digit may stand at (row, col).

    The target cell itself is never compared, so this works both when
    placing into an empty cell and when re-validating a filled cell in
    place. Empty (0) and blank (None) cells never conflict.

    Args:
        grid: 9x9 grid of digits, 0 or None
        row: Row index (0-8)
        col: Column index (0-8)
        digit: Candidate digit (1-9)

    Returns:
        True if digit does not repeat in the row, column or box
    """
    for i in range(SIZE):
        if i != col and grid[row][i] == digit:
            return False
        if i != row and grid[i][col] == digit:
            return False

    box_row, box_col = box_origin(row, col)
    for r in range(box_row, box_row + BOX):
        for c in range(box_col, box_col + BOX):
            if (r, c) != (row, col) and grid[r][c] == digit:
                return False

    return True


def find_conflicts(grid: Sequence[Sequence[Optional[int]]]) -> List[Tuple[int, int]]:
    """
    Re-validate every filled cell in place.

    Returns:
        Positions (row, col) of filled cells that share a digit with
        another cell in their row, column or box
    """
    conflicts = []
    for r in range(SIZE):
        for c in range(SIZE):
            value = grid[r][c]
            if value and not is_valid_placement(grid, r, c, value):
                conflicts.append((r, c))
    return conflicts


def has_conflicts(grid: Sequence[Sequence[Optional[int]]]) -> bool:
    """True if any two filled cells violate the uniqueness rules."""
    for r in range(SIZE):
        for c in range(SIZE):
            value = grid[r][c]
            if value and not is_valid_placement(grid, r, c, value):
                return True
    return False


def find_empty(grid: Sequence[Sequence[int]]) -> Optional[Tuple[int, int]]:
    """First empty (0) cell in row-major order, or None if the grid is full."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return r, c
    return None
