"""
Validation Module - Whole-board checks on numpy views of a grid.
"""

from typing import Optional, Sequence

import numpy as np

from .grid import (
    BOX,
    SIZE,
    InvalidGridError,
    normalize_puzzle_rows,
    validate_solving_rows,
)

_FULL_UNIT = np.arange(1, SIZE + 1)


def as_array(grid: Sequence[Sequence[Optional[int]]]) -> np.ndarray:
    """9x9 integer array of a well-formed grid, blanks (None) become 0."""
    return np.array(
        [[0 if value is None else value for value in row] for row in grid],
        dtype=np.int8,
    )


def units(board: np.ndarray) -> np.ndarray:
    """
    Stack all 27 units of a 9x9 array.

    Returns:
        (27, 9) array: 9 rows, then 9 columns, then 9 boxes
    """
    boxes = (
        board.reshape(BOX, BOX, BOX, BOX)
        .swapaxes(1, 2)
        .reshape(SIZE, SIZE)
    )
    return np.concatenate([board, board.T, boxes])


def is_solved_grid(grid: Sequence[Sequence[Optional[int]]]) -> bool:
    """
    True if every row, column and box holds the digits 1-9 exactly once.

    Anything that is not a 9x9 grid of digits is simply not solved.
    """
    try:
        validate_solving_rows(grid)
    except InvalidGridError:
        return False
    return bool(np.all(np.sort(units(as_array(grid)), axis=1) == _FULL_UNIT))


def is_consistent(grid: Sequence[Sequence[Optional[int]]]) -> bool:
    """
    True if no filled digit repeats within a row, column or box.

    Blanks (None or 0) are ignored, so partially filled puzzles can be checked.

    Raises:
        InvalidGridError: If grid is not a well-formed puzzle grid
    """
    for unit in units(as_array(normalize_puzzle_rows(grid))):
        filled = unit[unit > 0]
        if len(np.unique(filled)) != len(filled):
            return False
    return True
