"""
Grid Module - Immutable 9x9 Sudoku grid and input validation helpers.
"""

from collections import abc
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

SIZE = 9
BOX = 3
EMPTY = 0

Cell = Optional[int]
PuzzleRows = List[List[Cell]]
SolvingRows = List[List[int]]


class InvalidGridError(ValueError):
    """Raised when a grid is not a well-formed 9x9 Sudoku grid."""


def _is_sequence(value: object) -> bool:
    return isinstance(value, abc.Sequence) and not isinstance(value, (str, bytes))


def _check_shape(rows: Sequence[Sequence[object]]) -> None:
    if not _is_sequence(rows):
        raise InvalidGridError(f"Grid must be a sequence of {SIZE} rows, got {type(rows).__name__}")
    if len(rows) != SIZE:
        raise InvalidGridError(f"Grid must have {SIZE} rows, got {len(rows)}")
    for r, row in enumerate(rows):
        if not _is_sequence(row):
            raise InvalidGridError(f"Row {r} must be a sequence of {SIZE} cells, got {type(row).__name__}")
        if len(row) != SIZE:
            raise InvalidGridError(f"Row {r} must have {SIZE} cells, got {len(row)}")


def _is_digit(value: object) -> bool:
    # bool is an int subclass, reject it explicitly
    return isinstance(value, int) and not isinstance(value, bool)


def validate_puzzle_rows(rows: Sequence[Sequence[Cell]]) -> None:
    """
    Check that rows form a 9x9 puzzle grid (digits 1-9 or None).

    Raises:
        InvalidGridError: On wrong dimensions or out-of-range cells
    """
    _check_shape(rows)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value is None:
                continue
            if not _is_digit(value) or not 1 <= value <= SIZE:
                raise InvalidGridError(f"Invalid cell ({r},{c}): {value!r}")


def validate_solving_rows(rows: Sequence[Sequence[int]]) -> None:
    """
    Check that rows form a 9x9 solving grid (digits 1-9 or 0 for empty).

    Raises:
        InvalidGridError: On wrong dimensions or out-of-range cells
    """
    _check_shape(rows)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if not _is_digit(value) or not EMPTY <= value <= SIZE:
                raise InvalidGridError(f"Invalid cell ({r},{c}): {value!r}")


def normalize_puzzle_rows(rows: Sequence[Sequence[Cell]]) -> PuzzleRows:
    """
    Copy a grid into puzzle form, treating 0 as a blank.

    Raises:
        InvalidGridError: If rows are not a valid 9x9 grid
    """
    _check_shape(rows)
    normalized = [[None if _is_digit(value) and value == EMPTY else value
                   for value in row] for row in rows]
    validate_puzzle_rows(normalized)
    return normalized


def to_solving_rows(rows: Sequence[Sequence[Cell]]) -> SolvingRows:
    """Copy a puzzle grid into a mutable solving grid (None -> 0)."""
    return [[EMPTY if value is None else value for value in row] for row in rows]


def to_puzzle_rows(rows: Sequence[Sequence[int]]) -> PuzzleRows:
    """Copy a solving grid into a puzzle grid (0 -> None)."""
    return [[None if value == EMPTY else value for value in row] for row in rows]


def copy_rows(rows: Sequence[Sequence[Cell]]) -> List[List[Cell]]:
    return [list(row) for row in rows]


@dataclass(frozen=True)
class Grid:
    """
    Immutable 9x9 puzzle grid.

    Uses tuple-of-tuples for hashability and immutability.
    Cells contain integers 1-9 or None for blanks.

    Attributes:
        cells: Tuple of 9 row tuples
    """
    cells: Tuple[Tuple[Cell, ...], ...]

    @classmethod
    def from_2d_list(cls, rows: Sequence[Sequence[Cell]]) -> 'Grid':
        """
        Create Grid from a 2D list, treating 0 as a blank.

        Args:
            rows: 9 rows of 9 values (1-9, 0 or None)

        Returns:
            Grid instance

        Raises:
            InvalidGridError: If rows are not a valid 9x9 grid
        """
        normalized = normalize_puzzle_rows(rows)
        return cls(cells=tuple(tuple(row) for row in normalized))

    @classmethod
    def empty(cls) -> 'Grid':
        """Create a grid with every cell blank."""
        return cls(cells=tuple((None,) * SIZE for _ in range(SIZE)))

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get value at specific cell position.

        Returns:
            Cell value (1-9) or None if blank or out of range
        """
        if 0 <= row < SIZE and 0 <= col < SIZE:
            return self.cells[row][col]
        return None

    def with_cell(self, row: int, col: int, value: Cell) -> 'Grid':
        """Return a new Grid with one cell replaced."""
        rows = self.to_list()
        rows[row][col] = value
        return Grid.from_2d_list(rows)

    def diff(self, other: 'Grid') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this grid and another.

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, Grid):
            raise TypeError("Can only diff against another Grid")

        return [
            (r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.cells[r][c] != other.cells[r][c]
        ]

    def count_clues(self) -> int:
        """Count non-blank cells."""
        return sum(1 for row in self.cells for value in row if value is not None)

    def blanks(self) -> List[Tuple[int, int]]:
        """Positions of blank cells in row-major order."""
        return [
            (r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.cells[r][c] is None
        ]

    @property
    def is_complete(self) -> bool:
        """True if no blanks remain."""
        return self.count_clues() == SIZE * SIZE

    def to_list(self) -> PuzzleRows:
        """Convert to mutable 2D list with None for blanks."""
        return [list(row) for row in self.cells]

    def to_solving_list(self) -> SolvingRows:
        """Convert to mutable 2D list with 0 for blanks."""
        return to_solving_rows(self.cells)

    def render(self, blank: str = ".") -> str:
        """Plain-text rendering with box separators."""
        lines = []
        for r, row in enumerate(self.cells):
            if r and r % BOX == 0:
                lines.append("------+-------+------")
            parts = []
            for c, value in enumerate(row):
                if c and c % BOX == 0:
                    parts.append("|")
                parts.append(blank if value is None else str(value))
            lines.append(" ".join(parts))
        return "\n".join(lines)
