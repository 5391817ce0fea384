"""
Puzzle Facade - Functional boundary used by the game UI.

Usage:
    from src.sudoku import generate_sudoku, check_solution, solve_sudoku

    game = generate_sudoku("hard")
    puzzle, solution = game["puzzle"], game["solution"]

    solve_sudoku(puzzle) == solution  # True for uniquely carved puzzles
"""

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .carving import CarvingStrategy, create_carver, get_default_carver_name
from .constraints import find_conflicts as _find_conflicts
from .difficulty import Difficulty
from .generator import generate_solved_grid
from .grid import (
    EMPTY,
    SIZE,
    Cell,
    InvalidGridError,
    SolvingRows,
    to_solving_rows,
    validate_puzzle_rows,
    validate_solving_rows,
)
from .result import PuzzleResult
from .solver import solve_grid
from .validation import is_solved_grid

logger = logging.getLogger(__name__)

Board = Sequence[Sequence[Cell]]


def _resolve_carver(carver: Union[str, CarvingStrategy, None],
                    rng: Optional[random.Random]) -> CarvingStrategy:
    if isinstance(carver, CarvingStrategy):
        return carver
    return create_carver(carver or get_default_carver_name(), rng=rng)


def generate(difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
             carver: Union[str, CarvingStrategy, None] = None,
             rng: Optional[random.Random] = None) -> PuzzleResult:
    """
    Generate a solved grid and carve a puzzle from it.

    Args:
        difficulty: "easy", "medium", "hard" or a Difficulty
        carver: Carver name, carver instance, or None for the default
        rng: Random source shared by generation and carving

    Returns:
        PuzzleResult with puzzle, solution and carving metrics

    Raises:
        ValueError: If difficulty or carver name is unknown
    """
    level = Difficulty.parse(difficulty)
    rng = rng or random.Random()
    strategy = _resolve_carver(carver, rng)

    solution = generate_solved_grid(rng)
    if not is_solved_grid(solution):
        raise RuntimeError("Generated grid violates Sudoku rules")

    puzzle, metrics = strategy.carve(solution, level)

    logger.info(
        f"Generated {level} puzzle with {metrics.strategy_name} carver: "
        f"{metrics.clues} clues (target {metrics.target_clues}), "
        f"{metrics.computation_time_ms:.1f}ms"
    )
    return PuzzleResult(puzzle=puzzle, solution=solution, difficulty=level, metrics=metrics)


def generate_sudoku(difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
                    carver: Union[str, CarvingStrategy, None] = None,
                    rng: Optional[random.Random] = None) -> Dict[str, List[list]]:
    """
    Generate a new game.

    Returns:
        {"puzzle": grid with None blanks, "solution": full grid}
    """
    return generate(difficulty, carver=carver, rng=rng).to_dict()


def check_solution(board: Board, solution: Sequence[Sequence[int]]) -> bool:
    """
    Compare a filled board against the solution, cell by cell.

    Callers check is_board_complete() first; any blank makes the
    comparison fail.

    Raises:
        InvalidGridError: If either grid is malformed
    """
    validate_puzzle_rows(board)
    validate_solving_rows(solution)

    for row in range(SIZE):
        for col in range(SIZE):
            if board[row][col] != solution[row][col]:
                return False
    return True


def solve_sudoku(board: Board) -> Optional[SolvingRows]:
    """
    Solve a puzzle grid.

    Returns:
        A solution (digits ascend at every branch, so the result is
        deterministic), or None if the board has no solution

    Raises:
        InvalidGridError: If board is malformed
    """
    validate_puzzle_rows(board)
    return solve_grid(to_solving_rows(board))


def is_board_complete(board: Board) -> bool:
    """True if the board has no blanks left."""
    validate_puzzle_rows(board)
    return all(value is not None for row in board for value in row)


def get_hint(board: Board, solution: Sequence[Sequence[int]],
             row: int, col: int) -> Optional[int]:
    """
    Digit to reveal for a cell of the player's board.

    Givens always match the solution, so they never get a hint.

    Args:
        board: The player's current board, None for blanks
        solution: The paired solution
        row: Row index (0-8)
        col: Column index (0-8)

    Returns:
        The solution digit for a blank or incorrect cell, or None if
        the cell already holds the right digit

    Raises:
        InvalidGridError: If either grid is malformed or solution has empty cells
        IndexError: If (row, col) is outside the grid
    """
    validate_puzzle_rows(board)
    validate_solving_rows(solution)
    if any(value == EMPTY for line in solution for value in line):
        raise InvalidGridError("Solution must be fully filled")
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f"Cell ({row},{col}) is outside the grid")

    if board[row][col] == solution[row][col]:
        return None
    return solution[row][col]


def find_conflicts(board: Board) -> List[Tuple[int, int]]:
    """
    Cells whose digit repeats in their row, column or box.

    Raises:
        InvalidGridError: If board is malformed
    """
    validate_puzzle_rows(board)
    return _find_conflicts(board)
