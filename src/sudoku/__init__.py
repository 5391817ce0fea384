"""
Sudoku Package - Generation, carving and solving engine for 9x9 Sudoku.

Public API:
    - Grid: Immutable grid representation
    - Difficulty: Difficulty levels and clue targets
    - PuzzleResult / CarveMetrics: Generation results
    - is_valid_placement(): Row/column/box legality check
    - generate_solved_grid(): Random fully filled grid
    - solve_grid() / count_solutions(): Backtracking search
    - carve() and the carver registry: Puzzle carving policies
    - generate_sudoku(), check_solution(), solve_sudoku(): UI boundary

Usage:
    from src.sudoku import generate, solve_sudoku

    result = generate("medium")
    print(result.puzzle_grid().render())
    print(f"{result.clue_count} clues, {result.metrics.computation_time_ms:.0f}ms")

    assert solve_sudoku(result.puzzle) == result.solution
"""

# Core data structures
from .grid import Grid, InvalidGridError
from .difficulty import Difficulty
from .result import CarveMetrics, PuzzleResult

# Search primitives
from .constraints import is_valid_placement
from .generator import generate_solved_grid
from .solver import solve_grid
from .counter import count_solutions, has_unique_solution
from .validation import is_consistent, is_solved_grid

# Carving framework
from .carving import (
    CarvingStrategy,
    carve,
    create_carver,
    get_carver_names,
    get_carver_info,
    get_default_carver_name,
    register_carver,
)

# Boundary
from .facade import (
    generate,
    generate_sudoku,
    check_solution,
    solve_sudoku,
    is_board_complete,
    get_hint,
    find_conflicts,
)

__all__ = [
    # Data structures
    "Grid",
    "InvalidGridError",
    "Difficulty",
    "CarveMetrics",
    "PuzzleResult",
    # Search
    "is_valid_placement",
    "generate_solved_grid",
    "solve_grid",
    "count_solutions",
    "has_unique_solution",
    "is_consistent",
    "is_solved_grid",
    # Carving
    "CarvingStrategy",
    "carve",
    "create_carver",
    "get_carver_names",
    "get_carver_info",
    "get_default_carver_name",
    "register_carver",
    # Boundary
    "generate",
    "generate_sudoku",
    "check_solution",
    "solve_sudoku",
    "is_board_complete",
    "get_hint",
    "find_conflicts",
]
