"""
Result Module - Generated puzzle/solution pair and carving statistics.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .difficulty import Difficulty
from .grid import Grid, PuzzleRows, SolvingRows


@dataclass
class CarveMetrics:
    """
    Statistics for one carving run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        attempts: Removals tried
        rejected: Removals reverted because they broke uniqueness
        solution_counts: Calls made to the solution counter
        clues: Givens left in the puzzle
        target_clues: Givens the carver aimed for
        strategy_name: Name of the carver that produced the puzzle
    """
    computation_time_ms: float = 0.0
    attempts: int = 0
    rejected: int = 0
    solution_counts: int = 0
    clues: int = 0
    target_clues: int = 0
    strategy_name: str = ""

    @property
    def target_reached(self) -> bool:
        """True if the carver got down to its clue target."""
        return self.clues <= self.target_clues


@dataclass
class PuzzleResult:
    """
    A freshly generated puzzle and the solution it was carved from.

    Attributes:
        puzzle: Puzzle grid, None marks a blank
        solution: Fully filled solution grid
        difficulty: Requested difficulty
        metrics: Carving statistics
    """
    puzzle: PuzzleRows
    solution: SolvingRows
    difficulty: Difficulty
    metrics: CarveMetrics = field(default_factory=CarveMetrics)

    @property
    def clue_count(self) -> int:
        """Number of givens in the puzzle."""
        return sum(1 for row in self.puzzle for value in row if value is not None)

    def puzzle_grid(self) -> Grid:
        return Grid.from_2d_list(self.puzzle)

    def solution_grid(self) -> Grid:
        return Grid.from_2d_list(self.solution)

    def to_dict(self) -> Dict[str, List[list]]:
        """Boundary shape handed to the UI: independent copies of both grids."""
        return {
            "puzzle": [list(row) for row in self.puzzle],
            "solution": [list(row) for row in self.solution],
        }
