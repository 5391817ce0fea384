"""
Base Carver Module - Abstract base class for puzzle carving policies.
"""

import random
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ..difficulty import Difficulty
from ..grid import SIZE, PuzzleRows, copy_rows, validate_solving_rows
from ..constraints import find_empty, has_conflicts
from ..result import CarveMetrics


class CarvingStrategy(ABC):
    """
    Abstract base class for all carving policies.

    Subclasses implement _carve() and define name and description
    class attributes.

    Attributes:
        name: Short identifier for the policy
        description: Human-readable description
        guarantees_unique: True if puzzles always have exactly one solution
    """
    name: str = "base"
    description: str = "Base carver"
    guarantees_unique: bool = False

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source for the removal order
        """
        self.rng = rng or random.Random()

    def carve(self, solved_grid: Sequence[Sequence[int]],
              difficulty: Difficulty) -> Tuple[PuzzleRows, CarveMetrics]:
        """
        Blank cells of a solved grid to produce a puzzle.

        The caller's grid is never mutated.

        Args:
            solved_grid: Fully filled, rule-valid grid
            difficulty: Difficulty level (or its name)

        Returns:
            (puzzle, metrics) where puzzle uses None for blanks

        Raises:
            InvalidGridError: If solved_grid is malformed
            ValueError: If solved_grid is not a full valid solution
        """
        validate_solving_rows(solved_grid)
        if find_empty(solved_grid) is not None or has_conflicts(solved_grid):
            raise ValueError("Carving requires a fully solved grid")

        difficulty = Difficulty.parse(difficulty)
        start_time = time.perf_counter()

        puzzle: PuzzleRows = copy_rows(solved_grid)
        metrics = CarveMetrics(strategy_name=self.name)
        self._carve(puzzle, difficulty, metrics)

        metrics.clues = sum(1 for row in puzzle for value in row if value is not None)
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        return puzzle, metrics

    @abstractmethod
    def _carve(self, puzzle: PuzzleRows, difficulty: Difficulty,
               metrics: CarveMetrics) -> None:
        """
        Blank cells of puzzle in place and record statistics.

        Args:
            puzzle: Working copy of the solved grid
            difficulty: Difficulty level
            metrics: Statistics to fill in (target_clues, attempts, ...)
        """
        pass

    def shuffled_positions(self) -> List[Tuple[int, int]]:
        """All 81 positions in uniformly shuffled order."""
        positions = [(r, c) for r in range(SIZE) for c in range(SIZE)]
        self.rng.shuffle(positions)
        return positions
