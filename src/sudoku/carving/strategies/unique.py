"""
Unique-Solution Carver - Removes givens only while the puzzle stays uniquely solvable.
"""

import logging

from ...counter import count_solutions
from ...difficulty import Difficulty
from ...grid import PuzzleRows, SIZE, to_solving_rows
from ...result import CarveMetrics
from ..base import CarvingStrategy
from ..factory import register_carver

logger = logging.getLogger(__name__)


@register_carver
class UniqueSolutionCarver(CarvingStrategy):
    """
    Carver that keeps every puzzle uniquely solvable.

    Positions are tried in shuffled order. Each blanked cell is kept
    only if the solution counter still reports exactly one solution;
    otherwise the digit is restored. Carving stops at the clue target,
    when every position has been tried, or after a run of consecutive
    rejected removals. Low clue targets are therefore best effort.
    """
    name = "unique"
    description = "Unique solution - Removes givens while the solution stays unique"
    guarantees_unique = True

    max_consecutive_failures: int = 10

    def _carve(self, puzzle: PuzzleRows, difficulty: Difficulty,
               metrics: CarveMetrics) -> None:
        target = difficulty.target_clues
        metrics.target_clues = target

        clues = SIZE * SIZE
        failures = 0

        for row, col in self.shuffled_positions():
            if clues <= target or failures >= self.max_consecutive_failures:
                break

            digit = puzzle[row][col]
            puzzle[row][col] = None
            metrics.attempts += 1
            metrics.solution_counts += 1

            if count_solutions(to_solving_rows(puzzle)) == 1:
                clues -= 1
                failures = 0
            else:
                puzzle[row][col] = digit
                metrics.rejected += 1
                failures += 1

        if clues > target:
            logger.info(
                f"Clue target {target} not reached for {difficulty}: "
                f"stopped at {clues} after {metrics.attempts} attempts"
            )
        else:
            logger.debug(f"Carved {difficulty} puzzle to {clues} clues in {metrics.attempts} attempts")
