"""
Fixed-Removal Carver - Blanks a fixed number of random cells.
"""

from ...difficulty import Difficulty
from ...grid import PuzzleRows, SIZE
from ...result import CarveMetrics
from ..base import CarvingStrategy
from ..factory import register_carver


@register_carver
class FixedRemovalCarver(CarvingStrategy):
    """
    Legacy carver that blanks difficulty.fixed_removals random cells.

    Fast, but makes no uniqueness check: the puzzle may admit more
    than one solution. Only used when selected by name.
    """
    name = "fixed"
    description = "Fixed removal (fast) - Blanks a fixed cell count, solution may not be unique"
    guarantees_unique = False

    def _carve(self, puzzle: PuzzleRows, difficulty: Difficulty,
               metrics: CarveMetrics) -> None:
        removals = min(difficulty.fixed_removals, SIZE * SIZE)
        metrics.target_clues = SIZE * SIZE - removals

        for row, col in self.shuffled_positions()[:removals]:
            puzzle[row][col] = None
            metrics.attempts += 1
