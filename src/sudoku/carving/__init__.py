"""
Carving Package - Pluggable policies for turning a solved grid into a puzzle.

The default policy ("unique") only accepts removals that keep the
solution unique. The legacy "fixed" policy blanks a fixed cell count
and must be requested by name.
"""

import random
from typing import Optional, Sequence, Union

from .base import CarvingStrategy
from .factory import (
    create_carver,
    get_carver_names,
    get_carver_info,
    get_default_carver_name,
    register_carver,
)
from ..difficulty import Difficulty
from ..grid import PuzzleRows

# Import strategies to register them
from . import strategies


def carve(solved_grid: Sequence[Sequence[int]],
          difficulty: Union[str, Difficulty],
          rng: Optional[random.Random] = None) -> PuzzleRows:
    """
    Carve a puzzle from a solved grid with the default carver.

    Args:
        solved_grid: Fully filled, rule-valid grid
        difficulty: "easy", "medium", "hard" or a Difficulty
        rng: Random source for the removal order

    Returns:
        Puzzle grid with None for blanks
    """
    carver = create_carver(get_default_carver_name(), rng=rng)
    puzzle, _ = carver.carve(solved_grid, Difficulty.parse(difficulty))
    return puzzle


__all__ = [
    "CarvingStrategy",
    "carve",
    "create_carver",
    "get_carver_names",
    "get_carver_info",
    "get_default_carver_name",
    "register_carver",
]
