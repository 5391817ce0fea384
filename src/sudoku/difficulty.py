"""
Difficulty Module - Clue-count targets per difficulty level.
"""

from enum import Enum
from typing import Union


class Difficulty(Enum):
    """
    Puzzle difficulty.

    Each level carries two numbers, one per carving policy:
        target_clues: Givens the unique-solution carver aims to keep
        fixed_removals: Cells the fixed-removal carver blanks
    """
    EASY = ("easy", 41, 40)
    MEDIUM = ("medium", 31, 50)
    HARD = ("hard", 26, 60)

    def __init__(self, label: str, target_clues: int, fixed_removals: int):
        self.label = label
        self.target_clues = target_clues
        self.fixed_removals = fixed_removals

    @classmethod
    def parse(cls, value: Union[str, 'Difficulty']) -> 'Difficulty':
        """
        Resolve a difficulty from its name (case-insensitive) or enum member.

        Raises:
            ValueError: If the name is unknown
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for level in cls:
            if level.label == name:
                return level
        available = ", ".join(level.label for level in cls)
        raise ValueError(f"Unknown difficulty: {value}. Available: {available}")

    @classmethod
    def names(cls):
        return [level.label for level in cls]

    def __str__(self) -> str:
        return self.label
