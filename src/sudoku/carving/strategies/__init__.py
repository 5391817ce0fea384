"""
Carving Strategies Package - Concrete carving policies.

Import this module to register all built-in carvers.
"""

from .unique import UniqueSolutionCarver
from .fixed_removal import FixedRemovalCarver

__all__ = [
    "UniqueSolutionCarver",
    "FixedRemovalCarver",
]
