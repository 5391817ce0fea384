"""
Carver Factory Module - Registry and factory for carving policies.
"""

from typing import Any, Dict, List, Type

from .base import CarvingStrategy


# Global registry of carvers
_CARVERS: Dict[str, Type[CarvingStrategy]] = {}

DEFAULT_CARVER = "unique"


def register_carver(cls: Type[CarvingStrategy]) -> Type[CarvingStrategy]:
    """
    Decorator to register a carver class.

    Usage:
        @register_carver
        class MyCarver(CarvingStrategy):
            name = "my_carver"
            ...
    """
    _CARVERS[cls.name] = cls
    return cls


def create_carver(name: str, **kwargs: Any) -> CarvingStrategy:
    """
    Create a carver instance by name.

    Args:
        name: Carver name (e.g., "unique", "fixed")
        **kwargs: Additional arguments passed to the carver constructor

    Returns:
        Carver instance

    Raises:
        ValueError: If carver name not found
    """
    if name not in _CARVERS:
        available = ", ".join(_CARVERS.keys())
        raise ValueError(f"Unknown carver: {name}. Available: {available}")
    return _CARVERS[name](**kwargs)


def get_carver_names() -> List[str]:
    """List registered carver names."""
    return list(_CARVERS.keys())


def get_carver_info() -> List[Dict[str, Any]]:
    """
    Get metadata for all registered carvers.

    Returns:
        List of dicts with 'name', 'description' and 'guarantees_unique'
        keys, the last telling whether puzzles from that carver always
        have exactly one solution
    """
    return [
        {
            "name": cls.name,
            "description": cls.description,
            "guarantees_unique": cls.guarantees_unique,
        }
        for cls in _CARVERS.values()
    ]


def get_default_carver_name() -> str:
    """
    Get the default carver name.

    Returns:
        "unique" if available, else the first registered carver
    """
    if DEFAULT_CARVER in _CARVERS:
        return DEFAULT_CARVER
    if _CARVERS:
        return next(iter(_CARVERS.keys()))
    return ""
