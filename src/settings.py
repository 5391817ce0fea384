"""
Settings Module for the Sudoku engine

Provides persistent storage for generation preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any

from src.sudoku import Difficulty, get_carver_names, get_default_carver_name

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "difficulty": "medium",
    "carver": "unique",
    "seed": None,
    "debug_enabled": False,
}


def _sanitize(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Replace generation settings the engine cannot use with their defaults.

    Args:
        settings: Settings merged over defaults

    Returns:
        The same dictionary, with unusable values reset
    """
    try:
        settings["difficulty"] = Difficulty.parse(settings.get("difficulty")).label
    except ValueError:
        logger.warning(f"Unknown difficulty {settings.get('difficulty')!r} in settings, "
                       f"using {DEFAULT_SETTINGS['difficulty']}")
        settings["difficulty"] = DEFAULT_SETTINGS["difficulty"]

    if settings.get("carver") not in get_carver_names():
        logger.warning(f"Unknown carver {settings.get('carver')!r} in settings, "
                       f"using {get_default_carver_name()}")
        settings["carver"] = get_default_carver_name()

    seed = settings.get("seed")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        logger.warning(f"Seed must be an integer, ignoring {seed!r}")
        settings["seed"] = None

    return settings


def load_settings(path: Path = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file to read

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid;
        unknown difficulty or carver names fall back to their defaults.
    """
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        if not isinstance(settings, dict):
            logger.warning(f"Settings file {path} is not a JSON object, using defaults")
            return DEFAULT_SETTINGS.copy()

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        _sanitize(result)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Path = SETTINGS_FILE) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
