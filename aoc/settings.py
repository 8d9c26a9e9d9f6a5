"""
Settings Module for the Advent of Code runner

Provides defaults for command line options from a JSON file.
Settings are read from config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Union

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "inputs_dir": "inputs",
    "timed": False,
    "min_timing_ms": 0,
}


def load_settings(path: Union[str, Path] = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file to read

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError("settings must be a JSON object")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (ValueError, OSError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()
