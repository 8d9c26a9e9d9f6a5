"""
Input Files Module - Locates and reads puzzle input files.

Inputs default to inputs/dayNN.txt relative to the working directory.
"""

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_INPUTS_DIR = "inputs"


class InputFileError(Exception):
    """Raised when a puzzle input file cannot be read."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


def default_input_path(day: int, inputs_dir: Union[str, Path] = DEFAULT_INPUTS_DIR) -> Path:
    """Get the default input file path for a day, e.g. inputs/day01.txt."""
    return Path(inputs_dir) / f"day{day:02}.txt"


def read_input(
    day: int,
    input_file: Optional[Union[str, Path]] = None,
    inputs_dir: Union[str, Path] = DEFAULT_INPUTS_DIR,
) -> str:
    """
    Read the input for a day.

    Args:
        day: Puzzle day number
        input_file: Alternative file to read instead of the default
        inputs_dir: Directory holding default input files

    Returns:
        Input text

    Raises:
        InputFileError: If the file cannot be read
    """
    if input_file is not None:
        path = Path(input_file)
        message = f"could not read input file at: {path}"
    else:
        path = default_input_path(day, inputs_dir)
        message = (
            f"default input file missing: {path}\n\n"
            "please create the file or provide the --input argument"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise InputFileError(path, message) from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text
