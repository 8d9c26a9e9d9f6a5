"""
Solution Factory Module - Registry of solutions by puzzle day.
"""

import logging
from typing import Any, Dict, List, Type

from ..framework import OutputHandler, Solution

logger = logging.getLogger(__name__)


# Global registry of solutions
_SOLUTIONS: Dict[int, Type[Solution]] = {}


class DaySolutionError(Exception):
    """Base exception for errors selecting a day's solution."""
    pass


class DayNotImplementedError(DaySolutionError):
    """Raised when no solution is registered for the requested day."""

    def __init__(self, day: int):
        self.day = day
        super().__init__(f"solution for day {day} not yet implemented")


def register_solution(cls: Type[Solution]) -> Type[Solution]:
    """
    Decorator to register a solution class under its day.

    Usage:
        @register_solution
        class Day01(ParsedPart2Solution):
            day = 1
            ...

    Args:
        cls: Solution class to register

    Returns:
        The same class (for decorator chaining)

    Raises:
        ValueError: If another class is already registered for the day
    """
    existing = _SOLUTIONS.get(cls.day)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Day {cls.day} already registered to {existing.__name__}, "
            f"cannot register {cls.__name__}"
        )
    _SOLUTIONS[cls.day] = cls
    logger.debug(f"Registered solution for day {cls.day}: {cls.name}")
    return cls


def create_solution(day: int) -> Solution:
    """
    Create a solution instance by day.

    Args:
        day: Puzzle day number

    Returns:
        Solution instance

    Raises:
        DayNotImplementedError: If no solution is registered for the day
    """
    if day not in _SOLUTIONS:
        raise DayNotImplementedError(day)
    return _SOLUTIONS[day]()


def get_solution_days() -> List[int]:
    """
    Get the days that have a registered solution.

    Returns:
        Sorted list of day numbers
    """
    return sorted(_SOLUTIONS.keys())


def get_solution_info() -> List[Dict[str, Any]]:
    """
    Get day and name for all registered solutions.

    Returns:
        List of dicts with 'day' and 'name' keys, ordered by day
    """
    return [
        {"day": day, "name": _SOLUTIONS[day].name}
        for day in get_solution_days()
    ]


def run_day(day: int, handler: OutputHandler, text: str, timed: bool = False) -> None:
    """
    Run the solution registered for a day.

    Args:
        day: Puzzle day number
        handler: Receives progress and result events
        text: Raw puzzle input
        timed: Measure parsing and parts

    Raises:
        DayNotImplementedError: If no solution is registered for the day
        ParseError: If the solution fails to parse the input
    """
    solution = create_solution(day)
    logger.debug(f"Running day {day} (timed={timed})")
    solution.run(handler, text, timed)
