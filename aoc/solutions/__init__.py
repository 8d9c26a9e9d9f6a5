"""
Solutions Package - Puzzle solutions for each day, selectable by day number.

Import this package to register all built-in solutions.

Usage:
    from aoc.solutions import run_day

    run_day(1, handler, text, timed=True)
"""

from .factory import (
    DaySolutionError,
    DayNotImplementedError,
    register_solution,
    create_solution,
    get_solution_days,
    get_solution_info,
    run_day,
)

# Import days to register them
from .day00 import Day00
from .day01 import Day01
from .day02 import Day02
from .day03 import Day03
from .day04 import Day04
from .day05 import Day05
from .day06 import Day06
from .day07 import Day07
from .day08 import Day08
from .day09 import Day09
from .day10 import Day10
from .day11 import Day11

__all__ = [
    # Registry
    "DaySolutionError",
    "DayNotImplementedError",
    "register_solution",
    "create_solution",
    "get_solution_days",
    "get_solution_info",
    "run_day",
    # Days
    "Day00",
    "Day01",
    "Day02",
    "Day03",
    "Day04",
    "Day05",
    "Day06",
    "Day07",
    "Day08",
    "Day09",
    "Day10",
    "Day11",
]
