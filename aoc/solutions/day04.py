"""
Day 4 - Printing Department.

Input is a grid of paper rolls: '@' for a roll, '.' for empty space.

Part 1: a forklift can reach a roll with fewer than 4 rolls in the 8
adjacent positions. Count the reachable rolls.
Part 2: removing reachable rolls can expose more. Keep removing until none
are reachable and count every removed roll.
"""

from typing import List

import numpy as np

from ..framework import (
    NEIGHBOR_OFFSETS,
    GridPoint,
    ParseChar,
    ParsedPart2Solution,
    get_at_point,
    iter_points,
    parse_grid,
    set_at_point,
)
from .factory import register_solution


ROLL = "@"
EMPTY = "."
# A roll is reachable with fewer neighboring rolls than this
MAX_NEIGHBORS = 4


def parse_cell(point: GridPoint, char: str) -> bool:
    """Parse a cell into True for a roll, False for empty space."""
    if char == ROLL:
        return True
    if char == EMPTY:
        return False
    raise ParseChar(char)


def count_adjacent_rolls(grid: np.ndarray, point: GridPoint) -> int:
    """Count rolls in the 8 positions around a point."""
    return sum(
        1 for offset in NEIGHBOR_OFFSETS
        if get_at_point(grid, point + offset)
    )


def is_accessible_roll(grid: np.ndarray, point: GridPoint) -> bool:
    return bool(get_at_point(grid, point)) and count_adjacent_rolls(grid, point) < MAX_NEIGHBORS


def accessible_rolls(grid: np.ndarray) -> List[GridPoint]:
    return [point for point in iter_points(grid) if is_accessible_roll(grid, point)]


@register_solution
class Day04(ParsedPart2Solution):
    """Find paper rolls a forklift can reach."""
    day = 4
    name = "Day 4: Printing Department"

    def parse(self, text: str) -> np.ndarray:
        return parse_grid(text, parse_cell, dtype=bool)

    def part1(self, grid: np.ndarray) -> int:
        return len(accessible_rolls(grid))

    def part2(self, grid: np.ndarray) -> int:
        grid = grid.copy()
        removed = 0
        while True:
            points = accessible_rolls(grid)
            if not points:
                break
            removed += len(points)
            for point in points:
                set_at_point(grid, point, False)
        return removed
