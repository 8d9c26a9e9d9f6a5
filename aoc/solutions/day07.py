"""
Day 7 - Laboratories.

Input is a diagram of a tachyon manifold: 'S' marks where the beam enters,
'^' a splitter and '.' open space. Beams travel down; a splitter stops a
beam and starts new ones to its left and right.

Part 1: count how many times beams split. Beams landing in the same column
merge into one.
Part 2: a single particle takes either side at each splitter. Count the
distinct paths it can take.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Optional, Set

import numpy as np

from ..framework import (
    GridPoint,
    MissingValue,
    ParseChar,
    ParsedPart2Solution,
    parse_grid,
)
from .factory import register_solution


START = "S"
SPLITTER = "^"
OPEN = "."


@dataclass
class Manifold:
    """Grid of splitters (True) and the column the beam enters at."""
    splitters: np.ndarray
    start_col: int


@register_solution
class Day07(ParsedPart2Solution):
    """Follow beams through a grid of splitters."""
    day = 7
    name = "Day 7: Laboratories"

    def parse(self, text: str) -> Manifold:
        start_col: Optional[int] = None

        def parse_cell(point: GridPoint, char: str) -> bool:
            nonlocal start_col
            if char == START:
                start_col = point.x
                return False
            if char == SPLITTER:
                return True
            if char == OPEN:
                return False
            raise ParseChar(char)

        splitters = parse_grid(text, parse_cell, dtype=bool)
        if start_col is None:
            raise MissingValue("beam start 'S'")
        return Manifold(splitters, start_col)

    def part1(self, manifold: Manifold) -> int:
        beams: Set[int] = {manifold.start_col}
        splits = 0
        for row in manifold.splitters:
            for col in list(beams):
                if 0 <= col < len(row) and row[col]:
                    beams.discard(col)
                    beams.add(col - 1)
                    beams.add(col + 1)
                    splits += 1
        return splits

    def part2(self, manifold: Manifold) -> int:
        # particle paths reaching each column so far
        particles: Dict[int, int] = defaultdict(int)
        particles[manifold.start_col] = 1
        for row in manifold.splitters:
            for col, count in list(particles.items()):
                if count and 0 <= col < len(row) and row[col]:
                    particles[col] = 0
                    particles[col - 1] += count
                    particles[col + 1] += count
        return sum(particles.values())
