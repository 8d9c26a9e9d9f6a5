"""
Day 9 - Movie Theater.

Input is the positions of red floor tiles, one X,Y per line. Tiles are 1x1,
so a rectangle between two corner tiles includes both of them.

Part 1: find the largest rectangle with red tiles at opposite corners.
Part 2: consecutive red tiles (wrapping from last to first) are joined by
straight lines of green tiles, and the loop they form is filled with green.
Find the largest red-cornered rectangle made only of red or green tiles.
"""

from collections import deque
from itertools import combinations
from typing import Dict, List, Tuple

import numpy as np

from ..framework import EmptyInput, NoDelimiter, ParsedPart2Solution, parse_int, parse_lines
from .factory import register_solution


Tile = Tuple[int, int]


def parse_tile(line: str) -> Tile:
    if "," not in line:
        raise NoDelimiter(",")
    x, y = line.split(",", 1)
    return parse_int(x), parse_int(y)


def area(p: Tile, q: Tile) -> int:
    return (abs(p[0] - q[0]) + 1) * (abs(p[1] - q[1]) + 1)


class CompressedFloor:
    """
    Mask of red and green tiles on a grid compressed to the distinct
    coordinates of the red tiles.

    Attributes:
        filled: Boolean array indexed [row, col], True for red or green tiles
    """

    def __init__(self, tiles: List[Tile]):
        xs = sorted({x for x, _ in tiles})
        ys = sorted({y for _, y in tiles})
        self._col_of: Dict[int, int] = {x: col for col, x in enumerate(xs)}
        self._row_of: Dict[int, int] = {y: row for row, y in enumerate(ys)}
        self.filled = self._fill(tiles, len(ys), len(xs))

    def to_row_col(self, tile: Tile) -> Tuple[int, int]:
        return self._row_of[tile[1]], self._col_of[tile[0]]

    def _fill(self, tiles: List[Tile], rows: int, cols: int) -> np.ndarray:
        border = np.zeros((rows, cols), dtype=bool)
        mapped = [self.to_row_col(tile) for tile in tiles]
        for (start_row, start_col), (end_row, end_col) in zip(mapped, mapped[1:] + mapped[:1]):
            if start_row != end_row and start_col != end_col:
                raise ValueError(
                    f"border is not horizontal or vertical: "
                    f"{(start_row, start_col)} -> {(end_row, end_col)}"
                )
            border[
                min(start_row, end_row):max(start_row, end_row) + 1,
                min(start_col, end_col):max(start_col, end_col) + 1,
            ] = True

        # flood fill the outside, starting from open cells on the edge
        outside = np.zeros_like(border)
        queue = deque()
        edge = [(row, col) for row in range(rows) for col in (0, cols - 1)]
        edge += [(row, col) for col in range(1, cols - 1) for row in (0, rows - 1)]
        for row, col in edge:
            if not border[row, col] and not outside[row, col]:
                outside[row, col] = True
                queue.append((row, col))

        while queue:
            row, col = queue.popleft()
            for n_row, n_col in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
                if (
                    0 <= n_row < rows
                    and 0 <= n_col < cols
                    and not border[n_row, n_col]
                    and not outside[n_row, n_col]
                ):
                    outside[n_row, n_col] = True
                    queue.append((n_row, n_col))

        return ~outside

    def contains_rectangle(self, p: Tile, q: Tile) -> bool:
        """Check every tile of the rectangle between two red tiles is filled."""
        p_row, p_col = self.to_row_col(p)
        q_row, q_col = self.to_row_col(q)
        return bool(
            self.filled[
                min(p_row, q_row):max(p_row, q_row) + 1,
                min(p_col, q_col):max(p_col, q_col) + 1,
            ].all()
        )


@register_solution
class Day09(ParsedPart2Solution):
    """Find the largest rectangle between red floor tiles."""
    day = 9
    name = "Day 9: Movie Theater"

    def parse(self, text: str) -> List[Tile]:
        tiles = list(parse_lines(text, parse_tile))
        if not tiles:
            raise EmptyInput()
        return tiles

    def part1(self, tiles: List[Tile]) -> int:
        return max(area(p, q) for p, q in combinations(tiles, 2))

    def part2(self, tiles: List[Tile]) -> int:
        floor = CompressedFloor(tiles)
        return max(
            area(p, q) for p, q in combinations(tiles, 2)
            if floor.contains_rectangle(p, q)
        )
