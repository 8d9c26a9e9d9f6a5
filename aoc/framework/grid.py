"""
Grid Module - Point-based access to 2D numpy grids produced by parse_grid.

Grids are indexed [row, col]; points use x for the column and y for the row
with the origin at the top-left, matching how puzzle diagrams are read.
"""

from typing import Any, Iterator, NamedTuple, Optional, Tuple

import numpy as np


class GridPoint(NamedTuple):
    """
    A position in a grid.

    Attributes:
        x: Column index
        y: Row index
    """
    x: int
    y: int

    def __add__(self, other: Tuple[int, int]) -> "GridPoint":
        """Offset this point by another point or (dx, dy) pair."""
        return GridPoint(self.x + other[0], self.y + other[1])


# Cardinal and diagonal neighbor offsets, clockwise from east
NEIGHBOR_OFFSETS: Tuple[GridPoint, ...] = (
    GridPoint(1, 0),
    GridPoint(1, 1),
    GridPoint(0, 1),
    GridPoint(-1, 1),
    GridPoint(-1, 0),
    GridPoint(-1, -1),
    GridPoint(0, -1),
    GridPoint(1, -1),
)


def contains_point(grid: np.ndarray, point: GridPoint) -> bool:
    """
    Check the grid can be indexed by a point.

    Negative coordinates are outside the grid (no numpy wraparound).
    """
    rows, cols = grid.shape
    return 0 <= point.x < cols and 0 <= point.y < rows


def get_at_point(grid: np.ndarray, point: GridPoint) -> Optional[Any]:
    """
    Get the value at a point.

    Args:
        grid: 2D grid
        point: Position to read

    Returns:
        Cell value, or None if the point is outside the grid
    """
    if contains_point(grid, point):
        return grid[point.y, point.x]
    return None


def set_at_point(grid: np.ndarray, point: GridPoint, value: Any) -> None:
    """
    Set the value at a point.

    Raises:
        IndexError: If the point is outside the grid
    """
    if not contains_point(grid, point):
        raise IndexError(f"point outside grid of shape {grid.shape}: {point}")
    grid[point.y, point.x] = value


def iter_points(grid: np.ndarray) -> Iterator[GridPoint]:
    """Iterate every point of the grid in row-major order."""
    rows, cols = grid.shape
    for y in range(rows):
        for x in range(cols):
            yield GridPoint(x, y)
