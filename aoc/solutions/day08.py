"""
Day 8 - Playground.

Input is the 3D positions of junction boxes, one X,Y,Z per line. Connecting
junctions by straight-line distance forms circuits.

Part 1: connect the 1000 closest pairs, then multiply the sizes of the 3
largest circuits.
Part 2: keep connecting closest pairs until every junction is in a single
circuit. Multiply the X coordinates of the last pair connected.
"""

import logging
from typing import List, Tuple

import numpy as np

from ..framework import EmptyInput, NoDelimiter, ParsedPart2Solution, parse_float, parse_lines
from .factory import register_solution

logger = logging.getLogger(__name__)


PART1_CONNECTIONS = 1000
PART1_LARGEST = 3


def parse_junction(line: str) -> Tuple[float, float, float]:
    parts = line.split(",", 2)
    if len(parts) < 3:
        raise NoDelimiter(",")
    x, y, z = (parse_float(part) for part in parts)
    return x, y, z


class Circuits:
    """
    Disjoint sets of connected junctions, by junction index.

    Every junction starts as its own circuit of size 1.
    """

    def __init__(self, count: int):
        self._parent = list(range(count))
        self._size = [1] * count
        self.circuit_count = count

    def _find(self, index: int) -> int:
        root = index
        while self._parent[root] != root:
            root = self._parent[root]
        # compress the path walked
        while self._parent[index] != root:
            self._parent[index], index = root, self._parent[index]
        return root

    def connect(self, a: int, b: int) -> None:
        """Connect two junctions, merging their circuits."""
        root_a, root_b = self._find(a), self._find(b)
        if root_a == root_b:
            return
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self.circuit_count -= 1

    def sizes(self) -> List[int]:
        """Circuit sizes, largest first."""
        return sorted(
            (self._size[i] for i in range(len(self._parent)) if self._find(i) == i),
            reverse=True,
        )


def sorted_pairs(junctions: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Get every pair of junctions ordered by distance, closest first.

    Args:
        junctions: Array of shape (n, 3)

    Returns:
        (first, second) junction index arrays of the ordered pairs
    """
    first, second = np.triu_indices(len(junctions), k=1)
    distances = np.linalg.norm(junctions[first] - junctions[second], axis=1)
    order = np.argsort(distances, kind="stable")
    return first[order], second[order]


def largest_circuit_sizes(junctions: np.ndarray, connections: int, count: int) -> List[int]:
    """
    Connect the closest pairs and get the largest resulting circuit sizes.

    Args:
        junctions: Array of shape (n, 3)
        connections: Number of closest pairs to connect
        count: Number of sizes to return

    Returns:
        Up to count circuit sizes, largest first
    """
    first, second = sorted_pairs(junctions)
    circuits = Circuits(len(junctions))
    for a, b in zip(first[:connections], second[:connections]):
        circuits.connect(int(a), int(b))
    return circuits.sizes()[:count]


@register_solution
class Day08(ParsedPart2Solution):
    """Connect junction boxes into circuits by distance."""
    day = 8
    name = "Day 8: Playground"

    def parse(self, text: str) -> np.ndarray:
        junctions = list(parse_lines(text, parse_junction))
        if not junctions:
            raise EmptyInput()
        return np.array(junctions, dtype=np.float64)

    def part1(self, junctions: np.ndarray) -> int:
        return int(np.prod(largest_circuit_sizes(junctions, PART1_CONNECTIONS, PART1_LARGEST)))

    def part2(self, junctions: np.ndarray) -> int:
        first, second = sorted_pairs(junctions)
        circuits = Circuits(len(junctions))
        for connected, (a, b) in enumerate(zip(first, second), start=1):
            circuits.connect(int(a), int(b))
            if circuits.circuit_count == 1:
                logger.debug(f"Single circuit formed after {connected} connections")
                return int(junctions[a, 0] * junctions[b, 0])
        raise ValueError("failed to form single large circuit")
