"""
Day 5 - Cafeteria.

Input is an inventory in two blank-line separated chunks: inclusive fresh
ingredient ID ranges (e.g. 3-5), then available ingredient IDs. Ranges may
overlap.

Part 1: count the available IDs that are fresh.
Part 2: count every ID the ranges consider fresh.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..framework import (
    EmptyChunk,
    NoDelimiter,
    ParsedPart2Solution,
    parse_int,
    parse_lines_with_offset,
    split_chunks,
)
from .factory import register_solution


# Inclusive range of ingredient IDs
IdRange = Tuple[int, int]


@dataclass
class Inventory:
    """Fresh ID ranges and available ingredient IDs."""
    fresh_ranges: List[IdRange]
    available_ids: List[int]


def parse_range(line: str) -> IdRange:
    if "-" not in line:
        raise NoDelimiter("-")
    start, end = line.split("-", 1)
    return parse_int(start), parse_int(end)


def collapse_ranges(ranges: List[IdRange]) -> List[IdRange]:
    """
    Merge overlapping ranges.

    Args:
        ranges: Inclusive ranges in any order

    Returns:
        Disjoint ranges sorted by start
    """
    collapsed: List[IdRange] = []
    for start, end in sorted(ranges):
        if collapsed and start <= collapsed[-1][1]:
            last_start, last_end = collapsed[-1]
            collapsed[-1] = (last_start, max(last_end, end))
        else:
            collapsed.append((start, end))
    return collapsed


@register_solution
class Day05(ParsedPart2Solution):
    """Check ingredient freshness against ID ranges."""
    day = 5
    name = "Day 5: Cafeteria"

    def parse(self, text: str) -> Inventory:
        chunks = split_chunks(text)
        (ranges_offset, ranges_text), (ids_offset, ids_text) = chunks[0], chunks[1]

        if not ranges_text:
            raise EmptyChunk(1, "fresh ingredient ranges")
        if not ids_text:
            raise EmptyChunk(2, "available ingredient IDs")

        fresh_ranges = list(parse_lines_with_offset(ranges_text, ranges_offset, parse_range))
        available_ids = list(parse_lines_with_offset(ids_text, ids_offset, parse_int))
        return Inventory(fresh_ranges, available_ids)

    def part1(self, inventory: Inventory) -> int:
        ranges = collapse_ranges(inventory.fresh_ranges)
        return sum(
            1 for id_ in inventory.available_ids
            if any(start <= id_ <= end for start, end in ranges)
        )

    def part2(self, inventory: Inventory) -> int:
        return sum(end - start + 1 for start, end in collapse_ranges(inventory.fresh_ranges))
