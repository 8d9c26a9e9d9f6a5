"""
Day 2 - Gift Shop.

Input is a single line of comma separated product ID ranges, e.g. 11-22.
An ID is invalid if its digits are some block of digits repeated.

Part 1: sum the IDs in the ranges made of a block repeated exactly twice.
Part 2: sum the IDs in the ranges made of a block repeated two or more times.
"""

import logging
from typing import List, Set, Tuple

from ..framework import EmptyInput, NoDelimiter, Part2Solution, parse_int
from .factory import register_solution

logger = logging.getLogger(__name__)


# Inclusive range of product IDs
IdRange = Tuple[int, int]


def parse_ranges(text: str) -> List[IdRange]:
    """
    Parse comma separated ID ranges.

    Raises:
        EmptyInput: If there are no ranges
        NoDelimiter: If a range has no '-'
        ParseInt: If a bound is not an integer
    """
    text = text.strip()
    if not text:
        raise EmptyInput()

    ranges = []
    for item in text.split(","):
        item = item.strip()
        if "-" not in item:
            raise NoDelimiter("-")
        start, end = item.split("-", 1)
        ranges.append((parse_int(start), parse_int(end)))
    return ranges


def repeated_ids(start: int, end: int, min_repeats: int, max_repeats: int) -> Set[int]:
    """
    Find IDs in a range made of a digit block repeated.

    Candidates are generated per digit count and block size instead of
    checking every ID in the range.

    Args:
        start: First ID of the range
        end: Last ID of the range
        min_repeats: Fewest repetitions of the block
        max_repeats: Most repetitions of the block

    Returns:
        Set of matching IDs
    """
    found: Set[int] = set()
    if end < start:
        return found

    for digits in range(len(str(max(start, 1))), len(str(end)) + 1):
        # bounds of the range limited to numbers with this digit count
        low = max(start, 10 ** (digits - 1))
        high = min(end, 10 ** digits - 1)
        if low > high:
            continue

        for repeats in range(min_repeats, min(max_repeats, digits) + 1):
            if digits % repeats:
                continue
            block_size = digits // repeats
            # block * multiplier writes the block out `repeats` times
            multiplier = sum(10 ** (block_size * i) for i in range(repeats))

            first_block = max(-(-low // multiplier), 10 ** (block_size - 1))
            last_block = min(high // multiplier, 10 ** block_size - 1)
            for block in range(first_block, last_block + 1):
                found.add(block * multiplier)

    return found


@register_solution
class Day02(Part2Solution):
    """Sum invalid product IDs made of repeated digit blocks."""
    day = 2
    name = "Day 2: Gift Shop"

    def part1(self, text: str) -> int:
        ranges = parse_ranges(text)
        return sum(sum(repeated_ids(start, end, 2, 2)) for start, end in ranges)

    def part2(self, text: str) -> int:
        ranges = parse_ranges(text)
        total = 0
        for start, end in ranges:
            ids = repeated_ids(start, end, 2, len(str(end)))
            logger.debug(f"Range {start}-{end}: {len(ids)} invalid IDs")
            total += sum(ids)
        return total
