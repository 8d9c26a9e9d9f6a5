"""
Day 0 - Example solution.

Parses a number per line, then counts the numbers for part 1 and sums them
for part 2.
"""

from typing import List

from ..framework import EmptyInput, ParsedPart2Solution, parse_int, parse_lines
from .factory import register_solution


@register_solution
class Day00(ParsedPart2Solution):
    """Example of a solution parsing once for both parts."""
    day = 0
    name = "Day 0: Example Solution"

    def parse(self, text: str) -> List[int]:
        # ignore trailing whitespace
        numbers = list(parse_lines(text.rstrip(), parse_int))
        if not numbers:
            raise EmptyInput()
        return numbers

    def part1(self, numbers: List[int]) -> int:
        return len(numbers)

    def part2(self, numbers: List[int]) -> int:
        return sum(numbers)
