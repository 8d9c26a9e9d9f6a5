"""
Day 3 - Lobby.

Input is lines of digits 1-9, each line a bank of battery joltage ratings.

Part 1: turning on exactly 2 batteries per bank, in order, forms a number
from their digits. Sum the largest possible number of each bank.
Part 2: same with 12 batteries per bank.
"""

from typing import List

from ..framework import EmptyInput, EmptyLine, ParsedPart2Solution, parse_int, parse_lines
from .factory import register_solution


# A bank of battery ratings, one digit each
Bank = List[int]


def parse_bank(line: str) -> Bank:
    if not line:
        raise EmptyLine()
    return [parse_int(char) for char in line]


def max_joltage(bank: Bank, batteries: int) -> int:
    """
    Find the largest number formed by turning on batteries in a bank.

    Each digit is picked greedily as the largest rating that still leaves
    enough batteries after it, taking the earliest one on ties.

    Args:
        bank: Battery ratings in order
        batteries: Number of batteries to turn on

    Returns:
        Largest possible joltage

    Raises:
        ValueError: If batteries is zero or the bank holds fewer batteries
    """
    if batteries <= 0:
        raise ValueError("can't have a max joltage with zero batteries on")
    if len(bank) < batteries:
        raise ValueError(
            f"can't calculate max joltage, expected {batteries} batteries "
            f"in bank but got {len(bank)}"
        )

    joltage = 0
    start = 0
    for remaining in range(batteries, 0, -1):
        window = bank[start:len(bank) - remaining + 1]
        best = max(window)
        # index() finds the earliest maximum
        start += window.index(best) + 1
        joltage = joltage * 10 + best
    return joltage


@register_solution
class Day03(ParsedPart2Solution):
    """Maximize joltage from battery banks."""
    day = 3
    name = "Day 3: Lobby"

    def parse(self, text: str) -> List[Bank]:
        banks = list(parse_lines(text, parse_bank))
        if not banks:
            raise EmptyInput()
        return banks

    def part1(self, banks: List[Bank]) -> int:
        return sum(max_joltage(bank, 2) for bank in banks)

    def part2(self, banks: List[Bank]) -> int:
        return sum(max_joltage(bank, 12) for bank in banks)
