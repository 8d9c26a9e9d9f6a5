"""
Day 1 - Secret Entrance.

A safe dial shows 0 to 99 and starts at 50. Input is one rotation per line:
a direction (L decreases, R increases) followed by a distance, e.g. R42. The
dial wraps around at both ends.

Part 1: count how many rotations leave the dial pointing at 0.
Part 2: count every time the dial points at 0, including passing over it
mid-rotation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..framework import (
    EmptyInput,
    EmptyLine,
    ParseChar,
    ParsedPart2Solution,
    parse_int,
    parse_lines,
)
from .factory import register_solution


DIAL_START = 50
# Inclusive maximum of the dial
DIAL_MAX = 99


class Direction(Enum):
    """Direction of a rotation."""
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """
        Parse a direction character.

        Raises:
            ParseChar: If the character is not L or R
        """
        try:
            return cls(char)
        except ValueError:
            raise ParseChar(char) from None


@dataclass(frozen=True)
class Rotation:
    """A single rotation of the dial."""
    direction: Direction
    distance: int

    @classmethod
    def from_line(cls, line: str) -> "Rotation":
        if not line:
            raise EmptyLine()
        return cls(direction=Direction.from_char(line[0]), distance=parse_int(line[1:]))


def rotate_dial(value: int, rotation: Rotation) -> Tuple[int, int]:
    """
    Rotate the dial and count how many times it passed over 0.

    Starting or ending on 0 is not counted as passing over it.

    Args:
        value: Current dial value
        rotation: Rotation to apply

    Returns:
        (new_value, zeros_passed)
    """
    if rotation.direction is Direction.LEFT:
        moved = value - rotation.distance
    else:
        moved = value + rotation.distance

    size = DIAL_MAX + 1
    # floor division and modulo wrap like the dial does for negative values too
    cycles, new_value = divmod(moved, size)
    zeros_passed = abs(cycles)

    # leaving 0 to the left or landing on 0 to the right overcounts by one
    if (rotation.direction is Direction.LEFT and value == 0) or (
        rotation.direction is Direction.RIGHT and new_value == 0
    ):
        zeros_passed -= 1

    return new_value, zeros_passed


@register_solution
class Day01(ParsedPart2Solution):
    """Count when a rotating dial points at 0."""
    day = 1
    name = "Day 1: Secret Entrance"

    def parse(self, text: str) -> List[Rotation]:
        rotations = list(parse_lines(text, Rotation.from_line))
        if not rotations:
            raise EmptyInput()
        return rotations

    def part1(self, rotations: List[Rotation]) -> int:
        dial = DIAL_START
        count = 0
        for rotation in rotations:
            dial, _ = rotate_dial(dial, rotation)
            if dial == 0:
                count += 1
        return count

    def part2(self, rotations: List[Rotation]) -> int:
        dial = DIAL_START
        count = 0
        for rotation in rotations:
            dial, zeros_passed = rotate_dial(dial, rotation)
            count += zeros_passed
            if dial == 0:
                count += 1
        return count
