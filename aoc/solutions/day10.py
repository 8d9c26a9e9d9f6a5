"""
Day 10 - Factory.

Input is one machine per line: an indicator light diagram in square brackets
('.' off, '#' on), button wiring schematics in parentheses listing the light
indexes each button toggles, then joltage requirements in curly braces.

    [.##.] (3) (1,3) (2) (2,3) (0,2) (0,1) {3,5,4,7}

Part 1: lights start off. Find the fewest button presses reaching each
machine's light diagram and sum them.
Part 2: buttons raise joltage counters instead. Not solved yet, so the run
reports it as not implemented.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import List, Optional

from ..framework import (
    EmptyInput,
    MissingValue,
    ParsedPart2Solution,
    ParseString,
    parse_int,
    parse_lines,
)
from .factory import register_solution


def strip_braces(token: str, opening: str, closing: str) -> str:
    """
    Strip a pair of braces wrapping a token.

    Raises:
        ParseString: If the token is not wrapped in the braces
    """
    if len(token) < 2 or not token.startswith(opening) or not token.endswith(closing):
        raise ParseString(token)
    return token[1:-1]


def parse_numbers(text: str) -> List[int]:
    return [parse_int(number) for number in text.split(",")]


@dataclass
class Machine:
    """
    Attributes:
        light_goal: Bitmask of lights to turn on, bit i for light i
        buttons: Bitmask of lights toggled per button
        joltage_requirements: Joltage counter targets
    """
    light_goal: int
    buttons: List[int]
    joltage_requirements: List[int]

    @classmethod
    def from_line(cls, line: str) -> "Machine":
        tokens = line.split()
        if len(tokens) < 3:
            raise MissingValue("light diagram, button schematics and joltage requirements")

        diagram = strip_braces(tokens[0], "[", "]")
        light_goal = sum(1 << index for index, char in enumerate(diagram) if char == "#")

        buttons = []
        for token in tokens[1:-1]:
            mask = 0
            for index in parse_numbers(strip_braces(token, "(", ")")):
                mask |= 1 << index
            buttons.append(mask)

        joltage_requirements = parse_numbers(strip_braces(tokens[-1], "{", "}"))
        return cls(light_goal, buttons, joltage_requirements)

    def fewest_presses_for_lights(self) -> Optional[int]:
        """
        Find the fewest button presses toggling the lights to the goal.

        Pressing a button twice cancels out, so each button is pressed at
        most once and the search is over subsets of buttons by size.

        Returns:
            Number of presses, or None if no combination reaches the goal
        """
        for presses in range(len(self.buttons) + 1):
            for pressed in combinations(self.buttons, presses):
                lights = 0
                for mask in pressed:
                    lights ^= mask
                if lights == self.light_goal:
                    return presses
        return None


@register_solution
class Day10(ParsedPart2Solution):
    """Configure factory machines with button presses."""
    day = 10
    name = "Day 10: Factory"

    def parse(self, text: str) -> List[Machine]:
        machines = list(parse_lines(text, Machine.from_line))
        if not machines:
            raise EmptyInput()
        return machines

    def part1(self, machines: List[Machine]) -> int:
        total = 0
        for index, machine in enumerate(machines):
            presses = machine.fewest_presses_for_lights()
            if presses is None:
                raise ValueError(f"no button presses reach the light goal of machine {index + 1}")
            total += presses
        return total

    # TODO: part2 needs an integer linear solve of presses per button against
    # the joltage requirements
