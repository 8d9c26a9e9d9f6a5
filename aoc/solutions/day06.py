"""
Day 6 - Trash Compactor.

Input is a math worksheet of problems laid out in columns. Each problem is a
group of numbers with an operation, '+' or '*', on the bottom row.

Part 1: numbers are whitespace separated; each column of cells is a
problem. Sum the problem results.
Part 2: character columns matter. Each character column is one number read
top to bottom, and an all-blank column separates problems. The operation
sits under a problem's leftmost column. Sum the problem results.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

from ..framework import (
    EmptyInput,
    EmptyLine,
    LineLength,
    ParseChar,
    ParseError,
    ParseString,
    Part2Solution,
    parse_grid,
    parse_int,
    split_lines,
)
from .factory import register_solution


class Operation(Enum):
    """Operation applied to a problem's numbers."""
    ADD = "+"
    MULTIPLY = "*"

    @classmethod
    def from_cell(cls, cell: str) -> "Operation":
        """
        Parse a whitespace-separated cell.

        Raises:
            ParseString: If the cell is not an operation
        """
        try:
            return cls(cell)
        except ValueError:
            raise ParseString(cell) from None

    @classmethod
    def from_char(cls, char: str) -> "Operation":
        """
        Parse a single character.

        Raises:
            ParseChar: If the character is not an operation
        """
        try:
            return cls(char)
        except ValueError:
            raise ParseChar(char) from None


@dataclass
class Problem:
    """A group of numbers and the operation combining them."""
    numbers: List[int]
    operation: Operation

    def calculate(self) -> int:
        if self.operation is Operation.ADD:
            return sum(self.numbers)
        return math.prod(self.numbers)


def digits_to_number(chars) -> int:
    """
    Read the digits of a character column as a number, skipping blanks.

    Raises:
        ParseChar: If a non-blank character is not a digit
    """
    number = 0
    for char in chars:
        if char.isspace():
            continue
        if not char.isdigit():
            raise ParseChar(char)
        number = number * 10 + int(char)
    return number


@register_solution
class Day06(Part2Solution):
    """Solve a column-oriented math worksheet."""
    day = 6
    name = "Day 6: Trash Compactor"

    def part1(self, text: str) -> int:
        lines = split_lines(text)
        if not lines:
            raise EmptyInput()

        cols = len(lines[0].split())
        rows: List[List[str]] = []
        for index, line in enumerate(lines):
            cells = line.split()
            if not cells:
                raise ParseError.invalid_line_from_zero_index(index, EmptyLine())
            if len(cells) != cols:
                raise ParseError.invalid_line_from_zero_index(
                    index, LineLength(expected=cols, actual=len(cells))
                )
            rows.append(cells)

        worksheet = np.array(rows, dtype=object)

        problems = []
        for column in worksheet.T:
            # last cell is the operation, the rest are numbers
            numbers = [parse_int(cell) for cell in column[:-1]]
            problems.append(Problem(numbers, Operation.from_cell(column[-1])))

        return sum(problem.calculate() for problem in problems)

    def part2(self, text: str) -> int:
        worksheet = parse_grid(text, lambda point, char: char)

        problems: List[Problem] = []
        numbers: List[int] = []
        operation: Optional[Operation] = None
        for column in worksheet.T:
            if all(char.isspace() for char in column):
                # blank column ends a problem
                if operation is None:
                    raise ValueError("operation not resolved for problem")
                problems.append(Problem(numbers, operation))
                numbers = []
                operation = None
                continue

            if not column[-1].isspace():
                # first column of a new problem
                if operation is not None:
                    raise ValueError("still tracking a previous operation")
                operation = Operation.from_char(column[-1])

            numbers.append(digits_to_number(column[:-1]))

        # last problem has no blank column after it
        if operation is not None:
            problems.append(Problem(numbers, operation))

        return sum(problem.calculate() for problem in problems)
