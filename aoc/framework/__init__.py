"""
Framework Package - Shared machinery for running Advent of Code solutions.

Public API:
    - Solution, Part1Solution, Part2Solution: solutions parsing raw input per part
    - ParsedPart1Solution, ParsedPart2Solution: solutions parsing once for both parts
    - OutputHandler, SolutionPart: observer interface for run events
    - ParseError and its variants: structured, positioned parsing errors
    - parse_lines(), parse_grid() (+ _with_offset forms), split_chunks()
    - GridPoint and grid access helpers
    - measure(): time a single call

Usage:
    from aoc.framework import ParsedPart2Solution, parse_lines, parse_int

    class MySolution(ParsedPart2Solution):
        day = 99
        name = "My Solution"

        def parse(self, text):
            return list(parse_lines(text, parse_int))

        def part1(self, numbers):
            return sum(numbers)

        def part2(self, numbers):
            return max(numbers)

    MySolution().run(handler, "10\\n20\\n30\\n", timed=True)
"""

# Error model
from .errors import (
    ParseError,
    EmptyInput,
    EmptyLine,
    LineLength,
    ParseChar,
    ParseInt,
    ParseFloat,
    ParseString,
    NoDelimiter,
    NoChunkDelimiter,
    EmptyChunk,
    MissingValue,
    InvalidLine,
    parse_int,
    parse_float,
)

# Grids and parsing
from .grid import (
    GridPoint,
    NEIGHBOR_OFFSETS,
    contains_point,
    get_at_point,
    set_at_point,
    iter_points,
)
from .parsing import (
    split_lines,
    split_chunks,
    parse_lines,
    parse_lines_with_offset,
    parse_grid,
    parse_grid_with_offset,
)

# Running solutions
from .output import OutputHandler, SolutionPart
from .timing import measure
from .solution import (
    Solution,
    Part1Solution,
    Part2Solution,
    ParsedPart1Solution,
    ParsedPart2Solution,
)

__all__ = [
    # Errors
    "ParseError",
    "EmptyInput",
    "EmptyLine",
    "LineLength",
    "ParseChar",
    "ParseInt",
    "ParseFloat",
    "ParseString",
    "NoDelimiter",
    "NoChunkDelimiter",
    "EmptyChunk",
    "MissingValue",
    "InvalidLine",
    "parse_int",
    "parse_float",
    # Grids
    "GridPoint",
    "NEIGHBOR_OFFSETS",
    "contains_point",
    "get_at_point",
    "set_at_point",
    "iter_points",
    # Parsing
    "split_lines",
    "split_chunks",
    "parse_lines",
    "parse_lines_with_offset",
    "parse_grid",
    "parse_grid_with_offset",
    # Running
    "OutputHandler",
    "SolutionPart",
    "measure",
    "Solution",
    "Part1Solution",
    "Part2Solution",
    "ParsedPart1Solution",
    "ParsedPart2Solution",
]
