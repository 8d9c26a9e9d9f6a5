"""
Tests for the solution framework

Covers:
1. Parse errors and number parsing
2. Line, grid and chunk parsing with line positions
3. Grid point access
4. Timing
5. Run events emitted by each solution base class

Usage:
    pytest tests/test_framework.py
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aoc.framework import (
    EmptyInput,
    EmptyLine,
    GridPoint,
    InvalidLine,
    LineLength,
    NoChunkDelimiter,
    OutputHandler,
    ParseChar,
    ParsedPart1Solution,
    ParsedPart2Solution,
    ParseError,
    ParseFloat,
    ParseInt,
    Part1Solution,
    Part2Solution,
    SolutionPart,
    contains_point,
    get_at_point,
    iter_points,
    measure,
    parse_float,
    parse_grid,
    parse_grid_with_offset,
    parse_int,
    parse_lines,
    parse_lines_with_offset,
    set_at_point,
    split_chunks,
    split_lines,
)


class RecordingHandler(OutputHandler):
    """Output handler that records every event it receives."""

    def __init__(self):
        self.events = []

    def solution_name(self, name):
        self.events.append(("solution_name", name))

    def parse_start(self):
        self.events.append(("parse_start",))

    def parse_end(self):
        self.events.append(("parse_end",))

    def parse_end_timed(self, duration):
        self.events.append(("parse_end_timed", duration))

    def part_start(self, part):
        self.events.append(("part_start", part))

    def part_output(self, part, output):
        self.events.append(("part_output", part, output))

    def part_output_timed(self, part, output, duration):
        self.events.append(("part_output_timed", part, output, duration))

    def part_not_implemented(self, part):
        self.events.append(("part_not_implemented", part))

    def names(self):
        return [event[0] for event in self.events]


# =============================================================================
# Errors
# =============================================================================

def test_parse_int_accepts_signed_integers():
    assert parse_int("42") == 42
    assert parse_int("-7") == -7
    assert parse_int("+3") == 3


@pytest.mark.parametrize("text", ["", " 1", "1_000", "12x", "1.5", "+"])
def test_parse_int_rejects_non_integers(text):
    with pytest.raises(ParseInt) as exc_info:
        parse_int(text)
    assert exc_info.value.string == text
    assert isinstance(exc_info.value.source, ValueError)
    assert exc_info.value.__cause__ is exc_info.value.source


def test_parse_int_empty_string_message():
    with pytest.raises(ParseInt) as exc_info:
        parse_int("")
    assert "empty string" in str(exc_info.value.source)


def test_parse_float():
    assert parse_float("2.5") == 2.5
    assert parse_float("-3") == -3.0
    assert parse_float("1e3") == 1000.0
    assert parse_float(".5") == 0.5
    with pytest.raises(ParseFloat) as exc_info:
        parse_float("abc")
    assert exc_info.value.string == "abc"


@pytest.mark.parametrize("text", ["", " 1.5", "1.5 ", "1_0", " 1_0", "1.2.3", "e5"])
def test_parse_float_rejects_loose_formats(text):
    with pytest.raises(ParseFloat) as exc_info:
        parse_float(text)
    assert exc_info.value.string == text
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_invalid_line_from_zero_index_is_one_based():
    error = ParseError.invalid_line_from_zero_index(0, EmptyLine())
    assert isinstance(error, InvalidLine)
    assert error.line == 1
    assert isinstance(error.source, EmptyLine)
    assert "line 1" in str(error)


def test_invalid_line_innermost():
    inner = ParseChar("?")
    error = InvalidLine(3, InvalidLine(2, inner))
    assert error.innermost() is inner


def test_error_messages():
    assert str(LineLength(expected=3, actual=2)) == "incorrect line length: expected 3, got 2"
    assert str(EmptyInput()) == "input was empty"


# =============================================================================
# Parsing
# =============================================================================

def test_split_lines():
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\r\nb") == ["a", "b"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("") == []


def test_split_lines_keeps_lone_carriage_return():
    assert split_lines("a\r") == ["a\r"]
    assert split_lines("a\r\nb\r") == ["a", "b\r"]
    assert split_lines("a\r\n") == ["a"]


def test_parse_lines():
    assert list(parse_lines("10\n20\n30\n", parse_int)) == [10, 20, 30]


def test_parse_lines_reports_line_number():
    with pytest.raises(InvalidLine) as exc_info:
        list(parse_lines("10\nbad\n20\n", parse_int))
    error = exc_info.value
    assert error.line == 2
    assert isinstance(error.source, ParseInt)
    assert error.source.string == "bad"


def test_parse_lines_is_lazy():
    lines = parse_lines("10\nbad\n", parse_int)
    assert next(lines) == 10
    with pytest.raises(InvalidLine):
        next(lines)


def test_parse_lines_with_offset():
    assert list(parse_lines_with_offset("1\n2\n", 5, parse_int)) == [1, 2]
    with pytest.raises(InvalidLine) as exc_info:
        list(parse_lines_with_offset("1\nx\n", 5, parse_int))
    assert exc_info.value.line == 7


def test_parse_grid_visits_row_major():
    visited = []

    def parser(point, char):
        visited.append((point, char))
        return char

    grid = parse_grid("ab\ncd\n", parser)
    assert grid.shape == (2, 2)
    assert visited == [
        (GridPoint(0, 0), "a"),
        (GridPoint(1, 0), "b"),
        (GridPoint(0, 1), "c"),
        (GridPoint(1, 1), "d"),
    ]
    assert grid[1, 0] == "c"


def test_parse_grid_dtype():
    grid = parse_grid("#.\n.#\n", lambda point, char: char == "#", dtype=bool)
    assert grid.dtype == bool
    assert grid.tolist() == [[True, False], [False, True]]


def test_parse_grid_empty_input():
    with pytest.raises(EmptyInput):
        parse_grid("", lambda point, char: char)


def test_parse_grid_line_length():
    with pytest.raises(InvalidLine) as exc_info:
        parse_grid("ab\nc\n", lambda point, char: char)
    assert exc_info.value.line == 2
    assert isinstance(exc_info.value.source, LineLength)
    assert exc_info.value.source.expected == 2
    assert exc_info.value.source.actual == 1


def test_parse_grid_empty_line():
    with pytest.raises(InvalidLine) as exc_info:
        parse_grid("ab\n\ncd\n", lambda point, char: char)
    assert exc_info.value.line == 2
    assert isinstance(exc_info.value.source, EmptyLine)


def test_parse_grid_with_offset_wraps_parser_error():
    def parser(point, char):
        if char == "?":
            raise ParseChar(char)
        return char

    with pytest.raises(InvalidLine) as exc_info:
        parse_grid_with_offset("ab\na?\n", 3, parser)
    assert exc_info.value.line == 5
    assert isinstance(exc_info.value.innermost(), ParseChar)


def test_split_chunks_offsets():
    assert split_chunks("a\nb\n\nc\n") == [(0, "a\nb"), (3, "c\n")]


def test_split_chunks_crlf():
    assert split_chunks("a\r\nb\r\n\r\nc") == [(0, "a\r\nb"), (3, "c")]


def test_split_chunks_without_separator():
    with pytest.raises(NoChunkDelimiter) as exc_info:
        split_chunks("a\nb\n")
    assert exc_info.value.delimiter == "\n\n"


# =============================================================================
# Grid
# =============================================================================

def test_grid_point_offset():
    assert GridPoint(1, 2) + GridPoint(-1, 1) == GridPoint(0, 3)
    assert GridPoint(1, 2) + (2, 0) == GridPoint(3, 2)


def test_get_at_point_bounds():
    grid = np.array([[1, 2, 3], [4, 5, 6]])
    assert get_at_point(grid, GridPoint(2, 1)) == 6
    assert get_at_point(grid, GridPoint(3, 0)) is None
    assert get_at_point(grid, GridPoint(0, 2)) is None
    assert get_at_point(grid, GridPoint(-1, 0)) is None
    assert contains_point(grid, GridPoint(0, 0))


def test_set_at_point():
    grid = np.zeros((2, 2), dtype=int)
    set_at_point(grid, GridPoint(1, 0), 7)
    assert grid[0, 1] == 7
    with pytest.raises(IndexError):
        set_at_point(grid, GridPoint(2, 0), 1)


def test_iter_points():
    grid = np.zeros((2, 3))
    assert list(iter_points(grid)) == [
        GridPoint(0, 0), GridPoint(1, 0), GridPoint(2, 0),
        GridPoint(0, 1), GridPoint(1, 1), GridPoint(2, 1),
    ]


# =============================================================================
# Timing
# =============================================================================

def test_measure():
    result, elapsed = measure(lambda: 10 + 20)
    assert result == 30
    assert elapsed >= 0.0


def test_measure_propagates_exceptions():
    def fail():
        raise EmptyInput()

    with pytest.raises(EmptyInput):
        measure(fail)


# =============================================================================
# Solutions
# =============================================================================

class Numbers(ParsedPart2Solution):
    name = "Numbers"

    def parse(self, text):
        return list(parse_lines(text, parse_int))

    def part1(self, numbers):
        return len(numbers)

    def part2(self, numbers):
        return sum(numbers)


class NumbersPart1Only(ParsedPart1Solution):
    name = "Numbers Part 1"

    def parse(self, text):
        return list(parse_lines(text, parse_int))

    def part1(self, numbers):
        return max(numbers)


class NumbersPart2Missing(ParsedPart2Solution):
    name = "Numbers Part 2 Missing"

    def parse(self, text):
        return list(parse_lines(text, parse_int))

    def part1(self, numbers):
        return min(numbers)


class RawLength(Part1Solution):
    name = "Raw Length"

    def part1(self, text):
        return len(text)


class RawNumbers(Part2Solution):
    name = "Raw Numbers"

    def part1(self, text):
        return len(split_lines(text))

    def part2(self, text):
        return sum(parse_lines(text, lambda line: parse_int(line.strip())))


class RawSums(Part2Solution):
    name = "Raw Sums"

    def part1(self, text):
        return sum(parse_lines(text, parse_int))

    def part2(self, text):
        return max(parse_lines(text, parse_int))


PART1 = SolutionPart.PART1
PART2 = SolutionPart.PART2


def test_solution_part_default_name():
    assert PART1.default_name == "Part 1"
    assert PART2.default_name == "Part 2"


def test_parsed_solution_events():
    handler = RecordingHandler()
    Numbers().run(handler, "10\n20\n30\n")
    assert handler.events == [
        ("solution_name", "Numbers"),
        ("parse_start",),
        ("parse_end",),
        ("part_start", PART1),
        ("part_output", PART1, 3),
        ("part_start", PART2),
        ("part_output", PART2, 60),
    ]


def test_parsed_solution_timed_events():
    handler = RecordingHandler()
    Numbers().run(handler, "10\n20\n30\n", timed=True)
    assert handler.names() == [
        "solution_name",
        "parse_start",
        "parse_end_timed",
        "part_start",
        "part_output_timed",
        "part_start",
        "part_output_timed",
    ]
    assert handler.events[4][2] == 3
    assert handler.events[6][2] == 60
    assert all(event[-1] >= 0.0 for event in handler.events if event[0].endswith("_timed"))


def test_parse_error_stops_events():
    handler = RecordingHandler()
    with pytest.raises(InvalidLine) as exc_info:
        Numbers().run(handler, "10\nbad\n")
    assert exc_info.value.line == 2
    assert handler.events == [("solution_name", "Numbers"), ("parse_start",)]


def test_parsed_part1_solution_events():
    handler = RecordingHandler()
    NumbersPart1Only().run(handler, "4\n9\n")
    assert handler.events == [
        ("solution_name", "Numbers Part 1"),
        ("parse_start",),
        ("parse_end",),
        ("part_start", PART1),
        ("part_output", PART1, 9),
    ]


@pytest.mark.parametrize("timed", [False, True])
def test_missing_part2_reports_not_implemented(timed):
    handler = RecordingHandler()
    NumbersPart2Missing().run(handler, "4\n9\n", timed=timed)
    assert handler.events[-2:] == [
        ("part_start", PART2),
        ("part_not_implemented", PART2),
    ]


def test_raw_part1_solution_events():
    handler = RecordingHandler()
    RawLength().run(handler, "abc")
    assert handler.events == [
        ("solution_name", "Raw Length"),
        ("part_start", PART1),
        ("part_output", PART1, 3),
    ]


def test_raw_solution_parse_error_in_part2():
    handler = RecordingHandler()
    # part 1 only counts lines, part 2 fails on line 2
    with pytest.raises(InvalidLine) as exc_info:
        RawNumbers().run(handler, "1\n2x\n")
    assert exc_info.value.line == 2
    assert handler.names() == ["solution_name", "part_start", "part_output", "part_start"]

    handler = RecordingHandler()
    assert RawNumbers().part2("1\n 2\n") == 3
    RawNumbers().run(handler, "1\n2\n", timed=True)
    assert handler.names() == [
        "solution_name",
        "part_start",
        "part_output_timed",
        "part_start",
        "part_output_timed",
    ]


@pytest.mark.parametrize("timed", [False, True])
def test_raw_solution_parse_error_in_part1_skips_part2(timed):
    handler = RecordingHandler()
    with pytest.raises(InvalidLine) as exc_info:
        RawSums().run(handler, "1\nx\n", timed=timed)
    assert exc_info.value.line == 2
    assert handler.events == [("solution_name", "Raw Sums"), ("part_start", PART1)]
