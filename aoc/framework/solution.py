"""
Solution Module - Abstract base classes for puzzle solutions and how they run.

Pick the base class matching the shape of the puzzle:

    Part1Solution / Part2Solution
        Each part receives the raw input and parses what it needs. Parsing
        errors are raised from the part itself.

    ParsedPart1Solution / ParsedPart2Solution
        parse() runs once and both parts receive the parsed data. Parts
        themselves cannot fail to parse.

Subclasses define day and name class attributes:

    class Day00(ParsedPart2Solution):
        day = 0
        name = "Day 0: Example Solution"

        def parse(self, text):
            return list(parse_lines(text, parse_int))

        def part1(self, numbers):
            return len(numbers)

        def part2(self, numbers):
            return sum(numbers)

Solutions may raise exceptions other than ParseError when input that parsed
fine breaks an assumption of the puzzle; those are not recoverable and
propagate unchanged.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from .output import OutputHandler, SolutionPart
from .timing import measure

logger = logging.getLogger(__name__)


class Solution(ABC):
    """
    Abstract base class for all runnable solutions.

    Attributes:
        day: Puzzle day number used to select the solution
        name: Display name reported to the output handler
    """
    day: int = -1
    name: str = "Solution"

    def output_name(self, handler: OutputHandler) -> None:
        """Report the solution's name to the output handler."""
        handler.solution_name(self.name)

    @abstractmethod
    def run(self, handler: OutputHandler, text: str, timed: bool = False) -> None:
        """
        Run the solution, reporting progress to the output handler.

        Args:
            handler: Receives progress and result events
            text: Raw puzzle input
            timed: Measure parsing and parts, reporting durations

        Raises:
            ParseError: If the input fails to parse; no later events are emitted
        """
        pass

    def _emit_part(
        self, handler: OutputHandler, part: SolutionPart, solve: Callable[[], Any], timed: bool
    ) -> None:
        """Run one part through solve() and report its output."""
        handler.part_start(part)
        if timed:
            output, duration = measure(solve)
            handler.part_output_timed(part, output, duration)
        else:
            output = solve()
            handler.part_output(part, output)


class Part1Solution(Solution):
    """
    Solution that solves part 1 directly from the raw input.

    If both parts would parse the input the same way, consider
    ParsedPart1Solution instead.
    """

    @abstractmethod
    def part1(self, text: str) -> Any:
        """
        Solve part 1.

        Args:
            text: Raw puzzle input

        Returns:
            Answer for part 1

        Raises:
            ParseError: If the input fails to parse
        """
        pass

    def run_part1(self, handler: OutputHandler, text: str, timed: bool = False) -> None:
        """Run part 1, reporting the result to the output handler."""
        self._emit_part(handler, SolutionPart.PART1, lambda: self.part1(text), timed)

    def run(self, handler: OutputHandler, text: str, timed: bool = False) -> None:
        """Run part 1 only."""
        logger.debug(f"Running {self.name}")
        self.output_name(handler)
        self.run_part1(handler, text, timed)


class Part2Solution(Part1Solution):
    """Solution that solves both parts directly from the raw input."""

    @abstractmethod
    def part2(self, text: str) -> Any:
        """
        Solve part 2.

        Raises:
            ParseError: If the input fails to parse
        """
        pass

    def run_part2(self, handler: OutputHandler, text: str, timed: bool = False) -> None:
        """Run part 2, reporting the result to the output handler."""
        self._emit_part(handler, SolutionPart.PART2, lambda: self.part2(text), timed)

    def run(self, handler: OutputHandler, text: str, timed: bool = False) -> None:
        """Run part 1 then part 2. Part 2 never starts if part 1 raises."""
        logger.debug(f"Running {self.name}")
        self.output_name(handler)
        self.run_part1(handler, text, timed)
        self.run_part2(handler, text, timed)


class ParsedPart1Solution(Solution):
    """
    Solution that parses the input once, then solves part 1 from parsed data.
    """

    @abstractmethod
    def parse(self, text: str) -> Any:
        """
        Parse the raw input into the data the parts work on.

        Raises:
            ParseError: If the input fails to parse
        """
        pass

    @abstractmethod
    def part1(self, parsed: Any) -> Any:
        """Solve part 1 from parsed data."""
        pass

    def run_parse(self, handler: OutputHandler, text: str, timed: bool = False) -> Any:
        """
        Parse the input, reporting progress to the output handler.

        Returns:
            Parsed data

        Raises:
            ParseError: If the input fails to parse; parse_end is not emitted
        """
        handler.parse_start()
        if timed:
            parsed, duration = measure(lambda: self.parse(text))
            handler.parse_end_timed(duration)
        else:
            parsed = self.parse(text)
            handler.parse_end()
        return parsed

    def run_part1(self, handler: OutputHandler, parsed: Any, timed: bool = False) -> None:
        """Run part 1 on parsed data, reporting the result."""
        self._emit_part(handler, SolutionPart.PART1, lambda: self.part1(parsed), timed)

    def run(self, handler: OutputHandler, text: str, timed: bool = False) -> None:
        """Parse then run part 1."""
        logger.debug(f"Running {self.name}")
        self.output_name(handler)
        parsed = self.run_parse(handler, text, timed)
        self.run_part1(handler, parsed, timed)


class ParsedPart2Solution(ParsedPart1Solution):
    """
    Solution that parses the input once and solves both parts from it.

    part2() may be left as is while the second half of the puzzle is unsolved;
    its default returns None and the run reports part 2 as not implemented.
    """

    def part2(self, parsed: Any) -> Any:
        """
        Solve part 2 from parsed data.

        Returns:
            Answer for part 2, or None if not implemented yet
        """
        return None

    def run_part2(self, handler: OutputHandler, parsed: Any, timed: bool = False) -> None:
        """Run part 2 on parsed data, reporting the result or its absence."""
        part = SolutionPart.PART2
        handler.part_start(part)
        if timed:
            output, duration = measure(lambda: self.part2(parsed))
        else:
            output = self.part2(parsed)

        if output is None:
            handler.part_not_implemented(part)
        elif timed:
            handler.part_output_timed(part, output, duration)
        else:
            handler.part_output(part, output)

    def run(self, handler: OutputHandler, text: str, timed: bool = False) -> None:
        """Parse then run part 1 and part 2."""
        logger.debug(f"Running {self.name}")
        self.output_name(handler)
        parsed = self.run_parse(handler, text, timed)
        self.run_part1(handler, parsed, timed)
        self.run_part2(handler, parsed, timed)
