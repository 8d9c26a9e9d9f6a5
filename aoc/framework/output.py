"""
Output Handler Module - Observer interface for solution progress events.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class SolutionPart(Enum):
    """Identifies which half of a puzzle is executing."""
    PART1 = 1
    PART2 = 2

    @property
    def default_name(self) -> str:
        """Human-readable label, e.g. "Part 1"."""
        return f"Part {self.value}"


class OutputHandler(ABC):
    """
    Abstract base class for receiving output events while a solution runs.

    Events arrive in this order when both parts are solved:

        solution_name
        parse_start, parse_end | parse_end_timed        (parsed solutions only)
        part_start(PART1), part_output | part_output_timed
        part_start(PART2), part_output | part_output_timed

    part_not_implemented replaces the output event of a part that has no
    implementation yet. Handlers are not called at all after a ParseError,
    so they need no error handling of their own.

    Durations are elapsed seconds as floats.
    """

    @abstractmethod
    def solution_name(self, name: str) -> None:
        """Called with the solution's display name when it starts running."""
        pass

    @abstractmethod
    def parse_start(self) -> None:
        """Called when parsing is starting."""
        pass

    @abstractmethod
    def parse_end(self) -> None:
        """Called when parsing is finished."""
        pass

    @abstractmethod
    def parse_end_timed(self, duration: float) -> None:
        """Called when parsing is finished, with the seconds it took."""
        pass

    @abstractmethod
    def part_start(self, part: SolutionPart) -> None:
        """Called when a part is starting."""
        pass

    @abstractmethod
    def part_output(self, part: SolutionPart, output: Any) -> None:
        """Called with the result of a part."""
        pass

    @abstractmethod
    def part_output_timed(self, part: SolutionPart, output: Any, duration: float) -> None:
        """Called with the result of a part and the seconds it took."""
        pass

    @abstractmethod
    def part_not_implemented(self, part: SolutionPart) -> None:
        """Called when a part turned out to not be implemented yet."""
        pass
