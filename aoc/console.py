"""
Console Output Module - Prints solution progress and answers to a terminal.
"""

from typing import Any, Optional, TextIO

from .framework import OutputHandler, SolutionPart


def format_duration(seconds: float) -> str:
    """
    Format a duration for display, to 3 decimal places.

    Under 1 millisecond shows microseconds (µs), under 1 second shows
    milliseconds (ms), otherwise seconds (s).

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration, e.g. "14.735 ms"
    """
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f} µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f} ms"
    return f"{seconds:.3f} s"


class CliOutputHandler(OutputHandler):
    """
    Output handler printing results line by line.

    Durations under min_timing are not printed; the timed event then prints
    like its untimed counterpart.
    """

    def __init__(self, min_timing: float = 0.0, stream: Optional[TextIO] = None):
        """
        Args:
            min_timing: Minimum duration in seconds required to print timing
            stream: Where to print, sys.stdout at print time if None
        """
        self.min_timing = min_timing
        self.stream = stream

    def _print(self, text: str) -> None:
        print(text, file=self.stream)

    def _over_min(self, duration: float) -> bool:
        return duration >= self.min_timing

    def solution_name(self, name: str) -> None:
        self._print(f"= {name} =")

    def parse_start(self) -> None:
        pass

    def parse_end(self) -> None:
        pass

    def parse_end_timed(self, duration: float) -> None:
        if self._over_min(duration):
            self._print(f"Input parsed in {format_duration(duration)}")

    def part_start(self, part: SolutionPart) -> None:
        self._print(f"-- {part.default_name} --")

    def part_output(self, part: SolutionPart, output: Any) -> None:
        self._print(str(output))

    def part_output_timed(self, part: SolutionPart, output: Any, duration: float) -> None:
        if self._over_min(duration):
            self._print(f"{output} ({format_duration(duration)})")
        else:
            self.part_output(part, output)

    def part_not_implemented(self, part: SolutionPart) -> None:
        self._print(f"{part.default_name} not implemented")
