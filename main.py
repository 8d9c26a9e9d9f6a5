"""
Advent of Code 2025 - Entry Point

Runs the solution for a day against its puzzle input.

Example:
    python main.py 1
    python main.py 4 --input example.txt --timed
    python main.py 8 -t --min-timing-ms 5 --verbose
"""

import sys
import logging
import argparse
from typing import List, Optional

from aoc.console import CliOutputHandler
from aoc.framework import ParseError
from aoc.inputs import InputFileError, read_input
from aoc.settings import load_settings
from aoc.solutions import DaySolutionError, get_solution_days, run_day


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    """Configure console logging; DEBUG with verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments; options left unset come from settings."""
    parser = argparse.ArgumentParser(
        description="Advent of Code 2025 challenge solver"
    )
    parser.add_argument(
        "day",
        type=int,
        help=f"The day's solution to run (available: {', '.join(map(str, get_solution_days()))})"
    )
    parser.add_argument(
        "--input", "-i",
        metavar="FILE",
        default=None,
        help="Alternative input file to use over the default input"
    )
    parser.add_argument(
        "--timed", "-t",
        action="store_true",
        default=None,
        help="Measure the time of parsing and running parts"
    )
    parser.add_argument(
        "--min-timing-ms",
        type=float,
        metavar="NUMBER",
        default=None,
        help="Minimum duration (in milliseconds) required to print timing; 0 = always print"
    )
    parser.add_argument(
        "--inputs-dir",
        default=None,
        help="Directory holding default input files (default: inputs)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def apply_settings(args, settings: dict):
    """Fill options not given on the command line from settings."""
    if args.timed is None:
        args.timed = bool(settings.get("timed", False))
    if args.min_timing_ms is None:
        args.min_timing_ms = float(settings.get("min_timing_ms", 0))
    if args.inputs_dir is None:
        args.inputs_dir = settings.get("inputs_dir", "inputs")
    return args


def log_error_chain(message: str, error: BaseException):
    """Log an error followed by each exception that caused it."""
    logger.error(f"{message}: {error}")
    cause = error.__cause__
    while cause is not None:
        logger.error(f"  caused by: {cause}")
        cause = cause.__cause__


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a day's solution from the command line.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    configure_logging(args.verbose)
    # after logging, so config.json warnings use the configured format
    apply_settings(args, load_settings())

    try:
        text = read_input(args.day, args.input, args.inputs_dir)
        handler = CliOutputHandler(min_timing=args.min_timing_ms / 1000.0)
        run_day(args.day, handler, text, args.timed)
    except (DaySolutionError, InputFileError) as e:
        log_error_chain("Failed to run solution", e)
        return 1
    except ParseError as e:
        log_error_chain("Failed to parse input", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
