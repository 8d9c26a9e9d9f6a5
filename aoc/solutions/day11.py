"""
Day 11 - Reactor.

Input is one device per line: its name, ': ', then the space separated names
of the devices its outputs attach to.

Part 1: count the paths from "you" to "out".
Part 2: count the paths from "svr" to "out" that visit both "dac" and "fft".
"""

import logging
from collections import defaultdict
from typing import Dict, FrozenSet, Set

from ..framework import EmptyInput, MissingValue, NoDelimiter, ParsedPart2Solution, parse_lines
from .factory import register_solution

logger = logging.getLogger(__name__)


# device -> {output device: number of distinct routes to it}
Connections = Dict[str, Dict[str, int]]

START = "you"
SERVER = "svr"
END = "out"
REQUIRED = frozenset({"dac", "fft"})
# Devices kept as graph nodes, everything else may be squashed
KEPT_DEVICES = frozenset({START, SERVER}) | REQUIRED


def parse_device(line: str):
    if ":" not in line:
        raise NoDelimiter(":")
    name, raw_outputs = line.split(":", 1)
    name = name.strip()
    if not name:
        raise MissingValue("device name")
    outputs = raw_outputs.split()
    if not outputs:
        raise MissingValue(f"outputs of device {name}")
    return name, outputs


def squash_devices(connections: Connections, kept: FrozenSet[str]) -> Connections:
    """
    Remove intermediate devices, routing their inputs straight to their
    outputs.

    Each removed device multiplies into the route counts of the devices it
    fed, so path counts through the squashed graph are unchanged.

    Args:
        connections: Device graph to squash
        kept: Devices that must stay in the graph

    Returns:
        New squashed device graph
    """
    squashed = {name: dict(outputs) for name, outputs in connections.items()}
    for name in [name for name in connections if name not in kept]:
        name_outputs = squashed.pop(name)
        for outputs in squashed.values():
            routes = outputs.pop(name, 0)
            if not routes:
                continue
            for output, output_routes in name_outputs.items():
                outputs[output] = outputs.get(output, 0) + routes * output_routes
    logger.debug(f"Squashed {len(connections)} devices down to {len(squashed)}")
    return squashed


def count_paths(
    connections: Connections,
    start: str,
    end: str,
    required: FrozenSet[str] = frozenset(),
) -> int:
    """
    Count routes from start to end visiting every required device.

    Args:
        connections: Device graph with route counts
        start: First device
        end: Last device
        required: Devices every counted path must pass through

    Returns:
        Number of routes
    """
    visited: Set[str] = set()

    def visit(device: str, routes: int) -> int:
        if device == end:
            return routes if required <= visited else 0
        visited.add(device)
        total = 0
        for output, output_routes in connections.get(device, {}).items():
            if output not in visited:
                total += visit(output, routes * output_routes)
        visited.remove(device)
        return total

    return visit(start, 1)


@register_solution
class Day11(ParsedPart2Solution):
    """Count data paths through reactor devices."""
    day = 11
    name = "Day 11: Reactor"

    def parse(self, text: str) -> Connections:
        connections: Connections = {}
        for name, outputs in parse_lines(text, parse_device):
            routes: Dict[str, int] = defaultdict(int)
            for output in outputs:
                routes[output] += 1
            connections[name] = dict(routes)

        if not connections:
            raise EmptyInput()
        return squash_devices(connections, KEPT_DEVICES)

    def part1(self, connections: Connections) -> int:
        return count_paths(connections, START, END)

    def part2(self, connections: Connections) -> int:
        return count_paths(connections, SERVER, END, REQUIRED)
