"""
Timing Module - Measure the wall-clock cost of a single call.
"""

import time
from typing import Callable, Tuple, TypeVar


T = TypeVar("T")


def measure(operation: Callable[[], T]) -> Tuple[T, float]:
    """
    Call an operation once and measure how long it took.

    Only the call itself is measured. Exceptions raised by the operation
    propagate unchanged.

    Args:
        operation: Zero-argument callable

    Returns:
        (result, elapsed_seconds)

    Example:
        >>> result, elapsed = measure(lambda: 10 + 20)
        >>> result
        30
    """
    start = time.perf_counter()
    result = operation()
    elapsed = time.perf_counter() - start
    return result, elapsed
