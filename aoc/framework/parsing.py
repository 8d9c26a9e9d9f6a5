"""
Parsing Utilities Module - Line and grid iteration with positioned errors.

Any ParseError raised by a per-line or per-cell parser is re-raised as an
InvalidLine carrying the one-based line number, shifted by an optional
offset so chunks of a larger input report positions in the whole input.

Example:
    text = "header\\n\\n42\\n100\\n"
    (header_offset, header), (data_offset, data) = split_chunks(text)
    numbers = list(parse_lines_with_offset(data, data_offset, parse_int))
    # [42, 100]
"""

from typing import Any, Callable, Iterator, List, Tuple, TypeVar

import numpy as np

from .errors import EmptyInput, EmptyLine, LineLength, NoChunkDelimiter, ParseError
from .grid import GridPoint


T = TypeVar("T")


def split_lines(text: str) -> List[str]:
    """
    Split text into lines.

    Lines end at "\\n" with an optional "\\r" before it. A final line break
    does not produce an extra empty line.

    Args:
        text: Raw input

    Returns:
        List of lines without line terminators
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    # no "\n" follows the last piece, so a "\r" there is content
    if last:
        lines.append(last)
    return lines


def parse_lines_with_offset(
    text: str,
    offset: int,
    parser: Callable[[str], T],
) -> Iterator[T]:
    """
    Lazily parse each line, reporting failures with an offset line number.

    Args:
        text: Input to parse
        offset: Number of lines preceding this text in the full input
        parser: Called with each line; raises ParseError on failure

    Yields:
        Parsed value per line

    Raises:
        InvalidLine: Wrapping the parser's error, at line offset + index + 1
    """
    for index, line in enumerate(split_lines(text)):
        try:
            value = parser(line)
        except ParseError as e:
            raise ParseError.invalid_line_from_zero_index(index + offset, e) from e
        yield value


def parse_lines(text: str, parser: Callable[[str], T]) -> Iterator[T]:
    """
    Lazily parse each line of a non-chunked input.

    Convenience wrapper around parse_lines_with_offset() with offset 0.
    """
    return parse_lines_with_offset(text, 0, parser)


def parse_grid_with_offset(
    text: str,
    offset: int,
    parser: Callable[[GridPoint, str], Any],
    dtype: Any = object,
) -> np.ndarray:
    """
    Parse a rectangular character grid.

    The column count is fixed by the first line. The parser is called once per
    character in row-major order with the character's position (x = column,
    y = row, origin top-left).

    Args:
        text: Input to parse
        offset: Number of lines preceding this text in the full input
        parser: Called with (position, character); raises ParseError on failure
        dtype: numpy dtype of the resulting grid

    Returns:
        Array of shape (rows, cols)

    Raises:
        EmptyInput: If the input has no lines
        InvalidLine: Wrapping EmptyLine, LineLength or the parser's error
    """
    lines = split_lines(text)

    rows = len(lines)
    if rows == 0:
        raise EmptyInput()

    cols = len(lines[0])
    grid = np.empty((rows, cols), dtype=dtype)

    for y, line in enumerate(lines):
        if not line:
            raise ParseError.invalid_line_from_zero_index(y + offset, EmptyLine())
        if len(line) != cols:
            raise ParseError.invalid_line_from_zero_index(
                y + offset, LineLength(expected=cols, actual=len(line))
            )

        for x, character in enumerate(line):
            try:
                grid[y, x] = parser(GridPoint(x, y), character)
            except ParseError as e:
                raise ParseError.invalid_line_from_zero_index(y + offset, e) from e

    return grid


def parse_grid(
    text: str,
    parser: Callable[[GridPoint, str], Any],
    dtype: Any = object,
) -> np.ndarray:
    """
    Parse a rectangular character grid of a non-chunked input.

    Convenience wrapper around parse_grid_with_offset() with offset 0.
    """
    return parse_grid_with_offset(text, 0, parser, dtype=dtype)


def split_chunks(text: str) -> List[Tuple[int, str]]:
    """
    Split input into blank-line separated chunks.

    Windows-style "\\r\\n\\r\\n" separators are used when present.

    Args:
        text: Raw input

    Returns:
        List of (line_offset, chunk) pairs, where line_offset is the number of
        input lines before the chunk starts

    Raises:
        NoChunkDelimiter: If the input holds no blank-line separator
    """
    delimiter = "\r\n\r\n" if "\r\n\r\n" in text else "\n\n"
    if delimiter not in text:
        raise NoChunkDelimiter(delimiter)

    chunks: List[Tuple[int, str]] = []
    offset = 0
    for chunk in text.split(delimiter):
        chunks.append((offset, chunk))
        # lines of the chunk plus the blank separator line
        offset += chunk.count("\n") + 2
    return chunks
