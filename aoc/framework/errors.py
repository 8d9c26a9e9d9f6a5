"""
Parse Errors Module - Structured errors describing what and where input parsing failed.

Every variant is a subclass of ParseError, so callers can catch the whole
family at once or match a single variant with isinstance(). Positional
context is added by wrapping an error in InvalidLine, once per nesting level.
"""

import re


__all__ = [
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
]


# Strict decimal integer: optional sign, ASCII digits only
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Strict float: decimal with optional exponent, or inf/infinity/nan
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class ParseError(Exception):
    """
    Base class for all input parsing errors.

    Construction helpers mirror the common failure points of puzzle parsers:

        ParseError.parse_int_from_str("12x", source)
        ParseError.invalid_line_from_zero_index(3, EmptyLine())
    """

    @classmethod
    def parse_int_from_str(cls, string: str, source: Exception) -> "ParseInt":
        """
        Create a ParseInt error from the attempted substring.

        Args:
            string: Exact substring that failed to convert
            source: Underlying conversion failure

        Returns:
            ParseInt error
        """
        return ParseInt(string, source)

    @classmethod
    def parse_float_from_str(cls, string: str, source: Exception) -> "ParseFloat":
        """Create a ParseFloat error from the attempted substring."""
        return ParseFloat(string, source)

    @classmethod
    def invalid_line_from_zero_index(cls, index: int, source: "ParseError") -> "InvalidLine":
        """
        Create an InvalidLine error from a zero-based line index.

        Args:
            index: Zero-based line index
            source: Error raised while parsing the line

        Returns:
            InvalidLine error holding the one-based line number
        """
        return cls.invalid_line_from_one_based(index + 1, source)

    @classmethod
    def invalid_line_from_one_based(cls, line: int, source: "ParseError") -> "InvalidLine":
        """
        Create an InvalidLine error from a one-based line number.

        Args:
            line: One-based line number
            source: Error raised while parsing the line

        Returns:
            InvalidLine error
        """
        return InvalidLine(line, source)


class EmptyInput(ParseError):
    """The input received was empty."""

    def __init__(self):
        super().__init__("input was empty")


class EmptyLine(ParseError):
    """The input contains an unexpected empty line."""

    def __init__(self):
        super().__init__("line was empty")


class LineLength(ParseError):
    """
    The input contains a line with an unexpected length.

    Attributes:
        expected: Expected length (e.g. the first line of a grid)
        actual: Length that was found
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"incorrect line length: expected {expected}, got {actual}")


class ParseChar(ParseError):
    """An invalid character was parsed."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid character: {char!r}")


class ParseInt(ParseError):
    """
    Failed to parse a string into an integer.

    Attributes:
        string: The substring that failed to parse
        source: The underlying conversion failure
    """

    def __init__(self, string: str, source: Exception):
        self.string = string
        self.source = source
        super().__init__(f"failed to parse string into integer: {string!r}")


class ParseFloat(ParseError):
    """
    Failed to parse a string into a float.

    Attributes:
        string: The substring that failed to parse
        source: The underlying conversion failure
    """

    def __init__(self, string: str, source: Exception):
        self.string = string
        self.source = source
        super().__init__(f"failed to parse string into float: {string!r}")


class ParseString(ParseError):
    """A token did not match any of the expected strings."""

    def __init__(self, string: str):
        self.string = string
        super().__init__(f"invalid string: {string!r}")


class NoDelimiter(ParseError):
    """A line was expected to contain a delimiter but did not."""

    def __init__(self, delimiter: str):
        self.delimiter = delimiter
        super().__init__(f"expected delimiter not found: {delimiter!r}")


class NoChunkDelimiter(ParseError):
    """The input was expected to be split into chunks but had no separator."""

    def __init__(self, delimiter: str):
        self.delimiter = delimiter
        super().__init__(f"expected chunk delimiter not found: {delimiter!r}")


class EmptyChunk(ParseError):
    """
    A chunk of the input was empty.

    Attributes:
        chunk_number: One-based position of the chunk in the input
        description: What the chunk should have held
    """

    def __init__(self, chunk_number: int, description: str):
        self.chunk_number = chunk_number
        self.description = description
        super().__init__(f"chunk {chunk_number} ({description}) was empty")


class MissingValue(ParseError):
    """A value required by the input structure was never found."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"expected value not found: {description}")


class InvalidLine(ParseError):
    """
    A line in the input caused a parsing error.

    Attributes:
        line: One-indexed line number (the first line is 1)
        source: The error that occurred while parsing the line
    """

    def __init__(self, line: int, source: ParseError):
        self.line = line
        self.source = source
        super().__init__(f"failure parsing line {line}")

    def innermost(self) -> ParseError:
        """
        Follow nested InvalidLine wrappers down to the original error.

        Returns:
            The first error in the chain that is not an InvalidLine
        """
        error: ParseError = self
        while isinstance(error, InvalidLine):
            error = error.source
        return error


def parse_int(string: str) -> int:
    """
    Parse a decimal integer, rejecting whitespace and underscores.

    Args:
        string: Text to convert

    Returns:
        Parsed integer

    Raises:
        ParseInt: If the text is not a plain decimal integer
    """
    try:
        if not string:
            raise ValueError("cannot parse integer from empty string")
        if not _INT_PATTERN.fullmatch(string):
            raise ValueError("invalid digit found in string")
        return int(string)
    except ValueError as e:
        raise ParseError.parse_int_from_str(string, e) from e


def parse_float(string: str) -> float:
    """
    Parse a float, rejecting whitespace and underscores.

    Raises:
        ParseFloat: If the text is not a valid float
    """
    try:
        if not string:
            raise ValueError("cannot parse float from empty string")
        if not _FLOAT_PATTERN.fullmatch(string):
            raise ValueError("invalid float literal")
        return float(string)
    except ValueError as e:
        raise ParseError.parse_float_from_str(string, e) from e
