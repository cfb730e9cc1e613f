"""Exception classes for Pepino.

The pure classifier never raises: an invalid line is signalled by
``classify`` returning ``None``. The exceptions below are raised by the
line lexer, which turns a rejection into an actionable syntax error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pepino.lines import LineType


class PepinoError(Exception):
    """Base exception for all Pepino errors."""

    pass


class ParseError(PepinoError):
    """Error while lexing a specification document.

    Raised when the lexer encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnparsableLineError(ParseError):
    """A line does not fit the grammar given the lines before it.

    Attributes:
        line: The rejected raw line
        last_good: Classification of the last accepted line (None if no
            line was accepted yet)
        expected: Human-readable description of what would have been accepted
    """

    def __init__(
        self,
        line: str,
        last_good: LineType | None,
        expected: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.line = line
        self.last_good = last_good
        self.expected = expected
        super().__init__(
            f"Unparsable line {line.strip()!r}. {expected}",
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )
