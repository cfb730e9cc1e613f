"""Token definition for the Pepino line lexer.

The lexer produces one Token per accepted line. Each Token carries the
line's classification, its raw text and where it came from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from pepino.lines import LineType
from pepino.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Token:
    """A classified source line.

    Attributes:
        kind: Classification of the line
        value: The raw line, without its line terminator
        lineno: Line number (1-indexed)
        col: Column of the first non-blank character (1-indexed)
        source_file: Optional source file path

    """

    kind: LineType
    value: str
    lineno: int
    col: int = 1
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of the line."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            source_file=self.source_file,
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value.strip()
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({type(self.kind).__name__}, {val!r}, {self.lineno}:{self.col})"
