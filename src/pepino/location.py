"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a classified line in its source document.

    All positions are 1-indexed. The column is the first non-blank
    character of the line.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column of the first non-blank character (1-indexed)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5, source_file="login.feature")
            >>> str(loc)
            'login.feature:3:5'

    """

    lineno: int
    col_offset: int = 1
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.feature:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
