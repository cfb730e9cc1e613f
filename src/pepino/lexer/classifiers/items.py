"""Recognizers for lines nested under a step or table header."""

from __future__ import annotations

DOC_STRING_MARKER = '"""'


def match_table_row(line: str) -> tuple[str, ...] | None:
    """Recognize a ``| cell | cell |`` row.

    Zero-length fragments (the ends of the row, ``||``) are dropped before
    trimming, so a whitespace-only cell survives as an empty string.

    Returns:
        The trimmed cell values, or None if the line is not a row.
    """
    text = line.strip()
    if not text.startswith("|"):
        return None
    return tuple(cell.strip() for cell in text.split("|") if cell)


def match_bullet(line: str) -> str | None:
    """Recognize a ``*`` bullet and return the text after the first star."""
    if not line.strip().startswith("*"):
        return None
    return line[line.index("*") + 1 :].strip()


def match_doc_marker(line: str) -> str | None:
    """Recognize a doc-string delimiter. Returns the raw line untouched."""
    if line.strip() == DOC_STRING_MARKER:
        return line
    return None
