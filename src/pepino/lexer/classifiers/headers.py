"""Block and examples header recognizers."""

from __future__ import annotations

import re

_BACKGROUND_RE = re.compile(r"^\s*Background(.*)", re.IGNORECASE)
_SHARED_EXAMPLES_OF_RE = re.compile(r"^\s*Shared\s+Examples\s+Of\s+@(.*[^:])", re.IGNORECASE)


def _starts_with(text: str, prefix: str) -> bool:
    """Case-insensitive prefix test."""
    return text[: len(prefix)].casefold() == prefix.casefold()


def match_scenario(line: str) -> str | None:
    """Recognize a Scenario or Story header.

    Returns:
        The whole trimmed line, which doubles as the block title.
    """
    text = line.strip()
    if _starts_with(text, "Scenario") or _starts_with(text, "Story"):
        return text
    return None


def is_background(line: str) -> bool:
    """Recognize a Background header, with or without a colon."""
    return _BACKGROUND_RE.match(line) is not None


def match_shared_examples_of(line: str) -> str | None:
    """Recognize ``Shared Examples Of @tag``.

    Returns:
        The tag name without its ``@`` and without a trailing colon.
    """
    m = _SHARED_EXAMPLES_OF_RE.match(line.rstrip())
    if m is None:
        return None
    return m.group(1)


def is_shared_examples(line: str) -> bool:
    """Recognize a plain ``Shared Examples`` header (not the tagged form)."""
    if not _starts_with(line.strip(), "Shared Examples"):
        return False
    return match_shared_examples_of(line) is None


def is_examples(line: str) -> bool:
    """Recognize an Examples header introducing a table."""
    return _starts_with(line.strip(), "Examples")
