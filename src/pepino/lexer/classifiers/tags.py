"""Tag line recognizer."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"@(\w+)")


def match_tags(line: str) -> tuple[str, ...] | None:
    """Recognize a line of ``@tag`` tokens.

    Tag names are returned in order of appearance, duplicates kept. Text
    between tags is ignored.

    Example:
        >>> match_tags("@smoke @slow")
        ('smoke', 'slow')
    """
    if not line.strip().startswith("@"):
        return None
    return tuple(_TAG_RE.findall(line))
