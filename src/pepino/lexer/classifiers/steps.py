"""Step keyword recognizers.

Each recognizer matches ``<Keyword><whitespace><text>`` after optional
leading whitespace, ignoring case, and returns the trimmed text. A keyword
with no text after it (``"Given"`` alone) is not a step.
"""

from __future__ import annotations

import re
from collections.abc import Callable


def _keyword(keyword: str) -> Callable[[str], str | None]:
    pattern = re.compile(rf"^\s*{keyword}\s+(.*)", re.IGNORECASE)

    def recognize(line: str) -> str | None:
        m = pattern.match(line)
        if m is None:
            return None
        return m.group(1).strip()

    recognize.__name__ = f"match_{keyword.lower()}"
    recognize.__qualname__ = recognize.__name__
    return recognize


match_given = _keyword("Given")
match_when = _keyword("When")
match_then = _keyword("Then")
match_and = _keyword("And")
match_but = _keyword("But")
