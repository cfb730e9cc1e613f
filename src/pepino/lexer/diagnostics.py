"""Syntax error guidance for rejected lines."""

from __future__ import annotations

from pepino.lines import (
    Background,
    BlockStart,
    ExamplesStart,
    Item,
    LineType,
    Named,
    Shared,
    Step,
    TagLine,
)
from pepino.steps import GivenStep, ThenStep, WhenStep

EXPECTING_STEP = "Expecting Given, When or Then step"
EXPECTING_TABLE_ROW = "Expecting Table row"


def expecting(state: LineType | None) -> str:
    """Describe which lines would have been accepted after ``state``.

    Args:
        state: Classification of the last accepted line (never the rejected
            one), or None if no line was accepted yet

    Returns:
        A fixed human-readable phrase naming the valid next lines.
    """
    match state:
        case None | BlockStart(block=Named() | Background()):
            return EXPECTING_STEP
        case BlockStart(block=Shared()):
            return EXPECTING_TABLE_ROW
        case Step(step=GivenStep()) | Item(line=Step(step=GivenStep())):
            return "Expecting Table row, Bullet, Given, When, Then, And or But step"
        case Step(step=WhenStep()) | Item(line=Step(step=WhenStep())):
            return "Expecting Table row, Bullet, When, Then, And or But step"
        case Step(step=ThenStep()) | Item(line=Step(step=ThenStep())):
            return "Expecting Table row, Bullet, Then, And or But step"
        case ExamplesStart():
            return EXPECTING_TABLE_ROW
        case Item():
            return "Unexpected or invalid line"
        case TagLine():
            return "Unexpected line"
    return "Unexpected line"


__all__ = ["expecting"]
