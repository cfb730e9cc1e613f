"""Tests for syntax error guidance."""

from __future__ import annotations

import pytest

from pepino.lexer import expecting
from pepino.lines import (
    Background,
    BlockStart,
    BulletPoint,
    DocString,
    ExamplesStart,
    Item,
    LineType,
    Named,
    Shared,
    Step,
    TableRow,
    TagLine,
)
from pepino.steps import GivenStep, ThenStep, WhenStep

GIVEN_NEXT = "Expecting Table row, Bullet, Given, When, Then, And or But step"
WHEN_NEXT = "Expecting Table row, Bullet, When, Then, And or But step"
THEN_NEXT = "Expecting Table row, Bullet, Then, And or But step"


@pytest.mark.parametrize(
    ("state", "message"),
    [
        (BlockStart(Named("S")), "Expecting Given, When or Then step"),
        (BlockStart(Background()), "Expecting Given, When or Then step"),
        (BlockStart(Shared(None)), "Expecting Table row"),
        (BlockStart(Shared("login")), "Expecting Table row"),
        (Step(GivenStep("a")), GIVEN_NEXT),
        (Item(Step(GivenStep("a")), BulletPoint("x")), GIVEN_NEXT),
        (Step(WhenStep("a")), WHEN_NEXT),
        (Item(Step(WhenStep("a")), DocString("x")), WHEN_NEXT),
        (Step(ThenStep("a")), THEN_NEXT),
        (Item(Step(ThenStep("a")), TableRow(("x",))), THEN_NEXT),
        (ExamplesStart(), "Expecting Table row"),
        (Item(ExamplesStart(), TableRow(("a",))), "Unexpected or invalid line"),
        (Item(BlockStart(Shared(None)), TableRow(("a",))), "Unexpected or invalid line"),
        (TagLine(("smoke",)), "Unexpected line"),
    ],
)
def test_expecting(state: LineType, message: str) -> None:
    assert expecting(state) == message


def test_expecting_before_any_line() -> None:
    """Nothing accepted yet: a step may start the document."""
    assert expecting(None) == "Expecting Given, When or Then step"
