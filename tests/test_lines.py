"""Tests for line classification values."""

from __future__ import annotations

import dataclasses

import pytest

from pepino.lines import (
    Background,
    BlockStart,
    BulletPoint,
    DocString,
    ExamplesStart,
    Item,
    Named,
    Shared,
    Step,
    TableRow,
    TagLine,
    format_block,
    step_kind,
)
from pepino.steps import GivenStep, ThenStep, WhenStep


class TestFormatBlock:
    """Human-readable block names."""

    def test_named_uses_title(self) -> None:
        assert format_block(Named("Scenario: Login")) == "Scenario: Login"

    def test_background(self) -> None:
        assert format_block(Background()) == "Background"

    def test_shared(self) -> None:
        assert format_block(Shared()) == "Shared Examples"
        assert format_block(Shared("login")) == "Shared Examples of login"

    def test_rejects_other_values(self) -> None:
        with pytest.raises(TypeError):
            format_block(ExamplesStart())  # type: ignore[arg-type]


class TestStepKind:
    """Step kind of a line, looking through one item wrapper."""

    def test_bare_steps(self) -> None:
        assert step_kind(Step(GivenStep("a"))) is GivenStep
        assert step_kind(Step(WhenStep("a"))) is WhenStep
        assert step_kind(Step(ThenStep("a"))) is ThenStep

    def test_items_under_steps(self) -> None:
        assert step_kind(Item(Step(ThenStep("a")), BulletPoint("x"))) is ThenStep

    @pytest.mark.parametrize(
        "line",
        [None, ExamplesStart(), BlockStart(Named("S")), TagLine(("a",)),
         Item(ExamplesStart(), TableRow(("a",)))],
    )
    def test_not_governed_by_a_step(self, line) -> None:
        assert step_kind(line) is None


class TestValueSemantics:
    """Classifications are immutable values."""

    def test_equality(self) -> None:
        assert Item(Step(GivenStep("a")), DocString("x")) == Item(
            Step(GivenStep("a")), DocString("x")
        )
        assert ExamplesStart() == ExamplesStart()
        assert BlockStart(Background()) != BlockStart(Shared())

    def test_hashable(self) -> None:
        seen = {TagLine(("a", "b")), TagLine(("a", "b")), BlockStart(Named("S"))}
        assert len(seen) == 2

    def test_frozen(self) -> None:
        row = TableRow(("a",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            row.cells = ("b",)  # type: ignore[misc]
