"""Transition function of the line classifier.

``classify(prior, line)`` combines the classification of the previous line
with the recognizers, in a fixed priority order, to classify the current
line. The rules form an ordered table evaluated top to bottom; the first
rule whose state test, recognizer and emitter all succeed wins.

Order matters:
- Block and examples headers come first, so a header is never read as a
  step or an item whatever the previous line was.
- Step rules come before item rules, so a step keyword ends a doc-string.
- The tag rule comes last, so a line accepted by a structural rule is
  never read as a tag line.

Thread Safety:
The table is an immutable tuple and every rule is a pure function.
State is passed in and returned; nothing is stored between calls.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pepino.lexer.classifiers import (
    is_background,
    is_examples,
    is_shared_examples,
    match_and,
    match_but,
    match_bullet,
    match_doc_marker,
    match_given,
    match_scenario,
    match_shared_examples_of,
    match_table_row,
    match_tags,
    match_then,
    match_when,
)
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
    step_kind,
)
from pepino.steps import GivenStep, ThenStep, WhenStep

type StatePredicate = Callable[[LineType | None], bool]


@dataclass(frozen=True, slots=True)
class Transition:
    """One row of the transition table.

    Attributes:
        name: Rule name, for debugging and tests
        accepts: Test on the previous line's classification
        recognize: Recognizer applied to the raw line; None means no match
        emit: Builds the new classification from the previous one and the
            payload. Returning None rejects the pair and evaluation moves
            on to the next rule.

    """

    name: str
    accepts: StatePredicate
    recognize: Callable[[str], Any]
    emit: Callable[[LineType | None, Any], LineType | None]


# =============================================================================
# State predicates
# =============================================================================


def _anything(state: LineType | None) -> bool:
    return True


def _opens_steps(state: LineType | None) -> bool:
    """No line yet, or a Scenario/Story/Background header."""
    match state:
        case None | BlockStart(block=Named() | Background()):
            return True
    return False


def _after(*kinds: type) -> StatePredicate:
    """Previous line is a step of one of ``kinds``, bare or with an item."""

    def accepts(state: LineType | None) -> bool:
        return step_kind(state) in kinds

    return accepts


def _opens_or_after(*kinds: type) -> StatePredicate:
    follows = _after(*kinds)

    def accepts(state: LineType | None) -> bool:
        return _opens_steps(state) or follows(state)

    return accepts


def _bare_step(state: LineType | None) -> bool:
    return isinstance(state, Step)


def _in_item(item_type: type) -> StatePredicate:
    def accepts(state: LineType | None) -> bool:
        return isinstance(state, Item) and isinstance(state.item, item_type)

    return accepts


def _hosts_table(state: LineType | None) -> bool:
    match state:
        case BlockStart(block=Shared()) | ExamplesStart() | Step():
            return True
    return False


# =============================================================================
# Recognizer adapters and emitters
# =============================================================================


def _flag(predicate: Callable[[str], bool]) -> Callable[[str], bool | None]:
    """Adapt a payload-less recognizer to the None-means-no-match protocol."""

    def recognize(line: str) -> bool | None:
        return True if predicate(line) else None

    return recognize


def _any_line(line: str) -> str:
    return line


def _enclosing(state: LineType | None) -> LineType | None:
    """The line an item attaches to: the wrapped line of an Item, else the state."""
    if isinstance(state, Item):
        return state.line
    return state


def _step(step_type: type) -> Callable[[LineType | None, str], LineType]:
    def emit(state: LineType | None, text: str) -> LineType:
        return Step(step_type(text))

    return emit


def _item(item_type: type) -> Callable[[LineType | None, Any], LineType]:
    def emit(state: LineType | None, payload: Any) -> LineType:
        return Item(_enclosing(state), item_type(payload))

    return emit


def _next_row(state: LineType | None, cells: tuple[str, ...]) -> LineType | None:
    """Continue a table only when the width matches the previous row."""
    assert isinstance(state, Item) and isinstance(state.item, TableRow)
    if len(cells) != len(state.item.cells):
        return None
    return Item(state.line, TableRow(cells))


# =============================================================================
# Transition table
# =============================================================================

TRANSITIONS: tuple[Transition, ...] = (
    # Headers open a new block from any state
    Transition(
        "scenario", _anything, match_scenario, lambda _, text: BlockStart(Named(text))
    ),
    Transition(
        "background", _anything, _flag(is_background), lambda _, __: BlockStart(Background())
    ),
    Transition(
        "shared-examples-of",
        _anything,
        match_shared_examples_of,
        lambda _, tag: BlockStart(Shared(tag)),
    ),
    Transition(
        "shared-examples",
        _anything,
        _flag(is_shared_examples),
        lambda _, __: BlockStart(Shared(None)),
    ),
    Transition("examples", _anything, _flag(is_examples), lambda _, __: ExamplesStart()),
    # Given
    Transition("given", _opens_or_after(GivenStep), match_given, _step(GivenStep)),
    Transition("given-and", _after(GivenStep), match_and, _step(GivenStep)),
    Transition("given-but", _after(GivenStep), match_but, _step(GivenStep)),
    # When (the When keyword also re-opens actions after an outcome)
    Transition(
        "when", _opens_or_after(GivenStep, WhenStep, ThenStep), match_when, _step(WhenStep)
    ),
    Transition("when-and", _after(WhenStep), match_and, _step(WhenStep)),
    Transition("when-but", _after(WhenStep), match_but, _step(WhenStep)),
    # Then
    Transition(
        "then", _opens_or_after(GivenStep, WhenStep, ThenStep), match_then, _step(ThenStep)
    ),
    Transition("then-and", _after(ThenStep), match_and, _step(ThenStep)),
    Transition("then-but", _after(ThenStep), match_but, _step(ThenStep)),
    # Doc-strings: any line after an open doc-string is content
    Transition("doc-string-open", _bare_step, match_doc_marker, _item(DocString)),
    Transition("doc-string-line", _in_item(DocString), _any_line, _item(DocString)),
    # Bullets
    Transition("bullet", _bare_step, match_bullet, _item(BulletPoint)),
    Transition("bullet-next", _in_item(BulletPoint), match_bullet, _item(BulletPoint)),
    # Tables
    Transition("table-row", _hosts_table, match_table_row, _item(TableRow)),
    Transition("table-row-next", _in_item(TableRow), match_table_row, _next_row),
    # Tags
    Transition("tags", _anything, match_tags, lambda _, tags: TagLine(tags)),
)


def classify(prior: LineType | None, line: str) -> LineType | None:
    """Classify a raw line given the classification of the previous line.

    Args:
        prior: Classification of the last accepted line, or None at the
            start of input
        line: Raw line text, without its line terminator

    Returns:
        The new classification, or None if the line is not valid here.

    Example:
        >>> state = classify(None, "Scenario: Login succeeds")
        >>> classify(state, "Given a user exists")
        Step(step=GivenStep(text='a user exists'))

    """
    for transition in TRANSITIONS:
        if not transition.accepts(prior):
            continue
        payload = transition.recognize(line)
        if payload is None:
            continue
        result = transition.emit(prior, payload)
        if result is not None:
            return result
    return None


__all__ = ["TRANSITIONS", "Transition", "classify"]
