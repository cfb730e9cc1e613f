"""Line classifications produced by the Pepino lexer.

Every accepted line is described by one LineType value. The value of the
previous line is the only state the classifier needs, so callers thread it
from one call to the next.

Line Hierarchy:
LineType
├── BlockStart(BlockType)    Scenario/Story, Background or Shared Examples header
├── ExamplesStart            Examples header
├── Step(StepType)           Given/When/Then/And/But line
├── Item(LineType, ItemType) table row, bullet or doc-string under a line
└── TagLine                  @tag tokens

An Item always wraps the line that opened it (a block start, an examples
header or a step), never another Item. Consecutive rows of one table wrap
the same enclosing line.

Thread Safety:
All values are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from pepino.steps import GivenStep, StepType, ThenStep, WhenStep

# =============================================================================
# Block types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Named:
    """A Scenario or Story block. The title is the whole trimmed header line."""

    title: str


@dataclass(frozen=True, slots=True)
class Background:
    """A Background block."""


@dataclass(frozen=True, slots=True)
class Shared:
    """A Shared Examples block, optionally scoped to a tag."""

    tag: str | None = None


type BlockType = Named | Background | Shared


# =============================================================================
# Item types
# =============================================================================


@dataclass(frozen=True, slots=True)
class BulletPoint:
    """A ``*`` bullet line."""

    text: str


@dataclass(frozen=True, slots=True)
class TableRow:
    """A ``| cell | cell |`` row with trimmed cell values."""

    cells: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DocString:
    """One raw line of a doc-string, markers included.

    Holds the current line only. Joining the lines of a doc-string is left
    to the consumer of the token stream.
    """

    text: str


type ItemType = BulletPoint | TableRow | DocString


# =============================================================================
# Line types
# =============================================================================


@dataclass(frozen=True, slots=True)
class BlockStart:
    """The header line of a block."""

    block: BlockType


@dataclass(frozen=True, slots=True)
class ExamplesStart:
    """An Examples header introducing a table."""


@dataclass(frozen=True, slots=True)
class Step:
    """A bare step line."""

    step: StepType


@dataclass(frozen=True, slots=True)
class Item:
    """A structured line attached to the line that opened it."""

    line: LineType
    item: ItemType


@dataclass(frozen=True, slots=True)
class TagLine:
    """A line made of ``@tag`` tokens, in order of appearance."""

    tags: tuple[str, ...]


# PEP 695 type alias for line classifications
type LineType = BlockStart | ExamplesStart | Step | Item | TagLine


# =============================================================================
# Helpers
# =============================================================================


def format_block(block: BlockType) -> str:
    """Render a block type for humans.

    Example:
        >>> format_block(Shared("login"))
        'Shared Examples of login'
    """
    match block:
        case Named(title=title):
            return title
        case Background():
            return "Background"
        case Shared(tag=None):
            return "Shared Examples"
        case Shared(tag=tag):
            return f"Shared Examples of {tag}"
    raise TypeError(f"Not a block type: {block!r}")


def step_kind(line: LineType | None) -> type[GivenStep] | type[WhenStep] | type[ThenStep] | None:
    """Return the step class of a bare step or of an item under a step.

    Args:
        line: A line classification, or None

    Returns:
        GivenStep, WhenStep or ThenStep, or None when the line is not
        governed by a step.
    """
    match line:
        case Step(step=step) | Item(line=Step(step=step)):
            return type(step)
    return None


__all__ = [
    "Background",
    "BlockStart",
    "BlockType",
    "BulletPoint",
    "DocString",
    "ExamplesStart",
    "Item",
    "ItemType",
    "LineType",
    "Named",
    "Shared",
    "Step",
    "TableRow",
    "TagLine",
    "format_block",
    "step_kind",
]
