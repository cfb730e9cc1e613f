"""
Pepino — line classifier for Gherkin-style specification documents

Decides, line by line, what each line of a behaviour specification is
(Scenario header, Given/When/Then step, table row, bullet, doc-string,
tag line) and rejects lines that are out of place, such as a Given after
a Then or a table row of the wrong width. Zero runtime dependencies.

Quick Start:
    >>> from pepino import classify, expecting
    >>> state = classify(None, "Scenario: Login succeeds")
    >>> state = classify(state, "Given a user exists")
    >>> state
    Step(step=GivenStep(text='a user exists'))

    >>> # Whole documents, with syntax errors
    >>> from pepino import tokenize
    >>> tokens = tokenize("Scenario: Login\\n  Given a user\\n  When they log in")
    >>> [t.lineno for t in tokens]
    [1, 2, 3]

"""

from pepino.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from pepino.errors import ParseError, PepinoError, UnparsableLineError
from pepino.lexer import Lexer, classify, expecting
from pepino.lines import (
    Background,
    BlockStart,
    BlockType,
    BulletPoint,
    DocString,
    ExamplesStart,
    Item,
    ItemType,
    LineType,
    Named,
    Shared,
    Step,
    TableRow,
    TagLine,
    format_block,
)
from pepino.location import SourceLocation
from pepino.steps import GivenStep, StepType, ThenStep, WhenStep
from pepino.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Classify every line of a specification document.

    Args:
        source: Document text
        source_file: Optional source file path for error messages

    Returns:
        One Token per accepted line, in source order

    Raises:
        UnparsableLineError: A line is invalid in its context (strict config)

    Example:
        >>> tokens = tokenize("@smoke\\nScenario: Login\\n  Given a user")
        >>> tokens[0].kind
        TagLine(tags=('smoke',))
    """
    return list(Lexer(source, source_file=source_file).tokenize())


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "classify",
    "expecting",
    "tokenize",
    "format_block",
    # Block types
    "BlockType",
    "Named",
    "Background",
    "Shared",
    # Step types
    "StepType",
    "GivenStep",
    "WhenStep",
    "ThenStep",
    # Item types
    "ItemType",
    "BulletPoint",
    "TableRow",
    "DocString",
    # Line types
    "LineType",
    "BlockStart",
    "ExamplesStart",
    "Step",
    "Item",
    "TagLine",
    # Lexer
    "Lexer",
    "Token",
    "SourceLocation",
    # Errors
    "PepinoError",
    "ParseError",
    "UnparsableLineError",
    # Configuration (ContextVar-based)
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
