"""Context-sensitive line classifier for Gherkin-style documents.

lexer/
├── __init__.py          # Re-exports
├── core.py              # Lexer: threads state over a whole document
├── transitions.py       # classify(): ordered transition table
├── diagnostics.py       # expecting(): guidance after a rejection
└── classifiers/         # Pure line recognizers
    ├── headers.py       # Scenario/Story, Background, (Shared) Examples
    ├── steps.py         # Given, When, Then, And, But
    ├── items.py         # Table rows, bullets, doc-string markers
    └── tags.py          # @tag lines

Usage:
    >>> from pepino.lexer import classify, expecting
    >>> state = classify(None, "Scenario: Login succeeds")
    >>> state = classify(state, "Then it works")
    >>> classify(state, "Given a user") is None
    True
    >>> expecting(state)
    'Expecting Table row, Bullet, Then, And or But step'

"""

from pepino.lexer.core import Lexer
from pepino.lexer.diagnostics import expecting
from pepino.lexer.transitions import TRANSITIONS, Transition, classify

__all__ = ["Lexer", "TRANSITIONS", "Transition", "classify", "expecting"]
