"""Line recognizers for the Pepino lexer.

Each recognizer is a pure function that tests one raw line against a single
lexical pattern and returns the extracted payload, or None (False for
recognizers without a payload). A line may satisfy several recognizers;
the transition table decides which one wins.
"""

from pepino.lexer.classifiers.headers import (
    is_background,
    is_examples,
    is_shared_examples,
    match_scenario,
    match_shared_examples_of,
)
from pepino.lexer.classifiers.items import (
    DOC_STRING_MARKER,
    match_bullet,
    match_doc_marker,
    match_table_row,
)
from pepino.lexer.classifiers.steps import (
    match_and,
    match_but,
    match_given,
    match_then,
    match_when,
)
from pepino.lexer.classifiers.tags import match_tags

__all__ = [
    "DOC_STRING_MARKER",
    "is_background",
    "is_examples",
    "is_shared_examples",
    "match_and",
    "match_bullet",
    "match_but",
    "match_doc_marker",
    "match_given",
    "match_scenario",
    "match_shared_examples_of",
    "match_table_row",
    "match_tags",
    "match_then",
    "match_when",
]
