"""Line lexer: drives the classifier over a whole document.

The classifier itself is pure and sees one line at a time. The Lexer is
the caller that threads its result from line to line, drops blank and
comment lines, tracks doc-string delimiters and turns rejections into
syntax errors.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from pepino.config import get_lex_config
from pepino.errors import UnparsableLineError
from pepino.lexer.classifiers import match_doc_marker
from pepino.lexer.diagnostics import expecting
from pepino.lexer.transitions import classify
from pepino.lines import DocString, Item, LineType, Step, TagLine
from pepino.location import SourceLocation
from pepino.tokens import Token
from pepino.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Classify every line of a specification document.

    Usage:
            >>> lexer = Lexer("Scenario: Login\\n  Given a user\\n  Then it works")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(BlockStart, 'Scenario: Login', 1:1)
        Token(Step, 'Given a user', 2:3)
        Token(Step, 'Then it works', 3:3)

    Behaviour follows the active LexConfig, captured when the Lexer is
    created.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_state",  # Classification of the last accepted line
        "_doc_string_host",  # Line enclosing the open doc-string, if any
        "_in_preamble",  # No block header or step accepted yet
        "_preamble_skipped",  # A preamble line was dropped; steps are description now
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Specification document text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._config = get_lex_config()
        self._state: LineType | None = None
        self._doc_string_host: LineType | None = None
        self._in_preamble = True
        self._preamble_skipped = False

    @property
    def state(self) -> LineType | None:
        """Classification of the last accepted line."""
        return self._state

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            One Token per accepted line

        Raises:
            UnparsableLineError: A line is invalid in its context and the
                config is strict
        """
        for lineno, line in enumerate(self._source.splitlines(), start=1):
            token = self._lex_line(line, lineno)
            if token is not None:
                yield token

    def _lex_line(self, line: str, lineno: int) -> Token | None:
        if self._doc_string_host is None and self._is_skippable(line):
            return None

        kind = classify(self._state, line)
        col = len(line) - len(line.lstrip()) + 1
        if kind is None:
            self._reject(line, lineno, col)
            return None

        if self._in_preamble and self._preamble_skipped and isinstance(kind, Step):
            # Feature description that happens to start with a step keyword
            logger.debug("Skipping preamble line %d: %r", lineno, line)
            return None

        self._advance(kind, line)
        return Token(
            kind=kind,
            value=line,
            lineno=lineno,
            col=col,
            source_file=self._source_file,
        )

    def _is_skippable(self, line: str) -> bool:
        text = line.strip()
        if not text:
            return self._config.skip_blank_lines
        prefix = self._config.comment_prefix
        return bool(prefix) and text.startswith(prefix)

    def _advance(self, kind: LineType, line: str) -> None:
        """Move to the next state, opening and closing doc-strings on their markers."""
        if not isinstance(kind, TagLine):
            self._in_preamble = False

        if isinstance(kind, Item) and isinstance(kind.item, DocString):
            if self._doc_string_host is None:
                self._doc_string_host = kind.line
            elif match_doc_marker(line) is not None:
                # Closing marker: what follows attaches to the step again
                self._state = self._doc_string_host
                self._doc_string_host = None
                return
        else:
            # A step or header ends an unterminated doc-string
            self._doc_string_host = None
        self._state = kind

    def _reject(self, line: str, lineno: int, col: int) -> None:
        if self._in_preamble and self._config.skip_preamble:
            self._preamble_skipped = True
            logger.debug("Skipping preamble line %d: %r", lineno, line)
            return

        expected = expecting(self._state)
        if not self._config.strict:
            location = SourceLocation(lineno, col, self._source_file)
            logger.warning(
                "%s: skipping unparsable line %r. %s", location, line.strip(), expected
            )
            return

        raise UnparsableLineError(
            line,
            self._state,
            expected,
            lineno=lineno,
            col_offset=col,
            source_file=self._source_file,
        )
