"""ContextVar-based lexer configuration for Pepino.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The pure classifier takes no configuration; only the line lexer reads it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pepino.config import LexConfig, lex_config_context
    from pepino.lexer import Lexer

    with lex_config_context(LexConfig(strict=False)):
        tokens = list(Lexer(source).tokenize())

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        skip_blank_lines: Drop whitespace-only lines outside doc-strings
        comment_prefix: Lines starting with this prefix (after leading
            whitespace) are dropped outside doc-strings. None disables.
        skip_preamble: Drop rejected lines until the first line is accepted
            (feature title and free-form description)
        strict: Raise UnparsableLineError on an invalid line. When False the
            line is logged and skipped.

    """

    skip_blank_lines: bool = True
    comment_prefix: str | None = "#"
    skip_preamble: bool = True
    strict: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"strict": False, "unknown_key": 1})
            >>> config.strict
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(skip_preamble=False)):
        ...     tokens = tokenize("Scenario: x")

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
