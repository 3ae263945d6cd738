"""
Diagnostics Collection
======================

The lexer never prints its errors. Instead every lexical problem it finds
is handed to an ErrorCollector, which the caller can inspect, share between
several lexers, or format for display once lexing is done.

Example:
    collector = ErrorCollector(max_errors=50)
    lexer = Lexer(source, diagnostics=collector)
    tokens = list(lexer.tokenize())

    if collector.has_errors():
        print(collector.report())
"""

from typing import Iterator, Optional
import logging

from frost.errors import LexicalError, TooManyErrors

logger = logging.getLogger(__name__)


class ErrorCollector:
    """
    Collects lexical errors for batch reporting.

    Attributes:
        errors: Recorded LexicalError instances, in source order
        max_errors: Limit after which add() raises TooManyErrors
            (None for no limit)
    """

    def __init__(self, max_errors: Optional[int] = None):
        if max_errors is not None and max_errors < 1:
            raise ValueError(f"max_errors must be positive, got {max_errors}")
        self.errors: list[LexicalError] = []
        self.max_errors = max_errors

    def add(self, error: LexicalError) -> None:
        """
        Add an error to the collection.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self.errors.append(error)
        logger.debug(f"recorded: {error.message} at {error.location}")
        if self.max_errors is not None and len(self.errors) >= self.max_errors:
            raise TooManyErrors(f"Too many errors ({self.max_errors}), stopping")

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def error_count(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[LexicalError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def report(self) -> str:
        """Format every error, each followed by a blank line, then a count."""
        lines = []
        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        noun = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {noun}")
        return "\n".join(lines)

    def clear(self) -> None:
        self.errors.clear()
