"""
Frost Error Hierarchy
=====================

This module defines the exception hierarchy for the Frost lexer.
All exceptions inherit from FrostError, allowing callers to catch all
Frost-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
FrostError (base)
├── InvalidArgumentError - API misuse (missing source, missing lexeme)
│   └── LexerClosedError - operation on a lexer that was closed
├── LexicalError - malformed source content
│   ├── InvalidCharacterError - character that starts no token
│   ├── UnterminatedStringError - missing closing double quote
│   ├── UnterminatedCharError - missing closing single quote
│   └── UnterminatedCommentError - block comment without */
└── TooManyErrors - diagnostics limit reached

Two Kinds of Failure
--------------------
InvalidArgumentError signals a programming error at the call site and is
always raised. LexicalError describes bad *source text*; by default the
lexer does not raise it but records it in its ErrorCollector and emits an
ERROR token, so lexing always runs to EOF. In strict mode the lexer raises
the first LexicalError instead.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class FrostError(Exception):
    """
    Base exception for all Frost errors.

        try:
            tokens = tokenize(source)
        except FrostError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# API Misuse
# =============================================================================

class InvalidArgumentError(FrostError):
    """
    A required argument was absent or of the wrong type.

    Raised by Token and Lexer construction, and by any lexer operation
    once the lexer has been closed. These errors are never recorded as
    diagnostics; they go straight to the immediate caller.
    """
    pass


class LexerClosedError(InvalidArgumentError):
    """Operation attempted on a lexer after close()."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"cannot {operation}: lexer is closed")


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(FrostError):
    """
    Base exception for malformed source text.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
        lexeme: The offending text (single character or partial literal)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        lexeme: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        self.lexeme = lexeme
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.fr:3:9: error: invalid character '@' (0x40)
                x = y @ z;
                      ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidCharacterError(LexicalError):
    """
    Character that cannot start any token.

    The lexer consumes exactly one such character per error so that
    scanning always makes progress.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character {char!r} (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
            lexeme=char,
        )


class UnterminatedStringError(LexicalError):
    """
    String literal not closed before the end of the line or file.

    Example:
        char s = "hello    // Missing closing quote
    """

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
            lexeme=lexeme,
        )


class UnterminatedCharError(LexicalError):
    """Character literal not closed before the end of the line or file."""

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated character literal",
            location=location,
            hint="add closing ' to complete the character literal",
            source_line=source_line,
            lexeme=lexeme,
        )


class UnterminatedCommentError(LexicalError):
    """Block comment reached end of input without its closing */."""

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated block comment",
            location=location,
            hint="add closing */ to terminate the comment",
            source_line=source_line,
            lexeme=lexeme,
        )


# =============================================================================
# Diagnostics Limit
# =============================================================================

class TooManyErrors(FrostError):
    """
    Raised by ErrorCollector when its error limit has been reached.

    This is the one way a lexical problem can stop a default-mode lexer:
    the caller asked for it by configuring max_errors.
    """

    def __init__(self, message: str = "Too many errors"):
        self.message = message
        super().__init__(message)
