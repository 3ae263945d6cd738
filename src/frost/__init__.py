"""
Frost - Lexical Analyzer for the Frost Compiler
===============================================

This package turns Frost source text (a small C-like language) into the
token stream consumed by the Frost parser.

Main Components
---------------
- **tokens**: TokenType, the keyword table and the immutable Token
- **lexer**: the Lexer state machine and the tokenize() helper
- **diagnostics**: ErrorCollector, which receives every lexical error
- **errors**: the exception hierarchy

Pipeline
--------
    Source text → Lexer → Token stream → Parser

The lexer never stops on bad input: unknown characters and unterminated
literals become ERROR tokens and are recorded in the ErrorCollector.

Quick Start
-----------
    >>> from frost import tokenize
    >>> [t.text for t in tokenize("x <= 42;")]
    ['x', '<=', '42', ';', '']

Or from the command line:
    $ frostlex main.fr
"""

__version__ = "0.1.0"
__author__ = "Frost Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from frost.errors import (
    FrostError,
    SourceLocation,
    InvalidArgumentError,
    LexerClosedError,
    LexicalError,
    InvalidCharacterError,
    UnterminatedStringError,
    UnterminatedCharError,
    UnterminatedCommentError,
    TooManyErrors,
)
from frost.diagnostics import ErrorCollector
from frost.tokens import Token, TokenType, KEYWORDS, FIXED_LEXEMES
from frost.lexer import Lexer, LexerOptions, tokenize

__all__ = [
    "__version__",
    # Lexer
    "Lexer",
    "LexerOptions",
    "tokenize",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "FIXED_LEXEMES",
    # Diagnostics
    "ErrorCollector",
    # Errors
    "FrostError",
    "SourceLocation",
    "InvalidArgumentError",
    "LexerClosedError",
    "LexicalError",
    "InvalidCharacterError",
    "UnterminatedStringError",
    "UnterminatedCharError",
    "UnterminatedCommentError",
    "TooManyErrors",
]
