"""
Frost Lexer (Tokenizer)
=======================

This module converts Frost source text into a stream of tokens for the
parser. Each call to ``Lexer.next_token()`` runs one pass of a small state
machine from the current cursor and returns exactly one token; nothing is
held back between calls.

Scanning Rules
--------------
- Whitespace (space, tab, CR, LF) and comments are skipped
- Identifiers: [A-Za-z_][A-Za-z0-9_]*, checked against the keyword table
- Numbers: digits, optionally '.' digits, optionally an exponent
  (e/E, optional sign, digits). Anything else ends the number.
- Strings "..." and characters '...': the lexeme is the verbatim source,
  quotes and escapes included. A backslash escapes the next character.
- Operators: longest match first (``<=`` never becomes ``<`` ``=``)

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

Error Recovery
--------------
Bad input never stops the lexer. A character that starts no token becomes
an ERROR token holding that one character. An unterminated string,
character literal or block comment becomes an ERROR token holding the
partial text. In both cases a LexicalError is also added to the lexer's
ErrorCollector. Pass ``LexerOptions(strict=True)`` to raise instead.

End of Input
------------
The source behaves like a NUL-terminated buffer: the cursor character at
the end is ``"\\0"``, and an embedded NUL also ends input. Once EOF has been
returned every further call returns EOF again.

Example Usage
-------------
>>> from frost.lexer import Lexer
>>> with Lexer("while (x <= 10) x += 1;") as lexer:
...     for token in lexer.tokenize():
...         print(token)
Token(WHILE, 'while', 1:1)
Token(LEFT_PAREN, 1:7)
Token(IDENTIFIER, 'x', 1:8)
Token(LESS_EQUAL, 1:10)
Token(LITERAL_INT, '10', 1:13)
Token(RIGHT_PAREN, 1:15)
Token(IDENTIFIER, 'x', 1:17)
Token(PLUS_ASSIGN, 1:19)
Token(LITERAL_INT, '1', 1:22)
Token(SEMICOLON, 1:23)
Token(EOF, 1:24)
"""

from dataclasses import dataclass
from typing import Iterator, Optional
import logging
import string

from frost.diagnostics import ErrorCollector
from frost.errors import (
    InvalidArgumentError,
    InvalidCharacterError,
    LexerClosedError,
    LexicalError,
    SourceLocation,
    UnterminatedCharError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from frost.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

NUL = "\0"


# =============================================================================
# Operator Tables
# =============================================================================

# Two-character operators, tried before any single-character match
DOUBLE_OPERATORS: dict[str, TokenType] = {
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "+=": TokenType.PLUS_ASSIGN,
    "-=": TokenType.MINUS_ASSIGN,
    "*=": TokenType.MULTIPLY_ASSIGN,
    "/=": TokenType.DIVIDE_ASSIGN,
    "<<": TokenType.LEFT_SHIFT,
    ">>": TokenType.RIGHT_SHIFT,
    "::": TokenType.DOUBLE_COLON,
}

SINGLE_OPERATORS: dict[str, TokenType] = {
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,
    "!": TokenType.NOT,
    "&": TokenType.BITWISE_AND,
    "|": TokenType.BITWISE_OR,
    "^": TokenType.BITWISE_XOR,
    "~": TokenType.BITWISE_NOT,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.PERIOD,
    ":": TokenType.COLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
}


# =============================================================================
# Lexer Options
# =============================================================================

@dataclass
class LexerOptions:
    """
    Configuration for a Lexer.

    Attributes:
        filename: Name used in token and error locations
        strict: Raise the first LexicalError instead of emitting ERROR tokens
        keep_comments: Emit COMMENT tokens instead of skipping comments
        max_errors: Error limit for the lexer's own ErrorCollector
            (ignored when a collector is passed in)
    """
    filename: str = "<input>"
    strict: bool = False
    keep_comments: bool = False
    max_errors: Optional[int] = None


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Frost source code.

    Usage:
        lexer = Lexer(source_text, LexerOptions(filename="main.fr"))
        token = lexer.next_token()
        while not token.is_eof():
            ...
            token = lexer.next_token()
        lexer.close()

    Attributes:
        source: The source code being tokenized (None once closed)
        options: The LexerOptions in effect
        diagnostics: ErrorCollector receiving every LexicalError
    """

    WHITESPACE = " \t\r\n"

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    def __init__(
        self,
        source: str,
        options: Optional[LexerOptions] = None,
        diagnostics: Optional[ErrorCollector] = None,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The complete, already decoded source text
            options: Lexer configuration (defaults to LexerOptions())
            diagnostics: Collector for lexical errors; a fresh one is
                created when omitted

        Raises:
            InvalidArgumentError: If source is None or not a string
        """
        if source is None:
            raise InvalidArgumentError("source must not be None")
        if not isinstance(source, str):
            raise InvalidArgumentError(
                f"source must be a string, got {type(source).__name__}"
            )

        self.options = options or LexerOptions()
        if diagnostics is None:
            diagnostics = ErrorCollector(max_errors=self.options.max_errors)
        self.diagnostics = diagnostics

        self.source: Optional[str] = source
        self.source_size = len(source)
        self.index = 0
        self.current_char = source[0] if source else NUL

        # Position tracking for tokens and diagnostics
        self.line = 1
        self.column = 1

        self._closed = False
        logger.debug(f"lexer created for {self.options.filename} ({self.source_size} chars)")

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """
        Release the source text. The lexer cannot be used afterwards.

        Raises:
            LexerClosedError: If the lexer was already closed
        """
        self._check_open("close")
        self.source = None
        self._closed = True
        logger.debug(f"lexer closed for {self.options.filename}")

    def __enter__(self) -> "Lexer":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._closed:
            self.close()

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise LexerClosedError(operation)

    # =========================================================================
    # Cursor Primitives
    # =========================================================================

    def advance(self) -> None:
        """
        Move the cursor one character forward.

        A no-op at end of input, so calling it repeatedly past EOF is safe.
        """
        self._check_open("advance")
        if self.index < self.source_size and self.current_char != NUL:
            if self.current_char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.index += 1
            self.current_char = self._char_at(self.index)

    def peek(self, offset: int = 1) -> str:
        """
        Look at the character ``offset`` positions from the cursor.

        The read position is clamped to the source bounds; reading at or
        past the end returns ``"\\0"``.
        """
        self._check_open("peek")
        pos = min(max(self.index + offset, 0), self.source_size)
        return self._char_at(pos)

    def _char_at(self, pos: int) -> str:
        if pos >= self.source_size:
            return NUL
        return self.source[pos]

    def _at_comment_start(self) -> bool:
        return self.current_char == "/" and self.peek() in "/*"

    def skip_whitespace(self) -> None:
        """
        Skip whitespace and comments up to the next significant character.

        Stops in front of a comment when ``keep_comments`` is enabled, and
        in front of a block comment that never closes; next_token() turns
        either into a token (the latter into an ERROR token carrying the
        partial comment text).
        """
        self._check_open("skip whitespace")
        while self.current_char != NUL:
            if self.current_char in self.WHITESPACE:
                self.advance()
                continue

            if (
                self._at_comment_start()
                and not self.options.keep_comments
                and self._comment_terminated()
            ):
                self._consume_comment()
                continue

            break

    def _comment_terminated(self) -> bool:
        """Check whether the comment at the cursor ends before end of input."""
        if self.peek() == "/":
            return True
        end = self.source.find("*/", self.index + 2)
        if end == -1:
            return False
        nul = self.source.find(NUL, self.index + 2, end)
        return nul == -1

    def _consume_comment(self) -> bool:
        """
        Consume one comment starting at the cursor.

        Returns:
            False if a block comment ran into end of input
        """
        self.advance()
        if self.current_char == "/":
            while self.current_char not in ("\n", NUL):
                self.advance()
            return True

        self.advance()  # consume *
        while self.current_char != NUL:
            if self.current_char == "*" and self.peek() == "/":
                self.advance()
                self.advance()
                return True
            self.advance()
        return False

    # =========================================================================
    # Token Dispatch
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EOF once (and every time after) input is
            exhausted

        Raises:
            LexicalError: Only in strict mode
            TooManyErrors: If the ErrorCollector limit is reached
        """
        self.skip_whitespace()

        line, column, start = self.line, self.column, self.index
        char = self.current_char

        if char == NUL:
            return self._make_token(TokenType.EOF, None, line, column)

        if self._at_comment_start():
            return self._scan_comment(line, column, start)

        if char in self.IDENT_START:
            return self._scan_identifier(line, column)

        if char in string.digits:
            return self._scan_number(line, column, start)

        if char in "'\"":
            return self._scan_quoted(line, column, start)

        return self._scan_operator(line, column)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EOF.

        Yields:
            Token objects representing each lexical element
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_identifier(self, line: int, column: int) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are matched exactly, so ``while1`` and ``While`` are
        identifiers.
        """
        chars = []
        while self.current_char in self.IDENT_CHARS:
            chars.append(self.current_char)
            self.advance()

        name = "".join(chars)
        return self._make_token(KEYWORDS.get(name, TokenType.IDENTIFIER), name, line, column)

    def _scan_number(self, line: int, column: int, start: int) -> Token:
        """
        Scan an integer or floating-point literal.

        Handles:
        - Integer: 123
        - Fraction: 1.5 (a '.' must be followed by a digit)
        - Exponent: 1e9, 2.5E-3 (the exponent needs at least one digit)
        """
        token_type = TokenType.LITERAL_INT
        self._skip_digits()

        if self.current_char == "." and self.peek() in string.digits:
            token_type = TokenType.LITERAL_FLOAT
            self.advance()
            self._skip_digits()

        if self.current_char in "eE":
            digit_offset = 2 if self.peek(1) in "+-" else 1
            if self.peek(digit_offset) in string.digits:
                token_type = TokenType.LITERAL_FLOAT
                for _ in range(digit_offset):
                    self.advance()
                self._skip_digits()

        return self._make_token(token_type, self.source[start:self.index], line, column)

    def _skip_digits(self) -> None:
        while self.current_char in string.digits:
            self.advance()

    def _scan_quoted(self, line: int, column: int, start: int) -> Token:
        """
        Scan a string or character literal.

        The lexeme keeps the quotes and escape sequences exactly as written;
        decoding escapes is left to later stages. A raw line feed or end of
        input before the closing quote makes the literal unterminated.
        """
        quote = self.current_char
        self.advance()  # consume opening quote

        while self.current_char not in (quote, "\n", NUL):
            if self.current_char == "\\":
                self.advance()  # consume backslash
                if self.current_char == NUL:
                    break
            self.advance()

        if self.current_char == quote:
            self.advance()  # consume closing quote
            token_type = TokenType.LITERAL_STRING if quote == '"' else TokenType.LITERAL_CHAR
            return self._make_token(token_type, self.source[start:self.index], line, column)

        partial = self.source[start:self.index]
        error_class = UnterminatedStringError if quote == '"' else UnterminatedCharError
        return self._error_token(
            error_class(partial, SourceLocation(self.options.filename, line, column),
                        self._line_text(start)),
            line,
            column,
        )

    def _scan_comment(self, line: int, column: int, start: int) -> Token:
        """
        Scan a comment that skip_whitespace() left in place.

        Produces a COMMENT token in keep_comments mode, or an ERROR token
        for a block comment that runs into end of input.
        """
        if self._consume_comment():
            return self._make_token(TokenType.COMMENT, self.source[start:self.index], line, column)

        partial = self.source[start:self.index]
        return self._error_token(
            UnterminatedCommentError(
                partial,
                SourceLocation(self.options.filename, line, column),
                self._line_text(start),
            ),
            line,
            column,
        )

    def _scan_operator(self, line: int, column: int) -> Token:
        """
        Scan an operator or delimiter using maximal munch.

        Two-character operators are tried first; an unknown character
        becomes a one-character ERROR token.
        """
        char = self.current_char
        pair = char + self.peek()

        if pair in DOUBLE_OPERATORS:
            self.advance()
            self.advance()
            return self._make_token(DOUBLE_OPERATORS[pair], None, line, column)

        start = self.index
        self.advance()

        if char in SINGLE_OPERATORS:
            return self._make_token(SINGLE_OPERATORS[char], None, line, column)

        return self._error_token(
            InvalidCharacterError(
                char,
                SourceLocation(self.options.filename, line, column),
                self._line_text(start),
            ),
            line,
            column,
        )

    # =========================================================================
    # Token Creation and Error Reporting
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        lexeme: Optional[str],
        line: int,
        column: int,
    ) -> Token:
        return Token(
            type=token_type,
            lexeme=lexeme,
            line=line,
            column=column,
            filename=self.options.filename,
        )

    def _error_token(self, error: LexicalError, line: int, column: int) -> Token:
        """Record a lexical error and reify it as an ERROR token."""
        self._report(error)
        return self._make_token(TokenType.ERROR, error.lexeme, line, column)

    def _report(self, error: LexicalError) -> None:
        logger.debug(f"lexical error at {error.location}: {error.message}")
        if self.options.strict:
            raise error
        self.diagnostics.add(error)

    def _line_text(self, pos: int) -> str:
        """Get the source line containing ``pos`` for error context."""
        line_start = self.source.rfind("\n", 0, pos) + 1
        line_end = self.source.find("\n", pos)
        if line_end == -1:
            line_end = self.source_size
        return self.source[line_start:line_end]


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    strict: bool = False,
    keep_comments: bool = False,
    max_errors: Optional[int] = None,
    diagnostics: Optional[ErrorCollector] = None,
) -> list[Token]:
    """
    Tokenize a complete source string.

    Args:
        source: The source text
        filename: Name used in locations
        strict: Raise on the first lexical error
        keep_comments: Include COMMENT tokens
        max_errors: Error limit for the collector created when no
            diagnostics are given
        diagnostics: Optional collector to receive lexical errors

    Returns:
        All tokens, ending with a single EOF token
    """
    options = LexerOptions(
        filename=filename,
        strict=strict,
        keep_comments=keep_comments,
        max_errors=max_errors,
    )
    with Lexer(source, options, diagnostics) as lexer:
        return list(lexer.tokenize())
