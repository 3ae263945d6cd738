"""
Frost Tokens
============

Token kinds and the immutable Token value produced by the lexer.

Token Categories
----------------
- Identifiers: variable, function and type names
- Keywords: if, else, while, for, return, int, float, char, void,
  struct, const
- Literals: integer, floating point, 'character', "string"
- Operators: arithmetic, relational, logical, assignment, bitwise
- Delimiters: ; , . : :: ( ) { } [ ]
- Structural: COMMENT, ERROR, EOF

Lexemes
-------
Kinds whose spelling varies (identifiers, keywords, literals, comments,
errors) carry the source text in ``lexeme``. Operators, delimiters and EOF
have a fixed spelling that is implied by the kind, so their ``lexeme`` is
None; ``Token.text`` returns the spelling for either case.

Pointer and Address Kinds
-------------------------
``*`` and ``&`` are ambiguous in C-like grammars (multiply vs. dereference,
bitwise and vs. address-of). The lexer is context free and always produces
MULTIPLY and BITWISE_AND. POINTER and ADDRESS exist so the parser can
re-tag a token once it knows it is in a unary position.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from frost.errors import InvalidArgumentError, SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token kinds recognized by the Frost lexer."""

    # === Identifiers ===
    IDENTIFIER = auto()

    # === Keywords ===
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    FOR = auto()
    RETURN = auto()
    INT = auto()
    FLOAT = auto()
    CHAR = auto()
    VOID = auto()
    STRUCT = auto()
    CONST = auto()

    # === Literals ===
    LITERAL_INT = auto()        # 42
    LITERAL_FLOAT = auto()      # 3.14, 1e9
    LITERAL_CHAR = auto()       # 'a'
    LITERAL_STRING = auto()     # "text"

    # === Arithmetic Operators ===
    PLUS = auto()               # +
    MINUS = auto()              # -
    MULTIPLY = auto()           # *
    DIVIDE = auto()             # /
    MODULO = auto()             # %

    # === Relational Operators ===
    EQUAL = auto()              # ==
    NOT_EQUAL = auto()          # !=
    LESS = auto()               # <
    GREATER = auto()            # >
    LESS_EQUAL = auto()         # <=
    GREATER_EQUAL = auto()      # >=

    # === Logical Operators ===
    AND = auto()                # &&
    OR = auto()                 # ||
    NOT = auto()                # !

    # === Assignment Operators ===
    ASSIGN = auto()             # =
    PLUS_ASSIGN = auto()        # +=
    MINUS_ASSIGN = auto()       # -=
    MULTIPLY_ASSIGN = auto()    # *=
    DIVIDE_ASSIGN = auto()      # /=

    # === Bitwise Operators ===
    BITWISE_AND = auto()        # &
    BITWISE_OR = auto()         # |
    BITWISE_XOR = auto()        # ^
    BITWISE_NOT = auto()        # ~
    LEFT_SHIFT = auto()         # <<
    RIGHT_SHIFT = auto()        # >>

    # === Pointer Operators (assigned by the parser) ===
    POINTER = auto()            # * in unary position
    ADDRESS = auto()            # & in unary position

    # === Delimiters ===
    SEMICOLON = auto()          # ;
    COMMA = auto()              # ,
    PERIOD = auto()             # .
    COLON = auto()              # :
    DOUBLE_COLON = auto()       # ::
    LEFT_PAREN = auto()         # (
    RIGHT_PAREN = auto()        # )
    LEFT_BRACE = auto()         # {
    RIGHT_BRACE = auto()        # }
    LEFT_BRACKET = auto()       # [
    RIGHT_BRACKET = auto()      # ]

    # === Structural ===
    COMMENT = auto()
    ERROR = auto()
    EOF = auto()


# =============================================================================
# Keyword and Spelling Tables
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "return": TokenType.RETURN,
    "int": TokenType.INT,
    "float": TokenType.FLOAT,
    "char": TokenType.CHAR,
    "void": TokenType.VOID,
    "struct": TokenType.STRUCT,
    "const": TokenType.CONST,
}

FIXED_LEXEMES: dict[TokenType, str] = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.MULTIPLY: "*",
    TokenType.DIVIDE: "/",
    TokenType.MODULO: "%",
    TokenType.EQUAL: "==",
    TokenType.NOT_EQUAL: "!=",
    TokenType.LESS: "<",
    TokenType.GREATER: ">",
    TokenType.LESS_EQUAL: "<=",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.AND: "&&",
    TokenType.OR: "||",
    TokenType.NOT: "!",
    TokenType.ASSIGN: "=",
    TokenType.PLUS_ASSIGN: "+=",
    TokenType.MINUS_ASSIGN: "-=",
    TokenType.MULTIPLY_ASSIGN: "*=",
    TokenType.DIVIDE_ASSIGN: "/=",
    TokenType.BITWISE_AND: "&",
    TokenType.BITWISE_OR: "|",
    TokenType.BITWISE_XOR: "^",
    TokenType.BITWISE_NOT: "~",
    TokenType.LEFT_SHIFT: "<<",
    TokenType.RIGHT_SHIFT: ">>",
    TokenType.POINTER: "*",
    TokenType.ADDRESS: "&",
    TokenType.SEMICOLON: ";",
    TokenType.COMMA: ",",
    TokenType.PERIOD: ".",
    TokenType.COLON: ":",
    TokenType.DOUBLE_COLON: "::",
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACE: "{",
    TokenType.RIGHT_BRACE: "}",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
}

LITERAL_KINDS = frozenset({
    TokenType.LITERAL_INT,
    TokenType.LITERAL_FLOAT,
    TokenType.LITERAL_CHAR,
    TokenType.LITERAL_STRING,
})

# Kinds that must carry their source text
LEXEME_KINDS = frozenset(
    {TokenType.IDENTIFIER, TokenType.COMMENT, TokenType.ERROR}
    | set(KEYWORDS.values())
    | LITERAL_KINDS
)

ASSIGNMENT_KINDS = frozenset({
    TokenType.ASSIGN,
    TokenType.PLUS_ASSIGN,
    TokenType.MINUS_ASSIGN,
    TokenType.MULTIPLY_ASSIGN,
    TokenType.DIVIDE_ASSIGN,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Frost source code.

    Tokens are immutable. Their lexeme is an ordinary Python string, so it
    never aliases the lexer's buffer and outlives both the lexer and any
    other token.

    Attributes:
        type: The TokenType classification
        lexeme: Source text for LEXEME_KINDS, None for fixed-form kinds
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file

    Raises:
        InvalidArgumentError: If type is not a TokenType, or the kind
            requires a lexeme and none was given
    """
    type: TokenType
    lexeme: Optional[str] = None
    line: int = 1
    column: int = 1
    filename: str = "<input>"

    def __post_init__(self) -> None:
        if not isinstance(self.type, TokenType):
            raise InvalidArgumentError(
                f"token type must be a TokenType, got {self.type!r}"
            )
        if self.lexeme is None:
            if self.type in LEXEME_KINDS:
                raise InvalidArgumentError(
                    f"{self.type.name} token requires a lexeme"
                )
        elif self.type not in LEXEME_KINDS:
            raise InvalidArgumentError(
                f"{self.type.name} token takes no lexeme, got {self.lexeme!r}"
            )
        elif not isinstance(self.lexeme, str):
            raise InvalidArgumentError(
                f"lexeme must be a string, got {type(self.lexeme).__name__}"
            )

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.lexeme is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @property
    def text(self) -> str:
        """The token's spelling: its lexeme, or the fixed form for its kind."""
        if self.lexeme is not None:
            return self.lexeme
        return FIXED_LEXEMES.get(self.type, "")

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        return self.type in KEYWORDS.values()

    def is_literal(self) -> bool:
        return self.type in LITERAL_KINDS

    def is_assignment_operator(self) -> bool:
        return self.type in ASSIGNMENT_KINDS

    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    def is_eof(self) -> bool:
        return self.type is TokenType.EOF
