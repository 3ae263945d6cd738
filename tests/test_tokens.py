# =============================================================================
# test_tokens.py - Token Model Tests
# =============================================================================
# Tests for TokenType, the keyword/spelling tables and Token construction.
# =============================================================================

import dataclasses

import pytest
from frost.errors import InvalidArgumentError, SourceLocation
from frost.tokens import (
    FIXED_LEXEMES,
    KEYWORDS,
    LEXEME_KINDS,
    Token,
    TokenType,
)


class TestTokenTypes:
    """Test the closed token-kind catalogue."""

    def test_keyword_table(self):
        assert set(KEYWORDS) == {
            "if", "else", "while", "for", "return",
            "int", "float", "char", "void", "struct", "const",
        }

    def test_every_kind_has_lexeme_or_spelling(self):
        """A kind either carries text or has a fixed spelling (or is EOF)."""
        for kind in TokenType:
            if kind is TokenType.EOF:
                continue
            assert (kind in LEXEME_KINDS) != (kind in FIXED_LEXEMES), kind

    def test_pointer_kinds_share_operator_spelling(self):
        assert FIXED_LEXEMES[TokenType.POINTER] == FIXED_LEXEMES[TokenType.MULTIPLY]
        assert FIXED_LEXEMES[TokenType.ADDRESS] == FIXED_LEXEMES[TokenType.BITWISE_AND]


class TestTokenCreation:
    """Test Token construction and validation."""

    def test_create_identifier(self):
        token = Token(TokenType.IDENTIFIER, "foo")
        assert token.type == TokenType.IDENTIFIER
        assert token.lexeme == "foo"
        assert token.line == 1
        assert token.column == 1

    def test_create_fixed_form_without_lexeme(self):
        token = Token(TokenType.SEMICOLON)
        assert token.lexeme is None
        assert token.text == ";"

    def test_create_eof(self):
        token = Token(TokenType.EOF)
        assert token.lexeme is None
        assert token.text == ""
        assert token.is_eof()

    @pytest.mark.parametrize("kind", [
        TokenType.IDENTIFIER,
        TokenType.WHILE,
        TokenType.LITERAL_STRING,
        TokenType.ERROR,
        TokenType.COMMENT,
    ])
    def test_missing_required_lexeme(self, kind):
        with pytest.raises(InvalidArgumentError):
            Token(kind, None)

    @pytest.mark.parametrize("kind", [
        TokenType.SEMICOLON,
        TokenType.LESS_EQUAL,
        TokenType.PLUS,
        TokenType.POINTER,
        TokenType.EOF,
    ])
    def test_fixed_form_rejects_lexeme(self, kind):
        """Fixed-form kinds and EOF are spelled by their kind alone."""
        with pytest.raises(InvalidArgumentError):
            Token(kind, "junk")

    def test_invalid_type(self):
        with pytest.raises(InvalidArgumentError):
            Token("IDENTIFIER", "foo")

    def test_non_string_lexeme(self):
        with pytest.raises(InvalidArgumentError):
            Token(TokenType.LITERAL_INT, 42)

    def test_immutable(self):
        token = Token(TokenType.IDENTIFIER, "foo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.lexeme = "bar"

    def test_independent_lexemes(self):
        """Dropping one token leaves every other token's lexeme intact."""
        first = Token(TokenType.IDENTIFIER, "foo")
        second = Token(TokenType.IDENTIFIER, first.lexeme)
        del first
        assert second.lexeme == "foo"


class TestTokenHelpers:
    """Test convenience properties and predicates."""

    def test_repr_with_lexeme(self):
        token = Token(TokenType.IDENTIFIER, "x", line=3, column=7)
        assert repr(token) == "Token(IDENTIFIER, 'x', 3:7)"

    def test_repr_without_lexeme(self):
        token = Token(TokenType.LESS_EQUAL, line=1, column=2)
        assert repr(token) == "Token(LESS_EQUAL, 1:2)"

    def test_location(self):
        token = Token(TokenType.IDENTIFIER, "x", line=2, column=5, filename="a.fr")
        assert token.location == SourceLocation("a.fr", 2, 5)

    def test_predicates(self):
        assert Token(TokenType.RETURN, "return").is_keyword()
        assert not Token(TokenType.IDENTIFIER, "returns").is_keyword()
        assert Token(TokenType.LITERAL_FLOAT, "1.5").is_literal()
        assert Token(TokenType.DIVIDE_ASSIGN).is_assignment_operator()
        assert not Token(TokenType.EQUAL).is_assignment_operator()
        assert Token(TokenType.ERROR, "@").is_error()

    def test_equality(self):
        assert Token(TokenType.EOF, line=2, column=1) == Token(TokenType.EOF, line=2, column=1)
