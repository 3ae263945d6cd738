# =============================================================================
# test_diagnostics.py - Error Hierarchy and ErrorCollector Tests
# =============================================================================

import pytest
from frost.diagnostics import ErrorCollector
from frost.errors import (
    FrostError,
    InvalidArgumentError,
    InvalidCharacterError,
    LexerClosedError,
    LexicalError,
    SourceLocation,
    TooManyErrors,
    UnterminatedCommentError,
    UnterminatedStringError,
)


class TestErrorHierarchy:
    """Test exception relationships and message formatting."""

    def test_all_errors_are_frost_errors(self):
        assert issubclass(InvalidArgumentError, FrostError)
        assert issubclass(LexerClosedError, InvalidArgumentError)
        assert issubclass(UnterminatedStringError, LexicalError)
        assert issubclass(TooManyErrors, FrostError)

    def test_source_location_str(self):
        assert str(SourceLocation("main.fr", 4, 2)) == "main.fr:4:2"

    def test_message_without_location(self):
        error = LexicalError("something odd")
        assert str(error) == "error: something odd"

    def test_message_with_context_and_hint(self):
        error = UnterminatedStringError(
            '"abc',
            SourceLocation("main.fr", 1, 5),
            'x = "abc',
        )
        lines = str(error).split("\n")
        assert lines[0] == "main.fr:1:5: error: unterminated string literal"
        assert lines[1] == '    x = "abc'
        assert lines[2] == "        ^"
        assert lines[3].startswith("hint:")
        assert error.lexeme == '"abc'

    def test_invalid_character_shows_code(self):
        error = InvalidCharacterError("@")
        assert "0x40" in str(error)
        assert error.lexeme == "@"

    def test_closed_error_names_operation(self):
        assert "advance" in str(LexerClosedError("advance"))


class TestErrorCollector:
    """Test collection, limits and reporting."""

    def test_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.error_count() == 0
        assert collector.report() == "0 errors"

    def test_add(self):
        collector = ErrorCollector()
        collector.add(InvalidCharacterError("@"))
        assert collector.has_errors()
        assert len(collector) == 1
        assert [e.char for e in collector] == ["@"]

    def test_limit(self):
        collector = ErrorCollector(max_errors=2)
        collector.add(InvalidCharacterError("@"))
        with pytest.raises(TooManyErrors):
            collector.add(InvalidCharacterError("$"))
        # The error that hit the limit is still recorded
        assert collector.error_count() == 2

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            ErrorCollector(max_errors=0)

    def test_report(self):
        collector = ErrorCollector()
        collector.add(UnterminatedCommentError("/* x", SourceLocation("a.fr", 1, 1)))
        report = collector.report()
        assert "a.fr:1:1: error: unterminated block comment" in report
        assert report.endswith("\n\n1 error")

    def test_clear(self):
        collector = ErrorCollector()
        collector.add(InvalidCharacterError("@"))
        collector.clear()
        assert collector.error_count() == 0
        assert not collector.has_errors()
