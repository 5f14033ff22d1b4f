"""
Unit tests for the tokenizer (csv_table.lexer).
"""

from __future__ import annotations

from csv_table.lexer import Token, TokenKind, tokenize


def _kinds(text: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(text)]


class TestTokenize:
    """Tests for tokenize()."""

    def test_empty_input_yields_nothing(self):
        """An empty string produces no tokens."""
        assert list(tokenize("")) == []

    def test_plain_run_is_one_token(self):
        """A run of ordinary characters is a single TEXT token."""
        assert list(tokenize("hello world")) == [Token(TokenKind.TEXT, "hello world")]

    def test_delimiters_and_quotes_are_single_tokens(self):
        """Each quote and comma is its own token."""
        assert list(tokenize('a,"b"')) == [
            Token(TokenKind.TEXT, "a"),
            Token(TokenKind.DELIMITER, ","),
            Token(TokenKind.QUOTE, '"'),
            Token(TokenKind.TEXT, "b"),
            Token(TokenKind.QUOTE, '"'),
        ]

    def test_crlf_is_one_newline_token(self):
        """CRLF is matched as one NEWLINE token."""
        tokens = list(tokenize("x\r\ny"))
        assert tokens[1] == Token(TokenKind.NEWLINE, "\r\n")
        assert len(tokens) == 3

    def test_lone_cr_and_lf(self):
        """Bare LF and bare CR are each a NEWLINE token."""
        assert [t.value for t in tokenize("a\nb\rc")] == ["a", "\n", "b", "\r", "c"]

    def test_lf_cr_is_two_newlines(self):
        """Only ``\\r\\n`` is a combined sequence; ``\\n\\r`` is two tokens."""
        assert _kinds("\n\r") == [TokenKind.NEWLINE, TokenKind.NEWLINE]

    def test_doubled_quote_is_two_tokens(self):
        """Escaping is the parser's job; the lexer sees two quotes."""
        assert _kinds('""') == [TokenKind.QUOTE, TokenKind.QUOTE]

    def test_tokens_cover_whole_input(self):
        """Concatenated token values reproduce the input exactly."""
        text = 'a,"b\r\nc""d"\re,\n'
        assert "".join(t.value for t in tokenize(text)) == text

    def test_unicode_text(self):
        """Non-ASCII text is an ordinary TEXT run."""
        assert list(tokenize("삼성전자")) == [Token(TokenKind.TEXT, "삼성전자")]
