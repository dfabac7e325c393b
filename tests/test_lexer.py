"""Tests for the ndb line lexer."""

import pytest

from ndb.parsing import LineLexer


@pytest.fixture
def lexer():
    lexer = LineLexer()
    lexer.build()
    return lexer


class TestLineLexer:
    """Tests for splitting a line into raw words."""

    def test_simple_words(self, lexer):
        """Whitespace separates words."""
        assert lexer.words("ants=small cats=medium") == ["ants=small", "cats=medium"]

    def test_quoted_span_stays_in_one_word(self, lexer):
        """A quoted value containing spaces is a single word, quotes kept."""
        words = lexer.words('ants=small cats=medium dogs="very large" aliens=')
        assert words == ["ants=small", "cats=medium", 'dogs="very large"', "aliens="]

    def test_token_types(self, lexer):
        tokens = lexer.tokenize("a=1 b=2")
        assert [t.type for t in tokens] == ["WORD", "WORD"]

    def test_leading_and_trailing_whitespace(self, lexer):
        assert lexer.words("\t  a=1   b=2  \t") == ["a=1", "b=2"]

    def test_comment_removed(self, lexer):
        """A '#' outside quotes starts a comment."""
        assert lexer.words("one=one # a comment") == ["one=one"]

    def test_comment_directly_after_word(self, lexer):
        assert lexer.words("one=one#comment two=two") == ["one=one"]

    def test_hash_inside_quotes_is_literal(self, lexer):
        assert lexer.words('a="x # y" b=c') == ['a="x # y"', "b=c"]

    def test_quote_toggles_mid_word(self, lexer):
        """Quotes toggle anywhere in a word, not only at its edges."""
        assert lexer.words('a=b"c d"e f=g') == ['a=b"c d"e', "f=g"]

    def test_unterminated_quote_yields_partial_word(self, lexer):
        assert lexer.words('a=1 b="open ended') == ["a=1", 'b="open ended']

    def test_empty_line(self, lexer):
        assert lexer.words("") == []

    def test_comment_only_line(self, lexer):
        assert lexer.words("   # nothing here") == []

    def test_non_ascii_whitespace_separates(self, lexer):
        assert lexer.words("a=1\u00a0b=2") == ["a=1", "b=2"]

    def test_newlines_separate(self, lexer):
        assert lexer.words("a=1\nb=2 # note\nc=3") == ["a=1", "b=2", "c=3"]
