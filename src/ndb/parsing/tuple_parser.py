"""Parser turning raw words into attr=value tuples."""

from __future__ import annotations

from ndb.errors import InvalidTuple
from ndb.parsing.line_lexer import LineLexer
from ndb.types import Tuple


def parse_token(token: str) -> Tuple:
    """Parse one raw word into a Tuple.

    The word is split on its first '=' only, so the value may itself
    contain '='. One leading and one trailing double quote are then trimmed
    from the value; quotes are not checked for balance.

    Raises:
        InvalidTuple: If the word has no '=' or an empty attribute.
    """
    attr, sep, val = token.partition("=")
    if not sep or not attr:
        raise InvalidTuple(token)
    if val.startswith('"'):
        val = val[1:]
    if val.endswith('"'):
        val = val[:-1]
    return Tuple(attr, val)


class TupleParser:
    """Parser for the tuples on a single ndb line."""

    def __init__(self) -> None:
        self.lexer = LineLexer()
        self.lexer.build()

    def parse_token(self, token: str) -> Tuple:
        """Parse one raw word into a Tuple."""
        return parse_token(token)

    def parse_line(self, line: str) -> list[Tuple]:
        """Tokenize a line and parse every word on it, in order.

        Raises:
            InvalidTuple: On the first word that is not attr=value.
        """
        return [parse_token(word) for word in self.lexer.words(line)]
