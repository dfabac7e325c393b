"""Parsing module for the ndb file format."""

from ndb.parsing.line_lexer import LineLexer
from ndb.parsing.record_parser import RecordParser
from ndb.parsing.tuple_parser import TupleParser, parse_token

__all__ = [
    "LineLexer",
    "RecordParser",
    "TupleParser",
    "parse_token",
]
