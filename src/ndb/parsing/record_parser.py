"""Assembler grouping the tuples of an ndb file into records."""

from __future__ import annotations

import logging

from ndb.errors import InvalidTuple, ParseError
from ndb.parsing.tuple_parser import TupleParser
from ndb.types import Record, RecordSet, Tuple

logger = logging.getLogger(__name__)


class RecordParser:
    """Parser for the records of a whole ndb file.

    A line starting with non-whitespace starts a new record. A line
    starting with whitespace continues the record in progress. Empty lines
    and lines starting with '#' are skipped without ending a record.
    Records that end up with no tuples are dropped, so a file with N
    record-start lines yields exactly N records.
    """

    def __init__(self) -> None:
        self.tuple_parser = TupleParser()

    def parse(self, text: str, filename: str | None = None) -> RecordSet:
        """Parse file text into a RecordSet.

        Args:
            text: Decoded file contents.
            filename: Source file name, used in error messages.

        Returns:
            The records in file order.

        Raises:
            ParseError: On the first line holding a word that is not attr=value.
        """
        records: list[Record] = []
        current: list[Tuple] = []

        for lineno, line in enumerate(text.split("\n"), start=1):
            if line.endswith("\r"):
                line = line[:-1]
            if not line or line[0] == "#":
                continue

            if not line[0].isspace():
                if current:
                    records.append(Record(tuple(current)))
                current = []

            try:
                current.extend(self.tuple_parser.parse_line(line))
            except InvalidTuple as e:
                raise ParseError(filename, lineno, line, e) from e

        if current:
            records.append(Record(tuple(current)))

        logger.debug("parsed %d records from %s", len(records), filename or "<text>")
        return RecordSet(tuple(records))

    def parse_bytes(
        self, data: bytes, filename: str | None = None, encoding: str = "utf-8"
    ) -> RecordSet:
        """Decode raw file bytes and parse them.

        Undecodable bytes are replaced rather than treated as an error.
        """
        return self.parse(data.decode(encoding, errors="replace"), filename)
