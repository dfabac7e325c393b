"""Exceptions raised while loading and parsing ndb files."""

from __future__ import annotations


class NdbError(Exception):
    """Base class for all ndb errors."""


class DatabaseIOError(NdbError, OSError):
    """Reading or stat-ing a database file failed."""

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(f"{filename}: {message}")
        self.filename = filename


class NotFound(DatabaseIOError):
    """The database file does not exist."""

    def __init__(self, filename: str) -> None:
        super().__init__(filename, "no such file")


class InvalidTuple(NdbError, ValueError):
    """A token is not of the form attr=value."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid tuple {token!r}")
        self.token = token


class ParseError(NdbError, ValueError):
    """A line of a database file could not be parsed.

    Attributes:
        filename: File being parsed, or None for in-memory text.
        lineno: 1-based line number of the offending line.
        line: Text of the offending line.
        cause: The underlying error, usually an InvalidTuple.
    """

    def __init__(
        self, filename: str | None, lineno: int, line: str, cause: Exception
    ) -> None:
        where = f"{filename}:{lineno}" if filename else f"line {lineno}"
        super().__init__(f"{where}: {cause}: {line!r}")
        self.filename = filename
        self.lineno = lineno
        self.line = line
        self.cause = cause


class ChainLoadError(NdbError):
    """A file named by a database record's file= tuple failed to load."""

    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(f"chained file {filename}: {cause}")
        self.filename = filename
        self.cause = cause


class ConfigError(NdbError, ValueError):
    """Configuration values are invalid."""
