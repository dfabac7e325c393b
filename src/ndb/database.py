"""Loading single ndb files and detecting when they change."""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

from ndb.config import NdbConfig
from ndb.errors import ConfigError, DatabaseIOError, NotFound
from ndb.parsing import RecordParser
from ndb.types import RecordSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """The result of one successful load of one file."""

    filename: str
    content: bytes
    mtime_ns: int
    records: RecordSet


def _io_error(filename: str, exc: Exception) -> DatabaseIOError:
    if isinstance(exc, FileNotFoundError):
        return NotFound(filename)
    if isinstance(exc, OSError):
        return DatabaseIOError(filename, exc.strerror or str(exc))
    # e.g. ValueError for a path with an embedded NUL
    return DatabaseIOError(filename, str(exc))


def load_snapshot(
    filename: str, config: NdbConfig | None = None, parser: RecordParser | None = None
) -> Snapshot:
    """Read and parse one database file.

    Args:
        filename: Path of the file to load.
        config: Settings supplying the file encoding.
        parser: Parser to reuse; a new one is built if omitted.

    Returns:
        A Snapshot of the file's contents, mtime and records.

    Raises:
        NotFound: If the file does not exist.
        DatabaseIOError: If the file cannot be read.
        ParseError: If the contents are malformed.
        ConfigError: If the configured encoding is unknown.
    """
    config = config or NdbConfig()
    parser = parser or RecordParser()

    try:
        codecs.lookup(config.encoding)
    except LookupError as e:
        raise ConfigError(f"encoding: unknown codec {config.encoding!r}") from e

    try:
        with open(filename, "rb") as f:
            mtime_ns = os.fstat(f.fileno()).st_mtime_ns
            content = f.read()
    except (OSError, ValueError) as e:
        raise _io_error(filename, e) from e

    records = parser.parse_bytes(content, filename, config.encoding)
    logger.debug(
        "loaded %s: %d records, mtime_ns=%d", filename, len(records), mtime_ns
    )
    return Snapshot(filename, content, mtime_ns, records)


class Database:
    """Handle for one opened ndb file.

    The handle holds an immutable Snapshot. Reloading builds a new one and
    swaps the reference, so readers never see half of an update.
    """

    def __init__(self, snapshot: Snapshot, config: NdbConfig | None = None) -> None:
        self.filename = snapshot.filename
        self.config = config or NdbConfig()
        self._snapshot = snapshot

    @classmethod
    def open(cls, filename: str, config: NdbConfig | None = None) -> Database:
        """Load a file and return a handle for it."""
        return cls(load_snapshot(filename, config), config)

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def content(self) -> bytes:
        return self._snapshot.content

    @property
    def mtime_ns(self) -> int:
        return self._snapshot.mtime_ns

    @property
    def records(self) -> RecordSet:
        return self._snapshot.records

    def load(self) -> Snapshot:
        """Load a fresh Snapshot of this file without installing it."""
        return load_snapshot(self.filename, self.config)

    def install(self, snapshot: Snapshot) -> None:
        """Replace the current snapshot."""
        if snapshot.filename != self.filename:
            raise ValueError(
                f"snapshot of {snapshot.filename} cannot replace {self.filename}"
            )
        self._snapshot = snapshot

    def reopen(self) -> None:
        """Reload the file, keeping the old state if loading fails."""
        try:
            snapshot = self.load()
        except Exception:
            logger.warning("reopen of %s failed; keeping previous records", self.filename)
            raise
        self.install(snapshot)

    def changed(self) -> bool:
        """Check whether the file's mtime differs from the loaded one.

        Raises:
            NotFound: If the file no longer exists.
            DatabaseIOError: If the file cannot be stat-ed.
        """
        try:
            st = os.stat(self.filename)
        except (OSError, ValueError) as e:
            raise _io_error(self.filename, e) from e
        return st.st_mtime_ns != self._snapshot.mtime_ns

    def search(self, attr: str, val: str = "") -> RecordSet:
        """Return this file's records matching attr (and val if non-empty)."""
        return self._snapshot.records.search(attr, val)

    def __repr__(self) -> str:
        return f"Database({self.filename!r}, records={len(self.records)})"
