"""Chains of ndb files searched together as one logical database."""

from __future__ import annotations

import logging
import os
from typing import Iterator

from ndb.config import NdbConfig
from ndb.database import Database
from ndb.errors import ChainLoadError, NdbError
from ndb.types import Record, RecordSet

logger = logging.getLogger(__name__)


def _same_file(a: str, b: str) -> bool:
    if a == b:
        return True
    try:
        return os.path.realpath(a) == os.path.realpath(b)
    except ValueError:
        # Unusable path (embedded NUL); loading it reports the error.
        return False


class Chain:
    """An ordered list of database handles, head first.

    The head file's first record carrying a 'database' attribute lists the
    other files of the chain with 'file=' tuples, in search order. A file=
    naming the head itself is skipped since the head is always first.
    """

    def __init__(self, databases: list[Database], config: NdbConfig | None = None) -> None:
        if not databases:
            raise ValueError("a chain needs at least one database")
        self.databases = list(databases)
        self.config = config or NdbConfig()

    @classmethod
    def open(
        cls,
        path: str = "",
        default_path: str | None = None,
        config: NdbConfig | None = None,
    ) -> Chain:
        """Open a database file and every file its database record names.

        Args:
            path: File to open. If empty, default_path is used.
            default_path: Fallback path; defaults to config.default_path.
            config: Settings for loading files.

        Returns:
            The chain, head first.

        Raises:
            NotFound, DatabaseIOError, ParseError: If the head fails to load.
            ChainLoadError: If any chained file fails to load.
        """
        config = config or NdbConfig()
        if not path:
            path = default_path or config.default_path

        head = Database.open(path, config)
        databases = [head]

        dbrec = head.search("database")
        if dbrec:
            for t in dbrec[0]:
                if t.attr != "file":
                    continue
                if not t.val:
                    logger.warning("%s: ignoring empty file= in database record", path)
                    continue
                if _same_file(t.val, head.filename):
                    continue
                try:
                    db = Database.open(t.val, config)
                except NdbError as e:
                    raise ChainLoadError(t.val, e) from e
                logger.debug("chained %s after %s", t.val, databases[-1].filename)
                databases.append(db)

        return cls(databases, config)

    @property
    def head(self) -> Database:
        return self.databases[0]

    @property
    def filenames(self) -> list[str]:
        return [db.filename for db in self.databases]

    @property
    def records(self) -> RecordSet:
        """All records of all files, in chain order."""
        return RecordSet(tuple(r for db in self.databases for r in db.records))

    def __iter__(self) -> Iterator[Database]:
        return iter(self.databases)

    def __len__(self) -> int:
        return len(self.databases)

    def search(self, attr: str, val: str = "") -> RecordSet:
        """Find every record with a tuple matching attr, across all files.

        An empty val matches on the presence of attr alone; otherwise the
        value must match exactly. Records come back in file order, then
        record order, each at most once. No match is an empty RecordSet.
        """
        results: list[Record] = []
        for db in self.databases:
            results.extend(db.search(attr, val))
        return RecordSet(tuple(results))

    def changed(self) -> bool:
        """True if any file's mtime differs from its loaded state.

        Raises the first stat error encountered walking the chain.
        """
        for db in self.databases:
            if db.changed():
                return True
        return False

    def reopen(self) -> None:
        """Reload every file of the chain.

        All files are loaded before any is installed, so on failure the
        error is raised and every handle keeps its previous records.
        """
        snapshots = [db.load() for db in self.databases]
        for db, snapshot in zip(self.databases, snapshots):
            db.install(snapshot)
        logger.debug("reopened %d files", len(snapshots))

    def __repr__(self) -> str:
        return f"Chain({self.filenames!r})"


def open_chain(
    path: str = "",
    default_path: str | None = None,
    config: NdbConfig | None = None,
) -> Chain:
    """Open an ndb database, following its database/file records."""
    return Chain.open(path, default_path, config)
