"""ndb - A parser and lookup engine for Plan 9 style network databases."""

from ndb.chain import Chain, open_chain
from ndb.config import NDB_LOCAL, NdbConfig, load_config
from ndb.database import Database, Snapshot
from ndb.errors import (
    ChainLoadError,
    ConfigError,
    DatabaseIOError,
    InvalidTuple,
    NdbError,
    NotFound,
    ParseError,
)
from ndb.parsing import RecordParser, TupleParser
from ndb.types import Record, RecordSet, Tuple

__all__ = [
    # Main API
    "open_chain",
    "Chain",
    "Database",
    "Snapshot",
    # Data types
    "Tuple",
    "Record",
    "RecordSet",
    # Parsing
    "RecordParser",
    "TupleParser",
    # Configuration
    "NDB_LOCAL",
    "NdbConfig",
    "load_config",
    # Errors
    "NdbError",
    "DatabaseIOError",
    "NotFound",
    "InvalidTuple",
    "ParseError",
    "ChainLoadError",
    "ConfigError",
]

__version__ = "0.1.0"
