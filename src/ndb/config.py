"""Configuration for opening ndb databases."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Mapping

from ndb.errors import ConfigError

# Conventional location of the local network database.
NDB_LOCAL = "/lib/ndb/local"


@dataclass
class NdbConfig:
    """Settings used when a database is opened.

    Attributes:
        default_path: File opened when the caller gives no explicit path.
        encoding: Text encoding of database files.
    """

    default_path: str = NDB_LOCAL
    encoding: str = "utf-8"

    def validate(self) -> list[str]:
        """Return a list of validation error messages (empty means valid)."""
        errors: list[str] = []
        if not self.default_path:
            errors.append("default_path: must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"encoding: unknown codec {self.encoding!r}")
        return errors


def load_config(
    env: Mapping[str, str] | None = None, *, strict: bool = False
) -> NdbConfig:
    """Build a config from defaults overridden by environment variables.

    NDB_FILE overrides the default database path and NDB_ENCODING the file
    encoding. Empty variables are ignored.

    Args:
        env: Mapping to read variables from. Defaults to os.environ.
        strict: If True, raise ConfigError on invalid values.

    Returns:
        The resulting NdbConfig.
    """
    if env is None:
        env = os.environ

    cfg = NdbConfig()
    if env.get("NDB_FILE"):
        cfg.default_path = env["NDB_FILE"]
    if env.get("NDB_ENCODING"):
        cfg.encoding = env["NDB_ENCODING"]

    if strict:
        errors = cfg.validate()
        if errors:
            raise ConfigError(f"Config validation failed: {'; '.join(errors)}")

    return cfg
