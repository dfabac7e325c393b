"""Core data types: tuples, records and record sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, overload

from ndb.errors import InvalidTuple


@dataclass(frozen=True)
class Tuple:
    """A single attr=value pair. The value may be empty, the attr may not."""

    attr: str
    val: str = ""

    def __post_init__(self) -> None:
        if not self.attr:
            raise InvalidTuple(f"={self.val}")
        if self.val is None:
            object.__setattr__(self, "val", "")

    def matches(self, attr: str, val: str = "") -> bool:
        """Check this tuple against attr, and against val unless val is empty."""
        if self.attr != attr:
            return False
        return val == "" or self.val == val

    def __str__(self) -> str:
        # Whitespace or '#' need quotes to reparse. Values already holding a
        # quote are written as is, since quoting them would split the word.
        if '"' not in self.val and any(c.isspace() or c == "#" for c in self.val):
            return f'{self.attr}="{self.val}"'
        return f"{self.attr}={self.val}"


@dataclass(frozen=True)
class Record:
    """An ordered group of tuples describing one entity.

    A record may span several lines of its source file. It is the unit a
    search returns: matching any one of its tuples returns all of them.
    """

    tuples: tuple[Tuple, ...] = ()

    def __iter__(self) -> Iterator[Tuple]:
        return iter(self.tuples)

    def __len__(self) -> int:
        return len(self.tuples)

    def __getitem__(self, index: int) -> Tuple:
        return self.tuples[index]

    def get(self, attr: str, default: str = "") -> str:
        """Return the value of the first tuple named attr."""
        for t in self.tuples:
            if t.attr == attr:
                return t.val
        return default

    def get_all(self, attr: str) -> list[str]:
        """Return every value for attr, in order."""
        return [t.val for t in self.tuples if t.attr == attr]

    def has(self, attr: str, val: str = "") -> bool:
        """True if any tuple matches attr (and val, when val is non-empty)."""
        return any(t.matches(attr, val) for t in self.tuples)

    def attrs(self) -> list[str]:
        return [t.attr for t in self.tuples]

    def __str__(self) -> str:
        return " ".join(str(t) for t in self.tuples)


@dataclass(frozen=True)
class RecordSet:
    """Ordered records, either one file's contents or a search result."""

    records: tuple[Record, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> RecordSet: ...

    def __getitem__(self, index: int | slice) -> Record | RecordSet:
        if isinstance(index, slice):
            return RecordSet(self.records[index])
        return self.records[index]

    def __add__(self, other: RecordSet) -> RecordSet:
        if not isinstance(other, RecordSet):
            return NotImplemented
        return RecordSet(self.records + other.records)

    def value_of(self, attr: str) -> str:
        """Return the first value of attr across all records, or ""."""
        for record in self.records:
            for t in record:
                if t.attr == attr:
                    return t.val
        return ""

    def values_of(self, attr: str) -> list[str]:
        """Return every value of attr across all records, in order."""
        return [t.val for record in self.records for t in record if t.attr == attr]

    def search(self, attr: str, val: str = "") -> RecordSet:
        """Return the records that contain a tuple matching attr/val.

        An empty val matches on the presence of attr alone. Each record is
        included at most once, in its original order.
        """
        return RecordSet(tuple(r for r in self.records if r.has(attr, val)))
