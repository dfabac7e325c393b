"""Command-line lookup of ndb records (ndbquery)."""

from __future__ import annotations

import argparse
import logging
import sys

from ndb.chain import Chain
from ndb.config import NDB_LOCAL, load_config
from ndb.errors import NdbError
from ndb.types import RecordSet


def print_records(records: RecordSet, rattr: str | None = None) -> None:
    """Print search results.

    Without rattr, each record is printed on one line as attr=val pairs.
    With rattr, only the values of rattr tuples are printed, one per line.
    """
    for record in records:
        if rattr is None:
            print(record)
        else:
            for value in record.get_all(rattr):
                print(value)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        prog="ndbquery",
        description="Search a network database for records matching attr=val",
    )
    arg_parser.add_argument(
        "-f", "--file",
        type=str,
        default=None,
        help=f"ndb file to open (default: $NDB_FILE or {NDB_LOCAL})",
    )
    arg_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log files as they are loaded",
    )
    arg_parser.add_argument("attr", help="Attribute to match")
    arg_parser.add_argument("val", help='Value to match ("" matches any value)')
    arg_parser.add_argument(
        "rattr",
        nargs="?",
        default=None,
        help="Print only the values of this attribute",
    )

    args = arg_parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s %(levelname)s %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = load_config(strict=True)
        chain = Chain.open(args.file or "", config=config)
    except NdbError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_records(chain.search(args.attr, args.val), args.rattr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
