"""Command line interface for viewing spreadsheet exports.

This module provides a command line interface that loads a CSV file
through :class:`sheetgrid.datasources.CSVRowSource` and prints it
either as a text table, using the :mod:`sheetgrid.utils.tabulate` module,
or as records projected by :class:`sheetgrid.mapping.ValueMapper`.
"""

import argparse
import json
import logging
import sys

import pyarrow as pa

from sheetgrid.datasources import CSVRowSource
from sheetgrid.table import TableContractError
from sheetgrid.utils import tabulate

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and print the file content."""
    parser = argparse.ArgumentParser(description="Display a spreadsheet export.")
    parser.add_argument("filename", type=str, help="The CSV file to display.")
    parser.add_argument(
        "--records",
        action="store_true",
        help="Print one JSON object per row, keyed by the header row.",
    )
    parser.add_argument(
        "--from-row",
        type=int,
        default=1,
        help="First row to print as a record, defaults to the one after the header.",
    )
    parser.add_argument(
        "--alias",
        action="append",
        help="Key to use for a column in place of the header. Can be provided multiple times.",
    )
    parser.add_argument(
        "--max-rows", type=int, default=20, help="How many rows to print as a table."
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.max_rows < 0:
        parser.error("--max-rows can't be negative")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        table = CSVRowSource(args.filename).table()
    except (OSError, pa.ArrowInvalid) as e:
        logger.error("Unable to read %s: %s", args.filename, e)
        return 1

    if not args.records:
        print(tabulate.tabulate(table, max_rows=args.max_rows))
        return 0

    try:
        records = table.map.get_rows(from_row=args.from_row, alias=args.alias)
    except TableContractError as e:
        logger.error("Invalid selection, %s", e)
        return 1

    for record in records:
        print(json.dumps(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
