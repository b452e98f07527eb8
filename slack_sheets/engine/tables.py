"""
Conversion between flat records and rectangular tables.

A table is a list of rows: row 0 is the header, every following row holds
cell values aligned with it by position.
"""
from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)

Table = List[List[Any]]


class TableError(ValueError):
    """Raised when records or rows cannot form a rectangular table."""
    pass


def to_table(records: Sequence[Dict[str, Any]], fields: Optional[Sequence[str]] = None) -> Table:
    """
    Build a table from flat records.

    The header is ``fields`` when given, otherwise the keys of the first
    record. Keys that only appear in later records are dropped.

    Cell values use a falsy fallback: a missing key and any falsy value
    (None, 0, False, "", []) all become "".

    Args:
        records: Flat records sharing (roughly) one schema
        fields: Explicit ordered column names

    Returns:
        Table with the header at index 0

    Raises:
        TableError: If there are no records and no fields, or fields repeat
    """
    if fields is None:
        if not records:
            raise TableError("Cannot infer table header from an empty record list; pass fields explicitly")
        header = list(records[0].keys())
    else:
        header = list(fields)

    if len(set(header)) != len(header):
        duplicates = sorted({name for name in header if header.count(name) > 1})
        raise TableError(f"Duplicate header fields: {', '.join(duplicates)}")

    table = [header]
    for record in records:
        table.append([record.get(name) or "" for name in header])

    logger.debug(f"Built table: {len(header)} column(s), {len(records)} data row(s)")
    return table


def from_table(table: Sequence[Sequence[Any]]) -> List[Dict[str, Any]]:
    """
    Rebuild records from a table.

    Args:
        table: Header row followed by zero or more data rows

    Returns:
        One dict per data row, keyed by the header fields

    Raises:
        TableError: If the header is missing or a row length differs from it
    """
    if not table:
        raise TableError("Table has no header row")

    header = list(table[0])
    records = []

    for row_number, row in enumerate(table[1:], start=1):
        if len(row) != len(header):
            raise TableError(
                f"Row {row_number} has {len(row)} cell(s), expected {len(header)}"
            )
        records.append({name: row[index] for index, name in enumerate(header)})

    return records
