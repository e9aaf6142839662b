"""
Year index for the Social Media Share Dashboard.

Years are compared as strings: the first ``-``-separated component of
the date cell.  For four-digit years string order equals numeric order.
"""

from typing import List, Optional, Sequence

from .constants import DATE_COLUMN, DATE_SEPARATOR
from .csv_parser import unquote
from .data_model import Record


def year_of(record: Record, date_column: str = DATE_COLUMN) -> Optional[str]:
    """Return the year string of *record*, or ``None`` without a date."""
    cell = record.get(date_column)
    if cell is None:
        return None
    year = unquote(cell).strip().split(DATE_SEPARATOR)[0]
    return year or None


def years(rows: Sequence[Record], date_column: str = DATE_COLUMN) -> List[str]:
    """Distinct years present in *rows*, ascending."""
    found = {year_of(row, date_column) for row in rows}
    found.discard(None)
    return sorted(found)


def filter_by_year(
    rows: Sequence[Record],
    year: str,
    date_column: str = DATE_COLUMN,
) -> List[Record]:
    """Rows whose date falls in *year*, in their original order."""
    if not year:
        return []
    return [row for row in rows if year_of(row, date_column) == year]
