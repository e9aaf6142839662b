"""
Share aggregation for the Social Media Share Dashboard.

Computes the mean monthly share of every platform over a subset of
records, and buckets records by year.

The mean divides by the number of *rows*, not by the number of valid
cells: a month where a platform has no usable value counts as a month
with zero share.  Missing or non-numeric cells therefore contribute 0
to the sum and are reported through ``warnings.warn``.
"""

import logging
import warnings
from typing import Dict, List, Sequence

from .constants import DATE_COLUMN
from .csv_parser import parse_share, unquote
from .data_model import PlatformAverage, Record
from .errors import EmptyDatasetError
from .year_index import year_of

logger = logging.getLogger(__name__)

# How many offending cells to quote in a warning
_MAX_REPORTED = 10


def platform_columns(
    rows: Sequence[Record],
    date_column: str = DATE_COLUMN,
    headers: Sequence[str] = (),
) -> List[str]:
    """Non-date columns: *headers* first, then any others in first-seen
    order across *rows*."""
    columns: Dict[str, None] = dict.fromkeys(h for h in headers if h != date_column)
    for row in rows:
        for column in row:
            if column != date_column:
                columns.setdefault(column, None)
    return list(columns)


def averages(
    rows: Sequence[Record],
    date_column: str = DATE_COLUMN,
    headers: Sequence[str] = (),
) -> Dict[str, float]:
    """Mean share per platform column over *rows*.

    Parameters
    ----------
    rows : sequence of Record
        Usually the rows of one year.
    date_column : str
        Column excluded from the result.
    headers : sequence of str
        Header row of the file.  Every header column gets an entry, even
        one that no data line reaches.

    Returns
    -------
    dict
        ``{column_name: mean}`` in column order.  Keys keep their quotes.

    Raises
    ------
    EmptyDatasetError
        If *rows* is empty.
    """
    if not rows:
        raise EmptyDatasetError()

    columns = platform_columns(rows, date_column, headers)
    sums = {column: 0.0 for column in columns}
    bad_cells: List[str] = []

    for row_idx, row in enumerate(rows):
        for column in columns:
            cell = row.get(column)
            value = parse_share(cell)
            if value is None:
                shown = "<missing>" if cell is None else repr(cell)
                bad_cells.append(f"row {row_idx + 1} {column}: {shown}")
                continue
            sums[column] += value

    if bad_cells:
        detail = "; ".join(bad_cells[:_MAX_REPORTED])
        if len(bad_cells) > _MAX_REPORTED:
            detail += f" ... and {len(bad_cells) - _MAX_REPORTED} more"
        warnings.warn(
            f"Missing or non-numeric share values: {detail}. "
            f"These cells were counted as 0.",
            stacklevel=2,
        )

    n_rows = len(rows)
    return {column: total / n_rows for column, total in sums.items()}


def platform_averages(
    rows: Sequence[Record],
    date_column: str = DATE_COLUMN,
    headers: Sequence[str] = (),
) -> List[PlatformAverage]:
    """Same as ``averages`` but as ``PlatformAverage`` values."""
    return [
        PlatformAverage(platform=unquote(column), mean_share_percent=mean)
        for column, mean in averages(rows, date_column, headers).items()
    ]


def bucket_by_year(
    rows: Sequence[Record],
    date_column: str = DATE_COLUMN,
) -> Dict[str, List[Record]]:
    """Group *rows* by year string; rows without a date are dropped."""
    buckets: Dict[str, List[Record]] = {}
    for row in rows:
        year = year_of(row, date_column)
        if year is None:
            continue
        buckets.setdefault(year, []).append(row)
    return buckets


def log_averages(means: Dict[str, float]) -> None:
    """Log one ``platform: mean`` line per platform at INFO level."""
    for platform, mean in means.items():
        logger.info("%s: %.2f", unquote(platform), mean)
