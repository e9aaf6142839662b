"""
Time series model for the Social Media Share Dashboard.

Derives one platform's monthly share trend from a subset of records.
Rows are dropped when the platform's cell is the literal zero sentinel
(no usage recorded), when the date is the anomalous sentinel month, or
when either cell cannot be parsed.  The rest is sorted by month.
"""

from typing import List, Optional, Sequence, Tuple

from .constants import DATE_COLUMN, SENTINEL_MONTH, ZERO_SENTINEL
from .csv_parser import parse_calendar_month, parse_share, unquote
from .data_model import CalendarMonth, Record, TimeSeriesPoint
from .errors import UnknownPlatformError


def platform_column(rows: Sequence[Record], platform: str) -> Optional[str]:
    """Find the column holding *platform*, quoted or not.

    Returns ``None`` if no row has such a column.
    """
    wanted = unquote(platform).strip()
    if not wanted:
        return None
    for row in rows:
        for column in row:
            if unquote(column).strip() == wanted:
                return column
    return None


def series(
    rows: Sequence[Record],
    platform: str,
    date_column: str = DATE_COLUMN,
) -> List[TimeSeriesPoint]:
    """Chronological share points of *platform* over *rows*.

    Raises
    ------
    UnknownPlatformError
        If *platform* is blank or no row has a column for it.
    """
    column = platform_column(rows, platform or "")
    if column is None or column == date_column:
        raise UnknownPlatformError(platform or "")

    points: List[TimeSeriesPoint] = []
    for row in rows:
        cell = row.get(column)
        date_cell = row.get(date_column)
        if cell is None or date_cell is None:
            continue
        if unquote(cell).strip() == ZERO_SENTINEL:
            continue
        if unquote(date_cell).strip() == SENTINEL_MONTH:
            continue
        date = parse_calendar_month(date_cell)
        value = parse_share(cell)
        if date is None or value is None:
            continue
        points.append(TimeSeriesPoint(date=date, value=value))

    # Input is normally in file order already; the sort is stable
    points.sort(key=lambda p: p.date)
    return points


def value_domain(points: Sequence[TimeSeriesPoint], headroom: float = 1.1) -> Tuple[float, float]:
    """Y-axis range: zero to the largest value plus 10 % headroom."""
    if not points:
        return 0.0, 1.0
    top = max(p.value for p in points) * headroom
    return 0.0, top if top > 0 else 1.0


def date_extent(points: Sequence[TimeSeriesPoint]) -> Optional[Tuple[CalendarMonth, CalendarMonth]]:
    """First and last month of *points*, or ``None`` when empty."""
    if not points:
        return None
    return points[0].date, points[-1].date
