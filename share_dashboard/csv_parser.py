"""
CSV parser for the Social Media Share Dashboard.

Turns the raw text of the usage-share CSV into an ordered list of
read-only ``Record`` mappings.  The format is deliberately simple:

- One header line; header cells are kept literally, quotes included
  (the date column is named ``"Date"`` with the quote characters)
- Data lines split positionally on every comma; there is no support
  for quoted commas, a comma inside quotes starts a new field
- Short lines leave their trailing columns absent, surplus fields are
  dropped
- Blank lines produce no record

Also hosts the single I/O boundary of the application: reading the CSV
resource from disk.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

from .constants import DATE_COLUMN, FIELD_DELIMITER, QUOTE_CHAR
from .data_model import CalendarMonth, DatasetRow, Record, make_record
from .errors import DataSourceError

logger = logging.getLogger(__name__)


# ── Cell helpers ─────────────────────────────────────────────────────────

def unquote(cell: str) -> str:
    """Remove every quote character from *cell*."""
    return cell.replace(QUOTE_CHAR, "")


def parse_share(cell: Optional[str]) -> Optional[float]:
    """Parse a share-percent cell such as ``"12.5"`` or ``12.5``.

    Returns ``None`` for missing, blank, non-numeric or non-finite
    cells, never ``NaN``.
    """
    if cell is None:
        return None
    s = unquote(cell).strip()
    if not s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_calendar_month(cell: Optional[str]) -> Optional[CalendarMonth]:
    """Parse a ``YYYY-MM`` date cell; ``None`` if missing or malformed."""
    return CalendarMonth.parse(cell)


# ── Text → records ───────────────────────────────────────────────────────

def _split_lines(text: str) -> List[str]:
    return [line.rstrip("\r") for line in text.split("\n")]


def _split_fields(line: str) -> List[str]:
    return line.split(FIELD_DELIMITER)


def parse_header(text: str) -> List[str]:
    """Return the column names of *text* in file order."""
    lines = _split_lines(text)
    if not lines or not lines[0].strip():
        return []
    return _split_fields(lines[0])


def parse_csv_text(text: str) -> List[Record]:
    """Parse raw CSV text into records, one per non-empty data line.

    Parameters
    ----------
    text : str
        Whole file contents.

    Returns
    -------
    list of Record
        In file order.  Column *i* of a line maps to header *i*.
    """
    lines = _split_lines(text)
    if not lines or not lines[0].strip():
        return []

    headers = _split_fields(lines[0])
    records: List[Record] = []

    for raw_line in lines[1:]:
        if not raw_line.strip():
            continue
        fields = _split_fields(raw_line)
        cells = {
            header: fields[idx]
            for idx, header in enumerate(headers)
            if idx < len(fields)
        }
        records.append(make_record(cells))

    return records


def serialize_record(record: Record, headers: Iterable[str]) -> str:
    """Join *record* back into a CSV line in *headers* order.

    Stops at the first column the record does not have, mirroring how
    ``parse_csv_text`` fills columns positionally.
    """
    cells = []
    for header in headers:
        if header not in record:
            break
        cells.append(record[header])
    return FIELD_DELIMITER.join(cells)


def detect_date_column(headers: Iterable[str]) -> str:
    """Pick the date column: ``"Date"`` if present, else a plain ``Date``,
    else the first column."""
    headers = list(headers)
    if DATE_COLUMN in headers:
        return DATE_COLUMN
    for header in headers:
        if unquote(header).strip().lower() == "date":
            return header
    return headers[0] if headers else DATE_COLUMN


def build_dataset_row(record: Record, date_column: str = DATE_COLUMN) -> DatasetRow:
    """Build the typed view of *record*."""
    return DatasetRow(
        date=parse_calendar_month(record.get(date_column)),
        values={
            column: parse_share(cell)
            for column, cell in record.items()
            if column != date_column
        },
    )


# ── Resource loading ─────────────────────────────────────────────────────

def fetch_csv_text(path: str) -> str:
    """Read the CSV resource at *path*.

    Raises
    ------
    DataSourceError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DataSourceError(path, str(exc)) from exc


def load_table(path: str) -> Tuple[List[str], List[Record]]:
    """Fetch and parse *path* into ``(headers, records)``.

    On failure the error is logged once and ``([], [])`` is returned;
    the caller treats that as "nothing to show".
    """
    try:
        text = fetch_csv_text(path)
    except DataSourceError as exc:
        logger.error("Error fetching CSV data: %s", exc)
        return [], []

    headers = parse_header(text)
    records = parse_csv_text(text)
    logger.info("Loaded %d rows from %s", len(records), path)
    return headers, records


def load_records(path: str) -> List[Record]:
    """Records of *path*, ``[]`` when it cannot be read."""
    return load_table(path)[1]
