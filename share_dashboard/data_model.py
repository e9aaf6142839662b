"""
Data model for the Social Media Share Dashboard.

Immutable values passed between the parser, the aggregator, and the two
chart models.  Records are read-only mappings built once by
``csv_parser``; every derived structure is a frozen dataclass, so chart
renderers receive their inputs read-only.

Missing data is modelled as ``None`` (not ``NaN``), so a bad cell can
never leak into a sum unnoticed.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

# One CSV data line: column name -> raw cell text.  Columns the line did
# not reach are absent, not empty strings.
Record = Mapping[str, str]


def make_record(cells: Dict[str, str]) -> Record:
    """Freeze a column → cell dict into a read-only ``Record``."""
    return MappingProxyType(dict(cells))


@dataclass(frozen=True, order=True)
class CalendarMonth:
    """A ``(year, month)`` pair; ordering is chronological."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def parse(cls, text: str) -> Optional["CalendarMonth"]:
        """Parse ``"YYYY-MM"``; returns ``None`` for anything else.

        >>> CalendarMonth.parse("2009-07")
        CalendarMonth(year=2009, month=7)
        >>> CalendarMonth.parse("July") is None
        True
        """
        if text is None:
            return None
        parts = text.strip().strip('"').split("-")
        if len(parts) < 2:
            return None
        try:
            year, month = int(parts[0]), int(parts[1])
        except ValueError:
            return None
        if not 1 <= month <= 12:
            return None
        return cls(year, month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class DatasetRow:
    """Typed view of one ``Record``.

    Parameters
    ----------
    date : CalendarMonth or None
        Parsed date cell; ``None`` when missing or malformed.
    values : dict
        Platform name → share percent, ``None`` for a missing or
        non-numeric cell.
    """
    date: Optional[CalendarMonth]
    values: Dict[str, Optional[float]] = field(default_factory=dict)


@dataclass(frozen=True)
class PlatformAverage:
    """Mean monthly share of one platform over a filtered subset."""
    platform: str
    mean_share_percent: float


@dataclass(frozen=True)
class TreemapLeaf:
    """One laid-out treemap cell in canvas pixel coordinates.

    ``(x0, y0)`` is the top-left corner and ``(x1, y1)`` the bottom-right
    one; y grows downwards as on screen.
    """
    name: str
    value: float
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, x: float, y: float) -> bool:
        return self.x0 <= x < self.x1 and self.y0 <= y < self.y1


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One month of a platform's share trend."""
    date: CalendarMonth
    value: float

    @property
    def label(self) -> str:
        return str(self.date)


@dataclass(frozen=True)
class Tooltip:
    """Hover tooltip content and its anchor in canvas pixels."""
    text: str
    anchor: Tuple[float, float]
