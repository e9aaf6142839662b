"""
Selection state and controller for the Social Media Share Dashboard.

``DashboardState`` is the single owner of the loaded rows, the selected
year, the selected platform, and the active tooltip.  Chart widgets get
a reference to it and change it only through its setters; every setter
notifies subscribers with the name of the field that changed.

``DashboardController`` reacts to the three external events (data
loaded, year selected, platform selected) and keeps the derived data
(year options, filtered rows, averages) in step with the state.
"""

import logging
from typing import Callable, Dict, List, Optional

from .aggregator import averages as compute_averages, log_averages
from .constants import DATE_COLUMN
from .csv_parser import detect_date_column
from .data_model import Record, TimeSeriesPoint, Tooltip
from .errors import EmptyDatasetError, UnknownPlatformError
from .time_series import series
from .year_index import filter_by_year, years

logger = logging.getLogger(__name__)

Listener = Callable[[str], None]


class DashboardState:
    """Shared, observable selection state."""

    def __init__(self):
        self._rows: List[Record] = []
        self._selected_year = ""
        self._selected_platform = ""
        self._active_tooltip: Optional[Tooltip] = None
        self._listeners: List[Listener] = []

    # ── Read access ──────────────────────────────────────────────────

    @property
    def rows(self) -> List[Record]:
        return self._rows

    @property
    def selected_year(self) -> str:
        return self._selected_year

    @property
    def selected_platform(self) -> str:
        return self._selected_platform

    @property
    def active_tooltip(self) -> Optional[Tooltip]:
        return self._active_tooltip

    # ── Subscriptions ────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, field: str) -> None:
        for listener in list(self._listeners):
            listener(field)

    # ── Setters ──────────────────────────────────────────────────────

    def set_rows(self, rows: List[Record]) -> None:
        self._rows = list(rows)
        self._notify('rows')

    def set_selected_year(self, year: str) -> None:
        year = year or ""
        if year == self._selected_year:
            return
        self._selected_year = year
        self._notify('selected_year')

    def set_selected_platform(self, platform: str) -> None:
        platform = platform or ""
        if platform == self._selected_platform:
            return
        self._selected_platform = platform
        self._notify('selected_platform')

    def set_tooltip(self, tooltip: Optional[Tooltip]) -> None:
        if tooltip == self._active_tooltip:
            return
        self._active_tooltip = tooltip
        self._notify('active_tooltip')


class DashboardController:
    """Recomputes derived data when the data or the selection changes."""

    def __init__(self, state: Optional[DashboardState] = None):
        self.state = state if state is not None else DashboardState()
        self.date_column = DATE_COLUMN
        self.headers: List[str] = []
        self.year_options: List[str] = []
        self.filtered_rows: List[Record] = []
        self.averages: Optional[Dict[str, float]] = None

    @property
    def has_data(self) -> bool:
        return bool(self.state.rows)

    def load(self, rows: List[Record], headers: Optional[List[str]] = None) -> None:
        """Event: data loaded.  Auto-selects the first year, if any.

        *headers* is the file's header row; without it the columns are
        taken from the records.
        """
        rows = list(rows)
        self.headers = list(headers or [])
        if self.headers:
            self.date_column = detect_date_column(self.headers)
        elif rows:
            self.date_column = detect_date_column(rows[0].keys())
        else:
            self.date_column = DATE_COLUMN
        self.year_options = years(rows, self.date_column)
        self.filtered_rows = []
        self.averages = None
        self.state.set_tooltip(None)
        self.state.set_selected_platform("")
        self.state.set_selected_year("")
        self.state.set_rows(rows)

        if self.year_options:
            self.select_year(self.year_options[0])
        else:
            logger.warning("No dated rows found; nothing to display")

    def select_year(self, year: str) -> None:
        """Event: year picked.  Clears the platform selection."""
        self.filtered_rows = filter_by_year(self.state.rows, year, self.date_column)
        try:
            self.averages = compute_averages(
                self.filtered_rows, self.date_column, self.headers,
            )
        except EmptyDatasetError:
            logger.info("No rows for year %r; showing empty charts", year)
            self.averages = None
        else:
            log_averages(self.averages)

        self.state.set_tooltip(None)
        self.state.set_selected_platform("")
        self.state.set_selected_year(year)

    def select_platform(self, platform: str) -> None:
        """Event: platform picked on the treemap."""
        self.state.set_selected_platform(platform)

    def line_series(self) -> Optional[List[TimeSeriesPoint]]:
        """Trend of the selected platform, ``None`` if it cannot be shown."""
        platform = self.state.selected_platform
        if not platform:
            return None
        try:
            return series(self.filtered_rows, platform, self.date_column)
        except UnknownPlatformError as exc:
            logger.warning("Line chart suppressed: %s", exc)
            return None
