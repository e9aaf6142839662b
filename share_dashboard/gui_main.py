"""
Main window for the Social Media Share Dashboard.

Title, searchable year selector, treemap card, and a line chart card
that is only shown while a platform is selected.  All selection state
lives in one ``DashboardState`` owned by the window's controller.
"""

import os
import tempfile

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QScrollArea,
    QLabel, QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from . import APP_NAME, APP_VERSION
from .constants import DEFAULT_CSV_PATH
from .csv_parser import load_table
from .gui_charts import ChartCard, LineChartCanvas, TreemapCanvas
from .gui_year_selector import YearSelector
from .state import DashboardController


class DashboardWindow(QMainWindow):
    """Main window for the Social Media Share Dashboard."""

    def __init__(self, csv_path: str = DEFAULT_CSV_PATH):
        super().__init__()
        self._csv_path = csv_path
        self._controller = DashboardController()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(900, 600)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self.load_data(self._csv_path)

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(12)

        title = QLabel("Social Media Usage Share Per Year")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        selector_row = QHBoxLayout()
        selector_row.addStretch()
        self._year_selector = YearSelector()
        selector_row.addWidget(self._year_selector)
        selector_row.addStretch()
        layout.addLayout(selector_row)

        self._treemap = TreemapCanvas(self._controller)
        self._treemap_card = ChartCard("Social Media Platform Shares", self._treemap)
        layout.addWidget(self._treemap_card)

        self._line_chart = LineChartCanvas(self._controller)
        self._line_card = ChartCard("", self._line_chart)
        self._line_card.setVisible(False)
        layout.addWidget(self._line_card)

        layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidget(content)
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)

    def _add_action(self, menu, text, slot, shortcut=None):
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(shortcut)
        action.triggered.connect(lambda *_: slot())
        menu.addAction(action)
        return action

    def _setup_menu(self):
        bar = self.menuBar()

        data_menu = bar.addMenu("File")
        self._add_action(data_menu, "Reload Data",
                         lambda: self.load_data(self._csv_path), "F5")
        data_menu.addSeparator()
        self._add_action(data_menu, "Exit", self.close, "Ctrl+Q")

        self._add_action(bar.addMenu("Examples"), "Load Example Dataset",
                         self._load_example)
        self._add_action(bar.addMenu("Help"), "About", self._show_about)

    def _connect_signals(self):
        self._year_selector.year_selected.connect(self._controller.select_year)
        self._controller.state.subscribe(self._on_state_changed)

    # ── Data loading ─────────────────────────────────────────────────

    def load_data(self, path: str):
        """Read *path* and show its first year; empty state on failure."""
        self._csv_path = path
        headers, rows = load_table(path)
        self._controller.load(rows, headers)
        self._year_selector.set_options(
            self._controller.year_options,
            self._controller.state.selected_year,
        )

        if not rows:
            self.statusBar().showMessage(
                f"No data loaded from {os.path.basename(path)}"
            )
        else:
            self.statusBar().showMessage(
                f"Loaded {len(rows)} months, "
                f"{len(self._controller.year_options)} years "
                f"from {os.path.basename(path)}"
            )
        self._refresh_treemap()
        self._refresh_line_chart()

    def _load_example(self):
        """Generate and load the example dataset."""
        from .example_data import generate_example_csv

        example_dir = os.path.join(tempfile.gettempdir(), 'share_dashboard_example')
        self.load_data(generate_example_csv(example_dir))

    # ── Slots ────────────────────────────────────────────────────────

    def _on_state_changed(self, field: str):
        # Tooltips are handled by the canvases themselves
        if field in ('selected_year', 'selected_platform'):
            self._refresh_treemap()
            self._refresh_line_chart()

    def _refresh_treemap(self):
        self._treemap_card.setVisible(self._controller.has_data)
        self._treemap.update_view()

    def _refresh_line_chart(self):
        platform = self._controller.state.selected_platform
        points = self._controller.line_series()
        if points is None:
            self._line_card.setVisible(False)
            return
        year = self._controller.state.selected_year
        self._line_card.set_title(f"{platform} Share Growth ({year})")
        self._line_card.setVisible(True)
        self._line_chart.show_series(points, platform)

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Average monthly usage share of social media platforms "
            f"per year, as a treemap.</p>"
            f"<p>Click a platform to see its monthly share trend.</p>",
        )
