"""
Chart canvases for the Social Media Share Dashboard.

Thin Qt adapters: each canvas turns mouse and resize events into calls
on the pure models (``TreemapModel``, ``InteractionController``) and
redraws with the renderers in ``chart_treemap`` / ``chart_line``.
"""

from typing import List, Optional

import numpy as np
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QToolTip, QSizePolicy
from PySide6.QtCore import Qt, QPoint

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas

from .chart_line import point_x_values, render_line_chart
from .chart_treemap import render_treemap
from .constants import (
    CANVAS_HEIGHT_RATIO, CANVAS_MAX_HEIGHT, LIGHT_COLORS, POINT_HIT_RADIUS,
)
from .data_model import TimeSeriesPoint
from .interaction import InteractionController, leaf_at, nearest_point
from .state import DashboardController
from .treemap import TreemapModel


def canvas_height_for(width: float) -> int:
    """Chart height for a given width (40 % of it, at most 400 px)."""
    return int(min(width * CANVAS_HEIGHT_RATIO, CANVAS_MAX_HEIGHT))


class _TooltipCanvas(FigureCanvas):
    """Figure canvas that shows the shared tooltip while it is hovered."""

    def __init__(self, controller: DashboardController, parent=None):
        self._fig = Figure()
        self._fig.set_facecolor(LIGHT_COLORS['canvas'])
        super().__init__(self._fig)
        self.setParent(parent)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMinimumHeight(120)

        self._controller = controller
        self._interaction = InteractionController(controller.state)
        self._unsubscribe = controller.state.subscribe(self._on_state_changed)

        self.mpl_connect('motion_notify_event', self._on_motion)
        self.mpl_connect('figure_leave_event', lambda *_: self._interaction.leave())

    @property
    def fig(self) -> Figure:
        return self._fig

    def _logical_position(self, event):
        ratio = getattr(self, 'device_pixel_ratio', 1) or 1
        return event.x / ratio, (self._fig.bbox.height - event.y) / ratio

    def _on_state_changed(self, field: str):
        if field != 'active_tooltip' or self._interaction.hovered is None:
            return
        tooltip = self._controller.state.active_tooltip
        if tooltip is None:
            QToolTip.hideText()
            return
        x, y = tooltip.anchor
        QToolTip.showText(self.mapToGlobal(QPoint(int(x), int(y))), tooltip.text, self)

    def _on_motion(self, event):
        raise NotImplementedError

    def closeEvent(self, event):
        self._unsubscribe()
        super().closeEvent(event)


class TreemapCanvas(_TooltipCanvas):
    """Treemap of the selected year's average shares."""

    def __init__(self, controller: DashboardController, parent=None):
        super().__init__(controller, parent)
        self._model = TreemapModel(controller.state)
        self.mpl_connect('button_press_event', self._on_click)

    @property
    def model(self) -> TreemapModel:
        return self._model

    def update_view(self):
        """Re-layout for the current data and canvas size, then redraw."""
        width = self.width()
        height = canvas_height_for(width)
        if height != self.height():
            self.setFixedHeight(max(height, self.minimumHeight()))
            height = self.height()
        leaves = self._model.relayout(self._controller.averages, width, height)
        render_treemap(
            self._fig, leaves,
            width=width, height=height,
            fill_color=self._model.fill_color,
        )
        self.draw_idle()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.update_view()

    def _on_motion(self, event):
        if event.xdata is None or event.ydata is None:
            self._interaction.leave()
            return
        leaf = leaf_at(self._model.leaves, event.xdata, event.ydata)
        if leaf is None:
            self._interaction.leave()
        elif leaf is self._interaction.hovered:
            self._interaction.move((event.xdata, event.ydata))
        else:
            self._interaction.hover_leaf(leaf, (event.xdata, event.ydata))

    def _on_click(self, event):
        if event.xdata is None or event.ydata is None:
            return
        leaf = leaf_at(self._model.leaves, event.xdata, event.ydata)
        if leaf is not None:
            self._model.select(leaf.name)


class LineChartCanvas(_TooltipCanvas):
    """Monthly share trend of the selected platform."""

    def __init__(self, controller: DashboardController, parent=None):
        super().__init__(controller, parent)
        self._points: List[TimeSeriesPoint] = []
        self._platform = ""
        self._active_index: Optional[int] = None
        self._ax = None

    def show_series(self, points: List[TimeSeriesPoint], platform: str):
        self._points = list(points)
        self._platform = platform
        self._active_index = None
        self._redraw()

    def _redraw(self):
        self.setFixedHeight(max(canvas_height_for(self.width()), self.minimumHeight()))
        self._ax = render_line_chart(
            self._fig, self._points,
            platform=self._platform,
            active_index=self._active_index,
        )
        self.draw_idle()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._redraw()

    def _on_motion(self, event):
        if self._ax is None or event.inaxes is not self._ax:
            self._set_active(None)
            self._interaction.leave()
            return
        xy = self._ax.transData.transform(
            np.column_stack([point_x_values(self._points),
                             [p.value for p in self._points]])
        )
        ratio = getattr(self, 'device_pixel_ratio', 1) or 1
        idx = nearest_point(xy[:, 0], xy[:, 1], event.x, event.y,
                            radius=POINT_HIT_RADIUS * ratio)
        self._set_active(idx)
        if idx is None:
            self._interaction.leave()
        else:
            self._interaction.hover_point(self._points[idx], self._logical_position(event))

    def _set_active(self, idx: Optional[int]):
        if idx != self._active_index:
            self._active_index = idx
            self._redraw()


class ChartCard(QFrame):
    """Titled card hosting one chart canvas."""

    def __init__(self, title: str, canvas: FigureCanvas, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self._title = QLabel(title)
        self._title.setObjectName("cardTitle")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title)
        layout.addWidget(canvas)
        self._canvas = canvas

    @property
    def canvas(self) -> FigureCanvas:
        return self._canvas

    def set_title(self, title: str):
        self._title.setText(title)
