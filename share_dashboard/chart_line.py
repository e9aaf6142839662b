"""
Share trend line chart for the Social Media Share Dashboard.

Plots one platform's monthly share over the selected year: a line with
a marker per month, a zero-based y-axis with 10 % headroom, dashed
horizontal grid lines, and month labels on the x-axis.
"""

import datetime
from typing import Optional, Sequence

import numpy as np
import matplotlib.dates as mdates
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .constants import (
    LIGHT_COLORS, LINE_COLOR, LINE_WIDTH, POINT_RADIUS, POINT_RADIUS_ACTIVE,
)
from .data_model import TimeSeriesPoint
from .time_series import value_domain


def point_x_values(points: Sequence[TimeSeriesPoint]) -> np.ndarray:
    """Matplotlib date numbers of the first day of each point's month."""
    return np.array(
        [mdates.date2num(datetime.date(p.date.year, p.date.month, 1)) for p in points],
        dtype=float,
    )


def render_line_chart(
    fig: Figure,
    points: Sequence[TimeSeriesPoint],
    *,
    platform: str = "",
    active_index: Optional[int] = None,
) -> Optional[Axes]:
    """Render the share trend of *platform* on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    points : sequence of TimeSeriesPoint
        Output of ``time_series.series``, sorted by month.
    platform : str
        Used for the y-axis label.
    active_index : int or None
        Index of the hovered point, drawn enlarged.

    Returns
    -------
    matplotlib.axes.Axes or None
        The plot axes, or ``None`` when there was nothing to plot.
    """
    fig.clf()
    c = LIGHT_COLORS
    ax = fig.add_subplot(111)

    if not points:
        ax.set_axis_off()
        ax.text(0.5, 0.5, 'No non-zero values for this platform',
                transform=ax.transAxes, ha='center', va='center',
                color=c['fg_dim'])
        return None

    xs = point_x_values(points)
    ys = np.array([p.value for p in points], dtype=float)

    ax.plot(xs, ys, color=LINE_COLOR, linewidth=LINE_WIDTH, zorder=3)
    ax.scatter(
        xs, ys, s=(2 * POINT_RADIUS) ** 2,
        facecolor=LINE_COLOR, edgecolor='white', linewidth=2, zorder=4,
    )

    if active_index is not None and 0 <= active_index < len(points):
        ax.scatter(
            [xs[active_index]], [ys[active_index]],
            s=(2 * POINT_RADIUS_ACTIVE) ** 2,
            facecolor='white', edgecolor=LINE_COLOR, linewidth=3, zorder=5,
        )

    # ── Axes ─────────────────────────────────────────────────────────
    y_min, y_max = value_domain(points)
    ax.set_ylim(y_min, y_max)
    if len(xs) > 1:
        ax.set_xlim(xs[0], xs[-1])

    ax.xaxis.set_major_locator(mdates.MonthLocator())
    ax.xaxis.set_major_formatter(mdates.DateFormatter('%b %Y'))
    fig.autofmt_xdate(rotation=45, ha='right')

    ax.grid(axis='y', color=c['grid'], linestyle=(0, (2, 2)), linewidth=0.8)
    ax.set_axisbelow(True)
    unit_label = f"{platform} share (%)" if platform else "Share (%)"
    ax.set_ylabel(unit_label, fontsize=8)

    for side in ('top', 'right'):
        ax.spines[side].set_visible(False)

    fig.tight_layout(pad=1.5)
    return ax
