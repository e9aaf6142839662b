"""
Hover and click handling for the two charts.

Every method is a plain state transition on ``DashboardState``: no
timers, no I/O.  The Qt canvases translate mouse events into pixel
positions, run the hit tests below, and call the controller.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from .constants import POINT_HIT_RADIUS, TOOLTIP_OFFSET
from .data_model import TimeSeriesPoint, Tooltip, TreemapLeaf

Position = Tuple[float, float]


# ── Hit tests ────────────────────────────────────────────────────────────

def leaf_at(leaves: Sequence[TreemapLeaf], x: float, y: float) -> Optional[TreemapLeaf]:
    """The leaf under pixel (x, y), or ``None`` over padding / outside."""
    for leaf in leaves:
        if leaf.contains(x, y):
            return leaf
    return None


def nearest_point(
    xs: Sequence[float],
    ys: Sequence[float],
    x: float,
    y: float,
    radius: float = POINT_HIT_RADIUS,
) -> Optional[int]:
    """Index of the marker closest to (x, y) within *radius* pixels."""
    if len(xs) == 0:
        return None
    distances = np.hypot(np.asarray(xs, dtype=float) - x,
                         np.asarray(ys, dtype=float) - y)
    idx = int(np.argmin(distances))
    if distances[idx] > radius:
        return None
    return idx


# ── Tooltip text ─────────────────────────────────────────────────────────

def leaf_tooltip_text(leaf: TreemapLeaf) -> str:
    return f"{leaf.name}\n{leaf.value:.2f}%"


def point_tooltip_text(point: TimeSeriesPoint) -> str:
    return f"{point.label}\n{point.value:.2f}%"


def _anchor(position: Position) -> Position:
    return position[0] + TOOLTIP_OFFSET[0], position[1] + TOOLTIP_OFFSET[1]


# ── Controller ───────────────────────────────────────────────────────────

class InteractionController:
    """Tooltip and selection transitions for both charts."""

    def __init__(self, state):
        self._state = state
        self.hovered = None

    def hover_leaf(self, leaf: TreemapLeaf, position: Position) -> None:
        self.hovered = leaf
        self._state.set_tooltip(Tooltip(leaf_tooltip_text(leaf), _anchor(position)))

    def hover_point(self, point: TimeSeriesPoint, position: Position) -> None:
        self.hovered = point
        self._state.set_tooltip(Tooltip(point_tooltip_text(point), _anchor(position)))

    def move(self, position: Position) -> None:
        """Follow the mouse while a tooltip is showing."""
        tooltip = self._state.active_tooltip
        if tooltip is None:
            return
        self._state.set_tooltip(Tooltip(tooltip.text, _anchor(position)))

    def leave(self) -> None:
        # Clear the tooltip first so the hovered canvas still hides it
        self._state.set_tooltip(None)
        self.hovered = None

    def click_leaf(self, leaf: TreemapLeaf) -> None:
        self._state.set_selected_platform(leaf.name)
