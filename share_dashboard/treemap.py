"""
Treemap model for the Social Media Share Dashboard.

Turns per-platform averages into laid-out ``TreemapLeaf`` rectangles:

1. Keep platforms with a positive numeric average, quotes stripped,
   sorted by value descending (ties keep column order).
2. Tile the padded canvas with the squarified algorithm of the
   ``squarify`` package, on sizes normalised to the canvas area.
3. Inset every cell by half the padding and round edges to whole
   pixels.

Colours are keyed by the *sorted platform names*, not by value, so a
platform keeps its colour when the ranking changes between years.
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import squarify
from matplotlib.colors import to_hex, to_rgb

from .constants import (
    DATE_COLUMN, LABEL_AREA_THRESHOLD, SELECTED_BRIGHTEN,
    TABLEAU10, TREEMAP_PADDING,
)
from .csv_parser import parse_share, unquote
from .data_model import TreemapLeaf

Rect = Tuple[float, float, float, float]

_DATE_NAME = unquote(DATE_COLUMN)


# ── Input filtering ──────────────────────────────────────────────────────

def _as_number(raw) -> Optional[float]:
    if isinstance(raw, str):
        return parse_share(raw)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def treemap_items(averages: Mapping[str, object]) -> List[Tuple[str, float]]:
    """Positive ``(name, value)`` pairs sorted by value, largest first."""
    items = []
    for column, raw in averages.items():
        name = unquote(column)
        if name == _DATE_NAME:
            continue
        value = _as_number(raw)
        if value is None or value <= 0:
            continue
        items.append((name, value))
    # list.sort is stable, so equal values keep their column order
    items.sort(key=lambda item: item[1], reverse=True)
    return items


# ── Tiling ───────────────────────────────────────────────────────────────

def tile(
    values: Sequence[float],
    x0: float, y0: float, x1: float, y1: float,
) -> List[Rect]:
    """Tile (x0, y0, x1, y1) with one squarified rectangle per value.

    Parameters
    ----------
    values : sequence of float
        Strictly positive, sorted descending.
    x0, y0, x1, y1 : float
        Rectangle to fill.

    Returns
    -------
    list of (x0, y0, x1, y1)
        In the order of *values*; areas are proportional to the values.

    Raises
    ------
    ValueError
        If a value is not strictly positive.
    """
    if any(v <= 0 for v in values):
        raise ValueError("treemap tiling requires strictly positive values")
    if not values:
        return []

    dx, dy = x1 - x0, y1 - y0
    if dx <= 0 or dy <= 0:
        # Nothing to share out: every cell is the degenerate region itself
        return [(x0, y0, x1, y1)] * len(values)

    # squarify expects sizes that sum to the area being tiled
    sizes = squarify.normalize_sizes(list(values), dx, dy)
    return [
        (r["x"], r["y"], r["x"] + r["dx"], r["y"] + r["dy"])
        for r in squarify.squarify(sizes, x0, y0, dx, dy)
    ]


def _inset(rect: Rect, amount: float) -> Rect:
    """Shrink *rect* by *amount* on every side, collapsing to its middle."""
    x0, y0, x1, y1 = rect
    x0, y0, x1, y1 = x0 + amount, y0 + amount, x1 - amount, y1 - amount
    if x1 < x0:
        x0 = x1 = (x0 + x1) / 2
    if y1 < y0:
        y0 = y1 = (y0 + y1) / 2
    return x0, y0, x1, y1


def _round_half_up(v: float) -> float:
    return float(math.floor(v + 0.5))


def layout(
    averages: Mapping[str, object],
    canvas_width: float,
    canvas_height: float,
    *,
    padding: float = TREEMAP_PADDING,
    round_edges: bool = True,
) -> List[TreemapLeaf]:
    """Lay out the positive averages as treemap leaves.

    Parameters
    ----------
    averages : mapping
        Platform (possibly quoted) → average share.
    canvas_width, canvas_height : float
        Canvas size in pixels.
    padding : float
        Gap between adjacent cells and between cells and the border.
    round_edges : bool
        Round every edge to a whole pixel.

    Returns
    -------
    list of TreemapLeaf
        Largest value first.

    Raises
    ------
    ValueError
        If the canvas has no area.
    """
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError(
            f"canvas must have a positive size, got "
            f"{canvas_width} x {canvas_height}"
        )

    items = treemap_items(averages)
    if not items:
        return []

    half = padding / 2
    region = _inset((0.0, 0.0, float(canvas_width), float(canvas_height)),
                    padding - half)
    rects = tile([value for _, value in items], *region)

    leaves = []
    for (name, value), rect in zip(items, rects):
        x0, y0, x1, y1 = _inset(rect, half)
        if round_edges:
            x0, y0, x1, y1 = (_round_half_up(v) for v in (x0, y0, x1, y1))
        leaves.append(TreemapLeaf(name, value, x0, y0, x1, y1))
    return leaves


# ── Colours and labels ───────────────────────────────────────────────────

def color_map(platforms: Iterable[str], palette: Sequence[str] = TABLEAU10) -> Dict[str, str]:
    """Assign palette colours by position in the sorted name list."""
    names = sorted({unquote(p) for p in platforms} - {_DATE_NAME})
    return {name: palette[idx % len(palette)] for idx, name in enumerate(names)}


def brighten(color: str, k: float = SELECTED_BRIGHTEN) -> str:
    """Brighter variant of *color*: every channel scaled by (1/0.7)**k."""
    factor = (1 / 0.7) ** k
    r, g, b = to_rgb(color)
    return to_hex((min(1.0, r * factor), min(1.0, g * factor), min(1.0, b * factor)))


def has_label(leaf: TreemapLeaf, threshold: float = LABEL_AREA_THRESHOLD) -> bool:
    """Only cells larger than *threshold* px² get a text label."""
    return leaf.area > threshold


def label_font_size(leaf: TreemapLeaf) -> float:
    return min(leaf.width / 10, leaf.height / 5)


def label_lines(leaf: TreemapLeaf) -> Tuple[str, str]:
    return leaf.name, f"{leaf.value:.2f}%"


# ── Model ────────────────────────────────────────────────────────────────

class TreemapModel:
    """Last treemap layout plus the platform selection it feeds.

    The selection itself lives in the shared ``DashboardState``; the
    model only writes it through ``select``.
    """

    def __init__(self, state):
        self._state = state
        self._leaves: List[TreemapLeaf] = []
        self._colors: Dict[str, str] = {}

    @property
    def leaves(self) -> List[TreemapLeaf]:
        return list(self._leaves)

    def relayout(self, averages: Optional[Mapping[str, object]], width: float, height: float) -> List[TreemapLeaf]:
        """Recompute the layout for new data or a new canvas size."""
        if not averages or width <= 0 or height <= 0:
            self._leaves = []
            self._colors = {}
            return []
        self._colors = color_map(averages.keys())
        self._leaves = layout(averages, width, height)
        return self.leaves

    def fill_color(self, name: str) -> str:
        """Cell colour, brightened when *name* is the selected platform."""
        color = self._colors.get(name, TABLEAU10[0])
        if name == self._state.selected_platform:
            return brighten(color)
        return color

    def select(self, name: str) -> None:
        """Make *name* the selected platform.

        Selecting the already-selected platform leaves it selected.
        """
        self._state.set_selected_platform(name)
