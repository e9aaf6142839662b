"""
Treemap renderer for the Social Media Share Dashboard.

Draws pre-computed ``TreemapLeaf`` rectangles on a matplotlib figure.
The axes fill the whole figure and use canvas pixel coordinates with y
pointing down, so mouse ``xdata``/``ydata`` map straight onto leaf
coordinates for hit testing.
"""

from typing import Callable, Optional, Sequence

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from .constants import LIGHT_COLORS, NO_DATA_LABEL
from .data_model import TreemapLeaf
from .treemap import color_map, has_label, label_font_size, label_lines


def _px_to_pt(px: float, dpi: float) -> float:
    return px * 72.0 / dpi


def render_treemap(
    fig: Figure,
    leaves: Sequence[TreemapLeaf],
    *,
    width: float,
    height: float,
    fill_color: Optional[Callable[[str], str]] = None,
) -> None:
    """Render treemap *leaves* on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    leaves : sequence of TreemapLeaf
        Output of ``treemap.layout`` for a *width* x *height* canvas.
    width, height : float
        Canvas size in pixels; sets the axes limits.
    fill_color : callable or None
        ``name -> colour``.  Defaults to the ordinal palette over the
        leaf names.
    """
    fig.clf()
    c = LIGHT_COLORS
    fig.set_facecolor(c['canvas'])

    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()

    if not leaves:
        ax.text(0.5, 0.5, NO_DATA_LABEL,
                transform=ax.transAxes, ha='center', va='center',
                color=c['fg_dim'])
        return

    if fill_color is None:
        palette = color_map(leaf.name for leaf in leaves)
        fill_color = palette.__getitem__

    dpi = fig.dpi
    for leaf in leaves:
        ax.add_patch(Rectangle(
            (leaf.x0, leaf.y0), leaf.width, leaf.height,
            facecolor=fill_color(leaf.name),
            edgecolor=c['cell_edge'], linewidth=1,
            gid=leaf.name,
        ))

        # Small cells stay unlabelled so text never overflows
        if not has_label(leaf):
            continue
        font_px = label_font_size(leaf)
        name, percent = label_lines(leaf)
        cx = leaf.x0 + leaf.width / 2
        cy = leaf.y0 + leaf.height / 2
        ax.text(cx, cy, name,
                ha='center', va='center',
                fontsize=_px_to_pt(font_px, dpi),
                color=c['cell_text'], clip_on=True)
        ax.text(cx, cy + font_px, percent,
                ha='center', va='top',
                fontsize=_px_to_pt(font_px * 0.8, dpi),
                color=c['cell_text'], clip_on=True)
