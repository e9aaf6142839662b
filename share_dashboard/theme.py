"""
Theme and stylesheet for the Social Media Share Dashboard.

Light card-style Qt stylesheet plus the helper that pushes the
dashboard's matplotlib style into ``rcParams``.
"""

from .constants import LIGHT_COLORS


def get_light_stylesheet() -> str:
    """Generate the dashboard stylesheet."""
    c = LIGHT_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 14px;
    }}
    QFrame#card {{
        background-color: {c['card']};
        border: 1px solid {c['border']};
        border-radius: 8px;
    }}
    QLabel#title {{
        font-size: 24px;
    }}
    QLabel#cardTitle {{
        font-size: 18px;
        font-weight: bold;
    }}
    QComboBox {{
        background-color: {c['bg']};
        border: 1px solid {c['border']};
        border-radius: 6px;
        padding: 6px 10px;
        min-height: 28px;
        min-width: 200px;
    }}
    QComboBox:focus {{
        border-color: {c['accent']};
    }}
    QStatusBar {{
        color: {c['fg_dim']};
        border-top: 1px solid {c['border']};
    }}
    QToolTip {{
        background-color: {c['tooltip_bg']};
        color: {c['tooltip_fg']};
        border: none;
        padding: 8px;
        border-radius: 4px;
        font-size: 14px;
    }}
    """


def apply_plot_style(style: dict) -> None:
    """Push *style* (normally ``PLOT_STYLE``) into matplotlib's rcParams."""
    import matplotlib as mpl
    mpl.rcParams.update(style)
