"""
Constants for the Social Media Share Dashboard.

Centralises the CSV conventions, sentinel values, treemap layout
settings, colour palettes, and matplotlib style dictionaries.
"""

# ── CSV conventions ──────────────────────────────────────────────────────
# The header keeps its quote characters, so the date column is literally
# named "Date" *with* the quotes.
DATE_COLUMN = '"Date"'
DATE_SEPARATOR = "-"
FIELD_DELIMITER = ","
QUOTE_CHAR = '"'

# Relative to the working directory, like the browser build's ./social_media.csv
DEFAULT_CSV_PATH = "social_media.csv"

# ── Sentinels ────────────────────────────────────────────────────────────
ZERO_SENTINEL = "0"
# Anomalous first month of the dataset, never shown in the trend
SENTINEL_MONTH = "2009-03"

# ── Treemap layout ───────────────────────────────────────────────────────
TREEMAP_PADDING = 1
LABEL_AREA_THRESHOLD = 1500.0
SELECTED_BRIGHTEN = 0.5
# Canvas height follows the width, capped
CANVAS_HEIGHT_RATIO = 0.4
CANVAS_MAX_HEIGHT = 400

# ── Interaction ──────────────────────────────────────────────────────────
TOOLTIP_OFFSET = (10, 10)
POINT_HIT_RADIUS = 8.0

# ── Tableau 10 categorical palette (treemap cells) ───────────────────────
TABLEAU10 = [
    '#4e79a7', '#f28e2c', '#e15759', '#76b7b2', '#59a14f',
    '#edc949', '#af7aa1', '#ff9da7', '#9c755f', '#bab0ab',
]

# ── Dashboard colours ────────────────────────────────────────────────────
LIGHT_COLORS = {
    'bg':           '#ffffff',
    'card':         '#ffffff',
    'canvas':       '#f5f5f5',
    'fg':           '#1a1a2e',
    'fg_dim':       '#666666',
    'border':       '#d0d0d0',
    'grid':         '#e0e0e0',
    'accent':       '#1877f2',
    'cell_edge':    '#ffffff',
    'cell_text':    '#ffffff',
    'tooltip_bg':   '#000000',
    'tooltip_fg':   '#ffffff',
    'red':          '#c00000',
    'green':        '#2e7d32',
}

LINE_COLOR = LIGHT_COLORS['accent']
LINE_WIDTH = 3.0
POINT_RADIUS = 5.0
POINT_RADIUS_ACTIVE = 8.0

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "Roboto", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Helvetica", "Arial", "sans-serif",
]

# ── Matplotlib style dict ────────────────────────────────────────────────
PLOT_STYLE = {
    'figure.facecolor':  LIGHT_COLORS['canvas'],
    'axes.facecolor':    LIGHT_COLORS['canvas'],
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   LIGHT_COLORS['fg'],
    'text.color':        LIGHT_COLORS['fg'],
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    10,
    'grid.color':        LIGHT_COLORS['grid'],
}

# ── Messages ─────────────────────────────────────────────────────────────
NO_DATA_LABEL = "No data for the selected year"
