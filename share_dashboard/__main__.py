"""
Entry point for the Social Media Share Dashboard.

Usage:
    python -m share_dashboard
"""

import importlib.util
import logging
import os
import sys
import traceback

logger = logging.getLogger("share_dashboard")

_REQUIRED = ("PySide6", "matplotlib", "numpy", "rich", "squarify")


def _missing_packages():
    return [name for name in _REQUIRED if importlib.util.find_spec(name) is None]


def _exception_hook(exc_type, exc_value, exc_tb):
    """Log uncaught exceptions and show them in a dialog."""
    details = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.critical("Unhandled exception:\n%s", details)

    from PySide6.QtWidgets import QApplication, QMessageBox
    if QApplication.instance() is None:
        return
    QMessageBox.critical(
        None, "Unhandled Error",
        f"{exc_type.__name__}: {exc_value}\n\n"
        "The full traceback has been written to the log.",
    )


def _pick_font(families):
    from PySide6.QtGui import QFont, QFontDatabase

    font = QFont()
    available = [f for f in families if QFontDatabase.hasFamily(f)]
    if available:
        font.setFamily(available[0])
    font.setPointSize(10)
    return font


def main():
    """Launch the Social Media Share Dashboard."""
    missing = _missing_packages()
    if missing:
        sys.stderr.write(
            f"Missing required packages: {', '.join(missing)}\n"
            f"Install with: pip install {' '.join(missing)}\n"
        )
        return 1

    from .logging_config import setup_logging
    setup_logging()
    sys.excepthook = _exception_hook

    # The Qt binding must be chosen before matplotlib loads its Qt backend
    os.environ.setdefault("QT_API", "pyside6")
    import matplotlib
    matplotlib.use("QtAgg")

    from PySide6.QtWidgets import QApplication

    from .constants import FONT_FAMILIES, PLOT_STYLE
    from .gui_main import DashboardWindow
    from .theme import apply_plot_style, get_light_stylesheet

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setFont(_pick_font(FONT_FAMILIES))
    app.setStyleSheet(get_light_stylesheet())
    apply_plot_style(PLOT_STYLE)

    window = DashboardWindow()
    window.show()
    logger.debug("Main window shown")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
