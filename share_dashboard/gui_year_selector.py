"""
Searchable year selector for the Social Media Share Dashboard.

An editable combo box whose completer matches anywhere in the year
string.  Emits ``year_selected`` only for a year that is one of the
options.
"""

from typing import List

from PySide6.QtWidgets import QWidget, QHBoxLayout, QComboBox, QCompleter, QLabel
from PySide6.QtCore import Qt, Signal


class YearSelector(QWidget):
    """Label + searchable combo box of year strings."""

    year_selected = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._options: List[str] = []

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        layout.addWidget(QLabel("Year:"))

        self._combo = QComboBox()
        self._combo.setEditable(True)
        self._combo.setInsertPolicy(QComboBox.InsertPolicy.NoInsert)
        self._combo.lineEdit().setPlaceholderText("Select an option")

        completer = QCompleter(self._combo.model(), self._combo)
        completer.setFilterMode(Qt.MatchFlag.MatchContains)
        completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        completer.setCompletionMode(QCompleter.CompletionMode.PopupCompletion)
        self._combo.setCompleter(completer)
        layout.addWidget(self._combo)

        self._combo.activated.connect(lambda *_: self._on_activated())

    def set_options(self, options: List[str], current: str = "") -> None:
        """Replace the options without emitting ``year_selected``."""
        self._options = list(options)
        self._combo.blockSignals(True)
        self._combo.clear()
        self._combo.addItems(self._options)
        idx = self._combo.findText(current)
        self._combo.setCurrentIndex(idx if idx >= 0 else (0 if self._options else -1))
        self._combo.blockSignals(False)
        self._combo.setEnabled(bool(self._options))

    def options(self) -> List[str]:
        return list(self._options)

    def _on_activated(self):
        text = self._combo.currentText().strip()
        if text in self._options:
            self.year_selected.emit(text)
