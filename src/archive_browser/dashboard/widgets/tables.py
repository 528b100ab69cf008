"""
File list table.

Rows are shown in the order the backend returned them; sorting is off.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QWidget,
)
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont

from ...core.models import FileEntry
from ...core.rendering import TABLE_HEADERS
from ..styles import COLORS, COL_WIDTH, DIFF_COLORS, FONTS, UI

ENTRY_ROLE = Qt.ItemDataRole.UserRole


class FileListTable(QTableWidget):
    """Mode / Date / Size / Path, plus a Diff column in diff mode."""

    ROW_HEIGHT = UI["row_height"]
    HEADER_HEIGHT = UI["header_height"]

    entry_activated = pyqtSignal(object)  # FileEntry

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._entries: list[FileEntry] = []
        self._show_diff = False

        self.setAlternatingRowColors(True)
        self.setShowGrid(False)
        self.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.setSortingEnabled(False)

        palette = self.palette()
        palette.setColor(palette.ColorRole.Base, QColor(COLORS["bg_surface"]))
        palette.setColor(palette.ColorRole.AlternateBase, QColor(COLORS["bg_elevated"]))
        self.setPalette(palette)

        v_header = self.verticalHeader()
        if v_header is not None:
            v_header.setVisible(False)
            v_header.setDefaultSectionSize(self.ROW_HEIGHT)

        header = self.horizontalHeader()
        if header:
            header.setStretchLastSection(False)
            header.setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
            header.setMinimumSectionSize(60)
            header.setFixedHeight(self.HEADER_HEIGHT)
            header.setSortIndicatorShown(False)

        self.set_headers(TABLE_HEADERS)
        self.cellDoubleClicked.connect(self._on_double_clicked)

    def set_headers(self, headers: tuple[str, ...] | list[str]) -> None:
        self.setColumnCount(len(headers))
        self.setHorizontalHeaderLabels(list(headers))
        self._show_diff = len(headers) > len(TABLE_HEADERS)

        header = self.horizontalHeader()
        if header is None:
            return
        for column, key in enumerate(("mode", "date", "size")):
            self.setColumnWidth(column, COL_WIDTH[key])
        path_column = TABLE_HEADERS.index("Path")
        header.setSectionResizeMode(path_column, QHeaderView.ResizeMode.Stretch)
        if self._show_diff:
            self.setColumnWidth(path_column + 1, COL_WIDTH["diff"])

    def header_labels(self) -> list[str]:
        labels = []
        for column in range(self.columnCount()):
            item = self.horizontalHeaderItem(column)
            labels.append(item.text() if item else "")
        return labels

    def set_entries(
        self,
        entries: list[FileEntry] | tuple[FileEntry, ...],
        headers: tuple[str, ...] = TABLE_HEADERS,
    ) -> None:
        """Replace all rows. The header row stays even when there are no rows."""
        self.set_headers(headers)
        self._entries = list(entries)
        self.setRowCount(0)
        self.setRowCount(len(self._entries))
        for row, entry in enumerate(self._entries):
            self._fill_row(row, entry)

    def _fill_row(self, row: int, entry: FileEntry) -> None:
        values = [entry.mode, entry.date, entry.size, entry.path]
        for column, value in enumerate(values):
            item = QTableWidgetItem(value)
            item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
            item.setToolTip(entry.message if column == 3 else value)
            item.setData(ENTRY_ROLE, entry)
            if column == 3:
                color = (
                    COLORS["entry_directory"]
                    if entry.is_directory
                    else COLORS["entry_file"]
                )
                item.setForeground(QColor(color))
            else:
                item.setForeground(QColor(COLORS["text_secondary"]))
                font = QFont()
                font.setFamily(FONTS["mono"].split(",")[0].strip())
                item.setFont(font)
            self.setItem(row, column, item)

        if self._show_diff:
            status = entry.diff_status or ""
            item = QTableWidgetItem(status)
            item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
            item.setData(ENTRY_ROLE, entry)
            if status in DIFF_COLORS:
                item.setForeground(QColor(DIFF_COLORS[status]))
                font = item.font()
                font.setWeight(QFont.Weight.DemiBold)
                item.setFont(font)
            self.setItem(row, len(values), item)

    def entry_at(self, row: int) -> Optional[FileEntry]:
        if 0 <= row < len(self._entries):
            return self._entries[row]
        return None

    @property
    def entries(self) -> list[FileEntry]:
        return list(self._entries)

    def _on_double_clicked(self, row: int, column: int) -> None:
        entry = self.entry_at(row)
        if entry is not None:
            self.entry_activated.emit(entry)
