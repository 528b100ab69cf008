"""
File list filter bar: search, mode, max size and diff target.
"""

from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QWidget,
)
from PyQt6.QtCore import Qt, QTimer, pyqtSignal

from ...core.models import Archive, FileFilter, ListMode
from ..styles import ICONS, SPACING, UI
from .controls import SegmentedControl

NO_DIFF_LABEL = "No diff"


class FilterBar(QWidget):
    """Emits ``field_changed(name, value)`` with filter wire names.

    Search commits after a debounce; mode, max size and diff target commit
    immediately. set_filter() mirrors a filter without emitting anything.
    """

    field_changed = pyqtSignal(str, str)
    reload_requested = pyqtSignal()

    def __init__(self, debounce_ms: int = 300, parent: QWidget | None = None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING["sm"])

        self._search = QLineEdit()
        self._search.setPlaceholderText("Search paths, owners, dates...")
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self._on_search_edited)
        self._search.returnPressed.connect(self.commit_search)
        layout.addWidget(self._search, 1)

        self._search_timer = QTimer(self)
        self._search_timer.setSingleShot(True)
        self._search_timer.setInterval(debounce_ms)
        self._search_timer.timeout.connect(self.commit_search)

        self._mode = SegmentedControl(
            [("Tree", ListMode.TREE.value), ("Flat", ListMode.FLAT.value)]
        )
        self._mode.value_changed.connect(
            lambda value: self.field_changed.emit("mode", value)
        )
        layout.addWidget(self._mode)

        self._max_size = QComboBox()
        self._max_size.setToolTip("Maximum number of entries")
        self._max_size.addItems(UI["max_size_choices"])
        self._max_size.currentTextChanged.connect(
            lambda value: self.field_changed.emit("maxSize", value)
        )
        layout.addWidget(self._max_size)

        self._diff = QComboBox()
        self._diff.setToolTip("Compare with another archive")
        self._diff.addItem(NO_DIFF_LABEL, "")
        self._diff.currentIndexChanged.connect(self._on_diff_changed)
        layout.addWidget(self._diff)

        self._reload = QPushButton(ICONS["reload"])
        self._reload.setToolTip("Reload")
        self._reload.setCursor(Qt.CursorShape.PointingHandCursor)
        self._reload.clicked.connect(self.reload_requested.emit)
        layout.addWidget(self._reload)

        self._committed_search = ""

    @property
    def search_input(self) -> QLineEdit:
        return self._search

    @property
    def mode_control(self) -> SegmentedControl:
        return self._mode

    @property
    def max_size_combo(self) -> QComboBox:
        return self._max_size

    @property
    def diff_combo(self) -> QComboBox:
        return self._diff

    @property
    def reload_button(self) -> QPushButton:
        return self._reload

    def _on_search_edited(self, text: str) -> None:
        self._search_timer.start()

    def commit_search(self) -> None:
        self._search_timer.stop()
        text = self._search.text()
        if text == self._committed_search:
            return
        self._committed_search = text
        self.field_changed.emit("search", text)

    def _on_diff_changed(self, index: int) -> None:
        self.field_changed.emit("diffArchiveId", self._diff.itemData(index) or "")

    def set_diff_targets(self, archives: list[Archive], exclude: str = "") -> None:
        """Offer ``archives`` (minus ``exclude``) as diff targets."""
        current = self._diff.currentData() or ""
        self._diff.blockSignals(True)
        try:
            self._diff.clear()
            self._diff.addItem(NO_DIFF_LABEL, "")
            for archive in archives:
                if archive.id != exclude:
                    self._diff.addItem(archive.display_name, archive.id)
            index = self._diff.findData(current)
            self._diff.setCurrentIndex(max(index, 0))
        finally:
            self._diff.blockSignals(False)

    def set_filter(self, file_filter: FileFilter) -> None:
        """Show ``file_filter`` without emitting field_changed.

        Search text the operator is still typing is left alone; its pending
        commit compares against the new filter's search.
        """
        editing = (
            self._search_timer.isActive()
            or self._search.text() != self._committed_search
        )
        widgets = (self._search, self._max_size, self._diff)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            if not editing and self._search.text() != file_filter.search:
                self._search.setText(file_filter.search)
            self._committed_search = file_filter.search
            self._mode.set_value(file_filter.mode.value)

            if self._max_size.findText(file_filter.max_size) < 0:
                self._max_size.addItem(file_filter.max_size)
            self._max_size.setCurrentText(file_filter.max_size)

            index = self._diff.findData(file_filter.diff_archive_id)
            self._diff.setCurrentIndex(max(index, 0))
        finally:
            for widget in widgets:
                widget.blockSignals(False)
