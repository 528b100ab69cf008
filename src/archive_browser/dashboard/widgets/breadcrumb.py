"""
Breadcrumb bar for tree mode.
"""

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget
from PyQt6.QtCore import Qt, pyqtSignal

from ...core.rendering import BreadcrumbSegment
from ..styles import COLORS, FONTS, SPACING

ROOT_LABEL = "/"


class BreadcrumbBar(QWidget):
    """Root link followed by one link per directory level.

    Clicking segment k emits ``directory_requested`` with the path made of
    segments 0..k; the root link emits an empty path.
    """

    directory_requested = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(SPACING["xs"])
        self._buttons: list[QPushButton] = []
        self.set_segments([])

    def set_segments(self, segments: list[BreadcrumbSegment] | tuple) -> None:
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget() if item is not None else None
            if widget is not None:
                widget.deleteLater()
        self._buttons = []

        self._add_link(ROOT_LABEL, "")
        for segment in segments:
            separator = QLabel("/")
            separator.setStyleSheet(f"color: {COLORS['text_muted']};")
            self._layout.addWidget(separator)
            self._add_link(segment.label, segment.path)
        self._layout.addStretch()

    def _add_link(self, label: str, path: str) -> None:
        button = QPushButton(label)
        button.setProperty("flat", True)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        button.setStyleSheet(f"""
            QPushButton {{
                color: {COLORS["accent_primary"]};
                font-size: {FONTS["size_base"]}px;
                padding: 2px {SPACING["xs"]}px;
            }}
        """)
        button.clicked.connect(
            lambda checked=False, p=path: self.directory_requested.emit(p)
        )
        self._buttons.append(button)
        self._layout.addWidget(button)

    @property
    def links(self) -> list[QPushButton]:
        """Root link first, then one per segment"""
        return list(self._buttons)
