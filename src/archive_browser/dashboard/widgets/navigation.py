"""
Sidebar navigation widgets.
"""

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
    QPushButton,
    QTreeWidget,
    QTreeWidgetItem,
)
from PyQt6.QtCore import Qt, pyqtSignal

from ...core.models import Repository
from ..styles import COLORS, SPACING, FONTS, ICONS, UI

ARCHIVE_ROLE = Qt.ItemDataRole.UserRole


class Sidebar(QFrame):
    """Repositories and their archives, plus history buttons."""

    archive_selected = pyqtSignal(str, str)  # repo_id, archive_id
    back_requested = pyqtSignal()
    forward_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("sidebar")
        self.setFixedWidth(UI["sidebar_width"])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, SPACING["lg"], 0, SPACING["lg"])
        layout.setSpacing(SPACING["sm"])

        # Logo
        logo_container = QWidget()
        logo_layout = QHBoxLayout(logo_container)
        logo_layout.setContentsMargins(SPACING["lg"], 0, SPACING["lg"], SPACING["md"])
        logo_layout.setSpacing(SPACING["sm"])

        logo_icon = QLabel(ICONS["archive"])
        logo_icon.setStyleSheet(f"font-size: 22px; color: {COLORS['accent_primary']};")
        logo_layout.addWidget(logo_icon)

        logo_text = QLabel("Archives")
        logo_text.setStyleSheet(f"""
            font-size: {FONTS["size_xl"]}px;
            font-weight: {FONTS["weight_bold"]};
            color: {COLORS["text_primary"]};
        """)
        logo_layout.addWidget(logo_text)
        logo_layout.addStretch()

        # History
        self._back_button = self._history_button(ICONS["back"], "Back")
        self._back_button.clicked.connect(self.back_requested.emit)
        logo_layout.addWidget(self._back_button)
        self._forward_button = self._history_button(ICONS["forward"], "Forward")
        self._forward_button.clicked.connect(self.forward_requested.emit)
        logo_layout.addWidget(self._forward_button)
        layout.addWidget(logo_container)

        section_label = QLabel("REPOSITORIES")
        section_label.setStyleSheet(f"""
            font-size: {FONTS["size_xs"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_muted"]};
            padding: 0 {SPACING["lg"]}px;
            letter-spacing: 1px;
        """)
        layout.addWidget(section_label)

        self._tree = QTreeWidget()
        self._tree.setObjectName("archive-tree")
        self._tree.setHeaderHidden(True)
        self._tree.setColumnCount(1)
        self._tree.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self._tree, 1)

        # Status
        status_container = QWidget()
        status_layout = QHBoxLayout(status_container)
        status_layout.setContentsMargins(SPACING["lg"], SPACING["sm"], SPACING["lg"], 0)
        status_layout.setSpacing(SPACING["sm"])

        self._status_dot = QLabel("●")
        self._status_dot.setStyleSheet(f"font-size: 10px; color: {COLORS['text_muted']};")
        status_layout.addWidget(self._status_dot)

        self._status_text = QLabel("Connecting")
        self._status_text.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            color: {COLORS["text_muted"]};
        """)
        status_layout.addWidget(self._status_text)
        status_layout.addStretch()
        layout.addWidget(status_container)

        self.set_history_state(False, False)

    def _history_button(self, icon: str, tooltip: str) -> QPushButton:
        button = QPushButton(icon)
        button.setProperty("flat", True)
        button.setToolTip(tooltip)
        button.setFixedSize(28, 28)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button

    @property
    def back_button(self) -> QPushButton:
        return self._back_button

    @property
    def forward_button(self) -> QPushButton:
        return self._forward_button

    @property
    def tree(self) -> QTreeWidget:
        return self._tree

    def set_repositories(self, repositories: list[Repository]) -> None:
        """Rebuild the tree; one top-level item per repository."""
        self._tree.clear()
        for repo in repositories:
            label = repo.display_name or repo.id
            repo_item = QTreeWidgetItem([f"{ICONS['repository']}  {label}"])
            repo_item.setData(0, ARCHIVE_ROLE, None)
            for archive in repo.archives:
                child = QTreeWidgetItem([f"{ICONS['archive']}  {archive.display_name}"])
                child.setData(0, ARCHIVE_ROLE, (repo.id, archive.id))
                child.setToolTip(0, archive.time)
                repo_item.addChild(child)
            self._tree.addTopLevelItem(repo_item)
            repo_item.setExpanded(True)

    def select_archive(self, repo_id: str, archive_id: str) -> None:
        """Highlight an archive without emitting archive_selected."""
        for i in range(self._tree.topLevelItemCount()):
            repo_item = self._tree.topLevelItem(i)
            if repo_item is None:
                continue
            for j in range(repo_item.childCount()):
                child = repo_item.child(j)
                key = child.data(0, ARCHIVE_ROLE) if child is not None else None
                if key == (repo_id, archive_id):
                    self._tree.setCurrentItem(child)
                    return

    def _on_item_clicked(self, item: QTreeWidgetItem, column: int) -> None:
        key = item.data(0, ARCHIVE_ROLE)
        if key:
            repo_id, archive_id = key
            self.archive_selected.emit(repo_id, archive_id)

    def set_history_state(self, can_go_back: bool, can_go_forward: bool) -> None:
        self._back_button.setEnabled(can_go_back)
        self._forward_button.setEnabled(can_go_forward)

    def set_status(self, active: bool, text: str = "") -> None:
        color = COLORS["success"] if active else COLORS["error"]
        self._status_dot.setStyleSheet(f"font-size: 10px; color: {color};")
        if text:
            self._status_text.setText(text)

    def status_text(self) -> str:
        return self._status_text.text()
