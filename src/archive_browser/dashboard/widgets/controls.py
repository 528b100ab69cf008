"""
Control widgets: headers, segmented control, empty states and alerts.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
    QPushButton,
)
from PyQt6.QtCore import Qt, pyqtSignal

from ..styles import COLORS, SPACING, FONTS, RADIUS, ICONS


class PageHeader(QWidget):
    """Page header with title and subtitle."""

    def __init__(
        self,
        title: str,
        subtitle: str = "",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, SPACING["md"])
        layout.setSpacing(SPACING["xs"])

        title_row = QHBoxLayout()
        title_row.setSpacing(SPACING["lg"])

        self._title = QLabel(title)
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_xl"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_primary"]};
        """)
        title_row.addWidget(self._title)
        title_row.addStretch()
        layout.addLayout(title_row)

        self._subtitle = QLabel(subtitle)
        self._subtitle.setStyleSheet(f"""
            font-size: {FONTS["size_base"]}px;
            color: {COLORS["text_muted"]};
        """)
        self._subtitle.setVisible(bool(subtitle))
        layout.addWidget(self._subtitle)

    def set_title(self, title: str, subtitle: str = "") -> None:
        self._title.setText(title)
        self._subtitle.setText(subtitle)
        self._subtitle.setVisible(bool(subtitle))

    def title(self) -> str:
        return self._title.text()


class SegmentedControl(QWidget):
    """Segmented control choosing one of a few values.

    value_changed fires on user clicks only; set_value() is silent so the
    control can mirror external state.
    """

    value_changed = pyqtSignal(str)

    def __init__(
        self,
        options: list[tuple[str, str]],
        parent: QWidget | None = None,
    ):
        """
        Args:
            options: (label, value) pairs
        """
        super().__init__(parent)
        self._values = [value for _, value in options]
        self._current_index = 0
        self._buttons: list[QPushButton] = []

        self.setStyleSheet(f"""
            QWidget {{
                background-color: {COLORS["bg_elevated"]};
                border: 1px solid {COLORS["border_default"]};
                border-radius: {RADIUS["sm"]}px;
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(3, 3, 3, 3)
        layout.setSpacing(2)

        for i, (label, _) in enumerate(options):
            btn = QPushButton(label)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setCheckable(True)
            btn.setMinimumWidth(64)
            btn.clicked.connect(lambda checked, idx=i: self._on_button_clicked(idx))
            self._buttons.append(btn)
            layout.addWidget(btn)

        self._select(0)

    def _on_button_clicked(self, index: int) -> None:
        self._select(index)
        # Re-clicking the current mode still commits it
        self.value_changed.emit(self._values[index])

    def _select(self, index: int) -> None:
        self._current_index = index
        for i, btn in enumerate(self._buttons):
            btn.setChecked(i == index)
            self._update_button_style(btn, i == index)

    def _update_button_style(self, btn: QPushButton, selected: bool) -> None:
        if selected:
            btn.setStyleSheet(f"""
                QPushButton {{
                    background-color: {COLORS["accent_primary"]};
                    color: white;
                    border: none;
                    border-radius: {RADIUS["sm"] - 2}px;
                    font-weight: {FONTS["weight_medium"]};
                    padding: 0 {SPACING["md"]}px;
                }}
            """)
        else:
            btn.setStyleSheet(f"""
                QPushButton {{
                    background-color: transparent;
                    color: {COLORS["text_muted"]};
                    border: none;
                    border-radius: {RADIUS["sm"] - 2}px;
                    font-weight: {FONTS["weight_normal"]};
                    padding: 0 {SPACING["md"]}px;
                }}
                QPushButton:hover {{
                    background-color: {COLORS["bg_hover"]};
                    color: {COLORS["text_primary"]};
                }}
            """)

    def set_value(self, value: str) -> None:
        if value in self._values:
            self._select(self._values.index(value))

    def value(self) -> str:
        return self._values[self._current_index]

    def button(self, value: str) -> QPushButton:
        return self._buttons[self._values.index(value)]


class EmptyState(QWidget):
    """Centered placeholder with icon, title, subtitle and an optional action."""

    action_clicked = pyqtSignal()

    def __init__(
        self,
        icon: str = ICONS["not_loaded"],
        title: str = "No data",
        subtitle: str = "",
        action: Optional[str] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["2xl"], SPACING["xl"], SPACING["2xl"], SPACING["xl"]
        )
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(SPACING["sm"])

        self._icon_label = QLabel(icon)
        self._icon_label.setStyleSheet(f"font-size: 36px; color: {COLORS['text_muted']};")
        self._icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._icon_label)

        self._title_label = QLabel(title)
        self._title_label.setStyleSheet(f"""
            font-size: {FONTS["size_md"]}px;
            font-weight: {FONTS["weight_medium"]};
            color: {COLORS["text_secondary"]};
        """)
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title_label)

        self._subtitle_label = QLabel(subtitle)
        self._subtitle_label.setWordWrap(True)
        self._subtitle_label.setStyleSheet(f"""
            font-size: {FONTS["size_base"]}px;
            color: {COLORS["text_muted"]};
        """)
        self._subtitle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._subtitle_label.setVisible(bool(subtitle))
        layout.addWidget(self._subtitle_label)

        self._action_button: Optional[QPushButton] = None
        if action:
            self._action_button = QPushButton(action)
            self._action_button.setCursor(Qt.CursorShape.PointingHandCursor)
            self._action_button.clicked.connect(self.action_clicked.emit)
            layout.addWidget(self._action_button, 0, Qt.AlignmentFlag.AlignCenter)

    @property
    def action_button(self) -> Optional[QPushButton]:
        return self._action_button

    def subtitle(self) -> str:
        return self._subtitle_label.text()


class ErrorAlert(QFrame):
    """Error box with a title, a description and one recovery action."""

    action_clicked = pyqtSignal()

    def __init__(
        self,
        title: str,
        description: str = "",
        action: str = "Try again",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setObjectName("error-alert")
        self.setStyleSheet(f"""
            QFrame#error-alert {{
                background-color: {COLORS["error_muted"]};
                border: 1px solid {COLORS["error"]};
                border-radius: {RADIUS["md"]}px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["lg"], SPACING["md"], SPACING["lg"], SPACING["md"]
        )
        layout.setSpacing(SPACING["sm"])

        self._title = QLabel(f"{ICONS['error']}  {title}")
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_md"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["error"]};
        """)
        layout.addWidget(self._title)

        self._description = QLabel(description)
        self._description.setWordWrap(True)
        self._description.setStyleSheet(f"color: {COLORS['text_secondary']};")
        layout.addWidget(self._description)

        self._action = QPushButton(action)
        self._action.setCursor(Qt.CursorShape.PointingHandCursor)
        self._action.clicked.connect(self.action_clicked.emit)
        layout.addWidget(self._action, 0, Qt.AlignmentFlag.AlignLeft)

    @property
    def action_button(self) -> QPushButton:
        return self._action

    def set_description(self, description: str) -> None:
        self._description.setText(description)

    def description(self) -> str:
        return self._description.text()
