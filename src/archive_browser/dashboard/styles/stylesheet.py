"""
Dashboard QSS stylesheet generation.
"""

from .colors import COLORS
from .dimensions import SPACING, RADIUS, FONTS


def get_stylesheet() -> str:
    """Get the complete QSS stylesheet for the archive browser."""
    return f"""
/* ---------- Base ---------- */

* {{
    outline: none;
}}

QWidget {{
    font-family: {FONTS["family"]};
    font-size: {FONTS["size_base"]}px;
    color: {COLORS["text_primary"]};
    background-color: transparent;
}}

QMainWindow {{
    background-color: {COLORS["bg_base"]};
}}

/* ---------- Sidebar ---------- */

QFrame#sidebar {{
    background-color: {COLORS["sidebar_bg"]};
    border-right: 1px solid {COLORS["border_default"]};
}}

QTreeWidget#archive-tree {{
    border: none;
    background-color: transparent;
}}

QTreeWidget#archive-tree::item {{
    padding: {SPACING["xs"]}px {SPACING["sm"]}px;
    border-left: 3px solid transparent;
}}

QTreeWidget#archive-tree::item:hover {{
    background-color: {COLORS["sidebar_hover"]};
}}

QTreeWidget#archive-tree::item:selected {{
    background-color: {COLORS["sidebar_active"]};
    border-left: 3px solid {COLORS["sidebar_active_border"]};
    color: {COLORS["text_primary"]};
}}

/* ---------- Scroll bars ---------- */

QScrollBar:vertical {{
    background-color: transparent;
    width: 8px;
    margin: 0;
}}

QScrollBar::handle:vertical {{
    background-color: {COLORS["border_strong"]};
    min-height: 40px;
    border-radius: 4px;
}}

QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0px;
}}

QScrollBar:horizontal {{
    background-color: transparent;
    height: 8px;
    margin: 0;
}}

QScrollBar::handle:horizontal {{
    background-color: {COLORS["border_strong"]};
    min-width: 40px;
    border-radius: 4px;
}}

QScrollBar::add-line:horizontal, QScrollBar::sub-line:horizontal {{
    width: 0px;
}}

/* ---------- Tables ---------- */

QTableWidget {{
    background-color: {COLORS["bg_surface"]};
    border: 1px solid {COLORS["border_default"]};
    border-radius: {RADIUS["md"]}px;
    gridline-color: transparent;
    selection-background-color: {COLORS["bg_hover"]};
}}

QTableWidget::item {{
    padding: {SPACING["xs"]}px {SPACING["sm"]}px;
    border-bottom: 1px solid {COLORS["border_subtle"]};
}}

QTableWidget::item:selected {{
    background-color: {COLORS["sidebar_active"]};
    color: {COLORS["text_primary"]};
}}

QHeaderView::section {{
    background-color: {COLORS["bg_elevated"]};
    color: {COLORS["text_muted"]};
    padding: {SPACING["sm"]}px;
    border: none;
    border-bottom: 1px solid {COLORS["border_default"]};
    font-weight: {FONTS["weight_semibold"]};
    font-size: {FONTS["size_xs"]}px;
}}

/* ---------- Inputs ---------- */

QLineEdit, QComboBox {{
    background-color: {COLORS["bg_elevated"]};
    border: 1px solid {COLORS["border_default"]};
    border-radius: {RADIUS["sm"]}px;
    padding: {SPACING["xs"]}px {SPACING["sm"]}px;
    min-height: 24px;
    font-size: {FONTS["size_sm"]}px;
}}

QLineEdit:focus, QComboBox:focus {{
    border-color: {COLORS["accent_primary"]};
}}

QComboBox QAbstractItemView {{
    background-color: {COLORS["bg_surface"]};
    border: 1px solid {COLORS["border_default"]};
    selection-background-color: {COLORS["bg_hover"]};
}}

/* ---------- Buttons ---------- */

QPushButton {{
    background-color: {COLORS["accent_primary"]};
    color: white;
    border: none;
    border-radius: {RADIUS["sm"]}px;
    padding: {SPACING["xs"]}px {SPACING["md"]}px;
    font-weight: {FONTS["weight_medium"]};
    font-size: {FONTS["size_sm"]}px;
    min-height: 28px;
}}

QPushButton:hover {{
    background-color: {COLORS["accent_primary_hover"]};
}}

QPushButton:disabled {{
    background-color: {COLORS["bg_elevated"]};
    color: {COLORS["text_muted"]};
}}

QPushButton[flat="true"] {{
    background-color: transparent;
    color: {COLORS["accent_primary"]};
    padding: 0 {SPACING["xs"]}px;
}}

/* ---------- Progress ---------- */

QProgressBar {{
    background-color: {COLORS["bg_elevated"]};
    border: none;
    border-radius: 3px;
    max-height: 6px;
}}

QProgressBar::chunk {{
    background-color: {COLORS["accent_primary"]};
    border-radius: 3px;
}}

QToolTip {{
    background-color: {COLORS["bg_elevated"]};
    color: {COLORS["text_primary"]};
    border: 1px solid {COLORS["border_default"]};
    padding: {SPACING["xs"]}px {SPACING["sm"]}px;
}}
"""
