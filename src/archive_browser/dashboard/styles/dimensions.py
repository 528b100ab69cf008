"""
Dashboard dimensions - spacing, typography and UI constants (8px grid).
"""

SPACING = {
    "xs": 4,
    "sm": 8,
    "md": 16,
    "lg": 24,
    "xl": 32,
    "2xl": 48,
}

RADIUS = {
    "sm": 6,  # Badges, buttons
    "md": 8,  # Cards, inputs
    "lg": 12,  # Containers
}

FONTS = {
    "family": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
    "mono": "ui-monospace, 'SF Mono', Menlo, Monaco, 'Courier New', monospace",
    "size_xs": 11,
    "size_sm": 12,
    "size_base": 13,
    "size_md": 14,
    "size_lg": 16,
    "size_xl": 18,
    "weight_normal": 400,
    "weight_medium": 500,
    "weight_semibold": 600,
    "weight_bold": 700,
}

UI = {
    # Sidebar
    "sidebar_width": 260,
    # Tables
    "row_height": 32,
    "header_height": 36,
    # Filter choices for the max result size
    "max_size_choices": ["50", "100", "500", "1000", "5000", "10000"],
    # Window
    "window_min_width": 1000,
    "window_min_height": 640,
    "window_default_width": 1280,
    "window_default_height": 800,
}

COL_WIDTH = {
    "mode": 110,
    "date": 160,
    "size": 90,
    "diff": 90,
}

ICONS = {
    "archive": "▣",
    "repository": "◆",
    "back": "←",
    "forward": "→",
    "reload": "↻",
    "error": "×",
    "not_loaded": "○",
}
