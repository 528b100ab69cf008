"""
Dashboard color palette - dark theme.

Background layers give depth; semantic colors mark job states and diff
annotations.
"""

COLORS = {
    # Backgrounds, darkest first
    "bg_base": "#0d0d0d",
    "bg_surface": "#1a1a1a",
    "bg_elevated": "#222222",
    "bg_hover": "#2a2a2a",
    "bg_active": "#303030",
    # Text
    "text_primary": "#f5f5f5",
    "text_secondary": "#b3b3b3",
    "text_muted": "#737373",
    # Accent
    "accent_primary": "#3b82f6",
    "accent_primary_hover": "#60a5fa",
    "accent_primary_muted": "rgba(59, 130, 246, 0.15)",
    # Semantic
    "success": "#22c55e",
    "success_muted": "rgba(34, 197, 94, 0.20)",
    "warning": "#f59e0b",
    "warning_muted": "rgba(245, 158, 11, 0.20)",
    "error": "#ef4444",
    "error_muted": "rgba(239, 68, 68, 0.20)",
    "info": "#3b82f6",
    "info_muted": "rgba(59, 130, 246, 0.20)",
    # Diff annotations
    "diff_new": "#22c55e",
    "diff_removed": "#ef4444",
    "diff_modified": "#eab308",
    # Listing
    "entry_directory": "#60a5fa",
    "entry_file": "#b3b3b3",
    # Borders
    "border_subtle": "rgba(255, 255, 255, 0.08)",
    "border_default": "rgba(255, 255, 255, 0.12)",
    "border_strong": "rgba(255, 255, 255, 0.18)",
    # Sidebar
    "sidebar_bg": "#111111",
    "sidebar_hover": "rgba(255, 255, 255, 0.04)",
    "sidebar_active": "rgba(59, 130, 246, 0.12)",
    "sidebar_active_border": "#3b82f6",
}

# Job status -> (foreground, background)
JOB_STATUS_COLORS = {
    "QUEUED": (COLORS["text_muted"], COLORS["bg_elevated"]),
    "RUNNING": (COLORS["info"], COLORS["info_muted"]),
    "DONE": (COLORS["success"], COLORS["success_muted"]),
    "FAILED": (COLORS["error"], COLORS["error_muted"]),
    "CANCELLED": (COLORS["warning"], COLORS["warning_muted"]),
}

DIFF_COLORS = {
    "new": COLORS["diff_new"],
    "removed": COLORS["diff_removed"],
    "modified": COLORS["diff_modified"],
}
