"""
Dashboard sections.
"""

from .file_list import FileListSection

__all__ = ["FileListSection"]
