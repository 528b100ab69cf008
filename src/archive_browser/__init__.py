"""
Archive Browser - browse and diff the file listings of backup archives.

Components:
- core: filter/fetch/diff controller, navigation sync, view model
- api: REST client and Flask server
- backend: DuckDB listing cache, scan jobs and listing queries
- dashboard: PyQt6 desktop interface
"""

__version__ = "0.1.0"
