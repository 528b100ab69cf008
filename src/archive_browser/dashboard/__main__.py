"""
Dashboard entry point.

Usage: python -m archive_browser.dashboard [--location /archives/<repo>/<archive>]
"""

import argparse
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from ..utils.logger import info, setup_logging
from .window import DashboardWindow


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="archive-browser", description="Browse borg archive file lists"
    )
    parser.add_argument(
        "--location",
        default="/",
        help="Start location, e.g. /archives/<repo>/<archive>/<directory>",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Run the dashboard as a standalone Qt application."""
    args = parse_args(argv)
    setup_logging()

    app = QApplication(sys.argv[:1])

    window = DashboardWindow(initial_location=args.location)
    window.show()
    info(f"[Dashboard] Started at {args.location}")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
