"""
Standalone API server.

Usage: python -m archive_browser.api [--host HOST] [--port PORT]
                                     [--source-dir DIR] [--cache-dir DIR]
"""

import argparse
import sys
from typing import Optional

from ..backend import FileListService, ListingDB, ListingSource
from ..backend.db import get_db_path
from ..utils.logger import setup_logging
from ..utils.settings import get_settings
from .server import ArchiveAPIServer


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="archive-browser-server",
        description="Serve archive file listings over REST",
    )
    parser.add_argument("--host", default=settings.api_host)
    parser.add_argument("--port", type=int, default=settings.api_port)
    parser.add_argument(
        "--source-dir",
        default=settings.source_dir,
        help="Directory with <repo>/archives.json and <repo>/<archive>.jsonl",
    )
    parser.add_argument(
        "--cache-dir",
        default=settings.cache_dir,
        help="Directory of the DuckDB listing cache",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the API server in the foreground."""
    args = parse_args(argv)
    setup_logging()

    service = FileListService(
        db=ListingDB(get_db_path(args.cache_dir)),
        source=ListingSource(args.source_dir),
    )
    server = ArchiveAPIServer(host=args.host, port=args.port, service=service)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
