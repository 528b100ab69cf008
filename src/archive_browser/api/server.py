"""
Archive API Server - Flask server for the archive REST API.

Serves file listings, repository catalogues and the job feed on localhost.
Requests are handled on separate threads so the job feed stays responsive
while a forced scan is running; database access is serialized by ListingDB.
"""

import logging
import threading
from typing import Any, Optional

from flask import Flask
from werkzeug.serving import make_server

from ..backend import FileListService
from ..utils.logger import info
from .config import API_HOST, API_PORT
from .routes import health_bp, filelist_bp, jobs_bp, repos_bp
from .routes._context import RouteContext


class ArchiveAPIServer:
    """Flask server for the archive REST API.

    Runs in a background thread (start/stop) or in the foreground
    (serve_forever) for the standalone server process.
    """

    def __init__(
        self,
        host: str = API_HOST,
        port: int = API_PORT,
        service: Optional[FileListService] = None,
    ):
        """Initialize the API server.

        Args:
            host: Host to bind to (default: localhost only)
            port: Port to listen on
            service: File list service; created from settings on first use
        """
        self._host = host
        self._port = port
        self._app = Flask(__name__)
        self._server: Any = None  # werkzeug BaseWSGIServer
        self._thread: Optional[threading.Thread] = None
        self._service = service

        self._configure_routes()
        self._register_blueprints()

    @property
    def app(self) -> Flask:
        return self._app

    def _get_service(self) -> FileListService:
        """Lazy load the file list service."""
        if self._service is None:
            self._service = FileListService()
        return self._service

    def _configure_routes(self) -> None:
        RouteContext.get_instance().configure(get_service=self._get_service)

    def _register_blueprints(self) -> None:
        self._app.register_blueprint(health_bp)
        self._app.register_blueprint(filelist_bp)
        self._app.register_blueprint(jobs_bp)
        self._app.register_blueprint(repos_bp)

    def _make_server(self) -> Any:
        # werkzeug logs every request at INFO
        logging.getLogger("werkzeug").setLevel(logging.ERROR)
        self._server = make_server(self._host, self._port, self._app, threaded=True)
        # Port 0 binds an ephemeral port
        self._port = self._server.server_port
        info(f"[API] Server started on {self.url}")
        return self._server

    def start(self) -> None:
        """Start the API server in a background thread."""
        if self._thread is not None and self._thread.is_alive():
            return

        server = self._make_server()
        self._thread = threading.Thread(target=server.serve_forever, daemon=True)
        self._thread.start()

    def serve_forever(self) -> None:
        """Run the server on the calling thread until interrupted."""
        server = self._make_server()
        try:
            server.serve_forever()
        finally:
            server.server_close()
            self._server = None
            info("[API] Server stopped")

    def stop(self) -> None:
        """Stop the API server."""
        if self._server:
            self._server.shutdown()
            self._server.server_close()
            info("[API] Server stopped")
        self._server = None
        self._thread = None

    @property
    def port(self) -> int:
        return self._port

    @property
    def url(self) -> str:
        return f"http://{self._host}:{self._port}"

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
