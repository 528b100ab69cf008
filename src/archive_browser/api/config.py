"""
API Configuration - Shared constants for client and server.
"""

# Network configuration
API_HOST = "127.0.0.1"
API_PORT = 9042
API_BASE_PATH = "/rest"

# Timeouts (in seconds)
API_TIMEOUT = 30  # Client timeout for file list and job requests
SCAN_TIMEOUT = 3600  # Forced file list requests wait for the whole scan
HEALTH_TIMEOUT = 2


def get_base_url(host: str = API_HOST, port: int = API_PORT) -> str:
    """Get the base URL for API requests, including the REST prefix."""
    return f"http://{host}:{port}{API_BASE_PATH}"
