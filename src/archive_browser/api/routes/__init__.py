"""
API Routes Package - Flask Blueprints for the archive REST API.

- health: Health check endpoint
- filelist: Archive file listings, diffs and cache clearing
- jobs: Backend job queues
- repos: Repositories and their archives
"""

from .health import health_bp
from .filelist import filelist_bp
from .jobs import jobs_bp
from .repos import repos_bp

__all__ = [
    "health_bp",
    "filelist_bp",
    "jobs_bp",
    "repos_bp",
]
