"""
Repository Routes - repository list and per-repository archive list.
"""

from flask import Blueprint, jsonify, request

from ...backend import ArchiveNotFound
from ...utils.logger import error
from ..config import API_BASE_PATH
from ._context import get_service

repos_bp = Blueprint("repos", __name__)


@repos_bp.route(f"{API_BASE_PATH}/repos/list", methods=["GET"])
def get_repositories():
    """All repositories (id, name, displayName)."""
    try:
        return jsonify(get_service().get_repositories())
    except Exception as e:
        error(f"[API] Error listing repositories: {e}")
        return jsonify({"error": str(e)}), 500


@repos_bp.route(f"{API_BASE_PATH}/repos/repoArchiveList", methods=["GET"])
def get_repo_archive_list():
    """A repository with its archives."""
    repo_id = request.args.get("id", "").strip()
    if not repo_id:
        return jsonify({"error": "id is required"}), 400
    try:
        return jsonify(get_service().get_repository_archives(repo_id))
    except ArchiveNotFound as e:
        return jsonify({"error": str(e)}), 404
    except Exception as e:
        error(f"[API] Error getting archives of {repo_id}: {e}")
        return jsonify({"error": str(e)}), 500
