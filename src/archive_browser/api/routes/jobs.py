"""
Job Routes - backend job queues, polled while a listing is pending.
"""

from flask import Blueprint, jsonify, request

from ...utils.logger import error
from ..config import API_BASE_PATH
from ._context import get_service

jobs_bp = Blueprint("jobs", __name__)


@jobs_bp.route(f"{API_BASE_PATH}/jobs", methods=["GET"])
def get_jobs():
    """Job queues, limited to one repository with ?repo=<id>."""
    try:
        repo_id = request.args.get("repo") or None
        queues = get_service().get_job_queues(repo_id)
        return jsonify([queue.to_dict() for queue in queues])
    except Exception as e:
        error(f"[API] Error getting jobs: {e}")
        return jsonify({"error": str(e)}), 500
