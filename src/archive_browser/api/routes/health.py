"""
Health Check Route.
"""

from flask import Blueprint, jsonify

from ..config import API_BASE_PATH

health_bp = Blueprint("health", __name__)


@health_bp.route(f"{API_BASE_PATH}/health", methods=["GET"])
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok", "service": "archive-api"})
