"""
File List Routes - GET /rest/archives/filelist and /rest/archives/clearCache.

The file list answers a bare JSON array: ``[{"mode": "notLoaded"}]`` when the
listing has not been computed and the request does not force it, else the
entries. Clearing the cache makes the next request answer the sentinel again.
"""

from flask import Blueprint, jsonify, request

from ...backend import ArchiveNotFound, ScanError
from ...core.listing import listing_to_payload
from ...core.models import ListMode
from ...utils.logger import error
from ..config import API_BASE_PATH
from ._context import get_service

filelist_bp = Blueprint("filelist", __name__)

DEFAULT_MAX_RESULTS = 50
TRUE_VALUES = ("true", "1", "yes")


class BadRequest(ValueError):
    pass


def _parse_args() -> dict:
    args = request.args
    archive_id = args.get("archiveId", "").strip()
    if not archive_id:
        raise BadRequest("archiveId is required")

    mode_value = args.get("mode") or ListMode.TREE.value
    try:
        mode = ListMode(mode_value)
    except ValueError:
        raise BadRequest(f"Unknown mode: {mode_value}") from None

    max_value = args.get("maxResultSize") or str(DEFAULT_MAX_RESULTS)
    if not max_value.isdigit() or int(max_value) <= 0:
        raise BadRequest(f"maxResultSize must be a positive integer: {max_value}")

    return {
        "archive_id": archive_id,
        "diff_archive_id": args.get("diffArchiveId", "").strip(),
        "force": args.get("force", "false").lower() in TRUE_VALUES,
        "search": args.get("searchString", ""),
        "mode": mode,
        "current_directory": args.get("currentDirectory", "").strip("/"),
        "max_results": int(max_value),
    }


@filelist_bp.route(f"{API_BASE_PATH}/archives/filelist", methods=["GET"])
def get_file_list():
    """File listing of an archive, optionally diffed against another."""
    try:
        params = _parse_args()
    except BadRequest as e:
        return jsonify({"error": str(e)}), 400

    try:
        result = get_service().get_file_list(**params)
        return jsonify(listing_to_payload(result))
    except ArchiveNotFound as e:
        return jsonify({"error": str(e)}), 404
    except ScanError as e:
        error(f"[API] Scan failed for archive {params['archive_id']}: {e}")
        return jsonify({"error": str(e)}), 500
    except Exception as e:
        error(f"[API] Error getting file list: {e}")
        return jsonify({"error": str(e)}), 500


@filelist_bp.route(f"{API_BASE_PATH}/archives/clearCache", methods=["GET"])
def clear_cache():
    """Drop the cached listing of ``archiveId``, or of all archives."""
    archive_id = request.args.get("archiveId", "").strip()
    try:
        get_service().clear_cache(archive_id)
        return jsonify({"status": "ok"})
    except ArchiveNotFound as e:
        return jsonify({"error": str(e)}), 404
    except Exception as e:
        error(f"[API] Error clearing cache: {e}")
        return jsonify({"error": str(e)}), 500
