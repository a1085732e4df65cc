"""
Similarity API blueprint.

Routes:
  POST /api/similarity   score two text blocks and store the submission
  GET  /api/submissions  most recent submissions, newest first
  GET  /api/health       liveness plus the storage backend in use
"""

import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from .store import Submission
from .text import compare_tokens
from .validation import ValidationError, validate

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__, url_prefix="/api")

INTERNAL_ERROR = {"error": "Internal server error"}


def _get_store():
    return current_app.extensions["submission_store"]


def _get_settings():
    return current_app.extensions["similarity_settings"]


@api_bp.route("/similarity", methods=["POST"])
def similarity():
    try:
        settings = _get_settings()
        payload = request.get_json(silent=True) or {}
        try:
            text1, text2, words1, words2 = validate(payload, min_words=settings.min_words)
        except ValidationError as e:
            return jsonify({"error": e.message}), e.status_code

        result = compare_tokens(words1, words2)

        backend = _get_store().save(Submission(text1=text1, text2=text2, result=result))
        logger.debug(f"[api] Stored submission in {backend} (score={result.similarity_score})")

        return jsonify({"success": True, "result": result.to_dict()})
    except Exception:
        logger.exception("[api] Similarity request failed")
        return jsonify(INTERNAL_ERROR), 500


@api_bp.route("/submissions", methods=["GET"])
def submissions():
    try:
        items = _get_store().recent(_get_settings().recent_limit)
        return jsonify({"success": True, "submissions": [s.to_dict() for s in items]})
    except Exception:
        logger.exception("[api] Listing submissions failed")
        return jsonify(INTERNAL_ERROR), 500


@api_bp.route("/health", methods=["GET"])
def health():
    store = _get_store()
    store.check_connection()
    return jsonify({
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": store.name,
    })
