from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from brickify import __version__
from brickify.config import ConvertOptions
from brickify.converter import convert
from brickify.errors import OptionsError

log = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/convert", methods=["OPTIONS"])
def convert_preflight():
    """Handle CORS preflight for conversion."""
    return "", 204


@api_bp.route("/convert", methods=["POST"])
def convert_document():
    """Convert posted HTML/CSS/JS into builder clipboard JSON."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("html"), str):
        return jsonify({"error": "html required"}), 400

    requested = data.get("options") or {}
    if not isinstance(requested, dict):
        return jsonify({"error": "options must be an object"}), 400

    try:
        options = ConvertOptions.from_mapping(
            {**current_app.extensions["default_options"], **requested}
        )
    except OptionsError as e:
        return jsonify({"error": str(e)}), 400

    document = convert(
        data["html"],
        data.get("css") or "",
        data.get("js") or "",
        options,
    )
    return jsonify(document)


@api_bp.route("/health")
def health():
    """Liveness probe."""
    return jsonify({"status": "ok", "version": __version__})
