from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify, request

from json2css import __version__
from json2css.decoder import decode_statements
from json2css.encoder import encode
from json2css.errors import Json2CssError

api_bp = Blueprint("api", __name__)

logger = logging.getLogger(__name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "version": __version__})


@api_bp.route("/encode", methods=["OPTIONS"])
def encode_preflight():
    """Handle CORS preflight for encoding."""
    return "", 204


@api_bp.route("/encode", methods=["POST"])
def encode_stylesheet():
    """Encode a JSON statement list into CSS text."""
    config = current_app.extensions["json2css_config"]
    try:
        statements = decode_statements(request.get_data(), config)
        css = encode(statements, config)
    except Json2CssError as exc:
        logger.info("Rejected stylesheet: %s", exc)
        return jsonify({"error": str(exc), "kind": type(exc).__name__}), 400

    return Response(css, mimetype="text/css")
