# =============================================================================
# File: schedule_board/edge.py
# Purpose: What every request goes through before/after the blueprints:
#          CORS headers, OPTIONS preflight, 405 text, error -> JSON 500.
# =============================================================================
from __future__ import annotations

import logging

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

log = logging.getLogger(__name__)

API_PREFIX = "/api/"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def _wants_cors() -> bool:
    return request.method == "OPTIONS" or request.path.startswith(API_PREFIX)


def _method_not_allowed() -> Response:
    return Response("Method Not Allowed", status=405, mimetype="text/plain")


def register_edge(app: Flask) -> None:
    """Install the hooks and error handlers on the Flask app."""

    @app.before_request
    def preflight():
        # Answered before URL matching, whatever the path.
        if request.method == "OPTIONS":
            return Response(status=204)
        # Flask adds HEAD to every GET rule; the API only serves what it lists
        if request.method == "HEAD" and request.path.startswith(API_PREFIX):
            return _method_not_allowed()
        return None

    # Set by hand: flask-cors only sends Allow-Methods/Allow-Headers on preflight.
    @app.after_request
    def add_cors_headers(response: Response) -> Response:
        if _wants_cors():
            response.headers.update(CORS_HEADERS)
        return response

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(_e):
        return _method_not_allowed()

    @app.errorhandler(Exception)
    def internal_error(e: Exception):
        # 404 from the static fallback and friends keep their own response
        if isinstance(e, HTTPException):
            return e
        log.exception("API error on %s %s", request.method, request.path)
        return jsonify({"error": str(e)}), 500


class InvalidBody(ValueError):
    """The request body is not a JSON object."""


def json_body() -> dict:
    """JSON object sent by the caller, whatever the Content-Type says."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise InvalidBody("request body must be a JSON object")
    return data
