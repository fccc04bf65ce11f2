# schedule_board/frontend.py
"""
Static fallback: every path that is not an API route is served from the
assets directory (ASSETS_DIR), "/" being index.html.
"""

from flask import Blueprint, current_app, send_from_directory

frontend_bp = Blueprint("frontend", __name__)


@frontend_bp.get("/", defaults={"filename": "index.html"})
@frontend_bp.get("/<path:filename>")
def static_asset(filename: str):
    # send_from_directory raises NotFound for missing files and
    # refuses paths escaping the directory
    return send_from_directory(current_app.config["ASSETS_DIR"], filename)
