# =============================================================================
# File: schedule_board/routes/__init__.py
# Purpose: Group and register the API blueprints.
# =============================================================================
from __future__ import annotations

from flask import Flask

from .api_schedules import bp as schedules_bp
from .api_users import bp as users_bp
from .api_departments import bp as departments_bp

def register_routes(app: Flask) -> None:
    """Register every API blueprint under /api."""
    app.register_blueprint(schedules_bp,   url_prefix="/api")
    app.register_blueprint(users_bp,       url_prefix="/api")
    app.register_blueprint(departments_bp, url_prefix="/api")
