# schedule_board/__init__.py
import os
from pathlib import Path

from flask import Flask

from .db import DATABASE_URL, init_db
from .edge import register_edge
from .frontend import frontend_bp
from .routes import register_routes
from .seed import CONFIG_PATH, ensure_departments_seeded
from .shaping import UNKNOWN_AUTHOR

PACKAGE_DIR = Path(__file__).resolve().parent


def create_app(test_config: dict | None = None) -> Flask:
    # no built-in /static route: the frontend blueprint serves every non-API path
    app = Flask(__name__, static_folder=None)

    app.config.from_mapping(
        DATABASE_URL=DATABASE_URL,
        DEPARTMENTS_FILE=os.getenv("DEPARTMENTS_FILE", str(CONFIG_PATH)),
        ASSETS_DIR=os.getenv("ASSETS_DIR", str(PACKAGE_DIR / "static")),
        UNKNOWN_AUTHOR=UNKNOWN_AUTHOR,
    )
    if test_config:
        app.config.update(test_config)

    # board keys are ordered by the shaper, keep them as built
    app.json.sort_keys = False

    init_db(app.config["DATABASE_URL"])
    ensure_departments_seeded(Path(app.config["DEPARTMENTS_FILE"]))

    register_edge(app)
    register_routes(app)
    app.register_blueprint(frontend_bp)

    return app
