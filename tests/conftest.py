# =============================================================================
# File: tests/conftest.py
# Purpose: Fresh app + temporary SQLite file per test.
# =============================================================================
import pytest

from schedule_board import create_app


DEPARTMENTS_YAML = """\
departments:
  - name: Support
    display_order: 3
  - name: Sales
    display_order: 1
  - name: Engineering
    display_order: 2
"""


@pytest.fixture
def departments_file(tmp_path):
    path = tmp_path / "departments.yml"
    path.write_text(DEPARTMENTS_YAML, encoding="utf-8")
    return path


@pytest.fixture
def assets_dir(tmp_path):
    d = tmp_path / "assets"
    d.mkdir()
    (d / "index.html").write_text("<h1>board</h1>", encoding="utf-8")
    (d / "app.js").write_text("console.log('board');", encoding="utf-8")
    return d


@pytest.fixture
def app(tmp_path, departments_file, assets_dir):
    """Use a temporary SQLite file per test."""
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'test_db.sqlite'}",
            "DEPARTMENTS_FILE": str(departments_file),
            "ASSETS_DIR": str(assets_dir),
        }
    )
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
