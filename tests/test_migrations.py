# =============================================================================
# File: tests/test_migrations.py
# Purpose: The Alembic baseline builds the same schema as the models.
# =============================================================================
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from schedule_board import create_app
from schedule_board.db import Base

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


@pytest.fixture
def migrated_url(tmp_path):
    """SQLite file upgraded to head by Alembic (no create_all involved)."""
    url = f"sqlite:///{tmp_path / 'migrated.sqlite'}"
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")
    return url


def test_baseline_columns_match_models(migrated_url):
    engine = create_engine(migrated_url)
    try:
        insp = inspect(engine)
        for name, table in Base.metadata.tables.items():
            cols = {c["name"] for c in insp.get_columns(name)}
            assert cols == {c.name for c in table.columns}, name
    finally:
        engine.dispose()


def test_baseline_indexes_match_models(migrated_url):
    engine = create_engine(migrated_url)
    try:
        insp = inspect(engine)
        built = {
            ix["name"]: (tuple(ix["column_names"]), bool(ix["unique"]))
            for ix in insp.get_indexes("schedules")
        }
    finally:
        engine.dispose()

    expected = {
        ix.name: (tuple(c.name for c in ix.columns), bool(ix.unique))
        for ix in Base.metadata.tables["schedules"].indexes
    }
    assert built == expected
    assert built["idx_schedules_keys"] == (("date", "department", "staff_name"), True)


def test_upsert_on_migrated_database(migrated_url, departments_file, assets_dir):
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": migrated_url,
            "DEPARTMENTS_FILE": str(departments_file),
            "ASSETS_DIR": str(assets_dir),
        }
    )
    client = app.test_client()
    body = {"date": "2024-01-01", "department": "Sales", "staff_name": "Alice", "status": "on", "added_by": "bob"}

    first = client.post("/api/schedules", json=body)
    assert first.status_code == 200
    second = client.post("/api/schedules", json={**body, "status": "off"})
    assert second.status_code == 200
    assert second.get_json()["id"] == first.get_json()["id"]

    staff = client.get("/api/schedules").get_json()["2024-01-01"]["Sales"]
    assert staff["Alice"]["status"] == "off"
