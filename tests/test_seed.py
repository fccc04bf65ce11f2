# tests/test_seed.py
from schedule_board.seed import ensure_departments_seeded, load_departments_config


def test_missing_file_seeds_nothing(tmp_path):
    assert load_departments_config(tmp_path / "nope.yml") == []


def test_departments_not_a_list(tmp_path):
    p = tmp_path / "d.yml"
    p.write_text("departments: Sales\n", encoding="utf-8")
    assert load_departments_config(p) == []


def test_invalid_yaml(tmp_path):
    p = tmp_path / "d.yml"
    p.write_text("departments: [unclosed\n", encoding="utf-8")
    assert load_departments_config(p) == []


def test_short_form_and_default_order(tmp_path):
    p = tmp_path / "d.yml"
    p.write_text(
        "departments:\n"
        "  - Sales\n"
        "  - name: '  Support  '\n"
        "  - name: ''\n"
        "  - name: Engineering\n"
        "    display_order: 10\n",
        encoding="utf-8",
    )
    assert load_departments_config(p) == [
        {"name": "Sales", "display_order": 0},
        {"name": "Support", "display_order": 1},
        {"name": "Engineering", "display_order": 10},
    ]


def test_reseed_updates_display_order(app, client, tmp_path):
    p = tmp_path / "reordered.yml"
    p.write_text(
        "departments:\n"
        "  - name: Support\n"
        "    display_order: 0\n"
        "  - name: Finance\n"
        "    display_order: 5\n",
        encoding="utf-8",
    )
    assert ensure_departments_seeded(p) == 2

    names = [d["name"] for d in client.get("/api/departments").get_json()]
    assert names == ["Support", "Sales", "Engineering", "Finance"]


def test_bad_display_order_falls_back_to_position(tmp_path):
    p = tmp_path / "d.yml"
    p.write_text(
        "departments:\n"
        "  - name: Sales\n"
        "    display_order: first\n"
        "  - name: Support\n"
        "    display_order: [2]\n"
        "  - name: Engineering\n"
        "    display_order: '7'\n",
        encoding="utf-8",
    )
    assert load_departments_config(p) == [
        {"name": "Sales", "display_order": 0},
        {"name": "Support", "display_order": 1},
        {"name": "Engineering", "display_order": 7},
    ]


def test_app_starts_with_bad_display_order(tmp_path, assets_dir):
    from schedule_board import create_app

    p = tmp_path / "d.yml"
    p.write_text(
        "departments:\n"
        "  - name: Sales\n"
        "    display_order: first\n",
        encoding="utf-8",
    )
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'bad_seed.sqlite'}",
            "DEPARTMENTS_FILE": str(p),
            "ASSETS_DIR": str(assets_dir),
        }
    )
    rows = app.test_client().get("/api/departments").get_json()
    assert [(d["name"], d["display_order"]) for d in rows] == [("Sales", 0)]
