# File: schedule_board/seed.py
# Purpose: Load the department list from data/departments.yml
#          and upsert it into the departments table.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .db import SessionLocal
from .queries import upsert_department

log = logging.getLogger(__name__)

# Default location of the YAML

CONFIG_PATH = (
    Path(__file__)
    .resolve()
    .parent        # schedule_board/
    / "data"
    / "departments.yml"
)


def load_departments_config(path: Path | None = None) -> List[Dict[str, Any]]:
    """Read the departments YAML.

    Expected shape::

        departments:
          - name: Sales
            display_order: 1

    Returns a list of ``{"name", "display_order"}`` dicts. A missing or
    broken file gives an empty list (nothing to seed).
    """
    path = Path(path) if path else CONFIG_PATH

    if not path.exists():
        log.warning("departments.yml not found (%s), no departments seeded.", path)
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        log.error("Could not parse %s: %s", path, e)
        return []

    items = raw.get("departments") if isinstance(raw, dict) else None
    if not isinstance(items, list):
        log.error("%s: 'departments' is not a list, nothing seeded.", path)
        return []

    cleaned: List[Dict[str, Any]] = []
    for position, it in enumerate(items):
        # allow the short form "- Sales"
        if isinstance(it, str):
            it = {"name": it}
        if not isinstance(it, dict):
            continue

        name = str(it.get("name") or "").strip()
        if not name:
            continue

        order = it.get("display_order")
        if order is None:
            order = position
        try:
            order = int(order)
        except (TypeError, ValueError):
            log.warning(
                "%s: display_order %r of %s is not an integer, using %s.",
                path, order, name, position,
            )
            order = position

        cleaned.append({"name": name, "display_order": order})

    return cleaned


def _upsert_departments(config_items: List[Dict[str, Any]]) -> int:
    with SessionLocal() as s:
        for d in config_items:
            upsert_department(s, d["name"], d["display_order"])
        s.commit()
    return len(config_items)


def ensure_departments_seeded(path: Path | None = None) -> int:
    """Align the departments table with the YAML. Called from create_app."""
    cfg = load_departments_config(path)
    n = _upsert_departments(cfg)
    log.info("ensure_departments_seeded: %s departments upserted.", n)
    return n
