# schedule_board/routes/api_schedules.py
from flask import Blueprint, current_app, jsonify

from schedule_board.db import SessionLocal
from schedule_board.edge import json_body
from schedule_board import queries
from schedule_board.shaping import nest_schedules

bp = Blueprint("schedules", __name__)

# -----------------------------------------------------------------
# Board
# -----------------------------------------------------------------
@bp.get("/schedules")
def list_schedules():
    """Whole board as {date: {department: {staff_name: entry}}}."""
    with SessionLocal() as s:
        rows = queries.list_schedule_rows(s)
    return jsonify(nest_schedules(rows, current_app.config["UNKNOWN_AUTHOR"]))

# -----------------------------------------------------------------
# Write / remove one entry
# -----------------------------------------------------------------
@bp.post("/schedules")
def upsert_schedule():
    """
    Create or overwrite the entry for (date, department, staff_name).

    Expected JSON:
    {
      "date": "2024-01-01",
      "department": "Sales",
      "staff_name": "Alice",
      "status": "on",
      "added_by": "bob"
    }
    """
    data = json_body()

    # author + entry commit together
    with SessionLocal() as s:
        row_id = queries.upsert_schedule(
            s,
            date=data.get("date"),
            department=data.get("department"),
            staff_name=data.get("staff_name"),
            status=data.get("status"),
            added_by=data.get("added_by"),
        )
        s.commit()

    return jsonify({"success": True, "id": row_id})


@bp.delete("/schedules")
def delete_schedule():
    """Remove an entry; added_by must match the stored author."""
    data = json_body()

    with SessionLocal() as s:
        deleted = queries.delete_schedule(
            s,
            date=data.get("date"),
            department=data.get("department"),
            staff_name=data.get("staff_name"),
            added_by=data.get("added_by"),
        )
        s.commit()

    return jsonify({"success": True, "deleted": deleted})
