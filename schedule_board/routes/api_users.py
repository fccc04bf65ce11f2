# schedule_board/routes/api_users.py
from flask import Blueprint, jsonify

from schedule_board.db import SessionLocal
from schedule_board.edge import json_body
from schedule_board import queries

bp = Blueprint("users", __name__)

@bp.get("/users")
def list_users():
    """All users, newest first."""
    with SessionLocal() as s:
        return jsonify(queries.list_users(s))

@bp.post("/users")
def add_user():
    """Register a nickname. id is null when it was already known."""
    data = json_body()
    with SessionLocal() as s:
        user_id = queries.insert_user_if_absent(s, data.get("nickname"))
        s.commit()
    return jsonify({"success": True, "id": user_id})
