# schedule_board/routes/api_departments.py
from flask import Blueprint, jsonify

from schedule_board.db import SessionLocal
from schedule_board import queries

bp = Blueprint("departments", __name__)

@bp.get("/departments")
def list_departments():
    with SessionLocal() as s:
        return jsonify(queries.list_departments(s))
