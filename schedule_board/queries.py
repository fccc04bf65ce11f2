# =============================================================================
# File: schedule_board/queries.py
# Purpose: Parameterized SQL for every API operation.
# Notes:
# - Each function takes an open Session; the caller owns commit/close.
# - Statements target SQLite (INSERT OR IGNORE, ON CONFLICT ... RETURNING).
# =============================================================================
from __future__ import annotations

from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

Row = dict[str, Any]

LIST_SCHEDULES = text(
    """
    SELECT s.*, u.nickname AS added_by_name
    FROM schedules s
    LEFT JOIN users u ON s.added_by = u.nickname
    ORDER BY s.date DESC, s.department, s.staff_name
    """
)

UPSERT_SCHEDULE = text(
    """
    INSERT INTO schedules (date, department, staff_name, status, added_by)
    VALUES (:date, :department, :staff_name, :status, :added_by)
    ON CONFLICT (date, department, staff_name) DO UPDATE SET
        status = excluded.status,
        added_by = excluded.added_by,
        updated_at = CURRENT_TIMESTAMP
    RETURNING id
    """
)

DELETE_SCHEDULE = text(
    """
    DELETE FROM schedules
    WHERE date = :date AND department = :department
      AND staff_name = :staff_name AND added_by = :added_by
    """
)

LIST_USERS = text("SELECT * FROM users ORDER BY created_at DESC, id DESC")

INSERT_USER = text("INSERT OR IGNORE INTO users (nickname) VALUES (:nickname) RETURNING id")

LIST_DEPARTMENTS = text("SELECT * FROM departments ORDER BY display_order, id")

UPSERT_DEPARTMENT = text(
    """
    INSERT INTO departments (name, display_order)
    VALUES (:name, :display_order)
    ON CONFLICT (name) DO UPDATE SET display_order = excluded.display_order
    """
)


def fetch_all(s: Session, stmt, params: dict[str, Any] | None = None) -> list[Row]:
    return [dict(r) for r in s.execute(stmt, params or {}).mappings()]


# -----------------------------------------------------------------
# Schedules
# -----------------------------------------------------------------
def list_schedule_rows(s: Session) -> list[Row]:
    """Flat schedule rows joined with the author's nickname (``added_by_name``)."""
    return fetch_all(s, LIST_SCHEDULES)


def upsert_schedule(
    s: Session,
    date: str | None,
    department: str | None,
    staff_name: str | None,
    status: str | None,
    added_by: str | None,
) -> int:
    """
    Register the author then write the entry for (date, department, staff_name).

    An existing entry keeps its id and added_at; status, added_by and
    updated_at are overwritten. Returns the row id.
    """
    insert_user_if_absent(s, added_by)
    return s.execute(
        UPSERT_SCHEDULE,
        {
            "date": date,
            "department": department,
            "staff_name": staff_name,
            "status": status,
            "added_by": added_by,
        },
    ).scalar_one()


def delete_schedule(
    s: Session,
    date: str | None,
    department: str | None,
    staff_name: str | None,
    added_by: str | None,
) -> bool:
    """Delete the entry only if every field matches; True if a row went away."""
    result = s.execute(
        DELETE_SCHEDULE,
        {
            "date": date,
            "department": department,
            "staff_name": staff_name,
            "added_by": added_by,
        },
    )
    return (result.rowcount or 0) > 0


# -----------------------------------------------------------------
# Users
# -----------------------------------------------------------------
def list_users(s: Session) -> list[Row]:
    return fetch_all(s, LIST_USERS)


def insert_user_if_absent(s: Session, nickname: str | None) -> int | None:
    """Id of the new user, or None when the nickname already exists (or is null)."""
    return s.execute(INSERT_USER, {"nickname": nickname}).scalar_one_or_none()


# -----------------------------------------------------------------
# Departments
# -----------------------------------------------------------------
def list_departments(s: Session) -> list[Row]:
    return fetch_all(s, LIST_DEPARTMENTS)


def upsert_department(s: Session, name: str, display_order: int) -> None:
    s.execute(UPSERT_DEPARTMENT, {"name": name, "display_order": display_order})
