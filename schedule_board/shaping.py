# schedule_board/shaping.py
# Purpose: turn flat schedule rows into the nested board the frontend reads.
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

UNKNOWN_AUTHOR = "unknown"

# date -> department -> staff_name -> {status, addedBy, addedAt}
Board = Dict[str, Dict[str, Dict[str, Dict[str, Any]]]]


def entry_from_row(row: Mapping[str, Any], unknown_author: str = UNKNOWN_AUTHOR) -> Dict[str, Any]:
    """Public view of one schedule row."""
    return {
        "status": row.get("status"),
        "addedBy": row.get("added_by_name") or unknown_author,
        "addedAt": row.get("added_at"),
    }


def nest_schedules(rows: Iterable[Mapping[str, Any]], unknown_author: str = UNKNOWN_AUTHOR) -> Board:
    """
    Reduce rows into ``{date: {department: {staff_name: entry}}}``.

    The order of the input does not matter: the result is rebuilt with
    dates descending, then departments and staff names ascending. When
    two rows share the same key, the later one wins.
    """
    board: Board = {}
    for row in rows:
        by_department = board.setdefault(row["date"], {})
        by_staff = by_department.setdefault(row["department"], {})
        by_staff[row["staff_name"]] = entry_from_row(row, unknown_author)

    return {
        date: {
            department: dict(sorted(staff.items()))
            for department, staff in sorted(departments.items())
        }
        for date, departments in sorted(board.items(), reverse=True)
    }
