# =============================================================================
# File: schedule_board/models.py
# Purpose: Tables for the schedule board (Schedule, User, Department)
# Notes:
# - SQLAlchemy 2.0 style (Mapped[...] + mapped_column)
# - Timestamps are TEXT filled by the store (CURRENT_TIMESTAMP, UTC)
# - Queries live in queries.py; these classes only describe the schema
# =============================================================================
from __future__ import annotations

from sqlalchemy import Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        Index("idx_schedules_date", "date"),
        # one entry per (date, department, staff_name); target of the upsert
        Index("idx_schedules_keys", "date", "department", "staff_name", unique=True),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[str] = mapped_column(Text, nullable=False)  # "YYYY-MM-DD"
    department: Mapped[str] = mapped_column(Text, nullable=False)
    staff_name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)

    # nickname of the author, not a foreign key (users may not exist)
    added_by: Mapped[str | None] = mapped_column(Text, nullable=True)

    added_at: Mapped[str | None] = mapped_column(Text, server_default=text("CURRENT_TIMESTAMP"))
    updated_at: Mapped[str | None] = mapped_column(Text, server_default=text("CURRENT_TIMESTAMP"))


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nickname: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    created_at: Mapped[str | None] = mapped_column(Text, server_default=text("CURRENT_TIMESTAMP"))


class Department(Base):
    __tablename__ = "departments"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))
