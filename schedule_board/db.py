# =============================================================================
# File: schedule_board/db.py
# Purpose: SQLAlchemy engine + session factory for the schedule store.
# =============================================================================
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Get DATABASE_URL from env or fallback
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///schedule_board.db")

engine = create_engine(DATABASE_URL, echo=False, future=True)

class Base(DeclarativeBase):
    """Declarative base for ORM models."""
    pass

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def bind_engine(url: str) -> None:
    """Point the module engine and SessionLocal at another database URL."""
    global engine
    if engine.url.render_as_string(hide_password=False) == url:
        return
    engine.dispose()
    engine = create_engine(url, echo=False, future=True)
    SessionLocal.configure(bind=engine)


def init_db(url: str | None = None):
    """Create all tables if they don't exist."""
    if url:
        bind_engine(url)
    # Import models so metadata sees them before create_all
    from . import models  # noqa: F401
    Base.metadata.create_all(engine)
