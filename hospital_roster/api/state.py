"""Process-wide handles shared by the API routes."""
from typing import Iterator

from sqlalchemy.orm import Session


class AppState:
    """Application state holding the database engine"""
    def __init__(self):
        self.db_engine = None
        self.SessionLocal = None
        self.initialized = False


app_state = AppState()


def get_db() -> Iterator[Session]:
    """Per-request session, closed (and rolled back if uncommitted) afterwards."""
    session = app_state.SessionLocal()
    try:
        yield session
    finally:
        session.close()
