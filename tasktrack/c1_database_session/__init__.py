"""Database session management for tasktrack."""

from tasktrack.c1_database_session.base import Base
from tasktrack.c1_database_session.database_manager import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
