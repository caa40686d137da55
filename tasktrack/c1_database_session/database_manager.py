"""Database manager and session utilities for tasktrack."""

import logging
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tasktrack.c1_database_session.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Manager for database operations."""

    def __init__(self, database_url: str = "sqlite:///data/tasktrack.db"):
        """Initialize database connection."""
        self.database_url = database_url
        url = make_url(database_url)

        engine_kwargs = {"echo": False}
        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # one shared connection, otherwise each session sees an empty db
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(database_url, **engine_kwargs)
        if url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_tables(self):
        """Create all database tables."""
        # models must be imported so their tables are registered on Base
        import tasktrack.c1_account_models  # noqa: F401
        import tasktrack.c1_task_models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database tables ready at {self.engine.url.render_as_string(hide_password=True)}")

    def get_session(self):
        """Get a database session."""
        return self.SessionLocal()

    @contextmanager
    def session_scope(self):
        """Provide a transactional scope around a series of operations."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e.__class__.__name__}")
            return False
        return True

    def dispose(self):
        self.engine.dispose()
