"""
Database session management.
"""
from pathlib import Path
import logging
import threading

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session
from taskflow.core.config import settings
from taskflow.db.base import Base

logger = logging.getLogger(__name__)

# Serializes every write-and-commit against the database file
write_lock = threading.Lock()


def _ensure_sqlite_dir(database_url) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections are shared across the request thread pool."""
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None):
    """Initialize database tables."""
    # Import models so they register on Base.metadata
    import taskflow.models  # noqa: F401

    bind = bind or engine
    _ensure_sqlite_dir(bind.url)
    Base.metadata.create_all(bind=bind)
    logger.info(f"Database initialized at {bind.url}")
