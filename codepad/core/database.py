"""Database engine, session management and startup schema creation."""

import logging
from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from codepad.core.config import settings
from codepad.models import Base

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict[str, object]:
    # SQLite connections are shared across the server's worker threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
    connect_args=_connect_args(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False


def init_db(bind: Engine | None = None) -> bool:
    """
    Create the users and projects tables if they do not exist.

    A failure is logged and reported as False; the caller keeps serving so
    that requests fail individually until the database comes back.
    """
    try:
        Base.metadata.create_all(bind=bind or engine)
    except SQLAlchemyError:
        logger.error("Database connection failed at startup", exc_info=True)
        return False
    logger.info("Connected to database")
    return True
