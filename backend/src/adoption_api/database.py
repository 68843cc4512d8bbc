"""Database handle and session management.

The Database object is constructed explicitly at application start, attached
to ``app.state.database`` and disposed during shutdown. Request handlers
receive a session through the ``get_db`` dependency instead of importing a
module-level engine.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the SQLAlchemy engine and session factory for one process.

    Example:
        database = Database(settings.DATABASE_URL)
        with database.session_scope() as session:
            session.query(Organization).all()
        database.dispose()
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ):
        engine_kwargs = {
            "pool_pre_ping": True,
            "echo": echo,
        }

        # Pool settings only apply to server databases
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url.rstrip("/") == "sqlite:":
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_size"] = pool_size
            engine_kwargs["max_overflow"] = max_overflow

        self.url = url
        self.engine: Engine = create_engine(url, **engine_kwargs)

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    def create_all(self) -> None:
        """Create every mapped table (tests and local development only)."""
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Context manager for database sessions.

        Automatically commits on success, rolls back on exception.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        logger.info("Disposing database engine")
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency for FastAPI endpoints.

    Usage:
        @router.get("/animals")
        def list_animals(db: Session = Depends(get_db)):
            return db.query(Animal).all()
    """
    database: Database = request.app.state.database
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
