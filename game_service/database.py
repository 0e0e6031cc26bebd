"""
Database engine, session handling and table bootstrap for Game Service
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from tenacity import Retrying, stop_after_attempt, wait_exponential, retry_if_exception_type

from game_service.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(config: Settings) -> Engine:
    """
    Create the SQLAlchemy engine (the process-wide connection pool)

    PostgreSQL connections get a server-side ``statement_timeout`` so a
    stalled query cannot hold a pooled connection indefinitely. SQLite is
    supported for local runs and tests.
    """
    url = config.DATABASE_URL
    timeout_ms = config.DB_STATEMENT_TIMEOUT_MS

    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False, "timeout": timeout_ms / 1000},
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        connect_args={"options": f"-c statement_timeout={timeout_ms}"},
    )


class Database:
    """
    Owned handle to the connection pool and its session factory.

    Created once at application startup, disposed at shutdown. Every
    unit of work checks out a session through :meth:`session`, which
    always closes it (returning the connection to the pool).
    """

    def __init__(self, config: Settings):
        self.config = config
        self.engine = build_engine(config)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def create_tables(self) -> None:
        """Create the games table if it does not exist"""
        # Register models on Base.metadata
        from game_service.models import game  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


def init_db(database: Database) -> None:
    """
    Bootstrap tables, retrying while the database is still starting up

    Attempts and backoff come from the database's settings
    (DB_CONNECT_RETRIES, DB_CONNECT_RETRY_DELAY).

    Raises:
        OperationalError: If the database stays unreachable after all retries
    """
    config = database.config
    retrying = Retrying(
        stop=stop_after_attempt(config.DB_CONNECT_RETRIES),
        wait=wait_exponential(multiplier=config.DB_CONNECT_RETRY_DELAY, max=10),
        retry=retry_if_exception_type(OperationalError),
        reraise=True
    )
    for attempt in retrying:
        with attempt:
            logger.info("Initializing games table (attempt %d)", attempt.retry_state.attempt_number)
            database.create_tables()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency yielding a request-scoped session from the app's Database"""
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
