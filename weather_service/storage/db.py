"""Database connection and session management."""
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from typing import Generator, Iterator

from weather_service.config import Settings
from weather_service.app_logging import get_logger

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine and session factory for one store.

    Created once per process by the application lifespan and handed to
    request handlers through the ``get_db`` dependency.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine: Engine = create_engine(url, **engine_kwargs)

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            class_=Session,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.DATABASE_URL
        echo = settings.ENVIRONMENT == "development"

        if url.startswith("sqlite"):
            if url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise every checkout sees an empty database
                return cls(
                    url,
                    echo=echo,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            return cls(url, echo=echo, connect_args={"check_same_thread": False})

        return cls(
            url,
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_pre_ping=True,  # Verify connections before using
            echo=echo,  # Log SQL in development
        )

    def get_db(self) -> Generator[Session, None, None]:
        """
        Yield a session for one request.
        Ensures proper cleanup after request.
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager for database sessions."""
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def init_db(self) -> None:
        """Initialize database - create tables if they don't exist."""
        from weather_service.storage.base import Base
        import weather_service.storage.models  # noqa: F401  registers tables

        logger.info("Initializing database...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database initialized successfully")

    def check_connection(self) -> bool:
        """Check if database is accessible."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")
