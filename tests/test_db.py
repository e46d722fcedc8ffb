import pytest
from sqlalchemy.pool import StaticPool

from weather_service.config import Settings
from weather_service.storage.db import Database
from weather_service.storage.models import City


def test_in_memory_sqlite_shares_one_connection() -> None:
    database = Database.from_settings(Settings(DATABASE_URL="sqlite://", ENVIRONMENT="test"))
    try:
        assert isinstance(database.engine.pool, StaticPool)
        assert database.check_connection()
    finally:
        database.dispose()


def test_session_scope_commits(database) -> None:
    with database.session_scope() as session:
        session.add(City(name="Oslo", country="NO", latitude=59.91, longitude=10.75))

    with database.session_scope() as session:
        assert session.query(City).count() == 1


def test_session_scope_rolls_back_on_error(database) -> None:
    with pytest.raises(RuntimeError):
        with database.session_scope() as session:
            session.add(City(name="Oslo", country="NO", latitude=59.91, longitude=10.75))
            session.flush()
            raise RuntimeError("abort")

    with database.session_scope() as session:
        assert session.query(City).count() == 0


def test_foreign_keys_enabled_on_sqlite(database) -> None:
    with database.engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
