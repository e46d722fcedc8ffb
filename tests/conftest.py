from datetime import datetime, timedelta, timezone
from typing import Callable, Generator, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from weather_service.app import create_app
from weather_service.schemas.enums import AlertSeverity, AlertType, MapType
from weather_service.storage.db import Database
from weather_service.storage.models import City, WeatherAlert, WeatherMap

# Reference instant used by the time-window tests.
T = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
HOUR = timedelta(hours=1)


def naive(value: Optional[datetime]) -> Optional[datetime]:
    """Naive UTC, the way timestamps sit in the store."""
    return value.astimezone(timezone.utc).replace(tzinfo=None) if value else None


@pytest.fixture()
def database() -> Generator[Database, None, None]:
    """Fresh in-memory SQLite store per test."""
    db = Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture()
def session(database: Database) -> Generator[Session, None, None]:
    with database.SessionLocal() as db_session:
        yield db_session


@pytest.fixture()
def client(database: Database) -> Generator[TestClient, None, None]:
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_city(session: Session) -> Callable[..., City]:
    """Insert a city straight into the store."""

    def _make(name: str = "Test City", country: str = "Test Country",
              latitude: float = 40.7128, longitude: float = -74.006) -> City:
        city = City(name=name, country=country, latitude=latitude, longitude=longitude)
        session.add(city)
        session.commit()
        return city

    return _make


@pytest.fixture()
def make_alert(session: Session) -> Callable[..., WeatherAlert]:
    """Insert an alert directly, bypassing creation rules (e.g. inactive alerts)."""

    def _make(city_id: int, start_time: datetime = T - HOUR, end_time: Optional[datetime] = T + HOUR,
              is_active: bool = True, alert_type: AlertType = AlertType.EXTREME_HEAT,
              severity: AlertSeverity = AlertSeverity.HIGH) -> WeatherAlert:
        alert = WeatherAlert(
            city_id=city_id,
            type=alert_type,
            severity=severity,
            title="Test Alert",
            description="A test weather alert",
            start_time=naive(start_time),
            end_time=naive(end_time),
            is_active=is_active,
        )
        session.add(alert)
        session.commit()
        return alert

    return _make


@pytest.fixture()
def seeded_maps(session: Session) -> list:
    entries = [
        WeatherMap(region="North America", map_type=MapType.TEMPERATURE,
                   data_url="https://example.com/na-temp.png", timestamp=datetime(2024, 1, 15, 12, 0)),
        WeatherMap(region="Europe", map_type=MapType.PRECIPITATION,
                   data_url="https://example.com/eu-precip.png", timestamp=datetime(2024, 1, 15, 11, 30)),
        WeatherMap(region="North America", map_type=MapType.WIND,
                   data_url="https://example.com/na-wind.png", timestamp=datetime(2024, 1, 15, 11, 0)),
        WeatherMap(region="Asia", map_type=MapType.TEMPERATURE,
                   data_url="https://example.com/asia-temp.png", timestamp=datetime(2024, 1, 15, 10, 30)),
    ]
    session.add_all(entries)
    session.commit()
    return entries
