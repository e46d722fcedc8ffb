"""Alert activity rules and UTC normalization.

An alert is active for city C at instant ``now`` when:

* it belongs to C,
* its ``is_active`` flag is set,
* ``start_time <= now`` (inclusive), and
* ``end_time`` is absent or ``end_time > now`` (exclusive).

An alert whose ``end_time`` equals ``now`` has expired.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from weather_service.errors import ValidationError


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return ``value`` as an aware UTC datetime. Naive values are UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_storage_time(value: Optional[datetime]) -> Optional[datetime]:
    """Naive UTC, the form timestamps are persisted in."""
    if value is None:
        return None
    return as_utc(value).replace(tzinfo=None)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def storage_now() -> datetime:
    return to_storage_time(utcnow())


def is_alert_active(alert, city_id: int, now: Optional[datetime] = None) -> bool:
    """In-memory form of :func:`active_alert_clause`."""
    now = as_utc(now) if now is not None else utcnow()

    if alert.city_id != city_id:
        return False
    if alert.is_active is not True:
        return False
    if as_utc(alert.start_time) > now:
        return False
    return alert.end_time is None or as_utc(alert.end_time) > now


def active_alert_clause(city_id: int, now: Optional[datetime] = None) -> ColumnElement:
    """SQL filter selecting the active alerts of ``city_id`` at ``now``."""
    from weather_service.storage.models import WeatherAlert

    now = to_storage_time(now) if now is not None else storage_now()
    return and_(
        WeatherAlert.city_id == city_id,
        WeatherAlert.is_active.is_(True),
        WeatherAlert.start_time <= now,
        or_(WeatherAlert.end_time.is_(None), WeatherAlert.end_time > now),
    )


def validate_alert_window(start_time: datetime, end_time: Optional[datetime]) -> None:
    """Reject windows that end before, or at, the moment they start."""
    if end_time is None:
        return
    if as_utc(start_time) >= as_utc(end_time):
        raise ValidationError(
            f"Alert start time {as_utc(start_time).isoformat()} must be before "
            f"end time {as_utc(end_time).isoformat()}"
        )
