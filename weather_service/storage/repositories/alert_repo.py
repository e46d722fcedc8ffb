"""Repository for weather alerts."""
from datetime import datetime
from typing import List, Optional

from weather_service.core.temporal import active_alert_clause, to_storage_time, validate_alert_window
from weather_service.errors import NotFoundError
from weather_service.schemas.weather import CreateWeatherAlertRequest
from weather_service.storage.models import WeatherAlert
from weather_service.storage.repositories.base import BaseRepository
from weather_service.app_logging import get_logger

logger = get_logger(__name__)


class AlertRepository(BaseRepository):
    """Alert issuance and active-alert lookup."""

    def get_active_alerts(self, city_id: int, now: Optional[datetime] = None) -> List[WeatherAlert]:
        """Alerts of ``city_id`` in force at ``now`` (defaults to the current instant).

        Unknown cities simply have no alerts.
        """
        return (
            self.db.query(WeatherAlert)
            .filter(active_alert_clause(city_id, now))
            .order_by(WeatherAlert.id.asc())
            .all()
        )

    def create_alert(self, data: CreateWeatherAlertRequest) -> WeatherAlert:
        missing = NotFoundError(f"City with ID {data.city_id} not found")
        if not self.city_exists(data.city_id):
            logger.warning(f"Rejected alert for unknown city {data.city_id}")
            raise missing

        validate_alert_window(data.start_time, data.end_time)

        alert = WeatherAlert(
            city_id=data.city_id,
            type=data.type,
            severity=data.severity,
            title=data.title,
            description=data.description,
            start_time=to_storage_time(data.start_time),
            end_time=to_storage_time(data.end_time),
            is_active=True,
        )
        alert = self._persist(alert, on_integrity_error=missing)
        logger.info(f"Issued {alert.severity.value} {alert.type.value} alert {alert.id} for city {alert.city_id}")
        return alert
