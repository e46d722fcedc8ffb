"""Repository for weather observations."""
from typing import List, Optional

from weather_service.core.temporal import to_storage_time
from weather_service.errors import NotFoundError
from weather_service.schemas.weather import CreateWeatherDataRequest
from weather_service.storage.models import WeatherData
from weather_service.storage.repositories.base import BaseRepository
from weather_service.app_logging import get_logger

logger = get_logger(__name__)


class WeatherRepository(BaseRepository):
    """Current conditions and history per city."""

    def _for_city(self, city_id: int):
        return self.db.query(WeatherData).filter(WeatherData.city_id == city_id).order_by(
            WeatherData.recorded_at.desc(),
            WeatherData.id.desc(),
        )

    def get_latest(self, city_id: int) -> Optional[WeatherData]:
        """Most recently recorded observation, or None."""
        return self._for_city(city_id).first()

    def get_history(self, city_id: int) -> List[WeatherData]:
        """All observations, newest first."""
        return self._for_city(city_id).all()

    def create_weather_data(self, data: CreateWeatherDataRequest) -> WeatherData:
        missing = NotFoundError(f"City with ID {data.city_id} does not exist")
        if not self.city_exists(data.city_id):
            logger.warning(f"Rejected weather data for unknown city {data.city_id}")
            raise missing

        fields = data.model_dump()
        fields['recorded_at'] = to_storage_time(data.recorded_at)

        record = self._persist(WeatherData(**fields), on_integrity_error=missing)
        logger.info(f"Stored weather data {record.id} for city {record.city_id}")
        return record
