"""Repository for weather map references."""
from typing import List, Optional

from weather_service.core.temporal import to_storage_time
from weather_service.errors import StoreError
from weather_service.schemas.enums import MapType
from weather_service.schemas.weather import CreateWeatherMapRequest
from weather_service.storage.models import WeatherMap
from weather_service.storage.repositories.base import BaseRepository
from weather_service.app_logging import get_logger

logger = get_logger(__name__)


class MapRepository(BaseRepository):

    def list_maps(self, region: Optional[str] = None, map_type: Optional[MapType] = None) -> List[WeatherMap]:
        """Maps matching every given filter, newest first."""
        query = self.db.query(WeatherMap)

        if region:
            query = query.filter(WeatherMap.region == region)

        if map_type:
            query = query.filter(WeatherMap.map_type == map_type)

        return query.order_by(WeatherMap.timestamp.desc(), WeatherMap.id.desc()).all()

    def create_map(self, data: CreateWeatherMapRequest) -> WeatherMap:
        weather_map = WeatherMap(
            region=data.region,
            map_type=data.map_type,
            data_url=data.data_url,
            timestamp=to_storage_time(data.timestamp),
        )
        weather_map = self._persist(
            weather_map,
            on_integrity_error=StoreError(f"Could not store {data.map_type.value} map for {data.region}"),
        )
        logger.info(f"Registered {weather_map.map_type.value} map {weather_map.id} for {weather_map.region}")
        return weather_map
