"""Repository for cities."""
from typing import List, Optional

from weather_service.errors import ConflictError
from weather_service.schemas.weather import CreateCityRequest
from weather_service.storage.models import City
from weather_service.storage.repositories.base import BaseRepository
from weather_service.app_logging import get_logger

logger = get_logger(__name__)


class CityRepository(BaseRepository):
    """Lookup and registration of cities."""

    def list_cities(self) -> List[City]:
        return self.db.query(City).order_by(City.name.asc(), City.id.asc()).all()

    def search_cities(self, query: str) -> List[City]:
        """Case-insensitive substring match on the city name."""
        return (
            self.db.query(City)
            .filter(City.name.icontains(query, autoescape=True))
            .order_by(City.name.asc(), City.id.asc())
            .all()
        )

    def get_by_name(self, name: str, country: str) -> Optional[City]:
        return self.db.query(City).filter(City.name == name, City.country == country).first()

    def create_city(self, data: CreateCityRequest) -> City:
        # The unique constraint is what actually guards concurrent inserts
        conflict = ConflictError(f"City {data.name}, {data.country} already exists")
        if self.get_by_name(data.name, data.country):
            logger.warning(f"Rejected duplicate city {data.name}, {data.country}")
            raise conflict

        city = self._persist(City(**data.model_dump()), on_integrity_error=conflict)
        logger.info(f"Created city {city.id} ({city.name}, {city.country})")
        return city
