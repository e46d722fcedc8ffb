"""Weather map model."""
from sqlalchemy import Column, String, Integer, DateTime, Index, Text

from weather_service.core.temporal import storage_now
from weather_service.schemas.enums import MapType
from weather_service.storage.base import Base
from weather_service.storage.models._types import enum_column_type


class WeatherMap(Base):
    """Externally hosted map imagery for a region."""

    __tablename__ = "weather_maps"
    __table_args__ = (
        Index('idx_weather_maps_region_type', 'region', 'map_type'),
        Index('idx_weather_maps_timestamp', 'timestamp'),
    )

    id = Column(Integer, primary_key=True, index=True)
    region = Column(String(120), nullable=False)
    map_type = Column(enum_column_type(MapType, "map_type"), nullable=False)
    data_url = Column(Text, nullable=False)
    timestamp = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=storage_now)
