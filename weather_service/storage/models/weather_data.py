"""Weather observation model."""
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from weather_service.core.numeric import FixedPoint, TEMPERATURE, PRESSURE, WIND_SPEED, VISIBILITY
from weather_service.core.temporal import storage_now
from weather_service.schemas.enums import WeatherCondition
from weather_service.storage.base import Base
from weather_service.storage.models._types import enum_column_type


class WeatherData(Base):
    """One timestamped observation for a city."""

    __tablename__ = "weather_data"
    __table_args__ = (
        Index('idx_weather_data_city_recorded', 'city_id', 'recorded_at'),
    )

    id = Column(Integer, primary_key=True, index=True)
    city_id = Column(Integer, ForeignKey("cities.id", ondelete="CASCADE"), nullable=False)

    temperature = Column(FixedPoint(*TEMPERATURE), nullable=False)  # Celsius
    humidity = Column(Integer, nullable=False)  # 0-100%
    pressure = Column(FixedPoint(*PRESSURE), nullable=False)  # hPa
    wind_speed = Column(FixedPoint(*WIND_SPEED), nullable=False)  # km/h
    wind_direction = Column(Integer, nullable=False)  # 0-360 degrees
    condition = Column(enum_column_type(WeatherCondition, "weather_condition"), nullable=False)
    visibility = Column(FixedPoint(*VISIBILITY), nullable=False)  # km

    recorded_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=storage_now)

    # Relationships
    city = relationship("City", back_populates="weather_records")

    def __repr__(self):
        return f"<WeatherData {self.id} city={self.city_id} {self.recorded_at}>"
