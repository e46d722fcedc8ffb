"""City model."""
from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from weather_service.core.numeric import FixedPoint, COORDINATE
from weather_service.core.temporal import storage_now
from weather_service.storage.base import Base


class City(Base):
    """A named point that weather data and alerts hang off."""

    __tablename__ = "cities"
    __table_args__ = (
        UniqueConstraint('name', 'country', name='uq_cities_name_country'),
        Index('idx_cities_name', 'name'),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    country = Column(String(120), nullable=False)
    latitude = Column(FixedPoint(*COORDINATE), nullable=False)
    longitude = Column(FixedPoint(*COORDINATE), nullable=False)
    created_at = Column(DateTime, nullable=False, default=storage_now)

    # Relationships
    weather_records = relationship(
        "WeatherData", back_populates="city", cascade="all, delete-orphan", passive_deletes=True
    )
    alerts = relationship(
        "WeatherAlert", back_populates="city", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<City {self.id} {self.name}, {self.country}>"
