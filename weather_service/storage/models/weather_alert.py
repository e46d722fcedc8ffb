"""Weather alert model."""
from sqlalchemy import Column, String, Integer, DateTime, Boolean, ForeignKey, Index, Text
from sqlalchemy.orm import relationship

from weather_service.core.temporal import storage_now
from weather_service.schemas.enums import AlertSeverity, AlertType
from weather_service.storage.base import Base
from weather_service.storage.models._types import enum_column_type


class WeatherAlert(Base):
    """Time-windowed warning for a city."""

    __tablename__ = "weather_alerts"
    __table_args__ = (
        Index('idx_weather_alerts_city_window', 'city_id', 'start_time', 'end_time'),
    )

    id = Column(Integer, primary_key=True, index=True)
    city_id = Column(Integer, ForeignKey("cities.id", ondelete="CASCADE"), nullable=False)

    type = Column(enum_column_type(AlertType, "alert_type"), nullable=False)
    severity = Column(enum_column_type(AlertSeverity, "alert_severity"), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)

    # Window: start inclusive, end exclusive, NULL end never expires
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, nullable=False, default=storage_now)

    # Relationships
    city = relationship("City", back_populates="alerts")

    def __repr__(self):
        return f"<WeatherAlert {self.id} {self.type} city={self.city_id}>"
