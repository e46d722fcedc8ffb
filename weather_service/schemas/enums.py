"""Enumerated weather vocabularies."""
from enum import Enum


class WeatherCondition(str, Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    RAIN = "rain"
    HEAVY_RAIN = "heavy_rain"
    SNOW = "snow"
    HEAVY_SNOW = "heavy_snow"
    THUNDERSTORM = "thunderstorm"
    FOG = "fog"
    WIND = "wind"


class AlertSeverity(str, Enum):
    """Listed from least to most severe."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"


class AlertType(str, Enum):
    EXTREME_HEAT = "extreme_heat"
    EXTREME_COLD = "extreme_cold"
    HEAVY_RAIN = "heavy_rain"
    HEAVY_SNOW = "heavy_snow"
    STRONG_WINDS = "strong_winds"
    THUNDERSTORM = "thunderstorm"
    FOG = "fog"


class MapType(str, Enum):
    TEMPERATURE = "temperature"
    PRECIPITATION = "precipitation"
    WIND = "wind"
    PRESSURE = "pressure"
