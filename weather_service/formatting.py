"""Display wording attached to weather and alert responses."""
from datetime import datetime
from typing import Optional

from weather_service.core.temporal import as_utc, utcnow
from weather_service.schemas.enums import AlertSeverity, AlertType, WeatherCondition

CONDITION_EMOJI = {
    WeatherCondition.CLEAR: "☀️",
    WeatherCondition.PARTLY_CLOUDY: "⛅",
    WeatherCondition.CLOUDY: "☁️",
    WeatherCondition.RAIN: "🌧️",
    WeatherCondition.HEAVY_RAIN: "⛈️",
    WeatherCondition.SNOW: "❄️",
    WeatherCondition.HEAVY_SNOW: "🌨️",
    WeatherCondition.THUNDERSTORM: "⚡",
    WeatherCondition.FOG: "🌫️",
    WeatherCondition.WIND: "💨",
}

ALERT_EMOJI = {
    AlertType.EXTREME_HEAT: "🔥",
    AlertType.EXTREME_COLD: "🧊",
    AlertType.HEAVY_RAIN: "🌧️",
    AlertType.HEAVY_SNOW: "❄️",
    AlertType.STRONG_WINDS: "💨",
    AlertType.THUNDERSTORM: "⚡",
    AlertType.FOG: "🌫️",
}

SEVERITY_RANK = {
    AlertSeverity.LOW: 0,
    AlertSeverity.MODERATE: 1,
    AlertSeverity.HIGH: 2,
    AlertSeverity.EXTREME: 3,
}

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def condition_emoji(condition: WeatherCondition) -> str:
    return CONDITION_EMOJI[WeatherCondition(condition)]


def alert_emoji(alert_type: AlertType) -> str:
    return ALERT_EMOJI[AlertType(alert_type)]


def condition_label(condition: WeatherCondition) -> str:
    """``partly_cloudy`` -> ``Partly cloudy``."""
    return WeatherCondition(condition).value.replace("_", " ").capitalize()


def wind_direction(degrees: int) -> str:
    """16-point compass name for a bearing in degrees."""
    return COMPASS_POINTS[round(degrees / 22.5) % 16]


def temperature_description(temperature: float) -> str:
    if temperature < 0:
        return "Freezing"
    if temperature < 10:
        return "Cold"
    if temperature < 20:
        return "Cool"
    if temperature < 25:
        return "Mild"
    if temperature < 30:
        return "Warm"
    return "Hot"


def humidity_level(humidity: int) -> str:
    if humidity < 30:
        return "Dry"
    if humidity < 60:
        return "Comfortable"
    if humidity < 80:
        return "Humid"
    return "Very Humid"


def visibility_description(visibility: float) -> str:
    if visibility < 1:
        return "Very Poor"
    if visibility < 5:
        return "Poor"
    if visibility < 10:
        return "Moderate"
    return "Excellent"


def time_remaining(end_time: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Human readable time left before an alert expires."""
    if end_time is None:
        return "Ongoing"

    now = as_utc(now) if now is not None else utcnow()
    seconds = (as_utc(end_time) - now).total_seconds()
    if seconds <= 0:
        return "Expired"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)

    if hours > 24:
        days = hours // 24
        return f"{days} day{'s' if days > 1 else ''} remaining"
    if hours > 0:
        return f"{hours}h {minutes}m remaining"
    return f"{minutes}m remaining"
