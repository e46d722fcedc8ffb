"""Database models."""
from weather_service.storage.models.city import City
from weather_service.storage.models.weather_data import WeatherData
from weather_service.storage.models.weather_alert import WeatherAlert
from weather_service.storage.models.weather_map import WeatherMap

__all__ = ['City', 'WeatherData', 'WeatherAlert', 'WeatherMap']
