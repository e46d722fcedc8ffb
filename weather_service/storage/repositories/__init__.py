"""Repositories over the relational store."""
from weather_service.storage.repositories.city_repo import CityRepository
from weather_service.storage.repositories.weather_repo import WeatherRepository
from weather_service.storage.repositories.alert_repo import AlertRepository
from weather_service.storage.repositories.map_repo import MapRepository

__all__ = ['CityRepository', 'WeatherRepository', 'AlertRepository', 'MapRepository']
